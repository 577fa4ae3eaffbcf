"""Application keys for type-safe app configuration access."""

from aiohttp import web

from govanity.core.types import ImportPath

imports_key = web.AppKey("imports", tuple[ImportPath, ...])
docs_host_key = web.AppKey("docs_host", str)
