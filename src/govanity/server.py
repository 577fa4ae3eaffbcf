"""aiohttp server for govanity.

Application factory and the single catch-all route answering both the go
tool and browsers.
"""

import io
import logging

from aiohttp import web

from govanity.app_keys import docs_host_key, imports_key
from govanity.config import Config
from govanity.core.matcher import resolve
from govanity.core.paths import effective_path
from govanity.core.redirect import is_go_get, redirect_to_docs
from govanity.core.render import render_import_tag
from govanity.errors import NoMatchError

logger = logging.getLogger(__name__)


async def handle_import(request: web.Request) -> web.Response:
    """Serve the go-import meta tag, or redirect browsers to the docs.

    Requests carrying ``?go-get=1`` get the meta tag document for the first
    configured mapping that covers the requested path, or 404 when none
    does. Every other request is redirected to the documentation site.
    """
    if not is_go_get(request):
        return redirect_to_docs(
            request.host,
            request.path,
            request.app[docs_host_key],
        )

    path = effective_path(request.host, request.path)
    try:
        tag = resolve(request.app[imports_key], path)
    except NoMatchError as e:
        logger.info(f"No import mapping for {path}")
        raise web.HTTPNotFound(text=f"{e}\n") from e

    logger.debug(f"Resolved {path} to {tag.content}")
    body = io.StringIO()
    render_import_tag(tag, body)
    return web.Response(content_type="text/html", text=body.getvalue())


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[imports_key] = config.imports
    app[docs_host_key] = config.redirect.docs_host

    app.router.add_get("/{path:.*}", handle_import)

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
