"""Vanity Go import path server.

Resolves requests on a custom domain to go-import meta tags and redirects
browsers to the package documentation site.
"""

from govanity.core.matcher import resolve, tag_for, wildcard_tag_for
from govanity.core.paths import effective_path, join_path
from govanity.core.redirect import docs_url, is_go_get, redirect_to_docs
from govanity.core.render import render_import_tag, render_redirect
from govanity.core.types import ImportPath, ImportTag
from govanity.errors import GovanityError, NoMatchError, NoMatchReason

__all__ = [
    "GovanityError",
    "ImportPath",
    "ImportTag",
    "NoMatchError",
    "NoMatchReason",
    "docs_url",
    "effective_path",
    "is_go_get",
    "join_path",
    "redirect_to_docs",
    "render_import_tag",
    "render_redirect",
    "resolve",
    "tag_for",
    "wildcard_tag_for",
]
