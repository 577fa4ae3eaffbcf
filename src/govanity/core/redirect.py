"""Documentation redirects for browsers.

A request to ``example.com/foo/bar`` without ``?go-get=1`` is sent to
``https://<docs host>/example.com/foo/bar``.
"""

import io
import logging

from aiohttp import web
from yarl import URL

from govanity.core.paths import join_path
from govanity.core.render import render_redirect

logger = logging.getLogger(__name__)

DEFAULT_DOCS_HOST = "pkg.go.dev"


def docs_url(host: str, path: str, docs_host: str = DEFAULT_DOCS_HOST) -> URL:
    """Return the documentation URL for a request to host and path.

    The vanity host becomes the first path segment on the documentation site.
    """
    return URL.build(
        scheme="https",
        authority=docs_host,
        path="/" + join_path(host, path).lstrip("/"),
    )


def redirect_to_docs(
    host: str,
    path: str,
    docs_host: str = DEFAULT_DOCS_HOST,
) -> web.Response:
    """Build a 302 response redirecting to the documentation page.

    The confirmation document is rendered before any header or status is
    set, so a failed render yields a plain 500 response and nothing else.

    Args:
        host: Request host, as sent by the client
        path: Request URL path
        docs_host: Documentation site host

    Returns:
        302 response on success, 500 response if rendering failed
    """
    target = str(docs_url(host, path, docs_host))
    body = io.StringIO()
    try:
        render_redirect(target, body)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to render redirect to {target}: {e}")
        return web.Response(
            status=500,
            text=f"internal server error: {e}",
        )

    return web.Response(
        status=302,
        headers={"Location": target},
        content_type="text/html",
        text=body.getvalue(),
    )


def is_go_get(request: web.BaseRequest) -> bool:
    """Return whether request comes from the go tool (``?go-get=1``)."""
    return request.query.get("go-get") == "1"
