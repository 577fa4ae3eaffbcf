"""HTML documents served to the go tool and to browsers.

Both templates are compiled once at import and shared read-only between
requests. A malformed template fails the import, never a request.
"""

import html
from string import Template
from typing import TextIO

from govanity.core.types import ImportTag


def _compile(source: str) -> Template:
    template = Template(source)
    if not template.is_valid():
        raise ValueError(f"invalid template: {source!r}")
    return template


IMPORT_TAG_TEMPLATE = _compile("""\
<!DOCTYPE html>
<html>
<head>
	<meta name="go-import" content="$import_path $vcs $vcs_repo">
</head>
</html>
""")

REDIRECT_TEMPLATE = _compile("""\
<!DOCTYPE html>
<html>
<head>
</head>
<body>
	<a href="$url">Redirecting to documentation at $url</a>
</body>
</html>
""")


def _escape(value: str) -> str:
    return html.escape(value, quote=True)


def render_import_tag(tag: ImportTag, out: TextIO) -> None:
    """Write an HTML document containing the go-import meta tag for tag.

    Args:
        tag: Resolved import tag
        out: Text sink; its write errors propagate unchanged
    """
    out.write(
        IMPORT_TAG_TEMPLATE.substitute(
            import_path=_escape(tag.import_path),
            vcs=_escape(tag.vcs),
            vcs_repo=_escape(tag.vcs_repo),
        ),
    )


def render_redirect(url: str, out: TextIO) -> None:
    """Write an HTML document linking to the documentation at url.

    Args:
        url: Absolute target URL
        out: Text sink; its write errors propagate unchanged
    """
    out.write(REDIRECT_TEMPLATE.substitute(url=_escape(url)))
