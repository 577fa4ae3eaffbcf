"""Slash-separated import path helpers.

Import paths follow Go's ``path`` package semantics rather than the host
filesystem's, so these helpers only ever deal in forward slashes.
"""

import posixpath


def clean_path(path: str) -> str:
    """Return the shortest lexically equivalent path.

    Duplicate slashes are collapsed, ``.`` and ``..`` elements resolved and
    the trailing slash dropped. An empty path cleans to ``"."``.
    """
    if not path:
        return "."
    cleaned = posixpath.normpath(path)
    # POSIX keeps exactly two leading slashes, Go does not
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def join_path(*elements: str) -> str:
    """Join path elements with slashes and clean the result.

    Empty elements are ignored; joining nothing but empty elements
    returns an empty string.
    """
    parts = [element for element in elements if element]
    if not parts:
        return ""
    return clean_path("/".join(parts))


def effective_path(host: str, url_path: str) -> str:
    """Import path a request asks for: its host joined with its URL path.

    >>> effective_path("acln.ro", "/foo/bar/")
    'acln.ro/foo/bar'
    """
    return join_path(host, url_path)


def join_location(location: str, *elements: str) -> str:
    """Join path elements onto a repository location.

    Like ``join_path``, but a ``scheme://`` prefix is kept intact instead of
    having its double slash collapsed.

    >>> join_location("https://github.com/acln0", "foo")
    'https://github.com/acln0/foo'
    """
    scheme, sep, rest = location.partition("://")
    if not sep:
        return join_path(location, *elements)
    return f"{scheme}://{join_path(rest, *elements)}"
