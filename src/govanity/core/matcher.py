"""Import path matching.

Two strategies resolve a request path against an ImportPath:

- exact: the path is the mapping root or lies anywhere below it, and the
  tag always advertises the root itself.
- wildcard: the path lies strictly below the mapping root, and the first
  child segment selects a repository of the same name below ``to``.

Both strategies clean the path before comparing, so ``"acln.ro/foo/"`` and
``"acln.ro//foo"`` match like ``"acln.ro/foo"``.
"""

from collections.abc import Iterable

from govanity.core.paths import join_location, join_path
from govanity.core.types import ImportPath, ImportTag
from govanity.errors import NoMatchError, NoMatchReason


def tag_for(mapping: ImportPath, path: str) -> ImportTag:
    """Return the import tag for ``path`` under an exact mapping.

    For example, given ``mapping.from_path == "acln.ro/foo"`` and a request
    for ``"acln.ro/foo/bar"``, the tag's import path is ``"acln.ro/foo"``.

    Raises:
        NoMatchError: If path is neither ``from_path`` nor below it
    """
    path = join_path(path)
    if path != mapping.from_path and not path.startswith(mapping.from_path + "/"):
        raise NoMatchError(path, mapping.from_path, NoMatchReason.ROOT_MISMATCH)
    return ImportTag(
        import_path=mapping.from_path,
        vcs=mapping.vcs,
        vcs_repo=mapping.to,
    )


def wildcard_tag_for(mapping: ImportPath, path: str) -> ImportTag:
    """Return the wildcard import tag for ``path``.

    For example, given ``mapping.from_path == "acln.ro"`` and a request for
    ``"acln.ro/foo/bar"``, the tag's import path is ``"acln.ro/foo"``.
    Segments past the first child never take part in the mapping.

    Raises:
        NoMatchError: If path is not a strict sub-path of ``from_path``
    """
    path = join_path(path)
    prefix = mapping.from_path + "/"
    if not path.startswith(prefix):
        reason = (
            NoMatchReason.NO_CHILD_SEGMENT
            if path == mapping.from_path
            else NoMatchReason.ROOT_MISMATCH
        )
        raise NoMatchError(path, mapping.from_path, reason)

    segment = path[len(prefix) :].split("/", 1)[0]
    return ImportTag(
        import_path=join_path(mapping.from_path, segment),
        vcs=mapping.vcs,
        vcs_repo=join_location(mapping.to, segment),
    )


def match(mapping: ImportPath, path: str) -> ImportTag:
    """Match ``path`` with the strategy the mapping is configured for."""
    if mapping.wildcard:
        return wildcard_tag_for(mapping, path)
    return tag_for(mapping, path)


def resolve(mappings: Iterable[ImportPath], path: str) -> ImportTag:
    """Return the tag from the first mapping that covers ``path``.

    Mappings are tried in order. There is no fallback mapping.

    Raises:
        NoMatchError: If no mapping covers path
    """
    for mapping in mappings:
        try:
            return match(mapping, path)
        except NoMatchError:
            continue
    raise NoMatchError(path, None, NoMatchReason.NO_MAPPING)
