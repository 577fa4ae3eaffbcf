"""Core type definitions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportPath:
    """Mapping from an advertised import path prefix to a repository.

    ``from_path`` and ``to`` are corresponding roots. With ``wildcard``
    set, the first path segment below ``from_path`` names a repository
    below ``to``.
    """

    vcs: str
    from_path: str
    to: str
    wildcard: bool = False


@dataclass(frozen=True)
class ImportTag:
    """A go-import meta tag understood by the go tool."""

    import_path: str
    vcs: str
    vcs_repo: str

    @property
    def content(self) -> str:
        """Value of the meta tag's content attribute, before escaping."""
        return f"{self.import_path} {self.vcs} {self.vcs_repo}"
