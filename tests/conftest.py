"""Shared test fixtures."""

import pytest
from govanity.config import Config, RedirectConfig, ServerConfig
from govanity.core.types import ImportPath


@pytest.fixture
def exact_import() -> ImportPath:
    """Exact mapping for a single repository."""
    return ImportPath(
        vcs="git",
        from_path="acln.ro/foo",
        to="https://github.com/acln0/foo",
    )


@pytest.fixture
def wildcard_import() -> ImportPath:
    """Wildcard mapping delegating every first-level path under the host."""
    return ImportPath(
        vcs="git",
        from_path="acln.ro",
        to="https://github.com/acln0",
        wildcard=True,
    )


@pytest.fixture
def test_config(wildcard_import: ImportPath) -> Config:
    """Create a test configuration with an exact and a wildcard mapping.

    The exact mapping is an hg repository listed first, so it shadows the
    git wildcard for ``acln.ro/foo``.
    """
    return Config(
        server=ServerConfig(),
        redirect=RedirectConfig(docs_host="docs.example.com"),
        imports=(
            ImportPath(
                vcs="hg",
                from_path="acln.ro/foo",
                to="https://hg.example.com/foo",
            ),
            wildcard_import,
        ),
    )
