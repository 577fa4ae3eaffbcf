"""Tests for HTML document rendering."""

import io
import re

import pytest
from govanity.core.render import render_import_tag, render_redirect
from govanity.core.types import ImportTag


class FailingWriter(io.StringIO):
    """Text sink whose writes always fail."""

    def write(self, s: str) -> int:
        raise OSError("disk full")


def _render_tag(tag: ImportTag) -> str:
    out = io.StringIO()
    render_import_tag(tag, out)
    return out.getvalue()


class TestRenderImportTag:
    """Tests for render_import_tag()."""

    def test__tag__renders_go_import_meta(self) -> None:
        """Render the space-joined triple into the content attribute."""
        html = _render_tag(
            ImportTag(
                import_path="acln.ro/foo",
                vcs="git",
                vcs_repo="https://github.com/acln0/foo",
            ),
        )

        assert (
            '<meta name="go-import" '
            'content="acln.ro/foo git https://github.com/acln0/foo">'
        ) in html
        assert html.startswith("<!DOCTYPE html>")

    def test__bare_values__render_unchanged(self) -> None:
        """Render plain values verbatim."""
        html = _render_tag(ImportTag(import_path="H/foo", vcs="git", vcs_repo="R/foo"))

        assert '<meta name="go-import" content="H/foo git R/foo">' in html

    def test__special_characters__are_escaped(self) -> None:
        """Escape markup in configured values."""
        html = _render_tag(
            ImportTag(
                import_path='acln.ro/"><script>',
                vcs="git",
                vcs_repo="https://example.com/?a=1&b=2",
            ),
        )

        assert "<script>" not in html
        assert "&quot;&gt;&lt;script&gt;" in html
        assert "a=1&amp;b=2" in html

    def test__same_tag_twice__renders_identical_output(self) -> None:
        """Rendering keeps no state between calls."""
        tag = ImportTag(import_path="H/foo", vcs="git", vcs_repo="R/foo")

        assert _render_tag(tag) == _render_tag(tag)

    @pytest.mark.parametrize(
        "tag",
        [
            ImportTag(import_path="H/foo", vcs="git", vcs_repo="R/foo"),
            ImportTag(
                import_path="acln.ro/foo",
                vcs="hg",
                vcs_repo="https://hg.example.com/foo",
            ),
        ],
    )
    def test__content_attribute__splits_back_into_tag(self, tag: ImportTag) -> None:
        """Recover the tag fields by splitting the content on whitespace."""
        html = _render_tag(tag)

        found = re.search(r'<meta name="go-import" content="([^"]*)">', html)
        assert found is not None
        import_path, vcs, vcs_repo = found.group(1).split()
        assert ImportTag(import_path=import_path, vcs=vcs, vcs_repo=vcs_repo) == tag

    def test__failing_sink__propagates_error(self) -> None:
        """Propagate the sink's write error unchanged."""
        tag = ImportTag(import_path="H/foo", vcs="git", vcs_repo="R/foo")

        with pytest.raises(OSError, match="disk full"):
            render_import_tag(tag, FailingWriter())


class TestRenderRedirect:
    """Tests for render_redirect()."""

    def test__url__renders_documentation_link(self) -> None:
        """Link to the target URL with readable anchor text."""
        out = io.StringIO()

        render_redirect("https://pkg.go.dev/acln.ro/foo", out)

        assert (
            '<a href="https://pkg.go.dev/acln.ro/foo">'
            "Redirecting to documentation at https://pkg.go.dev/acln.ro/foo</a>"
        ) in out.getvalue()

    def test__special_characters__are_escaped(self) -> None:
        """Escape quotes and ampersands in the URL."""
        out = io.StringIO()

        render_redirect('https://example.com/?a="1"&b=2', out)

        assert 'href="https://example.com/?a=&quot;1&quot;&amp;b=2"' in out.getvalue()

    def test__failing_sink__propagates_error(self) -> None:
        """Propagate the sink's write error unchanged."""
        with pytest.raises(OSError, match="disk full"):
            render_redirect("https://pkg.go.dev/acln.ro/foo", FailingWriter())
