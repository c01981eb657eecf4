"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from recipe_mcp.cli import app

from conftest import CODE_EXPLORATION

runner = CliRunner()


@pytest.fixture
def invoke(catalog_root):
    """Run the CLI against the sample collection."""

    def _invoke(*args: str):
        return runner.invoke(app, ["--root", str(catalog_root), *args])

    return _invoke


class TestBrowsing:
    """Test catalog browsing commands."""

    def test_list(self, invoke):
        """list prints the dispatcher listing."""
        result = invoke("list", "--category", "appetizers")

        assert result.exit_code == 0
        assert "Found 3 recipe(s):" in result.output
        assert "**appetizers/code-exploration**: Code Exploration" in result.output

    def test_show(self, invoke):
        """show prints the raw recipe."""
        result = invoke("show", "code-exploration")

        assert result.exit_code == 0
        assert CODE_EXPLORATION.splitlines()[0] in result.output
        assert "Use retrieval-augmented generation here" in result.output

    def test_show_missing(self, invoke):
        """Missing recipes exit with status 1."""
        result = invoke("show", "does-not-exist")

        assert result.exit_code == 1
        assert "does-not-exist" in result.output

    def test_search(self, invoke):
        """search prints hits with previews."""
        result = invoke("search", "retrieval")

        assert result.exit_code == 0
        assert "Found 1 matching recipe(s):" in result.output
        assert "Use retrieval-augmented generation here" in result.output

    def test_docs(self, invoke):
        """docs lists documentation pages."""
        result = invoke("docs")

        assert result.exit_code == 0
        assert "**references/glossary**: glossary" in result.output

    def test_doc(self, invoke):
        """doc prints one documentation page."""
        result = invoke("doc", "context-design")

        assert result.exit_code == 0
        assert "# Context Design" in result.output

    def test_resources(self, invoke):
        """resources counts every addressable resource."""
        result = invoke("resources")

        assert result.exit_code == 0
        assert "9 resource(s)" in result.output


class TestAdmin:
    """Test configuration and validation commands."""

    def test_validate_warns_about_missing_categories(self, invoke):
        """Absent category folders are warnings, not failures."""
        result = invoke("validate")

        assert result.exit_code == 0
        assert "Recipe category directory missing: desserts" in result.output
        assert "docs/examples" in result.output

    def test_validate_missing_root(self, tmp_path):
        """A missing catalog root fails validation."""
        result = runner.invoke(app, ["--root", str(tmp_path / "nowhere"), "validate"])

        assert result.exit_code == 1
        assert "Catalog root missing" in result.output

    def test_config(self, invoke):
        """config shows the effective settings."""
        result = invoke("config")

        assert result.exit_code == 0
        assert "Preview Length" in result.output
