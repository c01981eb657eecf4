"""Pytest configuration and shared fixtures for AI Recipes MCP Server tests."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from recipe_mcp.catalog import Catalog
from recipe_mcp.config import Settings
from recipe_mcp.dispatcher import QueryDispatcher
from recipe_mcp.server import RecipeMCPServer

CODE_EXPLORATION = (
    "# Code Exploration\n"
    "\n"
    "Get oriented in an unfamiliar codebase.\n"
    "   Use retrieval-augmented generation here   \n"
    "## Steps\n"
)


def write_file(root: Path, relative: str, content: str) -> Path:
    """Write ``content`` to ``root/relative``, creating parent folders."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    """Create a small recipe collection on disk.

    Layout:
        appetizers/  code-exploration, quick-summary (no heading), shared
        mains/       a-track/step, b-track/step, system-design/overview, notes.txt
        sides/       shared
        desserts/    (absent)
        ingredients/ (empty)
        docs/prompt-engineering/   fundamentals, nested/deep
        docs/context-engineering/  context-design
        docs/references/           glossary (no heading)
    """
    root = tmp_path / "recipes"

    write_file(root, "appetizers/code-exploration.md", CODE_EXPLORATION)
    write_file(root, "appetizers/quick-summary.md", "Summarize the text below in three bullets.\n")
    write_file(root, "appetizers/shared.md", "# Shared Appetizer\n\nFrom appetizers.\n")

    write_file(root, "mains/a-track/step.md", "# Step A\n\nFirst track.\n")
    write_file(root, "mains/b-track/step.md", "# Step B\n\nSecond track.\n")
    write_file(root, "mains/system-design/overview.md", "# System Design Overview\n\nDesign a SYSTEM end to end.\n")
    write_file(root, "mains/notes.txt", "# Not a recipe\n")

    write_file(root, "sides/shared.md", "# Shared Side\n\nFrom sides.\n")

    (root / "ingredients").mkdir()

    write_file(root, "docs/prompt-engineering/fundamentals.md", "# Prompt Fundamentals\n\nBe specific.\n")
    write_file(root, "docs/prompt-engineering/nested/deep.md", "# Deep\n")
    write_file(root, "docs/context-engineering/context-design.md", "# Context Design\n\nKeep context lean.\n")
    write_file(root, "docs/references/glossary.md", "Terms and definitions.\n")

    return root


@pytest.fixture
def test_settings(catalog_root: Path) -> Settings:
    """Create test configuration settings."""
    return Settings(
        debug=True,
        recipes_root=catalog_root,
        preview_length=100,
        log_level="DEBUG",
    )


@pytest.fixture
def catalog(test_settings: Settings) -> Catalog:
    """Catalog over the sample collection."""
    return Catalog.from_settings(test_settings)


@pytest.fixture
def dispatcher(catalog: Catalog) -> QueryDispatcher:
    """Dispatcher over the sample collection."""
    return QueryDispatcher(catalog)


@pytest.fixture
def recipe_server(test_settings: Settings) -> Generator[RecipeMCPServer, None, None]:
    """Create recipe MCP server instance for testing."""
    server = RecipeMCPServer(test_settings)
    yield server


@pytest.fixture
def deny_read(monkeypatch: pytest.MonkeyPatch) -> Callable[[Path], Path]:
    """Make reads of chosen files fail with PermissionError."""
    denied: set[Path] = set()
    read_text = Path.read_text

    def guarded(self: Path, *args, **kwargs) -> str:
        if self in denied:
            raise PermissionError(13, "Permission denied", str(self))
        return read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", guarded)

    def deny(path: Path) -> Path:
        denied.add(path)
        return path

    return deny
