"""AI Recipes MCP Server - Prompt recipes over the Model Context Protocol.

This package provides a FastMCP-based server that exposes a curated
collection of markdown prompt recipes and learning documentation to AI
agents and Large Language Models.

Key Features:
- FastMCP framework for the MCP server (stdio, HTTP and SSE transports)
- Recipe listing by category, keyword search with line previews
- Direct retrieval by name across categories
- recipe:// and docs:// addressable resources
- No caching: every query reflects the files on disk
"""

__version__ = "0.1.0"
__author__ = "AI Recipes Contributors"
__license__ = "MIT"

# Public API exports
from .catalog import Catalog
from .config import Settings
from .dispatcher import QueryDispatcher
from .models import Category, DocEntry, RecipeEntry, ResourceInfo, SearchHit, Taxonomy, ToolResult
from .search import search_recipes
from .server import RecipeMCPServer

__all__ = [
    "RecipeMCPServer",
    "Catalog",
    "QueryDispatcher",
    "search_recipes",
    "Category",
    "Taxonomy",
    "RecipeEntry",
    "DocEntry",
    "SearchHit",
    "ResourceInfo",
    "ToolResult",
    "Settings",
    "__version__",
]
