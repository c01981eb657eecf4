"""Query dispatcher for the AI Recipes MCP Server.

Routes a named operation with a loosely-typed argument bag to the catalog or
the search engine and normalizes every outcome, success or failure, into a
``ToolResult`` so the protocol layer never special-cases failure shapes.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

from .catalog import Catalog
from .exceptions import InvalidArgumentsError, RecipeServerError, UnknownOperationError
from .models import DocEntry, RecipeEntry, SearchHit, ToolResult
from .search import search_recipes
from .utils.content import DEFAULT_PREVIEW_LENGTH

logger = logging.getLogger(__name__)


class Operation(BaseModel):
    """Description of one dispatchable operation."""

    name: str = Field(..., description="Operation name")
    description: str = Field(..., description="What the operation does")
    required: list[str] = Field(default_factory=list, description="Required argument names")


OPERATIONS = [
    Operation(
        name="list_recipes",
        description="List all available prompt recipes, optionally filtered by category",
    ),
    Operation(
        name="get_recipe",
        description="Get the full content of a specific recipe by name",
        required=["name"],
    ),
    Operation(
        name="search_recipes",
        description="Search recipes by keyword in title or content",
        required=["keyword"],
    ),
    Operation(
        name="get_documentation",
        description="Get learning documentation on prompt or context engineering",
        required=["topic"],
    ),
    Operation(
        name="list_documentation",
        description="List all available learning documentation",
    ),
]

OPERATIONS_BY_NAME = {operation.name: operation for operation in OPERATIONS}


def format_recipe_list(entries: list[RecipeEntry]) -> str:
    output = "\n".join(f"**{entry.key}**: {entry.title}" for entry in entries)
    return f"Found {len(entries)} recipe(s):\n\n{output}"


def format_search_results(hits: list[SearchHit]) -> str:
    output = "\n\n".join(f"**{hit.key}**: {hit.title}\n  → {hit.preview}" for hit in hits)
    return f"Found {len(hits)} matching recipe(s):\n\n{output}"


def format_doc_list(entries: list[DocEntry]) -> str:
    output = "\n".join(f"**{entry.key}**: {entry.title}" for entry in entries)
    return f"Available Documentation:\n\n{output}"


def _check_required(operation: Operation, arguments: dict[str, Any]) -> None:
    """Required arguments must be present and be strings; empty strings are allowed."""
    for key in operation.required:
        value = arguments.get(key)
        if value is None:
            raise InvalidArgumentsError(f"Missing required argument '{key}'")
        if not isinstance(value, str):
            raise InvalidArgumentsError(f"Argument '{key}' must be a string")


def _optional(arguments: dict[str, Any], key: str) -> str | None:
    value = arguments.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidArgumentsError(f"Argument '{key}' must be a string")
    return value


class QueryDispatcher:
    """Routes operations to the catalog and renders their results as text."""

    def __init__(self, catalog: Catalog, preview_length: int = DEFAULT_PREVIEW_LENGTH):
        self.catalog = catalog
        self.preview_length = preview_length
        self._handlers: dict[str, Callable[[dict[str, Any]], str]] = {
            "list_recipes": self._list_recipes,
            "get_recipe": self._get_recipe,
            "search_recipes": self._search_recipes,
            "get_documentation": self._get_documentation,
            "list_documentation": self._list_documentation,
        }

    def dispatch(self, operation: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Run ``operation`` and wrap the outcome in a ``ToolResult``.

        Never raises: unknown operations, bad arguments, missing artifacts and
        unexpected failures all come back as error-flagged results.
        """
        logger.debug("Dispatching %s with %r", operation, arguments)
        try:
            handler = self._handlers.get(operation)
            if handler is None:
                raise UnknownOperationError(f"Unknown tool: {operation}")
            if arguments is not None and not isinstance(arguments, dict):
                raise InvalidArgumentsError("Arguments must be an object")
            arguments = arguments or {}
            _check_required(OPERATIONS_BY_NAME[operation], arguments)
            return ToolResult.success(handler(arguments))
        except RecipeServerError as e:
            logger.debug("%s failed: %s", operation, e.message)
            return ToolResult.failure(e.code, e.message)
        except Exception as e:
            logger.exception("Unexpected error while handling %s", operation)
            return ToolResult.failure("internal_error", str(e))

    def _list_recipes(self, arguments: dict[str, Any]) -> str:
        return format_recipe_list(self.catalog.list_recipes(_optional(arguments, "category")))

    def _get_recipe(self, arguments: dict[str, Any]) -> str:
        return self.catalog.resolve_across_categories(arguments["name"])

    def _search_recipes(self, arguments: dict[str, Any]) -> str:
        keyword = arguments["keyword"]
        return format_search_results(search_recipes(self.catalog, keyword, self.preview_length))

    def _get_documentation(self, arguments: dict[str, Any]) -> str:
        return self.catalog.resolve_doc_across_categories(arguments["topic"])

    def _list_documentation(self, arguments: dict[str, Any]) -> str:
        return format_doc_list(self.catalog.list_docs())
