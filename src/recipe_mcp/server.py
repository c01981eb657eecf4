"""FastMCP Server implementation for the AI Recipes collection.

Main MCP server class that exposes tools and resources for listing,
searching and reading prompt recipes and learning documentation through
the Model Context Protocol.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError
from fastmcp.resources import FunctionResource, Resource
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from pydantic import Field

from .catalog import Catalog
from .config import Settings, configure_logging, settings
from .dispatcher import OPERATIONS_BY_NAME, QueryDispatcher
from .exceptions import RecipeServerError
from .models import MARKDOWN_MIME_TYPE

logger = logging.getLogger(__name__)

INDEX_URI = "urn:ai-recipes:index"


class CatalogResources(Middleware):
    """Adds one resource per artifact to every resources/list response.

    The catalog is rescanned on each request, so new files appear and
    deleted ones disappear without restarting the server.
    """

    def __init__(self, catalog: Catalog, read: Callable[[str], str]):
        self.catalog = catalog
        self.read = read

    def _make_reader(self, uri: str) -> Callable[[], str]:
        def read() -> str:
            return self.read(uri)

        return read

    async def on_list_resources(
        self,
        context: MiddlewareContext,
        call_next: CallNext,
    ) -> Sequence[Resource]:
        registered = list(await call_next(context))
        artifacts = [
            FunctionResource.from_function(
                fn=self._make_reader(info.uri),
                uri=info.uri,
                name=info.name,
                description=info.description,
                mime_type=info.mime_type,
            )
            for info in self.catalog.resources()
        ]
        logger.debug("Listing %d artifact resources", len(artifacts))
        return [*registered, *artifacts]


class RecipeMCPServer:
    """FastMCP server for recipe and documentation access."""

    def __init__(self, config: Settings | None = None, catalog: Catalog | None = None):
        """Initialize the recipe MCP server."""
        self.settings = config or settings
        self.catalog = catalog or Catalog.from_settings(self.settings)
        self.dispatcher = QueryDispatcher(self.catalog, preview_length=self.settings.preview_length)
        self.mcp = FastMCP(self.settings.mcp_server_name)
        self._setup_tools()
        self._setup_resources()

    def _call(self, operation: str, **arguments: Any) -> str:
        """Dispatch an operation, turning flagged results into tool errors."""
        result = self.dispatcher.dispatch(operation, {k: v for k, v in arguments.items() if v is not None})
        if result.is_error:
            raise ToolError(result.text)
        return result.text

    def _setup_tools(self) -> None:
        """Register MCP tools."""
        category_ids = ", ".join(self.catalog.taxonomy.recipe_category_ids)

        @self.mcp.tool(description=OPERATIONS_BY_NAME["list_recipes"].description)
        async def list_recipes(
            category: Annotated[str | None, Field(description=f"Filter by category: {category_ids}")] = None,
        ) -> str:
            """List recipes as `**category/name**: title` lines."""
            return self._call("list_recipes", category=category)

        @self.mcp.tool(description=OPERATIONS_BY_NAME["get_recipe"].description)
        async def get_recipe(
            name: Annotated[str, Field(description='Name of the recipe (e.g., "code-exploration", "one-pager", "system-design")')],
        ) -> str:
            """Return the raw markdown of the first recipe called `name`."""
            return self._call("get_recipe", name=name)

        @self.mcp.tool(description=OPERATIONS_BY_NAME["search_recipes"].description)
        async def search_recipes(
            keyword: Annotated[str, Field(description="Keyword to search for")],
        ) -> str:
            """Case-insensitive keyword search with a preview line per hit."""
            return self._call("search_recipes", keyword=keyword)

        @self.mcp.tool(description=OPERATIONS_BY_NAME["get_documentation"].description)
        async def get_documentation(
            topic: Annotated[str, Field(description='Documentation topic (e.g., "fundamentals", "advanced-patterns", "context-design")')],
        ) -> str:
            """Return the raw markdown of the first documentation page called `topic`."""
            return self._call("get_documentation", topic=topic)

        @self.mcp.tool(description=OPERATIONS_BY_NAME["list_documentation"].description)
        async def list_documentation() -> str:
            """List documentation pages as `**category/name**: title` lines."""
            return self._call("list_documentation")

    def _read(self, uri: str) -> str:
        try:
            return self.catalog.read_resource(uri)
        except RecipeServerError as e:
            raise ResourceError(e.message) from e

    def _setup_resources(self) -> None:
        """Register MCP resources.

        The templates resolve every artifact address; the listing of
        individual artifacts comes from ``CatalogResources`` on each request.
        """

        @self.mcp.resource("recipe://{category}/{name}", mime_type=MARKDOWN_MIME_TYPE)
        async def recipe(category: str, name: str) -> str:
            """A recipe addressed by category and name."""
            return self._read(f"recipe://{category}/{name}")

        @self.mcp.resource("docs://{category}/{name}", mime_type=MARKDOWN_MIME_TYPE)
        async def documentation(category: str, name: str) -> str:
            """A documentation page addressed by category and name."""
            return self._read(f"docs://{category}/{name}")

        @self.mcp.resource(INDEX_URI, mime_type="application/json")
        async def catalog_index() -> dict[str, Any]:
            """Compact catalog of every recipe and documentation page.

            Scanned fresh on every read.
            """
            recipes = self.catalog.list_recipes()
            docs = self.catalog.list_docs()
            return {
                "recipes": [entry.model_dump() for entry in recipes],
                "documentation": [entry.model_dump() for entry in docs],
                "recipe_count": len(recipes),
                "documentation_count": len(docs),
            }

        self.mcp.add_middleware(CatalogResources(self.catalog, self._read))

    def run(self, **kwargs) -> None:
        """Run the MCP server.

        Args:
            **kwargs: Additional arguments passed to FastMCP.run()
        """
        logger.info(
            "%s v%s serving %s",
            self.settings.mcp_server_name,
            self.settings.mcp_server_version,
            self.settings.recipes_root.resolve(),
        )
        try:
            self.mcp.run(**kwargs)
        except KeyboardInterrupt:
            logger.info("Shutting down")
        except Exception:
            logger.exception("MCP server stopped with an error")
            raise


def main() -> None:
    """Main entry point for the AI Recipes MCP server."""
    configure_logging(settings)
    server = RecipeMCPServer()
    server.run()


if __name__ == "__main__":
    main()
