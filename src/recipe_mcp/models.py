"""Data models for the AI Recipes MCP Server.

Pydantic models representing the category taxonomy, catalog entries,
search hits, addressable resources and the uniform tool result envelope.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

MARKDOWN_MIME_TYPE = "text/markdown"


class Category(BaseModel):
    """A named grouping of recipes or documentation pages."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Category identifier (e.g., 'appetizers')")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Human-readable description")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Category ids double as directory names."""
        if not v or "/" in v or "\\" in v or v in {".", ".."}:
            raise ValueError(f"invalid category id: {v!r}")
        return v


class Taxonomy(BaseModel):
    """Immutable recipe and documentation category sets."""

    model_config = ConfigDict(frozen=True)

    recipe_categories: tuple[Category, ...] = Field(..., description="Recipe categories in declaration order")
    doc_categories: tuple[Category, ...] = Field(..., description="Documentation categories in declaration order")

    @field_validator("recipe_categories", "doc_categories")
    @classmethod
    def ensure_unique_ids(cls, v: tuple[Category, ...]) -> tuple[Category, ...]:
        """Reject duplicate category ids within one set."""
        ids = [category.id for category in v]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate category ids: {ids}")
        return v

    @property
    def recipe_category_ids(self) -> list[str]:
        return [category.id for category in self.recipe_categories]

    @property
    def doc_category_ids(self) -> list[str]:
        return [category.id for category in self.doc_categories]

    def get_recipe_category(self, category_id: str) -> Category | None:
        """Look up a recipe category by id."""
        return next((c for c in self.recipe_categories if c.id == category_id), None)

    def get_doc_category(self, category_id: str) -> Category | None:
        """Look up a documentation category by id."""
        return next((c for c in self.doc_categories if c.id == category_id), None)


class RecipeEntry(BaseModel):
    """A recipe as reported by listing."""

    category: str = Field(..., description="Owning category id")
    name: str = Field(..., description="File base name without extension")
    title: str = Field(..., description="First level-1 heading, or the name")
    path: str = Field(..., description="POSIX path relative to the catalog root")

    @property
    def key(self) -> str:
        return f"{self.category}/{self.name}"


class DocEntry(BaseModel):
    """A documentation page as reported by listing."""

    category: str = Field(..., description="Owning documentation category id")
    name: str = Field(..., description="File base name without extension")
    title: str = Field(..., description="First level-1 heading, or the name")
    path: str = Field(..., description="POSIX path relative to the catalog root")

    @property
    def key(self) -> str:
        return f"{self.category}/{self.name}"


class SearchHit(BaseModel):
    """A recipe matching a keyword search."""

    category: str = Field(..., description="Owning category id")
    name: str = Field(..., description="File base name without extension")
    title: str = Field(..., description="First level-1 heading, or the name")
    preview: str = Field(default="", description="First matching line, trimmed and length-capped")

    @property
    def key(self) -> str:
        return f"{self.category}/{self.name}"


class ResourceInfo(BaseModel):
    """An addressable resource exposed for direct retrieval."""

    uri: str = Field(..., description="recipe://{category}/{name} or docs://{category}/{name}")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Resource description")
    mime_type: str = Field(default=MARKDOWN_MIME_TYPE, description="Content type")


class ErrorResponse(BaseModel):
    """Structured error details for AI agents."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")


class ToolResult(BaseModel):
    """Uniform result envelope returned by every dispatched operation."""

    text: str = Field(..., description="Textual payload or rendered error")
    is_error: bool = Field(default=False, description="True if the operation failed")
    error: ErrorResponse | None = Field(None, description="Error details when is_error is set")

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def failure(cls, code: str, message: str) -> "ToolResult":
        return cls(
            text=f"Error: {message}",
            is_error=True,
            error=ErrorResponse(code=code, message=message),
        )
