"""Catalog of recipes and documentation pages.

A ``Collection`` is one directory layout (root, categories, recursive or flat
scanning, search or exact lookup). The ``Catalog`` composes the recipe and
documentation collections and answers list/resolve queries against them.
Nothing is cached: every call goes back to the disk.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .config import Settings
from .exceptions import InvalidArgumentsError, NotFoundError, RecipeServerError
from .models import Category, DocEntry, RecipeEntry, ResourceInfo, Taxonomy
from .taxonomy import DEFAULT_TAXONOMY
from .utils.content import extract_title, read_content
from .utils.scanner import DEFAULT_EXTENSION, discover, discover_flat

logger = logging.getLogger(__name__)

RECIPE_SCHEME = "recipe"
DOCS_SCHEME = "docs"


@dataclass(frozen=True)
class Document:
    """A discovered artifact together with its raw content."""

    category: Category
    name: str
    path: Path
    content: str

    @property
    def title(self) -> str:
        return extract_title(self.content, self.name)


class Collection:
    """One family of artifacts laid out as ``{root}/{category}/...``.

    Args:
        scheme: Resource URI scheme ("recipe" or "docs")
        root: Directory holding one folder per category
        categories: Categories in lookup order
        lookup: Finds a category by id (a taxonomy lookup)
        scan: Scanner used to enumerate a category folder
        exact_lookup: Resolve names by reading ``{category}/{name}{ext}``
            directly instead of scanning for the first match
        display_root: Paths are reported relative to this directory
        extension: Artifact file extension
    """

    def __init__(
        self,
        scheme: str,
        root: Path,
        categories: tuple[Category, ...],
        lookup: Callable[[str], Category | None],
        scan: Callable[[Path, str], Iterator[Path]],
        exact_lookup: bool = False,
        display_root: Path | None = None,
        extension: str = DEFAULT_EXTENSION,
        not_found_message: str = "'{name}' not found in category '{category}'",
        not_found_anywhere_message: str = "'{name}' not found in any category",
    ):
        self.scheme = scheme
        self.root = root
        self.categories = categories
        self.lookup = lookup
        self.scan = scan
        self.exact_lookup = exact_lookup
        self.display_root = display_root or root
        self.extension = extension
        self.not_found_message = not_found_message
        self.not_found_anywhere_message = not_found_anywhere_message

    def select(self, category_id: str | None = None) -> list[Category]:
        """Categories to visit: one if ``category_id`` is given, else all.

        Unknown ids select nothing, exactly like an absent directory.
        """
        if not category_id:
            return list(self.categories)
        category = self.lookup(category_id)
        return [category] if category else []

    def name_of(self, path: Path) -> str:
        """Identifier of an artifact: its file name without the extension."""
        return path.name[: -len(self.extension)] if path.name.endswith(self.extension) else path.stem

    def display_path(self, path: Path) -> str:
        try:
            return path.relative_to(self.display_root).as_posix()
        except ValueError:
            return path.as_posix()

    def paths(self, category: Category) -> Iterator[Path]:
        return self.scan(self.root / category.id, self.extension)

    def documents(self, category_id: str | None = None) -> Iterator[Document]:
        """Yield every readable artifact with its content.

        Files that vanish or fail to read between discovery and reading are
        skipped with a warning; nobody asked for them by name.
        """
        for category in self.select(category_id):
            for path in self.paths(category):
                try:
                    content = read_content(path)
                except RecipeServerError as e:
                    logger.warning("Skipping %s: %s", path, e.message)
                    continue
                yield Document(category=category, name=self.name_of(path), path=path, content=content)

    def _matches(self, path: Path, name: str) -> bool:
        return self.name_of(path) == name or path.as_posix().endswith(f"/{name}{self.extension}")

    def locate(self, category_id: str, name: str) -> Path | None:
        """Find the file addressed by ``name`` within one category."""
        category = self.lookup(category_id)
        if category is None or not name:
            return None

        if self.exact_lookup:
            if "/" in name or "\\" in name or name in {".", ".."}:
                return None
            return self.root / category.id / f"{name}{self.extension}"

        return next((path for path in self.paths(category) if self._matches(path, name)), None)

    def resolve(self, category_id: str, name: str) -> str:
        """Return the content of ``name`` in ``category_id``.

        Raises:
            NotFoundError: Nothing in the category matches
            ReadFailureError: A match was found but could not be read
                (search lookup only; exact lookup reports NotFoundError)
        """
        message = self.not_found_message.format(name=name, category=category_id)
        path = self.locate(category_id, name)
        if path is None:
            raise NotFoundError(message)

        if not self.exact_lookup:
            return read_content(path)

        try:
            return read_content(path)
        except RecipeServerError as e:
            raise NotFoundError(message) from e

    def resolve_any(self, name: str) -> str:
        """Resolve ``name`` in each category in order; the first hit wins."""
        for category in self.categories:
            try:
                return self.resolve(category.id, name)
            except NotFoundError:
                continue
        raise NotFoundError(self.not_found_anywhere_message.format(name=name))

    def uri(self, category_id: str, name: str) -> str:
        return f"{self.scheme}://{category_id}/{name}"


class Catalog:
    """Recipes and documentation pages found under one root directory."""

    def __init__(
        self,
        root: Path,
        taxonomy: Taxonomy = DEFAULT_TAXONOMY,
        docs_dirname: str = "docs",
        extension: str = DEFAULT_EXTENSION,
    ):
        self.root = root
        self.taxonomy = taxonomy
        self.recipes = Collection(
            RECIPE_SCHEME,
            root,
            taxonomy.recipe_categories,
            lookup=taxonomy.get_recipe_category,
            scan=discover,
            display_root=root,
            extension=extension,
            not_found_message="Recipe '{name}' not found in category '{category}'",
            not_found_anywhere_message="Recipe '{name}' not found in any category",
        )
        self.docs = Collection(
            DOCS_SCHEME,
            root / docs_dirname,
            taxonomy.doc_categories,
            lookup=taxonomy.get_doc_category,
            scan=discover_flat,
            exact_lookup=True,
            display_root=root,
            extension=extension,
            not_found_message="Documentation '{name}' not found in '{category}'",
            not_found_anywhere_message="Documentation for '{name}' not found",
        )

    @classmethod
    def from_settings(cls, config: Settings, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> "Catalog":
        """Build a catalog from application settings."""
        return cls(
            config.recipes_root,
            taxonomy=taxonomy,
            docs_dirname=config.docs_dirname,
            extension=config.markdown_extension,
        )

    def list_recipes(self, category: str | None = None) -> list[RecipeEntry]:
        """List recipes, optionally restricted to one category."""
        return [
            RecipeEntry(
                category=doc.category.id,
                name=doc.name,
                title=doc.title,
                path=self.recipes.display_path(doc.path),
            )
            for doc in self.recipes.documents(category)
        ]

    def list_docs(self, category: str | None = None) -> list[DocEntry]:
        """List documentation pages, optionally restricted to one category."""
        return [
            DocEntry(
                category=doc.category.id,
                name=doc.name,
                title=doc.title,
                path=self.docs.display_path(doc.path),
            )
            for doc in self.docs.documents(category)
        ]

    def iter_recipe_documents(self) -> Iterator[Document]:
        """Yield every readable recipe with its content, in catalog order."""
        return self.recipes.documents()

    def resolve(self, category: str, name: str) -> str:
        return self.recipes.resolve(category, name)

    def resolve_across_categories(self, name: str) -> str:
        return self.recipes.resolve_any(name)

    def resolve_doc(self, category: str, name: str) -> str:
        return self.docs.resolve(category, name)

    def resolve_doc_across_categories(self, name: str) -> str:
        return self.docs.resolve_any(name)

    def resources(self) -> list[ResourceInfo]:
        """Every discovered recipe and documentation page as an addressable resource.

        When a name repeats within a category only the first file is listed,
        since that is the one its URI resolves to.
        """
        resources: dict[str, ResourceInfo] = {}

        for category in self.recipes.categories:
            for path in self.recipes.paths(category):
                name = self.recipes.name_of(path)
                uri = self.recipes.uri(category.id, name)
                resources.setdefault(uri, ResourceInfo(
                    uri=uri,
                    name=f"{category.name}: {name}",
                    description=f"Recipe from {category.description}",
                ))

        for category in self.docs.categories:
            for path in self.docs.paths(category):
                name = self.docs.name_of(path)
                uri = self.docs.uri(category.id, name)
                resources.setdefault(uri, ResourceInfo(
                    uri=uri,
                    name=f"{category.name}: {name}",
                    description=f"Documentation: {category.name}",
                ))

        return list(resources.values())

    def read_resource(self, uri: str) -> str:
        """Read a ``recipe://`` or ``docs://`` resource.

        Raises:
            InvalidArgumentsError: Unknown scheme or malformed URI
            NotFoundError: Nothing matches the address
        """
        scheme, sep, address = uri.partition("://")
        category, slash, name = address.partition("/")
        if not sep or not slash or not category or not name:
            raise InvalidArgumentsError(f"Unknown resource URI: {uri}")

        if scheme == RECIPE_SCHEME:
            return self.resolve(category, name)
        if scheme == DOCS_SCHEME:
            return self.resolve_doc(category, name)
        raise InvalidArgumentsError(f"Unknown resource URI: {uri}")
