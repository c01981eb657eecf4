"""Keyword search over recipe content.

A plain case-insensitive substring scan of every recipe: no index, no
tokenization, no ranking. Hits come back in catalog order.
"""

from .catalog import Catalog
from .models import SearchHit
from .utils.content import DEFAULT_PREVIEW_LENGTH, make_preview


def search_recipes(catalog: Catalog, keyword: str, preview_length: int = DEFAULT_PREVIEW_LENGTH) -> list[SearchHit]:
    """Find recipes whose content or name contains ``keyword``.

    Args:
        catalog: Catalog to scan
        keyword: Case-insensitive substring to look for
        preview_length: Maximum length of each hit's preview line

    Returns:
        Matching recipes in discovery order
    """
    needle = keyword.lower()
    hits = []

    for doc in catalog.iter_recipe_documents():
        if needle in doc.content.lower() or needle in doc.name.lower():
            hits.append(SearchHit(
                category=doc.category.id,
                name=doc.name,
                title=doc.title,
                preview=make_preview(doc.content, keyword, preview_length),
            ))

    return hits
