"""Default category taxonomy for the recipe collection."""

from .models import Category, Taxonomy

RECIPE_CATEGORIES = (
    Category(id="appetizers", name="Appetizers", description="Quick start prompts (5-15 min)"),
    Category(id="mains", name="Mains", description="Substantial work (30min-4hr)"),
    Category(id="sides", name="Sides", description="Supporting tasks (15-60 min)"),
    Category(id="desserts", name="Desserts", description="Finishing touches (10-30 min)"),
    Category(id="ingredients", name="Ingredients", description="Reusable components"),
)

DOC_CATEGORIES = (
    Category(id="prompt-engineering", name="Prompt Engineering Guides", description="Prompt Engineering Guides"),
    Category(id="context-engineering", name="Context Engineering Guides", description="Context Engineering Guides"),
    Category(id="examples", name="Examples and Case Studies", description="Examples and Case Studies"),
    Category(id="references", name="References and Glossary", description="References and Glossary"),
)

DEFAULT_TAXONOMY = Taxonomy(recipe_categories=RECIPE_CATEGORIES, doc_categories=DOC_CATEGORIES)
