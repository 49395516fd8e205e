import logging

from schemas.dto import RecipeResponse
from services.mealdb import fetch_from_mealdb
from services.edamam import fetch_from_edamam
from services.synthesizer import synthesize_recipe, GENERATED_SOURCE
from services.formatter import format_recipe

log = logging.getLogger(__name__)

# Tried in order; the synthesizer is the last resort.
LOOKUP_TIERS = (
    ("TheMealDB", fetch_from_mealdb),
    ("Edamam", fetch_from_edamam),
)

def find_recipe(keyword: str):
    """Return the first recipe an upstream source knows, else a generated one."""
    for name, fetch in LOOKUP_TIERS:
        try:
            recipe = fetch(keyword)
        except Exception:
            log.exception("%s tier failed for %r", name, keyword)
            continue
        if recipe is not None:
            log.info("Recipe for %r found on %s", keyword, name)
            return recipe

    log.info("No upstream recipe for %r, generating one", keyword)
    return synthesize_recipe(keyword)

def lookup_recipe(keyword: str) -> RecipeResponse:
    recipe = find_recipe(keyword)
    return RecipeResponse(
        recipe=format_recipe(recipe),
        source=recipe.source or GENERATED_SOURCE,
    )

def fallback_recipe(keyword: str) -> RecipeResponse:
    return RecipeResponse(
        recipe=format_recipe(synthesize_recipe(keyword)),
        source=GENERATED_SOURCE,
    )
