import os
import logging
import requests

from models import ExternalRecipe

log = logging.getLogger(__name__)

EDAMAM_URL = "https://api.edamam.com/api/recipes/v2"

def _first(values, default=None):
    return values[0].title() if values else default

def to_recipe(hit: dict) -> ExternalRecipe:
    recipe = hit["recipe"]
    url = recipe.get("url")
    total = recipe.get("totalTime") or 0
    return ExternalRecipe(
        name=recipe["label"],
        category=_first(recipe.get("dishType"), "Main Course"),
        area=_first(recipe.get("cuisineType"), "International"),
        instructions=f"Full instructions are available at {url}" if url else "",
        thumbnail=recipe.get("image"),
        ingredients=list(recipe.get("ingredientLines") or []),
        cooking_time=f"{int(total)} minutes" if total > 0 else None,
        source=recipe.get("source") or "Edamam",
    )

def fetch_from_edamam(keyword: str):
    app_id = os.getenv("EDAMAM_APP_ID")
    app_key = os.getenv("EDAMAM_APP_KEY")
    if not app_id or not app_key:
        log.warning("EDAMAM_APP_ID / EDAMAM_APP_KEY not set, skipping Edamam.")
        return None

    params = {
        "type": "public",
        "q": keyword,
        "app_id": app_id,
        "app_key": app_key,
    }

    try:
        resp = requests.get(EDAMAM_URL, params=params, timeout=float(os.getenv("LOOKUP_TIMEOUT", "10")))
        resp.raise_for_status()
        hits = resp.json().get("hits") or []
        if hits:
            return to_recipe(hits[0])
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        log.warning("Edamam lookup failed for %r: %s", keyword, e)
    return None
