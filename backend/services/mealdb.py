# backend/services/mealdb.py
import os
import logging
import requests

from models import ExternalRecipe
from services.normalizer import normalize_keyword

log = logging.getLogger(__name__)

UA = {"User-Agent": "VoiceRecipeBot/0.1 (+https://example.com/contact)"}

def _base_url() -> str:
    return os.getenv("MEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1").rstrip("/")

def _timeout() -> float:
    return float(os.getenv("LOOKUP_TIMEOUT", "10"))

def _get_meals(endpoint: str, params: dict) -> list[dict]:
    """GET one TheMealDB endpoint and return its `meals` list ([] when absent)."""
    r = requests.get(f"{_base_url()}/{endpoint}", params=params, headers=UA, timeout=_timeout())
    r.raise_for_status()
    return r.json().get("meals") or []

def fetch_from_mealdb(keyword: str):
    """
    Look `keyword` up on TheMealDB:
    - search meals by name with the normalized keyword
    - otherwise filter by main ingredient and fetch the first meal's details
    Returns an ExternalRecipe, or None when nothing matches or the API fails.
    """
    query = normalize_keyword(keyword)
    try:
        meals = _get_meals("search.php", {"s": query})
        if meals:
            return ExternalRecipe(**meals[0], source="TheMealDB")

        meals = _get_meals("filter.php", {"i": query})
        if meals:
            details = _get_meals("lookup.php", {"i": meals[0]["idMeal"]})
            if details:
                return ExternalRecipe(**details[0], source="TheMealDB")
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        log.warning("MealDB lookup failed for %r: %s", query, e)
    return None
