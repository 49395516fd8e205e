"""Reduce a spoken phrase to the key used for recipe lookups."""

# Order matters: the first type found in the phrase wins.
RECIPE_TYPES = (
    "omelette",
    "curry",
    "salad",
    "soup",
    "stir fry",
    "stir-fry",
    "pasta",
    "rice",
    "sandwich",
    "burger",
)


def normalize_keyword(keyword: str) -> str:
    """
    Return the recipe type named in `keyword`, or its first word.

    "Spicy Chicken Curry" -> "curry", "chicken breast" -> "chicken".
    The keyword must be non-empty; blank input is rejected by the caller.
    """
    lowered = keyword.lower()
    for recipe_type in RECIPE_TYPES:
        if recipe_type in lowered:
            return recipe_type
    return lowered.split()[0]
