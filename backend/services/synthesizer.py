"""
Rule-based recipe generation for keywords no recipe database knows.

Every table below is an ordered list of (keyword, value) pairs scanned
against the lowercased phrase; the first keyword contained in the phrase
wins. The tables cover different keyword sets on purpose, so a phrase
can get a category ("pancake") without getting an ingredient template.
"""
import re

from models import GeneratedRecipe

BASE_INGREDIENTS = (
    ("omelette", (
        "3 large eggs",
        "1 tbsp milk or water",
        "Salt and pepper to taste",
        "1 tbsp butter or oil",
    )),
    ("curry", (
        "500g main protein/vegetables",
        "1 onion, finely chopped",
        "2 garlic cloves, minced",
        "1 tbsp curry powder",
        "200ml coconut milk",
        "1 tbsp oil",
    )),
    ("salad", (
        "Mixed greens or base vegetable",
        "1 tbsp olive oil",
        "1 tsp lemon juice or vinegar",
        "Salt and pepper to taste",
        "Optional: herbs, nuts, cheese",
    )),
    ("soup", (
        "500g main ingredient",
        "1 liter vegetable/chicken stock",
        "1 onion, chopped",
        "2 garlic cloves",
        "1 tbsp oil",
        "Herbs and spices to taste",
    )),
    ("pasta", (
        "200g pasta",
        "2L water for boiling",
        "1 tbsp salt",
        "Sauce ingredients based on recipe",
        "Grated cheese for serving",
    )),
    ("rice", (
        "1 cup rice",
        "2 cups water",
        "1 tbsp oil or butter",
        "Salt to taste",
        "Additional ingredients as per recipe",
    )),
)

BASE_INSTRUCTIONS = (
    ("omelette", """1. Crack eggs into a bowl, add milk, salt, and pepper. Whisk until frothy.
2. Heat butter in a non-stick pan over medium heat.
3. Pour egg mixture into the pan.
4. Cook for 2-3 minutes until edges set, then flip or fold.
5. Cook for another minute until fully set.
6. Serve immediately with your favorite sides."""),
    ("curry", """1. Heat oil in a large pan over medium heat.
2. Add onions and garlic, sauté until fragrant.
3. Add main ingredient and cook until slightly browned.
4. Stir in curry powder and cook for 1 minute.
5. Pour in coconut milk, bring to simmer.
6. Cook for 15-20 minutes until sauce thickens.
7. Season with salt and pepper, serve with rice."""),
    ("salad", """1. Wash and prepare all vegetables.
2. Chop ingredients into bite-sized pieces.
3. Prepare dressing by whisking oil, acid, and seasonings.
4. Combine all ingredients in a large bowl.
5. Toss gently with dressing.
6. Serve immediately for best freshness."""),
)

GENERIC_INSTRUCTIONS = """1. Prepare all ingredients by washing and chopping as needed.
2. Heat oil in a pan over medium heat.
3. Cook main ingredients until tender and flavorful.
4. Add seasonings and adjust to taste.
5. Cook until all ingredients are well combined and heated through.
6. Serve hot and enjoy your delicious {keyword}!"""

CATEGORIES = (
    ("omelette", "Breakfast"),
    ("pancake", "Breakfast"),
    ("salad", "Side Dish"),
    ("soup", "Starter"),
    ("curry", "Main Course"),
    ("pasta", "Main Course"),
    ("rice", "Main Course"),
    ("sandwich", "Lunch"),
    ("burger", "Lunch"),
    ("cake", "Dessert"),
    ("cookie", "Dessert"),
)

COOKING_TIMES = (
    ("omelette", "10 minutes"),
    ("salad", "15 minutes"),
    ("sandwich", "10 minutes"),
    ("soup", "30 minutes"),
    ("curry", "45 minutes"),
    ("pasta", "20 minutes"),
    ("rice", "25 minutes"),
)

DIFFICULTIES = (
    ("omelette", "Easy"),
    ("salad", "Easy"),
    ("sandwich", "Easy"),
    ("soup", "Medium"),
    ("pasta", "Easy"),
    ("rice", "Easy"),
    ("curry", "Medium"),
)

_MEAL_IMAGES = "https://www.themealdb.com/images/media/meals"

IMAGES = (
    ("omelette", f"{_MEAL_IMAGES}/xxyupu1468262513.jpg"),
    ("curry", f"{_MEAL_IMAGES}/gpz67p1560458984.jpg"),
    ("salad", f"{_MEAL_IMAGES}/wvqpwt1468339226.jpg"),
    ("soup", f"{_MEAL_IMAGES}/1529446133.jpg"),
    ("pasta", f"{_MEAL_IMAGES}/xr0n4r1576788363.jpg"),
    ("rice", f"{_MEAL_IMAGES}/1520081754.jpg"),
)

DEFAULT_CATEGORY = "Main Course"
DEFAULT_COOKING_TIME = "30 minutes"
DEFAULT_DIFFICULTY = "Medium"
DEFAULT_IMAGE = f"{_MEAL_IMAGES}/xxyupu1468262513.jpg"
DEFAULT_AREA = "International"
GENERATED_SOURCE = "generated"


def first_match(keyword: str, table, default=None):
    """Return the value of the first table entry whose key occurs in `keyword`."""
    lowered = keyword.lower()
    for key, value in table:
        if key in lowered:
            return value
    return default


def _first_word(keyword: str) -> str:
    return keyword.split()[0]


def _mentions(ingredients, word: str) -> bool:
    word = word.lower()
    for line in ingredients:
        if word in re.findall(r"[a-z]+", line.lower()):
            return True
    return False


def generate_ingredients(keyword: str) -> list[str]:
    word = _first_word(keyword)
    lowered = keyword.lower()
    for base, ingredients in BASE_INGREDIENTS:
        if base not in lowered:
            continue
        ingredients = list(ingredients)
        if word.lower() != base and not _mentions(ingredients, word):
            ingredients.insert(0, f"200g {word}")
        return ingredients

    return [
        f"200g {word}",
        "1 tbsp oil or butter",
        "Salt and pepper to taste",
        "Your choice of herbs and spices",
        "Additional ingredients as desired",
    ]


def generate_instructions(keyword: str) -> str:
    return first_match(keyword, BASE_INSTRUCTIONS, GENERIC_INSTRUCTIONS.format(keyword=keyword))


def categorize(keyword: str) -> str:
    return first_match(keyword, CATEGORIES, DEFAULT_CATEGORY)


def estimate_cooking_time(keyword: str) -> str:
    return first_match(keyword, COOKING_TIMES, DEFAULT_COOKING_TIME)


def estimate_difficulty(keyword: str) -> str:
    return first_match(keyword, DIFFICULTIES, DEFAULT_DIFFICULTY)


def default_image(keyword: str) -> str:
    return first_match(keyword, IMAGES, DEFAULT_IMAGE)


def synthesize_recipe(keyword: str) -> GeneratedRecipe:
    """
    Build a complete recipe for `keyword` from the tables above.

    Deterministic and free of I/O; never raises for a non-empty keyword.
    """
    return GeneratedRecipe(
        name=f"{keyword[0].upper()}{keyword[1:]} Recipe",
        category=categorize(keyword),
        area=DEFAULT_AREA,
        instructions=generate_instructions(keyword),
        thumbnail=default_image(keyword),
        ingredients=generate_ingredients(keyword),
        cooking_time=estimate_cooking_time(keyword),
        difficulty=estimate_difficulty(keyword),
        source=GENERATED_SOURCE,
    )
