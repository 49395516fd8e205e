import pytest

from models import GeneratedRecipe
from services import synthesizer
from services.synthesizer import (
    BASE_INGREDIENTS,
    DEFAULT_IMAGE,
    first_match,
    generate_ingredients,
    generate_instructions,
    synthesize_recipe,
)


@pytest.mark.parametrize("keyword", [
    "chicken", "omelette", "vegetable curry", "pancake", "x", "Chocolate Cake", "beef stir fry",
])
def test_synthesized_recipe_is_complete(keyword):
    recipe = synthesize_recipe(keyword)
    assert isinstance(recipe, GeneratedRecipe)
    assert recipe.name
    assert recipe.category
    assert recipe.area == "International"
    assert recipe.instructions
    assert recipe.ingredients
    assert recipe.source == "generated"


def test_synthesis_is_deterministic():
    assert synthesize_recipe("mushroom soup") == synthesize_recipe("mushroom soup")


def test_omelette():
    recipe = synthesize_recipe("omelette")
    assert recipe.name == "Omelette Recipe"
    assert recipe.category == "Breakfast"
    assert recipe.cooking_time == "10 minutes"
    assert recipe.difficulty == "Easy"
    steps = recipe.instructions.splitlines()
    assert len(steps) == 6
    assert steps[0].startswith("1. Crack eggs into a bowl")
    assert steps[5] == "6. Serve immediately with your favorite sides."
    # The keyword names the base, so nothing is prepended.
    assert recipe.ingredients[0] == "3 large eggs"


def test_unknown_keyword_uses_defaults():
    recipe = synthesize_recipe("chicken")
    assert recipe.name == "Chicken Recipe"
    assert recipe.category == "Main Course"
    assert recipe.cooking_time == "30 minutes"
    assert recipe.difficulty == "Medium"
    assert recipe.thumbnail == DEFAULT_IMAGE
    assert recipe.ingredients == [
        "200g chicken",
        "1 tbsp oil or butter",
        "Salt and pepper to taste",
        "Your choice of herbs and spices",
        "Additional ingredients as desired",
    ]
    assert recipe.instructions.endswith("6. Serve hot and enjoy your delicious chicken!")


def test_vegetable_curry_prepends_keyword_ingredient():
    ingredients = generate_ingredients("vegetable curry")
    assert len(ingredients) == 7
    assert ingredients[0] == "200g vegetable"
    assert ingredients[1:] == list(dict(BASE_INGREDIENTS)["curry"])


def test_keyword_already_in_base_is_not_prepended():
    assert generate_ingredients("curry") == list(dict(BASE_INGREDIENTS)["curry"])
    # "rice" is named by "1 cup rice" in the rice base.
    assert generate_ingredients("Rice pilaf")[0] == "1 cup rice"


def test_ingredient_tables_are_not_mutated():
    generate_ingredients("chicken curry")
    generate_ingredients("lamb curry")
    assert generate_ingredients("curry") == list(dict(BASE_INGREDIENTS)["curry"])


def test_tables_cover_different_keywords():
    recipe = synthesize_recipe("pancake")
    assert recipe.category == "Breakfast"
    assert recipe.ingredients[0] == "200g pancake"
    assert len(recipe.ingredients) == 5
    assert recipe.cooking_time == "30 minutes"


def test_soup_uses_generic_instructions_but_soup_metadata():
    recipe = synthesize_recipe("tomato soup")
    assert recipe.category == "Starter"
    assert recipe.cooking_time == "30 minutes"
    assert recipe.ingredients[0] == "200g tomato"
    assert recipe.instructions == generate_instructions("tomato soup")
    assert "delicious tomato soup!" in recipe.instructions


def test_first_match_respects_table_order():
    table = (("curry", "first"), ("soup", "second"))
    assert first_match("chicken curry soup", table) == "first"
    assert first_match("Soup", table) == "second"
    assert first_match("stew", table, "default") == "default"


def test_category_order_is_priority():
    # "rice" precedes "sandwich" in the category table.
    assert synthesizer.categorize("rice sandwich") == "Main Course"
    assert synthesizer.estimate_cooking_time("salad sandwich") == "15 minutes"


def test_name_keeps_rest_of_keyword():
    assert synthesize_recipe("mac and Cheese").name == "Mac and Cheese Recipe"
