from models import MAX_INGREDIENT_SLOTS
from schemas.dto import RecipeView

NO_RECIPE_MESSAGE = "No recipe found for your request."


def extract_ingredients(record) -> list[str]:
    """
    Ingredient lines of a record, in display order.

    Generated and Edamam records already carry the list; MealDB records
    spread it over numbered ingredient/measure slots.
    """
    if record.ingredients is not None:
        return list(record.ingredients)

    lines = []
    for i in range(1, MAX_INGREDIENT_SLOTS + 1):
        ingredient, measure = record.ingredient_slot(i)
        if not ingredient or not ingredient.strip():
            continue
        ingredient, measure = ingredient.strip(), (measure or "").strip()
        lines.append(f"{measure} {ingredient}" if measure else ingredient)
    return lines


def to_view(record) -> RecipeView:
    return RecipeView(
        name=record.name,
        category=record.category,
        area=record.area,
        cooking_time=record.cooking_time,
        difficulty=record.difficulty,
        ingredients=extract_ingredients(record),
        instructions=record.instructions or "",
        source=record.source,
    )


def render(view: RecipeView) -> str:
    out = f"🍳 {view.name}\n\n"
    out += f"📁 Category: {view.category} | 🌍 Cuisine: {view.area}\n\n"

    if view.cooking_time:
        out += f"⏱️ Cooking Time: {view.cooking_time} | 📊 Difficulty: {view.difficulty or 'Medium'}\n\n"

    out += "📝 INGREDIENTS:\n"
    for ingredient in view.ingredients:
        out += f"• {ingredient}\n"

    out += f"\n👨‍🍳 INSTRUCTIONS:\n{view.instructions}"

    if view.source:
        out += f"\n\n🔗 Source: {view.source}"
    return out


def format_recipe(record) -> str:
    if record is None:
        return NO_RECIPE_MESSAGE
    return render(to_view(record))
