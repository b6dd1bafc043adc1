"""Normalize RecipeDB payloads into domain models.

The API is inconsistent about field names (``Recipe_title`` vs ``title``,
``Calories`` vs ``Energy (kcal)``) and stores list-like fields as
``||``-delimited strings. Everything here reconciles those variants.
"""

import math
from collections.abc import Mapping, Sequence

from food_advisor.domain.nutrition import (
    IngredientItem,
    NutritionFacts,
    NutritionProfile,
    Recipe,
    RecipeSummary,
)

API_SOURCE = "RecipeDB API"
LOCAL_SOURCE = "Local JSON"

ID_KEYS = ("Recipe_id", "recipe_id", "_id", "id")
TITLE_KEYS = ("Recipe_title", "recipe_title", "recipeTitle", "title")
REGION_KEYS = ("Region", "region", "Sub_region", "cuisine")
SERVINGS_KEYS = ("servings", "Servings")
TOTAL_TIME_KEYS = ("total_time", "totalTime", "Total_time")
PROCESSES_KEYS = ("Processes", "processes")
UTENSILS_KEYS = ("Utensils", "utensils")
INGREDIENTS_KEYS = ("ingredients", "Ingredients", "ingredient_Phrase")

CALORIES_KEYS = ("Calories", "Energy (kcal)", "calories")
CARBS_KEYS = ("Carbohydrate, by difference (g)", "carbs", "Carbohydrates")
PROTEIN_KEYS = ("Protein (g)", "protein", "Protein")
FAT_KEYS = ("Total lipid (fat) (g)", "fat", "Fat")
FIBER_KEYS = ("Fiber, total dietary (g)", "fiber", "Fiber")
SUGAR_KEYS = ("Sugars, total (g)", "sugar", "Sugar")
SODIUM_KEYS = ("Sodium, Na (mg)", "sodium", "Sodium")

_IDENTITY_KEYS = frozenset((*ID_KEYS, *TITLE_KEYS, "ndb_id"))


def first_value(raw: Mapping[str, object], keys: Sequence[str]) -> object | None:
    """Return the first present, non-empty value among ``keys``."""
    for key in keys:
        value = raw.get(key)
        if value is not None and value != "":
            return value
    return None


def to_float(value: object | None, default: float = 0.0) -> float:
    """Parse a number; missing, invalid and non-finite values give ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(str(value).strip())
    except ValueError:
        return default
    return result if math.isfinite(result) else default


def parse_servings(value: object | None) -> int:
    """Parse a servings count, defaulting to 1 when missing or invalid."""
    servings = int(to_float(value))
    return servings if servings > 0 else 1


def split_list(value: object | None) -> list[str]:
    """Split a ``||``-delimited string (or pass through a list) into items."""
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split("||")
    elif isinstance(value, Sequence):
        parts = [str(item) for item in value]
    else:
        return []
    return [part.strip() for part in parts if part.strip()]


def cooking_method_from_processes(value: object | None) -> str:
    """Use the last process step as the cooking method."""
    steps = split_list(value)
    return steps[-1] if steps else ""


def _ingredients(raw: Mapping[str, object]) -> list[str]:
    value = first_value(raw, INGREDIENTS_KEYS)
    if isinstance(value, str) and "||" not in value:
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, Sequence) and not isinstance(value, str):
        names: list[str] = []
        for item in value:
            if isinstance(item, Mapping):
                name = first_value(item, ("ingredient", "name", "ingredient_name"))
                if name:
                    names.append(str(name).strip())
            elif str(item).strip():
                names.append(str(item).strip())
        return names
    return split_list(value)


def _per_serving(raw: Mapping[str, object], keys: Sequence[str], servings: int) -> int:
    total = to_float(first_value(raw, keys))
    return max(0, round(total / servings))


def per_serving_nutrition(
    raw: Mapping[str, object], servings: int, source: str = API_SOURCE
) -> NutritionProfile:
    """Divide absolute recipe nutrition by the serving count."""
    return NutritionProfile(
        calories=_per_serving(raw, CALORIES_KEYS, servings),
        carbs=_per_serving(raw, CARBS_KEYS, servings),
        protein=_per_serving(raw, PROTEIN_KEYS, servings),
        fat=_per_serving(raw, FAT_KEYS, servings),
        fiber=_per_serving(raw, FIBER_KEYS, servings),
        sugar=_per_serving(raw, SUGAR_KEYS, servings),
        sodium=_per_serving(raw, SODIUM_KEYS, servings),
        source=source,
    )


def _optional_str(value: object | None) -> str | None:
    return None if value is None else str(value)


def recipe_from_payload(raw: Mapping[str, object], source: str = API_SOURCE) -> Recipe:
    """Build a recipe from one RecipeDB record."""
    servings = parse_servings(first_value(raw, SERVINGS_KEYS))
    processes = first_value(raw, PROCESSES_KEYS)
    return Recipe(
        id=_optional_str(first_value(raw, ID_KEYS)),
        title=str(first_value(raw, TITLE_KEYS) or ""),
        region=_optional_str(first_value(raw, REGION_KEYS)),
        cooking_method=cooking_method_from_processes(processes),
        ingredients=tuple(_ingredients(raw)),
        utensils=tuple(split_list(first_value(raw, UTENSILS_KEYS))),
        processes=tuple(split_list(processes)),
        servings=servings,
        total_time=_optional_str(first_value(raw, TOTAL_TIME_KEYS)),
        nutrition=per_serving_nutrition(raw, servings, source),
        source=source,
    )


def summary_from_payload(
    raw: Mapping[str, object], source: str = API_SOURCE
) -> RecipeSummary:
    """Build a search result from one RecipeDB record."""
    recipe = recipe_from_payload(raw, source)
    return RecipeSummary(
        id=recipe.id,
        title=recipe.title,
        region=recipe.region,
        cooking_method=recipe.cooking_method,
        servings=recipe.servings,
        total_time=recipe.total_time,
        calories=recipe.nutrition.calories,
        carbs=recipe.nutrition.carbs,
        protein=recipe.nutrition.protein,
        fat=recipe.nutrition.fat,
        ingredients=recipe.ingredients,
        utensils=recipe.utensils,
        processes=recipe.processes,
        source=source,
    )


def recipe_from_local(
    entry: Mapping[str, object], facts: NutritionFacts | None
) -> Recipe:
    """Build a recipe from the bundled recipe and nutrition datasets."""
    if facts is not None:
        nutrition = facts.to_profile(LOCAL_SOURCE)
    else:
        nutrition = NutritionProfile(source=f"{LOCAL_SOURCE} (incomplete)")
    return Recipe(
        title=str(entry.get("name", "")),
        region=_optional_str(entry.get("cuisine")),
        cooking_method=str(entry.get("cooking_method", "")),
        ingredients=tuple(split_list(entry.get("ingredients"))),
        category=_optional_str(entry.get("category")),
        prep_time=_optional_str(entry.get("prep_time")),
        description=_optional_str(entry.get("description")),
        nutrition=nutrition,
        source=LOCAL_SOURCE,
    )


def facts_from_mapping(name: str, raw: Mapping[str, object]) -> NutritionFacts:
    """Read a nutrition dataset entry, flooring every value at zero."""
    return NutritionFacts(
        name=name,
        calories=max(0.0, to_float(raw.get("calories"))),
        carbs=max(0.0, to_float(raw.get("carbs"))),
        protein=max(0.0, to_float(raw.get("protein"))),
        fat=max(0.0, to_float(raw.get("fat"))),
        fiber=max(0.0, to_float(raw.get("fiber"))),
        sugar=max(0.0, to_float(raw.get("sugar"))),
        sodium=max(0.0, to_float(raw.get("sodium"))),
        fried=bool(raw.get("fried", False)),
        refined=bool(raw.get("refined", False)),
    )


def extract_records(payload: Mapping[str, object]) -> list[dict[str, object]]:
    """Return the record list of a ``{success, data}`` envelope."""
    if payload.get("success") is False:
        return []
    data = payload.get("data", payload.get("payload"))
    if isinstance(data, Mapping):
        for key in ("data", "recipes", "items"):
            nested = data.get(key)
            if isinstance(nested, list):
                data = nested
                break
        else:
            return [dict(data)] if data else []
    if isinstance(data, list):
        return [dict(item) for item in data if isinstance(item, Mapping)]
    return []


def nutrition_record(payload: Mapping[str, object]) -> dict[str, object] | None:
    records = extract_records(payload)
    return records[0] if records else None


def _steps_from_value(value: object) -> list[str]:
    if isinstance(value, str):
        separator = "||" if "||" in value else "\n"
        return [step.strip() for step in value.split(separator) if step.strip()]
    if isinstance(value, Sequence):
        steps: list[str] = []
        for item in value:
            if isinstance(item, Mapping):
                text = first_value(item, ("step", "instruction", "text", "steps"))
                if text:
                    steps.append(str(text).strip())
            elif str(item).strip():
                steps.append(str(item).strip())
        return steps
    return []


def instructions_from_payload(payload: Mapping[str, object]) -> list[str]:
    data = payload.get("data")
    if isinstance(data, Mapping):
        data = first_value(data, ("instructions", "steps", "Instructions"))
    return _steps_from_value(data) if data is not None else []


def instructions_from_processes(processes: Sequence[str]) -> list[str]:
    """Turn process names into numbered steps."""
    return [
        f"Step {index}: {process.capitalize()}"
        for index, process in enumerate(processes, start=1)
    ]


def taste_from_payload(payload: Mapping[str, object]) -> dict[str, float] | None:
    """Keep the numeric taste dimensions of a taste record."""
    record = nutrition_record(payload)
    if record is None:
        return None
    taste: dict[str, float] = {}
    for key, value in record.items():
        if key in _IDENTITY_KEYS or isinstance(value, bool):
            continue
        amount = to_float(value, default=-1.0)
        if amount >= 0:
            taste[key] = amount
    return taste or None


def flavor_from_payload(payload: Mapping[str, object]) -> dict[str, object] | None:
    record = nutrition_record(payload)
    if record is None:
        return None
    flavor = {key: value for key, value in record.items() if key not in _IDENTITY_KEYS}
    return flavor or None


def list_from_payload(payload: Mapping[str, object], keys: Sequence[str]) -> list[str]:
    """Read a list-like resource such as utensils or processes."""
    data = payload.get("data")
    if isinstance(data, list) and data and isinstance(data[0], Mapping):
        data = first_value(data[0], keys)
    elif isinstance(data, Mapping):
        data = first_value(data, keys)
    return split_list(data)


def ingredient_items_from_payload(payload: Mapping[str, object]) -> list[IngredientItem]:
    records = extract_records(payload)
    if len(records) == 1 and isinstance(records[0].get("ingredients"), list):
        records = [
            item for item in records[0]["ingredients"] if isinstance(item, Mapping)
        ]
    items: list[IngredientItem] = []
    for record in records:
        name = first_value(record, ("ingredient", "name", "ingredient_name"))
        if not name:
            continue
        category = first_value(record, ("category", "Category", "ingredient_category"))
        quantity = first_value(record, ("quantity", "Quantity", "unit"))
        items.append(
            IngredientItem(
                name=str(name).strip(),
                category=_optional_str(category),
                quantity=_optional_str(quantity),
            )
        )
    return items
