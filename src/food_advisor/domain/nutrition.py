"""Nutrition and recipe domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NutritionProfile:
    """Per-serving nutrition values."""

    calories: float = 0
    carbs: float = 0
    protein: float = 0
    fat: float = 0
    fiber: float = 0
    sugar: float = 0
    sodium: float = 0
    source: str = "unknown"


@dataclass(frozen=True)
class NutritionFacts:
    """Entry of the bundled nutrition-by-name dataset."""

    name: str
    calories: float
    carbs: float
    protein: float
    fat: float
    fiber: float
    sugar: float
    sodium: float
    fried: bool = False
    refined: bool = False

    def to_profile(self, source: str) -> NutritionProfile:
        """Drop the preparation flags and keep the numbers."""
        return NutritionProfile(
            calories=self.calories,
            carbs=self.carbs,
            protein=self.protein,
            fat=self.fat,
            fiber=self.fiber,
            sugar=self.sugar,
            sodium=self.sodium,
            source=source,
        )


@dataclass(frozen=True)
class Recipe:
    """Recipe with its per-serving nutrition."""

    title: str
    nutrition: NutritionProfile
    id: str | None = None
    region: str | None = None
    cooking_method: str = ""
    ingredients: tuple[str, ...] = ()
    utensils: tuple[str, ...] = ()
    processes: tuple[str, ...] = ()
    servings: int = 1
    category: str | None = None
    prep_time: str | None = None
    total_time: str | None = None
    description: str | None = None
    source: str = "RecipeDB API"

    @property
    def is_fried(self) -> bool:
        method = self.cooking_method.lower()
        return "fried" in method or "fry" in method


@dataclass(frozen=True)
class RecipeSummary:
    """Single recipe returned by a search."""

    id: str | None
    title: str
    region: str | None = None
    cooking_method: str = ""
    servings: int = 1
    total_time: str | None = None
    calories: float = 0
    carbs: float = 0
    protein: float = 0
    fat: float = 0
    ingredients: tuple[str, ...] = ()
    utensils: tuple[str, ...] = ()
    processes: tuple[str, ...] = ()
    source: str = "RecipeDB API"


@dataclass(frozen=True)
class IngredientItem:
    """Ingredient of a recipe tagged with its category."""

    name: str
    category: str | None = None
    quantity: str | None = None


@dataclass
class RecipeDetails:
    """Joined result of the per-recipe detail lookups."""

    recipe_id: str
    nutrition: dict[str, object] | None = None
    instructions: list[str] | None = None
    taste: dict[str, float] | None = None
    flavor: dict[str, object] | None = None
    utensils: list[str] | None = None
    processes: list[str] | None = None
    ingredients: list[IngredientItem] | None = field(default=None)
