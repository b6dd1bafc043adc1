"""Sample recipe API records served when the recipe API is unreachable.

Records use the same field names as the remote API so they go through the
regular payload normalization.
"""

SAMPLE_RECIPES: list[dict[str, object]] = [
    {
        "Recipe_id": "2610",
        "Recipe_title": "Masala Dosa",
        "Region": "Indian Subcontinent",
        "servings": "4",
        "total_time": "45",
        "Calories": "1040",
        "Energy (kcal)": "1040",
        "Carbohydrate, by difference (g)": "156",
        "Protein (g)": "24",
        "Total lipid (fat) (g)": "36",
        "Fiber, total dietary (g)": "12",
        "Sugars, total (g)": "8",
        "Sodium, Na (mg)": "1200",
        "Fatty acids, total saturated (g)": "6",
        "Processes": "soak||grind||ferment||spread||cook",
        "Utensils": "griddle||ladle||blender",
        "ingredients": ["rice", "urad dal", "potatoes", "mustard seeds", "curry leaves"],
    },
    {
        "Recipe_id": "2611",
        "Recipe_title": "Vegetable Biryani",
        "Region": "Indian Subcontinent",
        "servings": "6",
        "total_time": "75",
        "Calories": "1620",
        "Energy (kcal)": "1620",
        "Carbohydrate, by difference (g)": "252",
        "Protein (g)": "42",
        "Total lipid (fat) (g)": "48",
        "Fiber, total dietary (g)": "24",
        "Sugars, total (g)": "18",
        "Sodium, Na (mg)": "2700",
        "Fatty acids, total saturated (g)": "12",
        "Processes": "soak||fry||layer||steam",
        "Utensils": "heavy pot||strainer||knife",
        "ingredients": ["basmati rice", "carrots", "beans", "yogurt", "saffron"],
    },
    {
        "Recipe_id": "2612",
        "Recipe_title": "Grilled Chicken Salad",
        "Region": "North American",
        "servings": "2",
        "total_time": "30",
        "Calories": "640",
        "Energy (kcal)": "640",
        "Carbohydrate, by difference (g)": "24",
        "Protein (g)": "62",
        "Total lipid (fat) (g)": "30",
        "Fiber, total dietary (g)": "10",
        "Sugars, total (g)": "8",
        "Sodium, Na (mg)": "540",
        "Fatty acids, total saturated (g)": "6",
        "Processes": "marinate||toss||grill",
        "Utensils": "grill pan||salad bowl||tongs",
        "ingredients": ["chicken breast", "lettuce", "cherry tomatoes", "olive oil"],
    },
    {
        "Recipe_id": "2613",
        "Recipe_title": "Margherita Pizza",
        "Region": "Italian",
        "servings": "4",
        "total_time": "40",
        "Calories": "1140",
        "Energy (kcal)": "1140",
        "Carbohydrate, by difference (g)": "144",
        "Protein (g)": "48",
        "Total lipid (fat) (g)": "40",
        "Fiber, total dietary (g)": "8",
        "Sugars, total (g)": "16",
        "Sodium, Na (mg)": "2560",
        "Fatty acids, total saturated (g)": "18",
        "Processes": "knead||proof||spread||bake",
        "Utensils": "oven||pizza stone||rolling pin",
        "ingredients": ["pizza dough", "tomato sauce", "mozzarella", "basil"],
    },
    {
        "Recipe_id": "2614",
        "Recipe_title": "Oatmeal with Berries",
        "Region": "North American",
        "servings": "1",
        "total_time": "10",
        "Calories": "220",
        "Energy (kcal)": "220",
        "Carbohydrate, by difference (g)": "38",
        "Protein (g)": "7",
        "Total lipid (fat) (g)": "4",
        "Fiber, total dietary (g)": "6",
        "Sugars, total (g)": "9",
        "Sodium, Na (mg)": "110",
        "Fatty acids, total saturated (g)": "1",
        "Processes": "simmer||stir||boil",
        "Utensils": "saucepan||spoon",
        "ingredients": ["rolled oats", "milk", "blueberries", "honey"],
    },
    {
        "Recipe_id": "2615",
        "Recipe_title": "Pasta Primavera",
        "Region": "Italian",
        "servings": "4",
        "total_time": "35",
        "Calories": "1280",
        "Energy (kcal)": "1280",
        "Carbohydrate, by difference (g)": "180",
        "Protein (g)": "44",
        "Total lipid (fat) (g)": "40",
        "Fiber, total dietary (g)": "16",
        "Sugars, total (g)": "20",
        "Sodium, Na (mg)": "1600",
        "Fatty acids, total saturated (g)": "10",
        "Processes": "boil||saute||toss",
        "Utensils": "pot||colander||skillet",
        "ingredients": ["penne", "zucchini", "bell peppers", "parmesan", "olive oil"],
    },
]
