"""Per-serving nutrition for the supported foods."""

NUTRITION_FACTS: dict[str, dict[str, object]] = {
    "samosa": {
        "calories": 308, "carbs": 32, "protein": 5, "fat": 18, "fiber": 3,
        "sugar": 2, "sodium": 420, "fried": True, "refined": True,
    },
    "pizza": {
        "calories": 285, "carbs": 36, "protein": 12, "fat": 10, "fiber": 2,
        "sugar": 4, "sodium": 640, "fried": False, "refined": True,
    },
    "burger": {
        "calories": 354, "carbs": 29, "protein": 17, "fat": 17, "fiber": 1,
        "sugar": 6, "sodium": 497, "fried": False, "refined": True,
    },
    "french fries": {
        "calories": 365, "carbs": 48, "protein": 4, "fat": 17, "fiber": 4,
        "sugar": 0, "sodium": 246, "fried": True, "refined": False,
    },
    "salad": {
        "calories": 120, "carbs": 10, "protein": 3, "fat": 7, "fiber": 4,
        "sugar": 5, "sodium": 180, "fried": False, "refined": False,
    },
    "grilled chicken": {
        "calories": 165, "carbs": 0, "protein": 31, "fat": 4, "fiber": 0,
        "sugar": 0, "sodium": 74, "fried": False, "refined": False,
    },
    "biryani": {
        "calories": 290, "carbs": 38, "protein": 12, "fat": 10, "fiber": 2,
        "sugar": 2, "sodium": 560, "fried": False, "refined": True,
    },
    "dal": {
        "calories": 180, "carbs": 26, "protein": 12, "fat": 4, "fiber": 8,
        "sugar": 2, "sodium": 380, "fried": False, "refined": False,
    },
    "idli": {
        "calories": 116, "carbs": 24, "protein": 4, "fat": 1, "fiber": 1,
        "sugar": 0, "sodium": 230, "fried": False, "refined": False,
    },
    "dosa": {
        "calories": 168, "carbs": 29, "protein": 4, "fat": 4, "fiber": 1,
        "sugar": 1, "sodium": 260, "fried": False, "refined": False,
    },
    "fried rice": {
        "calories": 333, "carbs": 42, "protein": 8, "fat": 14, "fiber": 1,
        "sugar": 2, "sodium": 820, "fried": True, "refined": True,
    },
    "noodles": {
        "calories": 310, "carbs": 45, "protein": 8, "fat": 11, "fiber": 2,
        "sugar": 3, "sodium": 890, "fried": True, "refined": True,
    },
    "pasta": {
        "calories": 260, "carbs": 40, "protein": 9, "fat": 7, "fiber": 2,
        "sugar": 5, "sodium": 430, "fried": False, "refined": True,
    },
    "paneer tikka": {
        "calories": 260, "carbs": 8, "protein": 18, "fat": 17, "fiber": 2,
        "sugar": 4, "sodium": 480, "fried": False, "refined": False,
    },
    "tandoori chicken": {
        "calories": 220, "carbs": 4, "protein": 27, "fat": 10, "fiber": 1,
        "sugar": 2, "sodium": 530, "fried": False, "refined": False,
    },
    "ice cream": {
        "calories": 207, "carbs": 24, "protein": 4, "fat": 11, "fiber": 1,
        "sugar": 21, "sodium": 80, "fried": False, "refined": True,
    },
    "cake": {
        "calories": 350, "carbs": 50, "protein": 4, "fat": 15, "fiber": 1,
        "sugar": 32, "sodium": 300, "fried": False, "refined": True,
    },
    "oatmeal": {
        "calories": 158, "carbs": 27, "protein": 6, "fat": 3, "fiber": 4,
        "sugar": 1, "sodium": 115, "fried": False, "refined": False,
    },
    "smoothie": {
        "calories": 180, "carbs": 36, "protein": 5, "fat": 2, "fiber": 4,
        "sugar": 26, "sodium": 60, "fried": False, "refined": False,
    },
    "sushi": {
        "calories": 200, "carbs": 38, "protein": 9, "fat": 1, "fiber": 1,
        "sugar": 6, "sodium": 500, "fried": False, "refined": True,
    },
}
