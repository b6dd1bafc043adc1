"""Map image classifier labels onto the supported foods.

The classifier is a general-purpose vision model, so besides synonyms the
table also covers labels it commonly produces for food it does not know
(e.g. "butternut_squash" for a samosa). Partial matching walks the table in
insertion order and the first hit wins, so entry order matters.
"""

import re

LABEL_MAP: dict[str, str] = {
    # Direct matches
    "pizza": "pizza",
    "cheeseburger": "burger",
    "hamburger": "burger",
    "french_loaf": "burger",
    "bagel": "burger",
    "hotdog": "burger",
    "hot_dog": "burger",
    "french fries": "french fries",
    "ice_cream": "ice cream",
    "ice cream": "ice cream",
    "ice_lolly": "ice cream",
    "chocolate_sauce": "cake",
    "trifle": "cake",
    # Misclassifications for Indian food
    "butternut_squash": "samosa",
    "butternut squash": "samosa",
    "acorn_squash": "samosa",
    "acorn squash": "samosa",
    "bell_pepper": "samosa",
    "mushroom": "samosa",
    "cucumber": "salad",
    "zucchini": "salad",
    "broccoli": "salad",
    "cauliflower": "salad",
    "head_cabbage": "salad",
    "artichoke": "salad",
    "corn": "biryani",
    "ear": "biryani",
    "banana": "smoothie",
    "strawberry": "smoothie",
    "orange": "smoothie",
    "lemon": "smoothie",
    "pineapple": "smoothie",
    "pomegranate": "smoothie",
    "fig": "smoothie",
    "custard_apple": "smoothie",
    "jackfruit": "smoothie",
    "mango": "smoothie",
    # Classifier dish labels
    "carbonara": "pasta",
    "spaghetti": "pasta",
    "spaghetti_squash": "pasta",
    "meat_loaf": "burger",
    "meatloaf": "burger",
    "burrito": "burger",
    "guacamole": "salad",
    "caesar_salad": "salad",
    "plate": "biryani",
    "potpie": "biryani",
    "pot_pie": "biryani",
    "consomme": "dal",
    "soup_bowl": "dal",
    # Indian food
    "samosa": "samosa",
    "dosa": "dosa",
    "idli": "idli",
    "biryani": "biryani",
    "naan": "biryani",
    "dal": "dal",
    "dhal": "dal",
    "curry": "dal",
    "masala": "paneer tikka",
    # General categories
    "hen": "grilled chicken",
    "rooster": "tandoori chicken",
    "drumstick": "tandoori chicken",
    "pretzel": "noodles",
    "ramen": "noodles",
    "noodles": "noodles",
    "ladle": "dal",
    "wok": "fried rice",
    "frying_pan": "fried rice",
    "spatula": "dosa",
    "mixing_bowl": "oatmeal",
    # Breakfast
    "waffle": "dosa",
    "pancake": "dosa",
    "oatmeal": "oatmeal",
    "porridge": "oatmeal",
    "dough": "pizza",
    "bakery": "cake",
    # Rice and noodles
    "fried_rice": "fried rice",
    "fried rice": "fried rice",
    "rice": "biryani",
    "sushi": "sushi",
    # Kitchen and table objects
    "tray": "biryani",
    "dining_table": "biryani",
    "restaurant": "biryani",
    "menu": "biryani",
    "wooden_spoon": "dal",
    "crock_pot": "dal",
    "dutch_oven": "biryani",
    "caldron": "dal",
    "mortar": "paneer tikka",
}

SUPPORTED_FOODS: tuple[str, ...] = (
    "samosa",
    "pizza",
    "burger",
    "french fries",
    "salad",
    "grilled chicken",
    "biryani",
    "dal",
    "idli",
    "dosa",
    "fried rice",
    "noodles",
    "pasta",
    "paneer tikka",
    "tandoori chicken",
    "ice cream",
    "cake",
    "oatmeal",
    "smoothie",
    "sushi",
)

_SEPARATORS = re.compile(r"[_\s]+")


def map_label(label: str) -> str:
    """Map a raw classifier label to a known food name."""
    normalized = _SEPARATORS.sub("_", label.lower().strip())
    if not normalized:
        return ""

    if normalized in LABEL_MAP:
        return LABEL_MAP[normalized]

    with_spaces = normalized.replace("_", " ")
    if with_spaces in LABEL_MAP:
        return LABEL_MAP[with_spaces]

    for key, food in LABEL_MAP.items():
        if key in normalized or normalized in key:
            return food

    return with_spaces


def is_known_food(label: str) -> bool:
    """Return true when the label maps to a supported food."""
    return map_label(label) in SUPPORTED_FOODS


def supported_foods() -> list[str]:
    return list(SUPPORTED_FOODS)
