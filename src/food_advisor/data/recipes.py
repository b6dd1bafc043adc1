"""Local recipe records used when the recipe API has no match."""

LOCAL_RECIPES: dict[str, dict[str, object]] = {
    "samosa": {
        "name": "Punjabi Samosa",
        "cooking_method": "deep-fried",
        "cuisine": "Indian",
        "category": "Snack",
        "prep_time": "45 min",
        "ingredients": ["all-purpose flour", "potatoes", "green peas", "cumin", "oil"],
        "description": "Crisp pastry filled with spiced potatoes and peas.",
    },
    "pizza": {
        "name": "Margherita Pizza",
        "cooking_method": "baked",
        "cuisine": "Italian",
        "category": "Main Course",
        "prep_time": "30 min",
        "ingredients": ["pizza dough", "tomato sauce", "mozzarella", "basil"],
        "description": "Thin crust topped with tomato, mozzarella and basil.",
    },
    "burger": {
        "name": "Classic Beef Burger",
        "cooking_method": "grilled",
        "cuisine": "American",
        "category": "Main Course",
        "prep_time": "25 min",
        "ingredients": ["burger bun", "beef patty", "cheddar", "lettuce", "tomato"],
        "description": "Grilled beef patty in a soft bun with cheese.",
    },
    "french fries": {
        "name": "French Fries",
        "cooking_method": "deep-fried",
        "cuisine": "Belgian",
        "category": "Side",
        "prep_time": "30 min",
        "ingredients": ["potatoes", "vegetable oil", "salt"],
        "description": "Potato batons fried until golden.",
    },
    "salad": {
        "name": "Garden Salad",
        "cooking_method": "raw",
        "cuisine": "Continental",
        "category": "Salad",
        "prep_time": "10 min",
        "ingredients": ["lettuce", "cucumber", "tomato", "olive oil", "lemon"],
        "description": "Fresh greens with a light lemon dressing.",
    },
    "grilled chicken": {
        "name": "Herb Grilled Chicken",
        "cooking_method": "grilled",
        "cuisine": "Continental",
        "category": "Main Course",
        "prep_time": "35 min",
        "ingredients": ["chicken breast", "garlic", "rosemary", "olive oil"],
        "description": "Chicken breast marinated in herbs and grilled.",
    },
    "biryani": {
        "name": "Hyderabadi Chicken Biryani",
        "cooking_method": "dum cooked",
        "cuisine": "Indian",
        "category": "Main Course",
        "prep_time": "90 min",
        "ingredients": ["basmati rice", "chicken", "yogurt", "fried onions", "saffron"],
        "description": "Layered rice and chicken slow cooked with spices.",
    },
    "dal": {
        "name": "Dal Tadka",
        "cooking_method": "boiled",
        "cuisine": "Indian",
        "category": "Main Course",
        "prep_time": "40 min",
        "ingredients": ["toor dal", "turmeric", "cumin", "garlic", "ghee"],
        "description": "Yellow lentils tempered with cumin and garlic.",
    },
    "idli": {
        "name": "Idli",
        "cooking_method": "steamed",
        "cuisine": "South Indian",
        "category": "Breakfast",
        "prep_time": "20 min",
        "ingredients": ["rice", "urad dal", "salt"],
        "description": "Steamed fermented rice and lentil cakes.",
    },
    "dosa": {
        "name": "Plain Dosa",
        "cooking_method": "pan-cooked",
        "cuisine": "South Indian",
        "category": "Breakfast",
        "prep_time": "20 min",
        "ingredients": ["rice", "urad dal", "fenugreek", "oil"],
        "description": "Thin fermented crepe cooked on a griddle.",
    },
    "fried rice": {
        "name": "Vegetable Fried Rice",
        "cooking_method": "stir-fried",
        "cuisine": "Chinese",
        "category": "Main Course",
        "prep_time": "25 min",
        "ingredients": ["rice", "carrots", "beans", "soy sauce", "oil"],
        "description": "Rice tossed with vegetables on high heat.",
    },
    "noodles": {
        "name": "Hakka Noodles",
        "cooking_method": "stir-fried",
        "cuisine": "Chinese",
        "category": "Main Course",
        "prep_time": "25 min",
        "ingredients": ["noodles", "cabbage", "capsicum", "soy sauce", "oil"],
        "description": "Wok tossed noodles with crunchy vegetables.",
    },
    "pasta": {
        "name": "Pasta Arrabbiata",
        "cooking_method": "boiled",
        "cuisine": "Italian",
        "category": "Main Course",
        "prep_time": "25 min",
        "ingredients": ["penne", "tomatoes", "garlic", "chili flakes", "olive oil"],
        "description": "Penne in a spicy tomato sauce.",
    },
    "paneer tikka": {
        "name": "Paneer Tikka",
        "cooking_method": "grilled",
        "cuisine": "Indian",
        "category": "Starter",
        "prep_time": "40 min",
        "ingredients": ["paneer", "yogurt", "bell peppers", "onion", "garam masala"],
        "description": "Marinated cottage cheese cubes charred in a tandoor.",
    },
    "tandoori chicken": {
        "name": "Tandoori Chicken",
        "cooking_method": "roasted",
        "cuisine": "Indian",
        "category": "Starter",
        "prep_time": "60 min",
        "ingredients": ["chicken legs", "yogurt", "kashmiri chili", "lemon", "ginger"],
        "description": "Yogurt marinated chicken roasted in a clay oven.",
    },
    "ice cream": {
        "name": "Vanilla Ice Cream",
        "cooking_method": "churned",
        "cuisine": "Continental",
        "category": "Dessert",
        "prep_time": "30 min",
        "ingredients": ["milk", "cream", "sugar", "vanilla"],
        "description": "Frozen custard flavored with vanilla.",
    },
    "cake": {
        "name": "Chocolate Cake",
        "cooking_method": "baked",
        "cuisine": "Continental",
        "category": "Dessert",
        "prep_time": "60 min",
        "ingredients": ["flour", "cocoa", "sugar", "butter", "eggs"],
        "description": "Moist chocolate sponge.",
    },
    "oatmeal": {
        "name": "Oatmeal Porridge",
        "cooking_method": "boiled",
        "cuisine": "Continental",
        "category": "Breakfast",
        "prep_time": "10 min",
        "ingredients": ["rolled oats", "milk", "cinnamon", "banana"],
        "description": "Oats simmered in milk.",
    },
    "smoothie": {
        "name": "Banana Berry Smoothie",
        "cooking_method": "blended",
        "cuisine": "Continental",
        "category": "Beverage",
        "prep_time": "5 min",
        "ingredients": ["banana", "strawberries", "yogurt", "honey"],
        "description": "Blended fruit with yogurt.",
    },
    "sushi": {
        "name": "Salmon Maki Roll",
        "cooking_method": "raw",
        "cuisine": "Japanese",
        "category": "Main Course",
        "prep_time": "45 min",
        "ingredients": ["sushi rice", "nori", "salmon", "rice vinegar"],
        "description": "Rice and salmon rolled in seaweed.",
    },
}
