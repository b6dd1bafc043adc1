"""Flavor-similar foods for each supported food, most similar first."""


def _alt(  # noqa: PLR0913
    name: str,
    cooking_method: str,
    calories: int,
    similarity: int,
    reason: str,
    *,
    fried: bool = False,
) -> dict[str, object]:
    return {
        "name": name,
        "cooking_method": cooking_method,
        "calories": calories,
        "similarity": similarity,
        "reason": reason,
        "fried": fried,
    }


SIMILAR_FOODS: dict[str, list[dict[str, object]]] = {
    "samosa": [
        _alt("kachori", "deep-fried", 320, 88, "Same spiced filling", fried=True),
        _alt("baked samosa", "baked", 190, 92, "Same filling, no deep frying"),
        _alt("aloo tikki", "pan-fried", 210, 80, "Spiced potato patty", fried=True),
        _alt("steamed momos", "steamed", 160, 70, "Stuffed dough, steamed"),
    ],
    "pizza": [
        _alt("whole wheat flatbread", "baked", 210, 85, "Same toppings, whole grain base"),
        _alt("garlic bread", "baked", 300, 75, "Similar baked dough and cheese"),
        _alt("calzone", "baked", 330, 82, "Folded pizza"),
        _alt("bruschetta", "grilled", 150, 68, "Tomato and basil on toast"),
    ],
    "burger": [
        _alt("grilled chicken sandwich", "grilled", 280, 84, "Lean protein in a bun"),
        _alt("veggie burger", "grilled", 240, 80, "Plant based patty"),
        _alt("lettuce wrap burger", "grilled", 210, 78, "Bun swapped for lettuce"),
        _alt("fried chicken burger", "deep-fried", 450, 86, "Crispy patty", fried=True),
    ],
    "french fries": [
        _alt("baked potato wedges", "baked", 160, 90, "Same potato flavor, oven baked"),
        _alt("sweet potato fries", "baked", 150, 82, "More fiber and vitamin A"),
        _alt("hash browns", "pan-fried", 265, 78, "Shredded potato", fried=True),
        _alt("roasted potatoes", "roasted", 170, 85, "Crisp outside, less oil"),
    ],
    "salad": [
        _alt("greek salad", "raw", 140, 88, "Adds feta and olives"),
        _alt("quinoa salad", "boiled", 180, 76, "More protein and fiber"),
        _alt("grilled vegetable salad", "grilled", 130, 80, "Smoky vegetables"),
        _alt("coleslaw", "raw", 190, 65, "Creamy cabbage salad"),
    ],
    "grilled chicken": [
        _alt("tandoori chicken", "roasted", 220, 85, "Spiced and roasted"),
        _alt("chicken tikka", "grilled", 200, 88, "Yogurt marinated"),
        _alt("baked fish", "baked", 150, 70, "Leaner protein"),
        _alt("fried chicken", "deep-fried", 320, 80, "Crispy coating", fried=True),
    ],
    "biryani": [
        _alt("vegetable pulao", "steamed", 210, 85, "Same aromatic rice, fewer calories"),
        _alt("brown rice biryani", "dum cooked", 250, 90, "Whole grain rice"),
        _alt("khichdi", "boiled", 180, 70, "Rice and lentils, easy on the gut"),
        _alt("fried rice", "stir-fried", 333, 72, "Rice with vegetables", fried=True),
    ],
    "dal": [
        _alt("sambar", "boiled", 150, 82, "Lentils with vegetables"),
        _alt("rajma", "boiled", 210, 75, "Kidney bean curry"),
        _alt("chana masala", "boiled", 230, 78, "Chickpea curry"),
        _alt("dal makhani", "slow cooked", 280, 85, "Creamier black lentils"),
    ],
    "idli": [
        _alt("rava idli", "steamed", 130, 88, "Semolina version"),
        _alt("dhokla", "steamed", 150, 72, "Steamed gram flour cake"),
        _alt("appam", "pan-cooked", 120, 70, "Fermented rice pancake"),
        _alt("medu vada", "deep-fried", 260, 80, "Lentil fritter", fried=True),
    ],
    "dosa": [
        _alt("ragi dosa", "pan-cooked", 140, 86, "Finger millet, more fiber"),
        _alt("idli", "steamed", 116, 80, "Same batter, steamed"),
        _alt("uttapam", "pan-cooked", 180, 84, "Thicker with vegetables"),
        _alt("masala dosa", "pan-fried", 260, 90, "Potato filling", fried=True),
    ],
    "fried rice": [
        _alt("steamed rice with stir veggies", "steamed", 220, 78, "Same flavors, less oil"),
        _alt("vegetable pulao", "steamed", 210, 75, "Aromatic one pot rice"),
        _alt("cauliflower fried rice", "stir-fried", 150, 85, "Low carb", fried=True),
        _alt("brown rice bowl", "boiled", 230, 72, "Whole grain base"),
    ],
    "noodles": [
        _alt("soba noodle soup", "boiled", 190, 80, "Buckwheat noodles in broth"),
        _alt("zucchini noodles", "raw", 60, 65, "Vegetable noodles"),
        _alt("rice noodle salad", "boiled", 210, 72, "Light and fresh"),
        _alt("chow mein", "stir-fried", 350, 88, "Crispy noodles", fried=True),
    ],
    "pasta": [
        _alt("whole wheat pasta", "boiled", 220, 90, "More fiber"),
        _alt("zucchini noodles", "raw", 60, 70, "Vegetable based"),
        _alt("baked pasta primavera", "baked", 240, 82, "Loaded with vegetables"),
        _alt("lasagna", "baked", 330, 80, "Layered pasta"),
    ],
    "paneer tikka": [
        _alt("tofu tikka", "grilled", 180, 85, "Lower fat soy protein"),
        _alt("grilled mushrooms", "grilled", 90, 70, "Meaty texture, few calories"),
        _alt("paneer bhurji", "pan-cooked", 280, 78, "Scrambled paneer"),
        _alt("paneer pakora", "deep-fried", 340, 80, "Battered paneer", fried=True),
    ],
    "tandoori chicken": [
        _alt("grilled chicken", "grilled", 165, 85, "Leaner preparation"),
        _alt("chicken tikka", "grilled", 200, 90, "Boneless and spiced"),
        _alt("tandoori fish", "roasted", 170, 78, "Omega-3 rich"),
        _alt("chicken 65", "deep-fried", 330, 75, "Spicy fried chicken", fried=True),
    ],
    "ice cream": [
        _alt("frozen yogurt", "frozen", 130, 85, "Less fat, probiotics"),
        _alt("fruit sorbet", "frozen", 110, 78, "Dairy free"),
        _alt("banana nice cream", "blended", 100, 80, "Just frozen bananas"),
        _alt("kulfi", "frozen", 230, 82, "Dense milk dessert"),
    ],
    "cake": [
        _alt("banana bread", "baked", 200, 78, "Natural sweetness"),
        _alt("oat muffin", "baked", 180, 75, "Whole grain"),
        _alt("fruit tart", "baked", 220, 70, "Fruit forward"),
        _alt("doughnut", "deep-fried", 300, 72, "Sweet fried dough", fried=True),
    ],
    "oatmeal": [
        _alt("overnight oats", "raw", 170, 90, "No cooking needed"),
        _alt("quinoa porridge", "boiled", 180, 75, "Complete protein"),
        _alt("chia pudding", "raw", 160, 72, "Omega-3 and fiber"),
        _alt("granola", "baked", 250, 80, "Crunchy oats"),
    ],
    "smoothie": [
        _alt("green smoothie", "blended", 120, 85, "Adds leafy greens"),
        _alt("protein shake", "blended", 160, 75, "Higher protein"),
        _alt("fruit bowl", "raw", 110, 70, "Whole fruit keeps fiber"),
        _alt("milkshake", "blended", 350, 80, "Ice cream based"),
    ],
    "sushi": [
        _alt("sashimi", "raw", 130, 85, "Fish without the rice"),
        _alt("poke bowl", "raw", 300, 80, "Fish over rice with vegetables"),
        _alt("brown rice sushi", "raw", 190, 90, "Whole grain rice"),
        _alt("tempura roll", "deep-fried", 360, 82, "Battered filling", fried=True),
    ],
}
