"""Static catalog of default ingredients seeded into the database."""

from recipe_generator.domain.foods import DefaultFood

CUSTOM_CATEGORY = "Custom"

DEFAULT_FOODS: dict[str, tuple[str, ...]] = {
    "Beef": (
        "Ground Beef",
        "Ribeye Steak",
        "Sirloin Steak",
        "Beef Tenderloin",
        "Chuck Roast",
        "Brisket",
        "Short Ribs",
        "Flank Steak",
        "Skirt Steak",
        "Beef Shank",
    ),
    "Poultry": (
        "Chicken Breast",
        "Chicken Thighs",
        "Chicken Wings",
        "Whole Chicken",
        "Ground Turkey",
        "Turkey Breast",
        "Duck Breast",
        "Chicken Drumsticks",
        "Turkey Thighs",
        "Chicken Liver",
    ),
    "Pork": (
        "Pork Chops",
        "Bacon",
        "Ham",
        "Pork Belly",
        "Ground Pork",
        "Pork Tenderloin",
        "Pork Ribs",
        "Pork Shoulder",
        "Prosciutto",
        "Pancetta",
    ),
    "Lamb": (
        "Lamb Chops",
        "Leg of Lamb",
        "Lamb Shoulder",
        "Ground Lamb",
        "Lamb Ribs",
        "Lamb Shank",
        "Rack of Lamb",
        "Lamb Loin",
        "Lamb Breast",
        "Lamb Neck",
    ),
    "Seafood": (
        "Salmon",
        "Tuna",
        "Cod",
        "Shrimp",
        "Halibut",
        "Sea Bass",
        "Mussels",
        "Crab",
        "Lobster",
        "Scallops",
        "Trout",
        "Sardines",
        "Tilapia",
        "Oysters",
        "Clams",
    ),
    "Vegetables": (
        # leafy greens
        "Spinach",
        "Kale",
        "Lettuce",
        "Swiss Chard",
        "Arugula",
        "Collard Greens",
        # roots
        "Carrots",
        "Potatoes",
        "Sweet Potatoes",
        "Beets",
        "Parsnips",
        "Turnips",
        # cruciferous
        "Broccoli",
        "Cauliflower",
        "Brussels Sprouts",
        "Cabbage",
        # nightshades
        "Tomatoes",
        "Bell Peppers",
        "Eggplant",
        # alliums
        "Onions",
        "Garlic",
        "Shallots",
        "Leeks",
        "Mushrooms",
        "Zucchini",
        "Cucumber",
        "Asparagus",
        "Green Beans",
        "Peas",
        "Corn",
        "Celery",
    ),
    "Fruits": (
        "Strawberries",
        "Blueberries",
        "Raspberries",
        "Blackberries",
        "Oranges",
        "Lemons",
        "Limes",
        "Grapefruit",
        "Mango",
        "Pineapple",
        "Banana",
        "Papaya",
        "Coconut",
        "Peaches",
        "Plums",
        "Apricots",
        "Cherries",
        "Apples",
        "Pears",
        "Grapes",
        "Kiwi",
        "Pomegranate",
        "Avocado",
        "Figs",
    ),
    "Grains": (
        "White Rice",
        "Brown Rice",
        "Basmati Rice",
        "Jasmine Rice",
        "Wild Rice",
        "Bread",
        "Pasta",
        "Couscous",
        "Bulgur",
        "Quinoa",
        "Oats",
        "Barley",
        "Millet",
        "Buckwheat",
        "Farro",
        "Polenta",
    ),
    "Legumes": (
        "Black Beans",
        "Chickpeas",
        "Lentils",
        "Kidney Beans",
        "Pinto Beans",
        "Navy Beans",
        "Edamame",
        "Split Peas",
        "Fava Beans",
        "Lima Beans",
    ),
    "Dairy": (
        "Cheddar Cheese",
        "Mozzarella",
        "Parmesan",
        "Feta",
        "Gouda",
        "Blue Cheese",
        "Brie",
        "Milk",
        "Heavy Cream",
        "Yogurt",
        "Butter",
        "Sour Cream",
        "Cottage Cheese",
        "Ricotta",
        "Greek Yogurt",
    ),
    "Herbs": (
        "Basil",
        "Parsley",
        "Cilantro",
        "Mint",
        "Rosemary",
        "Thyme",
        "Sage",
        "Oregano",
        "Dill",
        "Chives",
        "Bay Leaves",
        "Tarragon",
    ),
    "Spices": (
        "Black Pepper",
        "Salt",
        "Cumin",
        "Paprika",
        "Cinnamon",
        "Turmeric",
        "Cayenne",
        "Nutmeg",
        "Coriander",
        "Cardamom",
        "Ginger",
        "Cloves",
        "Star Anise",
        "Saffron",
    ),
    "Condiments": (
        "Olive Oil",
        "Soy Sauce",
        "Vinegar",
        "Hot Sauce",
        "Mustard",
        "Mayonnaise",
        "Ketchup",
        "Fish Sauce",
        "Worcestershire Sauce",
        "Honey",
        "Maple Syrup",
        "Sesame Oil",
        "Tahini",
        "Miso Paste",
    ),
    "Nuts_and_Seeds": (
        "Almonds",
        "Walnuts",
        "Cashews",
        "Pistachios",
        "Pecans",
        "Pine Nuts",
        "Sunflower Seeds",
        "Pumpkin Seeds",
        "Sesame Seeds",
        "Chia Seeds",
        "Flax Seeds",
        "Hemp Seeds",
    ),
    CUSTOM_CATEGORY: (),
}


def default_food_items() -> list[DefaultFood]:
    """Flatten the catalog into seedable rows, preserving catalog order."""
    return [
        DefaultFood(name=name, category=category)
        for category, names in DEFAULT_FOODS.items()
        for name in names
    ]
