"""Static lookup tables shared by classification, location and grouping.

Every table here is ordered: fuzzy lookups walk entries in insertion order and
the first containment hit wins.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

FRESH = "fresh"
PANTRY = "pantry"
BREAKFAST_SNACKS = "breakfast-snacks"
BEVERAGES = "beverages"
HOUSEHOLD = "household"

DEFAULT_CATEGORY = PANTRY
DEFAULT_AISLE = "5"


class OnNoMatch(StrEnum):
    """What to do when no store location entry matches an item."""

    GUESS_DEFAULT = "guess_default"
    LEAVE_UNSET = "leave_unset"


@dataclass(frozen=True)
class CategoryInfo:
    """Display information for a high-level category."""

    key: str
    name: str
    color: str
    light_color: str
    border_color: str


CATEGORIES: dict[str, CategoryInfo] = {
    FRESH: CategoryInfo(FRESH, "Fresh Foods", "#4CAF50", "#E8F5E9", "#C8E6C9"),
    PANTRY: CategoryInfo(PANTRY, "Pantry Staples", "#FFC107", "#FFF8E1", "#FFECB3"),
    BREAKFAST_SNACKS: CategoryInfo(
        BREAKFAST_SNACKS, "Breakfast & Snacks", "#FF9800", "#FFF3E0", "#FFE0B2"
    ),
    BEVERAGES: CategoryInfo(BEVERAGES, "Beverages", "#2196F3", "#E3F2FD", "#BBDEFB"),
    HOUSEHOLD: CategoryInfo(
        HOUSEHOLD, "Household & Personal Care", "#9C27B0", "#F3E5F5", "#E1BEE7"
    ),
}

AISLE_CATEGORIES: dict[str, str] = {
    "Produce Dept": FRESH,
    "Meat Dept": FRESH,
    "Deli/Fish Dept": FRESH,
    "Bakery (Front Corner)": FRESH,
    "Bakery Case": FRESH,
    "Cheese Case": FRESH,
    "1": FRESH,
    "2": PANTRY,
    "4": PANTRY,
    "5": PANTRY,
    "6": PANTRY,
    "9": PANTRY,
    "3": BREAKFAST_SNACKS,
    "8": BREAKFAST_SNACKS,
    "15": BREAKFAST_SNACKS,
    "16": BREAKFAST_SNACKS,
    "17": BREAKFAST_SNACKS,
    "7": BEVERAGES,
    "14": BEVERAGES,
    "Freezer Wall": FRESH,
    "10": HOUSEHOLD,
    "11": HOUSEHOLD,
    "12": HOUSEHOLD,
    "13": HOUSEHOLD,
}

ITEM_CATEGORIES: dict[str, str] = {
    "Produce": FRESH,
    "Meat": FRESH,
    "Seafood": FRESH,
    "Bakery": FRESH,
    "Dairy": FRESH,
    "Deli": FRESH,
    "Cheese": FRESH,
    "Eggs": FRESH,
    "Milk": FRESH,
    "Yogurt": FRESH,
    "Butter": FRESH,
    "Canned Goods": PANTRY,
    "Pasta": PANTRY,
    "Rice": PANTRY,
    "Beans": PANTRY,
    "Baking": PANTRY,
    "Spices": PANTRY,
    "Condiments": PANTRY,
    "Sauces": PANTRY,
    "Oil": PANTRY,
    "Vinegar": PANTRY,
    "Soup": PANTRY,
    "Canned Vegetables": PANTRY,
    "Canned Fruit": PANTRY,
    "Canned Fish": PANTRY,
    "Canned Meat": PANTRY,
    "Cereal": BREAKFAST_SNACKS,
    "Breakfast": BREAKFAST_SNACKS,
    "Snacks": BREAKFAST_SNACKS,
    "Chips": BREAKFAST_SNACKS,
    "Crackers": BREAKFAST_SNACKS,
    "Cookies": BREAKFAST_SNACKS,
    "Bread": BREAKFAST_SNACKS,
    "Granola": BREAKFAST_SNACKS,
    "Nuts": BREAKFAST_SNACKS,
    "Dried Fruit": BREAKFAST_SNACKS,
    "Candy": BREAKFAST_SNACKS,
    "Popcorn": BREAKFAST_SNACKS,
    "Beverages": BEVERAGES,
    "Soda": BEVERAGES,
    "Juice": BEVERAGES,
    "Tea": BEVERAGES,
    "Coffee": BEVERAGES,
    "Water": BEVERAGES,
    "Drink Mix": BEVERAGES,
    "Household": HOUSEHOLD,
    "Cleaning": HOUSEHOLD,
    "Paper Products": HOUSEHOLD,
    "Personal Care": HOUSEHOLD,
    "Health": HOUSEHOLD,
    "Baby": HOUSEHOLD,
    "Pet": HOUSEHOLD,
    "Laundry": HOUSEHOLD,
    "Bathroom": HOUSEHOLD,
    "Kitchen Supplies": HOUSEHOLD,
}

NAME_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        FRESH,
        (
            "fresh",
            "produce",
            "meat",
            "dairy",
            "milk",
            "cheese",
            "yogurt",
            "eggs",
            "butter",
            "bakery",
        ),
    ),
    (
        PANTRY,
        (
            "canned",
            "pasta",
            "rice",
            "beans",
            "baking",
            "spice",
            "condiment",
            "sauce",
            "oil",
            "vinegar",
            "soup",
        ),
    ),
    (
        BREAKFAST_SNACKS,
        (
            "cereal",
            "breakfast",
            "snack",
            "chips",
            "crackers",
            "cookies",
            "bread",
            "granola",
            "nuts",
            "dried fruit",
            "candy",
            "popcorn",
        ),
    ),
    (
        BEVERAGES,
        ("beverage", "soda", "juice", "tea", "coffee", "water", "drink"),
    ),
    (
        HOUSEHOLD,
        (
            "household",
            "cleaning",
            "paper",
            "personal",
            "health",
            "baby",
            "pet",
            "laundry",
            "bathroom",
            "kitchen supplies",
        ),
    ),
)

DEFAULT_AISLES: dict[str, str] = {
    FRESH: "Produce Dept",
    PANTRY: "5",
    BREAKFAST_SNACKS: "3",
    BEVERAGES: "7",
    HOUSEHOLD: "12",
}

# Bellingham Market Basket #54 shopper's guide.
_SHOPPER_GUIDE: dict[str, str] = {
    "Bread Crumbs": "1",
    "Cottage Cheese": "1",
    "Shake & Bake": "1",
    "Soy Sauce": "1",
    "Barbecue Sauce": "2",
    "Beans: Baked": "2",
    "Canning Supplies": "2",
    "Cherries: Jar": "2",
    "Chili Sauce": "2",
    "Clams: Canned/Minced/Juice": "2",
    "Croutons": "2",
    "Escargot": "2",
    "Fish: Canned": "2",
    "Ham Glaze": "2",
    "Ketchup": "2",
    "Meat: Canned": "2",
    "Mexican Food": "2",
    "Mustard": "2",
    "Olives": "2",
    "Salad Dressing": "2",
    "Sardines: Canned": "2",
    "Sauce: BBQ/Chili/Steak": "2",
    "Sauce: Tabasco/Tartar": "2",
    "Spam": "2",
    "Taco: Sauce/Shells": "2",
    "Tuna: Canned": "2",
    "Cereal": "3",
    "Granola Bars": "3",
    "Grits": "3",
    "Pop Tarts": "3",
    "Rice Cakes": "3",
    "Cheese: Grated Parmesan": "4",
    "Hamburger Helper": "4",
    "Mac & Cheese: Packaged": "4",
    "Pasta": "4",
    "Rice: Packaged": "4",
    "Spaghetti Sauce": "4",
    "Tomato: Canned": "4",
    "Tomato: Paste": "4",
    "Tomato: Sauce": "4",
    "Baking Needs": "5",
    "Cake Mix": "5",
    "Flour": "5",
    "Food Coloring": "5",
    "Jello": "5",
    "Milk: Evaporated/Powdered": "5",
    "Nuts: Baking": "5",
    "Pie Filling": "5",
    "Pudding Mix": "5",
    "Salt": "5",
    "Spices": "5",
    "Sugar": "5",
    "Tea Bags": "5",
    "Beans: Dry": "6",
    "Bouillon Cubes": "6",
    "Butter Buds": "6",
    "Juice": "6",
    "Mushrooms: Canned": "6",
    "Potato: Canned/Instant": "6",
    "Vegetables: Canned": "6",
    "Iced Tea Mix": "7",
    "Kool Aid": "7",
    "Nuts: Snack Nuts": "8",
    "Popping Corn": "8",
    "Potato Chips": "8",
    "Applesauce": "9",
    "Bisquick": "9",
    "Candy": "9",
    "Chinese Food: Canned": "9",
    "Chowder: Clam/Corn/Potato": "9",
    "Cranberry Sauce": "9",
    "Fruit: Canned": "9",
    "Honey": "9",
    "Jam & Jelly": "9",
    "Kosher Foods": "9",
    "Molasses": "9",
    "Pancake Mix": "9",
    "Peanut Butter": "9",
    "Soup": "9",
    "Baby Food": "10",
    "Baby Powder": "10",
    "Batteries": "10",
    "Cold Remedies": "10",
    "Deodorant": "10",
    "Diapers": "10",
    "Electrical Supplies": "10",
    "Eye Care": "10",
    "Feminine Needs": "10",
    "Laxative": "10",
    "Lightbulbs": "10",
    "Mouthwash": "10",
    "Rubbing Alcohol": "10",
    "Sanitary Napkins": "10",
    "Shaving Needs": "10",
    "Shoe Care": "10",
    "Soap: Bar/Body/Hand/Liquid": "10",
    "Toothbrushes/Toothpaste": "10",
    "Facial Tissue": "11",
    "Kitchen Gadgets": "11",
    "Napkins": "11",
    "Paper: Cups/Plates": "11",
    "Paper: Towels": "11",
    "Plasticware": "11",
    "Stationery": "11",
    "Straws": "11",
    "Tissue: Bath": "11",
    "Tissue: Facial": "11",
    "Toothpicks": "11",
    "Air Freshener": "12",
    "Ammonia": "12",
    "Bleach": "12",
    "Detergent: Dish/Dishwasher": "12",
    "Detergent: Laundry": "12",
    "Disinfectant Spray": "12",
    "Drain Cleaner": "12",
    "Dye: Fabric": "12",
    "Dye: Household": "12",
    "Fabric Softener": "12",
    "Gloves-Work": "12",
    "Household Cleaners": "12",
    "Laundry Detergent": "12",
    "Mops": "12",
    "Sponges": "12",
    "Steel Wool": "12",
    "Aluminum Foil": "13",
    "Automotive": "13",
    "Bags: Lunch/Sandwich": "13",
    "Bags: Garbage/Trash": "13",
    "Bakeware": "13",
    "Bug Spray": "13",
    "Charcoal": "13",
    "Cat Food/Cat Litter/Cat Needs": "13",
    "Dog Food/Dog Needs": "13",
    "Freezer Wrap": "13",
    "Oil: Motor": "13",
    "Rubbermaid": "13",
    "Vinegar": "13",
    "Vitamins": "13",
    "Water: Distilled/Spring": "13",
    "Wax Paper": "13",
    "Wheat Germ": "13",
    "Windshield Washer Fluid": "13",
    "Soda": "14",
    "Bags: Packaged": "15",
    "Bread": "15",
    "Cookies": "15",
    "Crackers": "15",
    "Dried Fruit: Currants/Dates": "16",
    "Dried Fruit: Prunes/Raisins": "16",
    "Frozen Foods": "16",
    "Raisins": "16",
    "Ice Cream Cones": "17",
    "Bakery: Fresh": "Bakery (Front Corner)",
    "Bakery: Specialty": "Cheese Case",
    "Butter": "1",
    "Candles: Birthday": "Bakery Case",
    "Cheese: Fresh": "Deli/Fish Dept",
    "Eggs": "1",
    "Figs: Dry": "Produce Dept",
    "Ice Cream": "Freezer Wall",
    "Ice Cubes": "End of Aisle 15",
    "Magazines": "Registers",
    "Meat: Fresh": "Meat Dept",
    "Milk: Fluid": "1",
    "Peanuts in shell": "Produce Dept",
    "Potatoes: Fresh": "Produce Dept",
    "Produce: Fresh": "Produce Dept",
    "Razor Blades": "Checkout",
    "Vegetables: Fresh": "Produce Dept",
}


@dataclass(frozen=True)
class StoreLocationTable:
    """Store location lookups keyed by item name and by category string."""

    names: Mapping[str, str]
    categories: Mapping[str, str]


STORE_LOCATIONS = StoreLocationTable(names=_SHOPPER_GUIDE, categories=_SHOPPER_GUIDE)
