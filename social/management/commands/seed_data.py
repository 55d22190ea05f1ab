"""Static pools used by the seed command."""

CATEGORY_NAMES = [
    "Breakfast",
    "Lunch",
    "Dinner",
    "Dessert",
    "Vegan",
    "Vegetarian",
    "Baking",
    "Street Food",
    "Drinks",
]

user_fixtures = [
    {"email": "johndoe@example.org", "display_name": "John Doe", "bio": "Home cook, weekend baker."},
    {"email": "janedoe@example.org", "display_name": "Jane Doe", "bio": "Spice collector."},
    {"email": "charlie@example.org", "display_name": "Charlie Johnson", "bio": "Noodles, always noodles."},
]

comment_phrases = [
    "Looks delicious!",
    "Saving this for the weekend.",
    "What can I use instead of butter?",
    "Made this last night, family loved it.",
    "That plating is beautiful.",
    "How long does it keep in the fridge?",
]
