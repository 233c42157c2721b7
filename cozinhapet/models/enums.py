PET_TYPES = ("dog", "cat")
RECIPE_CATEGORIES = ("meat", "poultry", "fish", "treats")
COOKING_TYPES = ("raw", "cooked", "baked", "mixed")
