"""Built-in reference food catalog.

Nutrient amounts are per 100g. Taste and digestion are 0-10 ratings
(higher digestion = easier to digest). Order matters: it is the catalog
iteration order seen by the optimizer.
"""

from __future__ import annotations

from typing import Any

DEFAULT_FOODS: list[dict[str, Any]] = [
    # ------------------------------------------------------------------
    # Vegetables
    # ------------------------------------------------------------------
    {
        "name": "Spinach",
        "category": "vegetable",
        "nutrients": {
            "calories": 23, "protein": 2.9, "carbohydrates": 3.6, "fats": 0.4, "fiber": 2.2,
            "vitamin_a": 469, "vitamin_c": 28.1, "vitamin_k": 482.9, "folate": 194,
            "calcium": 99, "iron": 2.7, "magnesium": 79, "potassium": 558,
        },
        "taste_score": 7.0,
        "digestion_score": 8.0,
        "pros": ["High in iron", "Rich in antioxidants", "Low calorie"],
        "cons": ["Oxalates may interfere with calcium"],
        "seasons": ["spring", "summer", "fall"],
    },
    {
        "name": "Broccoli",
        "category": "vegetable",
        "nutrients": {
            "calories": 34, "protein": 2.8, "carbohydrates": 7, "fats": 0.4, "fiber": 2.6,
            "vitamin_a": 31, "vitamin_c": 89.2, "vitamin_k": 101.6, "folate": 63,
            "calcium": 47, "iron": 0.7, "magnesium": 21, "potassium": 316,
        },
        "taste_score": 6.5,
        "digestion_score": 7.0,
        "pros": ["High in vitamin C", "Cancer-fighting compounds"],
        "cons": ["May cause gas"],
        "seasons": ["fall", "winter", "spring"],
    },
    {
        "name": "Sweet Potato",
        "category": "vegetable",
        "nutrients": {
            "calories": 86, "protein": 1.6, "carbohydrates": 20, "fats": 0.1, "fiber": 3,
            "vitamin_a": 709, "vitamin_c": 2.4, "potassium": 337,
        },
        "taste_score": 9.0,
        "digestion_score": 8.5,
        "pros": ["High in beta-carotene", "Complex carbs"],
        "cons": ["Higher in carbs"],
        "seasons": ["fall", "winter"],
    },
    # ------------------------------------------------------------------
    # Fruits
    # ------------------------------------------------------------------
    {
        "name": "Blueberries",
        "category": "fruit",
        "nutrients": {
            "calories": 57, "protein": 0.7, "carbohydrates": 14, "fats": 0.3, "fiber": 2.4,
            "vitamin_c": 9.7, "vitamin_k": 19.3, "manganese": 0.3,
        },
        "taste_score": 9.5,
        "digestion_score": 9.0,
        "pros": ["High in antioxidants", "Low calorie"],
        "cons": ["Can be expensive"],
        "seasons": ["summer"],
    },
    {
        "name": "Banana",
        "category": "fruit",
        "nutrients": {
            "calories": 89, "protein": 1.1, "carbohydrates": 23, "fats": 0.3, "fiber": 2.6,
            "vitamin_c": 8.7, "vitamin_b6": 0.4, "potassium": 358,
        },
        "taste_score": 8.5,
        "digestion_score": 9.5,
        "pros": ["High in potassium", "Easy to digest"],
        "cons": ["Higher in sugar"],
        "seasons": "all",
    },
    # ------------------------------------------------------------------
    # Grains
    # ------------------------------------------------------------------
    {
        "name": "Quinoa",
        "category": "grain",
        "nutrients": {
            "calories": 368, "protein": 14, "carbohydrates": 64, "fats": 6, "fiber": 7,
            "vitamin_b6": 0.5, "folate": 184, "magnesium": 197, "phosphorus": 457,
            "potassium": 563,
        },
        "taste_score": 7.5,
        "digestion_score": 8.0,
        "pros": ["Complete protein", "Gluten-free"],
        "cons": ["Higher in calories"],
        "seasons": "all",
    },
    {
        "name": "Brown Rice",
        "category": "grain",
        "nutrients": {
            "calories": 111, "protein": 2.6, "carbohydrates": 23, "fats": 0.9, "fiber": 1.8,
            "vitamin_b6": 0.2, "magnesium": 43, "phosphorus": 83,
        },
        "taste_score": 7.0,
        "digestion_score": 7.5,
        "pros": ["Whole grain", "Filling"],
        "cons": ["Lower in protein"],
        "seasons": "all",
    },
    {
        "name": "Rolled Oats",
        "category": "grain",
        "nutrients": {
            "calories": 379, "protein": 13.2, "carbohydrates": 67.7, "fats": 6.5, "fiber": 10.1,
            "thiamin": 0.46, "riboflavin": 0.16, "niacin": 1.1, "folate": 32,
            "calcium": 52, "iron": 4.3, "magnesium": 138, "phosphorus": 410,
            "potassium": 362, "zinc": 3.6, "copper": 0.39, "manganese": 3.6,
            "selenium": 28.9,
        },
        "taste_score": 7.5,
        "digestion_score": 8.0,
        "pros": ["Soluble fiber", "Slow-release energy"],
        "cons": ["May contain gluten traces"],
        "seasons": "all",
    },
    # ------------------------------------------------------------------
    # Ancient herbs
    # ------------------------------------------------------------------
    {
        "name": "Turmeric",
        "category": "herb",
        "nutrients": {
            "calories": 354, "protein": 7.8, "carbohydrates": 65, "fats": 9.9, "fiber": 21,
            "vitamin_c": 0.7, "vitamin_e": 4.4, "vitamin_k": 13.4,
            "calcium": 183, "iron": 41.4, "magnesium": 193, "phosphorus": 268,
            "potassium": 2525,
        },
        "taste_score": 6.0,
        "digestion_score": 8.5,
        "pros": ["Anti-inflammatory", "Curcumin benefits"],
        "cons": ["Strong flavor"],
        "seasons": "all",
        "is_ancient": True,
    },
    {
        "name": "Ginger",
        "category": "herb",
        "nutrients": {
            "calories": 80, "protein": 1.8, "carbohydrates": 18, "fats": 0.8, "fiber": 2,
            "vitamin_c": 5, "vitamin_b6": 0.2,
            "calcium": 16, "iron": 0.6, "magnesium": 43, "phosphorus": 34, "potassium": 415,
        },
        "taste_score": 7.0,
        "digestion_score": 9.0,
        "pros": ["Aids digestion", "Anti-nausea"],
        "cons": ["Spicy"],
        "seasons": "all",
        "is_ancient": True,
    },
    {
        "name": "Ashwagandha",
        "category": "herb",
        "nutrients": {
            "calories": 245, "protein": 3.9, "carbohydrates": 50, "fats": 0.9, "fiber": 32,
            "calcium": 23, "iron": 3.3,
        },
        "taste_score": 4.0,
        "digestion_score": 7.0,
        "pros": ["Adaptogen", "Stress reduction"],
        "cons": ["Bitter taste"],
        "seasons": "all",
        "is_ancient": True,
    },
    # ------------------------------------------------------------------
    # Spices
    # ------------------------------------------------------------------
    {
        "name": "Cinnamon",
        "category": "spice",
        "nutrients": {
            "calories": 247, "protein": 4, "carbohydrates": 81, "fats": 1.2, "fiber": 53,
            "calcium": 1002, "iron": 8.3, "magnesium": 60, "manganese": 17.5,
        },
        "taste_score": 9.0,
        "digestion_score": 8.0,
        "pros": ["Blood sugar regulation", "Antioxidants"],
        "cons": ["High in coumarin if overused"],
        "seasons": "all",
    },
    {
        "name": "Garlic",
        "category": "spice",
        "nutrients": {
            "calories": 149, "protein": 6.4, "carbohydrates": 33, "fats": 0.5, "fiber": 2.1,
            "vitamin_c": 31.2, "vitamin_b6": 1.2,
            "calcium": 181, "iron": 1.7, "magnesium": 25, "phosphorus": 153,
            "potassium": 401, "manganese": 1.7, "selenium": 14.2,
        },
        "taste_score": 7.5,
        "digestion_score": 6.5,
        "pros": ["Immune support", "Cardiovascular health"],
        "cons": ["Strong odor", "May cause heartburn"],
        "seasons": "all",
    },
    # ------------------------------------------------------------------
    # Legumes
    # ------------------------------------------------------------------
    {
        "name": "Lentils",
        "category": "legume",
        "nutrients": {
            "calories": 116, "protein": 9, "carbohydrates": 20, "fats": 0.4, "fiber": 7.9,
            "folate": 181, "iron": 3.3, "magnesium": 36, "phosphorus": 180, "potassium": 369,
        },
        "taste_score": 7.0,
        "digestion_score": 7.5,
        "pros": ["High protein", "High fiber"],
        "cons": ["May cause gas"],
        "seasons": "all",
    },
    {
        "name": "Chickpeas",
        "category": "legume",
        "nutrients": {
            "calories": 164, "protein": 8.9, "carbohydrates": 27, "fats": 2.6, "fiber": 7.6,
            "folate": 172, "iron": 2.9, "magnesium": 48, "phosphorus": 168, "potassium": 291,
        },
        "taste_score": 8.0,
        "digestion_score": 7.0,
        "pros": ["High protein", "Versatile"],
        "cons": ["May cause bloating"],
        "seasons": "all",
    },
    # ------------------------------------------------------------------
    # Nuts
    # ------------------------------------------------------------------
    {
        "name": "Almonds",
        "category": "nut",
        "nutrients": {
            "calories": 579, "protein": 21, "carbohydrates": 22, "fats": 50, "fiber": 12,
            "vitamin_e": 25.6, "calcium": 269, "iron": 3.7, "magnesium": 270,
            "phosphorus": 481, "potassium": 733,
        },
        "taste_score": 8.5,
        "digestion_score": 7.0,
        "pros": ["High in healthy fats", "Rich in vitamin E"],
        "cons": ["High calorie", "May cause allergies"],
        "seasons": "all",
    },
    {
        "name": "Walnuts",
        "category": "nut",
        "nutrients": {
            "calories": 654, "protein": 15, "carbohydrates": 14, "fats": 65, "fiber": 6.7,
            "vitamin_b6": 0.5, "folate": 98,
            "calcium": 98, "iron": 2.9, "magnesium": 158, "phosphorus": 346,
            "potassium": 441, "omega3": 9.1,
        },
        "taste_score": 8.0,
        "digestion_score": 6.5,
        "pros": ["High in omega-3", "Brain health"],
        "cons": ["High calorie"],
        "seasons": ["fall", "winter"],
    },
    # ------------------------------------------------------------------
    # Dairy
    # ------------------------------------------------------------------
    {
        "name": "Greek Yogurt",
        "category": "dairy",
        "nutrients": {
            "calories": 59, "protein": 10.2, "carbohydrates": 3.6, "fats": 0.4,
            "riboflavin": 0.28, "vitamin_b12": 0.75, "calcium": 110, "magnesium": 11,
            "phosphorus": 135, "potassium": 141, "zinc": 0.52, "selenium": 9.7,
            "choline": 15.1,
        },
        "taste_score": 8.0,
        "digestion_score": 7.5,
        "pros": ["High protein", "Probiotic cultures"],
        "cons": ["Contains lactose"],
        "seasons": "all",
    },
    # ------------------------------------------------------------------
    # Protein sources
    # ------------------------------------------------------------------
    {
        "name": "Salmon",
        "category": "protein",
        "nutrients": {
            "calories": 208, "protein": 20, "carbohydrates": 0, "fats": 12, "fiber": 0,
            "vitamin_d": 13, "niacin": 8.5, "vitamin_b6": 0.6, "vitamin_b12": 3.2,
            "phosphorus": 200, "potassium": 363, "selenium": 36.5, "omega3": 2.3,
        },
        "taste_score": 9.0,
        "digestion_score": 9.0,
        "pros": ["High in omega-3", "Complete protein"],
        "cons": ["Mercury concerns if farmed"],
        "seasons": "all",
    },
    {
        "name": "Chicken Breast",
        "category": "protein",
        "nutrients": {
            "calories": 165, "protein": 31, "carbohydrates": 0, "fats": 3.6, "fiber": 0,
            "niacin": 14.8, "vitamin_b6": 0.6, "phosphorus": 220, "selenium": 24.3,
        },
        "taste_score": 8.5,
        "digestion_score": 9.0,
        "pros": ["Lean protein", "Versatile"],
        "cons": ["Lower in omega-3"],
        "seasons": "all",
    },
    {
        "name": "Eggs",
        "category": "protein",
        "nutrients": {
            "calories": 143, "protein": 12.6, "carbohydrates": 0.7, "fats": 9.5,
            "vitamin_a": 160, "vitamin_d": 2, "riboflavin": 0.46, "vitamin_b12": 0.89,
            "folate": 47, "calcium": 56, "iron": 1.75, "phosphorus": 198,
            "potassium": 138, "sodium": 142, "zinc": 1.29, "selenium": 30.7,
            "choline": 294,
        },
        "taste_score": 8.0,
        "digestion_score": 8.0,
        "pros": ["Complete protein", "Rich in choline"],
        "cons": ["Common allergen"],
        "seasons": "all",
    },
]
