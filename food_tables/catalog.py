"""
Known food names from the Don't Starve wiki.

Used to flag table rows whose names look wrong after extraction, which
usually means the wiki changed its column layout.
"""

VEGETABLES = [
    "Aloe", "Asparagus", "Blue Cap", "Cactus Flesh", "Cactus Flower", "Carrot",
    "Corn", "Corn Cod", "Dark Petals", "Eggplant", "Foliage", "Garlic",
    "Glow Berry", "Green Cap", "Kelp Fronds", "Lichen", "Mandrake", "Moon Shroom",
    "Onion", "Pepper", "Petals", "Popperfish", "Potato", "Pumpkin", "Radish",
    "Red Cap", "Ripe Stone Fruit", "Seaweed", "Succulent", "Sweet Potato",
    "Toma Root",
]

MEATS = [
    "Barnacles", "Batilisk Wing", "Dead Dogfish", "Dead Swordfish",
    "Deerclops Eyeball", "Dragoon Heart", "Drumstick", "Eel",
    "Eye of the Tiger Shark", "Fish", "Fish Meat", "Fish Morsel", "Flytrap Stalk",
    "Frog Legs", "Guardian's Horn", "Koalefant Trunk", "Leafy Meat", "Meat",
    "Monster Meat", "Morsel", "Naked Nostrils", "Neon Quattro", "Pierrot Fish",
    "Poison Dartfrog Legs", "Purple Grouper", "Raw Fish", "Roe", "Shark Fin",
    "Tropical Fish", "Winter Koalefant Trunk",
]
