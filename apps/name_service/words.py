"""Built-in word lists used when the configuration does not override them.

Repeated entries are kept as-is; they weight the uniform draw.
"""

PREFIXES = (
    "Asylum", "Bell", "Black", "Capra", "Ceaseless", "Centipede", "Chaos",
    "Crossbreed", "Dark Sun", "Slayer", "Executioner", "Gaping", "Gravelord",
    "Iron", "Cinder", "Father", "Abyss", "Moonlight", "Sanctuary", "Stray",
    "Taurus", "Armoured", "Golden", "Crystal", "Giant", "Undead",
    "Giant Undead", "Hellkite", "Parasitic", "Prowling", "Prince", "Grey",
    "Maneater", "Iron", "Paladin", "Xanthous", "Marvellous", "Big Hat",
    "Black Iron", "Crestfallen", "Darkstalker", "Gravelord", "Hawkeye",
    "Kingseeker", "Lord's Blade", "Stone", "Silent", "Belfry", "Captain",
    "Emerald", "Grave Warden", "Lonesome", "Manscorpion", "Hag",
    "Mild Mannered", "Royal", "Sorcerer", "Sparkling", "Steady Hand", "Old",
    "Ruin", "Old Iron", "Covetous", "Baleful", "Prowling", "Ancient", "Burnt",
    "Slumbering", "Ivory", "Fume", "Sir", "Nameless", "Pilgrim", "Jester",
    "Ashen", "Abbess", "Rapacious", "Drifter", "Woodland Child", "Peculiar",
    "Holy", "Yellowfinger", "Longfinger", "Knight-Slayer", "Curse-Rotted",
    "Deacon", "High Lord", "Old Demon", "Pontiff", "Boreal", "Unbreakable",
    "Ringfinger",
)

TYPES = (
    "Demon", "Gargoyle", "Dragon", "Witch", "Golem", "Knight", "Wolf",
    "Butcher", "Tusk", "Golem", "Rat", "Hydra", "Wall Hugger", "Prince",
    "Slayer", "King", "Blacksmith", "Princess", "Merchant", "Scholar",
    "Oracle", "Guard", "Captain", "Chancellor", "Herald", "Housekeeper",
    "Laddersmith", "Manscorpion", "Warrior", "Trader", "Lord", "Sentinel",
    "Queen", "Ogre", "Denizen", "Seeker", "Watcher", "Devourer",
    "Outrider Knight", "High Priestess", "Mother",
)

SUFFIXES = (
    "of Chaos", "of the Abyss", "of Cinder", "of Thorns",
    "of the Darkroot Wood", "of Astora", "of Zena", "of Oolacile",
    "of Vinheim", "of Sunlight", "of Carim", "of the Great Swamp",
    "of Thorolund", "of Izalith", "of the East", "of Catarina",
    "of the First Sin", "of Jugo", "of Mirrah", "of Lanafir", "of Olaphis",
    "of Song", "of Londor", "of the Spurned", "of the Sunless Realms",
    "of Carim", "of the Boreal Valley", "of the Deep", "of Lothric Castle",
    "of Courland", "of Rebirth",
)

NICKNAMES = (
    "the Scaleless", "the Great", "the Rock", "the Crow", "the Cartographer",
    "the Wanderer", "the Pardoner", "the Outcast", "the Armourer",
    "the Crestfallen", "the Lost", "the Ruined", "the Baleful",
    "the King's Pet", "the Squalid", "the Explorer", "the Butcher",
    "the Deserter", "the Hushed", "the Giant", "the Consumed",
)
