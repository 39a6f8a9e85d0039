"""
User-facing names for raw game identifiers.

The calculator shows English names as its default labels; localised
names are attached separately from the game's translation files. Lookups
that miss raise UnknownItemError / UnknownCreatorError so unknown game
content fails the run instead of leaking raw ids into the catalog.
"""

from colony_tools.core.errors import UnknownCreatorError, UnknownItemError

ITEM_NAMES = {
    # Mined
    "clay": "Clay",
    "coalore": "Coal ore",
    "copper": "Copper",
    "goldore": "Gold ore",
    "ironore": "Iron ore",
    "leadore": "Lead ore",
    "silicasand": "Silica sand",
    "stonerubble": "Stone rubble",
    "sulfur": "Sulfur",
    "tin": "Tin",
    "zinc": "Zinc",
    "saltpeter": "Saltpeter",
    "galena": "Galena",
    # Grown
    "wheat": "Wheat",
    "flax": "Flax",
    "cotton": "Cotton",
    "cabbage": "Cabbage",
    "alkanet": "Alkanet",
    "hollyhock": "Hollyhock",
    "wolfsbane": "Wolfsbane",
    "barley": "Barley",
    "hemp": "Hemp",
    "wisteriaplant": "Wisteria flower",
    "log": "Log",
    "leaves": "Leaves",
    "berry": "Berries",
    "egg": "Egg",
    "honey": "Honey",
    "beeswax": "Beeswax",
    "fish": "Fish",
    # Food
    "flour": "Flour",
    "bread": "Bread",
    "cabbagesoup": "Cabbage soup",
    "berrypie": "Berry pie",
    "fishsoup": "Fish soup",
    "salt": "Salt",
    "malt": "Malt",
    "beer": "Beer",
    # Building materials
    "planks": "Planks",
    "bricks": "Bricks",
    "stonebricks": "Stone bricks",
    "firewood": "Firewood",
    "charcoal": "Charcoal",
    "glass": "Glass",
    "lantern": "Lantern",
    "torch": "Torch",
    "candle": "Candle",
    # Textiles and dyes
    "linen": "Linen",
    "cottonthread": "Cotton thread",
    "cottoncloth": "Cotton cloth",
    "rope": "Rope",
    "bandage": "Bandage",
    "reddye": "Red dye",
    "bluedye": "Blue dye",
    "yellowdye": "Yellow dye",
    # Metals
    "copperingot": "Copper ingot",
    "tiningot": "Tin ingot",
    "bronzeingot": "Bronze ingot",
    "ironingot": "Iron ingot",
    "ironwrought": "Wrought iron",
    "steelingot": "Steel ingot",
    "leadingot": "Lead ingot",
    "goldingot": "Gold ingot",
    "brassingot": "Brass ingot",
    "copperparts": "Copper parts",
    "brassparts": "Brass parts",
    "ironrivet": "Iron rivet",
    "steelparts": "Steel parts",
    # Tools
    "stonetools": "Stone tools",
    "coppertools": "Copper tools",
    "bronzetools": "Bronze tools",
    "irontools": "Iron tools",
    "steeltools": "Steel tools",
    # Weapons and ammunition
    "sling": "Sling",
    "slingbullet": "Sling bullet",
    "bow": "Bow",
    "bronzearrow": "Bronze arrow",
    "crossbow": "Crossbow",
    "crossbowbolt": "Crossbow bolt",
    "matchlockgun": "Matchlock gun",
    "leadbullet": "Lead bullet",
    "gunpowder": "Gunpowder",
    "poisondart": "Poison dart",
    # Science
    "sciencebagbasic": "Basic science bag",
    "sciencebaglife": "Life science bag",
    "sciencebagmilitary": "Military science bag",
    "sciencebagcolony": "Colony science bag",
    "sciencebagadvanced": "Advanced science bag",
}

CREATOR_NAMES = {
    "alchemist": "Alchemist",
    "baker": "Baker",
    "beekeeper": "Beekeeper",
    "berryfarmer": "Berry farmer",
    "bloomery": "Bloomery operator",
    "brewer": "Brewer",
    "chickenfarmer": "Chicken farmer",
    "cook": "Cook",
    "dyer": "Dyer",
    "fisherman": "Fisherman",
    "fletcher": "Fletcher",
    "forester": "Forester",
    "glassblower": "Glassblower",
    "grinder": "Grinder",
    "gunsmith": "Gunsmith",
    "kiln": "Kiln operator",
    "metallathe": "Metal lathe operator",
    "metalsmith": "Metalsmith",
    "minerjob": "Miner",
    "potter": "Potter",
    "sciencelab": "Scientist",
    "smelter": "Smelter",
    "stonemason": "Stonemason",
    "tailor": "Tailor",
    "woodworker": "Woodworker",
    # Farmers of growables
    "wheatfarmer": "Wheat farmer",
    "flaxfarmer": "Flax farmer",
    "cottonfarmer": "Cotton farmer",
    "cabbagefarmer": "Cabbage farmer",
    "alkanetfarmer": "Alkanet farmer",
    "hollyhockfarmer": "Hollyhock farmer",
    "wolfsbanefarmer": "Wolfsbane farmer",
    "barleyfarmer": "Barley farmer",
    "hempfarmer": "Hemp farmer",
    "wisteriafarmer": "Wisteria flower farmer",
}


def get_item_name(item_id, kind="item"):
    name = ITEM_NAMES.get(item_id)
    if name is None:
        raise UnknownItemError(item_id, kind)
    return name


def get_creator_name(creator_id):
    name = CREATOR_NAMES.get(creator_id)
    if name is None:
        raise UnknownCreatorError(creator_id)
    return name
