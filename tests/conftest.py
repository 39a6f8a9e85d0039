"""
Shared fixtures for colony_tools tests.

Provides:
  - write_json: writes a file under tmp_path (JSON-encoded, or raw text)
  - game_dir: a tiny but complete game data directory, one locale included
  - make_item: builds canonical Items with sensible defaults
"""

import json

import pytest


# ─── Tiny game data ─────────────────────────────────────────────────────────

TINY_TOOLSETS = [
    {
        "key": "default",
        "usable": ["notools", "stonetools", "coppertools", "irontools", "bronzetools", "steeltools"],
    },
    {"key": "machine", "usable": ["machinetools"]},
]

TINY_BLOCK_BEHAVIOURS = [
    {
        "baseType": {
            "attachBehaviour": [
                "pipliz.blocktypes.rotatable",
                {"npcType": "pipliz.smelter", "toolset": "default"},
            ]
        }
    },
    {"baseType": {"attachBehaviour": [{"npcType": "pipliz.metallathe", "toolset": "machine"}]}},
    {"baseType": {"sideall": "planks"}},
]

TINY_RECIPES = {
    "recipes_smelter.json": [
        {
            "name": "pipliz.smelter.bronzeingot",
            "cooldown": 20,
            "requires": [{"type": "copper", "amount": 3}, {"type": "tin"}],
            "results": [{"type": "bronzeingot", "amount": 2}],
        }
    ],
    "recipes_woodworker.json": [
        {
            "name": "pipliz.woodworker.planks",
            "cooldown": 6.5,
            "requires": [{"type": "log"}],
            "results": [
                {"type": "planks", "amount": 4},
                {"type": "leaves", "isOptional": True, "chance": 0.25},
            ],
        }
    ],
    "recipes_alchemist.json": [
        {"name": "pipliz.alchemist.poisondart", "cooldown": 12, "results": [{"type": "poisondart"}]}
    ],
    "recipes_metallathe.json": [
        {
            "name": "pipliz.metallathe.brassparts",
            "cooldown": 30,
            "requires": [{"type": "copper"}],
            "results": [{"type": "brassparts"}],
        }
    ],
    # Would fail name resolution if it were read.
    "recipes_merchant.json": [
        {"name": "pipliz.merchant.goldcoin", "cooldown": 1, "results": [{"type": "goldcoin"}]}
    ],
}

TINY_TYPES = {
    "copperore": {"customData": {"minerMiningTime": 8.5}, "onRemoveType": "copper"},
    "tinore": {"customData": {"minerMiningTime": 9}, "onRemoveType": "tin"},
    "grass": {"onRemoveType": "stonerubble"},
    "air": {},
}

TINY_GROWABLES = [
    {"identifier": "wheat", "stages": [{"type": "wheatstage1"}, {"type": "wheatstage2"}, {"type": "wheatstage3"}]}
]

TINY_LOCALISATION = {
    "sentences": {"npcs": {"pipliz": {"smelter": "Smelter"}}},
    "types": {"bronzeingot": "Bronze ingot"},
}


@pytest.fixture
def write_json(tmp_path):
    """Returns write(relative_path, content, raw=False) -> absolute path string."""
    def write(relative_path, content, raw=False):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if raw else json.dumps(content, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


@pytest.fixture
def game_dir(tmp_path, write_json):
    """tmp_path populated with every raw file the converters need."""
    write_json("toolsets.json", TINY_TOOLSETS)
    write_json("generateblocks.json", TINY_BLOCK_BEHAVIOURS)
    for filename, recipes in TINY_RECIPES.items():
        write_json(filename, recipes)
    write_json("types.json", TINY_TYPES)
    write_json("growables.json", TINY_GROWABLES)
    write_json("localization/en-US.json", TINY_LOCALISATION)
    return str(tmp_path)


@pytest.fixture
def make_item():
    from colony_tools.core.models import Item, Requirement

    def make(name, creator="Alchemist", requires=(), **kwargs):
        kwargs.setdefault("item_id", name.lower())
        kwargs.setdefault("creator_id", creator.lower())
        kwargs.setdefault("create_time", 10)
        return Item(
            name=name,
            creator=creator,
            requires=[Requirement(name=r) for r in requires],
            **kwargs,
        )
    return make
