"""
Configuration for Colony Survival game data conversion.

Defines the file names and prefixes used to locate raw game data,
the fixed game constants the converters depend on, and the static
tables that fill gaps the game's own files do not cover.
"""

import os

JSON_FILE_EXTENSION = ".json"

# Raw file names (without extension) and prefixes inside the input directory.
TOOLSETS_FILE_NAME = "toolsets"
BLOCK_BEHAVIOURS_PREFIX = "generateblocks"
RECIPE_PREFIX = "recipes_"
MINEABLE_ITEMS_FILE_NAME = "types"
GROWABLES_FILE_NAME = "growables"
LOCALISATION_DIRECTORY = "localization"

# Recipe files that match RECIPE_PREFIX but are not produced by colonists.
RECIPE_EXCLUSIONS = {
    "recipes_merchant.json",
}

# One in-game day, in seconds.
GAME_DAY_SECONDS = 435

# Creators without a toolset behaviour that never use tools.
NO_TOOL_CREATORS = {
    "alchemist",
    "beekeeper",
    "berryfarmer",
    "chickenfarmer",
}

MINER_CREATOR_ID = "minerjob"
FORESTER_CREATOR_ID = "forester"

# Growable identifier -> creator identifier.
GROWABLE_CREATORS = {
    "wheat":         "wheatfarmer",
    "flax":          "flaxfarmer",
    "cotton":        "cottonfarmer",
    "cabbage":       "cabbagefarmer",
    "alkanet":       "alkanetfarmer",
    "hollyhock":     "hollyhockfarmer",
    "wolfsbane":     "wolfsbanefarmer",
    "barley":        "barleyfarmer",
    "hemp":          "hempfarmer",
    "wisteriaplant": "wisteriafarmer",
}

# Growable identifier -> expected harvest per growth cycle and farm footprint.
# Crop farms are a fixed 10x10 plot; wisteria is harvested per plant.
_CROP_FARM = {"width": 10, "height": 10}

GROWABLE_OUTPUTS = {
    "wheat":         {"output": 100, "size": _CROP_FARM},
    "flax":          {"output": 100, "size": _CROP_FARM},
    "cotton":        {"output": 100, "size": _CROP_FARM},
    "cabbage":       {"output": 100, "size": _CROP_FARM},
    "alkanet":       {"output": 100, "size": _CROP_FARM},
    "hollyhock":     {"output": 100, "size": _CROP_FARM},
    "wolfsbane":     {"output": 100, "size": _CROP_FARM},
    "barley":        {"output": 100, "size": _CROP_FARM},
    "hemp":          {"output": 100, "size": _CROP_FARM},
    "wisteriaplant": {"output": 1,   "size": None},
}

# Forester harvests. The game drops leaves alongside logs (and logs alongside
# leaves) without exposing a chance, so the expected yields are precomputed.
FORESTER_ITEMS = [
    {
        "id": "log",
        "create_time": GAME_DAY_SECONDS,
        "output": 4,
        "size": {"width": 5, "height": 5},
        "byproduct": {"id": "leaves", "amount": 5, "likelihood": 0.8},
    },
    {
        "id": "leaves",
        "create_time": GAME_DAY_SECONDS,
        "output": 5,
        "size": {"width": 5, "height": 5},
        "byproduct": {"id": "log", "amount": 4, "likelihood": 0.8},
    },
]

# Translation texts carrying this prefix are placeholders, not translations.
MISSING_TRANSLATION_PREFIX = "_MISSING_"

# Translations for ids the game's localisation files do not carry.
STATIC_TRANSLATIONS = {
    "creators": {},
    "items": {
        "lantern": {
            "cs-CZ": "Lucerna",
            "da-DK": "Lanterne",
            "de-DE": "Laterne",
            "el-GR": "Φανάρι",
            "en-US": "Lantern",
            "es-ES": "Linterna",
            "fi-FI": "Lyhty",
            "fr-FR": "Lanterne",
            "it-IT": "Lanterna",
            "ja-JP": "ランタン",
            "ko-KR": "랜턴",
            "lt-LT": "Žibintas",
            "nl-NL": "Lantaarn",
            "no-NO": "Lykt",
            "pl-PL": "Latarnia",
            "pt-BR": "Lanterna",
            "ru-RU": "Фонарь",
            "th-TH": "โคมไฟ",
            "uk-UA": "Ліхтар",
            "vi-VN": "Đèn lồng",
            "zh-CN": "灯笼",
            "zh-TW": "燈籠",
        },
        "log": {
            "cs-CZ": "Poleno",
            "da-DK": "Træstamme",
            "de-DE": "Baumstamm",
            "el-GR": "Κορμός",
            "en-US": "Log",
            "es-ES": "Leño",
            "fi-FI": "Hirsi",
            "fr-FR": "Bûche",
            "it-IT": "Ceppo",
            "ja-JP": "丸太",
            "ko-KR": "통나무",
            "lt-LT": "Rąstas",
            "nl-NL": "Boomstam",
            "no-NO": "Tømmerstokk",
            "pl-PL": "Kłoda",
            "pt-BR": "Tora",
            "ru-RU": "Бревно",
            "th-TH": "ท่อนไม้",
            "uk-UA": "Колода",
            "vi-VN": "Khúc gỗ",
            "zh-CN": "原木",
            "zh-TW": "原木",
        },
        "leaves": {
            "cs-CZ": "Listí",
            "da-DK": "Blade",
            "de-DE": "Blätter",
            "el-GR": "Φύλλα",
            "en-US": "Leaves",
            "es-ES": "Hojas",
            "fi-FI": "Lehdet",
            "fr-FR": "Feuilles",
            "it-IT": "Foglie",
            "ja-JP": "葉",
            "ko-KR": "나뭇잎",
            "lt-LT": "Lapai",
            "nl-NL": "Bladeren",
            "no-NO": "Blader",
            "pl-PL": "Liście",
            "pt-BR": "Folhas",
            "ru-RU": "Листья",
            "th-TH": "ใบไม้",
            "uk-UA": "Листя",
            "vi-VN": "Lá",
            "zh-CN": "树叶",
            "zh-TW": "樹葉",
        },
    },
}

# Every locale the static table can also provide.
EXPECTED_STATIC_LOCALES = frozenset(STATIC_TRANSLATIONS["items"]["log"].keys())


def get_localisation_path(input_dir):
    return os.path.join(input_dir, LOCALISATION_DIRECTORY)
