"""
Converts colonist crafting recipes into canonical items.

Inputs, all in the top level of the game's data directory:
  - toolsets.json          exactly one; named sets of usable tools
  - generateblocks*.json   one or more; job blocks binding NPC types to toolsets
  - recipes_*.json         any number; recipes_merchant.json is not colonist work

Usage:
    items = convert_craftable_recipes("path/to/gamedata")
"""

import os

from colony_tools.core.catalog import find_duplicate
from colony_tools.core.config import (
    BLOCK_BEHAVIOURS_PREFIX,
    JSON_FILE_EXTENSION,
    RECIPE_EXCLUSIONS,
    RECIPE_PREFIX,
    TOOLSETS_FILE_NAME,
)
from colony_tools.core.dictionary import get_creator_name, get_item_name
from colony_tools.core.errors import (
    DuplicateItemError,
    MalformedNameError,
    MissingFileError,
    MissingPrimaryOutputError,
    MultiplePrimaryOutputsError,
    UnknownToolsetError,
    UnsupportedToolsetError,
)
from colony_tools.core import file_system
from colony_tools.core.models import Item, OptionalOutput, Requirement
from colony_tools.core.parsers import read_json_file, read_json_files
from colony_tools.core.schemas import (
    BLOCK_BEHAVIOURS_SCHEMA,
    RECIPES_SCHEMA,
    TOOLSETS_SCHEMA,
    AttachBehaviour,
)
from colony_tools.core.tools import resolve_creator_tools


# ─── Qualified names ────────────────────────────────────────────────────────

def split_qualified_name(name):
    """
    Splits "pipliz.alchemist.poisondart" into ("alchemist", "poisondart").

    Raises MalformedNameError when either part is missing.
    """
    parts = name.split(".")
    creator = parts[1] if len(parts) > 1 else ""
    item_id = parts[2] if len(parts) > 2 else ""
    if not creator or not item_id:
        raise MalformedNameError(f"Unknown format of pipliz name provided: {name}")
    return creator, item_id


def split_npc_type(npc_type):
    """Splits "pipliz.alchemist" into "alchemist"."""
    parts = npc_type.split(".")
    if len(parts) < 2 or not parts[1]:
        raise MalformedNameError(f"Unknown format of pipliz creator provided: {npc_type}")
    return parts[1]


# ─── File discovery ─────────────────────────────────────────────────────────

def load_toolsets(input_dir):
    path = file_system.find_single_file(input_dir, TOOLSETS_FILE_NAME, JSON_FILE_EXTENSION)
    return read_json_file(path, TOOLSETS_SCHEMA)


def load_block_behaviours(input_dir):
    paths = file_system.find_files(
        input_dir, file_extension=JSON_FILE_EXTENSION, prefix=BLOCK_BEHAVIOURS_PREFIX
    )
    if not paths:
        raise MissingFileError(
            f"No {BLOCK_BEHAVIOURS_PREFIX}*{JSON_FILE_EXTENSION} file(s) found in provided directory"
        )

    behaviours = []
    for file_behaviours in read_json_files(paths, BLOCK_BEHAVIOURS_SCHEMA):
        behaviours.extend(file_behaviours)
    return behaviours


def load_recipes(input_dir):
    paths = file_system.find_files(
        input_dir, file_extension=JSON_FILE_EXTENSION, prefix=RECIPE_PREFIX
    )
    paths = [p for p in paths if os.path.basename(p) not in RECIPE_EXCLUSIONS]

    recipes = []
    for file_recipes in read_json_files(paths, RECIPES_SCHEMA):
        recipes.extend(file_recipes)
    return recipes


# ─── NPC -> toolset binding ─────────────────────────────────────────────────

def create_npc_toolset_mapping(block_behaviours, toolsets):
    """
    Maps creator id -> usable tool ids from the job block behaviours.

    Only the first attach behaviour naming both an npcType and a toolset
    counts for a block, and only the first binding seen for a creator is
    kept. A toolset key missing from toolsets.json is an error.
    """
    toolsets_by_key = {t.key: t for t in toolsets}
    mapping = {}

    for behaviour in block_behaviours:
        if not behaviour.base_type or not behaviour.base_type.attach_behaviour:
            continue

        binding = next(
            (
                b for b in behaviour.base_type.attach_behaviour
                if isinstance(b, AttachBehaviour) and b.npc_type and b.toolset
            ),
            None,
        )
        if binding is None:
            continue

        creator = split_npc_type(binding.npc_type)
        toolset = toolsets_by_key.get(binding.toolset)
        if toolset is None:
            raise UnknownToolsetError(f"Unknown toolset: {binding.toolset} required by {creator}")

        mapping.setdefault(creator, list(toolset.usable))

    return mapping


# ─── Recipe -> Item ─────────────────────────────────────────────────────────

def _map_requirements(requires):
    return [
        Requirement(name=get_item_name(r.type), amount=r.amount if r.amount is not None else 1)
        for r in requires
    ]


def _map_optional_outputs(results):
    return [
        OptionalOutput(
            name=get_item_name(r.type),
            amount=r.amount if r.amount is not None else 1,
            likelihood=r.chance if r.chance is not None else 1,
        )
        for r in results
    ]


def map_recipe_to_item(recipe, npc_tools):
    """
    Builds the canonical Item for one raw recipe.

    Raises UnsupportedToolsetError when the creator's toolset cannot be
    expressed as a tier range; callers decide whether to skip. Every other
    ConversionError is fatal.
    """
    creator_id, item_id = split_qualified_name(recipe.name)
    tools = resolve_creator_tools(creator_id, item_id, npc_tools)

    primary = [r for r in recipe.results if r.type == item_id]
    optional = [r for r in recipe.results if r.type != item_id]
    if not primary:
        raise MissingPrimaryOutputError(
            f"Unable to find primary output for recipe: {item_id} from creator: {creator_id}"
        )
    if len(primary) > 1:
        raise MultiplePrimaryOutputsError(
            f"Multiple primary outputs specified for: {item_id} from creator: {creator_id}"
        )

    output = primary[0].amount if primary[0].amount is not None else 1

    return Item(
        name=get_item_name(item_id),
        item_id=item_id,
        creator=get_creator_name(creator_id),
        creator_id=creator_id,
        create_time=recipe.cooldown,
        output=output,
        requires=_map_requirements(recipe.requires),
        minimum_tool=tools.minimum_tool,
        maximum_tool=tools.maximum_tool,
        optional_outputs=_map_optional_outputs(optional),
    )


def convert_recipes(recipes, npc_tools):
    """Maps every recipe, skipping the ones whose creator needs unsupported tools."""
    items = []
    for recipe in recipes:
        try:
            items.append(map_recipe_to_item(recipe, npc_tools))
        except UnsupportedToolsetError:
            creator_id, item_id = split_qualified_name(recipe.name)
            print(f"Skipping recipe: {item_id} from creator: {creator_id} as requires unsupported toolset")

    duplicate = find_duplicate(items)
    if duplicate:
        raise DuplicateItemError(
            f"Multiple recipes for item: {duplicate.name} from creator: {duplicate.creator}, please remove one",
            duplicate.name,
            duplicate.creator,
        )

    return items


def convert_craftable_recipes(input_dir):
    toolsets = load_toolsets(input_dir)
    block_behaviours = load_block_behaviours(input_dir)
    npc_tools = create_npc_toolset_mapping(block_behaviours, toolsets)
    recipes = load_recipes(input_dir)

    return convert_recipes(recipes, npc_tools)
