"""
Tool tiers and the resolution of a creator's toolset into a tier range.

Raw game tool ids (GameTool) map 1:1 onto the tiers exposed in the
catalog (ToolTier). Ordering always follows TOOL_MODIFIERS, the game's
work-speed multiplier per tool, which is not evenly spaced.

Usage:
    tools = resolve_creator_tools("alchemist", "poisondart", npc_tools)
    tools.minimum_tool, tools.maximum_tool   # ToolTier.none, ToolTier.steel
"""

from enum import Enum
from typing import NamedTuple

from colony_tools.core.config import NO_TOOL_CREATORS
from colony_tools.core.errors import UnsupportedToolsetError


class GameTool(str, Enum):
    notools = "notools"
    stonetools = "stonetools"
    coppertools = "coppertools"
    irontools = "irontools"
    bronzetools = "bronzetools"
    steeltools = "steeltools"


class ToolTier(str, Enum):
    none = "none"
    stone = "stone"
    copper = "copper"
    iron = "iron"
    bronze = "bronze"
    steel = "steel"


TOOL_MODIFIERS = {
    GameTool.notools:     1,
    GameTool.stonetools:  2,
    GameTool.coppertools: 4,
    GameTool.irontools:   5.3,
    GameTool.bronzetools: 6.15,
    GameTool.steeltools:  8,
}

TOOL_TIERS = {
    GameTool.notools:     ToolTier.none,
    GameTool.stonetools:  ToolTier.stone,
    GameTool.coppertools: ToolTier.copper,
    GameTool.irontools:   ToolTier.iron,
    GameTool.bronzetools: ToolTier.bronze,
    GameTool.steeltools:  ToolTier.steel,
}


class ToolRange(NamedTuple):
    minimum_tool: ToolTier
    maximum_tool: ToolTier


def _to_game_tool(tool):
    try:
        return GameTool(tool)
    except ValueError:
        raise UnsupportedToolsetError(tool) from None


def get_min_max_tools(tools):
    """
    Returns the ToolRange spanned by a list of raw tool ids.

    Raises UnsupportedToolsetError if any tool is outside the supported
    tiers, and ValueError for an empty list.
    """
    if not tools:
        raise ValueError("At least one tool is required to resolve a toolset")

    minimum = GameTool.steeltools
    maximum = GameTool.notools
    for tool in tools:
        game_tool = _to_game_tool(tool)
        modifier = TOOL_MODIFIERS[game_tool]
        if modifier < TOOL_MODIFIERS[minimum]:
            minimum = game_tool
        if modifier > TOOL_MODIFIERS[maximum]:
            maximum = game_tool

    return ToolRange(TOOL_TIERS[minimum], TOOL_TIERS[maximum])


def get_default_tools(creator_id):
    """Tools assumed for a creator that has no toolset behaviour."""
    if creator_id in NO_TOOL_CREATORS:
        return [GameTool.notools.value]
    return [GameTool.notools.value, GameTool.steeltools.value]


def resolve_creator_tools(creator_id, item_id, npc_tools):
    """
    Resolves the tool range for a recipe from its creator's bound toolset.

    npc_tools maps creator id -> usable tool ids (see
    converters.craftable.create_npc_toolset_mapping). Creators without a
    binding fall back to get_default_tools().
    """
    tools = npc_tools.get(creator_id)
    if tools is None:
        print(f"Defaulting to default toolset for recipe: {item_id} from creator: {creator_id}")
        tools = get_default_tools(creator_id)

    return get_min_max_tools(tools)
