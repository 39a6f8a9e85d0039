"""
Derives farm items from growables.json.

A growable's stage table gives its growth time: one game day per stage
transition. Expected harvests, farm sizes and the farmer that tends each
crop are not in the game data and come from config.
"""

from colony_tools.core.catalog import find_duplicate
from colony_tools.core.config import (
    FORESTER_CREATOR_ID,
    FORESTER_ITEMS,
    GAME_DAY_SECONDS,
    GROWABLE_CREATORS,
    GROWABLE_OUTPUTS,
    GROWABLES_FILE_NAME,
    JSON_FILE_EXTENSION,
)
from colony_tools.core.dictionary import get_creator_name, get_item_name
from colony_tools.core.errors import (
    DuplicateItemError,
    InvalidGrowableError,
    UnknownCreatorError,
    UnknownGrowableOutputError,
)
from colony_tools.core import file_system
from colony_tools.core.models import Item, OptionalOutput, Size
from colony_tools.core.parsers import read_json_file
from colony_tools.core.schemas import GROWABLES_SCHEMA
from colony_tools.core.tools import ToolTier


def load_growables(input_dir):
    path = file_system.find_single_file(input_dir, GROWABLES_FILE_NAME, JSON_FILE_EXTENSION)
    return read_json_file(path, GROWABLES_SCHEMA)


def map_growable_to_item(growable):
    identifier = growable.identifier
    name = get_item_name(identifier, kind="growable")

    creator_id = GROWABLE_CREATORS.get(identifier)
    if creator_id is None:
        raise UnknownCreatorError(
            identifier, f"User friendly creator name unavailable for growable: {identifier}"
        )

    expected = GROWABLE_OUTPUTS.get(identifier)
    if expected is None:
        raise UnknownGrowableOutputError(f"Expected output for growable: {identifier} not known")

    days_to_grow = len(growable.stages) - 1
    if days_to_grow <= 0:
        raise InvalidGrowableError(f"Provided growable: {identifier} grows in less than one day")

    size = expected["size"]
    return Item(
        name=name,
        item_id=identifier,
        creator=get_creator_name(creator_id),
        creator_id=creator_id,
        create_time=days_to_grow * GAME_DAY_SECONDS,
        output=expected["output"],
        minimum_tool=ToolTier.none,
        maximum_tool=ToolTier.none,
        size=Size(**size) if size else None,
    )


def get_forester_items():
    """The log and leaves harvests, each yielding the other as a byproduct."""
    creator = get_creator_name(FORESTER_CREATOR_ID)
    items = []
    for entry in FORESTER_ITEMS:
        byproduct = entry["byproduct"]
        items.append(Item(
            name=get_item_name(entry["id"]),
            item_id=entry["id"],
            creator=creator,
            creator_id=FORESTER_CREATOR_ID,
            create_time=entry["create_time"],
            output=entry["output"],
            minimum_tool=ToolTier.none,
            maximum_tool=ToolTier.none,
            optional_outputs=[OptionalOutput(
                name=get_item_name(byproduct["id"]),
                amount=byproduct["amount"],
                likelihood=byproduct["likelihood"],
            )],
            size=Size(**entry["size"]),
        ))
    return items


def convert_growables(input_dir):
    growables = load_growables(input_dir)

    items = [map_growable_to_item(g) for g in growables]
    items.extend(get_forester_items())

    duplicate = find_duplicate(items)
    if duplicate:
        raise DuplicateItemError(
            f"Multiple growable recipes for item: {duplicate.name}, please remove one",
            duplicate.name,
            duplicate.creator,
        )

    return items
