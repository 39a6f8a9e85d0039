"""
Derives miner items from the block types in types.json.

Only blocks that define both a miner mining time and the item they drop
when removed are mineable; every other block type is ignored.
"""

from colony_tools.core.catalog import find_duplicate
from colony_tools.core.config import JSON_FILE_EXTENSION, MINEABLE_ITEMS_FILE_NAME, MINER_CREATOR_ID
from colony_tools.core.dictionary import get_creator_name, get_item_name
from colony_tools.core.errors import DuplicateItemError
from colony_tools.core import file_system
from colony_tools.core.models import Item
from colony_tools.core.parsers import read_json_file
from colony_tools.core.schemas import MINEABLE_ITEMS_SCHEMA
from colony_tools.core.tools import ToolTier


def load_mineable_items(input_dir):
    path = file_system.find_single_file(input_dir, MINEABLE_ITEMS_FILE_NAME, JSON_FILE_EXTENSION)
    return read_json_file(path, MINEABLE_ITEMS_SCHEMA)


def convert_to_items(mineable_types):
    creator = get_creator_name(MINER_CREATOR_ID)
    items = []
    for block in mineable_types.values():
        mining_time = block.custom_data.miner_mining_time if block.custom_data else None
        if not mining_time or not block.on_remove_type:
            continue

        items.append(Item(
            name=get_item_name(block.on_remove_type),
            item_id=block.on_remove_type,
            creator=creator,
            creator_id=MINER_CREATOR_ID,
            create_time=mining_time,
            output=1,
            minimum_tool=ToolTier.none,
            maximum_tool=ToolTier.steel,
        ))
    return items


def convert_mineable_items(input_dir):
    items = convert_to_items(load_mineable_items(input_dir))

    duplicate = find_duplicate(items)
    if duplicate:
        raise DuplicateItemError(
            f"Multiple mineable recipes for item: {duplicate.name}, please remove one",
            duplicate.name,
            duplicate.creator,
        )

    return items
