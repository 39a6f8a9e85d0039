"""
Runs the full conversion from a game data directory to the item catalog.

Sequence:
  1. Convert craftable recipes, growables, mineable blocks and translations,
     concurrently.
  2. Combine the item lists and reject (name, creator) collisions.
  3. Prune items that can never be created.
  4. Attach translations and write the catalog.

Usage:
    ok = convert_game_data("path/to/gamedata", "items.json")
"""

from concurrent.futures import ThreadPoolExecutor

from colony_tools.core.catalog import find_duplicate, prune_uncreatable
from colony_tools.core.converters.craftable import convert_craftable_recipes
from colony_tools.core.converters.growables import convert_growables
from colony_tools.core.converters.localisation import convert_localisation_files
from colony_tools.core.converters.mineables import convert_mineable_items
from colony_tools.core.errors import DuplicateItemError
from colony_tools.core.parsers import write_json_file


def convert_sources(input_dir):
    """
    Converts every item source and the translations concurrently.

    Returns (items, translations) where items is the craftable, mineable
    and growable output concatenated in that order. Any failure aborts
    the whole run.
    """
    with ThreadPoolExecutor(max_workers=4) as executor:
        craftable = executor.submit(convert_craftable_recipes, input_dir)
        mineable = executor.submit(convert_mineable_items, input_dir)
        growable = executor.submit(convert_growables, input_dir)
        localisation = executor.submit(convert_localisation_files, input_dir)

        items = craftable.result() + mineable.result() + growable.result()
        return items, localisation.result().translations


def attach_translations(items, translations):
    for item in items:
        i18n = {}
        name = translations.items.get(item.item_id)
        if name:
            i18n["name"] = dict(name)
        creator = translations.creators.get(item.creator_id)
        if creator:
            i18n["creator"] = dict(creator)
        item.i18n = i18n
    return items


def convert_game_data(input_dir, output_path):
    """
    Converts input_dir into a catalog at output_path.

    Returns True when at least one item survived and the file was written.
    Conversion errors propagate.
    """
    print("Converting game data...")
    items, translations = convert_sources(input_dir)

    duplicate = find_duplicate(items)
    if duplicate:
        raise DuplicateItemError(
            f"Multiple recipes for item: {duplicate.name} from creator: {duplicate.creator} "
            "across sources, please remove one",
            duplicate.name,
            duplicate.creator,
        )

    print("Removing items that cannot be created...")
    items = prune_uncreatable(items)
    if not items:
        print("No creatable items found, nothing written")
        return False

    attach_translations(items, translations)

    if not write_json_file(output_path, [item.to_dict() for item in items]):
        return False

    print(f"Wrote {len(items)} items to {output_path}")
    return True
