"""
Tests for core/converters/mineables.py: miner items from types.json.
"""

import pytest

from colony_tools.core.converters.mineables import convert_mineable_items, convert_to_items
from colony_tools.core.errors import DuplicateItemError, MissingFileError, UnknownItemError
from colony_tools.core.schemas import MINEABLE_ITEMS_SCHEMA
from colony_tools.core.tools import ToolTier


def types(raw):
    return MINEABLE_ITEMS_SCHEMA.validate_python(raw)


class TestConvertToItems:
    def test_mineable_block(self):
        items = convert_to_items(types({
            "copperore": {"customData": {"minerMiningTime": 8.5}, "onRemoveType": "copper"}
        }))
        assert len(items) == 1
        item = items[0]
        assert item.name == "Copper"
        assert item.creator == "Miner"
        assert item.creator_id == "minerjob"
        assert item.create_time == 8.5
        assert item.output == 1
        assert item.requires == []
        assert (item.minimum_tool, item.maximum_tool) == (ToolTier.none, ToolTier.steel)

    def test_incomplete_entries_are_ignored(self):
        items = convert_to_items(types({
            "grass": {"onRemoveType": "stonerubble"},
            "bedrock": {"customData": {"minerMiningTime": 4}},
            "decor": {"customData": {}},
            "air": {},
        }))
        assert items == []

    def test_unknown_drop(self):
        with pytest.raises(UnknownItemError):
            convert_to_items(types({
                "mithrilore": {"customData": {"minerMiningTime": 20}, "onRemoveType": "mithril"}
            }))


class TestConvertMineableItems:
    def test_tiny_game_dir(self, game_dir):
        items = convert_mineable_items(game_dir)
        assert sorted(i.item_id for i in items) == ["copper", "tin"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingFileError) as exc:
            convert_mineable_items(str(tmp_path))
        assert "No types.json file found" in str(exc.value)

    def test_two_blocks_dropping_the_same_item(self, tmp_path, write_json):
        write_json("types.json", {
            "copperore": {"customData": {"minerMiningTime": 8}, "onRemoveType": "copper"},
            "copperorerich": {"customData": {"minerMiningTime": 6}, "onRemoveType": "copper"},
        })
        with pytest.raises(DuplicateItemError) as exc:
            convert_mineable_items(str(tmp_path))
        assert "Multiple mineable recipes for item: Copper, please remove one" in str(exc.value)
