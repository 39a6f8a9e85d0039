"""
Canonical item representation produced by every converter.

Item is the output unit of the pipeline: it is independent of the raw
source (recipe, growable, mineable) it was built from. to_dict() renders
the camelCase JSON shape consumed by the calculator.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from colony_tools.core.tools import ToolTier


@dataclass
class Requirement:
    name: str
    amount: float = 1

    def to_dict(self):
        return {"name": self.name, "amount": self.amount}


@dataclass
class OptionalOutput:
    name: str
    amount: float = 1
    likelihood: float = 1

    def to_dict(self):
        return {"name": self.name, "amount": self.amount, "likelihood": self.likelihood}


@dataclass
class Size:
    width: int
    height: int

    def to_dict(self):
        return {"width": self.width, "height": self.height}


@dataclass
class Item:
    name: str                       # user-facing item name
    item_id: str                    # raw game identifier (e.g. "poisondart")
    creator: str                    # user-facing creator name
    creator_id: str                 # raw creator identifier (e.g. "alchemist")
    create_time: float              # seconds per craft / harvest
    output: float = 1
    requires: List[Requirement] = field(default_factory=list)
    minimum_tool: ToolTier = ToolTier.none
    maximum_tool: ToolTier = ToolTier.none
    optional_outputs: List[OptionalOutput] = field(default_factory=list)
    size: Optional[Size] = None
    # {"name": {locale: text}, "creator": {locale: text}}
    i18n: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @property
    def key(self):
        return (self.name, self.creator)

    def to_dict(self):
        data = {
            "name": self.name,
            "id": self.item_id,
            "creator": self.creator,
            "creatorID": self.creator_id,
            "createTime": self.create_time,
            "output": self.output,
            "requires": [r.to_dict() for r in self.requires],
            "minimumTool": self.minimum_tool.value,
            "maximumTool": self.maximum_tool.value,
        }
        if self.optional_outputs:
            data["optionalOutputs"] = [o.to_dict() for o in self.optional_outputs]
        if self.size:
            data["size"] = self.size.to_dict()
        if self.i18n:
            data["i18n"] = self.i18n
        return data
