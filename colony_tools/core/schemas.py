"""
Schemas for the raw Colony Survival JSON files.

Each model validates only the fields the converters read; game files carry
many unrelated keys, so extra fields are allowed and ignored. Field names
follow Python conventions and map onto the game's camelCase keys through
aliases.

The module-level TypeAdapters describe a whole file (its root is a list or
a map) and are what parsers.read_json_file() expects as its schema.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# Game files mix integer and fractional amounts; keep integers as int.
Number = Union[int, float]


class RawModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ─── toolsets.json ──────────────────────────────────────────────────────────

class Toolset(RawModel):
    key: str
    usable: list[str]


# ─── generateblocks*.json ───────────────────────────────────────────────────

class AttachBehaviour(RawModel):
    npc_type: Optional[str] = Field(default=None, alias="npcType")
    toolset: Optional[str] = None


class BaseType(RawModel):
    attach_behaviour: Optional[list[Union[str, AttachBehaviour]]] = Field(
        default=None, alias="attachBehaviour"
    )


class BlockBehaviour(RawModel):
    base_type: Optional[BaseType] = Field(default=None, alias="baseType")


# ─── recipes_*.json ─────────────────────────────────────────────────────────

class RecipeRequirement(RawModel):
    type: str
    amount: Optional[Number] = None


class RecipeResult(RawModel):
    type: str
    amount: Optional[Number] = None
    is_optional: Optional[bool] = Field(default=None, alias="isOptional")
    chance: Optional[Number] = None


class RawRecipe(RawModel):
    cooldown: Number
    name: str
    requires: list[RecipeRequirement] = Field(default_factory=list)
    results: list[RecipeResult] = Field(default_factory=list)


# ─── types.json ─────────────────────────────────────────────────────────────

class MineableCustomData(RawModel):
    miner_mining_time: Optional[Number] = Field(default=None, alias="minerMiningTime")


class MineableType(RawModel):
    custom_data: Optional[MineableCustomData] = Field(default=None, alias="customData")
    on_remove_type: Optional[str] = Field(default=None, alias="onRemoveType")


# ─── growables.json ─────────────────────────────────────────────────────────

class Growable(RawModel):
    identifier: str
    stages: list[dict]


# ─── localization/<locale>.json ─────────────────────────────────────────────

class LocalisationNPCs(RawModel):
    pipliz: dict[str, str] = Field(default_factory=dict)


class LocalisationSentences(RawModel):
    npcs: LocalisationNPCs = Field(default_factory=LocalisationNPCs)


class Localisation(RawModel):
    sentences: LocalisationSentences = Field(default_factory=LocalisationSentences)
    types: dict[str, str] = Field(default_factory=dict)


TOOLSETS_SCHEMA = TypeAdapter(list[Toolset])
BLOCK_BEHAVIOURS_SCHEMA = TypeAdapter(list[BlockBehaviour])
RECIPES_SCHEMA = TypeAdapter(list[RawRecipe])
MINEABLE_ITEMS_SCHEMA = TypeAdapter(dict[str, MineableType])
GROWABLES_SCHEMA = TypeAdapter(list[Growable])
LOCALISATION_SCHEMA = TypeAdapter(Localisation)
