"""
Whole-catalog checks run over the combined item list.

find_duplicate() guards the (name, creator) uniqueness of the catalog.
prune_uncreatable() drops every item that can never be made because
something it requires has no creatable recipe anywhere in the catalog.
"""

from collections import defaultdict
from typing import NamedTuple


class Duplicate(NamedTuple):
    name: str
    creator: str


def find_duplicate(items):
    """Returns the first Duplicate (name, creator) pair found, or None."""
    seen = set()
    for item in items:
        if item.key in seen:
            return Duplicate(*item.key)
        seen.add(item.key)
    return None


def prune_uncreatable(items):
    """
    Returns the items that are transitively creatable, in input order.

    An item is creatable once every name it requires is the name of at
    least one creatable item. Any producer is enough; output rates are not
    considered. Starting from items with no requirements, names become
    available as their first recipe is accepted, which in turn may unlock
    the items waiting on them. Whatever is never unlocked is removed,
    including requirement cycles that nothing outside the cycle produces.

    Each removal is reported on stdout in input order.
    """
    # index -> number of distinct required names not yet available
    missing = {}
    waiting_on = defaultdict(list)
    available = set()
    ready = []

    for index, item in enumerate(items):
        required = {r.name for r in item.requires}
        missing[index] = len(required)
        for name in required:
            waiting_on[name].append(index)
        if not required:
            ready.append(index)

    creatable = set()
    while ready:
        index = ready.pop()
        creatable.add(index)

        name = items[index].name
        if name in available:
            continue
        available.add(name)

        for dependent in waiting_on.pop(name, []):
            missing[dependent] -= 1
            if missing[dependent] == 0:
                ready.append(dependent)

    survivors = []
    for index, item in enumerate(items):
        if index in creatable:
            survivors.append(item)
        else:
            print(f"Removed recipe: {item.name} from {item.creator} as depends on item that cannot be created")

    return survivors
