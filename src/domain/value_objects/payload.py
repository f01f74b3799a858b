"""Deeply immutable copies of free-form payloads.

Description and record payloads are caller-supplied trees of mappings,
sequences and scalars. They are frozen on the way in: mappings become
read-only ``MappingProxyType`` views, lists and tuples become tuples and
sets become frozensets, so nothing reachable from the stored payload can be
mutated afterwards.
"""

import copy
from collections.abc import Mapping, Set
from types import MappingProxyType
from typing import Any


def freeze_payload(value: Any) -> Any:
    """Return a recursively read-only copy of *value*."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_payload(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_payload(item) for item in value)
    if isinstance(value, Set):
        return frozenset(freeze_payload(item) for item in value)
    return copy.deepcopy(value)


def thaw_payload(value: Any) -> Any:
    """Return a plain, mutable ``dict``/``list`` copy of a frozen payload."""
    if isinstance(value, Mapping):
        return {key: thaw_payload(item) for key, item in value.items()}
    if isinstance(value, (tuple, list)):
        return [thaw_payload(item) for item in value]
    if isinstance(value, (frozenset, set)):
        return [thaw_payload(item) for item in value]
    return copy.deepcopy(value)


def ordered_items(payload: Mapping[str, Any]) -> tuple:
    """Key/value pairs in insertion order, nested mappings included.

    Used for equality so that key order and value types both count:
    ``True`` and ``1`` are told apart.
    """
    return tuple((key, type(item), _ordered(item)) for key, item in payload.items())


def _ordered(value: Any) -> Any:
    if isinstance(value, Mapping):
        return ordered_items(value)
    if isinstance(value, tuple):
        return tuple((type(item), _ordered(item)) for item in value)
    return value
