"""
Key access over mappings, sequences and records

Dotted-path resolution walks values of very different shapes: dicts,
lists, plain objects, dataclasses and named tuples. Each shape gets an
accessor exposing the same two capabilities, ``has(key)`` and
``get(key)``, so the path walking in ``Arr`` is written once.

Digit segments coming out of a dotted string ("posts.0.id") match integer
keys of a mapping and indexes of a sequence, the way numeric string keys
behave in Laravel arrays.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from support.Contracts import ToArrayInterface

MISSING: Any = object()

_SCALARS = (str, bytes, bytearray, int, float, complex, bool, type(None))
_INDEX = re.compile(r'-?(0|[1-9][0-9]*)')


@runtime_checkable
class Accessor(Protocol):
    """Capability interface used by path resolution."""

    def has(self, key: Any) -> bool:
        ...

    def get(self, key: Any) -> Any:
        ...


def as_index(key: Any) -> Optional[int]:
    """Return the integer a key stands for, if any."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and _INDEX.fullmatch(key):
        return int(key)
    return None


def mapping_key(mapping: Mapping[Any, Any], key: Any) -> Any:
    """Find the key actually stored in ``mapping`` for ``key``, or MISSING."""
    try:
        if key in mapping:
            return key
    except TypeError:
        return MISSING

    index = as_index(key)
    if isinstance(key, str) and index is not None and index in mapping:
        return index
    if isinstance(key, int) and not isinstance(key, bool) and str(key) in mapping:
        return str(key)
    return MISSING


class MappingAccessor:
    """Access for dicts and other mappings."""

    def __init__(self, target: Mapping[Any, Any]) -> None:
        self.target = target

    def has(self, key: Any) -> bool:
        return mapping_key(self.target, key) is not MISSING

    def get(self, key: Any) -> Any:
        return self.target[mapping_key(self.target, key)]


class SequenceAccessor:
    """Access for lists and tuples by position."""

    def __init__(self, target: Any) -> None:
        self.target = target

    def has(self, key: Any) -> bool:
        index = as_index(key)
        return index is not None and 0 <= index < len(self.target)

    def get(self, key: Any) -> Any:
        return self.target[as_index(key)]


class RecordAccessor:
    """Access for objects exposing named fields."""

    def __init__(self, target: Any) -> None:
        self.target = target

    def has(self, key: Any) -> bool:
        name = str(key)

        try:
            if name in vars(self.target):
                return True
        except TypeError:
            pass

        if name in getattr(self.target, '_fields', ()):
            return True

        if name.startswith('__'):
            return False

        try:
            value = getattr(self.target, name)
        except AttributeError:
            return False

        # Methods are not fields
        return not callable(value)

    def get(self, key: Any) -> Any:
        return getattr(self.target, str(key))


def accessor_for(value: Any) -> Optional[Accessor]:
    """Pick the accessor for a value, or None for scalars."""
    if isinstance(value, Mapping):
        return MappingAccessor(value)
    if isinstance(value, ToArrayInterface):
        return accessor_for(value.to_array())
    if isinstance(value, tuple) and hasattr(value, '_fields'):
        return RecordAccessor(value)
    if isinstance(value, (list, tuple)):
        return SequenceAccessor(value)
    if isinstance(value, _SCALARS):
        return None
    return RecordAccessor(value)


def is_accessible(value: Any) -> bool:
    """Determine whether keys can be looked up on the given value."""
    return accessor_for(value) is not None
