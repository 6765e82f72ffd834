"""
Shared type aliases

Names used across the array, collection and file helpers so signatures
read the same everywhere.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from typing import Any, List, Union

from typing_extensions import TypeAlias

# A key of one container level
Key: TypeAlias = Union[str, int]

# "a.b.c" or ["a", "b", "c"]
DottedPath: TypeAlias = Union[str, int, Sequence[Union[str, int]]]

# One path or several independent paths
Keys: TypeAlias = Union[Key, Sequence[Key]]

# Callbacks take (value) or (value, key)
Predicate: TypeAlias = Callable[..., bool]
Transformer: TypeAlias = Callable[..., Any]

Comparator: TypeAlias = Callable[[Any, Any], int]
Reducer: TypeAlias = Callable[[Any, Any], Any]

PathLike: TypeAlias = Union[str, os.PathLike[str]]
PathList: TypeAlias = Union[PathLike, List[PathLike]]
