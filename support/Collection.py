from __future__ import annotations

from typing import Any, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union
from collections.abc import Mapping
from functools import cmp_to_key, reduce
import json

from typing_extensions import Self

from support.Accessor import MISSING, accessor_for, as_index, mapping_key
from support.Arr import Arr
from support.Callback import fit_arity
from support.Config import settings
from support.Contracts import ToArrayInterface, ToJsonInterface
from support.Exceptions import InvalidArgumentException
from support.Types import Comparator, Key, Predicate, Reducer, Transformer

T = TypeVar('T')

# Group key for items whose group value is missing or None
NULL_GROUP = ''


def _sort_key(value: Any) -> Tuple[int, Any]:
    """Rank None, numbers and strings apart so mixed values can be ordered."""
    if value is None:
        return (0, 0)
    if isinstance(value, (int, float)):
        return (1, value)
    if isinstance(value, str):
        return (2, value)
    return (3, value)


class Collection(ToArrayInterface, ToJsonInterface, Generic[T]):
    """Laravel-style collection over an ordered key/value container.

    Keys are kept through filter, slice, sort and reverse, so a list
    turns into a dict as soon as its keys stop being 0..n-1. Those
    methods, together with map, chunk, merge, pluck and group_by, return
    a new collection. add, set, remove and clear change this one and
    return it.

    Copies are shallow: nested containers are shared between the source
    and the collections derived from it.
    """

    def __init__(self, items: Union[Mapping[Any, T], Iterable[T], 'Collection[T]', None] = None):
        if items is None:
            self._data: Dict[Any, T] = {}
        elif isinstance(items, Collection):
            self._data = dict(items._data)
        elif isinstance(items, Mapping):
            self._data = dict(items)
        elif isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
            raise InvalidArgumentException(
                f"cannot build a collection from {type(items).__name__}", 'items', items
            )
        else:
            self._data = dict(enumerate(items))

    @classmethod
    def make(cls, items: Union[Mapping[Any, T], Iterable[T], None] = None) -> 'Collection[T]':
        """Create a new collection instance."""
        return cls(items)

    # Core methods
    def count(self) -> int:
        """Get the number of items."""
        return len(self._data)

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return len(self._data) == 0

    def keys(self) -> List[Any]:
        """Get the keys in order."""
        return list(self._data.keys())

    def values(self) -> List[T]:
        """Get the values in order, re-indexed from zero."""
        return list(self._data.values())

    def items(self) -> List[Tuple[Any, T]]:
        """Get (key, value) pairs in order."""
        return list(self._data.items())

    def get(self, key: Any, default: Any = None) -> Any:
        """Get an item by key, dot notation allowed."""
        return Arr.get(self._data, key, default)

    def has(self, key: Any) -> bool:
        """Check if a key exists, even when its value is None."""
        return Arr.has(self._data, key)

    def first(self) -> Optional[T]:
        """Get the first item."""
        return next(iter(self._data.values()), None)

    def last(self) -> Optional[T]:
        """Get the last item."""
        return next(reversed(self._data.values()), None)

    # Adding/Removing items
    def add(self, item: T) -> Self:
        """Append an item under the next free integer key."""
        indexes = [index for index in map(as_index, self._data) if index is not None]
        self._data[max(indexes) + 1 if indexes else 0] = item
        return self

    def set(self, key: Key, value: T) -> Self:
        """Set an item under a key, replacing any existing value."""
        stored = mapping_key(self._data, key)
        if stored is MISSING:
            # "3" and 3 are the same key
            index = as_index(key)
            stored = key if index is None else index
        self._data[stored] = value
        return self

    def remove(self, key: Key) -> Self:
        """Remove an item by key."""
        stored = mapping_key(self._data, key)
        if stored is not MISSING:
            del self._data[stored]
        return self

    def clear(self) -> Self:
        """Remove all items."""
        self._data.clear()
        return self

    # Filtering and transforming
    def filter(self, callback: Optional[Predicate] = None) -> 'Collection[T]':
        """Filter items using a callback receiving (value, key)."""
        if callback is None:
            # Filter out falsy values
            return Collection({k: v for k, v in self._data.items() if v})

        test = fit_arity(callback, 2)
        return Collection({k: v for k, v in self._data.items() if test(v, k)})

    def map(self, callback: Transformer) -> 'Collection[Any]':
        """Transform items using a callback receiving (value, key)."""
        transform = fit_arity(callback, 2)
        return Collection({k: transform(v, k) for k, v in self._data.items()})

    def reduce(self, callback: Reducer, initial: Any = None) -> Any:
        """Reduce the collection to a single value."""
        return reduce(callback, self._data.values(), initial)

    def pluck(self, key: Key) -> 'Collection[Any]':
        """Get the value of a key from every item, None where it is missing."""
        def pick(item: Any) -> Any:
            accessor = accessor_for(item)
            if accessor is not None and accessor.has(key):
                return accessor.get(key)
            return None

        return Collection({k: pick(v) for k, v in self._data.items()})

    def group_by(self, key: Key) -> 'Collection[List[T]]':
        """Group items by the value of a key."""
        groups: Dict[Any, List[T]] = {}

        for item in self._data.values():
            accessor = accessor_for(item)
            group_key = accessor.get(key) if accessor is not None and accessor.has(key) else None
            if group_key is None:
                group_key = NULL_GROUP

            try:
                groups.setdefault(group_key, []).append(item)
            except TypeError:
                raise InvalidArgumentException(
                    f"cannot group by a {type(group_key).__name__} value", 'key', key
                ) from None

        return Collection(groups)

    def merge(self, items: Union[Mapping[Any, T], Iterable[T], 'Collection[T]']) -> 'Collection[T]':
        """Merge with another array or collection.

        Integer keys from both sides are renumbered and appended, string
        keys from ``items`` overwrite existing ones.
        """
        other = items if isinstance(items, Collection) else Collection(items)

        merged: Dict[Any, T] = {}
        next_index = 0
        for source in (self._data, other._data):
            for key, value in source.items():
                if isinstance(key, int) and not isinstance(key, bool):
                    merged[next_index] = value
                    next_index += 1
                else:
                    merged[key] = value

        return Collection(merged)

    # Slicing
    def slice(self, offset: int, length: Optional[int] = None) -> 'Collection[T]':
        """Get a slice of the collection, keeping keys."""
        pairs = list(self._data.items())
        total = len(pairs)

        start = offset if offset >= 0 else max(total + offset, 0)
        start = min(start, total)

        if length is None:
            stop = total
        elif length < 0:
            stop = max(total + length, start)
        else:
            stop = min(start + length, total)

        return Collection(dict(pairs[start:stop]))

    def chunk(self, size: int) -> 'Collection[Dict[Any, T]]':
        """Break collection into chunks, each keeping its keys."""
        if size < 1:
            raise InvalidArgumentException("chunk size must be at least 1", 'size', size)

        pairs = list(self._data.items())
        return Collection([dict(pairs[i:i + size]) for i in range(0, len(pairs), size)])

    # Sorting
    def sort(self, callback: Optional[Comparator] = None) -> 'Collection[T]':
        """Sort by value, keeping keys attached to their values.

        Without a comparator None sorts first, then numbers, then strings.
        Values of other kinds must be comparable among themselves.
        """
        if callback is None:
            try:
                pairs = sorted(self._data.items(), key=lambda pair: _sort_key(pair[1]))
            except TypeError:
                raise InvalidArgumentException(
                    "cannot order the values without a comparator", 'callback', None
                ) from None
        else:
            compare = cmp_to_key(lambda a, b: callback(a[1], b[1]))
            pairs = sorted(self._data.items(), key=compare)

        return Collection(dict(pairs))

    def reverse(self) -> 'Collection[T]':
        """Reverse the collection, keeping keys."""
        return Collection(dict(reversed(list(self._data.items()))))

    # Serialization
    def to_array(self) -> Union[Dict[Any, T], List[T]]:
        """Get the items as a list when keyed 0..n-1, otherwise as a dict."""
        if list(self._data.keys()) == list(range(len(self._data))):
            return list(self._data.values())
        return dict(self._data)

    def json_serialize(self) -> Union[Dict[Any, T], List[T]]:
        """Get the data that to_json encodes."""
        return self.to_array()

    def to_json(self, indent: Optional[int] = None) -> str:
        """Convert collection to pretty-printed JSON."""
        return json.dumps(
            self.json_serialize(),
            indent=settings.JSON_INDENT if indent is None else indent,
            default=self._json_default,
        )

    @staticmethod
    def _json_default(value: Any) -> Any:
        if isinstance(value, ToArrayInterface):
            return value.to_array()
        if hasattr(value, '__dict__'):
            return {k: v for k, v in vars(value).items() if not k.startswith('_')}
        return str(value)

    # Magic methods
    def __iter__(self) -> Iterator[T]:
        """Iterate over values."""
        return iter(list(self._data.values()))

    def __len__(self) -> int:
        """Get length."""
        return len(self._data)

    def __getitem__(self, key: Any) -> T:
        """Get item by key."""
        stored = mapping_key(self._data, key)
        if stored is MISSING:
            raise KeyError(key)
        return self._data[stored]

    def __contains__(self, item: object) -> bool:
        """Check if item is one of the values."""
        return item in self._data.values()

    def __bool__(self) -> bool:
        """Check if collection is not empty."""
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._data == other._data
        if isinstance(other, (list, dict)):
            return self.to_array() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """String representation."""
        return f"Collection({self.to_array()!r})"

    def __str__(self) -> str:
        """JSON representation."""
        return self.to_json()


def collect(items: Union[Mapping[Any, T], Iterable[T], None] = None) -> Collection[T]:
    """Create a collection from the given items."""
    return Collection.make(items)
