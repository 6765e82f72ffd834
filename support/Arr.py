from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sized
from typing import Any, Dict, List, Optional, Union
import copy

from support.Accessor import MISSING, accessor_for, as_index, mapping_key
from support.Callback import fit_arity
from support.Contracts import ToArrayInterface
from support.Exceptions import InvalidArgumentException
from support.Types import DottedPath, Key, Keys, Predicate


class Arr:
    """Laravel-style array helper class with dot notation support."""

    @staticmethod
    def get(data: Any, key: Optional[DottedPath], default: Any = None) -> Any:
        """Get an item from an array or object using dot notation.

        A key that exists literally at the top level wins over nested
        traversal. A stored None is returned as None; ``default`` is only
        used when the path cannot be resolved.
        """
        if key is None:
            return data

        if isinstance(key, (list, tuple)):
            return Arr.get(data, '.'.join(str(k) for k in key), default)

        accessor = accessor_for(data)
        if accessor is None:
            raise InvalidArgumentException(
                f"expected a mapping, sequence or object, got {type(data).__name__}", 'data', data
            )

        if accessor.has(key):
            return accessor.get(key)

        if not isinstance(key, str):
            return default

        current = data
        for segment in key.split('.'):
            accessor = accessor_for(current)
            if accessor is not None and accessor.has(segment):
                current = accessor.get(segment)
            else:
                return default

        return current

    @staticmethod
    def set(data: MutableMapping[Any, Any], key: DottedPath, value: Any) -> MutableMapping[Any, Any]:
        """Set an array item to a given value using dot notation."""
        if isinstance(key, (list, tuple)):
            key = '.'.join(str(k) for k in key)

        keys = key.split('.') if isinstance(key, str) else [key]
        current = data

        for k in keys[:-1]:
            stored = mapping_key(current, k)
            if stored is MISSING or not isinstance(current[stored], MutableMapping):
                stored = k if stored is MISSING else stored
                current[stored] = {}
            current = current[stored]

        stored = mapping_key(current, keys[-1])
        current[keys[-1] if stored is MISSING else stored] = value
        return data

    @staticmethod
    def has(data: Any, keys: Keys) -> bool:
        """Check if an item or items exist in an array using dot notation.

        Every key in a list is checked on its own and all must exist. A key
        holding None still exists.
        """
        if isinstance(keys, (str, int)):
            keys = [keys]

        accessor = accessor_for(data)
        if accessor is None or not keys:
            return False
        if isinstance(data, Sized) and len(data) == 0:
            return False

        for key in keys:
            if accessor.has(key):
                continue
            if not isinstance(key, str):
                return False

            current = data
            for segment in key.split('.'):
                segment_accessor = accessor_for(current)
                if segment_accessor is None or not segment_accessor.has(segment):
                    return False
                current = segment_accessor.get(segment)

        return True

    @staticmethod
    def exists(data: Any, key: Key) -> bool:
        """Determine if the given key exists in the provided array or object."""
        accessor = accessor_for(data)
        return accessor is not None and accessor.has(key)

    @staticmethod
    def pluck(data: Any, value: DottedPath, key: Optional[DottedPath] = None) -> Union[List[Any], Dict[Any, Any]]:
        """Pluck an array of values from an array."""
        items = Arr._values(data)

        if key is None:
            return [Arr.get(item, value) for item in items]

        results: Dict[Any, Any] = {}
        for item in items:
            item_key = Arr._as_key(Arr.get(item, key))
            results[item_key] = Arr.get(item, value)
        return results

    @staticmethod
    def only(data: Any, keys: Keys) -> Dict[Any, Any]:
        """Get a subset of the items from the given array."""
        keys = Arr._key_list(keys)

        if isinstance(data, ToArrayInterface):
            data = data.to_array()

        results: Dict[Any, Any] = {}
        if isinstance(data, Mapping):
            for key in keys:
                stored = mapping_key(data, key)
                if stored is not MISSING:
                    results[stored] = data[stored]
        elif isinstance(data, (list, tuple)):
            for key in keys:
                index = as_index(key)
                if index is not None and 0 <= index < len(data):
                    results[index] = data[index]
        else:
            raise InvalidArgumentException(
                f"expected a mapping or sequence, got {type(data).__name__}", 'data', data
            )
        return results

    @staticmethod
    def except_(data: Any, keys: Keys) -> Dict[Any, Any]:
        """Get all of the given array except for a specified array of keys."""
        if isinstance(data, ToArrayInterface):
            data = data.to_array()

        if isinstance(data, Mapping):
            result = copy.deepcopy(dict(data))
        elif isinstance(data, (list, tuple)):
            result = dict(enumerate(copy.deepcopy(list(data))))
        else:
            raise InvalidArgumentException(
                f"expected a mapping or sequence, got {type(data).__name__}", 'data', data
            )

        Arr.forget(result, keys)
        return result

    @staticmethod
    def forget(data: MutableMapping[Any, Any], keys: Keys) -> None:
        """Remove one or many array items from a given array using dot notation.

        The mapping is edited in place, walking through nested mappings and
        lists. Removing a list element shifts the ones after it. Missing
        paths are ignored.
        """
        if not isinstance(data, MutableMapping):
            raise InvalidArgumentException(
                f"expected a mutable mapping, got {type(data).__name__}", 'data', data
            )

        for key in Arr._key_list(keys):
            # A literal top-level key wins, dots included
            stored = mapping_key(data, key)
            if stored is not MISSING:
                del data[stored]
                continue

            if not isinstance(key, str):
                continue

            parts = key.split('.')
            current: Any = data
            for part in parts[:-1]:
                stored = Arr._writable_key(current, part)
                if stored is MISSING:
                    break
                current = current[stored]
            else:
                stored = Arr._writable_key(current, parts[-1])
                if stored is not MISSING:
                    del current[stored]

    @staticmethod
    def first(data: Any, callback: Optional[Predicate] = None, default: Any = None) -> Any:
        """Return the first element in an array passing a given truth test."""
        return Arr._search(Arr._pairs(data), callback, default)

    @staticmethod
    def last(data: Any, callback: Optional[Predicate] = None, default: Any = None) -> Any:
        """Return the last element in an array passing a given truth test."""
        return Arr._search(list(reversed(Arr._pairs(data))), callback, default)

    @staticmethod
    def dot(data: Any, prepend: str = '') -> Dict[str, Any]:
        """Flatten a multi-dimensional associative array with dots.

        Empty nested arrays are kept as values instead of disappearing.
        """
        results: Dict[str, Any] = {}

        for key, value in Arr._pairs(data):
            if Arr._is_array(value) and len(Arr._pairs(value)) > 0:
                results.update(Arr.dot(value, f"{prepend}{key}."))
            else:
                results[f"{prepend}{key}"] = value

        return results

    @staticmethod
    def undot(data: Mapping[Any, Any]) -> Union[Dict[Any, Any], List[Any]]:
        """Convert a flattened "dot" notation array back into an expanded array."""
        result: Dict[Any, Any] = {}
        for key, value in data.items():
            Arr.set(result, str(key), value)
        return Arr._listify(result)

    @staticmethod
    def flatten(data: Any, depth: Union[int, float] = float('inf')) -> List[Any]:
        """Flatten a multi-dimensional array into a single level.

        A depth of 1 or less splices exactly one level of nesting.
        """
        result: List[Any] = []

        for item in Arr._values(data):
            if not Arr._is_array(item):
                result.append(item)
            elif depth <= 1:
                result.extend(Arr._values(item))
            else:
                result.extend(Arr.flatten(item, depth - 1))

        return result

    @staticmethod
    def wrap(value: Any) -> Any:
        """Wrap the given value in an array if it's not already an array."""
        if value is None:
            return []
        return value if isinstance(value, (list, tuple, dict)) else [value]

    @staticmethod
    def accessible(value: Any) -> bool:
        """Determine whether the given value is array accessible."""
        return accessor_for(value) is not None

    # Helper methods
    @staticmethod
    def _is_array(value: Any) -> bool:
        if isinstance(value, tuple) and hasattr(value, '_fields'):
            return False
        return isinstance(value, (Mapping, list, tuple, ToArrayInterface))

    @staticmethod
    def _pairs(data: Any) -> List[tuple[Any, Any]]:
        """Get (key, value) pairs of an array in iteration order."""
        if isinstance(data, ToArrayInterface):
            data = data.to_array()
        if isinstance(data, Mapping):
            return list(data.items())
        if isinstance(data, (list, tuple)):
            return list(enumerate(data))
        raise InvalidArgumentException(
            f"expected a mapping or sequence, got {type(data).__name__}", 'data', data
        )

    @staticmethod
    def _search(pairs: List[tuple[Any, Any]], callback: Optional[Predicate], default: Any) -> Any:
        if callback is None:
            return pairs[0][1] if pairs else default

        test = fit_arity(callback, 2)
        for key, value in pairs:
            if test(value, key):
                return value
        return default

    @staticmethod
    def _values(data: Any) -> List[Any]:
        return [value for _, value in Arr._pairs(data)]

    @staticmethod
    def _key_list(keys: Keys) -> List[Key]:
        if isinstance(keys, (str, int)):
            return [keys]
        return list(keys)

    @staticmethod
    def _as_key(value: Any) -> Any:
        """Turn a plucked value into a usable dict key."""
        if value is None or isinstance(value, (str, int, float, bool)):
            return value
        if type(value).__str__ is not object.__str__:
            return str(value)
        try:
            hash(value)
        except TypeError:
            raise InvalidArgumentException(
                f"cannot use a {type(value).__name__} as a key", 'key', value
            ) from None
        return value

    @staticmethod
    def _writable_key(container: Any, segment: str) -> Any:
        """Key or index of ``segment`` in a mutable mapping or list, or MISSING."""
        if isinstance(container, MutableMapping):
            return mapping_key(container, segment)
        if isinstance(container, MutableSequence):
            index = as_index(segment)
            if index is not None and 0 <= index < len(container):
                return index
        return MISSING

    @staticmethod
    def _listify(value: Any) -> Any:
        """Rebuild dicts keyed "0".."n-1" as lists, recursively."""
        if not isinstance(value, dict):
            return value

        result = {k: Arr._listify(v) for k, v in value.items()}
        if result and list(result) == [str(i) for i in range(len(result))]:
            return list(result.values())
        return result

