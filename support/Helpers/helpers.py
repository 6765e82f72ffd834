from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, MutableMapping, Optional, TypeVar, Union

from support.Accessor import MISSING
from support.Arr import Arr
from support.Collection import collect
from support.Text import Text
from support.Types import DottedPath, Key, Keys, Predicate

T = TypeVar('T')


# Array Helpers
def data_get(target: Any, key: Optional[DottedPath], default: Any = None) -> Any:
    """Get an item from an array or object using dot notation.

    A callable default is only called when the path cannot be resolved.
    """
    result = Arr.get(target, key, MISSING)
    return value(default) if result is MISSING else result


def array_get(array: Any, key: Optional[DottedPath], default: Any = None) -> Any:
    """Get array item using dot notation."""
    return Arr.get(array, key, default)


def array_has(array: Any, keys: Keys) -> bool:
    """Check if array has key(s) using dot notation."""
    return Arr.has(array, keys)


def array_exists(array: Any, key: Key) -> bool:
    """Check if a top-level key exists."""
    return Arr.exists(array, key)


def array_forget(array: MutableMapping[Any, Any], keys: Keys) -> MutableMapping[Any, Any]:
    """Remove array item(s) using dot notation."""
    Arr.forget(array, keys)
    return array


def array_only(array: Any, keys: Keys) -> Dict[Any, Any]:
    """Get only specified keys from array."""
    return Arr.only(array, keys)


def array_except(array: Any, keys: Keys) -> Dict[Any, Any]:
    """Get all keys except specified from array."""
    return Arr.except_(array, keys)


def array_pluck(array: Any, key: DottedPath, index_key: Optional[DottedPath] = None) -> Union[List[Any], Dict[Any, Any]]:
    """Pluck values from array of dictionaries."""
    return Arr.pluck(array, key, index_key)


def array_dot(array: Any, prepend: str = '') -> Dict[str, Any]:
    """Flatten a nested array with dots."""
    return Arr.dot(array, prepend)


def array_undot(array: Mapping[Any, Any]) -> Union[Dict[Any, Any], List[Any]]:
    """Expand a dotted array."""
    return Arr.undot(array)


def array_flatten(array: Any, depth: Union[int, float] = float('inf')) -> List[Any]:
    """Flatten multidimensional array."""
    return Arr.flatten(array, depth)


def array_wrap(value: Any) -> Any:
    """Wrap value in array if not already an array."""
    return Arr.wrap(value)


def array_first(array: Any, callback: Optional[Predicate] = None, default: Any = None) -> Any:
    """Get the first element passing a truth test."""
    return Arr.first(array, callback, default)


def array_last(array: Any, callback: Optional[Predicate] = None, default: Any = None) -> Any:
    """Get the last element passing a truth test."""
    return Arr.last(array, callback, default)


# String Helpers
def str_title(value: str) -> str:
    """Convert string to Title Case."""
    return Text.to_title_case(value)


def str_kebab(value: str) -> str:
    """Convert string to kebab-case."""
    return Text.to_kebab_case(value)


def str_snake(value: str, delimiter: str = '_') -> str:
    """Convert string to snake_case."""
    return Text.to_snake_case(value, delimiter)


def str_camel(value: str) -> str:
    """Convert string to camelCase."""
    return Text.to_camel_case(value)


def str_studly(value: str) -> str:
    """Convert string to StudlyCase."""
    return Text.to_pascal_case(value)


def str_slug(value: str, separator: str = '-') -> str:
    """Generate URL-friendly slug."""
    return Text.slugify(value, separator)


def str_limit(value: str, limit: Optional[int] = None, end: str = '...') -> str:
    """Limit string length, end included."""
    return Text.truncate(value, limit, end)


def str_contains(haystack: str, needles: Union[str, List[str]]) -> bool:
    """Check if string contains substring(s)."""
    return Text.contains(haystack, needles)


def str_random(length: Optional[int] = None) -> str:
    """Generate random hex string."""
    return Text.random(length)


def str_label(value: str, all_words: bool = True) -> str:
    """Turn an identifier into a readable label."""
    return Text.to_readable_label(value, all_words)


# Utility Helpers
def value(value: Union[Any, Callable[[], Any]]) -> Any:
    """Return value or call callable."""
    return value() if callable(value) else value


def tap(value: T, callback: Callable[[T], Any]) -> T:
    """Tap into a value."""
    callback(value)
    return value
