from __future__ import annotations

from .helpers import *

__all__ = [
    # Array helpers
    'data_get', 'array_get', 'array_has', 'array_exists', 'array_forget',
    'array_only', 'array_except', 'array_pluck', 'array_dot', 'array_undot',
    'array_flatten', 'array_wrap', 'array_first', 'array_last',

    # Collection helpers
    'collect',

    # String helpers
    'str_title', 'str_kebab', 'str_snake', 'str_camel', 'str_studly',
    'str_slug', 'str_limit', 'str_contains', 'str_random', 'str_label',

    # Utility helpers
    'value', 'tap',
]
