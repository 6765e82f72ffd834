from .Accessor import Accessor, accessor_for
from .Arr import Arr
from .Collection import Collection, collect
from .Config import Settings, settings, env
from .Contracts import ToArrayInterface, ToJsonInterface
from .Exceptions import (
    SupportException,
    InvalidArgumentException,
    FilesystemException,
    FileNotFoundException,
)
from .File import File
from .Log import get_logger
from .Text import Text
from .Helpers import (
    data_get,
    array_get,
    array_has,
    array_exists,
    array_forget,
    array_only,
    array_except,
    array_pluck,
    array_dot,
    array_undot,
    array_flatten,
    array_wrap,
    array_first,
    array_last,
    str_title,
    str_kebab,
    str_snake,
    str_camel,
    str_studly,
    str_slug,
    str_limit,
    str_contains,
    str_random,
    str_label,
    value,
    tap,
)

__version__ = "1.0.0"

__all__ = [
    "Accessor",
    "accessor_for",
    "Arr",
    "Collection",
    "collect",
    "Settings",
    "settings",
    "env",
    "ToArrayInterface",
    "ToJsonInterface",
    "SupportException",
    "InvalidArgumentException",
    "FilesystemException",
    "FileNotFoundException",
    "File",
    "get_logger",
    "Text",
    "data_get",
    "array_get",
    "array_has",
    "array_exists",
    "array_forget",
    "array_only",
    "array_except",
    "array_pluck",
    "array_dot",
    "array_undot",
    "array_flatten",
    "array_wrap",
    "array_first",
    "array_last",
    "str_title",
    "str_kebab",
    "str_snake",
    "str_camel",
    "str_studly",
    "str_slug",
    "str_limit",
    "str_contains",
    "str_random",
    "str_label",
    "value",
    "tap",
]
