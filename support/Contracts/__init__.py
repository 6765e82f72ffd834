from __future__ import annotations

from .Arrayable import ToArrayInterface
from .Jsonable import ToJsonInterface

__all__: list[str] = [
    'ToArrayInterface',
    'ToJsonInterface',
]
