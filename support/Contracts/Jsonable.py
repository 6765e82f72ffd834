from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class ToJsonInterface(ABC):
    """Contract for objects with a JSON representation."""
    
    @abstractmethod
    def to_json(self, indent: Optional[int] = None) -> str:
        """Convert the object to its JSON representation."""
        pass
