from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Union


class ToArrayInterface(ABC):
    """Contract for objects that can be converted to a plain container."""
    
    @abstractmethod
    def to_array(self) -> Union[Dict[Any, Any], List[Any]]:
        """Get the instance as a dict or list."""
        pass
