from __future__ import annotations

import os
from typing import Any, Optional


def env(key: str, default: Any = None) -> Any:
    """Get an environment variable, casting booleans, null and numbers."""
    value = os.getenv(key)
    if value is None:
        return default
    
    # Cast boolean values
    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    
    # Cast null/none values
    if value.lower() in ('null', 'none', ''):
        return None
    
    # Try to cast to number
    try:
        if '.' not in value:
            return int(value)
        return float(value)
    except ValueError:
        pass
    
    return value


def _octal(value: Any, default: int) -> int:
    """Read a permission mode given as 0o755, '755' or an int."""
    if value is None:
        return default
    # env() has already turned "755" into the int 755
    try:
        return int(str(value), 8)
    except ValueError:
        return default


class Settings:
    """Runtime settings for the support helpers, read from the environment."""
    
    def __init__(self) -> None:
        # Logging
        self.LOG_LEVEL: str = str(env("SUPPORT_LOG_LEVEL", "WARNING")).upper()
        self.LOG_NAME: str = str(env("SUPPORT_LOG_NAME", "support"))
        
        # Serialization
        self.JSON_INDENT: int = int(env("SUPPORT_JSON_INDENT", 4))
        
        # Filesystem
        self.FILE_ENCODING: str = str(env("SUPPORT_FILE_ENCODING", "utf-8"))
        self.DIRECTORY_MODE: int = _octal(env("SUPPORT_DIRECTORY_MODE"), 0o755)
        
        # Text
        self.TRUNCATE_LENGTH: int = int(env("SUPPORT_TRUNCATE_LENGTH", 50))
        self.RANDOM_LENGTH: int = int(env("SUPPORT_RANDOM_LENGTH", 10))
    
    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get a setting by name."""
        return getattr(self, key.upper(), default)


settings = Settings()
