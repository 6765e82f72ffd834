from __future__ import annotations

from typing import Any, Optional, Union
import os


class SupportException(Exception):
    """Base exception for the support helpers"""
    pass


class InvalidArgumentException(SupportException, TypeError):
    """Exception raised when a helper receives a value it cannot work with"""
    
    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None) -> None:
        self.argument = argument
        self.value = value
        
        if argument is not None:
            message = f"Invalid argument `{argument}`: {message}"
        
        super().__init__(message)


class FilesystemException(SupportException, OSError):
    """Exception raised when a filesystem operation fails"""
    pass


class FileNotFoundException(FilesystemException, FileNotFoundError):
    """Exception raised when a file or directory does not exist"""
    
    def __init__(self, path: Union[str, os.PathLike[str]]) -> None:
        self.path = os.fspath(path)
        
        super().__init__(f"File does not exist at path {self.path}.")
