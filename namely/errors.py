"""
errors.py - Exception Types
"""

from pathlib import Path
from typing import Union


class NamelyError(Exception):
    """Base class for name transformation errors"""


class InvalidArgumentError(NamelyError, ValueError):
    """An operation received an argument it cannot work with"""


class FilesystemUnavailableError(NamelyError, OSError):
    """The file could not be inspected on disk"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to read file {self.path}: {reason}")
