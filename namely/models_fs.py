"""
models_fs.py - Core Data Structure Definitions

Contains:
- FileNameRef: Parent path and file name pair
- CaseMode: Letter case conversion modes
- Operation: Available name transformations
- TransformOptions: Transformation parameters
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union
import os


class CaseMode(Enum):
    """Letter case conversion mode"""
    LOWERCASE = "lower"      # All lowercase
    UPPERCASE = "upper"      # All uppercase
    INVERT_CASE = "invert"   # Toggle every letter


class Operation(Enum):
    """Name transformation operation"""
    REVERSE = "reverse"      # Reverse the base name
    SWAP = "swap"            # Swap the parts around a separator
    REPLACE = "replace"      # Replace text in the base name
    CASE = "case"            # Change letter case


@dataclass(frozen=True)
class FileNameRef:
    """Read-only view of a file path split into parent path and name"""
    parent_path: str                # Parent directory, never modified
    name: str                       # File name (with extension)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FileNameRef":
        """Create FileNameRef from a path string or Path object"""
        parent, name = os.path.split(str(path))
        return cls(parent_path=parent, name=name)

    @property
    def path(self) -> str:
        """Full path string"""
        if not self.parent_path:
            return self.name
        return os.path.join(self.parent_path, self.name)

    def with_name(self, name: str) -> "FileNameRef":
        """Same parent path, new name"""
        return FileNameRef(parent_path=self.parent_path, name=name)


@dataclass
class TransformOptions:
    """Transformation options configuration"""
    # Separator swap
    separator: str = "-"            # Character between the two parts
    add_spacing: bool = True        # Put a space on each side of the separator

    # Text replacement
    original: str = ""              # Text to replace
    replacement: str = ""           # Replacement text
    case_sensitive: bool = True     # Whether matching is case-sensitive

    # Letter case
    case_mode: CaseMode = CaseMode.LOWERCASE
