"""
text_match.py - Text Matching Tools

Provides occurrence counting, replacement and name validation functions
"""

from typing import Optional
import re

from .errors import InvalidArgumentError


def count_occurrences(text: str, substring: str) -> int:
    """
    Count occurrences of substring in text

    Removes every occurrence and measures how much shorter the text got,
    so overlapping matches are counted the way str.replace consumes them.

    Args:
        text: Text to search
        substring: Substring to look for (must not be empty)

    Returns:
        Number of occurrences
    """
    if not substring:
        raise InvalidArgumentError("Search text cannot be empty")
    removed = len(text) - len(text.replace(substring, ""))
    return removed // len(substring)


def replace_text(text: str, old: str, new: str, case_sensitive: bool = True) -> str:
    """
    Replace string in text

    Args:
        text: Original text
        old: String to replace (must not be empty)
        new: Replacement string
        case_sensitive: Whether case-sensitive

    Returns:
        Replaced text
    """
    if not old:
        raise InvalidArgumentError("Text to replace cannot be empty")

    if case_sensitive:
        return text.replace(old, new)
    else:
        # Case-insensitive replacement
        pattern = re.compile(re.escape(old), re.IGNORECASE)
        return pattern.sub(lambda _: new, text)


def is_valid_filename(name: str) -> tuple[bool, Optional[str]]:
    """
    Check if filename is valid (mainly for Windows)

    Args:
        name: Filename

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Filename cannot be empty"

    # Windows invalid characters
    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        if char in name:
            return False, f"Filename contains invalid character: {char}"

    if name.endswith(' ') or name.endswith('.'):
        return False, "Filename cannot end with space or dot"

    reserved_names = {
        'CON', 'PRN', 'AUX', 'NUL',
        'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
        'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
    }
    name_upper = name.upper().split('.')[0]
    if name_upper in reserved_names:
        return False, f"Filename is a Windows reserved name: {name_upper}"

    if len(name) > 255:
        return False, "Filename exceeds 255 characters"

    return True, None
