"""
name_parts.py - File Name Decomposition

A name's extension runs from its last dot to the end. A name without
any dot is its own extension, so such a name has an empty base and
has_extension() reports False.
"""

from typing import Tuple


def get_extension(name: str) -> str:
    """
    Get the extension of a file name

    Args:
        name: File name

    Returns:
        Suffix starting at the last dot, or the whole name if there is no dot
    """
    if "." not in name:
        return name
    return name[name.rindex("."):]


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split a file name into base and extension

    Args:
        name: File name

    Returns:
        (base, extension); ("", name) when there is no dot
    """
    extension = get_extension(name)
    return name[:len(name) - len(extension)], extension


def has_extension(name: str) -> bool:
    """Whether the name contains a dot"""
    return len(name) != len(get_extension(name))


def base_name(name: str) -> str:
    """
    Get the file name without its extension

    Args:
        name: File name

    Returns:
        Name without extension, or the name unchanged when the
        extension is not shorter than the name
    """
    extension = get_extension(name)
    if len(name) > len(extension):
        return name[:len(name) - len(extension)]
    return name


def base_name_length(name: str) -> int:
    """Length of the name without its extension"""
    return len(name) - len(get_extension(name))
