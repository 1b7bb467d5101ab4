"""
transforms.py - Name Transformation Module

Responsibilities:
- Compute a proposed new name for a single file (reverse/swap/replace/case)
- Dispatch configured operations, alone or chained

Every function returns a new FileNameRef with the same parent path.
Nothing here touches the filesystem.
"""

from typing import Iterable
import logging

from .errors import InvalidArgumentError
from .models_fs import FileNameRef, CaseMode, Operation, TransformOptions
from .name_parts import get_extension, has_extension, base_name, base_name_length
from .text_match import count_occurrences, replace_text

logger = logging.getLogger(__name__)

# Characters up to and including the space, trimmed around swapped parts
TRIM_CHARS = "".join(chr(code) for code in range(33))


def reverse_base_name(ref: FileNameRef) -> FileNameRef:
    """
    Reverse the characters of the base name

    Reversal is per code point; combining marks are not kept with
    their base characters.

    Args:
        ref: File name

    Returns:
        File name with the base name reversed
    """
    name = ref.name
    extension = get_extension(name)
    reversed_name = base_name(name)[::-1]
    # Without a dot the whole name was reversed, nothing to append
    if not has_extension(name):
        extension = ""
    return ref.with_name(reversed_name + extension)


def swap_around_separator(ref: FileNameRef, separator: str, add_spacing: bool = True) -> FileNameRef:
    """
    Swap the two parts of the name around a separator
    Example: A - B.txt -> B - A.txt

    The name is returned unchanged when the separator is a dot or does not
    appear exactly once in the base name.
    Both parts are trimmed of spaces and control characters; other
    Unicode whitespace such as a no-break space is kept.

    Args:
        ref: File name
        separator: Single separator character
        add_spacing: Whether to put a space on each side of the separator

    Returns:
        File name with the parts swapped
    """
    if len(separator) != 1:
        raise InvalidArgumentError(f"Separator must be a single character: {separator!r}")

    name = ref.name
    if has_extension(name):
        extension = get_extension(name)
        region = name[:base_name_length(name)]
    else:
        extension = ""
        region = name

    if separator == "." or count_occurrences(region, separator) != 1:
        logger.debug("Separator %r is not unique in %r, name left unchanged", separator, name)
        return ref.with_name(name)

    index = region.index(separator)
    part_one = region[:index].strip(TRIM_CHARS)
    part_two = region[index + 1:].strip(TRIM_CHARS)
    space = " " if add_spacing else ""

    return ref.with_name(part_two + space + separator + space + part_one + extension)


def replace_all(ref: FileNameRef, original: str, replacement: str, case_sensitive: bool = True) -> FileNameRef:
    """
    Replace every occurrence of original with replacement in the base name

    The replacement runs over the whole name; the original extension's
    length is then cut off the end and the original extension appended.

    Args:
        ref: File name
        original: Text to replace (must not be empty)
        replacement: New text
        case_sensitive: Whether matching is case-sensitive

    Returns:
        File name with the text replaced
    """
    name = ref.name
    extension = get_extension(name)
    new_name = replace_text(name, original, replacement, case_sensitive)
    if has_extension(name):
        new_name = new_name[:max(0, len(new_name) - len(extension))]
    else:
        extension = ""
    return ref.with_name(new_name + extension)


def invert_case(text: str) -> str:
    """
    Toggle the case of every character

    Uppercase letters become lowercase, everything else is uppercased.
    Characters without a single-character counterpart stay as they are.
    """
    chars = []
    for char in text:
        toggled = char.lower() if char.isupper() else char.upper()
        chars.append(toggled if len(toggled) == 1 else char)
    return "".join(chars)


def change_case(ref: FileNameRef, mode: CaseMode) -> FileNameRef:
    """
    Change the letter case of the file name

    The whole name is converted and then cut to the base name length,
    so the extension is not appended back. A name without a dot is
    converted as a whole.

    Args:
        ref: File name
        mode: Case conversion mode

    Returns:
        File name with the letter case changed
    """
    name = ref.name
    length = base_name_length(name) if has_extension(name) else len(name)
    if mode == CaseMode.LOWERCASE:
        new_name = name.lower()[:length]
    elif mode == CaseMode.UPPERCASE:
        new_name = name.upper()[:length]
    elif mode == CaseMode.INVERT_CASE:
        new_name = invert_case(name[:length])
    else:
        raise InvalidArgumentError(f"Unknown case mode: {mode!r}")

    return ref.with_name(new_name)


def apply_operation(ref: FileNameRef, operation: Operation, options: TransformOptions) -> FileNameRef:
    """
    Apply one operation using the parameters in options

    Args:
        ref: File name
        operation: Operation to apply
        options: Operation parameters

    Returns:
        Transformed file name
    """
    logger.debug("Applying %s to %r", operation.value, ref.name)

    if operation == Operation.REVERSE:
        return reverse_base_name(ref)
    elif operation == Operation.SWAP:
        return swap_around_separator(ref, options.separator, options.add_spacing)
    elif operation == Operation.REPLACE:
        return replace_all(ref, options.original, options.replacement, options.case_sensitive)
    elif operation == Operation.CASE:
        return change_case(ref, options.case_mode)
    else:
        raise InvalidArgumentError(f"Unknown operation: {operation!r}")


def apply_operations(
    ref: FileNameRef,
    operations: Iterable[Operation],
    options: TransformOptions
) -> FileNameRef:
    """
    Apply operations in order, each one to the previous result

    Args:
        ref: File name
        operations: Operations to apply
        options: Operation parameters

    Returns:
        Transformed file name
    """
    for operation in operations:
        ref = apply_operation(ref, operation, options)
    return ref
