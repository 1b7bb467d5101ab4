"""
namely - File Name Transformation Helpers

Provides pure functions that compute a proposed new name for a file
(reverse, separator swap, text replacement, letter case) and a read-only
file size query.
"""

from .models_fs import (
    FileNameRef,
    CaseMode,
    Operation,
    TransformOptions,
)

from .errors import (
    NamelyError,
    InvalidArgumentError,
    FilesystemUnavailableError,
)

from .name_parts import (
    get_extension,
    split_extension,
    has_extension,
    base_name,
    base_name_length,
)

from .text_match import (
    count_occurrences,
    replace_text,
    is_valid_filename,
)

from .transforms import (
    reverse_base_name,
    swap_around_separator,
    replace_all,
    invert_case,
    change_case,
    apply_operation,
    apply_operations,
)

from .file_size import size_in_kib

__all__ = [
    # Data models
    "FileNameRef",
    "CaseMode",
    "Operation",
    "TransformOptions",

    # Errors
    "NamelyError",
    "InvalidArgumentError",
    "FilesystemUnavailableError",

    # Name decomposition
    "get_extension",
    "split_extension",
    "has_extension",
    "base_name",
    "base_name_length",

    # Text processing
    "count_occurrences",
    "replace_text",
    "is_valid_filename",

    # Transformations
    "reverse_base_name",
    "swap_around_separator",
    "replace_all",
    "invert_case",
    "change_case",
    "apply_operation",
    "apply_operations",

    # File size
    "size_in_kib",
]
