"""
file_size.py - File Size Query

The only module that reads from the filesystem. It never writes.
"""

from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path
from typing import Union
import logging

from .errors import FilesystemUnavailableError
from .models_fs import FileNameRef

logger = logging.getLogger(__name__)


def size_in_kib(file: Union[str, Path, FileNameRef]) -> str:
    """
    Get the size of a file in KiB

    Args:
        file: Path string, Path object or FileNameRef

    Returns:
        Size divided by 1024, rounded half up to two decimals (e.g. "2.00")
    """
    path = Path(file.path) if isinstance(file, FileNameRef) else Path(file)

    try:
        size = path.stat().st_size
    except OSError as e:
        logger.warning("Cannot stat %s: %s", path, e)
        raise FilesystemUnavailableError(path, e.strerror or str(e)) from e

    # Halves round up; str() of a Decimal is locale-independent
    kib = (Decimal(size) / 1024).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return str(kib)
