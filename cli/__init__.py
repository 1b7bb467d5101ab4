"""
cli - Command Line Interface for the file name transformation helpers
"""

from .cli_entry import main

__all__ = ["main"]
