"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - scanning: Byte-level line and brace boundary scanning
    - logging: Logging configuration
"""

from .scanning import (
    as_bytes,
    iter_lines,
    skip_blank_lines,
    first_line,
    first_significant_byte,
    match_brace,
    strip_leading_newline,
)
from .logging import configure_logging, get_logger

__all__ = [
    # scanning
    "as_bytes",
    "iter_lines",
    "skip_blank_lines",
    "first_line",
    "first_significant_byte",
    "match_brace",
    "strip_leading_newline",
    # logging
    "configure_logging",
    "get_logger",
]
