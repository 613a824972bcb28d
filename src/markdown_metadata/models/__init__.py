"""
markdown-metadata models.

This subpackage contains the format tag enum and the Pydantic models
for parsed metadata, loaded documents and runtime configuration.

Key models:
    - Format: Closed set of front-matter formats
    - Metadata: Parsed front-matter (title, template, variables)
    - Document: A loaded file split into metadata and body
    - Config: Application configuration loaded from environment
"""

from .format import Format
from .metadata import Metadata, DATE_LAYOUTS, parse_date
from .document import Document
from .config import Config, load_env

__all__ = [
    "Format",
    "Metadata",
    "DATE_LAYOUTS",
    "parse_date",
    "Document",
    "Config",
    "load_env",
]
