"""File and text loading utilities.

This subpackage turns text and files into split documents.

Key modules:
    - frontmatter: Text-level front-matter splitting
    - documents: Document file loading
"""

from .frontmatter import split_frontmatter
from .documents import load_document

__all__ = [
    "split_frontmatter",
    "load_document",
]
