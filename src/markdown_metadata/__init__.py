"""
markdown-metadata - Front-matter extraction for text documents.

This package detects a leading JSON, YAML or TOML metadata block in a
document and separates it from the document body.

Main entry points:
    - markdown_metadata.core.dispatch: get_parser() and sniff_format()
    - markdown_metadata.core.parser: Parser and its format variants
    - markdown_metadata.loaders: split_frontmatter() and load_document()
    - markdown_metadata.main: CLI entrypoint
"""

from markdown_metadata.core import (
    ErrorKind,
    FrontMatterError,
    AbsentMetadataError,
    UnterminatedBlockError,
    MalformedBlockError,
    ParserNotReadyError,
    Parser,
    new_parser,
    JSONParser,
    YAMLParser,
    TOMLParser,
    NoneParser,
    sniff_format,
    get_parser,
)
from markdown_metadata.models import Format, Metadata, Document
from markdown_metadata.loaders import split_frontmatter, load_document

__all__ = [
    "ErrorKind",
    "FrontMatterError",
    "AbsentMetadataError",
    "UnterminatedBlockError",
    "MalformedBlockError",
    "ParserNotReadyError",
    "Parser",
    "new_parser",
    "JSONParser",
    "YAMLParser",
    "TOMLParser",
    "NoneParser",
    "sniff_format",
    "get_parser",
    "Format",
    "Metadata",
    "Document",
    "split_frontmatter",
    "load_document",
]
