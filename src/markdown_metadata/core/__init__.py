"""Front-matter parsing core.

This subpackage holds the parser variants, the format dispatcher and
the error taxonomy.

Key modules:
    - parser: Parser sessions for JSON, YAML, TOML and None
    - dispatch: Format sniffing and parser selection
    - errors: Failure kinds raised by parsers
"""

from .errors import (
    ErrorKind,
    FrontMatterError,
    AbsentMetadataError,
    UnterminatedBlockError,
    MalformedBlockError,
    ParserNotReadyError,
)
from .parser import (
    Parser,
    new_parser,
    JSONParser,
    YAMLParser,
    TOMLParser,
    NoneParser,
)
from .dispatch import sniff_format, get_parser, FORMATS

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
    "FORMATS",
]
