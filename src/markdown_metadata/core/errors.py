"""
Front-matter error taxonomy.

A failed parse is always one of three kinds: no opening marker where the
format expects one, an opening marker that is never closed, or a closed
block whose content the leaf parser rejects. The kinds stay
distinguishable even though ``Parser.init`` only reports a boolean.
"""

from __future__ import annotations

from enum import Enum

from markdown_metadata.models.format import Format


class ErrorKind(str, Enum):
	"""Kind of front-matter failure."""

	ABSENT = "absent"
	UNTERMINATED = "unterminated"
	MALFORMED = "malformed"


class FrontMatterError(Exception):
	"""Base class for front-matter parse failures."""

	kind: ErrorKind

	def __init__(self, fmt: Format, message: str) -> None:
		super().__init__(f"{fmt.value}: {message}")
		self.format = fmt
		self.message = message


class AbsentMetadataError(FrontMatterError):
	"""No opening fence or brace at the expected position."""

	kind = ErrorKind.ABSENT


class UnterminatedBlockError(FrontMatterError):
	"""Opening marker found but the block is never closed."""

	kind = ErrorKind.UNTERMINATED


class MalformedBlockError(FrontMatterError):
	"""Block delimiters matched but the content failed leaf parsing."""

	kind = ErrorKind.MALFORMED


class ParserNotReadyError(RuntimeError):
	"""Parser results were read before a successful ``init``."""


__all__ = [
    "ErrorKind",
    "FrontMatterError",
    "AbsentMetadataError",
    "UnterminatedBlockError",
    "MalformedBlockError",
    "ParserNotReadyError",
]
