"""
Front-matter format dispatch.

Sniffs which front-matter format a document uses and hands it to the
matching parser. Formats are tried in ``FORMATS`` order: fence markers
before brace detection, and the pass-through format last, so a document
without any marker resolves to it.
"""

from __future__ import annotations

import logging

from markdown_metadata.core.errors import FrontMatterError
from markdown_metadata.core.parser import FENCES, Parser
from markdown_metadata.models.format import Format
from markdown_metadata.utils.scanning import (
    as_bytes,
    first_line,
    first_significant_byte,
)

logger = logging.getLogger(__name__)

FORMATS: tuple[Format, ...] = (
    Format.TOML,
    Format.YAML,
    Format.JSON,
    Format.NONE,
)


def _opens_with(fmt: Format, raw: bytes, line: bytes) -> bool:
	"""Return True when ``raw`` starts with the opening marker of ``fmt``."""
	if fmt in FENCES:
		return line == FENCES[fmt]
	if fmt is Format.JSON:
		start = first_significant_byte(raw)
		return start is not None and raw[start:start + 1] == b"{"
	return True


def sniff_format(data: bytes | str) -> Format:
	"""
	Detect the front-matter format of a document.

	Parameters:
		data: Raw document bytes (a str is encoded as UTF-8).

	Returns:
		Format.TOML or Format.YAML when the first non-empty line is the
		format's fence, Format.JSON when the first non-whitespace byte is
		``{``, Format.NONE otherwise.
	"""
	raw = as_bytes(data)
	line = first_line(raw)
	for fmt in FORMATS:
		if _opens_with(fmt, raw, line):
			return fmt
	return Format.NONE


def get_parser(data: bytes | str, strict: bool = False) -> Parser:
	"""
	Return an initialized parser for a document.

	When the sniffed format fails to parse, the whole input is treated as
	body by the pass-through parser, unless ``strict`` is set.

	Parameters:
		data: Raw document bytes (a str is encoded as UTF-8).
		strict: Raise the parse failure instead of falling back.

	Returns:
		A parser whose ``metadata()`` and ``markdown()`` are ready.

	Raises:
		FrontMatterError: Only when ``strict`` is set and a sniffed
		front-matter block is unterminated or malformed.
	"""
	raw = as_bytes(data)
	fmt = sniff_format(raw)
	parser = Parser(fmt)
	try:
		parser.parse(raw)
		return parser
	except FrontMatterError as exc:
		if strict:
			raise
		logger.warning("Ignoring %s front-matter (%s): %s", fmt.value,
		               exc.kind.value, exc.message)
	fallback = Parser(Format.NONE)
	fallback.parse(raw)
	return fallback


__all__ = ["sniff_format", "get_parser", "FORMATS"]
