"""
Front-matter parsers.

A Parser is one parsing session bound to one format variant. ``init``
validates the variant's delimiters, hands the enclosed block to the leaf
parser (``json``, ``yaml.safe_load`` or ``tomllib``) and keeps the
remaining bytes as the document body.

TOML and YAML blocks are fenced by ``+++`` and ``---`` lines. JSON blocks
need no fence since an object closes itself, so the block ends where the
brace depth returns to zero. The None variant accepts anything and keeps
the whole input as body.
"""

from __future__ import annotations

import json
import logging
import tomllib
from typing import Any, Callable

import yaml

from markdown_metadata.core.errors import (
    AbsentMetadataError,
    FrontMatterError,
    MalformedBlockError,
    ParserNotReadyError,
    UnterminatedBlockError,
)
from markdown_metadata.models.format import Format
from markdown_metadata.models.metadata import Metadata
from markdown_metadata.utils.scanning import (
    as_bytes,
    first_significant_byte,
    iter_lines,
    match_brace,
    skip_blank_lines,
    strip_leading_newline,
)

logger = logging.getLogger(__name__)

FENCES: dict[Format, bytes] = {
    Format.TOML: b"+++",
    Format.YAML: b"---",
}


def _load_yaml(text: str) -> Any:
	# An empty block loads as None
	loaded = yaml.safe_load(text)
	return {} if loaded is None else loaded


# Leaf parser and the exceptions it raises on bad syntax, per format.
# Deeply nested blocks exhaust the interpreter stack in every leaf parser.
LEAF_PARSERS: dict[Format, tuple[Callable[[str], Any],
                                 tuple[type[Exception], ...]]] = {
    Format.JSON: (json.loads, (json.JSONDecodeError, RecursionError)),
    Format.YAML: (_load_yaml, (yaml.YAMLError, RecursionError)),
    Format.TOML: (tomllib.loads, (tomllib.TOMLDecodeError, RecursionError)),
}


def _parse_block(fmt: Format, block: bytes) -> Metadata:
	"""
	Run the leaf parser for ``fmt`` over a delimited block.

	Parameters:
		fmt: Format of the block.
		block: Block bytes without their delimiters (JSON keeps braces).

	Returns:
		Metadata built from the parsed mapping.

	Raises:
		MalformedBlockError: The block is not valid UTF-8, fails leaf
		parsing, or does not hold a key/value mapping.
	"""
	load, syntax_errors = LEAF_PARSERS[fmt]
	try:
		text = block.decode("utf-8")
	except UnicodeDecodeError as exc:
		raise MalformedBlockError(fmt, "block is not valid UTF-8") from exc
	try:
		parsed = load(text)
	except syntax_errors as exc:
		raise MalformedBlockError(fmt, str(exc)) from exc
	if not isinstance(parsed, dict):
		raise MalformedBlockError(
		    fmt, f"expected a mapping, got {type(parsed).__name__}")
	return Metadata.from_variables(parsed)


def split_fenced(fmt: Format, data: bytes) -> tuple[Metadata, bytes]:
	"""
	Split a fence-delimited (TOML or YAML) document.

	The first non-empty line must be the fence exactly. Lines are then
	collected until a closing fence line; every byte after that line is
	the body.

	Parameters:
		fmt: Format.TOML or Format.YAML.
		data: Raw document bytes.

	Returns:
		Tuple of (metadata, body bytes).
	"""
	fence = FENCES[fmt]
	lines = iter_lines(data, skip_blank_lines(data))
	opening = next(lines, None)
	if opening is None or data[opening[0]:opening[1]] != fence:
		raise AbsentMetadataError(
		    fmt, f"document does not open with {fence.decode()!r}")
	block_start = opening[2]
	for line_start, content_end, next_start in lines:
		if data[line_start:content_end] == fence:
			meta = _parse_block(fmt, data[block_start:line_start])
			return meta, data[next_start:]
	raise UnterminatedBlockError(
	    fmt, f"missing closing {fence.decode()!r} line")


def split_braced(data: bytes) -> tuple[Metadata, bytes]:
	"""
	Split a JSON front-matter document.

	The first non-whitespace byte must be ``{``. The block runs to the
	brace that brings the nesting depth back to zero, ignoring braces
	inside string literals. A single newline after the block is dropped
	from the body.

	Parameters:
		data: Raw document bytes.

	Returns:
		Tuple of (metadata, body bytes).
	"""
	start = first_significant_byte(data)
	if start is None or data[start:start + 1] != b"{":
		raise AbsentMetadataError(Format.JSON,
		                          "document does not open with '{'")
	end = match_brace(data, start)
	if end is None:
		raise UnterminatedBlockError(Format.JSON, "unbalanced braces")
	meta = _parse_block(Format.JSON, data[start:end])
	return meta, strip_leading_newline(data[end:])


class Parser:
	"""
	Single-use front-matter parsing session for one format.

	Typical use::

		parser = Parser(Format.TOML)
		if parser.init(raw):
			meta, body = parser.metadata(), parser.markdown()

	``metadata()`` and ``markdown()`` raise ParserNotReadyError unless the
	last ``init`` succeeded; ``error`` holds the reason a parse failed.
	"""

	def __init__(self, fmt: Format | str = Format.NONE) -> None:
		self.format = Format(fmt)
		self.error: FrontMatterError | None = None
		self._metadata: Metadata | None = None
		self._markdown: bytes | None = None

	def __repr__(self) -> str:
		return f"Parser({self.format.value!r}, ready={self.ready})"

	@property
	def ready(self) -> bool:
		"""Return True once ``init`` has succeeded."""
		return self._metadata is not None

	def type(self) -> str:
		"""Return the format label: JSON, YAML, TOML or None."""
		return self.format.value

	def parse(
	    self, data: bytes | bytearray | memoryview | str
	) -> tuple[Metadata, bytes]:
		"""
		Parse ``data`` and return its metadata and body.

		Parameters:
			data: Raw document bytes (a str is encoded as UTF-8, lone
				surrogates included).

		Returns:
			Tuple of (metadata, body bytes).

		Raises:
			AbsentMetadataError: No opening marker for this format.
			UnterminatedBlockError: The block is never closed.
			MalformedBlockError: The block fails leaf parsing.
		"""
		self.error = None
		self._metadata = None
		self._markdown = None
		raw = as_bytes(data)
		try:
			if self.format is Format.NONE:
				meta, body = Metadata(), raw
			elif self.format is Format.JSON:
				meta, body = split_braced(raw)
			else:
				meta, body = split_fenced(self.format, raw)
		except FrontMatterError as exc:
			self.error = exc
			raise
		self._metadata = meta
		self._markdown = body
		return meta, body

	def init(self, data: bytes | bytearray | memoryview | str) -> bool:
		"""
		Parse ``data``, reporting success as a boolean.

		Parameters:
			data: Raw document bytes (a str is encoded as UTF-8, lone
				surrogates included).

		Returns:
			True if the document was split, False otherwise. On False the
			failure is available as ``error``.
		"""
		try:
			self.parse(data)
		except FrontMatterError as exc:
			logger.debug("%s front-matter rejected (%s): %s",
			             self.format.value, exc.kind.value, exc.message)
			return False
		return True

	def metadata(self) -> Metadata:
		"""Return the parsed metadata of the last successful ``init``."""
		if self._metadata is None:
			raise ParserNotReadyError(
			    f"{self.format.value} parser has not been initialized")
		return self._metadata

	def markdown(self) -> bytes:
		"""Return the body bytes of the last successful ``init``."""
		if self._markdown is None:
			raise ParserNotReadyError(
			    f"{self.format.value} parser has not been initialized")
		return self._markdown


def new_parser(fmt: Format | str) -> Parser:
	"""Return a fresh, uninitialized parser for ``fmt``."""
	return Parser(fmt)


def JSONParser() -> Parser:
	"""Return a fresh JSON parser."""
	return Parser(Format.JSON)


def YAMLParser() -> Parser:
	"""Return a fresh YAML parser."""
	return Parser(Format.YAML)


def TOMLParser() -> Parser:
	"""Return a fresh TOML parser."""
	return Parser(Format.TOML)


def NoneParser() -> Parser:
	"""Return a fresh pass-through parser."""
	return Parser(Format.NONE)


__all__ = [
    "Parser",
    "new_parser",
    "JSONParser",
    "YAMLParser",
    "TOMLParser",
    "NoneParser",
    "split_fenced",
    "split_braced",
    "FENCES",
    "LEAF_PARSERS",
]
