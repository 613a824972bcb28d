"""
Byte-level boundary scanning utilities.

Provides line iteration over raw document bytes and a string-aware
brace matcher used to find where a front-matter block ends. All
functions work on offsets into the untouched input.
"""

from __future__ import annotations

from typing import Iterator, Optional

JSON_WHITESPACE = b" \t\r\n"

# Lets a str holding lone surrogates round-trip through bytes
TEXT_ERRORS = "surrogatepass"

_OPEN_BRACE = ord("{")
_CLOSE_BRACE = ord("}")
_QUOTE = ord('"')
_BACKSLASH = ord("\\")


def as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
	"""Return ``data`` as bytes, encoding a str as UTF-8."""
	if isinstance(data, str):
		return data.encode("utf-8", TEXT_ERRORS)
	return bytes(data)


def iter_lines(data: bytes, start: int = 0) -> Iterator[tuple[int, int, int]]:
	"""
	Iterate over the lines of ``data`` beginning at ``start``.

	Lines end at ``\\n``; a ``\\r`` before it is treated as part of the
	terminator.

	Parameters:
		data: Raw document bytes.
		start: Offset to start from.

	Yields:
		Tuples of (line start, content end, next line start). The content
		is ``data[line_start:content_end]`` without its terminator.
	"""
	pos = start
	size = len(data)
	while pos < size:
		nl = data.find(b"\n", pos)
		if nl < 0:
			yield pos, size, size
			return
		end = nl - 1 if nl > pos and data[nl - 1] == ord("\r") else nl
		yield pos, end, nl + 1
		pos = nl + 1


def skip_blank_lines(data: bytes) -> int:
	"""
	Return the offset of the first non-empty line.

	Only lines with no content at all are skipped; a line holding spaces
	counts as non-empty.

	Parameters:
		data: Raw document bytes.

	Returns:
		Offset of the first non-empty line, or ``len(data)``.
	"""
	for line_start, content_end, _ in iter_lines(data):
		if content_end > line_start:
			return line_start
	return len(data)


def first_line(data: bytes) -> bytes:
	"""Return the content of the first non-empty line."""
	start = skip_blank_lines(data)
	for line_start, content_end, _ in iter_lines(data, start):
		return data[line_start:content_end]
	return b""


def first_significant_byte(data: bytes) -> Optional[int]:
	"""
	Return the offset of the first non-whitespace byte.

	Parameters:
		data: Raw document bytes.

	Returns:
		Offset of the first byte outside JSON whitespace, or None.
	"""
	for i, ch in enumerate(data):
		if ch not in JSON_WHITESPACE:
			return i
	return None


def match_brace(data: bytes, start: int) -> Optional[int]:
	"""
	Find the end of the brace-balanced span opening at ``start``.

	Braces inside double-quoted strings are ignored, and a backslash
	escapes the next byte inside a string.

	Parameters:
		data: Raw document bytes.
		start: Offset of an opening ``{``.

	Returns:
		Offset just past the matching ``}``, or None if the input ends
		before the depth returns to zero.
	"""
	depth = 0
	in_string = False
	escaped = False
	for i in range(start, len(data)):
		ch = data[i]
		if in_string:
			if escaped:
				escaped = False
			elif ch == _BACKSLASH:
				escaped = True
			elif ch == _QUOTE:
				in_string = False
			continue
		if ch == _QUOTE:
			in_string = True
		elif ch == _OPEN_BRACE:
			depth += 1
		elif ch == _CLOSE_BRACE:
			depth -= 1
			if depth == 0:
				return i + 1
	return None


def strip_leading_newline(data: bytes) -> bytes:
	"""Remove a single leading ``\\n`` or ``\\r\\n`` from ``data``."""
	if data.startswith(b"\r\n"):
		return data[2:]
	if data.startswith(b"\n"):
		return data[1:]
	return data


__all__ = [
    "JSON_WHITESPACE",
    "TEXT_ERRORS",
    "as_bytes",
    "iter_lines",
    "skip_blank_lines",
    "first_line",
    "first_significant_byte",
    "match_brace",
    "strip_leading_newline",
]
