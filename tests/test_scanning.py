from markdown_metadata.utils.scanning import (
    as_bytes,
    first_line,
    first_significant_byte,
    iter_lines,
    match_brace,
    skip_blank_lines,
    strip_leading_newline,
)


def test_iter_lines_offsets():
	data = b"ab\r\ncd\nef"
	assert list(iter_lines(data)) == [(0, 2, 4), (4, 6, 7), (7, 9, 9)]


def test_iter_lines_empty():
	assert list(iter_lines(b"")) == []


def test_skip_blank_lines():
	assert skip_blank_lines(b"\n\r\nx") == 3
	assert skip_blank_lines(b" \nx") == 0
	assert skip_blank_lines(b"\n\n") == 2


def test_first_line():
	assert first_line(b"\n\n+++\nrest") == b"+++"
	assert first_line(b"") == b""


def test_first_significant_byte():
	assert first_significant_byte(b" \t\r\n{") == 4
	assert first_significant_byte(b"   ") is None


class TestMatchBrace:
	"""Tests for match_brace()."""

	def test_flat(self):
		assert match_brace(b'{"a": 1} tail', 0) == 8

	def test_nested(self):
		data = b'{"a": {"b": {}}}x'
		assert match_brace(data, 0) == len(data) - 1

	def test_braces_in_strings(self):
		data = b'{"a": "}}{{"}'
		assert match_brace(data, 0) == len(data)

	def test_escaped_backslash_before_quote(self):
		data = b'{"a": "\\\\"}rest'
		assert match_brace(data, 0) == len(data) - 4

	def test_unbalanced(self):
		assert match_brace(b'{"a": {"b": 1}', 0) is None

	def test_unterminated_string(self):
		assert match_brace(b'{"a": "}', 0) is None


def test_strip_leading_newline():
	assert strip_leading_newline(b"\n\nx") == b"\nx"
	assert strip_leading_newline(b"\r\nx") == b"x"
	assert strip_leading_newline(b"x\n") == b"x\n"


def test_as_bytes():
	assert as_bytes("é") == "é".encode("utf-8")
	assert as_bytes(bytearray(b"ab")) == b"ab"
	assert as_bytes("\ud800") == b"\xed\xa0\x80"
