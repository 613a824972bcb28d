"""
Front-matter splitting for text documents.

Provides a text-level wrapper over the parser dispatcher for callers
that work with ``str`` rather than bytes.
"""

from __future__ import annotations

from typing import Any

from markdown_metadata.core.dispatch import get_parser
from markdown_metadata.utils.scanning import TEXT_ERRORS


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
	"""
	Split front-matter from a document body.

	Detects a TOML, YAML or JSON block at the start of the document and
	returns its variables along with the remaining body.

	Parameters:
		text: The full document content.

	Returns:
		Tuple of (variables dict, body text). Returns an empty dict and
		the original text if no valid front-matter is found.
	"""
	parser = get_parser(text)
	body = parser.markdown().decode("utf-8", TEXT_ERRORS)
	return dict(parser.metadata().variables), body


__all__ = ["split_frontmatter"]
