"""
Document file loader.

Reads a document from disk and splits it into front-matter and body.
"""

from __future__ import annotations

from pathlib import Path

from markdown_metadata.core.dispatch import get_parser
from markdown_metadata.utils.scanning import TEXT_ERRORS, as_bytes
from markdown_metadata.models.document import Document
from markdown_metadata.models.format import Format


def load_document(path: str | Path,
                  encoding: str = "utf-8",
                  strict: bool = False) -> Document:
	"""
	Load a document file and split its front-matter.

	Parameters:
		path: Path to the document.
		encoding: Text encoding of the file.
		strict: Raise on corrupt front-matter instead of keeping the
			whole file as body.

	Returns:
		Document with detected format, metadata and body.
	"""
	path = Path(path)
	raw = as_bytes(path.read_text(encoding=encoding))
	parser = get_parser(raw, strict=strict)
	return Document(
	    path=str(path),
	    format=Format(parser.type()),
	    metadata=parser.metadata(),
	    body=parser.markdown().decode("utf-8", TEXT_ERRORS),
	)


__all__ = ["load_document"]
