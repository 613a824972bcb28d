"""
Loaded document model.

Defines the Document Pydantic model returned by the file loader.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .format import Format
from .metadata import Metadata


class Document(BaseModel):
	"""A document file split into front-matter and body."""

	path: str = Field(description="Source file path")
	format: Format = Field(description="Detected front-matter format")
	metadata: Metadata = Field(default_factory=Metadata,
	                           description="Parsed front-matter")
	body: str = Field(default="", description="Document body text")

	@property
	def title(self) -> str | None:
		return self.metadata.title

	@property
	def template(self) -> str | None:
		return self.metadata.template


__all__ = ["Document"]
