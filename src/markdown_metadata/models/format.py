"""
Front-matter format tags.

Defines the closed set of metadata formats a document may carry.
"""

from __future__ import annotations

from enum import Enum


class Format(str, Enum):
	"""Serialization format of a front-matter block."""

	JSON = "JSON"
	YAML = "YAML"
	TOML = "TOML"
	NONE = "None"


__all__ = ["Format"]
