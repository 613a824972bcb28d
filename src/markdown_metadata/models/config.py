from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	strict: bool = Field(
	    False,
	    alias="FRONTMATTER_STRICT",
	    description=
	    "Raise on corrupt front-matter instead of treating input as body",
	)
	encoding: str = Field(
	    "utf-8",
	    alias="FRONTMATTER_ENCODING",
	    description="Text encoding used when reading documents",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")

	@field_validator("encoding")
	@classmethod
	def validate_encoding(cls, v: Any) -> str:
		try:
			codecs.lookup(str(v))
		except LookupError:
			raise ValueError(f"unknown encoding: {v}")
		return str(v)

	@field_validator("log_level")
	@classmethod
	def normalize_log_level(cls, v: Any) -> str:
		return str(v).strip().lower() or "info"


__all__ = ["Config", "load_env"]
