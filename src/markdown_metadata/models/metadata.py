"""
Front-matter metadata model.

Defines the Metadata Pydantic model produced by a successful parse.
The ``variables`` mapping is the single source of truth; ``title``,
``template`` and ``date`` are derived from it when the record is built.
"""

from __future__ import annotations

from datetime import date as date_type, datetime
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

# Accepted layouts for string ``date`` variables, tried in order
DATE_LAYOUTS = (
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
)


def parse_date(value: Any) -> datetime | None:
	"""
	Interpret a ``date`` variable as a datetime.

	Native datetimes (as produced by YAML and TOML) are returned as is,
	bare dates become midnight, and strings are tried against
	``DATE_LAYOUTS``.

	Parameters:
		value: Raw value of the ``date`` variable.

	Returns:
		The parsed datetime, or None if the value is not a date.
	"""
	if isinstance(value, datetime):
		return value
	if isinstance(value, date_type):
		return datetime(value.year, value.month, value.day)
	if isinstance(value, str):
		for layout in DATE_LAYOUTS:
			try:
				return datetime.strptime(value, layout)
			except ValueError:
				continue
	return None


# Fields derived from ``variables`` when a record is built
DERIVED_FIELDS = ("title", "template", "date")


def derive_fields(variables: Mapping[str, Any]) -> dict[str, Any]:
	"""
	Compute the convenience fields mirrored from ``variables``.

	``title`` and ``template`` are set only when the corresponding value
	is a string; ``date`` goes through ``parse_date``.

	Parameters:
		variables: Variables keyed by string.

	Returns:
		Mapping of derived field name to value.
	"""
	title = variables.get("title")
	template = variables.get("template")
	return {
	    "title": title if isinstance(title, str) else None,
	    "template": template if isinstance(template, str) else None,
	    "date": parse_date(variables.get("date")),
	}


class Metadata(BaseModel):
	"""
	Parsed front-matter of a single document.

	``variables`` is read-only and ``title``, ``template`` and ``date`` are
	always derived from it; passing a value that disagrees is rejected.
	"""

	model_config = ConfigDict(frozen=True)

	title: str | None = Field(default=None,
	                          description="Mirrors variables['title']")
	template: str | None = Field(default=None,
	                             description="Mirrors variables['template']")
	date: datetime | None = Field(default=None,
	                              description="Parsed variables['date']")
	variables: Mapping[str, Any] = Field(default_factory=dict,
	                                     validate_default=True,
	                                     description="Every declared key")

	@model_validator(mode="before")
	@classmethod
	def derive_from_variables(cls, data: Any) -> Any:
		if not isinstance(data, Mapping):
			return data
		raw = data.get("variables") or {}
		if not isinstance(raw, Mapping):
			return data
		# YAML may yield non-string keys
		variables = {str(k): v for k, v in raw.items()}
		derived = derive_fields(variables)
		for name in DERIVED_FIELDS:
			given = data.get(name)
			if name == "date" and given is not None:
				given = parse_date(given) or given
			if given is not None and given != derived[name]:
				raise ValueError(
				    f"{name}={given!r} disagrees with variables[{name!r}]")
		return {**data, **derived, "variables": variables}

	@field_validator("variables", mode="after")
	@classmethod
	def freeze_variables(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
		return MappingProxyType(dict(v))

	@field_serializer("variables")
	def serialize_variables(self, v: Mapping[str, Any]) -> dict[str, Any]:
		return dict(v)

	@classmethod
	def from_variables(cls, parsed: Mapping[str, Any]) -> "Metadata":
		"""
		Build a Metadata record from a parsed key/value mapping.

		Parameters:
			parsed: Mapping returned by a leaf parser.

		Returns:
			A frozen Metadata record.
		"""
		return cls(variables=parsed)

	def is_empty(self) -> bool:
		"""Return True when no variables were declared."""
		return not self.variables


__all__ = ["Metadata", "DATE_LAYOUTS", "DERIVED_FIELDS", "derive_fields",
           "parse_date"]
