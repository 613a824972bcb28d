from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from markdown_metadata.core.dispatch import get_parser
from markdown_metadata.models.metadata import Metadata, parse_date


def test_empty_metadata():
	meta = Metadata()
	assert meta.title is None
	assert meta.template is None
	assert meta.date is None
	assert meta.variables == {}
	assert meta.is_empty()


def test_from_variables_mirrors_title_and_template():
	meta = Metadata.from_variables({
	    "title": "Hello",
	    "template": "post",
	    "Extra": 3
	})
	assert meta.title == meta.variables["title"] == "Hello"
	assert meta.template == meta.variables["template"] == "post"
	assert meta.variables["Extra"] == 3
	assert not meta.is_empty()


def test_keys_are_case_sensitive():
	meta = Metadata.from_variables({"Title": "upper"})
	assert meta.title is None
	assert meta.variables == {"Title": "upper"}


def test_non_string_title_not_mirrored():
	meta = Metadata.from_variables({"title": 42})
	assert meta.title is None
	assert meta.variables["title"] == 42


def test_non_string_keys_stringified():
	meta = Metadata.from_variables({1: "one"})
	assert meta.variables == {"1": "one"}


def test_metadata_is_frozen():
	meta = Metadata.from_variables({"title": "x"})
	with pytest.raises(ValidationError):
		meta.title = "y"


@pytest.mark.parametrize("text", [
    "+++\ntitle = \"T\"\ntemplate = \"tpl\"\nextra = 1\n+++\n",
    "---\ntitle: T\ntemplate: tpl\nextra: 1\n---\n",
    '{"title": "T", "template": "tpl", "extra": 1}',
])
def test_title_template_agree_with_variables(text):
	meta = get_parser(text).metadata()
	assert meta.title == meta.variables["title"]
	assert meta.template == meta.variables["template"]
	assert meta.variables["extra"] == 1


class TestParseDate:
	"""Tests for date variable interpretation."""

	def test_date_only_string(self):
		assert parse_date("2016-03-04") == datetime(2016, 3, 4)

	def test_date_time_string(self):
		assert parse_date("2016-03-04 10:11:12") == datetime(
		    2016, 3, 4, 10, 11, 12)

	def test_date_time_offset_string(self):
		parsed = parse_date("2016-03-04 10:11:12-0700")
		assert parsed.utcoffset() == timedelta(hours=-7)

	def test_unrecognized_string(self):
		assert parse_date("March 4th") is None

	def test_non_date_value(self):
		assert parse_date(20160304) is None

	def test_yaml_native_date(self):
		meta = get_parser("---\ndate: 2016-03-04\n---\n").metadata()
		assert meta.date == datetime(2016, 3, 4)

	def test_toml_native_datetime(self):
		meta = get_parser(
		    "+++\ndate = 2016-03-04T10:11:12Z\n+++\n").metadata()
		assert meta.date == datetime(2016, 3, 4, 10, 11, 12,
		                             tzinfo=timezone.utc)

	def test_json_string_date(self):
		meta = get_parser('{"date": "2016-03-04"}').metadata()
		assert meta.date == datetime(2016, 3, 4)
		assert meta.variables["date"] == "2016-03-04"


class TestVariablesAreAuthoritative:
	"""title, template and date cannot drift from variables."""

	def test_variables_are_read_only(self):
		meta = get_parser("---\ntitle: A\n---\nbody").metadata()
		with pytest.raises(TypeError):
			meta.variables["title"] = "B"
		assert meta.title == meta.variables["title"] == "A"

	def test_conflicting_title_rejected(self):
		with pytest.raises(ValidationError):
			Metadata(title="A", variables={})

	def test_conflicting_template_rejected(self):
		with pytest.raises(ValidationError):
			Metadata(template="post", variables={"template": "page"})

	def test_fields_derived_on_direct_construction(self):
		meta = Metadata(variables={"title": "A", "date": "2016-03-04"})
		assert meta.title == "A"
		assert meta.date == datetime(2016, 3, 4)

	def test_agreeing_fields_accepted(self):
		meta = Metadata(title="A", date="2016-03-04",
		                variables={"title": "A", "date": "2016-03-04"})
		assert meta.title == "A"

	def test_source_mapping_not_shared(self):
		source = {"title": "A"}
		meta = Metadata.from_variables(source)
		source["title"] = "B"
		assert meta.variables["title"] == "A"

	def test_dump_returns_plain_dict(self):
		dumped = Metadata.from_variables({"title": "A"}).model_dump()
		assert dumped["variables"] == {"title": "A"}
		assert isinstance(dumped["variables"], dict)
