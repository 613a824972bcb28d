import json

from typer.testing import CliRunner

from markdown_metadata.main import cli, entrypoint

runner = CliRunner()

PAGE = """+++
title = "A title"
template = "default"
number = 1410
+++
Page content
"""


def _write(tmp_path, text, name="page.md"):
	p = tmp_path / name
	p.write_text(text, encoding="utf-8")
	return p


def test_inspect_json(tmp_path, monkeypatch):
	monkeypatch.delenv("FRONTMATTER_STRICT", raising=False)
	p = _write(tmp_path, PAGE)
	result = runner.invoke(cli, ["inspect", str(p), "--json"])
	assert result.exit_code == 0, result.output
	payload = json.loads(result.stdout)
	assert payload["format"] == "TOML"
	assert payload["title"] == "A title"
	assert payload["variables"]["number"] == 1410
	assert payload["body"] == "Page content\n"


def test_inspect_table(tmp_path):
	p = _write(tmp_path, PAGE)
	result = runner.invoke(cli, ["inspect", str(p)])
	assert result.exit_code == 0, result.output
	assert "template" in result.stdout
	assert "Page content" in result.stdout


def test_body(tmp_path):
	p = _write(tmp_path, '{"title": "x"}\nJust the body\n')
	result = runner.invoke(cli, ["body", str(p)])
	assert result.exit_code == 0
	assert result.stdout == "Just the body\n"


def test_strict_failure_exits_nonzero(tmp_path):
	p = _write(tmp_path, "---\ntitle: x\n")
	result = runner.invoke(cli, ["body", str(p), "--strict"])
	assert result.exit_code == 1


def test_lenient_keeps_whole_file(tmp_path):
	p = _write(tmp_path, "---\ntitle: x\n")
	result = runner.invoke(cli, ["body", str(p), "--no-strict"])
	assert result.exit_code == 0
	assert result.stdout == "---\ntitle: x\n"


def test_missing_file_exits_nonzero(tmp_path):
	result = runner.invoke(cli, ["body", str(tmp_path / "nope.md")])
	assert result.exit_code == 1


def test_entrypoint_runs_command(tmp_path, capsys):
	p = _write(tmp_path, PAGE)
	entrypoint(["body", str(p)], standalone_mode=False)
	assert capsys.readouterr().out == "Page content\n"


def test_inspect_json_includes_date(tmp_path):
	p = _write(tmp_path, "---\ntitle: x\ndate: 2016-03-04\n---\nbody\n")
	result = runner.invoke(cli, ["inspect", str(p), "--json"])
	assert result.exit_code == 0, result.output
	payload = json.loads(result.stdout)
	assert payload["date"] == "2016-03-04T00:00:00"
	assert payload["variables"]["date"] == "2016-03-04"


def test_inspect_json_date_null(tmp_path):
	p = _write(tmp_path, PAGE)
	result = runner.invoke(cli, ["inspect", str(p), "--json"])
	assert json.loads(result.stdout)["date"] is None
