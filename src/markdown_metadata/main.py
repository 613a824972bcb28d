from __future__ import annotations

import json
import sys
from typing import Any, Mapping

import typer
from typer.main import get_command
from rich import box
from rich.console import Console
from rich.table import Table

from markdown_metadata.core.errors import FrontMatterError
from markdown_metadata.loaders.documents import load_document
from markdown_metadata.models.config import Config, load_env
from markdown_metadata.models.document import Document
from markdown_metadata.utils.logging import configure_logging

cli = typer.Typer(add_completion=False, no_args_is_help=True)


@cli.callback()
def root() -> None:
	"""
	Root callback for the markdown-metadata CLI.

	Sets up the Typer application with no-args-is-help behavior.
	"""
	return None


def _load_config(strict: bool | None) -> Config:
	load_env()
	config = Config()
	configure_logging(config.log_level)
	if strict is not None:
		config.strict = strict
	return config


def _load_or_exit(path: str, config: Config) -> Document:
	"""
	Load a document, exiting with status 1 on failure.

	Parameters:
		path: Path to the document.
		config: Runtime configuration.

	Returns:
		The loaded document.
	"""
	try:
		return load_document(path, encoding=config.encoding,
		                     strict=config.strict)
	except (OSError, UnicodeDecodeError) as exc:
		typer.echo(f"error: cannot read {path}: {exc}", err=True)
		raise typer.Exit(code=1)
	except FrontMatterError as exc:
		typer.echo(f"error: {path}: {exc}", err=True)
		raise typer.Exit(code=1)


def _jsonable(value: Any) -> Any:
	if isinstance(value, Mapping):
		return {k: _jsonable(v) for k, v in value.items()}
	if isinstance(value, (list, tuple)):
		return [_jsonable(v) for v in value]
	if isinstance(value, (str, int, float, bool)) or value is None:
		return value
	# dates and times from YAML/TOML
	return str(value)


def render_variables_table(doc: Document) -> Table:
	"""
	Build a table of a document's metadata variables.

	Parameters:
		doc: Loaded document.

	Returns:
		Rich Table with one row per variable.
	"""
	table = Table(title=f"{doc.path} ({doc.format.value})",
	              show_header=True,
	              expand=True,
	              box=box.ROUNDED)
	table.add_column("Key", style="bold")
	table.add_column("Type")
	table.add_column("Value")
	for key, value in sorted(doc.metadata.variables.items()):
		table.add_row(key, type(value).__name__, repr(value))
	return table


@cli.command()
def inspect(
    path: str,
    as_json: bool = typer.Option(False, "--json",
                                 help="Print a JSON object instead of a table"),
    strict: bool = typer.Option(
        None,
        "--strict/--no-strict",
        help="Fail on corrupt front-matter",
    ),
) -> None:
	"""Show the detected format, metadata and body of a document."""
	config = _load_config(strict)
	doc = _load_or_exit(path, config)
	if as_json:
		payload = {
		    "format": doc.format.value,
		    "title": doc.metadata.title,
		    "template": doc.metadata.template,
		    "date": (doc.metadata.date.isoformat()
		             if doc.metadata.date is not None else None),
		    "variables": _jsonable(doc.metadata.variables),
		    "body": doc.body,
		}
		typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
		return
	console = Console()
	console.print(render_variables_table(doc))
	console.print(doc.body, markup=False, highlight=False)


@cli.command()
def body(
    path: str,
    strict: bool = typer.Option(
        None,
        "--strict/--no-strict",
        help="Fail on corrupt front-matter",
    ),
) -> None:
	"""Print only the body of a document, without its front-matter."""
	config = _load_config(strict)
	doc = _load_or_exit(path, config)
	typer.echo(doc.body, nl=False)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint for the markdown-metadata command.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)
	return get_command(cli).main(
	    args=args,
	    prog_name="markdown-metadata",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
