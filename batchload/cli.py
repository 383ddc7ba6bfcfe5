"""Click CLI with resolve, graph, and serve subcommands."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from batchload.graph import (
    build_dependency_map,
    build_reverse_graph,
    decode_declarations,
    transitive_reduce,
)
from batchload.models import DocumentFormat, ResolveConfig
from batchload.pipeline import run_resolve
from batchload.report import (
    format_batches,
    format_errors,
    format_graph,
    result_to_dict,
    write_report,
)
from batchload.sources import DocumentError, get_table, load_document

_FORMAT_CHOICES = [fmt.value for fmt in DocumentFormat]

_source_argument = click.argument(
    "source", type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
_table_option = click.option("--table", "-t", default="objects", show_default=True, help="Top-level table holding the objects")
_format_option = click.option("--format", "-f", "fmt", type=click.Choice(_FORMAT_CHOICES), help="Document format (default: by extension)")


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """batchload: Resolve object inheritance into ordered load batches."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_source_argument
@_table_option
@_format_option
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Also write a JSON report here")
@click.option("--no-reduce", is_flag=True, help="Skip building the reduced reverse graph")
def resolve(
    source: Path,
    table: str,
    fmt: str | None,
    as_json: bool,
    output: Path | None,
    no_reduce: bool,
):
    """Resolve SOURCE into load batches and report dependency errors."""
    config = ResolveConfig(
        source=source,
        table=table,
        format=DocumentFormat(fmt) if fmt else None,
        reduce=not no_reduce,
    )

    try:
        result = run_resolve(config)
    except DocumentError as e:
        raise click.ClickException(str(e))

    if output:
        write_report(result, output)

    if as_json:
        click.echo(json.dumps(result_to_dict(result), indent=2))
    else:
        for warning in result.skipped:
            click.echo(click.style(f"warning: {warning}", fg="yellow"), err=True)
        if result.batches:
            click.echo(format_batches(result.batches))
        else:
            click.echo("No objects could be scheduled.")
        if result.errors:
            click.echo()
            click.echo(click.style(format_errors(result.errors), fg="red"))

    if output:
        click.echo(f"Report written to {output}", err=True)

    if not result.ok:
        sys.exit(1)


@cli.command()
@_source_argument
@_table_option
@_format_option
@click.option("--raw", is_flag=True, help="Print the reverse graph before reduction")
def graph(source: Path, table: str, fmt: str | None, raw: bool):
    """Print the (reduced) reverse dependency graph of SOURCE."""
    try:
        document = load_document(source, DocumentFormat(fmt) if fmt else None)
        declarations, _ = decode_declarations(get_table(document, table))
    except DocumentError as e:
        raise click.ClickException(str(e))

    reverse = build_reverse_graph(build_dependency_map(declarations))
    if not raw:
        transitive_reduce(reverse)

    text = format_graph(reverse)
    click.echo(text if text else "No dependency edges.")


@cli.command()
@click.option("--port", "-p", default=8421, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the resolver web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'batchload[web]'"
        )

    from batchload.web import create_app

    click.echo(f"Starting batchload API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
