"""CLI for polypath."""

import json
from pathlib import Path

import click
from pydantic import ValidationError

from polypath.app.build import build
from polypath.app.report import describe_path, format_stats
from polypath.config.models import AppModel, load_config
from polypath.errors import PolypathError
from polypath.io.poly_format import SAMPLE_POLY


@click.group()
def cli():
    """polypath - shortest paths over .poly point/edge graphs."""
    pass


@cli.command("route")
@click.argument("start", type=int)
@click.argument("end", type=int)
@click.option(
    "--file",
    "graph_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Graph file (.poly); defaults to the built-in sample",
)
@click.option(
    "--dialect",
    type=click.Choice(["auto", "tabular", "labeled"]),
    help="Format of --file (default: auto)",
)
@click.option(
    "--metric",
    type=click.Choice(["euclidean", "manhattan"]),
    default=None,
    help="Edge weight metric (overrides the config)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON config file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    show_default=True,
    help="JSON log level; logs share stdout with the report",
)
@click.option("--json", "as_json", is_flag=True, help="Print the raw result as JSON")
def route(start, end, graph_file, dialect, metric, config_path, log_level, as_json):
    """Shortest path from START to END."""
    if dialect is not None and graph_file is None:
        raise click.UsageError("--dialect only applies together with --file")
    try:
        model = load_config(config_path) if config_path else AppModel()
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        raise click.ClickException(f"bad config: {exc}") from exc

    overrides = {}
    if graph_file is not None:
        overrides["graph"] = {"by": "path", "file": str(graph_file), "dialect": dialect or "auto"}
    if metric is not None:
        overrides["metric"] = {"kind": metric}
    overrides["log"] = {**model.log.model_dump(), "level": log_level}
    model = AppModel.model_validate({**model.model_dump(), **overrides})

    try:
        app = build(model)
        result = app.query(start, end)
    except PolypathError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(result.to_dict()))
        return
    click.echo(describe_path(result.path) or f"No path from {start} to {end}")
    click.echo(format_stats(result))


@cli.command("sample")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path), required=False)
def sample(output: Path | None):
    """Write the example graph to OUTPUT (stdout when omitted)."""
    if output is None:
        click.echo(SAMPLE_POLY, nl=False)
        return
    output.write_text(SAMPLE_POLY, encoding="utf-8")
    click.echo(f"Wrote {output}")


if __name__ == "__main__":
    cli()
