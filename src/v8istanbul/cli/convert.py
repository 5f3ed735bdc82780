"""v8istanbul convert command - V8 coverage JSON to Istanbul JSON."""

import json
from pathlib import Path
from typing import Any

import click

from v8istanbul.config.loader import load_config
from v8istanbul.core.errors import V8IstanbulError
from v8istanbul.core.logging import configure_logging
from v8istanbul.coverage.convert import convert_process_coverage, load_process_coverage
from v8istanbul.coverage.runtime import resolve_wrapper_length


@click.command()
@click.argument("coverage_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--wrapper-length",
    type=click.IntRange(min=0),
    default=None,
    help="Characters the host prepended to each script (default: from Node.js version)",
)
@click.option("--node-version", default=None, help="Node.js version that produced the coverage")
@click.option(
    "--include-internal",
    is_flag=True,
    help="Also convert scripts whose URL is a plain path rather than file://",
)
@click.option("--indent", type=click.IntRange(min=0), default=None, help="JSON indent")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ./.v8istanbul.yaml)",
)
@click.pass_context
def convert_command(
    ctx: click.Context,
    coverage_file: Path,
    wrapper_length: int | None,
    node_version: str | None,
    include_internal: bool,
    indent: int | None,
    config_path: Path | None,
) -> None:
    """Convert a NODE_V8_COVERAGE file to Istanbul JSON on stdout.

    COVERAGE_FILE is one coverage-*.json document written by Node.js.
    """
    overrides: dict[str, Any] = {
        key: value
        for key, value in (
            ("wrapper_length", wrapper_length),
            ("node_version", node_version),
            ("include_internal", include_internal or None),
            ("indent", indent),
        )
        if value is not None
    }

    try:
        config = load_config(config_path, conversion=overrides)
    except V8IstanbulError as e:
        raise click.ClickException(str(e)) from e

    # Istanbul JSON owns stdout.
    if any(output.destination == "stdout" for output in config.logging.outputs):
        raise click.ClickException(
            "log output 'stdout' would mix with the JSON written to stdout; "
            "use stderr or a file path"
        )

    try:
        if not (ctx.obj or {}).get("verbose"):
            configure_logging(config=config.logging)

        coverage = load_process_coverage(coverage_file)
        result = convert_process_coverage(
            coverage,
            wrapper_length=resolve_wrapper_length(config.conversion),
            include_internal=config.conversion.include_internal,
        )
    except V8IstanbulError as e:
        raise click.ClickException(str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        # Script sources are read during conversion.
        raise click.ClickException(f"cannot read input: {e}") from e

    click.echo(json.dumps(result, indent=config.conversion.indent))
