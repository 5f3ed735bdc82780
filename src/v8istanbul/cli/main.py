"""v8-istanbul CLI - v8istanbul command."""

import click

from v8istanbul import __version__
from v8istanbul.cli.convert import convert_command
from v8istanbul.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="v8istanbul")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """v8-istanbul - Convert V8 coverage into Istanbul coverage maps."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(convert_command, name="convert")


if __name__ == "__main__":
    cli()
