"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.option("--indent", type=int, default=None, help="Indent JSON output by N spaces")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, indent: int | None) -> None:
    """selectorkit - build CSS selectors from the command line."""
    config = SelectorkitConfig(
        log_level="DEBUG" if verbose else "WARNING",
        json_indent=indent,
    )
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op when the root logger already has handlers.
    logging.getLogger("selectorkit").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.render import render  # noqa: E402
from selectorkit.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(render)
cli.add_command(rectangle)
