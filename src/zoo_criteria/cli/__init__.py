"""Zoo Criteria CLI.

Command-line interface for inspecting and validating criteria files.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from zoo_criteria import __version__

console = Console()

_LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


@click.group()
@click.version_option(version=__version__, prog_name="zoo-criteria")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for info, -vv for debug)",
)
@click.option("--json", is_flag=True, help="Output in JSON format")
@click.option("--quiet", is_flag=True, help="Minimal output")
@click.pass_context
def cli(ctx, verbose, json, quiet):
    """Describe and validate model zoo search criteria.

    \b
    Examples:
      zoo-criteria show criteria.yaml
      zoo-criteria --json show criteria.yaml
      zoo-criteria validate criteria.yaml
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["json"] = json
    ctx.obj["quiet"] = quiet

    if verbose:
        logging.basicConfig(
            level=_LOG_LEVELS.get(verbose, logging.DEBUG),
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def main():
    """Entry point for the CLI."""
    from zoo_criteria.cli.commands import criteria

    cli.add_command(criteria.show)
    cli.add_command(criteria.validate)

    cli(obj={})


if __name__ == "__main__":
    main()
