"""Criteria CLI commands.

Provides commands for inspecting and validating criteria configuration files.
"""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from zoo_criteria.config import criteria_to_yaml, load_criteria
from zoo_criteria.exceptions import CriteriaError

console = Console()


def _format_value(value) -> str:
    if isinstance(value, dict):
        return ", ".join(f"{k}={v}" for k, v in value.items()) or "{}"
    return str(value)


@click.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yaml", "as_yaml", is_flag=True, help="Print the criteria as YAML")
@click.pass_context
def show(ctx, config_file, as_yaml):
    """Build criteria from a YAML file and display them.

    \b
    Examples:
      zoo-criteria show criteria.yaml
      zoo-criteria show criteria.yaml --yaml
    """
    json_output = ctx.obj.get("json", False)
    quiet = ctx.obj.get("quiet", False)

    try:
        criteria = load_criteria(config_file)
    except CriteriaError as e:
        if json_output:
            click.echo(json.dumps({"status": "error", "error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        ctx.exit(1)

    if json_output:
        click.echo(json.dumps(criteria.to_dict(), indent=2))
        return
    if as_yaml:
        click.echo(criteria_to_yaml(criteria), nl=False)
        return
    if quiet:
        for field, value in criteria.to_dict().items():
            if value is not None:
                click.echo(f"{field}={_format_value(value)}")
        return

    table = Table(title=f"Criteria ({config_file.name})")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    for field, value in criteria.to_dict().items():
        if value is not None:
            table.add_row(field, _format_value(value))

    if criteria.model_zoo is not None:
        artifacts = criteria.model_zoo.describe()["artifacts"]
        table.add_row("zoo artifacts", ", ".join(artifacts))

    console.print(table)


@click.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def validate(ctx, config_file):
    """Check that a YAML file describes buildable criteria."""
    json_output = ctx.obj.get("json", False)
    quiet = ctx.obj.get("quiet", False)

    try:
        criteria = load_criteria(config_file)
    except CriteriaError as e:
        if json_output:
            click.echo(json.dumps({"status": "invalid", "error": str(e)}))
        else:
            console.print(f"[red]✗[/red] {config_file}: {e}")
        ctx.exit(1)

    if json_output:
        click.echo(json.dumps({"status": "valid", "config_file": str(config_file)}))
    elif not quiet:
        console.print(
            f"[green]✓[/green] {config_file} is valid "
            f"([cyan]{criteria.to_dict()['input_class']}[/cyan] → "
            f"[cyan]{criteria.to_dict()['output_class']}[/cyan])"
        )
