import click
from rich.console import Console
from rich.table import Table

from ...domain.entities.sdtm_domain import DM_DOMAIN

console = Console()


@click.command()
def variables_command() -> None:
    table = Table(title=f"{DM_DOMAIN.code} - {DM_DOMAIN.description}")
    table.add_column("Variable", style="cyan")
    table.add_column("Label")
    table.add_column("Type")
    table.add_column("Length", justify="right")
    table.add_column("Core")
    for variable in DM_DOMAIN.variables:
        table.add_row(
            variable.name,
            variable.label,
            variable.type,
            str(variable.length),
            variable.core or "",
        )
    console.print(table)
