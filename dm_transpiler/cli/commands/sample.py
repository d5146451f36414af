from pathlib import Path

import click
from rich.console import Console

from ...infrastructure.sample_data import write_sample_study

console = Console()


@click.command()
@click.argument("output_folder", type=click.Path(file_okay=False, path_type=Path))
def sample_command(output_folder: Path) -> None:
    """Write a small synthetic demographics/exposure study as CSV."""
    try:
        paths = write_sample_study(output_folder)
    except OSError as exc:
        raise click.ClickException(f"Could not write sample data: {exc}") from exc
    for path in paths:
        console.print(f"[green]✓[/green] Wrote {path}", highlight=False)
