import click

from .commands.sample import sample_command
from .commands.transform import transform_command
from .commands.variables import variables_command


@click.group()
def app() -> None:
    pass


app.add_command(transform_command, name="transform")
app.add_command(sample_command, name="sample")
app.add_command(variables_command, name="variables")
__all__ = ["app"]
