"""CLI entrypoint: Typer app definition and command registration"""

import typer

from stanley.cli.commands import kinds_cmd, new_cmd


app = typer.Typer(name="stanley", no_args_is_help=True, help="Scaffold notes and posts for a static site")

app.command(name="new")(new_cmd)
app.command(name="kinds")(kinds_cmd)
