"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdterm.cli.commands import inline_cmd, render_cmd, tokens_cmd


app = typer.Typer(name="mdterm", no_args_is_help=True, help="Render markdown for the terminal")

app.command(name="render")(render_cmd)
app.command(name="tokens")(tokens_cmd)
app.command(name="inline")(inline_cmd)
