"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdslack.cli.commands import build_cmd, convert_cmd, tokens_cmd


app = typer.Typer(name="mdslack", no_args_is_help=True, help="Markdown to Slack Block Kit converter")

app.command(name="convert")(convert_cmd)
app.command(name="build")(build_cmd)
app.command(name="tokens")(tokens_cmd)
