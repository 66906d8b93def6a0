"""CLI entrypoint: Typer app definition and command registration"""

import typer

from policydiff.cli.commands import compare_cmd, report_cmd, summary_cmd


app = typer.Typer(name="policydiff", no_args_is_help=True, help="Line-by-line policy document comparison")

app.command(name="compare")(compare_cmd)
app.command(name="summary")(summary_cmd)
app.command(name="report")(report_cmd)
