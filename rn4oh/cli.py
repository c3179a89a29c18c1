#!/usr/bin/env python3
"""rn4oh CLI - Scaffold RN4OH projects from the official template."""
from typing import Optional

import typer

from rn4oh.cli_project_commands import register_project_commands
from rn4oh.cli_support import setup_logging
from rn4oh.core.config import Rn4ohConfig
from rn4oh.core.logger import console

config = Rn4ohConfig()

app = typer.Typer(
    name="rn4oh",
    help="""RN4OH project initialization tool

Quick start:
  rn4oh versions                      # List template versions
  rn4oh init my-project               # Create from the latest template
  rn4oh init my-project -v 1.0.0      # Create from a tagged version
""",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool):
    if value:
        console.print(config.tool_version, highlight=False)
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = {"verbose": verbose}


# Attach subcommands
register_project_commands(app, console, config)


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
