"""Project CLI commands - init, versions."""
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rn4oh.cli_support import handle_cli_error, print_success, print_warning
from rn4oh.core.config import Rn4ohConfig
from rn4oh.core.errors import Rn4ohError
from rn4oh.core.initializer import ProjectInitializer
from rn4oh.core.versions import VersionLister
from rn4oh.services.git_manager import GitManager

# Module-level console instance (will be set by register function)
console: Console = Console()
config: Rn4ohConfig = Rn4ohConfig()


def _is_verbose(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


def _print_next_steps(project_name: str) -> None:
    console.print("\n[cyan]Next steps:[/cyan]")
    console.print(f"\n  cd {escape(project_name)}")
    console.print("  npm install")
    console.print("  npm start")

    console.print("\n[yellow]Tips:[/yellow]")
    console.print("- Use npm start to start the development server")
    console.print("- Use npm run ios to run the iOS simulator")
    console.print("- Use npm run android to run the Android emulator")
    console.print("- Use npm run oh:dev to run the OpenHarmony development server")


def init(
    ctx: typer.Context,
    project_name: str = typer.Argument(..., metavar="PROJECT_NAME", help="Name of the project"),
    version: Optional[str] = typer.Option(None, "--version", "-v", help="Specific version to use"),
):
    """Initialize a new RN4OH project."""
    initializer = ProjectInitializer(config, GitManager(), console=console)
    try:
        initializer.initialize(project_name, version)
    except Rn4ohError as e:
        handle_cli_error(e, verbose=_is_verbose(ctx))

    print_success(console, f"Project {escape(project_name)} initialized successfully!", prefix="\n✨")
    _print_next_steps(project_name)


def versions(ctx: typer.Context):
    """List all available versions."""
    lister = VersionLister(config, GitManager())
    try:
        with console.status("[cyan]Fetching available versions...[/cyan]", spinner="dots"):
            tags = lister.list_versions()
    except Rn4ohError as e:
        handle_cli_error(e, verbose=_is_verbose(ctx))

    print_success(console, "Fetched versions")

    if not tags:
        print_warning(console, "No versions available")
        return

    console.print("\n[cyan]Available versions:[/cyan]")
    for tag in tags:
        console.print(f"  {escape(tag)}", highlight=False)

    console.print("\n[yellow]Usage:[/yellow]")
    console.print("  rn4oh init <project-name> -v <version>", markup=False)
    console.print(f"  e.g. rn4oh init my-project -v {escape(tags[0])}", highlight=False)


def register_project_commands(
    app: typer.Typer,
    shared_console: Console,
    shared_config: Optional[Rn4ohConfig] = None,
):
    """Register project commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
        shared_config: Configuration passed to the initializer and lister
    """
    global console, config
    console = shared_console
    if shared_config is not None:
        config = shared_config

    app.command()(init)
    app.command()(versions)
