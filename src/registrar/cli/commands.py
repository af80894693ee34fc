"""CLI commands for the registrar.

Commands:
- shell: interactive numbered menu (default when no command is given)
- config: print the effective configuration
"""

from pathlib import Path

import typer
import yaml
from rich.console import Console

from registrar.cli.shell import run_shell
from registrar.config.app_config import load_app_config
from registrar.config.logging_setup import configure_logging
from registrar.db.record_store import RecordStore

app = typer.Typer(
    name="registrar",
    help="In-memory student records: registration, courses, enrollment, grades and statistics.",
)

console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
) -> None:
    """Student management and analytics system."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        shell(export_path=None)


@app.command()
def shell(
    export_path: Path | None = typer.Option(
        None, "--export-path", "-o", help="Export destination (default from config)"
    ),
) -> None:
    """Run the interactive menu."""
    config = load_app_config()
    store = RecordStore.from_config(config)
    run_shell(store, console, export_path or config.export_path)


@app.command(name="config")
def show_config() -> None:
    """Print the effective configuration."""
    config = load_app_config()
    console.print(yaml.safe_dump(config.to_dict(), sort_keys=False).rstrip(), markup=False)


if __name__ == "__main__":
    app()
