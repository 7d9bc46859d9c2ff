from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from payroll.config import get_settings
from payroll.menu import PayrollMenu
from payroll.store import PayrollStore
from payroll.utils.logging import configure_logging

app = typer.Typer(help="Employee payroll console.")


@app.callback(invoke_without_command=True)
def menu(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        "-f",
        help="Employee data file (default from settings, employees.txt).",
    ),
) -> None:
    """
    Load the employee data file and start the interactive menu.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    if ctx.invoked_subcommand is not None:
        return

    store = PayrollStore(data_file or settings.data_file)
    PayrollMenu(store).run()


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"data_file={settings.data_file} | env={settings.app_env} | "
        f"log_level={settings.log_level} json_logs={settings.log_json}"
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
