from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from payroll.domain.models import EmployeeRecord
from payroll.store import LoadReport, LoadStatus


def format_amount(value: Decimal) -> str:
    """Render a monetary amount without scientific notation."""
    return f"{value:f}"


def print_employees(console: Console, records: Sequence[EmployeeRecord]) -> None:
    """
    Render employee records as a rich table, in the order given.
    """
    if not records:
        console.print("[yellow]No employees to display.[/yellow]")
        return

    table = Table(title="Employees", box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("ID", justify="right", style="magenta")
    table.add_column("Role", style="blue")
    table.add_column("Basic Pay", justify="right", style="green")
    table.add_column("Allowances", justify="right", style="green")

    for record in records:
        table.add_row(
            escape(record.name),
            str(record.id),
            record.role.value,
            format_amount(record.basic_pay),
            format_amount(record.allowances),
        )

    console.print(table)


def print_salary(console: Console, record: EmployeeRecord) -> None:
    salary = format_amount(record.calculate_salary())
    # markup=False keeps names such as "[Ops] Ann" literal.
    console.print(f"Salary for {record.name} ({record.role.value}): {salary}", markup=False)


def print_total_payroll(console: Console, total: Optional[Decimal]) -> None:
    if total is None:
        console.print("[yellow]No employees to calculate payroll.[/yellow]")
        return
    console.print(f"[bold]Total Payroll:[/bold] {format_amount(total)}")


def print_load_report(console: Console, report: LoadReport) -> None:
    """Print every skipped-line diagnostic followed by the overall load outcome."""
    for diagnostic in report.diagnostics:
        console.print(diagnostic.message, style="red", markup=False)

    style = "green" if report.status is LoadStatus.LOADED else "yellow"
    console.print(report.message, style=style)


__all__ = [
    "format_amount",
    "print_employees",
    "print_salary",
    "print_total_payroll",
    "print_load_report",
]
