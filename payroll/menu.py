"""
Interactive console menu for the payroll store.

The menu is the only place that reads user input and prints user-facing
messages. Input is read through an injectable `read_line(prompt)` callable so
the loop can be driven from tests without a terminal.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from rich.console import Console

from payroll import reporter
from payroll.domain.errors import InvalidFieldError, PayrollError
from payroll.domain.models import parse_amount, parse_id, parse_role
from payroll.store import LoadReport, PayrollStore
from payroll.utils.logging import get_logger

log = get_logger(__name__)

MENU_OPTIONS = (
    "1. Add New Employee",
    "2. Display All Employees",
    "3. Calculate and Display Employee Salary",
    "4. Display Total Payroll",
    "5. Save Employee Data",
    "6. Exit",
)
EXIT_CHOICE = 6

ReadLine = Callable[[str], str]


class PayrollMenu:
    """
    Six-option menu loop over a PayrollStore.

    Parameters
    ----------
    store : PayrollStore
        The store every action operates on.
    console : Console | None
        Rich console for output. Defaults to a stdout console.
    read_line : callable | None
        Prompt-and-read function. Defaults to `console.input`. EOFError from it
        ends the loop.
    """

    def __init__(
        self,
        store: PayrollStore,
        console: Optional[Console] = None,
        read_line: Optional[ReadLine] = None,
    ) -> None:
        self.store = store
        self.console = console or Console()
        self._read_line: ReadLine = read_line or self.console.input
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_employee,
            2: self.display_employees,
            3: self.display_salary,
            4: self.display_total_payroll,
            5: self.save,
        }

    def run(self, load: bool = True) -> None:
        """Load the data file once (optionally), then loop until Exit or EOF."""
        if load:
            self.load()
        try:
            while self.handle_choice(self._prompt_choice()):
                pass
        except EOFError:
            self.console.print()
            log.info("Input closed; leaving menu")

    def load(self) -> Optional[LoadReport]:
        """Load the data file; an unreadable file is reported and leaves the store empty."""
        try:
            report = self.store.load_from_file()
        except OSError as exc:
            log.exception("Loading employee data failed", extra={"path": str(self.store.path)})
            self.console.print(
                f"Failed to load employee data: {exc}", style="red", markup=False
            )
            return None
        reporter.print_load_report(self.console, report)
        return report

    def print_menu(self) -> None:
        self.console.print()
        for option in MENU_OPTIONS:
            self.console.print(option)

    def _prompt_choice(self) -> str:
        self.print_menu()
        return self._read_line("Choose an option: ")

    def handle_choice(self, raw: str) -> bool:
        """
        Dispatch one raw menu choice. Returns False when the loop should stop.
        """
        try:
            choice = int(raw.strip())
        except ValueError:
            self.console.print("[red]Invalid input. Please enter a number.[/red]")
            return True

        if choice == EXIT_CHOICE:
            return False
        action = self._actions.get(choice)
        if action is None:
            self.console.print("[red]Invalid choice. Please try again.[/red]")
            return True
        action()
        return True

    def add_employee(self) -> None:
        """
        Prompt for each field in turn, validating as soon as a field is entered.
        """
        name = self._read_line("Enter Name: ")
        employee_id = self._read_new_id()
        if employee_id is None:
            self.console.print("[red]Invalid or duplicate ID.[/red]")
            return
        try:
            role = parse_role(self._read_line("Enter Role (Manager/Developer/Intern): "))
            basic_pay = parse_amount(self._read_line("Enter Basic Pay: "), "basic_pay")
            allowances = parse_amount(self._read_line("Enter Allowances: "), "allowances")
            self.store.add_employee(name, employee_id, role, basic_pay, allowances)
        except PayrollError as exc:
            self.console.print(str(exc), style="red", markup=False)
            return
        self.console.print("[green]Employee added successfully.[/green]")

    def _read_new_id(self) -> Optional[int]:
        try:
            employee_id = parse_id(self._read_line("Enter ID: "))
        except InvalidFieldError:
            return None
        if self.store.find_by_id(employee_id) is not None:
            return None
        return employee_id

    def display_employees(self) -> None:
        reporter.print_employees(self.console, self.store.list_employees())

    def display_salary(self) -> None:
        try:
            employee_id = parse_id(self._read_line("Enter Employee ID: "))
        except InvalidFieldError:
            self.console.print("[red]Invalid ID.[/red]")
            return

        record = self.store.find_by_id(employee_id)
        if record is None:
            self.console.print("[yellow]Employee not found.[/yellow]")
            return
        reporter.print_salary(self.console, record)

    def display_total_payroll(self) -> None:
        reporter.print_total_payroll(self.console, self.store.total_payroll())

    def save(self) -> None:
        try:
            self.store.save_to_file()
        except OSError as exc:
            log.exception("Saving employee data failed", extra={"path": str(self.store.path)})
            self.console.print(
                f"Failed to save employee data: {exc}", style="red", markup=False
            )
            return
        self.console.print("[green]Employee data saved to file.[/green]")


__all__ = ["MENU_OPTIONS", "PayrollMenu"]
