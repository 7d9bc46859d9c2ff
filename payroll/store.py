"""
In-memory payroll store with flat-file persistence.

The store owns an insertion-ordered list of EmployeeRecord objects and
implements every menu action as a plain method. It never talks to the console:
validation failures raise PayrollError subclasses and a load returns a
LoadReport that the caller renders.

Usage:
    from payroll.store import PayrollStore

    store = PayrollStore("employees.txt")
    report = store.load_from_file()
    store.add_employee("Ada", "1", "Developer", "1000", "200")
    store.total_payroll()  # Decimal('1100.00')
    store.save_to_file()
"""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Union

from payroll.domain.errors import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    InvalidFieldError,
    InvalidRoleError,
)
from payroll.domain.models import (
    AmountInput,
    EmployeeRecord,
    Role,
    parse_amount,
    parse_id,
    parse_role,
)
from payroll.infrastructure import flat_file
from payroll.utils.logging import get_logger

log = get_logger(__name__)


class LoadStatus(str, Enum):
    CREATED = "created"
    EMPTY = "empty"
    NO_VALID_RECORDS = "no_valid_records"
    LOADED = "loaded"


_STATUS_MESSAGES = {
    LoadStatus.CREATED: "No employee data file found. A new file has been created.",
    LoadStatus.EMPTY: "Employee data file is empty. Please add employees and save data.",
    LoadStatus.NO_VALID_RECORDS: "No valid employee records found in the file.",
    LoadStatus.LOADED: "Employee data loaded from file.",
}


class DiagnosticKind(str, Enum):
    BAD_FORMAT = "bad_format"
    BAD_ROLE = "bad_role"
    PARSE_ERROR = "parse_error"
    DUPLICATE_ID = "duplicate_id"


@dataclass(frozen=True)
class LineDiagnostic:
    """Why a single data-file line was skipped during load."""

    line_number: int
    line: str
    kind: DiagnosticKind
    message: str


@dataclass
class LoadReport:
    """
    Outcome of a load.

    `loaded` counts records kept; `diagnostics` lists every skipped line in file
    order. A report with diagnostics can still be LOADED: bad lines never abort
    the load.
    """

    status: LoadStatus
    path: Path
    loaded: int = 0
    diagnostics: List[LineDiagnostic] = field(default_factory=list)

    @property
    def message(self) -> str:
        return _STATUS_MESSAGES[self.status]


class PayrollStore:
    """
    Ordered collection of employee records backed by a flat data file.

    Parameters
    ----------
    path : Path | str
        Default data file used by `save_to_file` and `load_from_file`.
    """

    def __init__(self, path: Union[Path, str] = "employees.txt") -> None:
        self.path = Path(path)
        self._records: List[EmployeeRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EmployeeRecord]:
        return iter(list(self._records))

    def add_employee(
        self,
        name: str,
        employee_id: Union[str, int],
        role: Union[str, Role],
        basic_pay: AmountInput,
        allowances: AmountInput,
    ) -> EmployeeRecord:
        """
        Validate raw input and append a new record.

        Checks run in console prompt order: id, duplicate id, role, basic pay,
        allowances. The first failure raises and nothing is appended.

        Raises
        ------
        InvalidFieldError
            The id or an amount did not parse, or an amount is out of range.
        DuplicateEmployeeError
            A record with the same id already exists.
        InvalidRoleError
            The role is not Manager, Developer, or Intern.
        """
        record_id = parse_id(employee_id)
        if self.find_by_id(record_id) is not None:
            raise DuplicateEmployeeError(record_id)
        record = EmployeeRecord(
            id=record_id,
            name=name,
            role=parse_role(role),
            basic_pay=parse_amount(basic_pay, "basic_pay"),
            allowances=parse_amount(allowances, "allowances"),
        )
        self._records.append(record)
        log.info("Employee added", extra={"employee_id": record.id, "role": record.role.value})
        return record

    def list_employees(self) -> List[EmployeeRecord]:
        """Return all records in insertion order (a copy)."""
        return list(self._records)

    def find_by_id(self, employee_id: int) -> Optional[EmployeeRecord]:
        """Linear search by id; the first match wins."""
        for record in self._records:
            if record.id == employee_id:
                return record
        return None

    def require(self, employee_id: int) -> EmployeeRecord:
        record = self.find_by_id(employee_id)
        if record is None:
            raise EmployeeNotFoundError(employee_id)
        return record

    def salary_for(self, employee_id: int) -> Optional[Decimal]:
        """Salary of the record with this id, or None when no record matches."""
        record = self.find_by_id(employee_id)
        if record is None:
            return None
        return record.calculate_salary()

    def total_payroll(self) -> Optional[Decimal]:
        """
        Sum of every record's salary.

        Returns None for an empty store so "nothing to calculate" stays
        distinguishable from a payroll that genuinely sums to zero.
        """
        if not self._records:
            return None
        return sum((record.calculate_salary() for record in self._records), Decimal("0"))

    def save_to_file(self, path: Union[Path, str, None] = None) -> int:
        """
        Rewrite the data file with every record, in order.

        Returns the number of records written. OSError propagates; the previous
        file content survives a failed write.
        """
        target = Path(path) if path is not None else self.path
        written = flat_file.write_records(target, self._records)
        log.info("Employee data saved", extra={"path": str(target), "records": written})
        return written

    def load_from_file(self, path: Union[Path, str, None] = None) -> LoadReport:
        """
        Replace the in-memory records with the content of the data file.

        A missing file is created empty. Each line is parsed independently;
        lines that fail are reported in the returned LoadReport and skipped.
        """
        target = Path(path) if path is not None else self.path
        self._records.clear()

        lines = flat_file.read_lines(target)
        if lines is None:
            flat_file.touch(target)
            return LoadReport(status=LoadStatus.CREATED, path=target)
        if not lines:
            log.info("Data file is empty", extra={"path": str(target)})
            return LoadReport(status=LoadStatus.EMPTY, path=target)

        report = LoadReport(status=LoadStatus.LOADED, path=target)
        seen_ids = set()
        for line_number, raw in enumerate(lines, start=1):
            if not raw.strip():
                continue
            diagnostic = self._load_line(line_number, raw, seen_ids)
            if diagnostic is not None:
                log.warning(
                    f"Skipped line {line_number}: {diagnostic.message}",
                    extra={"path": str(target), "kind": diagnostic.kind.value},
                )
                report.diagnostics.append(diagnostic)

        report.loaded = len(self._records)
        if not self._records:
            report.status = LoadStatus.NO_VALID_RECORDS
        log.info(
            "Employee data loaded",
            extra={
                "path": str(target),
                "records": report.loaded,
                "skipped": len(report.diagnostics),
            },
        )
        return report

    def _load_line(self, line_number: int, raw: bytes, seen_ids: set) -> Optional[LineDiagnostic]:
        try:
            line = flat_file.decode_line(raw)
        except UnicodeDecodeError as exc:
            shown = raw.decode("utf-8", errors="replace")
            return LineDiagnostic(
                line_number,
                shown,
                DiagnosticKind.PARSE_ERROR,
                f"Error processing line: {shown}. Details: {exc.reason}",
            )
        try:
            parts = flat_file.split_line(line)
        except csv.Error as exc:
            return LineDiagnostic(
                line_number,
                line,
                DiagnosticKind.PARSE_ERROR,
                f"Error processing line: {line}. Details: {exc}",
            )
        if len(parts) != flat_file.FIELD_COUNT:
            return LineDiagnostic(
                line_number, line, DiagnosticKind.BAD_FORMAT, f"Invalid line format: {line}"
            )

        name, raw_id, raw_role, raw_pay, raw_allowances = parts
        try:
            record_id = parse_id(raw_id)
            basic_pay = parse_amount(raw_pay, "basic_pay")
            allowances = parse_amount(raw_allowances, "allowances")
            role = parse_role(raw_role)
        except InvalidRoleError:
            return LineDiagnostic(
                line_number, line, DiagnosticKind.BAD_ROLE, f"Invalid role in file: {line}"
            )
        except InvalidFieldError as exc:
            return LineDiagnostic(
                line_number,
                line,
                DiagnosticKind.PARSE_ERROR,
                f"Error processing line: {line}. Details: {exc}",
            )

        if record_id in seen_ids:
            return LineDiagnostic(
                line_number,
                line,
                DiagnosticKind.DUPLICATE_ID,
                f"Duplicate employee ID {record_id} in file: {line}",
            )

        seen_ids.add(record_id)
        self._records.append(
            EmployeeRecord(
                id=record_id,
                name=name,
                role=role,
                basic_pay=basic_pay,
                allowances=allowances,
            )
        )
        return None


__all__ = [
    "DiagnosticKind",
    "LineDiagnostic",
    "LoadReport",
    "LoadStatus",
    "PayrollStore",
]
