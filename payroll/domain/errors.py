"""
Exception hierarchy for payroll operations.

Validation failures raise a PayrollError subclass carrying a message fit for
the console; callers report it and carry on, nothing here is fatal.
"""

from __future__ import annotations


class PayrollError(Exception):
    """Base class for all payroll validation and lookup failures."""


class InvalidFieldError(PayrollError, ValueError):
    """A raw input field could not be parsed into its typed value."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidRoleError(InvalidFieldError):
    """The role is not one of the recognised tags."""

    def __init__(self, value: str) -> None:
        super().__init__("role", "Invalid role. Employee not added.")
        self.value = value


class DuplicateEmployeeError(PayrollError):
    """An employee with the same id is already in the store."""

    def __init__(self, employee_id: int) -> None:
        super().__init__("Invalid or duplicate ID.")
        self.employee_id = employee_id


class EmployeeNotFoundError(PayrollError, LookupError):
    def __init__(self, employee_id: int) -> None:
        super().__init__("Employee not found.")
        self.employee_id = employee_id


__all__ = [
    "PayrollError",
    "InvalidFieldError",
    "InvalidRoleError",
    "DuplicateEmployeeError",
    "EmployeeNotFoundError",
]
