"""
Domain package for the payroll console.

Exports the employee record model, the salary formula, and the error
hierarchy. Keep this package focused on data definitions and validation.
"""

from payroll.domain.errors import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    InvalidFieldError,
    InvalidRoleError,
    PayrollError,
)
from payroll.domain.models import (
    DEDUCTION_RATE,
    EmployeeRecord,
    Role,
    calculate_salary,
    parse_amount,
    parse_id,
    parse_role,
)

__all__ = [
    "DEDUCTION_RATE",
    "EmployeeRecord",
    "Role",
    "calculate_salary",
    "parse_amount",
    "parse_id",
    "parse_role",
    "PayrollError",
    "InvalidFieldError",
    "InvalidRoleError",
    "DuplicateEmployeeError",
    "EmployeeNotFoundError",
]
