"""
Employee payroll console.

Keeps an in-memory list of employee records, computes per-record salary
(base pay plus allowances minus a flat 10% deduction on base pay) and the total
payroll, and saves/reloads the list to a flat comma-delimited text file. The
whole thing is driven by a six-option interactive menu.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from payroll.config import Settings, get_settings
from payroll.domain import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    EmployeeRecord,
    InvalidFieldError,
    InvalidRoleError,
    PayrollError,
    Role,
    calculate_salary,
)
from payroll.menu import PayrollMenu
from payroll.store import LoadReport, LoadStatus, PayrollStore
from payroll.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "EmployeeRecord",
    "Role",
    "calculate_salary",
    # Errors
    "PayrollError",
    "InvalidFieldError",
    "InvalidRoleError",
    "DuplicateEmployeeError",
    "EmployeeNotFoundError",
    # Store and menu
    "PayrollStore",
    "LoadReport",
    "LoadStatus",
    "PayrollMenu",
    # Logging
    "configure_logging",
    "get_logger",
]
