"""
Domain models for the payroll console.

A single record type carries the employee's role as a tag; every role shares
the same salary formula, so there is no per-role subclass. The parse helpers
turn raw console or file text into typed values and raise InvalidFieldError
with a console-ready message when they cannot.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field, field_validator

from payroll.domain.errors import InvalidFieldError, InvalidRoleError

DEDUCTION_RATE = Decimal("0.10")

# Amounts stay below a trillion with at most cent precision, so salaries and
# payroll totals are exact within the default 28-digit decimal context.
MAX_AMOUNT = Decimal("1000000000000")
AMOUNT_PLACES = 2

AmountInput = Union[str, int, Decimal]


class Role(str, Enum):
    """Closed set of employee role tags. Labels only, no pay difference."""

    MANAGER = "Manager"
    DEVELOPER = "Developer"
    INTERN = "Intern"

    def __str__(self) -> str:
        return self.value


class EmployeeRecord(BaseModel):
    """
    One employee's persisted attributes.

    Salary is derived on demand via `calculate_salary` and never stored.
    """

    id: int = Field(..., description="Employee id, unique within a store.")
    name: str = Field(..., description="Free-text display name.")
    role: Role = Field(..., description="Role tag.")
    basic_pay: Decimal = Field(..., ge=0, description="Monthly base pay.")
    allowances: Decimal = Field(Decimal("0"), ge=0, description="Allowances on top of base pay.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("basic_pay", "allowances")
    @classmethod
    def _bounded_amount(cls, value: Decimal) -> Decimal:
        if not is_valid_amount(value):
            raise ValueError(
                f"amount must be between 0 and {MAX_AMOUNT} with at most {AMOUNT_PLACES} decimal places"
            )
        return value

    def calculate_salary(self) -> Decimal:
        return calculate_salary(self)


def calculate_salary(record: EmployeeRecord) -> Decimal:
    """
    Compute the salary of a record: base pay plus allowances minus a flat
    10% deduction on base pay.
    """
    deductions = DEDUCTION_RATE * record.basic_pay
    return record.basic_pay + record.allowances - deductions


def parse_id(raw: Union[str, int]) -> int:
    """Parse a base-10 employee id."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    try:
        return int(str(raw).strip(), 10)
    except ValueError:
        raise InvalidFieldError("id", "Invalid ID.") from None


def parse_role(raw: Union[str, Role]) -> Role:
    """Match a role tag exactly (case-sensitive), ignoring surrounding whitespace."""
    if isinstance(raw, Role):
        return raw
    try:
        return Role(str(raw).strip())
    except ValueError:
        raise InvalidRoleError(str(raw)) from None


_AMOUNT_LABELS = {"basic_pay": "Basic Pay", "allowances": "Allowances"}


def is_valid_amount(value: Decimal) -> bool:
    """Finite, non-negative, below MAX_AMOUNT, and no finer than a cent."""
    if not value.is_finite() or value < 0 or value >= MAX_AMOUNT:
        return False
    return value.as_tuple().exponent >= -AMOUNT_PLACES


def parse_amount(raw: AmountInput, field: str = "basic_pay") -> Decimal:
    """
    Parse a monetary amount.

    Rejects anything `is_valid_amount` refuses, e.g. "-5", "1e999999" or "0.001".
    """
    label = _AMOUNT_LABELS.get(field, field)
    if isinstance(raw, Decimal):
        value = raw
    else:
        try:
            value = Decimal(str(raw).strip())
        except InvalidOperation:
            raise InvalidFieldError(field, f"Invalid {label}.") from None
    if not is_valid_amount(value):
        raise InvalidFieldError(field, f"Invalid {label}.")
    return value


__all__ = [
    "DEDUCTION_RATE",
    "MAX_AMOUNT",
    "AMOUNT_PLACES",
    "Role",
    "EmployeeRecord",
    "calculate_salary",
    "parse_id",
    "parse_role",
    "is_valid_amount",
    "parse_amount",
]
