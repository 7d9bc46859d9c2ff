"""
Utilities package for the payroll console.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of payroll-specific logic.
"""

from payroll.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
