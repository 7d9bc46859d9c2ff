"""
Infrastructure package for the payroll console.

Centralizes file I/O for the flat employee data file. Keep this layer focused
on encoding and resource handling, decoupled from store and menu logic.
"""

from payroll.infrastructure.flat_file import (
    decode_line,
    encode_record,
    read_lines,
    split_line,
    touch,
    write_lines,
    write_records,
)

__all__ = [
    "decode_line",
    "encode_record",
    "read_lines",
    "split_line",
    "touch",
    "write_lines",
    "write_records",
]
