"""
Flat-file persistence for employee records.

One record per line, fields in the fixed order `name,id,role,basic_pay,allowances`.
Lines go through the csv module with minimal quoting: ordinary fields are
written bare (so files produced by the older tool read back unchanged) and a
field holding a comma or a quote is double-quoted instead of splitting
the line.

The file is always read whole and rewritten whole. Writes land in a sibling
temporary file that atomically replaces the target, so a failed save leaves the
previous file intact.
"""

from __future__ import annotations

import csv
import io
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from payroll.domain.models import EmployeeRecord
from payroll.utils.logging import get_logger

log = get_logger(__name__)

FIELD_ORDER = ("name", "id", "role", "basic_pay", "allowances")
FIELD_COUNT = len(FIELD_ORDER)


def encode_record(record: EmployeeRecord) -> str:
    """Serialize a record to a single line, without the line terminator."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="")
    writer.writerow(
        [
            record.name,
            str(record.id),
            record.role.value,
            str(record.basic_pay),
            str(record.allowances),
        ]
    )
    return buffer.getvalue()


def split_line(line: str) -> List[str]:
    """
    Split one line into raw fields.

    Raises csv.Error for malformed quoting.
    """
    rows = list(csv.reader([line], strict=True))
    return rows[0] if rows else []


def read_lines(path: Path | str) -> Optional[List[bytes]]:
    """
    Read every line of the data file as undecoded bytes.

    Returns None when the file does not exist. Lines end only at LF, with an
    optional CR before it, never at other Unicode line breaks a name may
    contain. Decoding is left to `decode_line` so one corrupt line cannot sink
    the whole file. Trailing blank lines are dropped so a file ending in a
    newline does not produce a phantom record.
    """
    file_path = Path(path)
    if not file_path.exists():
        return None
    with file_path.open("rb") as f:
        lines = [line.rstrip(b"\r") for line in f.read().split(b"\n")]
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def decode_line(raw: bytes) -> str:
    """Decode one line as UTF-8. Raises UnicodeDecodeError for invalid bytes."""
    return raw.decode("utf-8")


def touch(path: Path | str) -> None:
    """Create an empty data file, including missing parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.touch()
    log.info("Created empty data file", extra={"path": str(file_path)})


def write_lines(path: Path | str, lines: Iterable[str]) -> int:
    """
    Atomically replace the data file with the given lines.

    Returns the number of lines written. Any OSError propagates and the
    original file is left untouched.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{file_path.name}.", suffix=".tmp", dir=str(file_path.parent)
    )
    count = 0
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
                count += 1
        os.replace(tmp_name, file_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return count


def write_records(path: Path | str, records: Iterable[EmployeeRecord]) -> int:
    """Encode and atomically write all records, returning how many were written."""
    return write_lines(path, (encode_record(record) for record in records))


__all__ = [
    "FIELD_ORDER",
    "FIELD_COUNT",
    "encode_record",
    "split_line",
    "read_lines",
    "decode_line",
    "touch",
    "write_lines",
    "write_records",
]
