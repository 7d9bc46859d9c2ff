from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from payroll.domain.models import EmployeeRecord, Role
from payroll.infrastructure import flat_file


def _record(name: str = "Ada", employee_id: int = 1) -> EmployeeRecord:
    return EmployeeRecord(
        id=employee_id,
        name=name,
        role=Role.MANAGER,
        basic_pay=Decimal("1000.50"),
        allowances=Decimal("200"),
    )


def test_encode_record_writes_legacy_field_order() -> None:
    assert flat_file.encode_record(_record()) == "Ada,1,Manager,1000.50,200"


def test_encode_record_quotes_names_with_commas() -> None:
    line = flat_file.encode_record(_record(name='Lovelace, Ada "Countess"'))

    assert line == '"Lovelace, Ada ""Countess""",1,Manager,1000.50,200'
    assert flat_file.split_line(line)[0] == 'Lovelace, Ada "Countess"'


def test_split_line_reads_unquoted_legacy_lines() -> None:
    assert flat_file.split_line("Bob,5,Manager") == ["Bob", "5", "Manager"]
    assert flat_file.split_line("Bob,5,Intern,10,2") == ["Bob", "5", "Intern", "10", "2"]


def test_read_lines_returns_none_for_missing_file(tmp_path: Path) -> None:
    assert flat_file.read_lines(tmp_path / "missing.txt") is None


def test_read_lines_drops_trailing_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "employees.txt"
    path.write_text("a,1,Manager,1,1\n\n\n", encoding="utf-8")

    assert flat_file.read_lines(path) == [b"a,1,Manager,1,1"]


def test_read_lines_splits_only_on_line_feeds(tmp_path: Path) -> None:
    path = tmp_path / "employees.txt"
    path.write_bytes("Ann\u2028Lee,1,Intern,1,1\r\nBo\x0cb,2,Intern,1,1\n".encode("utf-8"))

    lines = flat_file.read_lines(path)

    assert [flat_file.decode_line(raw) for raw in lines] == [
        "Ann\u2028Lee,1,Intern,1,1",
        "Bo\x0cb,2,Intern,1,1",
    ]


def test_decode_line_rejects_invalid_utf8() -> None:
    with pytest.raises(UnicodeDecodeError):
        flat_file.decode_line(b"B\xffb,2,Manager,1,1")


def test_touch_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "employees.txt"

    flat_file.touch(path)

    assert path.exists()
    assert path.read_text(encoding="utf-8") == ""


def test_write_records_overwrites_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "employees.txt"
    path.write_text("stale,9,Intern,1,1\nstale,10,Intern,1,1\n", encoding="utf-8")

    written = flat_file.write_records(path, [_record()])

    assert written == 1
    assert path.read_text(encoding="utf-8") == "Ada,1,Manager,1000.50,200\n"
    assert list(tmp_path.iterdir()) == [path]


def test_write_lines_failure_keeps_previous_file(tmp_path: Path) -> None:
    path = tmp_path / "employees.txt"
    path.write_text("keep,1,Manager,1,1\n", encoding="utf-8")

    def exploding_lines():
        yield "first,2,Manager,1,1"
        raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        flat_file.write_lines(path, exploding_lines())

    assert path.read_text(encoding="utf-8") == "keep,1,Manager,1,1\n"
    assert list(tmp_path.iterdir()) == [path]
