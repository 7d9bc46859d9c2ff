"""
Pytest configuration for the payroll console.

Provides fixtures for:
- Temporary data file paths
- Stores pre-populated with a few records
- A recording console and scripted input for driving the menu
- Settings cache isolation
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Generator, Iterable, List

import pytest
from rich.console import Console

from payroll.config import get_settings
from payroll.store import PayrollStore


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """
    Ensure each test sees environment overrides instead of a cached Settings.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path to a data file that does not exist yet."""
    return tmp_path / "employees.txt"


@pytest.fixture
def store(data_file: Path) -> PayrollStore:
    return PayrollStore(data_file)


@pytest.fixture
def seeded_store(store: PayrollStore) -> PayrollStore:
    """
    Store with three records, one per role, added through the validated path.
    """
    store.add_employee("Alice", "1", "Manager", "5000", "800")
    store.add_employee("Bob", "2", "Developer", "4000", "300.50")
    store.add_employee("Cara", "3", "Intern", "1000", "0")
    return store


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> Console:
    """
    Rich console writing plain text to an in-memory buffer.
    """
    return Console(file=console_output, width=120, color_system=None, force_terminal=False)


class ScriptedInput:
    """
    Replays canned answers to prompts and records every prompt asked.

    Raises EOFError once the script runs out, like input() at end of stdin.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers: List[str] = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def scripted_input() -> Callable[..., ScriptedInput]:
    def _factory(*answers: str) -> ScriptedInput:
        return ScriptedInput(answers)

    return _factory
