"""Shared test fixtures for commitgate test suite."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from commitgate.types import Stage


@pytest.fixture
def record_file(tmp_path: Path) -> Path:
    """File that scripted stages append their name to when invoked."""
    return tmp_path / "invoked.log"


@pytest.fixture
def make_stage(record_file: Path) -> Callable[..., Stage]:
    """Factory for stages that record their invocation and exit with a given code.

    The stage is a real ``python -c`` subprocess, so it exercises the same
    code path as the default tool stages.
    """

    def _make(name: str, exit_code: int = 0) -> Stage:
        script = (
            "import sys\n"
            f"with open({str(record_file)!r}, 'a', encoding='utf-8') as fh:\n"
            f"    fh.write({name!r} + '\\n')\n"
            f"sys.exit({exit_code})\n"
        )
        return Stage(name=name, command=(sys.executable, "-c", script))

    return _make


@pytest.fixture
def invoked(record_file: Path) -> Callable[[], list[str]]:
    """Return the stage names recorded so far, in invocation order."""

    def _read() -> list[str]:
        if not record_file.exists():
            return []
        return record_file.read_text(encoding="utf-8").splitlines()

    return _read
