"""Checks on the project metadata the gate relies on."""

from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


@pytest.fixture
def pyproject() -> dict:
    with PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)


class TestPyproject:
    def test_lint_rule_set_is_pinned(self, pyproject: dict) -> None:
        select = pyproject["tool"]["ruff"]["lint"]["select"]
        assert select == ["E4", "E7", "E9", "F"], f"Lint rules must not float with the ruff release: {select}"

    def test_gate_tools_are_runtime_dependencies(self, pyproject: dict) -> None:
        names = {dep.split(">")[0].split("=")[0].strip() for dep in pyproject["project"]["dependencies"]}
        assert {"ruff", "pytest"} <= names

    def test_no_extras_duplicate_runtime_dependencies(self, pyproject: dict) -> None:
        runtime = set(pyproject["project"]["dependencies"])
        for extra, deps in pyproject["project"].get("optional-dependencies", {}).items():
            assert not runtime & set(deps), f"Extra {extra!r} repeats runtime dependencies"
