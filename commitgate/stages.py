"""Default stage definitions: format check, lint check, test run."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from commitgate.types import Stage


@dataclass(frozen=True)
class GateConfig:
    """Policy knobs for the default stages."""

    paths: tuple[str, ...] = (".",)
    escalated_lint_codes: tuple[str, ...] = ("F401",)
    test_marker_expression: str = ""
    python: str = field(default_factory=lambda: sys.executable)


def format_check_stage(config: GateConfig) -> Stage:
    # --check reports drift with a nonzero status and never rewrites files
    return Stage(
        name="format",
        command=(config.python, "-m", "ruff", "format"),
        modifiers=("--check", *config.paths),
    )


def lint_check_stage(config: GateConfig) -> Stage:
    modifiers = ["--no-fix"]
    if config.escalated_lint_codes:
        modifiers += ["--extend-select", ",".join(config.escalated_lint_codes)]
    return Stage(
        name="lint",
        command=(config.python, "-m", "ruff", "check"),
        modifiers=(*modifiers, *config.paths),
    )


def suite_stage(config: GateConfig) -> Stage:
    """Stage running the whole test suite."""
    # An empty -m expression overrides marker deselection in addopts.
    return Stage(
        name="test",
        command=(config.python, "-m", "pytest"),
        modifiers=("-m", config.test_marker_expression),
    )


def build_default_stages(config: GateConfig | None = None) -> tuple[Stage, Stage, Stage]:
    """Return the gate's stages in their required order."""
    cfg = config or GateConfig()
    return (format_check_stage(cfg), lint_check_stage(cfg), suite_stage(cfg))


__all__ = [
    "GateConfig",
    "build_default_stages",
    "format_check_stage",
    "lint_check_stage",
    "suite_stage",
]
