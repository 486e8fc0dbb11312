"""Fail-fast pipeline runner.

Stages run one at a time, in the order given.  Each stage's command inherits
the caller's stdout/stderr, so tool diagnostics reach the terminal verbatim.
The first stage that does not exit 0 stops the pipeline and its status becomes
the pipeline's status.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from commitgate.types import (
    EXIT_CANNOT_EXECUTE,
    EXIT_COMMAND_NOT_FOUND,
    EXIT_OK,
    EXIT_SIGNAL_BASE,
    PipelineOutcome,
    Stage,
)

logger = logging.getLogger(__name__)


def _normalize_returncode(returncode: int) -> int:
    # subprocess reports death by signal N as -N
    if returncode < 0:
        return EXIT_SIGNAL_BASE - returncode
    return returncode


def run_stage(stage: Stage, *, cwd: str | Path | None = None) -> int:
    """Run one stage to completion and return its exit status."""
    argv = stage.argv
    logger.debug("Starting stage %s: %s", stage.name, argv)
    try:
        completed = subprocess.run(argv, cwd=cwd, check=False)
    except FileNotFoundError as exc:
        logger.warning("Stage %s could not start: %s", stage.name, exc)
        return EXIT_COMMAND_NOT_FOUND
    except OSError as exc:
        logger.warning("Stage %s could not start: %s", stage.name, exc)
        return EXIT_CANNOT_EXECUTE
    code = _normalize_returncode(int(completed.returncode))
    logger.debug("Stage %s finished with exit %d", stage.name, code)
    return code


def run_pipeline(stages: Sequence[Stage], *, cwd: str | Path | None = None) -> PipelineOutcome:
    """Run ``stages`` in order, stopping at the first failure.

    Raises
    ------
    ValueError
        If ``stages`` is empty.
    """
    stages = tuple(stages)
    if not stages:
        raise ValueError("Pipeline must contain at least one stage.")

    ran: list[str] = []
    for index, stage in enumerate(stages):
        print(f"\n==> {stage.name}", flush=True)
        print("$", shlex.join(stage.argv), flush=True)
        ran.append(stage.name)
        code = run_stage(stage, cwd=cwd)
        if code != EXIT_OK:
            return PipelineOutcome(
                exit_status=code,
                failed_stage=stage.name,
                failed_index=index,
                stages_run=tuple(ran),
            )

    return PipelineOutcome(exit_status=EXIT_OK, stages_run=tuple(ran))


__all__ = ["run_pipeline", "run_stage"]
