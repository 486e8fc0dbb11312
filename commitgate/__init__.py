"""commitgate - fail-fast pre-commit verification gate.

Quick start::

    import commitgate as cg

    outcome = cg.run_pipeline(cg.build_default_stages())
    raise SystemExit(outcome.exit_status)

Or from a shell, in the repository root::

    commitgate
"""

__version__ = "0.1.0"

from commitgate.runner import run_pipeline, run_stage
from commitgate.stages import (
    GateConfig,
    build_default_stages,
    format_check_stage,
    lint_check_stage,
    suite_stage,
)
from commitgate.types import PipelineOutcome, Stage

__all__ = [
    "GateConfig",
    "PipelineOutcome",
    "Stage",
    "__version__",
    "build_default_stages",
    "format_check_stage",
    "lint_check_stage",
    "run_pipeline",
    "run_stage",
    "suite_stage",
]
