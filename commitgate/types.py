from __future__ import annotations

from dataclasses import dataclass

EXIT_OK = 0
EXIT_CANNOT_EXECUTE = 126
EXIT_COMMAND_NOT_FOUND = 127
EXIT_SIGNAL_BASE = 128
EXIT_INTERRUPTED = EXIT_SIGNAL_BASE + 2


@dataclass(frozen=True)
class Stage:
    """One verification step of the gate.

    Attributes
    ----------
    name : str
        Identifier shown in the banner and reported on failure.
    command : tuple of str
        External tool and its base arguments.
    modifiers : tuple of str
        Stage-specific strictness arguments appended after ``command``
        (escalated lint codes, test selection policy, ...).
    """

    name: str
    command: tuple[str, ...]
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.command, str) or isinstance(self.modifiers, str):
            raise TypeError(f"Stage {self.name!r}: command and modifiers must be sequences of arguments, not str.")
        if not self.name:
            raise ValueError("Stage.name must not be empty.")
        if not self.command:
            raise ValueError(f"Stage {self.name!r} must have a command.")

    @property
    def argv(self) -> list[str]:
        return [*self.command, *self.modifiers]


@dataclass(frozen=True)
class PipelineOutcome:
    """Result of one full pipeline run.

    Attributes
    ----------
    exit_status : int
        0 if every stage passed, else the first failing stage's status.
    failed_stage : str or None
        Name of the first failing stage.
    failed_index : int or None
        Position of the first failing stage in the pipeline.
    stages_run : tuple of str
        Names of the stages actually invoked, in order.
    """

    exit_status: int
    failed_stage: str | None = None
    failed_index: int | None = None
    stages_run: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.failed_stage is None


__all__ = [
    "EXIT_CANNOT_EXECUTE",
    "EXIT_COMMAND_NOT_FOUND",
    "EXIT_INTERRUPTED",
    "EXIT_OK",
    "EXIT_SIGNAL_BASE",
    "PipelineOutcome",
    "Stage",
]
