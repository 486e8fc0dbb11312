"""Install the gate as the repository's git pre-commit hook."""

from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path

HOOKS_PATH = ".githooks"


def pre_commit_script(python: str | None = None) -> str:
    """Hook body that runs the gate under ``python`` (default: this interpreter)."""
    return f"#!/bin/sh\nexec {shlex.quote(python or sys.executable)} -m commitgate\n"


def _git(root: Path, *args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        ["git", *args],
        cwd=root,
        check=False,
        text=True,
        capture_output=True,
    )


def install_git_hooks(root: str | Path) -> int:
    root = Path(root)
    hook = root / HOOKS_PATH / "pre-commit"
    if not hook.exists():
        hook.parent.mkdir(parents=True, exist_ok=True)
        hook.write_text(pre_commit_script(), encoding="utf-8")
    hook.chmod(hook.stat().st_mode | 0o111)

    set_result = _git(root, "config", "--local", "core.hooksPath", HOOKS_PATH)
    if set_result.returncode != 0:
        if set_result.stderr:
            print(set_result.stderr.strip())
        print("FAIL: could not set git core.hooksPath.")
        return int(set_result.returncode)

    get_result = _git(root, "config", "--get", "core.hooksPath")
    configured = (get_result.stdout or "").strip()
    if configured != HOOKS_PATH:
        print(f"FAIL: expected core.hooksPath={HOOKS_PATH}, got {configured!r}")
        return 1

    print(f"PASS: configured git core.hooksPath={HOOKS_PATH}")
    print("Pre-commit hook is now active for this local clone.")
    return 0


__all__ = ["HOOKS_PATH", "install_git_hooks", "pre_commit_script"]
