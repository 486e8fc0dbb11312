from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from commitgate.runner import run_pipeline
from commitgate.stages import build_default_stages
from commitgate.types import EXIT_INTERRUPTED


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="commitgate",
        description="Run format check, lint check and the full test suite; stop at the first failure.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        outcome = run_pipeline(build_default_stages())
    except KeyboardInterrupt:
        print("\nINTERRUPTED", file=sys.stderr)
        return EXIT_INTERRUPTED

    return outcome.exit_status


if __name__ == "__main__":
    raise SystemExit(main())
