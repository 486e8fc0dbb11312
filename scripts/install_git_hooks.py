from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from commitgate.hooks import install_git_hooks  # noqa: E402


def main() -> int:
    return install_git_hooks(ROOT)


if __name__ == "__main__":
    raise SystemExit(main())
