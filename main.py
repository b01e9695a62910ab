"""Development entry point (without Poetry).

Runs the CLI with:
- `python -m main ...`

Why:
- The code lives under `src/` (src layout), so unless you use Poetry/pip
  (editable install), Python cannot find `termux_api`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from termux_api.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
