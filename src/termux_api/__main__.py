"""Module entry point.

Why it exists:
- Runs the CLI with `python -m termux_api` during development.
- Keeps a simple entry point next to the `termux-py` console script.
"""

from __future__ import annotations

from termux_api.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
