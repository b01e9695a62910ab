from __future__ import annotations

import shlex
from pathlib import Path

import pytest

from termux_api.core.config import AppSettings


class FakeTermux:
    """Directory of fake `termux-*` executables (POSIX sh scripts).

    Each script records its argv (NUL separated) and everything it read on
    stdin, then prints the configured stdout/stderr and exits with the
    configured code.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
        self.settings = AppSettings(_env_file=None, bin_dir=root)

    def install(
        self,
        command: str,
        *,
        stdout: str = "",
        stderr: str = "",
        exit_code: int = 0,
        body: str | None = None,
    ) -> Path:
        (self.root / f"{command}.out").write_text(stdout, encoding="utf-8")
        (self.root / f"{command}.err").write_text(stderr, encoding="utf-8")
        base = shlex.quote(str(self.root / command))
        script = body or "\n".join(
            [
                "#!/bin/sh",
                f": > {base}.argv",
                f'for arg in "$@"; do printf \'%s\\0\' "$arg" >> {base}.argv; done',
                f"cat > {base}.stdin",
                f"cat {base}.out",
                f"cat {base}.err >&2",
                f"exit {exit_code}",
                "",
            ]
        )
        path = self.root / f"termux-{command}"
        path.write_text(script, encoding="utf-8")
        path.chmod(0o755)
        return path

    def argv(self, command: str) -> list[str]:
        raw = (self.root / f"{command}.argv").read_text(encoding="utf-8")
        return raw.split("\0")[:-1]

    def stdin(self, command: str) -> str:
        return (self.root / f"{command}.stdin").read_text(encoding="utf-8")

    def was_called(self, command: str) -> bool:
        return (self.root / f"{command}.argv").exists()


@pytest.fixture
def fake_termux(tmp_path: Path) -> FakeTermux:
    return FakeTermux(tmp_path / "bin")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's .env and TERMUX_API_* variables out of the tests.
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in ("COMMAND_PREFIX", "BIN_DIR", "ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(f"TERMUX_API_{name}", raising=False)
