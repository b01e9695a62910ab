"""Library configuration.

Why here:
- Centralises environment variables (pydantic-settings) so the executor and
  the CLI read the same contract.
- Every invocation reads settings on its own (`settings or AppSettings()`);
  nothing is cached between calls.
"""

from __future__ import annotations

import codecs
import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory, following XDG (Termux is a Linux userland)."""

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "termux-api-py"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """KEY=VALUE pairs of a .env file. Blank lines, comments and `export ` are skipped."""

    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env.

    Keys mapped to an empty string are removed.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    for key, value in values.items():
        if value is None:
            continue
        if value == "":
            existing.pop(key, None)
        else:
            existing[key] = value

    lines = ["# termux-api-py user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central configuration for command execution.

    Why pydantic-settings:
    - Typed values validated at the edge (env vars, .env files).
    - One configuration contract for the executor, the façade and the CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="TERMUX_API_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    command_prefix: str = Field(
        default="termux-",
        min_length=1,
        description="Namespace prefix prepended to every capability name.",
    )
    bin_dir: Path | None = Field(
        default=None,
        description="Directory holding the executables; PATH lookup when unset.",
    )
    encoding: str = Field(
        default="utf-8",
        min_length=1,
        description="Text encoding of the commands' stdout/stderr and of stdin payloads.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the CLI.",
    )

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    def resolve_executable(self, command: str) -> str:
        """Executable for a capability name: `<prefix><command>`, optionally inside `bin_dir`."""

        name = f"{self.command_prefix}{command}"
        if self.bin_dir is not None:
            return str(self.bin_dir / name)
        return name
