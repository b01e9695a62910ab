"""Errors raised while running Termux:API commands.

Every failure of an invocation surfaces as exactly one of these classes.
Nothing in the library retries or recovers; callers inspect the attached
text to tell a missing permission from a missing executable.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from termux_api.core.domain.invocation import Invocation


class TermuxError(Exception):
    """Base class for all library errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "TERMUX_ERROR"
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialisable view for structured logging and the CLI."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class LaunchError(TermuxError):
    """The executable could not be started (not found, not executable, OS refusal)."""

    def __init__(self, cause: OSError, invocation: Invocation, command_line: str) -> None:
        super().__init__(
            f"Failed to start Termux API command: {command_line}\nError: {cause}",
            "LAUNCH_ERROR",
            {"command": command_line, "cause": str(cause)},
        )
        self.cause = cause
        self.invocation = invocation


class CommandError(TermuxError):
    """The process wrote to stderr. Raised whatever the exit code was."""

    def __init__(self, stderr: str, stdout: str, invocation: Invocation, command_line: str) -> None:
        super().__init__(
            f"Termux API Error (stderr): {stderr.strip()}\n"
            f"Stdout: {stdout.strip()}\n"
            f"Command: {command_line}",
            "COMMAND_ERROR",
            {"command": command_line, "stderr": stderr, "stdout": stdout},
        )
        self.stderr = stderr
        self.stdout = stdout
        self.invocation = invocation


class NonZeroExitError(TermuxError):
    """Non-zero exit with empty stdout and no stderr."""

    def __init__(self, exit_code: int, invocation: Invocation, command_line: str) -> None:
        super().__init__(
            f"Termux API command {command_line} exited with code {exit_code}.",
            "NON_ZERO_EXIT",
            {"command": command_line, "exit_code": exit_code},
        )
        self.exit_code = exit_code
        self.invocation = invocation


class OutputError(TermuxError):
    """stdout starts with the `ERROR:` sentinel."""

    def __init__(self, output: str) -> None:
        super().__init__(output, "OUTPUT_ERROR", {"output": output})
        self.output = output


class DecodeError(TermuxError):
    """Structured output was expected but stdout did not hold it."""

    def __init__(self, raw: str, detail: str, stderr: str = "") -> None:
        super().__init__(
            f"Failed to parse JSON output: {raw}\nError: {detail}\nStderr: {stderr.strip()}",
            "DECODE_ERROR",
            {"raw": raw, "detail": detail, "stderr": stderr},
        )
        self.raw = raw
        self.detail = detail
        self.stderr = stderr


class ParameterError(TermuxError, ValueError):
    """A required parameter is missing; raised before any process is spawned."""

    def __init__(self, message: str, *parameters: str) -> None:
        super().__init__(message, "PARAMETER_ERROR", {"parameters": list(parameters)})
        self.parameters = parameters
