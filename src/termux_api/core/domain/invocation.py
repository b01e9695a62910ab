"""The value passed from the façade to the executor.

An `Invocation` is built per call and consumed once; it has no identity
beyond its fields.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field


def render_token(value: object) -> str:
    """Render a parameter value as a CLI token.

    Booleans become `true`/`false`, sequences are joined with commas.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(render_token(v) for v in value)
    return str(value)


class Invocation(BaseModel):
    """One external command execution request."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(
        ...,
        min_length=1,
        description="Capability name without the namespace prefix (e.g. 'battery-status').",
    )
    args: tuple[str, ...] = Field(
        default=(),
        description="Ordered argument tokens passed verbatim to the process.",
    )
    input_text: str | None = Field(
        default=None,
        description="Payload written to stdin before it is closed.",
    )
    json_output: bool = Field(
        default=False,
        description="Decode stdout as a single JSON value.",
    )

    @classmethod
    def of(
        cls,
        command: str,
        args: Iterable[str] = (),
        *,
        input_text: str | None = None,
        json_output: bool = False,
    ) -> "Invocation":
        return cls(command=command, args=tuple(args), input_text=input_text, json_output=json_output)

    @property
    def tokens(self) -> list[str]:
        """Command name followed by its arguments."""

        return [self.command, *self.args]

    def describe(self, prefix: str = "termux-") -> str:
        return " ".join([f"{prefix}{self.command}", *self.args])
