"""Dialog variants for `termux-dialog`.

Each dialog kind is its own model with its own parameters, tagged by `kind`,
and names the result model its JSON output is validated with. The union
`Dialog` is closed: `show_dialog` handles exactly these cases.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, Field

from termux_api.core.domain.models import TermuxModel


# --- Results ---------------------------------------------------------------

DIALOG_OK = -1
DIALOG_CANCEL = -2
DIALOG_NEUTRAL = -3


class DialogResult(TermuxModel):
    """Fields every dialog prints."""

    code: int = Field(..., description="-1 OK, -2 cancel, -3 neutral.")
    text: str | None = None
    error: str | None = None

    @property
    def accepted(self) -> bool:
        return self.code == DIALOG_OK


class TextResult(DialogResult):
    """text, counter, date, time and speech dialogs."""


class ConfirmResult(DialogResult):
    text: Literal["yes", "no"] | None = None

    @property
    def confirmed(self) -> bool:
        return self.text == "yes"


class CheckboxValue(TermuxModel):
    index: int
    text: str


class CheckboxResult(DialogResult):
    values: list[CheckboxValue] = Field(default_factory=list)


class SelectionResult(DialogResult):
    """radio, spinner and sheet dialogs."""

    index: int | None = None


# --- Variants --------------------------------------------------------------


class _DialogBase(BaseModel):
    result_model: ClassVar[type[DialogResult]] = TextResult

    title: str | None = None
    hint: str | None = Field(default=None, description="Input hint, passed with -i.")


class ConfirmDialog(_DialogBase):
    result_model: ClassVar[type[DialogResult]] = ConfirmResult

    kind: Literal["confirm"] = "confirm"


class TextDialog(_DialogBase):
    kind: Literal["text"] = "text"
    input_type: Literal["text", "number", "password", "numberPassword"] | None = None
    multiple_lines: bool = False


class CounterDialog(_DialogBase):
    kind: Literal["counter"] = "counter"
    min: int | None = None
    max: int | None = None
    start: int | None = None


class DateDialog(_DialogBase):
    kind: Literal["date"] = "date"
    format: str | None = Field(default=None, description="Java SimpleDateFormat pattern.")


class TimeDialog(_DialogBase):
    kind: Literal["time"] = "time"


class SpeechDialog(_DialogBase):
    kind: Literal["speech"] = "speech"


class CheckboxDialog(_DialogBase):
    result_model: ClassVar[type[DialogResult]] = CheckboxResult

    kind: Literal["checkbox"] = "checkbox"
    values: list[str] = Field(default_factory=list)


class RadioDialog(_DialogBase):
    result_model: ClassVar[type[DialogResult]] = SelectionResult

    kind: Literal["radio"] = "radio"
    values: list[str] = Field(default_factory=list)


class SpinnerDialog(_DialogBase):
    result_model: ClassVar[type[DialogResult]] = SelectionResult

    kind: Literal["spinner"] = "spinner"
    values: list[str] = Field(default_factory=list)


class SheetDialog(_DialogBase):
    result_model: ClassVar[type[DialogResult]] = SelectionResult

    kind: Literal["sheet"] = "sheet"
    values: list[str] = Field(default_factory=list)


Dialog = Annotated[
    Union[
        ConfirmDialog,
        TextDialog,
        CounterDialog,
        DateDialog,
        TimeDialog,
        SpeechDialog,
        CheckboxDialog,
        RadioDialog,
        SpinnerDialog,
        SheetDialog,
    ],
    Field(discriminator="kind"),
]
