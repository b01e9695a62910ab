"""Dialogs: `termux-dialog <kind>`.

`show_dialog` takes one of the `Dialog` variants, builds the flags that kind
accepts, and validates the printed JSON with the variant's own result model.
Plain dicts are accepted too and parsed by their `kind` tag.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.dialog import (
    CheckboxDialog,
    CounterDialog,
    DateDialog,
    Dialog,
    DialogResult,
    RadioDialog,
    SheetDialog,
    SpinnerDialog,
    TextDialog,
)
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.errors import ParameterError
from termux_api.core.executor import execute

_DIALOG_ADAPTER: TypeAdapter[Any] = TypeAdapter(Dialog)


def parse_dialog(data: Mapping[str, Any]) -> Any:
    """Build a dialog variant from a mapping with a `kind` key."""

    try:
        return _DIALOG_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ParameterError(f"Invalid dialog definition: {exc}", "kind") from exc


def build_dialog_args(dialog: Any) -> list[str]:
    """Tokens after `dialog`: the kind, common flags, then kind specific flags."""

    args = [dialog.kind]
    if dialog.title:
        args += ["-t", dialog.title]
    if dialog.hint:
        args += ["-i", dialog.hint]

    match dialog:
        case TextDialog(multiple_lines=multiple_lines, input_type=input_type):
            if multiple_lines:
                args.append("-m")
            if input_type:
                lowered = input_type.lower()
                if "number" in lowered:
                    args.append("-n")
                if "password" in lowered:
                    args.append("-p")
        case CounterDialog(min=low, max=high, start=start):
            if low is not None and high is not None and start is not None:
                args += ["-r", render_token([low, high, start])]
        case DateDialog(format=date_format):
            if date_format:
                args += ["-d", date_format]
        case CheckboxDialog(values=values) | RadioDialog(values=values) | SpinnerDialog(
            values=values
        ) | SheetDialog(values=values):
            if values:
                args += ["-v", render_token(values)]
        case _:
            pass
    return args


async def show_dialog(
    dialog: Dialog | Mapping[str, Any],
    *,
    settings: AppSettings | None = None,
) -> DialogResult:
    """Show a dialog on the device and wait for the user's answer.

    Returns the variant's result model: `ConfirmResult` for confirm,
    `CheckboxResult` for checkbox, `SelectionResult` for radio, spinner and
    sheet, `TextResult` for the rest.
    """

    if isinstance(dialog, Mapping):
        dialog = parse_dialog(dialog)
    data = await execute(
        Invocation.of("dialog", build_dialog_args(dialog), json_output=True),
        settings=settings,
    )
    return decode_as(type(dialog).result_model, data)
