"""Typing of decoded command output.

The executor returns plain JSON values; façade functions narrow them to the
models they declare here. A value that does not fit the declared shape is a
`DecodeError`, like stdout that is not JSON at all.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from termux_api.core.errors import DecodeError


def decode_as(shape: Any, data: Any) -> Any:
    """Validate `data` against `shape` (a model, `list[Model]`, a union...)."""

    if data == "":
        raise DecodeError("", "command printed no output")
    try:
        return TypeAdapter(shape).validate_python(data)
    except ValidationError as exc:
        raw = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False)
        raise DecodeError(raw, str(exc)) from exc
