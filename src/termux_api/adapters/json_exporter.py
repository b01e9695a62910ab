"""JSON export of command results.

Why JSON:
- Lets shell pipelines and other tools consume what the device reported.
- Models are dumped with their wire names (aliases), as the command printed them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def to_jsonable(value: Any) -> Any:
    """Plain JSON value for a model, a list of models, or already-decoded data."""

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    return value


def dumps_result(value: Any) -> str:
    return json.dumps(to_jsonable(value), ensure_ascii=False, indent=2, sort_keys=True)


def export_result_json(*, value: Any, output_path: Path) -> Path:
    """Write a result to UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_result(value) + "\n", encoding="utf-8")
    return output_path
