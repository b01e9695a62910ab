"""Infrared: `termux-infrared-frequencies` / `termux-infrared-transmit`.

Devices without an IR emitter answer with `{"API_ERROR": ...}` instead of
data; that payload is returned as `ApiErrorReport`, not raised.
"""

from __future__ import annotations

from typing import Any

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import ApiErrorReport, InfraredFrequencyRange, TransmitInfraredParams
from termux_api.core.executor import execute


async def get_infrared_frequencies(
    *, settings: AppSettings | None = None
) -> list[InfraredFrequencyRange] | ApiErrorReport:
    data = await execute(Invocation.of("infrared-frequencies", json_output=True), settings=settings)
    return decode_as(list[InfraredFrequencyRange] | ApiErrorReport, data)


async def transmit_infrared(params: TransmitInfraredParams, *, settings: AppSettings | None = None) -> Any:
    """Transmit `params.pattern` on the carrier frequency.

    Returns the empty string on success, `ApiErrorReport` when the device
    reports an API error, or whatever other JSON value the command prints.
    """

    args = ["-f", render_token(params.frequency), render_token(params.pattern)]
    data = await execute(Invocation.of("infrared-transmit", args, json_output=True), settings=settings)
    if isinstance(data, dict) and "API_ERROR" in data:
        return decode_as(ApiErrorReport, data)
    return data
