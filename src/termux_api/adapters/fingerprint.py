"""Fingerprint authentication: `termux-fingerprint`.

Opens a prompt on the device and waits for the user.
"""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import FingerprintParams, FingerprintResult
from termux_api.core.executor import execute


async def request_fingerprint(
    params: FingerprintParams | None = None,
    *,
    settings: AppSettings | None = None,
) -> FingerprintResult:
    params = params or FingerprintParams()
    args: list[str] = []
    if params.title:
        args += ["-t", params.title]
    if params.description:
        args += ["-d", params.description]
    if params.subtitle:
        args += ["-s", params.subtitle]
    if params.cancel_button_text:
        args += ["-c", params.cancel_button_text]
    data = await execute(Invocation.of("fingerprint", args, json_output=True), settings=settings)
    return decode_as(FingerprintResult, data)
