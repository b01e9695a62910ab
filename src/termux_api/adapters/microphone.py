"""Microphone recording: `termux-microphone-record`.

The command is driven by one action flag (-i info, -r record, -q quit);
each action has its own function and return shape.
"""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import MicRecorderInfo, MicRecordParams
from termux_api.core.executor import execute


async def microphone_info(*, settings: AppSettings | None = None) -> MicRecorderInfo:
    data = await execute(Invocation.of("microphone-record", ["-i"], json_output=True), settings=settings)
    return decode_as(MicRecorderInfo, data)


async def microphone_record(
    params: MicRecordParams | None = None,
    *,
    settings: AppSettings | None = None,
) -> str:
    params = params or MicRecordParams()
    args = ["-r"]
    if params.file_path:
        args += ["-f", params.file_path]
    if params.limit_seconds is not None:
        args += ["-l", render_token(params.limit_seconds)]
    if params.encoder:
        args += ["-e", params.encoder]
    return await execute(Invocation.of("microphone-record", args), settings=settings)


async def microphone_quit(*, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("microphone-record", ["-q"]), settings=settings)
