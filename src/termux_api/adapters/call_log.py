"""Call log: `termux-call-log`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import CallLogEntry, GetCallLogParams
from termux_api.core.executor import execute


async def get_call_log(
    params: GetCallLogParams | None = None,
    *,
    settings: AppSettings | None = None,
) -> list[CallLogEntry]:
    params = params or GetCallLogParams()
    args: list[str] = []
    if params.limit is not None:
        args += ["-l", render_token(params.limit)]
    if params.offset is not None:
        args += ["-o", render_token(params.offset)]
    data = await execute(Invocation.of("call-log", args, json_output=True), settings=settings)
    return decode_as(list[CallLogEntry], data)
