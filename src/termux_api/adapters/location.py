"""Location: `termux-location`.

One-shot requests (`last`, `once`) resolve to a `LocationInfo`; continuous
updates are a stream and go through `stream_location_updates`.
"""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import GetLocationParams, LocationInfo, LocationProvider
from termux_api.core.errors import ParameterError
from termux_api.core.executor import StreamHandle, execute, stream


async def get_location(
    params: GetLocationParams | None = None,
    *,
    settings: AppSettings | None = None,
) -> LocationInfo:
    params = params or GetLocationParams()
    if params.request_type == "updates":
        raise ParameterError(
            "For location updates, please use stream_location_updates().",
            "request_type",
        )
    args: list[str] = []
    if params.provider:
        args += ["-p", params.provider]
    args += ["-r", params.request_type or "once"]
    data = await execute(Invocation.of("location", args, json_output=True), settings=settings)
    return decode_as(LocationInfo, data)


async def stream_location_updates(
    provider: LocationProvider = "gps",
    *,
    settings: AppSettings | None = None,
) -> StreamHandle:
    """Start continuous updates; iterate `handle.json_values()` for fixes."""

    return await stream(Invocation.of("location", ["-p", provider, "-r", "updates"]), settings=settings)
