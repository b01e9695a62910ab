"""Sensors: `termux-sensor`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import SensorList, StreamSensorsParams
from termux_api.core.executor import StreamHandle, execute, stream


async def list_sensors(*, settings: AppSettings | None = None) -> SensorList:
    data = await execute(Invocation.of("sensor", ["-l"], json_output=True), settings=settings)
    return decode_as(SensorList, data)


async def cleanup_sensors(*, settings: AppSettings | None = None) -> str:
    """Release sensor listeners left behind by interrupted streams."""

    return await execute(Invocation.of("sensor", ["-c"]), settings=settings)


async def stream_sensor_data(params: StreamSensorsParams, *, settings: AppSettings | None = None) -> StreamHandle:
    """Start reading sensors.

    Each reading is a JSON object keyed by sensor name, e.g.
    `{"accelerometer": {"values": [0.1, 9.8, 0.0]}}`; iterate
    `handle.json_values()` to receive them.
    """

    args = ["-s", params.sensors]
    if params.delay is not None:
        args += ["-d", render_token(params.delay)]
    if params.limit is not None:
        args += ["-n", render_token(params.limit)]
    return await stream(Invocation.of("sensor", args), settings=settings)
