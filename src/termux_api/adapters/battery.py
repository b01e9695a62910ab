"""Battery: `termux-battery-status`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import BatteryStatus
from termux_api.core.executor import execute


async def get_battery_status(*, settings: AppSettings | None = None) -> BatteryStatus:
    """Battery state of the device.

    Every call runs the command again; two readings may differ.
    """

    data = await execute(Invocation.of("battery-status", json_output=True), settings=settings)
    return decode_as(BatteryStatus, data)
