"""USB: `termux-usb -l` and `termux-usb -r`.

`termux-usb -o` hands a file descriptor to a child command and is not wrapped.
"""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.executor import execute


async def list_usb_devices(*, settings: AppSettings | None = None) -> list[str]:
    """Device paths such as `/dev/bus/usb/001/002`, one per output line."""

    output = await execute(Invocation.of("usb", ["-l"]), settings=settings)
    return [line.strip() for line in output.splitlines() if line.strip()]


async def request_usb_permission(device_path: str, *, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("usb", ["-r", device_path]), settings=settings)
