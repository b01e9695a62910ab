"""Flashlight: `termux-torch on|off`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.executor import execute


async def set_torch(enabled: bool, *, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("torch", ["on" if enabled else "off"]), settings=settings)
