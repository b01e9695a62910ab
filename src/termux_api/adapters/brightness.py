"""Screen brightness: `termux-brightness`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import SetBrightnessParams
from termux_api.core.executor import execute


async def set_brightness(params: SetBrightnessParams, *, settings: AppSettings | None = None) -> str:
    args: list[str] = []
    if params.brightness is not None:
        args += ["-b", render_token(params.brightness)]
    if params.auto is not None:
        args += ["-a", render_token(params.auto)]
    return await execute(Invocation.of("brightness", args), settings=settings)
