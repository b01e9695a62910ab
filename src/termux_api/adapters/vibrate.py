"""Vibration: `termux-vibrate`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import VibrateParams
from termux_api.core.executor import execute


async def vibrate(params: VibrateParams | None = None, *, settings: AppSettings | None = None) -> str:
    params = params or VibrateParams()
    args: list[str] = []
    if params.duration_ms is not None:
        args += ["-d", render_token(params.duration_ms)]
    if params.force:
        args.append("-f")
    return await execute(Invocation.of("vibrate", args), settings=settings)
