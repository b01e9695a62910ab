"""Toasts: `termux-toast`. The message is sent on stdin."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import ToastParams
from termux_api.core.executor import execute


async def show_toast(params: ToastParams, *, settings: AppSettings | None = None) -> str:
    args: list[str] = []
    if params.short_duration:
        args.append("-s")
    if params.background_color:
        args += ["-b", params.background_color]
    if params.text_color:
        args += ["-c", params.text_color]
    if params.gravity:
        args += ["-g", params.gravity]
    return await execute(Invocation.of("toast", args, input_text=params.message), settings=settings)
