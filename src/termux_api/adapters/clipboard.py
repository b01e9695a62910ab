"""Clipboard: `termux-clipboard-get` / `termux-clipboard-set`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.executor import execute


async def clipboard_get(*, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("clipboard-get"), settings=settings)


async def clipboard_set(text: str, *, settings: AppSettings | None = None) -> str:
    """Replace the clipboard content; the text travels on stdin."""

    return await execute(Invocation.of("clipboard-set", input_text=text), settings=settings)
