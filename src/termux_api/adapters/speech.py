"""Speech recognition: `termux-speech-to-text`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.executor import StreamHandle, stream


async def speech_to_text(*, settings: AppSettings | None = None) -> StreamHandle:
    """Start recognition; `handle.lines()` yields recognised text, one line at a time."""

    return await stream(Invocation.of("speech-to-text"), settings=settings)
