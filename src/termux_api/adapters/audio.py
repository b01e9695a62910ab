"""Audio: `termux-audio-info` and `termux-volume`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import AudioInfo, SetVolumeParams, StreamVolumeInfo
from termux_api.core.executor import execute


async def get_audio_info(*, settings: AppSettings | None = None) -> AudioInfo:
    """Audio system properties (sample rates, buffer sizes, headset state)."""

    data = await execute(Invocation.of("audio-info", json_output=True), settings=settings)
    return decode_as(AudioInfo, data)


async def get_volume_info(*, settings: AppSettings | None = None) -> list[StreamVolumeInfo]:
    """Current and maximum volume of every audio stream."""

    data = await execute(Invocation.of("volume", json_output=True), settings=settings)
    return decode_as(list[StreamVolumeInfo], data)


async def set_volume(params: SetVolumeParams, *, settings: AppSettings | None = None) -> str:
    args = ["-s", params.stream, "-v", render_token(params.volume)]
    return await execute(Invocation.of("volume", args), settings=settings)
