"""Text to speech: `termux-tts-engines` and `termux-tts-speak`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import SpeakParams, TTSEngineInfo
from termux_api.core.executor import execute


async def list_tts_engines(*, settings: AppSettings | None = None) -> list[TTSEngineInfo]:
    data = await execute(Invocation.of("tts-engines", json_output=True), settings=settings)
    return decode_as(list[TTSEngineInfo], data)


async def tts_speak(params: SpeakParams, *, settings: AppSettings | None = None) -> str:
    """Speak `params.text`; the command returns once speech is done."""

    args: list[str] = []
    if params.language:
        args += ["-l", params.language]
    if params.region:
        args += ["-n", params.region]
    if params.variant:
        args += ["-v", params.variant]
    if params.engine:
        args += ["-e", params.engine]
    if params.pitch is not None:
        args += ["-p", render_token(params.pitch)]
    if params.rate is not None:
        args += ["-r", render_token(params.rate)]
    if params.stream:
        args += ["-s", params.stream]
    return await execute(Invocation.of("tts-speak", args, input_text=params.text), settings=settings)
