"""Media: `termux-media-player` and `termux-media-scan`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import MediaPlayerParams, MediaScanParams
from termux_api.core.errors import ParameterError
from termux_api.core.executor import execute


async def media_player(params: MediaPlayerParams, *, settings: AppSettings | None = None) -> str:
    args: list[str] = [params.action]
    if params.action == "play":
        if not params.file_path:
            raise ParameterError("file_path is required for 'play' action.", "file_path")
        args.append(params.file_path)
    return await execute(Invocation.of("media-player", args), settings=settings)


async def media_scan(params: MediaScanParams, *, settings: AppSettings | None = None) -> str:
    """Make files visible to the Android MediaStore."""

    args: list[str] = []
    if params.recursive:
        args.append("-r")
    if params.verbose:
        args.append("-v")
    args += params.paths
    return await execute(Invocation.of("media-scan", args), settings=settings)
