"""Wallpaper: `termux-wallpaper`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import WallpaperParams
from termux_api.core.errors import ParameterError
from termux_api.core.executor import execute


async def set_wallpaper(params: WallpaperParams, *, settings: AppSettings | None = None) -> str:
    """Set the wallpaper from a file, or from a URL when no file is given."""

    if params.file_path:
        args = ["-f", params.file_path]
    elif params.url:
        args = ["-u", params.url]
    else:
        raise ParameterError("Either file_path or url must be provided for wallpaper.", "file_path", "url")
    if params.lockscreen:
        args.append("-l")
    return await execute(Invocation.of("wallpaper", args), settings=settings)
