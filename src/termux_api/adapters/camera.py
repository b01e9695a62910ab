"""Camera: `termux-camera-info` and `termux-camera-photo`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import CameraInfo, TakePhotoParams
from termux_api.core.executor import execute


async def get_camera_info(*, settings: AppSettings | None = None) -> list[CameraInfo]:
    data = await execute(Invocation.of("camera-info", json_output=True), settings=settings)
    return decode_as(list[CameraInfo], data)


async def take_photo(params: TakePhotoParams, *, settings: AppSettings | None = None) -> str:
    """Capture a JPEG to `params.file_path`.

    The file path is positional and comes first; `-c <id>` follows when a
    camera is chosen.
    """

    args = [params.file_path]
    if params.camera_id:
        args += ["-c", params.camera_id]
    return await execute(Invocation.of("camera-photo", args), settings=settings)
