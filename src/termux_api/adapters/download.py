"""Downloads through Android's DownloadManager: `termux-download`."""

from __future__ import annotations

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import DownloadParams
from termux_api.core.executor import execute


async def download_file(params: DownloadParams, *, settings: AppSettings | None = None) -> str:
    args: list[str] = []
    if params.title:
        args += ["-t", params.title]
    if params.description:
        args += ["-d", params.description]
    if params.file_path:
        args += ["-p", params.file_path]
    # URL is positional and last.
    args.append(params.url)
    return await execute(Invocation.of("download", args), settings=settings)
