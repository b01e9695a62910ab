"""Sharing: `termux-share`.

Opens the Android chooser for a file or for text. A file is passed as a
positional argument, text goes on stdin.
"""

from __future__ import annotations

import re

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import ShareParams
from termux_api.core.errors import ParameterError
from termux_api.core.executor import execute

_WHITESPACE_RE = re.compile(r"\s+")


async def share(params: ShareParams, *, settings: AppSettings | None = None) -> str:
    args: list[str] = []
    if params.title:
        # termux-share drops titles containing spaces.
        args += ["-t", _WHITESPACE_RE.sub("-", params.title)]
    if params.content_type:
        args += ["-c", params.content_type]
    if params.use_default_receiver:
        args.append("-d")
    if params.action:
        args += ["-a", params.action]

    input_text: str | None = None
    if params.file_path:
        args.append(params.file_path)
    elif params.text:
        input_text = params.text
    else:
        raise ParameterError("Either text or file_path must be provided for sharing.", "text", "file_path")
    return await execute(Invocation.of("share", args, input_text=input_text), settings=settings)
