"""NFC: `termux-nfc`.

Both calls wait for a tag to be presented to the device.
"""

from __future__ import annotations

from typing import Any

from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import NfcReadParams, NfcWriteParams
from termux_api.core.executor import execute


async def nfc_read(params: NfcReadParams | None = None, *, settings: AppSettings | None = None) -> Any:
    """Read a tag. The JSON layout depends on the tag, so it is returned as decoded."""

    params = params or NfcReadParams()
    args = ["-r"]
    if params.mode:
        args += ["-m", params.mode]
    return await execute(Invocation.of("nfc", args, json_output=True), settings=settings)


async def nfc_write(params: NfcWriteParams, *, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("nfc", ["-w", params.text]), settings=settings)
