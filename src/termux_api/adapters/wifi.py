"""Wi-Fi: `termux-wifi-connectioninfo`, `-scaninfo` and `-enable`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import ApiErrorReport, WifiConnectionInfo, WifiScanResult
from termux_api.core.executor import execute


async def get_wifi_connection_info(*, settings: AppSettings | None = None) -> WifiConnectionInfo:
    data = await execute(Invocation.of("wifi-connectioninfo", json_output=True), settings=settings)
    return decode_as(WifiConnectionInfo, data)


async def get_wifi_scan_info(*, settings: AppSettings | None = None) -> list[WifiScanResult] | ApiErrorReport:
    """Last scan results. Location services may have to be enabled."""

    data = await execute(Invocation.of("wifi-scaninfo", json_output=True), settings=settings)
    return decode_as(list[WifiScanResult] | ApiErrorReport, data)


async def set_wifi_enabled(enabled: bool, *, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("wifi-enable", [render_token(enabled)]), settings=settings)
