"""Telephony: `termux-telephony-cellinfo`, `-deviceinfo` and `-call`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import TelephonyCellInfo, TelephonyDeviceInfo
from termux_api.core.executor import execute


async def get_telephony_cell_info(*, settings: AppSettings | None = None) -> list[TelephonyCellInfo]:
    data = await execute(Invocation.of("telephony-cellinfo", json_output=True), settings=settings)
    return decode_as(list[TelephonyCellInfo], data)


async def get_telephony_device_info(*, settings: AppSettings | None = None) -> TelephonyDeviceInfo:
    data = await execute(Invocation.of("telephony-deviceinfo", json_output=True), settings=settings)
    return decode_as(TelephonyDeviceInfo, data)


async def telephony_call(phone_number: str, *, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("telephony-call", [phone_number]), settings=settings)
