"""Contacts: `termux-contact-list`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation
from termux_api.core.domain.models import Contact
from termux_api.core.executor import execute


async def get_contact_list(*, settings: AppSettings | None = None) -> list[Contact]:
    data = await execute(Invocation.of("contact-list", json_output=True), settings=settings)
    return decode_as(list[Contact], data)
