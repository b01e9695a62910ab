"""SMS: `termux-sms-list` and `termux-sms-send`."""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import GetSmsListParams, SendSmsParams, SmsMessage
from termux_api.core.executor import execute


def build_sms_list_args(params: GetSmsListParams) -> list[str]:
    args: list[str] = []
    switches = (
        ("--conversation-list", params.conversation_list),
        ("--conversation-return-multiple-messages", params.conversation_return_multiple_messages),
        ("--conversation-return-nested-view", params.conversation_return_nested_view),
        ("--conversation-return-no-order-reverse", params.conversation_return_no_order_reverse),
    )
    args += [flag for flag, enabled in switches if enabled]

    if params.conversation_offset is not None:
        args += ["--conversation-offset", render_token(params.conversation_offset)]
    if params.conversation_limit is not None:
        args += ["--conversation-limit", render_token(params.conversation_limit)]
    if params.conversation_selection:
        args += ["--conversation-selection", params.conversation_selection]
    if params.conversation_sort_order:
        args += ["--conversation-sort-order", params.conversation_sort_order]

    if params.offset is not None:
        args += ["--offset", render_token(params.offset)]
    if params.limit is not None:
        args += ["--limit", render_token(params.limit)]
    if params.type:
        args += ["--type", params.type]
    if params.message_selection:
        args += ["--message-selection", params.message_selection]
    if params.from_address:
        args += ["--from", params.from_address]
    if params.message_sort_order:
        args += ["--message-sort-order", params.message_sort_order]
    if params.message_return_no_order_reverse:
        args.append("--message-return-no-order-reverse")
    return args


async def get_sms_list(
    params: GetSmsListParams | None = None,
    *,
    settings: AppSettings | None = None,
) -> list[SmsMessage] | dict[str, list[SmsMessage]]:
    """Messages, or conversations keyed by thread id with the nested view."""

    params = params or GetSmsListParams()
    data = await execute(Invocation.of("sms-list", build_sms_list_args(params), json_output=True), settings=settings)
    return decode_as(list[SmsMessage] | dict[str, list[SmsMessage]], data)


async def send_sms(params: SendSmsParams, *, settings: AppSettings | None = None) -> str:
    args = ["-n", render_token(params.recipients)]
    if params.sim_slot is not None:
        args += ["-s", render_token(params.sim_slot)]
    return await execute(Invocation.of("sms-send", args, input_text=params.message), settings=settings)
