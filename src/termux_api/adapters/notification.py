"""Notifications: `termux-notification`, `-remove`, `-channel` and `-list`.

The notification body is sent on stdin; everything else is a flag.
"""

from __future__ import annotations

from termux_api.adapters.decoding import decode_as
from termux_api.core.config import AppSettings
from termux_api.core.domain.invocation import Invocation, render_token
from termux_api.core.domain.models import NotificationChannelParams, NotificationEntry, NotificationParams
from termux_api.core.executor import execute

MAX_BUTTONS = 3


def build_notification_args(params: NotificationParams) -> list[str]:
    args: list[str] = []
    if params.title:
        args += ["--title", params.title]
    if params.id:
        args += ["--id", params.id]
    if params.priority:
        args += ["--priority", params.priority]
    if params.led_color:
        args += ["--led-color", params.led_color]
    if params.led_on_ms is not None:
        args += ["--led-on", render_token(params.led_on_ms)]
    if params.led_off_ms is not None:
        args += ["--led-off", render_token(params.led_off_ms)]
    if params.vibrate_pattern:
        args += ["--vibrate", render_token(params.vibrate_pattern)]
    if params.sound:
        args.append("--sound")
    if params.ongoing:
        args.append("--ongoing")
    if params.alert_once:
        args.append("--alert-once")
    if params.action:
        args += ["--action", params.action]
    if params.group_key:
        args += ["--group", params.group_key]
    if params.channel_id:
        args += ["--channel", params.channel_id]
    if params.icon_name:
        args += ["--icon", params.icon_name]
    if params.image_path:
        args += ["--image-path", params.image_path]
    if params.type == "media":
        args += ["--type", "media"]
        media_actions = (
            ("--media-previous", params.media_previous_action),
            ("--media-pause", params.media_pause_action),
            ("--media-play", params.media_play_action),
            ("--media-next", params.media_next_action),
        )
        for flag, script in media_actions:
            if script:
                args += [flag, script]
    for number, button in enumerate(params.buttons[:MAX_BUTTONS], start=1):
        args += [f"--button{number}-text", button.text]
        args += [f"--button{number}-action", button.action]
    if params.on_delete_action:
        args += ["--on-delete", params.on_delete_action]
    return args


async def show_notification(params: NotificationParams, *, settings: AppSettings | None = None) -> str:
    invocation = Invocation.of("notification", build_notification_args(params), input_text=params.content)
    return await execute(invocation, settings=settings)


async def remove_notification(notification_id: str, *, settings: AppSettings | None = None) -> str:
    return await execute(Invocation.of("notification-remove", [notification_id]), settings=settings)


async def create_notification_channel(
    params: NotificationChannelParams,
    *,
    settings: AppSettings | None = None,
) -> str:
    """Create a notification channel (Android 8.0+)."""

    args = ["--id", params.id, "--name", params.name]
    if params.priority:
        args += ["--priority", params.priority]
    return await execute(Invocation.of("notification-channel", args), settings=settings)


async def delete_notification_channel(channel_id: str, *, settings: AppSettings | None = None) -> str:
    args = ["--id", channel_id, "--delete"]
    return await execute(Invocation.of("notification-channel", args), settings=settings)


async def list_notifications(*, settings: AppSettings | None = None) -> list[NotificationEntry]:
    """Active notifications; needs the notification listener permission for Termux:API."""

    data = await execute(Invocation.of("notification-list", json_output=True), settings=settings)
    return decode_as(list[NotificationEntry], data)
