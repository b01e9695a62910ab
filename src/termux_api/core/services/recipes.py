"""Small flows composed from several capability calls.

These used to live as standalone example scripts. Keeping them here lets
the CLI (and any other entry point) reuse them, and keeps printing out of
the flows: callers get a `RecipeResult` back and decide what to show.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from termux_api.adapters.battery import get_battery_status
from termux_api.adapters.camera import take_photo
from termux_api.adapters.notification import show_notification
from termux_api.adapters.share import share
from termux_api.adapters.tts import tts_speak
from termux_api.core.config import AppSettings
from termux_api.core.domain.models import (
    BatteryStatus,
    NotificationParams,
    ShareParams,
    SpeakParams,
    TakePhotoParams,
)

logger = logging.getLogger(__name__)

LOW_BATTERY_NOTIFICATION_ID = "low-battery-warning"


@dataclass
class RecipeResult:
    """Outcome of a recipe run."""

    performed: bool
    message: str
    battery: BatteryStatus | None = None
    steps: list[str] = field(default_factory=list)


def battery_is_low(status: BatteryStatus, threshold: int) -> bool:
    """Known percentage below `threshold` while unplugged."""

    if status.percentage is None:
        return False
    return status.percentage < threshold and not status.is_plugged


async def notify_if_low_battery(
    *,
    threshold: int = 20,
    settings: AppSettings | None = None,
) -> RecipeResult:
    status = await get_battery_status(settings=settings)

    if not battery_is_low(status, threshold):
        return RecipeResult(
            performed=False,
            message=f"Battery is at {status.percentage}%. No notification needed.",
            battery=status,
        )

    await show_notification(
        NotificationParams(
            title="Low Battery",
            content=f"Battery is at {status.percentage}%. Please plug in your charger!",
            priority="high",
            id=LOW_BATTERY_NOTIFICATION_ID,
        ),
        settings=settings,
    )
    logger.info("Low battery notification sent (%s%%)", status.percentage)
    return RecipeResult(
        performed=True,
        message="Low battery notification sent.",
        battery=status,
        steps=["battery-status", "notification"],
    )


async def speak_battery_status(*, settings: AppSettings | None = None) -> RecipeResult:
    status = await get_battery_status(settings=settings)
    if status.percentage is None:
        message = "Your battery level is unknown."
    else:
        message = f"Your battery is at {status.percentage} percent."
    await tts_speak(SpeakParams(text=message), settings=settings)
    return RecipeResult(
        performed=True,
        message=message,
        battery=status,
        steps=["battery-status", "tts-speak"],
    )


async def take_and_share_photo(
    *,
    file_path: str,
    camera_id: str | None = None,
    title: str = "Check out this photo!",
    settings: AppSettings | None = None,
) -> RecipeResult:
    """Take a photo, then open the share chooser for it.

    Errors from either step propagate; the share step never runs after a
    failed capture.
    """

    await take_photo(TakePhotoParams(file_path=file_path, camera_id=camera_id), settings=settings)
    logger.info("Photo taken at %s", file_path)
    await share(ShareParams(file_path=file_path, title=title), settings=settings)
    return RecipeResult(
        performed=True,
        message=f"Photo {file_path} shared.",
        steps=["camera-photo", "share"],
    )
