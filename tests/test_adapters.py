from __future__ import annotations

import asyncio
import json

import pytest

from termux_api.adapters.audio import get_volume_info, set_volume
from termux_api.adapters.battery import get_battery_status
from termux_api.adapters.brightness import set_brightness
from termux_api.adapters.camera import take_photo
from termux_api.adapters.clipboard import clipboard_get, clipboard_set
from termux_api.adapters.download import download_file
from termux_api.adapters.infrared import get_infrared_frequencies, transmit_infrared
from termux_api.adapters.job_scheduler import build_schedule_args, cancel_job
from termux_api.adapters.location import get_location
from termux_api.adapters.media import media_player
from termux_api.adapters.microphone import microphone_info, microphone_record
from termux_api.adapters.notification import MAX_BUTTONS, build_notification_args, show_notification
from termux_api.adapters.share import share
from termux_api.adapters.sms import build_sms_list_args, get_sms_list, send_sms
from termux_api.adapters.toast import show_toast
from termux_api.adapters.usb import list_usb_devices
from termux_api.adapters.vibrate import vibrate
from termux_api.adapters.wallpaper import set_wallpaper
from termux_api.adapters.wifi import get_wifi_scan_info, set_wifi_enabled
from termux_api.core.domain.models import (
    ApiErrorReport,
    BatteryStatus,
    DownloadParams,
    GetLocationParams,
    GetSmsListParams,
    MediaPlayerParams,
    MicRecordParams,
    NotificationButton,
    NotificationParams,
    ScheduleJobParams,
    SendSmsParams,
    SetBrightnessParams,
    SetVolumeParams,
    ShareParams,
    TakePhotoParams,
    ToastParams,
    TransmitInfraredParams,
    VibrateParams,
    WallpaperParams,
)
from termux_api.core.errors import DecodeError, ParameterError


def test_battery_status_is_typed(fake_termux) -> None:
    payload = {
        "present": True,
        "health": "GOOD",
        "percentage": 87,
        "plugged": "UNPLUGGED",
        "status": "DISCHARGING",
        "temperature": 29.5,
        "cycle": 112,
    }
    fake_termux.install("battery-status", stdout=json.dumps(payload, indent=2))

    status = asyncio.run(get_battery_status(settings=fake_termux.settings))

    assert isinstance(status, BatteryStatus)
    assert status.percentage == 87
    assert status.temperature == 29.5
    assert not status.is_plugged
    assert fake_termux.argv("battery-status") == []


def test_unknown_keys_are_kept(fake_termux) -> None:
    fake_termux.install("battery-status", stdout='{"percentage": 10, "future_field": "x"}')

    status = asyncio.run(get_battery_status(settings=fake_termux.settings))

    assert status.model_extra == {"future_field": "x"}


def test_empty_output_for_structured_result_is_decode_error(fake_termux) -> None:
    fake_termux.install("battery-status")

    with pytest.raises(DecodeError):
        asyncio.run(get_battery_status(settings=fake_termux.settings))


def test_wrong_shape_is_decode_error(fake_termux) -> None:
    fake_termux.install("volume", stdout='{"stream": "music"}')

    with pytest.raises(DecodeError):
        asyncio.run(get_volume_info(settings=fake_termux.settings))


def test_toast_flags_and_stdin(fake_termux) -> None:
    fake_termux.install("toast")

    params = ToastParams(message="Saved", short_duration=True, background_color="red", gravity="top")
    asyncio.run(show_toast(params, settings=fake_termux.settings))

    assert fake_termux.argv("toast") == ["-s", "-b", "red", "-g", "top"]
    assert fake_termux.stdin("toast") == "Saved"


def test_notification_args() -> None:
    params = NotificationParams(
        content="body",
        title="Build",
        id="build-1",
        priority="high",
        vibrate_pattern=[100, 200, 300],
        ongoing=True,
        buttons=[NotificationButton(text=f"B{i}", action=f"echo {i}") for i in range(1, 5)],
    )

    args = build_notification_args(params)

    assert args[:6] == ["--title", "Build", "--id", "build-1", "--priority", "high"]
    assert args[6:8] == ["--vibrate", "100,200,300"]
    assert "--ongoing" in args
    assert args.count("--sound") == 0
    assert f"--button{MAX_BUTTONS}-text" in args
    assert f"--button{MAX_BUTTONS + 1}-text" not in args


def test_media_notification_actions() -> None:
    params = NotificationParams(
        content="Now playing",
        type="media",
        media_play_action="termux-media-player play",
        media_next_action="next.sh",
    )

    args = build_notification_args(params)

    assert args == [
        "--type",
        "media",
        "--media-play",
        "termux-media-player play",
        "--media-next",
        "next.sh",
    ]


def test_show_notification_sends_content_on_stdin(fake_termux) -> None:
    fake_termux.install("notification")

    asyncio.run(show_notification(NotificationParams(content="Hello", title="Hi"), settings=fake_termux.settings))

    assert fake_termux.argv("notification") == ["--title", "Hi"]
    assert fake_termux.stdin("notification") == "Hello"


def test_share_replaces_title_whitespace_and_passes_file(fake_termux) -> None:
    fake_termux.install("share")

    params = ShareParams(file_path="/sdcard/a.jpg", title="My  holiday photo", action="send")
    asyncio.run(share(params, settings=fake_termux.settings))

    assert fake_termux.argv("share") == ["-t", "My-holiday-photo", "-a", "send", "/sdcard/a.jpg"]
    assert fake_termux.stdin("share") == ""


def test_share_text_goes_on_stdin(fake_termux) -> None:
    fake_termux.install("share")

    asyncio.run(share(ShareParams(text="hello there", use_default_receiver=True), settings=fake_termux.settings))

    assert fake_termux.argv("share") == ["-d"]
    assert fake_termux.stdin("share") == "hello there"


def test_share_without_content_fails_before_spawning(fake_termux) -> None:
    fake_termux.install("share")

    with pytest.raises(ParameterError) as exc_info:
        asyncio.run(share(ShareParams(title="nothing"), settings=fake_termux.settings))

    assert exc_info.value.parameters == ("text", "file_path")
    assert not fake_termux.was_called("share")


def test_media_play_requires_file(fake_termux) -> None:
    fake_termux.install("media-player")

    with pytest.raises(ParameterError):
        asyncio.run(media_player(MediaPlayerParams(action="play"), settings=fake_termux.settings))
    assert not fake_termux.was_called("media-player")

    asyncio.run(media_player(MediaPlayerParams(action="play", file_path="/a.mp3"), settings=fake_termux.settings))
    assert fake_termux.argv("media-player") == ["play", "/a.mp3"]


def test_location_updates_are_rejected(fake_termux) -> None:
    with pytest.raises(ParameterError):
        asyncio.run(get_location(GetLocationParams(request_type="updates"), settings=fake_termux.settings))


def test_location_defaults_to_once(fake_termux) -> None:
    fake_termux.install("location", stdout='{"latitude": 1.5, "longitude": 2.5, "elapsedMs": 12, "provider": "gps"}')

    info = asyncio.run(get_location(GetLocationParams(provider="network"), settings=fake_termux.settings))

    assert fake_termux.argv("location") == ["-p", "network", "-r", "once"]
    assert info.latitude == 1.5
    assert info.elapsed_ms == 12


def test_sms_list_args() -> None:
    params = GetSmsListParams(
        conversation_list=True,
        conversation_limit=5,
        limit=10,
        type="inbox",
        from_address="+100",
    )

    assert build_sms_list_args(params) == [
        "--conversation-list",
        "--conversation-limit",
        "5",
        "--limit",
        "10",
        "--type",
        "inbox",
        "--from",
        "+100",
    ]


def test_sms_list_maps_underscore_id(fake_termux) -> None:
    fake_termux.install("sms-list", stdout='[{"_id": 4, "threadid": 2, "body": "hi", "read": true}]')

    messages = asyncio.run(get_sms_list(settings=fake_termux.settings))

    assert messages[0].id == 4
    assert messages[0].body == "hi"


def test_send_sms_joins_recipients(fake_termux) -> None:
    fake_termux.install("sms-send")

    params = SendSmsParams(recipients=["111", "222"], message="On my way", sim_slot=1)
    asyncio.run(send_sms(params, settings=fake_termux.settings))

    assert fake_termux.argv("sms-send") == ["-n", "111,222", "-s", "1"]
    assert fake_termux.stdin("sms-send") == "On my way"


def test_schedule_args_render_booleans() -> None:
    params = ScheduleJobParams(script_path="~/job.sh", job_id=7, period_ms=900000, charging=True, persisted=False)

    assert build_schedule_args(params) == [
        "--script",
        "~/job.sh",
        "--job-id",
        "7",
        "--period-ms",
        "900000",
        "--charging",
        "true",
        "--persisted",
        "false",
    ]


def test_cancel_job(fake_termux) -> None:
    fake_termux.install("job-scheduler")

    asyncio.run(cancel_job(7, settings=fake_termux.settings))

    assert fake_termux.argv("job-scheduler") == ["--cancel", "--job-id", "7"]


def test_vibrate_passes_duration_once(fake_termux) -> None:
    fake_termux.install("vibrate")

    asyncio.run(vibrate(VibrateParams(duration_ms=250, force=True), settings=fake_termux.settings))

    assert fake_termux.argv("vibrate") == ["-d", "250", "-f"]


def test_flag_mappings(fake_termux) -> None:
    for command in ("volume", "brightness", "camera-photo", "download", "wifi-enable", "microphone-record"):
        fake_termux.install(command)
    settings = fake_termux.settings

    asyncio.run(set_volume(SetVolumeParams(stream="music", volume=7), settings=settings))
    assert fake_termux.argv("volume") == ["-s", "music", "-v", "7"]

    asyncio.run(set_brightness(SetBrightnessParams(auto=True), settings=settings))
    assert fake_termux.argv("brightness") == ["-a", "true"]

    asyncio.run(take_photo(TakePhotoParams(file_path="/p.jpg", camera_id="1"), settings=settings))
    assert fake_termux.argv("camera-photo") == ["/p.jpg", "-c", "1"]

    asyncio.run(download_file(DownloadParams(url="https://x.org/f", title="F"), settings=settings))
    assert fake_termux.argv("download") == ["-t", "F", "https://x.org/f"]

    asyncio.run(set_wifi_enabled(False, settings=settings))
    assert fake_termux.argv("wifi-enable") == ["false"]

    asyncio.run(microphone_record(MicRecordParams(file_path="/r.m4a", limit_seconds=10), settings=settings))
    assert fake_termux.argv("microphone-record") == ["-r", "-f", "/r.m4a", "-l", "10"]


def test_microphone_info(fake_termux) -> None:
    fake_termux.install("microphone-record", stdout='{"isRecording": true, "outputFile": "/r.m4a"}')

    info = asyncio.run(microphone_info(settings=fake_termux.settings))

    assert fake_termux.argv("microphone-record") == ["-i"]
    assert info.is_recording is True
    assert info.output_file == "/r.m4a"


def test_wallpaper_requires_a_source(fake_termux) -> None:
    fake_termux.install("wallpaper")

    with pytest.raises(ParameterError):
        asyncio.run(set_wallpaper(WallpaperParams(lockscreen=True), settings=fake_termux.settings))

    asyncio.run(set_wallpaper(WallpaperParams(url="https://x.org/w.png", lockscreen=True), settings=fake_termux.settings))
    assert fake_termux.argv("wallpaper") == ["-u", "https://x.org/w.png", "-l"]


def test_api_error_payloads_are_returned(fake_termux) -> None:
    fake_termux.install("infrared-frequencies", stdout='{"API_ERROR": "Device has no infrared emitter"}')
    fake_termux.install("wifi-scaninfo", stdout='[{"ssid": "home", "rssi": -40}]')
    fake_termux.install("infrared-transmit")

    frequencies = asyncio.run(get_infrared_frequencies(settings=fake_termux.settings))
    scan = asyncio.run(get_wifi_scan_info(settings=fake_termux.settings))
    sent = asyncio.run(
        transmit_infrared(TransmitInfraredParams(frequency=38000, pattern=[20, 50, 20]), settings=fake_termux.settings)
    )

    assert isinstance(frequencies, ApiErrorReport)
    assert frequencies.api_error == "Device has no infrared emitter"
    assert scan[0].ssid == "home"
    assert sent == ""
    assert fake_termux.argv("infrared-transmit") == ["-f", "38000", "20,50,20"]


def test_clipboard_roundtrip_text(fake_termux) -> None:
    fake_termux.install("clipboard-set")
    fake_termux.install("clipboard-get", stdout="  copied  \n")

    asyncio.run(clipboard_set("copied", settings=fake_termux.settings))
    text = asyncio.run(clipboard_get(settings=fake_termux.settings))

    assert fake_termux.stdin("clipboard-set") == "copied"
    assert text == "copied"


def test_usb_list_splits_lines(fake_termux) -> None:
    fake_termux.install("usb", stdout="/dev/bus/usb/001/002\n/dev/bus/usb/001/003\n")

    assert asyncio.run(list_usb_devices(settings=fake_termux.settings)) == [
        "/dev/bus/usb/001/002",
        "/dev/bus/usb/001/003",
    ]
