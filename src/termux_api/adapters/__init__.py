"""Per-capability façade over the Termux:API commands.

Why a package:
- One module per command family (battery, notification, sensor, ...).
- Each function only builds argument tokens and declares its result shape;
  process handling lives in `termux_api.core.executor`.
"""

from termux_api.adapters.audio import get_audio_info, get_volume_info, set_volume
from termux_api.adapters.battery import get_battery_status
from termux_api.adapters.brightness import set_brightness
from termux_api.adapters.call_log import get_call_log
from termux_api.adapters.camera import get_camera_info, take_photo
from termux_api.adapters.clipboard import clipboard_get, clipboard_set
from termux_api.adapters.contacts import get_contact_list
from termux_api.adapters.dialog import show_dialog
from termux_api.adapters.download import download_file
from termux_api.adapters.fingerprint import request_fingerprint
from termux_api.adapters.infrared import get_infrared_frequencies, transmit_infrared
from termux_api.adapters.job_scheduler import cancel_all_jobs, cancel_job, list_pending_jobs, schedule_job
from termux_api.adapters.location import get_location, stream_location_updates
from termux_api.adapters.media import media_player, media_scan
from termux_api.adapters.microphone import microphone_info, microphone_quit, microphone_record
from termux_api.adapters.nfc import nfc_read, nfc_write
from termux_api.adapters.notification import (
    create_notification_channel,
    delete_notification_channel,
    list_notifications,
    remove_notification,
    show_notification,
)
from termux_api.adapters.sensor import cleanup_sensors, list_sensors, stream_sensor_data
from termux_api.adapters.share import share
from termux_api.adapters.sms import get_sms_list, send_sms
from termux_api.adapters.speech import speech_to_text
from termux_api.adapters.telephony import get_telephony_cell_info, get_telephony_device_info, telephony_call
from termux_api.adapters.toast import show_toast
from termux_api.adapters.torch import set_torch
from termux_api.adapters.tts import list_tts_engines, tts_speak
from termux_api.adapters.usb import list_usb_devices, request_usb_permission
from termux_api.adapters.vibrate import vibrate
from termux_api.adapters.wallpaper import set_wallpaper
from termux_api.adapters.wifi import get_wifi_connection_info, get_wifi_scan_info, set_wifi_enabled

# Short names of every wrapped command (without the namespace prefix).
WRAPPED_COMMANDS: tuple[str, ...] = (
	"audio-info",
	"battery-status",
	"brightness",
	"call-log",
	"camera-info",
	"camera-photo",
	"clipboard-get",
	"clipboard-set",
	"contact-list",
	"dialog",
	"download",
	"fingerprint",
	"infrared-frequencies",
	"infrared-transmit",
	"job-scheduler",
	"location",
	"media-player",
	"media-scan",
	"microphone-record",
	"nfc",
	"notification",
	"notification-channel",
	"notification-list",
	"notification-remove",
	"sensor",
	"share",
	"sms-list",
	"sms-send",
	"speech-to-text",
	"telephony-call",
	"telephony-cellinfo",
	"telephony-deviceinfo",
	"toast",
	"torch",
	"tts-engines",
	"tts-speak",
	"usb",
	"vibrate",
	"volume",
	"wallpaper",
	"wifi-connectioninfo",
	"wifi-enable",
	"wifi-scaninfo",
)

__all__ = [
	"WRAPPED_COMMANDS",
	"cancel_all_jobs",
	"cancel_job",
	"cleanup_sensors",
	"clipboard_get",
	"clipboard_set",
	"create_notification_channel",
	"delete_notification_channel",
	"download_file",
	"get_audio_info",
	"get_battery_status",
	"get_call_log",
	"get_camera_info",
	"get_contact_list",
	"get_infrared_frequencies",
	"get_location",
	"get_sms_list",
	"get_telephony_cell_info",
	"get_telephony_device_info",
	"get_volume_info",
	"get_wifi_connection_info",
	"get_wifi_scan_info",
	"list_notifications",
	"list_pending_jobs",
	"list_sensors",
	"list_tts_engines",
	"list_usb_devices",
	"media_player",
	"media_scan",
	"microphone_info",
	"microphone_quit",
	"microphone_record",
	"nfc_read",
	"nfc_write",
	"remove_notification",
	"request_fingerprint",
	"request_usb_permission",
	"schedule_job",
	"send_sms",
	"set_brightness",
	"set_torch",
	"set_volume",
	"set_wallpaper",
	"set_wifi_enabled",
	"share",
	"show_dialog",
	"show_notification",
	"show_toast",
	"speech_to_text",
	"stream_location_updates",
	"stream_sensor_data",
	"take_photo",
	"telephony_call",
	"transmit_infrared",
	"tts_speak",
	"vibrate",
]
