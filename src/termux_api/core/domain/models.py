"""Domain models (Pydantic v2) for Termux:API parameters and results.

Why pydantic here:
- Parameter objects document every flag a command accepts (Field descriptions)
  and give callers validation at construction time.
- Result models type the JSON the commands print.

Notes:
- Result models accept unknown keys (`extra="allow"`): what a command prints
  varies across Android versions and nothing it returns is dropped.
- Result fields default to None for the same reason; only the shape is typed.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TermuxModel(BaseModel):
    """Base for models decoded from command output."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ApiErrorReport(TermuxModel):
    """`{"API_ERROR": "..."}` payload some commands print instead of data."""

    api_error: str = Field(..., alias="API_ERROR", description="Error reported by the Termux:API app.")


# --- Audio -----------------------------------------------------------------


class AudioInfo(TermuxModel):
    """Audio system properties printed by `termux-audio-info`."""

    output_sample_rate: str | None = Field(default=None, alias="PROPERTY_OUTPUT_SAMPLE_RATE")
    output_frames_per_buffer: str | None = Field(default=None, alias="PROPERTY_OUTPUT_FRAMES_PER_BUFFER")
    audiotrack_sample_rate: int | None = Field(default=None, alias="AUDIOTRACK_SAMPLE_RATE")
    audiotrack_buffer_size_in_frames: int | None = Field(default=None, alias="AUDIOTRACK_BUFFER_SIZE_IN_FRAMES")
    audiotrack_sample_rate_low_latency: int | None = Field(default=None, alias="AUDIOTRACK_SAMPLE_RATE_LOW_LATENCY")
    audiotrack_buffer_size_in_frames_low_latency: int | None = Field(
        default=None, alias="AUDIOTRACK_BUFFER_SIZE_IN_FRAMES_LOW_LATENCY"
    )
    audiotrack_sample_rate_power_saving: int | None = Field(default=None, alias="AUDIOTRACK_SAMPLE_RATE_POWER_SAVING")
    audiotrack_buffer_size_in_frames_power_saving: int | None = Field(
        default=None, alias="AUDIOTRACK_BUFFER_SIZE_IN_FRAMES_POWER_SAVING"
    )
    bluetooth_a2dp_is_on: bool | None = Field(default=None, alias="BLUETOOTH_A2DP_IS_ON")
    wiredheadset_is_connected: bool | None = Field(default=None, alias="WIREDHEADSET_IS_CONNECTED")


AudioStreamType = Literal["alarm", "music", "notification", "ring", "system", "call"]


class StreamVolumeInfo(TermuxModel):
    stream: str | None = None
    volume: int | None = None
    max_volume: int | None = None


class SetVolumeParams(BaseModel):
    stream: AudioStreamType = Field(..., description="Audio stream to change.")
    volume: int = Field(..., ge=0, description="Volume level.")


# --- Battery ---------------------------------------------------------------


class BatteryStatus(TermuxModel):
    """Battery state printed by `termux-battery-status`."""

    present: bool | None = None
    technology: str | None = None
    health: str | None = Field(default=None, description="GOOD, OVERHEAT, DEAD, COLD, ...")
    plugged: str | None = Field(default=None, description="UNPLUGGED, PLUGGED_AC, PLUGGED_USB, ...")
    status: str | None = Field(default=None, description="CHARGING, DISCHARGING, FULL, NOT_CHARGING, UNKNOWN.")
    temperature: float | None = Field(default=None, description="Celsius.")
    voltage: int | None = Field(default=None, description="Millivolts.")
    current: int | None = Field(default=None, description="Instantaneous current in microamperes.")
    current_average: int | None = None
    percentage: int | None = None
    level: int | None = None
    scale: int | None = None
    charge_counter: int | None = None
    energy: int | None = None
    cycle: int | None = None

    @property
    def is_plugged(self) -> bool:
        return bool(self.plugged) and self.plugged != "UNPLUGGED"


# --- Brightness ------------------------------------------------------------


class SetBrightnessParams(BaseModel):
    brightness: int | None = Field(default=None, ge=0, le=255, description="Brightness level 0-255.")
    auto: bool | None = Field(default=None, description="Enable or disable auto brightness.")


# --- Call log --------------------------------------------------------------


class CallLogEntry(TermuxModel):
    name: str | None = Field(default=None, description="Contact name or UNKNOWN_CALLER.")
    phone_number: str | None = None
    type: str | None = Field(default=None, description="INCOMING, OUTGOING, MISSED, ...")
    date: str | None = Field(default=None, description="yyyy-MM-dd HH:mm:ss")
    duration: str | None = None
    sim_id: str | None = None


class GetCallLogParams(BaseModel):
    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)


# --- Camera ----------------------------------------------------------------


class CameraSize(TermuxModel):
    width: float | None = None
    height: float | None = None


class CameraInfo(TermuxModel):
    id: str | None = None
    facing: str | int | None = Field(default=None, description="'front', 'back' or a numeric constant.")
    jpeg_output_sizes: list[CameraSize] = Field(default_factory=list)
    focal_lengths: list[float] = Field(default_factory=list)
    auto_exposure_modes: list[str] = Field(default_factory=list)
    physical_size: CameraSize | None = None
    capabilities: list[str] = Field(default_factory=list)


class TakePhotoParams(BaseModel):
    file_path: str = Field(..., min_length=1, description="Where the JPEG is written.")
    camera_id: str | None = Field(default=None, description="Camera ID (device default is '0').")


# --- Contacts --------------------------------------------------------------


class Contact(TermuxModel):
    name: str | None = None
    number: str | None = None


# --- Download --------------------------------------------------------------


class DownloadParams(BaseModel):
    url: str = Field(..., min_length=1)
    title: str | None = None
    description: str | None = None
    file_path: str | None = Field(default=None, description="Absolute destination path.")


# --- Fingerprint -----------------------------------------------------------


class FingerprintParams(BaseModel):
    title: str | None = None
    description: str | None = None
    subtitle: str | None = None
    cancel_button_text: str | None = None


class FingerprintResult(TermuxModel):
    errors: list[str] = Field(default_factory=list)
    failed_attempts: int | None = None
    auth_result: str | None = Field(default=None, description="AUTH_RESULT_SUCCESS, AUTH_RESULT_FAILURE, ...")

    @property
    def succeeded(self) -> bool:
        return self.auth_result == "AUTH_RESULT_SUCCESS"


# --- Infrared --------------------------------------------------------------


class InfraredFrequencyRange(TermuxModel):
    min: int | None = None
    max: int | None = None


class TransmitInfraredParams(BaseModel):
    frequency: int = Field(..., gt=0, description="Carrier frequency in Hz.")
    pattern: list[int] = Field(..., min_length=1, description="On/off durations in microseconds.")


# --- Job scheduler ---------------------------------------------------------


class ScheduleJobParams(BaseModel):
    script_path: str = Field(..., min_length=1)
    job_id: int | None = None
    period_ms: int | None = Field(default=None, ge=0, description="Minimum 15 minutes on Android N+.")
    network_type: Literal["any", "unmetered", "cellular", "not_roaming", "none"] | None = None
    battery_not_low: bool | None = None
    charging: bool | None = None
    persisted: bool | None = None
    idle: bool | None = None
    storage_not_low: bool | None = None


# --- Location --------------------------------------------------------------

LocationProvider = Literal["gps", "network", "passive"]


class LocationInfo(TermuxModel):
    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None
    accuracy: float | None = None
    vertical_accuracy: float | None = None
    bearing: float | None = None
    speed: float | None = None
    elapsed_ms: int | None = Field(default=None, alias="elapsedMs")
    provider: str | None = None
    api_error: str | None = Field(default=None, alias="API_ERROR")


class GetLocationParams(BaseModel):
    provider: LocationProvider | None = None
    request_type: Literal["last", "once", "updates"] | None = None


# --- Media -----------------------------------------------------------------


class MediaPlayerParams(BaseModel):
    action: Literal["play", "pause", "resume", "stop", "info"]
    file_path: str | None = Field(default=None, description="File or URL; required for 'play'.")


class MediaScanParams(BaseModel):
    paths: list[str] = Field(..., min_length=1)
    recursive: bool = False
    verbose: bool = False


# --- Microphone ------------------------------------------------------------


class MicRecordParams(BaseModel):
    file_path: str | None = None
    limit_seconds: int | None = Field(default=None, description="0 or negative for unlimited.")
    encoder: Literal["aac", "amr_nb", "amr_wb", "opus"] | None = None


class MicRecorderInfo(TermuxModel):
    is_recording: bool | None = Field(default=None, alias="isRecording")
    output_file: str | None = Field(default=None, alias="outputFile")


# --- NFC -------------------------------------------------------------------


class NfcReadParams(BaseModel):
    mode: Literal["short", "full"] | None = None


class NfcWriteParams(BaseModel):
    text: str = Field(..., min_length=1)


# --- Notifications ---------------------------------------------------------

NotificationPriority = Literal["default", "high", "low", "max", "min"]


class NotificationButton(BaseModel):
    text: str = Field(..., min_length=1)
    action: str = Field(..., description="Shell action; may reference $REPLY.")


class NotificationParams(BaseModel):
    content: str = Field(..., description="Body, sent on stdin.")
    title: str | None = None
    id: str | None = None
    priority: NotificationPriority | None = None
    led_color: str | None = Field(default=None, description="ARGB hex.")
    led_on_ms: int | None = None
    led_off_ms: int | None = None
    vibrate_pattern: list[int] | None = None
    sound: bool = False
    ongoing: bool = False
    alert_once: bool = False
    action: str | None = None
    group_key: str | None = None
    channel_id: str | None = None
    icon_name: str | None = None
    image_path: str | None = None
    type: Literal["media"] | None = None
    media_previous_action: str | None = None
    media_pause_action: str | None = None
    media_play_action: str | None = None
    media_next_action: str | None = None
    buttons: list[NotificationButton] = Field(default_factory=list, description="Only the first three are used.")
    on_delete_action: str | None = None


class NotificationChannelParams(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    priority: NotificationPriority | None = None


class NotificationEntry(TermuxModel):
    id: int | None = None
    tag: str | None = None
    key: str | None = None
    group: str | None = None
    package_name: str | None = Field(default=None, alias="packageName")
    title: str | None = None
    content: str | None = None
    when: str | None = None
    lines: list[str] | None = None


# --- Sensors ---------------------------------------------------------------


class SensorList(TermuxModel):
    sensors: list[str] = Field(default_factory=list)


class StreamSensorsParams(BaseModel):
    sensors: str = Field(..., min_length=1, description="Comma separated sensor names or 'all'.")
    delay: int | None = Field(default=None, ge=0, description="Milliseconds between readings.")
    limit: int | None = Field(default=None, ge=1, description="Readings before the command stops.")


# --- Share -----------------------------------------------------------------


class ShareParams(BaseModel):
    text: str | None = None
    file_path: str | None = None
    title: str | None = None
    content_type: str | None = None
    use_default_receiver: bool = False
    action: Literal["edit", "send", "view"] | None = None


# --- SMS -------------------------------------------------------------------


class SmsMessage(TermuxModel):
    threadid: int | None = None
    type: str | None = None
    read: bool | None = None
    sender: str | None = None
    address: str | None = None
    number: str | None = None
    received: str | None = None
    body: str | None = None
    id: int | None = Field(default=None, alias="_id")


class GetSmsListParams(BaseModel):
    conversation_list: bool = False
    conversation_return_multiple_messages: bool = False
    conversation_return_nested_view: bool = False
    conversation_return_no_order_reverse: bool = False
    conversation_offset: int | None = None
    conversation_limit: int | None = None
    conversation_selection: str | None = None
    conversation_sort_order: str | None = None
    offset: int | None = None
    limit: int | None = None
    type: Literal["all", "inbox", "sent", "draft", "outbox", "failed"] | None = None
    message_selection: str | None = None
    from_address: str | None = None
    message_sort_order: str | None = None
    message_return_no_order_reverse: bool = False


class SendSmsParams(BaseModel):
    recipients: list[str] = Field(..., min_length=1)
    message: str = Field(..., description="Body, sent on stdin.")
    sim_slot: int | None = Field(default=None, ge=0)


# --- Telephony -------------------------------------------------------------


class TelephonyCellInfo(TermuxModel):
    """One cell; technology specific keys (lac, pci, nci, ...) land in the extras."""

    type: str | None = None
    registered: bool | None = None
    asu: int | None = None
    dbm: int | None = None
    level: int | None = None
    mcc: int | str | None = None
    mnc: int | str | None = None


class TelephonyDeviceInfo(TermuxModel):
    data_enabled: str | None = None
    data_activity: str | None = None
    data_state: str | None = None
    device_id: str | None = None
    device_software_version: str | None = None
    phone_count: int | None = None
    phone_type: str | None = None
    network_operator: str | None = None
    network_operator_name: str | None = None
    network_country_iso: str | None = None
    network_type: str | None = None
    network_roaming: bool | None = None
    sim_country_iso: str | None = None
    sim_operator: str | None = None
    sim_operator_name: str | None = None
    sim_serial_number: str | None = None
    sim_subscriber_id: str | None = None
    sim_state: str | None = None


# --- Text to speech --------------------------------------------------------


class TTSEngineInfo(TermuxModel):
    name: str | None = None
    label: str | None = None
    default: bool | None = None


class SpeakParams(BaseModel):
    text: str = Field(..., description="Sent on stdin.")
    language: str | None = None
    region: str | None = None
    variant: str | None = None
    engine: str | None = None
    pitch: float | None = None
    rate: float | None = None
    stream: Literal["NOTIFICATION", "ALARM", "MUSIC", "RING", "SYSTEM", "VOICE_CALL"] | None = None


# --- Toast -----------------------------------------------------------------


class ToastParams(BaseModel):
    message: str = Field(..., description="Sent on stdin.")
    short_duration: bool = False
    background_color: str | None = None
    text_color: str | None = None
    gravity: Literal["top", "middle", "bottom"] | None = None


# --- Vibrate / wallpaper ---------------------------------------------------


class VibrateParams(BaseModel):
    duration_ms: int | None = Field(default=None, ge=0)
    force: bool = False


class WallpaperParams(BaseModel):
    file_path: str | None = None
    url: str | None = None
    lockscreen: bool = False


# --- Wifi ------------------------------------------------------------------


class WifiConnectionInfo(TermuxModel):
    bssid: str | None = None
    frequency_mhz: int | None = None
    ip: str | None = None
    link_speed_mbps: int | None = None
    mac_address: str | None = None
    network_id: int | None = None
    rssi: int | None = None
    ssid: str | None = None
    ssid_hidden: bool | None = None
    supplicant_state: str | None = None
    api_error: str | None = Field(default=None, alias="API_ERROR")


class WifiScanResult(TermuxModel):
    bssid: str | None = None
    frequency_mhz: int | None = None
    rssi: int | None = None
    ssid: str | None = None
    timestamp: int | None = None
    channel_bandwidth_mhz: str | None = None
    center_frequency_mhz: int | None = None
    capabilities: str | None = None
    operator_name: str | None = None
    venue_name: str | None = None
