from .methods import AsrJuristic, HighLatMethod, TimeFormat
from .models import TuningOffsets
from .settings import Settings

DEFAULT_CONFIG = {
    "method": "egypt",
    "custom_params": None,
    "asr_method": "standard",
    "high_lats": "midnight",
    "time_format": "12h",
    "dhuhr_minutes": 0,
    "adjustments": {
        "fajr": 0,
        "sunrise": 0,
        "dhuhr": 0,
        "asr": 0,
        "sunset": 0,
        "maghrib": 0,
        "isha": 0
    }
}

ASR_METHODS = {
    "standard": AsrJuristic.STANDARD,
    "shafi": AsrJuristic.STANDARD,
    "maliki": AsrJuristic.STANDARD,
    "hanbali": AsrJuristic.STANDARD,
    "hanafi": AsrJuristic.HANAFI,
}


def _enum_option(enum_cls, value, label):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(f"Unknown {label}: {value}") from None


def settings_from_config(config):
    merged = dict(DEFAULT_CONFIG)
    merged.update(config)

    asr_key = str(merged["asr_method"]).lower()
    if asr_key not in ASR_METHODS:
        raise ValueError(f"Unknown asr method: {merged['asr_method']}")

    return Settings.for_method(
        merged["method"],
        custom_params=merged.get("custom_params"),
        asr_method=ASR_METHODS[asr_key],
        high_lats=_enum_option(HighLatMethod, merged["high_lats"], "high latitude method"),
        time_format=_enum_option(TimeFormat, merged["time_format"], "time format"),
        dhuhr_minutes=float(merged.get("dhuhr_minutes") or 0),
        offsets=TuningOffsets.from_mapping(merged.get("adjustments") or {}),
    )
