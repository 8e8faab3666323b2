import math

from .astro import fix_hour
from .methods import PRAYER_ORDER, TimeFormat


def split_time(value):
    """Round an hour value to the nearest minute and split it into (hours, minutes)."""
    value = fix_hour(value + 0.5 / 60.0)
    hours = int(math.floor(value))
    minutes = int(math.floor((value - hours) * 60.0))
    return hours, minutes


def format_24h(value):
    hours, minutes = split_time(value)
    return f"{hours:02d}:{minutes:02d}"


def format_12h(value):
    hours, minutes = split_time(value)
    hours = ((hours + 11) % 12) + 1
    return f"{hours}:{minutes:02d}"


def format_time(value, style):
    style = TimeFormat(style)
    if math.isnan(value):
        return value if style is TimeFormat.FLOAT else ""
    if style is TimeFormat.FLOAT:
        return fix_hour(value)
    if style is TimeFormat.HOUR24:
        return format_24h(value)
    # the 12h styles render identically, neither appends am/pm
    return format_12h(value)


def describe(times):
    lines = []
    for name, value in zip(PRAYER_ORDER, times):
        if isinstance(value, float):
            value = "" if math.isnan(value) else f"{value:.4f}"
        lines.append(f"{name}: {value}")
    return "\n".join(lines) + "\n"
