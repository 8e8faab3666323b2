"""Value objects passed between the calculation, adjustment and render layers."""

import math
from dataclasses import dataclass, fields, replace
from datetime import datetime, timezone
from enum import IntEnum
from zoneinfo import ZoneInfo

from .methods import PRAYER_ORDER
from .render import describe


def get_timezone(tz_name):
    if tz_name:
        return ZoneInfo(tz_name)
    return datetime.now().astimezone().tzinfo


def tz_hours_for_day(day, tzinfo):
    dt = datetime(day.year, day.month, day.day, 0, 0, 0, tzinfo=tzinfo)
    offset = dt.utcoffset()
    return offset.total_seconds() / 3600.0 if offset else 0.0


@dataclass(frozen=True)
class Coordinates:
    lat: float  # Latitude (decimal degrees, north positive)
    lng: float  # Longitude (decimal degrees, east positive)


@dataclass(frozen=True)
class CalendarMoment:
    """The instant and place a day of prayer times is computed for."""

    instant: datetime  # UTC instant; naive values are read as UTC
    coords: Coordinates
    tz_hours: float  # Standard offset from UTC in hours
    dst_hours: float = 0.0  # Extra daylight-saving offset in hours

    @property
    def timezone(self):
        return self.tz_hours + self.dst_hours

    @classmethod
    def for_day(cls, day, coords, tz_name=None, dst_hours=0.0):
        """Moment at 0h UTC of ``day``, with the offset taken from an IANA zone (or the local one)."""
        tzinfo = get_timezone(tz_name)
        instant = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
        return cls(instant, coords, tz_hours_for_day(day, tzinfo), dst_hours)


@dataclass(frozen=True)
class TuningOffsets:
    """Per-event minute offsets applied after every other adjustment."""

    fajr: float = 0.0
    sunrise: float = 0.0
    dhuhr: float = 0.0
    asr: float = 0.0
    sunset: float = 0.0
    maghrib: float = 0.0
    isha: float = 0.0

    @classmethod
    def from_sequence(cls, offsets):
        offsets = list(offsets)
        if len(offsets) != 7:
            raise ValueError(f"Tuning offsets need 7 values, got {len(offsets)}")
        return cls(*(float(v) for v in offsets))

    @classmethod
    def from_mapping(cls, adjustments):
        known = {f.name for f in fields(cls)}
        values = {}
        for key, minutes in adjustments.items():
            slot = key.lower()
            if slot not in known:
                raise ValueError(f"Unknown prayer for offset: {key}")
            values[slot] = float(minutes)
        return cls(**values)

    def as_list(self):
        return [getattr(self, f.name) for f in fields(self)]


@dataclass(frozen=True)
class DayTimes:
    """Hour-of-day values for the seven internal events.

    ``sunset`` only anchors Maghrib, Isha and the night length; it never
    reaches a :class:`PrayerTimeResult`.
    """

    fajr: float
    sunrise: float
    dhuhr: float
    asr: float
    sunset: float
    maghrib: float
    isha: float

    def replace(self, **changes):
        return replace(self, **changes)

    def shift(self, hours):
        return DayTimes(*(value + hours for value in self.as_list()))

    def as_list(self):
        return [getattr(self, f.name) for f in fields(self)]

    def undefined(self):
        return [f.name for f in fields(self) if math.isnan(getattr(self, f.name))]


class PrayerName(IntEnum):
    FAJR = 0
    SUNRISE = 1
    DHUHR = 2
    ASR = 3
    MAGHRIB = 4
    ISHA = 5

    @property
    def label(self):
        return PRAYER_ORDER[self.value]


@dataclass(frozen=True)
class PrayerTimeResult:
    """The six emitted times in fixed order; each a string, or a float for the float format."""

    fajr: object
    sunrise: object
    dhuhr: object
    asr: object
    maghrib: object
    isha: object

    def __iter__(self):
        return iter(getattr(self, f.name) for f in fields(self))

    def __len__(self):
        return len(PRAYER_ORDER)

    def __getitem__(self, index):
        return getattr(self, PrayerName(index).name.lower())

    def as_dict(self):
        return dict(zip(PRAYER_ORDER, self))

    def __str__(self):
        return describe(self)
