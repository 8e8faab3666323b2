"""Solar position and the angle-to-time solvers the prayer times are built on.

All angles are in degrees, times are fractional hours, and Julian dates are
fractional days. A solve that asks for an altitude the sun never reaches on
that day returns ``math.nan`` instead of raising.
"""

import logging
import math
from datetime import timezone

logger = logging.getLogger(__name__)

J1970 = 2440587.5
J2000 = 2451545.0


def _dtr(d):
    return (d * math.pi) / 180.0


def _rtd(r):
    return (r * 180.0) / math.pi


def _dsin(d):
    return math.sin(_dtr(d))


def _dcos(d):
    return math.cos(_dtr(d))


def _dtan(d):
    return math.tan(_dtr(d))


def _darccot(x):
    return _rtd(math.atan2(1.0, x))


def _fix(value, mode):
    if math.isnan(value):
        return value
    value = value - mode * math.floor(value / mode)
    # tiny negative inputs round up to exactly ``mode``
    return 0.0 if value >= mode else value


def fix_angle(a):
    return _fix(a, 360.0)


def fix_hour(h):
    return _fix(h, 24.0)


def time_diff(time1, time2):
    return fix_hour(time2 - time1)


def julian_day(y, m, d):
    """Julian Day at 0h UT of a Gregorian calendar date."""
    if m <= 2:
        y -= 1
        m += 12
    a = math.floor(y / 100)
    b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + d + b - 1524.5


def julian_date(instant, lng):
    """Julian date of a UTC instant, shifted by ``lng / 360`` days towards local solar time."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    jd = J1970 + instant.timestamp() / 86400.0
    return jd - lng / 360.0


def sun_position(jd):
    """Return ``(declination, equation_of_time)`` for a Julian date.

    Declination is in degrees, the equation of time in hours.
    """
    d = jd - J2000
    g = fix_angle(357.529 + 0.98560028 * d)
    q = fix_angle(280.459 + 0.98564736 * d)
    L = fix_angle(q + 1.915 * _dsin(g) + 0.020 * _dsin(2 * g))
    e = 23.439 - 0.00000036 * d
    decl = _rtd(math.asin(_dsin(e) * _dsin(L)))
    ra = fix_hour(_rtd(math.atan2(_dcos(e) * _dsin(L), _dcos(L))) / 15.0)
    eqt = q / 15.0 - ra
    # q and ra can sit on opposite sides of the 0h wrap near the March equinox
    eqt = fix_hour(eqt + 12.0) - 12.0
    return decl, eqt


def mid_day(jd, time):
    _, eqt = sun_position(jd + time)
    return fix_hour(12 - eqt)


def sun_angle_time(angle, jd, time, lat):
    """Hour at which the sun reaches ``angle`` below the horizon.

    Angles above 90 are measured from the opposite horizon and give a morning
    time (sunrise is solved as ``180 - 0.833``), the rest an evening time.
    """
    decl, _ = sun_position(jd + time)
    noon = mid_day(jd, time)
    numerator = -_dsin(angle) - _dsin(decl) * _dsin(lat)
    denominator = _dcos(decl) * _dcos(lat)
    if denominator == 0:
        return math.nan
    x = numerator / denominator
    if not -1.0 <= x <= 1.0:
        logger.debug("Sun never reaches %.3f deg at lat %.4f (acos arg %.4f)", angle, lat, x)
        return math.nan
    t = _rtd(math.acos(x)) / 15.0
    return noon - t if angle > 90 else noon + t


def asr_time(step, jd, time, lat):
    # step 1: shadow equals object length plus noon shadow, step 2: twice the length
    decl, _ = sun_position(jd + time)
    angle = -_darccot(step + _dtan(abs(lat - decl)))
    return sun_angle_time(angle, jd, time, lat)
