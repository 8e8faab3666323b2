import logging
import math

from .astro import time_diff
from .methods import ANGLE, HighLatMethod

logger = logging.getLogger(__name__)

# fallback angles when Maghrib/Isha are given in minutes
ISHA_FALLBACK_ANGLE = 18.0
MAGHRIB_FALLBACK_ANGLE = 4.0


def night_portion(angle, method):
    method = HighLatMethod(method)
    if method is HighLatMethod.MIDNIGHT:
        return 0.5
    if method is HighLatMethod.ONE_SEVENTH:
        return 1.0 / 7.0
    if method is HighLatMethod.ANGLE_BASED:
        return angle / 60.0
    return 0.0


def adjust_high_lats(times, params, method):
    """Bound Fajr, Maghrib and Isha by a portion of the night.

    Each of them is replaced when it is undefined or lies further from its
    reference (sunrise for Fajr, sunset for the others) than the allowed
    portion of the sunset-to-sunrise interval.
    """
    method = HighLatMethod(method)
    night = time_diff(times.sunset, times.sunrise)
    changes = {}

    fajr_diff = night_portion(params.fajr_angle, method) * night
    if math.isnan(times.fajr) or time_diff(times.fajr, times.sunrise) > fajr_diff:
        changes["fajr"] = times.sunrise - fajr_diff

    isha_angle = params.isha_value if params.isha_mode == ANGLE else ISHA_FALLBACK_ANGLE
    isha_diff = night_portion(isha_angle, method) * night
    if math.isnan(times.isha) or time_diff(times.sunset, times.isha) > isha_diff:
        changes["isha"] = times.sunset + isha_diff

    maghrib_angle = params.maghrib_value if params.maghrib_mode == ANGLE else MAGHRIB_FALLBACK_ANGLE
    maghrib_diff = night_portion(maghrib_angle, method) * night
    if math.isnan(times.maghrib) or time_diff(times.sunset, times.maghrib) > maghrib_diff:
        changes["maghrib"] = times.sunset + maghrib_diff

    for name, value in changes.items():
        logger.debug("High-latitude %s: %s %.4f -> %.4f", method.value, name, getattr(times, name), value)
    return times.replace(**changes)
