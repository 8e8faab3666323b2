import logging

from .astro import asr_time, julian_date, mid_day, sun_angle_time
from .highlat import adjust_high_lats
from .methods import MINUTES, AsrJuristic, HighLatMethod, TimeFormat
from .models import DayTimes, PrayerTimeResult
from .render import format_time
from .settings import Settings

logger = logging.getLogger(__name__)

# sun's apparent radius plus refraction at the horizon
RISE_SET_ANGLE = 0.833

# initial guesses, in hours, for each event of the day
DEFAULT_TIMES = DayTimes(fajr=5, sunrise=6, dhuhr=12, asr=13, sunset=18, maghrib=18, isha=18)


def compute_raw_times(jd, lat, settings, times=DEFAULT_TIMES):
    portions = DayTimes(*(t / 24.0 for t in times.as_list()))
    params = settings.params
    step = AsrJuristic(settings.asr_method).step
    return DayTimes(
        fajr=sun_angle_time(180 - params.fajr_angle, jd, portions.fajr, lat),
        sunrise=sun_angle_time(180 - RISE_SET_ANGLE, jd, portions.sunrise, lat),
        dhuhr=mid_day(jd, portions.dhuhr),
        asr=asr_time(step, jd, portions.asr, lat),
        sunset=sun_angle_time(RISE_SET_ANGLE, jd, portions.sunset, lat),
        maghrib=sun_angle_time(params.maghrib_value, jd, portions.maghrib, lat),
        isha=sun_angle_time(params.isha_value, jd, portions.isha, lat),
    )


def adjust_times(times, moment, settings):
    params = settings.params
    times = times.shift(moment.timezone - moment.coords.lng / 15.0)
    times = times.replace(dhuhr=times.dhuhr + settings.dhuhr_minutes / 60.0)

    if params.maghrib_mode == MINUTES:
        # the value is added as is, unlike Isha below
        times = times.replace(maghrib=times.sunset + params.maghrib_value)
    if params.isha_mode == MINUTES:
        times = times.replace(isha=times.maghrib + params.isha_value / 60.0)

    high_lats = HighLatMethod(settings.high_lats)
    if high_lats is not HighLatMethod.NONE:
        times = adjust_high_lats(times, params, high_lats)
    return times


def tune_times(times, offsets):
    return DayTimes(*(t + off / 60.0 for t, off in zip(times.as_list(), offsets.as_list())))


def compute_day_times(moment, settings):
    jd = julian_date(moment.instant, moment.coords.lng)
    times = compute_raw_times(jd, moment.coords.lat, settings)
    times = adjust_times(times, moment, settings)
    times = tune_times(times, settings.offsets)
    undefined = times.undefined()
    if undefined:
        logger.debug("Unresolved times at %s: %s", moment.coords, ", ".join(undefined))
    return times


def compute_times(moment, settings, time_format=None):
    style = TimeFormat(time_format or settings.time_format)
    times = compute_day_times(moment, settings)
    return PrayerTimeResult(
        fajr=format_time(times.fajr, style),
        sunrise=format_time(times.sunrise, style),
        dhuhr=format_time(times.dhuhr, style),
        asr=format_time(times.asr, style),
        maghrib=format_time(times.maghrib, style),
        isha=format_time(times.isha, style),
    )


class PrayTimes:
    def __init__(self, settings=None):
        self.settings = settings or Settings()

    def get_times(self, moment):
        return compute_times(moment, self.settings)

    def get_raw_times(self, moment):
        return compute_times(moment, self.settings, TimeFormat.FLOAT)

    def describe(self, moment):
        return str(self.get_times(moment))
