import logging
import math
from datetime import datetime, timezone

import pytest

from praytimes.astro import (
    asr_time,
    fix_angle,
    fix_hour,
    julian_date,
    julian_day,
    mid_day,
    sun_angle_time,
    sun_position,
    time_diff,
)

MECCA_LAT = 21.4225
MECCA_LNG = 39.8262


@pytest.mark.parametrize("value, expected", [
    (0, 0),
    (-30, 330),
    (725, 5),
    (360, 0),
    (-720.5, 359.5),
])
def test_fix_angle(value, expected):
    assert fix_angle(value) == pytest.approx(expected)


@pytest.mark.parametrize("value, expected", [
    (0, 0),
    (-1, 23),
    (25.5, 1.5),
    (48, 0),
    (-49.25, 22.75),
])
def test_fix_hour(value, expected):
    assert fix_hour(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", [-1e-17, -1e-300, 1e12 + 0.3, -7.2e9, 23.999999999])
def test_normalization_stays_in_range(value):
    assert 0 <= fix_hour(value) < 24
    assert 0 <= fix_angle(value) < 360


def test_time_diff_wraps_over_midnight():
    assert time_diff(22.0, 4.0) == pytest.approx(6.0)
    assert time_diff(4.0, 22.0) == pytest.approx(18.0)


def test_julian_day_known_dates():
    assert julian_day(2000, 1, 1) == 2451544.5
    assert julian_day(2024, 1, 1) == 2460310.5
    assert julian_day(1970, 1, 1) == 2440587.5


def test_julian_date_matches_calendar_day_at_midnight():
    instant = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert julian_date(instant, 0) == julian_day(2024, 1, 1)


def test_julian_date_longitude_shift():
    instant = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    assert julian_date(instant, 0) == pytest.approx(2451545.0)
    assert julian_date(instant, 90) == pytest.approx(2451545.0 - 0.25)
    assert julian_date(instant, -180) == pytest.approx(2451545.0 + 0.5)


def test_julian_date_naive_instant_is_utc():
    naive = datetime(2024, 3, 21, 6, 30)
    aware = datetime(2024, 3, 21, 6, 30, tzinfo=timezone.utc)
    assert julian_date(naive, MECCA_LNG) == julian_date(aware, MECCA_LNG)


def test_julian_date_is_monotonic():
    earlier = julian_date(datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc), 10)
    later = julian_date(datetime(2024, 1, 1, 0, 1, tzinfo=timezone.utc), 10)
    assert later - earlier == pytest.approx(1 / 1440, abs=1e-8)


def test_sun_position_at_j2000():
    decl, eqt = sun_position(2451545.0)
    assert decl == pytest.approx(-23.0335, abs=1e-3)
    assert eqt == pytest.approx(-0.05505, abs=1e-4)


def test_sun_position_june_solstice():
    decl, _ = sun_position(2460482.5)
    assert decl == pytest.approx(23.4357, abs=1e-3)


def test_equation_of_time_does_not_wrap_at_march_equinox():
    decl, eqt = sun_position(2460390.5)
    assert decl == pytest.approx(0.345, abs=1e-3)
    assert abs(eqt) < 0.26


def test_sun_position_ranges_over_a_decade():
    jd = 2451545.0
    while jd < 2451545.0 + 3653:
        decl, eqt = sun_position(jd)
        assert -23.44 <= decl <= 23.44
        assert -0.28 <= eqt <= 0.28
        jd += 3.5


def test_mid_day_near_noon():
    jd = julian_date(datetime(2024, 1, 1, tzinfo=timezone.utc), MECCA_LNG)
    noon = mid_day(jd, 0.5)
    # apparent noon on January 1st runs a few minutes late
    assert 12.0 < noon < 12.1


def test_sunrise_before_sunset():
    jd = julian_date(datetime(2024, 1, 1, tzinfo=timezone.utc), MECCA_LNG)
    sunrise = sun_angle_time(180 - 0.833, jd, 6 / 24, MECCA_LAT)
    sunset = sun_angle_time(0.833, jd, 18 / 24, MECCA_LAT)
    assert sunrise < mid_day(jd, 0.5) < sunset
    assert sunset - sunrise == pytest.approx(10.855, abs=0.01)


def test_unreachable_angle_is_nan(caplog):
    caplog.set_level(logging.DEBUG, logger="praytimes.astro")
    jd = julian_date(datetime(2024, 6, 21, tzinfo=timezone.utc), 18.9553)
    assert math.isnan(sun_angle_time(0.833, jd, 18 / 24, 69.6492))
    assert math.isnan(sun_angle_time(180 - 18, jd, 5 / 24, 59.9139))
    assert "Sun never reaches" in caplog.text


def test_nan_input_stays_nan():
    assert math.isnan(sun_angle_time(18, math.nan, 0.75, MECCA_LAT))


def test_hanafi_asr_is_later():
    jd = julian_date(datetime(2024, 1, 1, tzinfo=timezone.utc), MECCA_LNG)
    standard = asr_time(1, jd, 13 / 24, MECCA_LAT)
    hanafi = asr_time(2, jd, 13 / 24, MECCA_LAT)
    assert mid_day(jd, 0.5) < standard < hanafi
    assert hanafi - standard == pytest.approx(0.7535, abs=1e-3)


def test_normalization_passes_nan_through():
    assert math.isnan(fix_hour(math.nan))
    assert math.isnan(fix_angle(math.nan))
    assert math.isnan(time_diff(math.nan, 6.0))
    assert math.isnan(time_diff(18.0, math.nan))


def test_sun_position_of_nan_is_nan():
    decl, eqt = sun_position(math.nan)
    assert math.isnan(decl)
    assert math.isnan(eqt)
