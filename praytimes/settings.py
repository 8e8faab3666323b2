from dataclasses import dataclass, field, replace

from .methods import (
    ANGLE,
    KEEP,
    MINUTES,
    AsrJuristic,
    CalculationMethod,
    HighLatMethod,
    MethodParams,
    TimeFormat,
    lookup_method,
    method_params,
)
from .models import TuningOffsets


def _enum_value(enum_cls, value, label):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    try:
        return enum_cls[str(value).strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown {label}: {value}") from None


@dataclass(frozen=True)
class Settings:
    """Fully resolved calculation settings.

    Instances never change; every ``with_*`` method and :meth:`tune` returns a
    new value, so one ``Settings`` can be shared by any number of computations.
    """

    method: CalculationMethod = CalculationMethod.EGYPT
    params: MethodParams = field(default_factory=lambda: method_params(CalculationMethod.EGYPT))
    asr_method: AsrJuristic = AsrJuristic.STANDARD
    high_lats: HighLatMethod = HighLatMethod.MIDNIGHT
    time_format: TimeFormat = TimeFormat.HOUR12
    dhuhr_minutes: float = 0.0
    offsets: TuningOffsets = field(default_factory=TuningOffsets)

    def __post_init__(self):
        # bad option values fail here, not in the middle of a computation
        object.__setattr__(self, "method", lookup_method(self.method))
        object.__setattr__(self, "asr_method", _enum_value(AsrJuristic, self.asr_method, "asr method"))
        object.__setattr__(self, "high_lats", _enum_value(HighLatMethod, self.high_lats, "high latitude method"))
        object.__setattr__(self, "time_format", _enum_value(TimeFormat, self.time_format, "time format"))
        if not isinstance(self.params, MethodParams):
            object.__setattr__(self, "params", MethodParams.from_values(self.params))

    @classmethod
    def for_method(cls, method=CalculationMethod.EGYPT, custom_params=None, **options):
        method = lookup_method(method)
        settings = cls(method=method, params=method_params(method), **options)
        if custom_params:
            settings = settings.with_custom_params(custom_params)
        return settings

    def with_custom_params(self, params):
        """Override up to five slots; ``-1`` keeps the current value. The method becomes CUSTOM."""
        return replace(self, method=CalculationMethod.CUSTOM, params=self.params.override(params))

    def with_fajr_angle(self, angle):
        return self.with_custom_params([angle, KEEP, KEEP, KEEP, KEEP])

    def with_maghrib_angle(self, angle):
        return self.with_custom_params([KEEP, ANGLE, angle, KEEP, KEEP])

    def with_maghrib_minutes(self, minutes):
        return self.with_custom_params([KEEP, MINUTES, minutes, KEEP, KEEP])

    def with_isha_angle(self, angle):
        return self.with_custom_params([KEEP, KEEP, KEEP, ANGLE, angle])

    def with_isha_minutes(self, minutes):
        return self.with_custom_params([KEEP, KEEP, KEEP, MINUTES, minutes])

    def tune(self, offsets):
        if not isinstance(offsets, TuningOffsets):
            if hasattr(offsets, "items"):
                offsets = TuningOffsets.from_mapping(offsets)
            else:
                offsets = TuningOffsets.from_sequence(offsets)
        return replace(self, offsets=offsets)

    def with_options(self, **options):
        return replace(self, **options)
