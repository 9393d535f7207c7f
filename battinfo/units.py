"""Conversions between measurement units and the SI values used internally.

Every quantity is a plain float in its SI unit: energy in joules, power in
watts, electric charge in coulombs, current in amperes, potential in volts,
temperature in kelvin, time in seconds and ratios in the ``0..1`` range.
Multiplying a charge by a potential gives an energy, a current by a
potential gives a power, and an energy divided by a power gives a time.
"""

from __future__ import annotations

_SECONDS_PER_MINUTE = 60.0
_SECONDS_PER_HOUR = 3600.0
_SECONDS_PER_DAY = 86400.0
_ZERO_CELSIUS = 273.15


def milliampere_hour(value: float) -> float:
    """Electric charge in mAh, as coulombs."""
    return float(value) * _SECONDS_PER_HOUR / 1e3


def microampere_hour(value: float) -> float:
    """Electric charge in µAh, as coulombs."""
    return float(value) * _SECONDS_PER_HOUR / 1e6


def milliwatt_hour(value: float) -> float:
    """Energy in mWh, as joules."""
    return float(value) * _SECONDS_PER_HOUR / 1e3


def microwatt_hour(value: float) -> float:
    """Energy in µWh, as joules."""
    return float(value) * _SECONDS_PER_HOUR / 1e6


def milliampere(value: float) -> float:
    """Current in mA, as amperes."""
    return float(value) / 1e3


def microampere(value: float) -> float:
    """Current in µA, as amperes."""
    return float(value) / 1e6


def watt(value: float) -> float:
    """Power in W, as watts."""
    return float(value)


def milliwatt(value: float) -> float:
    """Power in mW, as watts."""
    return float(value) / 1e3


def microwatt(value: float) -> float:
    """Power in µW, as watts."""
    return float(value) / 1e6


def volt(value: float) -> float:
    """Potential in V, as volts."""
    return float(value)


def millivolt(value: float) -> float:
    """Potential in mV, as volts."""
    return float(value) / 1e3


def microvolt(value: float) -> float:
    """Potential in µV, as volts."""
    return float(value) / 1e6


def celsius(value: float) -> float:
    """Temperature in °C, as kelvin."""
    return float(value) + _ZERO_CELSIUS


def decikelvin(value: float) -> float:
    """Temperature in tenths of a kelvin, as kelvin."""
    return float(value) / 10.0


def percent(value: float) -> float:
    """Ratio in percent, as a fraction."""
    return float(value) / 100.0


def second(value: float) -> float:
    """Time in seconds."""
    return float(value)


def minute(value: float) -> float:
    """Time in minutes, as seconds."""
    return float(value) * _SECONDS_PER_MINUTE


def bounded(ratio: float) -> float:
    """Clamp a ratio into ``0..1``; NaN is passed through unchanged."""
    if ratio < 0.0:
        return 0.0
    if ratio > 1.0:
        return 1.0
    return ratio


def to_watt_hour(joules: float) -> float:
    """Energy in joules, as Wh."""
    return joules / _SECONDS_PER_HOUR


def to_milliwatt(watts: float) -> float:
    """Power in watts, as mW."""
    return watts * 1e3


def to_percent(ratio: float) -> float:
    """Fraction, as percent."""
    return ratio * 100.0


def to_celsius(kelvin: float) -> float:
    """Temperature in kelvin, as °C."""
    return kelvin - _ZERO_CELSIUS


def to_hours(seconds: float) -> float:
    """Time in seconds, as hours."""
    return seconds / _SECONDS_PER_HOUR


def to_days(seconds: float) -> float:
    """Time in seconds, as days."""
    return seconds / _SECONDS_PER_DAY