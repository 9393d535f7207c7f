"""Collecting one snapshot of battery readings from a sysfs directory."""

from __future__ import annotations

import dataclasses
import math
from os import PathLike
from pathlib import Path
from typing import Any, Callable, TypeVar, Union

from battinfo.errors import BatteryError, not_found
from battinfo.linux import fs
from battinfo.state import State, Technology
from battinfo.units import (
    bounded,
    celsius,
    microampere,
    microwatt,
    percent,
    to_milliwatt,
    watt,
)

_T = TypeVar("_T")
StrPath = Union[str, "PathLike[str]"]

_F32_EPSILON = 1.1920929e-07
_U32_MAX = 0xFFFF_FFFF


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _parse_u32(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError(f"unsigned integer out of range: {text!r}")
    return value


@dataclasses.dataclass(frozen=True)
class InstantData:
    """Readings that may change between refreshes, in SI units."""

    state_of_health: float
    state_of_charge: float
    energy: float
    energy_full: float
    energy_full_design: float
    energy_rate: float
    voltage: float
    state: State
    temperature: float | None
    cycle_count: int | None


class DataBuilder:
    """Derives battery readings from the attribute files of one supply.

    Intermediate values are computed once and reused; failures are not
    remembered, so a later call tries again.
    """

    def __init__(self, root: StrPath) -> None:
        self._root = Path(root)
        self._cache: dict[str, Any] = {}

    def _cached(self, key: str, compute: Callable[[], _T]) -> _T:
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def _first(self, reader: Callable[[Path], float | None], names: tuple[str, ...]) -> float | None:
        """First readable value among the files; read errors are skipped."""
        for name in names:
            try:
                value = reader(self._root / name)
            except BatteryError:
                continue
            if value is not None:
                return value
        return None

    def collect(self) -> InstantData:
        """Read everything that makes up one snapshot."""
        return InstantData(
            state_of_charge=self._state_of_charge(),
            state_of_health=self.state_of_health(),
            energy=self._energy(),
            energy_full=self._energy_full(),
            energy_full_design=self._energy_full_design(),
            energy_rate=self._energy_rate(),
            voltage=self._voltage(),
            state=self._state(),
            temperature=self._temperature(),
            cycle_count=self._cycle_count(),
        )

    def _design_voltage(self) -> float:
        def compute() -> float:
            value = self._first(
                fs.voltage,
                ("voltage_max_design", "voltage_min_design", "voltage_present", "voltage_now"),
            )
            if value is None:
                raise not_found("entity not found")
            return value

        return self._cached("design_voltage", compute)

    def _energy_now(self) -> float | None:
        return self._first(fs.energy, ("energy_now", "energy_avg"))

    def _charge_now(self) -> float | None:
        return self._first(fs.charge, ("charge_now", "charge_avg"))

    def _charge_full(self) -> float:
        value = self._first(fs.charge, ("charge_full", "charge_full_design"))
        return 0.0 if value is None else value

    def state_of_health(self) -> float:
        """Full energy relative to design energy, in ``0..1``; 1.0 when unknown."""

        def compute() -> float:
            energy_full = self._energy_full()
            if energy_full != 0.0:
                return bounded(_divide(energy_full, self._energy_full_design()))
            return percent(100.0)

        return self._cached("state_of_health", compute)

    def _energy(self) -> float:
        def compute() -> float:
            energy = self._energy_now()
            if energy is not None:
                return energy
            charge = self._charge_now()
            if charge is not None:
                return charge * self._design_voltage()
            try:
                capacity = fs.get_value(self._root / "capacity", float)
            except BatteryError:
                capacity = None
            if capacity is not None:
                return self._energy_full() * bounded(percent(capacity))
            raise not_found("Unable to calculate device energy value")

        return self._cached("energy", compute)

    def _energy_full(self) -> float:
        def compute() -> float:
            value = fs.energy(self._root / "energy_full")
            if value is not None:
                return value
            charge = fs.charge(self._root / "charge_full")
            if charge is not None:
                return charge * self._design_voltage()
            return self._energy_full_design()

        return self._cached("energy_full", compute)

    def _energy_full_design(self) -> float:
        def compute() -> float:
            value = fs.energy(self._root / "energy_full_design")
            if value is not None:
                return value
            charge = fs.charge(self._root / "charge_full_design")
            if charge is not None:
                return charge * self._design_voltage()
            # Both design files may be missing; fall back to zero like upower.
            return 0.0

        return self._cached("energy_full_design", compute)

    def _energy_rate(self) -> float:
        def compute() -> float:
            value = fs.power(self._root / "power_now")
            if value is None:
                current_now = fs.get_value(self._root / "current_now", float)
                if current_now is not None:
                    # With charge files present current_now is in µA;
                    # in the legacy energy-only case it is power in µW.
                    if self._charge_full() != 0.0:
                        value = microampere(current_now) * self._design_voltage()
                    else:
                        value = microwatt(current_now)
            if value is None:
                return microwatt(0.0)
            # Over 100 W is not plausible.
            if value > 100.0:
                value = watt(0.0)
            # Nearly empty batteries may report massive rates.
            if to_milliwatt(value) * 1e3 < 10.0:
                value = watt(0.0)
            # ACPI reports the all-ones value when the rate is unknown.
            if abs(value - 65535.0) < _F32_EPSILON:
                value = watt(0.0)
            return value

        return self._cached("energy_rate", compute)

    def _state_of_charge(self) -> float:
        def compute() -> float:
            capacity = fs.get_value(self._root / "capacity", float)
            if capacity is not None:
                return bounded(percent(capacity))
            energy_full = self._energy_full()
            if math.copysign(1.0, energy_full) > 0.0:
                return _divide(self._energy(), energy_full)
            return percent(0.0)

        return self._cached("state_of_charge", compute)

    def _state(self) -> State:
        def compute() -> State:
            state = fs.get_value(self._root / "status", State.parse)
            return State.UNKNOWN if state is None else state

        return self._cached("state", compute)

    def _voltage(self) -> float:
        value = self._first(fs.voltage, ("voltage_now", "voltage_avg"))
        if value is None:
            raise not_found("Unable to calculate device voltage value")
        return value

    def _temperature(self) -> float | None:
        value = fs.get_value(self._root / "temp", float)
        if value is None:
            return None
        return celsius(value / 10.0)

    def _cycle_count(self) -> int | None:
        # Some drivers write zero even for old batteries; treat it as unknown.
        cycles = fs.get_value(self._root / "cycle_count", _parse_u32)
        return cycles or None

    def manufacturer(self) -> str | None:
        """Manufacturer name, if the supply reports one."""
        return fs.get_string(self._root / "manufacturer")

    def model(self) -> str | None:
        """Model name, if the supply reports one."""
        return fs.get_string(self._root / "model_name")

    def serial_number(self) -> str | None:
        """Serial number, if the supply reports one."""
        return fs.get_string(self._root / "serial_number")

    def technology(self) -> Technology:
        """Battery chemistry; ``UNKNOWN`` when not reported."""
        technology = fs.get_value(self._root / "technology", Technology.parse)
        return Technology.UNKNOWN if technology is None else technology