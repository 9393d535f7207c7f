"""Battery information and status structures returned by battery IOCTLs."""

from __future__ import annotations

import dataclasses
import struct

from battinfo.errors import invalid_data
from battinfo.state import State, Technology

BATTERY_CAPACITY_RELATIVE = 0x4000_0000
BATTERY_SYSTEM_BATTERY = 0x8000_0000

BATTERY_UNKNOWN_CAPACITY = 0xFFFF_FFFF
BATTERY_UNKNOWN_VOLTAGE = 0xFFFF_FFFF
BATTERY_UNKNOWN_RATE = -0x8000_0000

BATTERY_POWER_ON_LINE = 0x0000_0001
BATTERY_DISCHARGING = 0x0000_0002
BATTERY_CHARGING = 0x0000_0004
BATTERY_CRITICAL = 0x0000_0008

_INFORMATION = struct.Struct("<IB3s4s6I")
_STATUS = struct.Struct("<IIIi")


@dataclasses.dataclass(frozen=True)
class BatteryInformation:
    """``BATTERY_INFORMATION``: static battery data; capacities in mWh."""

    capabilities: int = 0
    technology_code: int = 0
    reserved: bytes = b"\0\0\0"
    chemistry: bytes = b"\0\0\0\0"
    designed_capacity: int = 0
    full_charged_capacity: int = 0
    default_alert1: int = 0
    default_alert2: int = 0
    critical_bias: int = 0
    raw_cycle_count: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> BatteryInformation:
        """Decode the structure from the start of a little-endian buffer."""
        if len(data) < _INFORMATION.size:
            raise invalid_data("Buffer is too short for the battery information struct")
        return cls(*_INFORMATION.unpack_from(data))

    def is_system_battery(self) -> bool:
        """Whether the battery powers the system."""
        return bool(self.capabilities & BATTERY_SYSTEM_BATTERY)

    def is_relative(self) -> bool:
        """Whether capacities are relative rather than in mWh."""
        return bool(self.capabilities & BATTERY_CAPACITY_RELATIVE)

    def technology(self) -> Technology:
        """Chemistry named by the four chemistry bytes, taken as they are."""
        return Technology.parse(self.chemistry.decode("utf-8", errors="replace"))

    def cycle_count(self) -> int | None:
        """Number of charge cycles; None when the battery reports zero."""
        return self.raw_cycle_count or None


@dataclasses.dataclass(frozen=True)
class BatteryStatus:
    """``BATTERY_STATUS``: current state, capacity (mWh), voltage (mV), rate (mW)."""

    power_state: int = 0
    raw_capacity: int = 0
    raw_voltage: int = 0
    raw_rate: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> BatteryStatus:
        """Decode the structure from the start of a little-endian buffer."""
        if len(data) < _STATUS.size:
            raise invalid_data("Buffer is too short for the battery status struct")
        return cls(*_STATUS.unpack_from(data))

    def is_charging(self) -> bool:
        return bool(self.power_state & BATTERY_CHARGING)

    def is_critical(self) -> bool:
        return bool(self.power_state & BATTERY_CRITICAL)

    def is_discharging(self) -> bool:
        return bool(self.power_state & BATTERY_DISCHARGING)

    def is_power_on_line(self) -> bool:
        return bool(self.power_state & BATTERY_POWER_ON_LINE)

    def state(self) -> State:
        """Charging state decoded from the power-state bits."""
        if self.is_charging():
            return State.CHARGING
        if self.is_critical():
            return State.EMPTY
        if self.is_discharging():
            return State.DISCHARGING
        if self.is_power_on_line():
            return State.FULL
        return State.UNKNOWN

    def voltage(self) -> int | None:
        """Voltage in mV, or None when unknown."""
        if self.raw_voltage == BATTERY_UNKNOWN_VOLTAGE:
            return None
        return self.raw_voltage

    def capacity(self) -> int | None:
        """Remaining capacity in mWh, or None when unknown."""
        if self.raw_capacity == BATTERY_UNKNOWN_CAPACITY:
            return None
        return self.raw_capacity

    def rate(self) -> int | None:
        """Magnitude of the charge or discharge rate in mW, or None when unknown."""
        if self.raw_rate == BATTERY_UNKNOWN_RATE:
            return None
        return abs(self.raw_rate)