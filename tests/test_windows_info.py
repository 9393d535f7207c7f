import struct

import pytest

from battinfo.errors import BatteryError, ErrorKind
from battinfo.state import State, Technology
from battinfo.windows.info import BatteryInformation, BatteryStatus


def _info_bytes(capabilities=0, chemistry=b"LION", designed=50000, full=45000, cycles=0):
    return struct.pack(
        "<IB3s4s6I", capabilities, 0, b"\0\0\0", chemistry, designed, full, 1, 2, 3, cycles
    )


def test_information_from_bytes_round_trip():
    info = BatteryInformation.from_bytes(_info_bytes(designed=50000, full=45000, cycles=12))
    assert info.designed_capacity == 50000
    assert info.full_charged_capacity == 45000
    assert info.cycle_count() == 12
    assert info.chemistry == b"LION"


def test_information_technology_from_chemistry():
    assert BatteryInformation.from_bytes(_info_bytes(chemistry=b"LION")).technology() is Technology.LITHIUM_ION
    assert BatteryInformation.from_bytes(_info_bytes(chemistry=b"PbAc")).technology() is Technology.LEAD_ACID
    assert BatteryInformation.from_bytes(_info_bytes(chemistry=b"Pb\0\0")).technology() is Technology.UNKNOWN


def test_information_capability_flags():
    relative = BatteryInformation(capabilities=0x4000_0000)
    system = BatteryInformation(capabilities=0x8000_0000)
    assert relative.is_relative() and not relative.is_system_battery()
    assert system.is_system_battery() and not system.is_relative()


def test_information_zero_cycles_is_unknown():
    assert BatteryInformation(raw_cycle_count=0).cycle_count() is None


def test_information_short_buffer_raises():
    with pytest.raises(BatteryError) as excinfo:
        BatteryInformation.from_bytes(b"\0" * 10)
    assert excinfo.value.kind is ErrorKind.INVALID_DATA


@pytest.mark.parametrize(
    ("power_state", "expected"),
    [
        (0x4, State.CHARGING),
        (0x4 | 0x1, State.CHARGING),
        (0x8, State.EMPTY),
        (0x2, State.DISCHARGING),
        (0x1, State.FULL),
        (0x0, State.UNKNOWN),
    ],
)
def test_status_state(power_state, expected):
    assert BatteryStatus(power_state=power_state).state() is expected


def test_status_unknown_values():
    status = BatteryStatus(raw_capacity=0xFFFF_FFFF, raw_voltage=0xFFFF_FFFF, raw_rate=-0x8000_0000)
    assert status.capacity() is None
    assert status.voltage() is None
    assert status.rate() is None


def test_status_from_bytes_round_trip_and_rate_magnitude():
    status = BatteryStatus.from_bytes(struct.pack("<IIIi", 0x2, 30000, 11800, -1500))
    assert status.state() is State.DISCHARGING
    assert status.capacity() == 30000
    assert status.voltage() == 11800
    assert status.rate() == 1500


def test_status_short_buffer_raises():
    with pytest.raises(BatteryError):
        BatteryStatus.from_bytes(b"\0" * 4)