import struct

import pytest

from battinfo.errors import BatteryError, ErrorKind
from battinfo.freebsd.acpi import AcpiBif, AcpiBst, AcpiDevice, Units
from battinfo.state import State, Technology

BIF_FORMAT = "=9I32s32s32s32s"


def pack_bif(units=0, dcap=50000, lfcap=45000, dvol=11100, model=b"MODEL-1\0", serial=b"SN-TEST\0",
             type_=b"LION\0", oem=b"ACME\0"):
    return struct.pack(BIF_FORMAT, units, dcap, lfcap, 1, dvol, 0, 0, 0, 0, model, serial, type_, oem)


def test_bif_round_trip():
    bif = AcpiBif.from_bytes(pack_bif())
    assert bif.units is Units.MILLI_WATTS
    assert bif.design_capacity == 50000
    assert bif.last_full_capacity == 45000
    assert bif.design_voltage == 11100
    assert bif.model == "MODEL-1"
    assert bif.serial == "SN-TEST"
    assert bif.oem == "ACME"
    assert bif.type_name == "LION"
    assert bif.technology() is Technology.LITHIUM_ION


def test_bif_milliampere_units():
    assert AcpiBif.from_bytes(pack_bif(units=1)).units is Units.MILLI_AMPERES


def test_bif_unknown_units_raise():
    bif = AcpiBif.from_bytes(pack_bif(units=7))
    assert bif.is_valid()
    assert bif.design_capacity == 50000
    with pytest.raises(BatteryError) as info:
        getattr(bif, "units")
    assert info.value.kind is ErrorKind.INVALID_DATA


def test_bif_validity_depends_on_last_full_capacity():
    assert AcpiBif.from_bytes(pack_bif()).is_valid()
    assert not AcpiBif.from_bytes(pack_bif(lfcap=0)).is_valid()


def test_bif_string_without_terminator_is_missing():
    bif = AcpiBif.from_bytes(pack_bif(model=b"X" * 32, type_=b"Z" * 32))
    assert bif.model is None
    assert bif.technology() is Technology.UNKNOWN


def test_bif_short_buffer_rejected():
    with pytest.raises(BatteryError) as info:
        AcpiBif.from_bytes(b"\0" * 10)
    assert info.value.kind is ErrorKind.INVALID_DATA


def test_bst_round_trip_from_union_sized_buffer():
    data = struct.pack("=4I", 2, 1500, 30000, 12000) + b"\0" * 148
    bst = AcpiBst.from_bytes(data)
    assert (bst.raw_state, bst.rate, bst.capacity, bst.voltage) == (2, 1500, 30000, 12000)
    assert bst.state() is State.CHARGING


@pytest.mark.parametrize(
    "raw_state, expected",
    [
        (0, State.FULL),
        (1, State.DISCHARGING),
        (2, State.CHARGING),
        (3, State.DISCHARGING),
        (4, State.DISCHARGING),
        (6, State.CHARGING),
        (8, State.UNKNOWN),
    ],
)
def test_bst_state(raw_state, expected):
    assert AcpiBst(raw_state=raw_state).state() is expected


def test_bst_validity():
    assert AcpiBst(raw_state=1, capacity=100, voltage=100).is_valid()
    assert not AcpiBst(raw_state=7, capacity=100, voltage=100).is_valid()
    assert not AcpiBst(raw_state=1, capacity=0xFFFFFFFF, voltage=100).is_valid()
    assert not AcpiBst(raw_state=1, capacity=100, voltage=0xFFFFFFFF).is_valid()


def test_opening_missing_device_fails(tmp_path):
    with pytest.raises(BatteryError) as info:
        AcpiDevice(tmp_path / "acpi")
    assert info.value.kind is ErrorKind.NOT_FOUND


def test_ioctl_on_regular_file_fails(tmp_path):
    path = tmp_path / "acpi"
    path.write_bytes(b"")
    with AcpiDevice(path) as device:
        with pytest.raises(BatteryError):
            device.count()
        with pytest.raises(BatteryError):
            device.bif(0)


def test_close_marks_device_closed(tmp_path):
    path = tmp_path / "acpi"
    path.write_bytes(b"")
    device = AcpiDevice(path)
    device.close()
    device.close()
    assert device.fileno() == -1