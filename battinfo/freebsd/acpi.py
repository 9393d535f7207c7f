"""ACPI battery structures and the ``/dev/acpi`` control device."""

from __future__ import annotations

import dataclasses
import enum
import os
import struct
from os import PathLike
from typing import Union

from battinfo.errors import BatteryError, ErrorKind, from_os_error, invalid_data
from battinfo.state import State, Technology

try:
    import fcntl
except ImportError:  # pragma: no cover - platforms without ioctl
    fcntl = None  # type: ignore[assignment]

StrPath = Union[str, "PathLike[str]"]

_MAXSTRLEN = 32

_STAT_FULL = 0x0000
_STAT_DISCHARGING = 0x0001
_STAT_CHARGING = 0x0002
_STAT_CRITICAL = 0x0004
_STAT_INVALID = _STAT_DISCHARGING | _STAT_CHARGING
_STAT_BST_MASK = _STAT_INVALID | _STAT_CRITICAL
_STAT_NOT_PRESENT = _STAT_BST_MASK

_BATT_UNKNOWN = 0xFFFF_FFFF

_BIF = struct.Struct(f"=9I{_MAXSTRLEN}s{_MAXSTRLEN}s{_MAXSTRLEN}s{_MAXSTRLEN}s")
_BST = struct.Struct("=4I")
_INT = struct.Struct("=i")
_ARG_SIZE = max(_INT.size, _BIF.size, _BST.size)

_IOC_OUT = 0x4000_0000
_IOC_IN = 0x8000_0000
_IOC_INOUT = _IOC_IN | _IOC_OUT
_IOCPARM_MASK = 0x1FFF


def _ioc(direction: int, group: str, number: int, length: int) -> int:
    return direction | ((length & _IOCPARM_MASK) << 16) | (ord(group) << 8) | number


ACPIIO_BATT_GET_UNITS = _ioc(_IOC_OUT, "B", 0x01, _INT.size)
ACPIIO_BATT_GET_BIF = _ioc(_IOC_INOUT, "B", 0x10, _ARG_SIZE)
ACPIIO_BATT_GET_BST = _ioc(_IOC_INOUT, "B", 0x11, _ARG_SIZE)


def _c_string(raw: bytes) -> str | None:
    """Text up to the first NUL; None when there is no terminator."""
    end = raw.find(b"\0")
    if end < 0:
        return None
    return raw[:end].decode("utf-8", errors="replace")


class Units(enum.Enum):
    """Units of the capacity and rate values in battery information."""

    MILLI_WATTS = 0
    MILLI_AMPERES = 1


@dataclasses.dataclass(frozen=True)
class AcpiBif:
    """Static battery information (``struct acpi_bif``).

    Capacities are in mWh or mAh and rates in mW or mA, depending on
    :attr:`units`; the design voltage is always in mV.
    """

    units_code: int = 0
    design_capacity: int = 0
    last_full_capacity: int = 0
    technology_code: int = 0
    design_voltage: int = 0
    warn_capacity: int = 0
    low_capacity: int = 0
    granularity_1: int = 0
    granularity_2: int = 0
    raw_model: bytes = b""
    raw_serial: bytes = b""
    raw_type: bytes = b""
    raw_oem: bytes = b""

    @classmethod
    def from_bytes(cls, data: bytes) -> AcpiBif:
        """Decode the structure from the start of a native-order buffer."""
        if len(data) < _BIF.size:
            raise invalid_data("Buffer is too short for the bif struct")
        return cls(*_BIF.unpack_from(data))

    def is_valid(self) -> bool:
        """Information is usable only with a known last full capacity."""
        return self.last_full_capacity != 0

    @property
    def units(self) -> Units:
        """Units of the capacity and rate values."""
        try:
            return Units(self.units_code)
        except ValueError:
            raise invalid_data("Unknown units from acpi_bif") from None

    @property
    def model(self) -> str | None:
        return _c_string(self.raw_model)

    @property
    def serial(self) -> str | None:
        return _c_string(self.raw_serial)

    @property
    def type_name(self) -> str | None:
        return _c_string(self.raw_type)

    @property
    def oem(self) -> str | None:
        return _c_string(self.raw_oem)

    def technology(self) -> Technology:
        """Chemistry named by the type string."""
        name = self.type_name
        if name is None:
            return Technology.UNKNOWN
        return Technology.parse(name)


@dataclasses.dataclass(frozen=True)
class AcpiBst:
    """Current battery status (``struct acpi_bst``)."""

    raw_state: int = 0
    rate: int = 0
    capacity: int = 0
    voltage: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> AcpiBst:
        """Decode the structure from the start of a native-order buffer."""
        if len(data) < _BST.size:
            raise invalid_data("Buffer is too short for the bst struct")
        return cls(*_BST.unpack_from(data))

    def is_valid(self) -> bool:
        """Status is usable when the battery is present and readings are known."""
        return (
            self.raw_state != _STAT_NOT_PRESENT
            and self.capacity != _BATT_UNKNOWN
            and self.voltage != _BATT_UNKNOWN
        )

    def state(self) -> State:
        """Charging state decoded from the status bits."""
        if self.raw_state == _STAT_FULL:
            return State.FULL
        if self.raw_state & _STAT_DISCHARGING:
            return State.DISCHARGING
        if self.raw_state & _STAT_CHARGING:
            return State.CHARGING
        # A critical battery may in fact be charging; treat it as draining.
        if self.raw_state & _STAT_CRITICAL:
            return State.DISCHARGING
        return State.UNKNOWN


class AcpiDevice:
    """Open handle to the ACPI control device."""

    def __init__(self, path: StrPath = "/dev/acpi") -> None:
        try:
            self._fd = os.open(path, os.O_RDONLY)
        except OSError as error:
            raise from_os_error(error) from error

    def fileno(self) -> int:
        return self._fd

    def _ioctl(self, request: int, buffer: bytearray) -> None:
        if fcntl is None:
            raise BatteryError("Unsupported operation", ErrorKind.OTHER)
        try:
            fcntl.ioctl(self._fd, request, buffer, True)
        except OSError as error:
            raise from_os_error(error) from error

    def count(self) -> int:
        """Number of battery units known to ACPI."""
        buffer = bytearray(_INT.size)
        self._ioctl(ACPIIO_BATT_GET_UNITS, buffer)
        return _INT.unpack_from(buffer)[0]

    def _query(self, request: int, unit: int) -> bytearray:
        buffer = bytearray(_ARG_SIZE)
        _INT.pack_into(buffer, 0, unit)
        self._ioctl(request, buffer)
        return buffer

    def bif(self, unit: int) -> AcpiBif | None:
        """Battery information for a unit; None when the kernel marks it invalid."""
        info = AcpiBif.from_bytes(self._query(ACPIIO_BATT_GET_BIF, unit))
        return info if info.is_valid() else None

    def bst(self, unit: int) -> AcpiBst | None:
        """Battery status for a unit; None when the kernel marks it invalid."""
        info = AcpiBst.from_bytes(self._query(ACPIIO_BATT_GET_BST, unit))
        return info if info.is_valid() else None

    def close(self) -> None:
        """Release the device handle; later calls do nothing."""
        if self._fd >= 0:
            os.close(self._fd)
            self._fd = -1

    def __enter__(self) -> AcpiDevice:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"AcpiDevice(fd={self._fd})"