"""Reading power-supply attribute files from sysfs."""

from __future__ import annotations

import enum
import errno
from os import PathLike
from pathlib import Path
from typing import Callable, TypeVar, Union

from battinfo.errors import from_os_error, invalid_data
from battinfo.units import microampere_hour, microvolt, microwatt, microwatt_hour

_T = TypeVar("_T")
StrPath = Union[str, "PathLike[str]"]

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def _ascii_fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class SupplyType(enum.Enum):
    """Kind of power supply, from the ``type`` attribute."""

    BATTERY = "battery"
    MAINS = "mains"
    UPS = "ups"
    USB = "usb"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> SupplyType:
        """Parse a supply type ignoring ASCII case; unknown names give ``UNKNOWN``."""
        folded = _ascii_fold(text)
        for member in (cls.BATTERY, cls.MAINS, cls.UPS, cls.USB):
            if folded == member.value:
                return member
        return cls.UNKNOWN


class Scope(enum.Enum):
    """What a power supply powers, from the ``scope`` attribute.

    A supply without a ``scope`` attribute is assumed to power the system.
    """

    DEVICE = "device"
    SYSTEM = "system"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> Scope:
        """Parse a scope ignoring ASCII case; unknown names give ``UNKNOWN``."""
        folded = _ascii_fold(text)
        for member in cls:
            if folded == member.value:
                return member
        return cls.UNKNOWN


def get_string(path: StrPath) -> str | None:
    """Read an attribute file, dropping one trailing newline.

    Returns None when the file is missing or the driver refuses the read
    with ``ENODEV``; raises :class:`BatteryError` for any other failure.
    """
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        return None
    except OSError as error:
        # Some drivers create the files but fail every read with ENODEV.
        if error.errno == errno.ENODEV:
            return None
        raise from_os_error(error) from error
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as error:
        raise invalid_data("stream did not contain valid UTF-8") from error
    if content.startswith("\0"):
        raise invalid_data("invalid data")
    if content.endswith("\n"):
        content = content[:-1]
    return content


def get_value(path: StrPath, parser: Callable[[str], _T]) -> _T | None:
    """Read an attribute file and parse it; unparsable content gives None."""
    content = get_string(path)
    if content is None:
        return None
    try:
        return parser(content)
    except ValueError:
        return None


def energy(path: StrPath) -> float | None:
    """Read a µWh value from an ``energy_*`` file, as joules."""
    value = get_value(path, float)
    if value is None:
        return None
    return microwatt_hour(value)


def charge(path: StrPath) -> float | None:
    """Read a µAh value from a ``charge_*`` file, as coulombs."""
    value = get_value(path, float)
    if value is not None and value > 1.0:
        return microampere_hour(value)
    return None


def voltage(path: StrPath) -> float | None:
    """Read a µV value from a ``voltage_*`` file, as volts."""
    value = get_value(path, float)
    if value is not None and value > 1.0:
        return microvolt(value)
    return None


def power(path: StrPath) -> float | None:
    """Read a µW value from a ``power_*`` file, as watts."""
    value = get_value(path, float)
    if value is not None and value > 10_000.0:
        return microwatt(value)
    return None


def supply_type(path: StrPath) -> SupplyType:
    """Read the ``type`` file; a missing file gives ``UNKNOWN``."""
    value = get_value(path, SupplyType.parse)
    return SupplyType.UNKNOWN if value is None else value


def scope(path: StrPath) -> Scope:
    """Read the ``scope`` file; a missing file gives ``SYSTEM``."""
    value = get_value(path, Scope.parse)
    return Scope.SYSTEM if value is None else value