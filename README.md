# battinfo

Battery readings in SI units.

`battinfo` turns the raw values that operating systems report about
batteries into plain floats in SI units: energy in joules, power in watts,
charge in coulombs, current in amperes, voltage in volts, temperature in
kelvin, time in seconds, and levels as ratios from `0.0` to `1.0`.

It offers:

- a reader for Linux power-supply directories (as found under
  `/sys/class/power_supply`);
- access to the FreeBSD / DragonFly BSD ACPI battery interface through
  `/dev/acpi`;
- decoders for the Windows `BATTERY_INFORMATION` and `BATTERY_STATUS`
  structures;
- battery state and chemistry enumerations, unit helpers and a common error
  type.

## Installation

```
pip install battinfo
```

The package has no dependencies outside the standard library.

## Linux: reading a power-supply directory

```python
from battinfo.linux.source import DataBuilder
from battinfo.units import to_percent, to_watt_hour

builder = DataBuilder("/sys/class/power_supply/BAT0")
data = builder.collect()

print("state:", data.state)
print("charge: %.1f %%" % to_percent(data.state_of_charge))
print("health: %.1f %%" % to_percent(data.state_of_health))
print("energy: %.2f Wh" % to_watt_hour(data.energy))
print("rate: %.2f W" % data.energy_rate)
print("technology:", builder.technology())
print("vendor:", builder.manufacturer())
```

`collect()` returns an `InstantData` snapshot with `state_of_health`,
`state_of_charge`, `energy`, `energy_full`, `energy_full_design`,
`energy_rate`, `voltage`, `state`, `temperature` (kelvin or `None`) and
`cycle_count` (`None` when missing or zero). The builder falls back between
`energy_*`, `charge_*` and `capacity` files much as upower does, and raises
`BatteryError` when neither energy nor voltage can be worked out. Values it
has computed are kept; create a new `DataBuilder` to read fresh ones.

`DataBuilder` also offers `manufacturer()`, `model()`, `serial_number()`
(strings or `None`), `technology()` and `state_of_health()`.

Single attribute files can be read with `battinfo.linux.fs`:
`get_string`, `get_value(path, parser)`, `energy`, `charge`, `voltage`,
`power`, `supply_type` (a `SupplyType`) and `scope` (a `Scope`; a missing
file means `SYSTEM`). Missing files, and files whose read fails with
`ENODEV`, give `None`.

## FreeBSD: the ACPI device

```python
from battinfo.freebsd.acpi import AcpiDevice

with AcpiDevice() as acpi:
    for unit in range(acpi.count()):
        bif, bst = acpi.bif(unit), acpi.bst(unit)
        if bif is None or bst is None:
            continue
        print(unit, bif.model, bif.technology(), bst.state(), bst.capacity, bif.units)
```

`bif()` and `bst()` return `AcpiBif` and `AcpiBst`, or `None` when the
kernel marks the data invalid. Both can also be decoded from raw bytes with
`from_bytes`. Capacities are in mWh or mAh as given by `AcpiBif.units`
(`Units.MILLI_WATTS` or `Units.MILLI_AMPERES`).

## Windows: battery structures

`battinfo.windows.info` decodes little-endian buffers:

```python
from battinfo.windows.info import BatteryInformation, BatteryStatus

info = BatteryInformation.from_bytes(info_buffer)
status = BatteryStatus.from_bytes(status_buffer)

info.technology(), info.cycle_count(), info.is_relative()
status.state(), status.capacity(), status.voltage(), status.rate()
```

Unknown capacity, voltage and rate values give `None`.

## States and chemistries

`battinfo.state.State` is one of `UNKNOWN`, `CHARGING`, `DISCHARGING`,
`EMPTY`, `FULL` and `NOT_CHARGING`; `State.parse` accepts those names in
any ASCII case ("Not charging" with a space) and raises `ValueError`
otherwise. `Technology.parse` maps chemistry abbreviations such as `Li-ion`,
`LiPo`, `NiMH` or `PbAc` and returns `Technology.UNKNOWN` for anything
else. `str()` of either gives its display name, such as `lithium-ion`.

## Unit helpers

`battinfo.units` holds constructors from reported units to SI values
(`milliampere_hour`, `microampere_hour`, `milliwatt_hour`, `microwatt_hour`,
`milliampere`, `microampere`, `watt`, `milliwatt`, `microwatt`, `volt`,
`millivolt`, `microvolt`, `celsius`, `decikelvin`, `percent`, `second`,
`minute`), `bounded` to clamp a ratio into `0..1`, and converters for
display (`to_watt_hour`, `to_milliwatt`, `to_percent`, `to_celsius`,
`to_hours`, `to_days`).

## Errors

Failures raise `battinfo.errors.BatteryError`, which carries `message` and
`kind` (an `ErrorKind`: `NOT_FOUND`, `INVALID_DATA`, `INVALID_INPUT` or
`OTHER`). Operating-system errors are wrapped and kept as the cause.

## What it does not do

- There is no command-line program.
- There is no single entry point that finds the batteries of the running
  system, picks a backend, or refreshes a battery in place; callers point
  `DataBuilder` at a directory or query `AcpiDevice` units themselves.
- Time to full and time to empty are not calculated.
- macOS is not supported: `battinfo.darwin` contains no backend.
- On Windows only the structures are decoded; the package does not open
  battery devices or issue IOCTLs.