"""Battery readings from sysfs, ACPI and Windows battery structures, in SI units."""

__version__ = "0.7.9"