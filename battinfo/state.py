"""Battery state and chemistry enumerations."""

from __future__ import annotations

import enum

_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def _ascii_fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class State(enum.Enum):
    """Possible battery states.

    ``UNKNOWN`` means either the controller reported it or the state could
    not be retrieved.
    """

    UNKNOWN = "unknown"
    CHARGING = "charging"
    DISCHARGING = "discharging"
    EMPTY = "empty"
    FULL = "full"
    NOT_CHARGING = "Not charging"

    @classmethod
    def parse(cls, text: str) -> State:
        """Parse a state name, ignoring ASCII case; raise ValueError if unknown."""
        state = _STATE_NAMES.get(_ascii_fold(text))
        if state is None:
            raise ValueError(f"invalid battery state: {text!r}")
        return state

    def __str__(self) -> str:
        return self.value


_STATE_NAMES = {
    "unknown": State.UNKNOWN,
    "empty": State.EMPTY,
    "full": State.FULL,
    "charging": State.CHARGING,
    "discharging": State.DISCHARGING,
    "not charging": State.NOT_CHARGING,
}


class Technology(enum.Enum):
    """Possible battery technologies."""

    UNKNOWN = "unknown"
    LITHIUM_ION = "lithium-ion"
    LEAD_ACID = "lead-acid"
    LITHIUM_POLYMER = "lithium-polymer"
    NICKEL_METAL_HYDRIDE = "nickel-metal-hydride"
    NICKEL_CADMIUM = "nickel-cadmium"
    NICKEL_ZINC = "nickel-zinc"
    LITHIUM_IRON_PHOSPHATE = "lithium-iron-phosphate"
    RECHARGEABLE_ALKALINE_MANGANESE = "rechargeable-alkaline-manganese"

    @classmethod
    def parse(cls, text: str) -> Technology:
        """Parse a chemistry abbreviation, ignoring ASCII case.

        Unrecognised names give ``UNKNOWN`` rather than an error.
        """
        return _TECHNOLOGY_NAMES.get(_ascii_fold(text), cls.UNKNOWN)

    def __str__(self) -> str:
        return self.value


_TECHNOLOGY_NAMES = {
    "li-i": Technology.LITHIUM_ION,
    "li-ion": Technology.LITHIUM_ION,
    "lion": Technology.LITHIUM_ION,
    "pb": Technology.LEAD_ACID,
    "pbac": Technology.LEAD_ACID,
    "lip": Technology.LITHIUM_POLYMER,
    "lipo": Technology.LITHIUM_POLYMER,
    "li-poly": Technology.LITHIUM_POLYMER,
    "nimh": Technology.NICKEL_METAL_HYDRIDE,
    "nicd": Technology.NICKEL_CADMIUM,
    "nizn": Technology.NICKEL_ZINC,
    "life": Technology.LITHIUM_IRON_PHOSPHATE,
    "ram": Technology.RECHARGEABLE_ALKALINE_MANGANESE,
}