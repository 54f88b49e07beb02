"""Bit-width layouts for flag containers.

Each container variant stores its flags in a single unsigned integer of a
fixed width. The layout decides how many flags fit and which integer range
the container accepts when loading a raw value.

Supported widths:
    byte:  8 flags,  values 0 - 0xFF
    short: 16 flags, values 0 - 0xFFFF
    long:  32 flags, values 0 - 0xFFFFFFFF

Wider layouts are not supported.
"""

from dataclasses import dataclass
from typing import Dict


SUPPORTED_CAPACITIES = (8, 16, 32)


@dataclass(frozen=True)
class FlagLayout:
    """Definition of a container bit width.

    Attributes:
        capacity: Number of bits, which is also the maximum number of flags
        value_label: Name used for the width-labelled accessors (to_byte, ...)
        description: Human-readable description
    """
    capacity: int
    value_label: str
    description: str = ""

    def __post_init__(self):
        """Reject widths that cannot be stored in a single supported integer."""
        if self.capacity not in SUPPORTED_CAPACITIES:
            raise ValueError(
                f"Unsupported capacity {self.capacity} for '{self.value_label}' layout "
                f"(expected one of {', '.join(str(c) for c in SUPPORTED_CAPACITIES)})"
            )

    @property
    def max_value(self) -> int:
        """Largest integer the layout can hold (all bits set)."""
        return (1 << self.capacity) - 1

    @property
    def hex_digits(self) -> int:
        return self.capacity // 4


class FlagLayouts:
    """The three container widths."""

    BYTE = FlagLayout(capacity=8, value_label="byte", description="8 flags in a single byte")
    SHORT = FlagLayout(capacity=16, value_label="short", description="16 flags in a 16-bit short")
    LONG = FlagLayout(capacity=32, value_label="long", description="32 flags in a 32-bit long")

    @classmethod
    def get_all_layouts(cls) -> Dict[int, FlagLayout]:
        """Get all layouts keyed by capacity."""
        return {layout.capacity: layout for layout in (cls.BYTE, cls.SHORT, cls.LONG)}

    @classmethod
    def for_capacity(cls, capacity: int) -> FlagLayout:
        """Look up a layout by bit width."""
        layouts = cls.get_all_layouts()
        if capacity not in layouts:
            raise ValueError(f"No layout with capacity {capacity}")
        return layouts[capacity]
