"""ShortFlags: up to 16 boolean flags stored in a 16-bit value."""

from .base import BaseFlags
from .config import FlagLayouts


class ShortFlags(BaseFlags):
    """Stores up to 16 boolean flags in a single short (0-65535).

    Use this when a flag set outgrows ByteFlags, e.g. permissions stored in
    a SMALLINT column.
    """

    layout = FlagLayouts.SHORT

    def to_short(self) -> int:
        return self.to_value()

    def from_short(self, s: int) -> 'ShortFlags':
        """Load flags from a short value (0-65535)."""
        return self.from_value(s)


def create_short_flags(*flag_names: str) -> ShortFlags:
    return ShortFlags(*flag_names)
