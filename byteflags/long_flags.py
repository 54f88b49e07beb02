"""LongFlags: up to 32 boolean flags stored in a 32-bit value."""

from .base import BaseFlags
from .config import FlagLayouts


class LongFlags(BaseFlags):
    """Stores up to 32 boolean flags in a single long (0-4294967295).

    Usage:
        flags = LongFlags('read', 'write', 'execute', 'admin', 'guest')
        flags.admin = True
        stored = flags.to_long()

        restored = LongFlags('read', 'write', 'execute', 'admin', 'guest').from_long(stored)
    """

    layout = FlagLayouts.LONG

    def to_long(self) -> int:
        """Return the flags as a long value (0-4294967295)."""
        return self.to_value()

    def from_long(self, value: int) -> 'LongFlags':
        """Load flags from a long value (0-4294967295)."""
        return self.from_value(value)


def create_long_flags(*flag_names: str) -> LongFlags:
    """Create a LongFlags instance with the given flag names."""
    return LongFlags(*flag_names)
