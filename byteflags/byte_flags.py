"""ByteFlags: up to 8 boolean flags stored in a single byte."""

from .base import BaseFlags
from .config import FlagLayouts


class ByteFlags(BaseFlags):
    """Stores up to 8 boolean flags in a single byte (0-255).

    Usage:
        flags = ByteFlags('read', 'write', 'execute')
        flags.read = True
        flags.to_byte()  # 1
    """

    layout = FlagLayouts.BYTE

    def to_byte(self) -> int:
        """Return the flags as a byte value (0-255)."""
        return self.to_value()

    def from_byte(self, b: int) -> 'ByteFlags':
        """Load flags from a byte value (0-255)."""
        return self.from_value(b)


def create_byte_flags(*flag_names: str) -> ByteFlags:
    """Create a ByteFlags instance with the given flag names."""
    return ByteFlags(*flag_names)
