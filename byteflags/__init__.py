"""
Compact boolean flag containers.

Key features:
- Up to 8, 16 or 32 named flags packed into a single unsigned integer
- Attribute access (flags.read = True) alongside the method API
- Bulk set/toggle and any/all/none queries
- Round-trip through an integer, a dictionary or JSON
"""

from .version import __version__

from .errors import FlagsError, InvalidArgument, DuplicateName, UnknownFlag
from .config import FlagLayout, FlagLayouts
from .base import BaseFlags
from .byte_flags import ByteFlags, create_byte_flags
from .short_flags import ShortFlags, create_short_flags
from .long_flags import LongFlags, create_long_flags

__all__ = [
    '__version__',
    # Containers
    'BaseFlags',
    'ByteFlags',
    'ShortFlags',
    'LongFlags',
    'create_byte_flags',
    'create_short_flags',
    'create_long_flags',
    # Configuration
    'FlagLayout',
    'FlagLayouts',
    # Errors
    'FlagsError',
    'InvalidArgument',
    'DuplicateName',
    'UnknownFlag',
]
