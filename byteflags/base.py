"""BaseFlags class for packing named boolean flags into a single integer."""

import json
import logging
import warnings
from typing import Any, Dict, Iterator, List, Mapping, Tuple, TypeVar, Union

from .config import FlagLayout
from .errors import DuplicateName, InvalidArgument, UnknownFlag

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='BaseFlags')


class BaseFlags:
    """Container for named boolean flags stored as the bits of one integer.

    Flag names are fixed at construction. The position of a name in the
    constructor arguments is its bit index, so the integer form of a
    container is stable as long as the names are passed in the same order.

    Subclasses choose the bit width by setting ``layout``.

    Usage:
        flags = ByteFlags('read', 'write', 'execute')

        # Method access
        flags.set_flag('read', True).toggle_flag('write')

        # Attribute access
        flags.execute = True
        if flags.read:
            ...

        # Serialization
        value = flags.to_value()
        data = flags.to_json()
        restored = ByteFlags.from_json(data)

    Flags whose names collide with a method (``count``, ``all``, ...) or start
    with an underscore are only reachable through get_flag/set_flag.

    Instances are not thread-safe. Callers sharing one container between
    threads must serialize mutation themselves.
    """

    layout: FlagLayout

    def __init__(self, *flag_names: str):
        """Create a container with every flag cleared.

        Args:
            *flag_names: Names of the flags, in bit order (1 to capacity names)

        Raises:
            InvalidArgument: No names, too many names, or a blank/non-string name
            DuplicateName: The same name was given twice
        """
        if getattr(type(self), 'layout', None) is None:
            raise TypeError(f"{type(self).__name__} does not define a layout; use a sized subclass")

        if not flag_names:
            raise InvalidArgument("At least one flag name must be provided")

        if len(flag_names) > self.layout.capacity:
            raise InvalidArgument(f"Cannot have more than {self.layout.capacity} flags")

        self._value = 0
        self._indices: Dict[str, int] = {}
        names: List[str] = []
        for name in flag_names:
            self._add_flag(names, name)
        self._names: Tuple[str, ...] = tuple(names)

        logger.debug("Created %s with %d flag(s): %s",
                     type(self).__name__, len(self._names), ", ".join(self._names))

    def _add_flag(self, names: List[str], name: Any) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument(f"Flag name must be a non-empty string, got {name!r}")

        if name in self._indices:
            raise DuplicateName(name)

        self._indices[name] = len(names)
        names.append(name)

    def _get_bit(self, position: int) -> bool:
        return bool(self._value & (1 << position))

    def _set_bit(self, position: int, value: bool) -> None:
        if value:
            self._value |= 1 << position
        else:
            self._value &= ~(1 << position)

    def _index_of(self, name: str) -> int:
        if not self.has_flag(name):
            raise UnknownFlag(name)
        return self._indices[name]

    # Attribute access

    def __getattr__(self, key: str) -> Any:
        """Access flags as attributes: flags.read"""
        if key.startswith('_'):
            # Allow normal attribute access for private attributes
            return object.__getattribute__(self, key)

        if key in self._indices:
            return self._get_bit(self._indices[key])

        raise AttributeError(f"'{type(self).__name__}' object has no flag '{key}'")

    def __setattr__(self, key: str, value: Any):
        """Set flags as attributes: flags.read = True"""
        if key.startswith('_'):
            # Allow normal attribute setting for private attributes
            object.__setattr__(self, key, value)
            return

        if key in self._indices:
            self._set_bit(self._indices[key], value)
            return

        raise AttributeError(f"'{type(self).__name__}' object has no flag '{key}'")

    def __delattr__(self, key: str):
        if key in self._indices:
            raise AttributeError(f"Flag '{key}' cannot be removed")
        object.__delattr__(self, key)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._names))

    # Single flag operations

    def has_flag(self, name: str) -> bool:
        """Check whether a flag is registered. Never raises."""
        return isinstance(name, str) and name in self._indices

    def get_flag(self, name: str) -> bool:
        """Get the value of a flag.

        Raises:
            UnknownFlag: If the flag is not registered
        """
        return self._get_bit(self._index_of(name))

    def set_flag(self: T, name: str, value: bool) -> T:
        """Set the value of a flag and return self for chaining.

        Raises:
            UnknownFlag: If the flag is not registered
        """
        self._set_bit(self._index_of(name), value)
        return self

    def toggle_flag(self: T, name: str) -> T:
        """Flip the value of a flag and return self for chaining.

        Raises:
            UnknownFlag: If the flag is not registered
        """
        self._value ^= 1 << self._index_of(name)
        return self

    # Bulk operations

    def set_flags(self: T, flags: Mapping[str, bool]) -> T:
        """Set several flags at once.

        Keys that are not registered flags are ignored, so a mapping written
        for a larger flag set can be merged into a smaller one.
        """
        ignored = []
        for name, value in flags.items():
            if self.has_flag(name):
                self.set_flag(name, value)
            else:
                ignored.append(name)

        if ignored:
            logger.debug("Ignored unregistered key(s) in set_flags: %s", ignored)
        return self

    def from_dict(self: T, data: Mapping[str, bool]) -> T:
        """Import flag values from a dictionary produced by to_dict()."""
        return self.set_flags(data)

    def toggle_flags(self: T, *names: str, ignore_unknown: bool = False) -> T:
        """Toggle several flags at once.

        Args:
            *names: Flags to toggle, in order
            ignore_unknown: Skip unregistered names instead of raising

        Raises:
            UnknownFlag: If a name is not registered and ignore_unknown is False.
                Nothing is toggled in that case.
        """
        if not ignore_unknown:
            for name in names:
                self._index_of(name)

        for name in names:
            if self.has_flag(name):
                self.toggle_flag(name)
            else:
                logger.warning("Skipping unknown flag '%s' in toggle_flags", name)
        return self

    # Aggregate queries

    def count(self) -> int:
        """Number of registered flags currently set to True."""
        return sum(1 for position in range(len(self._names)) if self._get_bit(position))

    def any(self) -> bool:
        """True if the stored integer is non-zero.

        This looks at the whole integer, not only the registered bits, so a
        value loaded with from_value() that sets unused high bits makes any()
        True while count() is 0.
        """
        return self._value != 0

    def none(self) -> bool:
        return self._value == 0

    def all(self, *names: str) -> bool:
        """True if every named flag is set. Unknown names raise UnknownFlag."""
        for name in names:
            if not self.get_flag(name):
                return False
        return True

    def any_of(self, *names: str) -> bool:
        """True if at least one named flag is set. Unknown names raise UnknownFlag."""
        for name in names:
            if self.get_flag(name):
                return True
        return False

    def none_of(self, *names: str) -> bool:
        return not self.any_of(*names)

    # Serialization

    @property
    def capacity(self) -> int:
        """Maximum number of flags this container type can hold."""
        return self.layout.capacity

    @property
    def max_value(self) -> int:
        """Largest integer accepted by from_value()."""
        return self.layout.max_value

    def to_value(self) -> int:
        """Return the raw integer holding all flags."""
        return self._value

    def from_value(self: T, value: int) -> T:
        """Replace every flag at once from a raw integer.

        Raises:
            InvalidArgument: If value is not an int in 0..max_value
        """
        # bool is an int subclass but never a valid encoded value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(
                f"Value must be an integer 0-{self.layout.max_value}, got {type(value).__name__}"
            )
        if value < 0 or value > self.layout.max_value:
            raise InvalidArgument(
                f"Value must be an integer 0-{self.layout.max_value} "
                f"({self.layout.value_label}), got {value}"
            )

        self._value = value
        logger.debug("Loaded %s value 0x%X", type(self).__name__, value)
        return self

    def to_dict(self) -> Dict[str, bool]:
        """Export flags to a dictionary in registration order."""
        return {name: self._get_bit(position) for position, name in enumerate(self._names)}

    def to_json(self) -> str:
        """Export flags as a compact JSON object, e.g. {"read":true,"write":false}"""
        return json.dumps(self.to_dict(), separators=(',', ':'))

    @classmethod
    def from_json(cls, data: Union[str, bytes, bytearray, Mapping[str, bool]]):
        """Create a new container from to_json() output or an equivalent mapping.

        The flag names are taken from the keys, in order, so the result has the
        same bit layout as the container that produced the JSON.

        Raises:
            InvalidArgument: Malformed JSON, a document that is not an object,
                or keys that fail the normal construction checks
        """
        if isinstance(data, (str, bytes, bytearray)):
            try:
                parsed = json.loads(data)
            except ValueError as e:
                raise InvalidArgument(f"Invalid JSON for {cls.__name__}: {e}") from e
        else:
            parsed = data

        if not isinstance(parsed, Mapping):
            raise InvalidArgument(
                f"{cls.__name__}.from_json expects a JSON object, got {type(parsed).__name__}"
            )

        instance = cls(*parsed.keys())
        instance.set_flags(parsed)
        logger.debug("Loaded %r from JSON", instance)
        return instance

    # Introspection

    def get_flag_names(self) -> List[str]:
        """Get all flag names in bit order."""
        return list(self._names)

    def get_flags(self) -> List[str]:
        """Deprecated: use get_flag_names()."""
        warnings.warn(
            "get_flags() is deprecated, use get_flag_names() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.get_flag_names()

    def __iter__(self) -> Iterator[Tuple[str, bool]]:
        """Yield (name, value) pairs, reading the current values."""
        for position, name in enumerate(self._names):
            yield name, self._get_bit(position)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return self.has_flag(name)

    def __str__(self) -> str:
        flags = ", ".join(f"{name}={str(value).lower()}" for name, value in self)
        return f"{type(self).__name__} {{{flags}}}"

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(value=0x{self._value:0{self.layout.hex_digits}X}, "
                f"flags={list(self._names)!r})")
