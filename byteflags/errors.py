"""Exceptions raised by flag containers."""


class FlagsError(Exception):
    """Base for every error raised by this package."""


class InvalidArgument(FlagsError, ValueError):
    """A flag name list, integer value or JSON document was rejected."""


class DuplicateName(InvalidArgument):
    def __init__(self, name: str):
        super().__init__(f"Duplicate flag: {name}")
        self.name = name


class UnknownFlag(FlagsError, KeyError):
    """Raised when a flag name is not registered on the container."""

    def __init__(self, name: str):
        super().__init__(f"Flag '{name}' does not exist")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
