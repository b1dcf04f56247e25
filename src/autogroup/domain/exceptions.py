"""Exceptions raised by the autogroup domain."""

from typing import Any


class AutogroupError(Exception):
    """Base class for all autogroup errors."""
    pass


class InvalidGroupArgument(AutogroupError):
    """Raised when an autogroup cannot be built from the given input.

    This is only raised at construction time, when neither a group id nor
    a raw record yields a valid autogroup record.

    Attributes:
        argument: The input the autogroup was constructed from.
    """

    def __init__(self, argument: Any) -> None:
        self.argument = argument
        super().__init__(f"Invalid autogroup argument: {argument!r}")
