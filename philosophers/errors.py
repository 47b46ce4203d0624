"""Exceptions raised for bad command-line input."""

USAGE = "Usage: <philnum> <die> <eat> <sleep> [<meals>]"
INVALID_ARGUMENT = "Invalid argument. Only positive integers accepted"


class PhiloError(Exception):
    """Base class for errors reported by the simulation."""

    default_message = "Fatal error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class UsageError(PhiloError):
    """Wrong number of command-line arguments."""

    default_message = USAGE


class InvalidArgumentError(PhiloError):
    """An argument is not a positive integer within range."""

    default_message = INVALID_ARGUMENT