"""Command-line argument validation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from philosophers.errors import InvalidArgumentError, UsageError

INT_MAX = 2_147_483_647


@dataclass(frozen=True)
class Settings:
    """Validated simulation parameters; times are in milliseconds."""

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_to_eat: int | None = None

    @property
    def has_meal_limit(self) -> bool:
        return self.meals_to_eat is not None


def parse_positive(text: str) -> int:
    """Parse a string of ASCII digits as a positive integer no larger than INT_MAX."""
    value = 0
    for char in text:
        if not "0" <= char <= "9":
            raise InvalidArgumentError()
        value = value * 10 + (ord(char) - ord("0"))
        if value > INT_MAX:
            raise InvalidArgumentError()
    if value == 0:
        raise InvalidArgumentError()
    return value


def parse_arguments(args: Sequence[str]) -> Settings:
    """Validate the arguments that follow the program name and build Settings."""
    if not 4 <= len(args) <= 5:
        raise UsageError()
    # Arguments are checked from the last one back to the first.
    values = [parse_positive(arg) for arg in reversed(args)][::-1]
    meals = values[4] if len(values) == 5 else None
    return Settings(values[0], values[1], values[2], values[3], meals)