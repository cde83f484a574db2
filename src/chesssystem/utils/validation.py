"""Validation utilities for the Chess System.

This module provides reusable validation functions with consistent error handling.
"""

# Chess System
# Copyright (C) 2025  Chess System developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Any, Optional

from chesssystem.constants import LOCATION_FIRST_CHARS, LOCATION_REST_CHARS
from chesssystem.exceptions import (
    InvalidIdException,
    InvalidLocationException,
    InvalidMaxGamesException,
    InvalidPlayTimeException,
    NullArgumentException,
)
from chesssystem.models.enums import Winner


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
    """

    def __init__(self, is_valid: bool, error_message: Optional[str] = None):
        self.is_valid = is_valid
        self.error_message = error_message

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Location Validation ==========


def validate_location(location: Optional[str]) -> ValidationResult:
    """Validate a tournament location.

    A location starts with an upper case English letter and continues with
    lower case English letters or spaces only.

    Args:
        location: Location to validate

    Returns:
        ValidationResult with validation status

    Example:
        >>> bool(validate_location("Tel aviv"))
        True
        >>> bool(validate_location("london"))
        False
    """
    if not location:
        return ValidationResult(False, "Location is required")

    if location[0] not in LOCATION_FIRST_CHARS:
        return ValidationResult(
            False, f"Location must start with a capital letter: {location!r}"
        )

    for char in location[1:]:
        if char not in LOCATION_REST_CHARS:
            return ValidationResult(
                False, f"Invalid character {char!r} in location {location!r}"
            )

    return ValidationResult(True)


# ========== Numeric Validation ==========


def is_positive_int(value: Any) -> bool:
    """True for ints (not bools) greater than zero."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


# ========== Raising Helpers ==========


def require(value: Any, name: str) -> None:
    """Raise NullArgumentException if ``value`` is None."""
    if value is None:
        raise NullArgumentException(f"{name} is required")


def require_winner(winner: Any) -> None:
    """Raise NullArgumentException unless ``winner`` is a Winner member."""
    if not isinstance(winner, Winner):
        raise NullArgumentException(f"Invalid winner: {winner!r}")


def require_id(value: Any, name: str = "id") -> None:
    """Raise InvalidIdException unless ``value`` is a positive int."""
    if not is_positive_int(value):
        raise InvalidIdException(f"Invalid {name}: {value!r}")


def require_location(location: Optional[str]) -> None:
    """Raise InvalidLocationException for a malformed location."""
    result = validate_location(location)
    if not result:
        raise InvalidLocationException(result.error_message)


def require_max_games(max_games: Any) -> None:
    """Raise InvalidMaxGamesException unless ``max_games`` is positive."""
    if not is_positive_int(max_games):
        raise InvalidMaxGamesException(
            f"Max games per player must be positive, got {max_games!r}"
        )


def require_play_time(play_time: Any) -> None:
    """Raise InvalidPlayTimeException unless ``play_time`` is positive."""
    if not is_positive_int(play_time):
        raise InvalidPlayTimeException(
            f"Play time must be a positive number of seconds, got {play_time!r}"
        )
