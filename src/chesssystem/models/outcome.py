"""Tagged result returned by every public chess system operation."""

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

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from chesssystem.models.enums import ChessResult

T = TypeVar("T")


@dataclass(frozen=True)
class ChessOutcome(Generic[T]):
    """Result of a chess system operation.

    Attributes:
        result: SUCCESS or the kind of failure
        value: Payload of a successful query, None otherwise
        message: Human-readable detail for a failure
    """

    result: ChessResult
    value: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "ChessOutcome[Any]":
        return cls(ChessResult.SUCCESS, value)

    @classmethod
    def failure(cls, result: ChessResult, message: Optional[str] = None) -> "ChessOutcome[Any]":
        return cls(result, None, message)

    @property
    def ok(self) -> bool:
        return self.result is ChessResult.SUCCESS

    def __bool__(self) -> bool:
        """Allow using outcome in boolean context: if outcome: ..."""
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            if self.value is None:
                return "ChessOutcome(SUCCESS)"
            return f"ChessOutcome(SUCCESS, {self.value!r})"
        return f"ChessOutcome({self.result.name}, {self.message!r})"
