"""Value types for generated schedules and validation outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

Match = tuple[str, str]


class ErrorType(StrEnum):
    """Categories of expected pairing failures."""

    INVALID_INPUT = "invalid_input"
    NO_VALID_SOLUTION = "no_valid_solution"
    INVALID_OUTPUT = "invalid_output"


@dataclass(frozen=True)
class Round:
    """A single tournament round.

    Attributes:
        label: Display name, e.g. "Round 3".
        number: Round number matching the label.
        matches: Pairings in the order they were found.
    """

    label: str
    number: int
    matches: tuple[Match, ...]

    @classmethod
    def create(cls, number: int, matches: list[Match]) -> Round:
        """Build a round labelled after its number."""
        return cls(label=f"Round {number}", number=number, matches=tuple(matches))

    @property
    def teams(self) -> list[str]:
        """Teams in match order."""
        return [team for match in self.matches for team in match]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation pass. Failures carry a readable message."""

    success: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(success=True)

    @classmethod
    def fail(cls, message: str) -> ValidationResult:
        return cls(success=False, message=str(message))


@dataclass(frozen=True)
class ScheduleResult:
    """Either a complete list of rounds or a typed failure.

    Attributes:
        rounds: Generated rounds, empty on failure.
        error_type: Failure category, None on success.
        message: Human-readable failure description.
    """

    rounds: tuple[Round, ...] = ()
    error_type: ErrorType | None = None
    message: str | None = None

    @property
    def success(self) -> bool:
        return self.error_type is None

    @classmethod
    def ok(cls, rounds: list[Round]) -> ScheduleResult:
        return cls(rounds=tuple(rounds))

    @classmethod
    def fail(cls, error_type: ErrorType, message: str) -> ScheduleResult:
        return cls(error_type=error_type, message=str(message))
