from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from holdem_showdown.evaluation.types import EvaluatedHand

WINNER_MARK = "🏆"


@dataclass(frozen=True)
class Result:
    """One player's line in the showdown results."""

    name: str
    description: str
    is_winner: bool
    hand: Optional[EvaluatedHand] = field(default=None, compare=False)

    def __str__(self) -> str:
        """String representation used in the shared summary."""
        suffix = f" {WINNER_MARK}" if self.is_winner else ""
        return f"{self.name}: {self.description}{suffix}"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "isWinner": self.is_winner,
        }


class ValidationErrorKind(Enum):
    """Reasons a showdown cannot be evaluated."""

    INSUFFICIENT_PLAYERS = "insufficient_players"
    INCOMPLETE_COMMUNITY = "incomplete_community"
    INCOMPLETE_HOLE_CARDS = "incomplete_hole_cards"


@dataclass(frozen=True)
class ValidationError:
    """A failed precondition, with the prompt to show the user."""

    kind: ValidationErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ShowdownOutcome:
    """
    Outcome of evaluating a showdown.

    Exactly one of results or error is meaningful: a successful outcome
    carries one Result per player in seating order, a failed one carries
    the first violated precondition.
    """

    results: List[Result] = field(default_factory=list)
    error: Optional[ValidationError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def winners(self) -> List[Result]:
        return [result for result in self.results if result.is_winner]

    @property
    def split(self) -> bool:
        """Whether the pot would be split between several winners."""
        return len(self.winners) > 1

    @classmethod
    def failure(cls, kind: ValidationErrorKind, message: str) -> 'ShowdownOutcome':
        return cls(error=ValidationError(kind=kind, message=message))

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        if self.error is not None:
            return {"error": {"kind": self.error.kind.value, "message": self.error.message}}
        return {"results": [result.to_json() for result in self.results]}


def format_summary(results: Sequence[Result]) -> str:
    """Plain-text summary for sharing, one line per player."""
    return "\n".join(str(result) for result in results)
