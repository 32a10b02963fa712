"""Result types for failed pairs."""

from enum import Enum

from pydantic import BaseModel, Field

from casetable.pairs import SourceLocation


class FailureKind(str, Enum):
    """Why a pair did not pass."""

    FAILED = "failed"
    ERROR = "error"


class PairFailure(BaseModel):
    """One failed pair, attributed to the line that built it.

    Attributes
    ----------
    location : SourceLocation
        File and line on which the failing pair was constructed.
    comparison : str
        Name of the comparison that was applied (e.g. ``"Equal"``).
    kind : FailureKind
        ``FAILED`` for a mismatch, ``ERROR`` when evaluating an operand or
        running the comparison raised.
    detail : str
        Description of the mismatch or of the raised error.
    message : str
        The pair's own message, forced only because this failure happened.
    left_repr : str or None
        Truncated repr of the left operand, if it was evaluated.
    right_repr : str or None
        Truncated repr of the right operand, if it was evaluated.
    """

    location: SourceLocation
    comparison: str
    kind: FailureKind = FailureKind.FAILED
    detail: str
    message: str = ""
    left_repr: str | None = Field(default=None)
    right_repr: str | None = Field(default=None)

    @property
    def file(self) -> str:
        return self.location.file

    @property
    def line(self) -> int:
        return self.location.line

    def __str__(self) -> str:
        text = f"{self.location}: {self.detail}"
        if self.message:
            text += f" - {self.message}"
        return text
