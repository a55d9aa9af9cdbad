"""Pydantic models for tokens, evaluation errors and evaluation results."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TokenKind(str, Enum):
    """Lexical category of a token."""

    NUMBER = "number"
    OPERATOR = "operator"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"


class Token(BaseModel):
    """A single lexical unit of an arithmetic expression."""

    model_config = ConfigDict(frozen=True)

    kind: TokenKind = Field(..., description="Lexical category")
    text: str = Field(..., min_length=1, description="Source text of the token")
    value: Optional[float] = Field(default=None, description="Parsed value for number tokens")


class ErrorKind(str, Enum):
    """Reasons an evaluation can fail."""

    UNSUPPORTED_TOKEN = "unsupported_token"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    INVALID_EXPRESSION = "invalid_expression"
    DIVISION_BY_ZERO = "division_by_zero"


class EvaluationError(BaseModel):
    """Structured description of a failed evaluation."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind = Field(..., description="Category of the failure")
    message: str = Field(..., description="Human-readable description")
    token: Optional[str] = Field(default=None, description="Offending token, when there is one")

    def __str__(self) -> str:
        return self.message


class EvaluationException(ValueError):
    """Raised by EvaluationResult.unwrap() when the evaluation failed."""

    def __init__(self, error: EvaluationError):
        super().__init__(error.message)
        self.error = error


class EvaluationResult(BaseModel):
    """
    Outcome of evaluating one arithmetic expression.

    Exactly one of ``value`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    value: Optional[float] = Field(default=None, description="Evaluated numeric result")
    error: Optional[EvaluationError] = Field(default=None, description="Failure description")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "EvaluationResult":
        """Ensure the result carries either a value or an error, never both."""
        if (self.value is None) == (self.error is None):
            raise ValueError("Exactly one of 'value' and 'error' must be set")
        return self

    @property
    def ok(self) -> bool:
        """True if the expression evaluated to a value."""
        return self.error is None

    def unwrap(self) -> float:
        """
        Return the computed value or raise the evaluation error.

        :return: Evaluated numeric result
        :rtype: float
        :raises EvaluationException: If the evaluation failed
        """
        if self.error is not None:
            raise EvaluationException(self.error)
        return self.value
