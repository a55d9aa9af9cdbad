"""Split arithmetic expressions into classified tokens."""
import math
import re
from typing import List, Union

from expression_evaluator.common.models import ErrorKind, EvaluationError, Token, TokenKind
from expression_evaluator.common.operators import OperatorRegistry


# Capturing group keeps the separators themselves in the re.split() output
_SEPARATORS = re.compile(r"([-+*/()])")

# [0-9] rather than \d, which also matches non-ASCII digits
_NUMBER = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][0-9]+)?")

OPEN_PAREN = "("
CLOSE_PAREN = ")"


def tokenize(expr: str) -> List[str]:
    """
    Split an arithmetic expression into raw token strings.

    The string is cut immediately before and after every ``+ - * / ( )``.
    Empty and whitespace-only fragments are dropped, so spacing is irrelevant
    (e.g. "3+4*2" and " 3 + 4 * 2 " give the same tokens).

    :param str expr: Arithmetic expression as a string

    :return: List of tokens, in input order
    :rtype: List[str]
    """
    return [fragment.strip() for fragment in _SEPARATORS.split(expr) if fragment.strip()]


def is_number(fragment: str) -> bool:
    """
    Determine if a fragment represents a finite numeric value.

    Supports both integers and floating-point numbers written with ASCII digits,
    an optional decimal point and an optional unsigned exponent. Other literals
    float() accepts ("inf", "nan", "1_000", non-ASCII digits) are rejected, and so
    are values too large to be finite.

    :param str fragment: Token string

    :return: True if the fragment is a finite decimal literal, else False
    :rtype: bool
    """
    if _NUMBER.fullmatch(fragment) is None:
        return False
    return math.isfinite(float(fragment))


def classify(fragment: str) -> Union[Token, EvaluationError]:
    """
    Turn a raw fragment into a Token.

    :param str fragment: Token string produced by tokenize()

    :return: The token, or an UNSUPPORTED_TOKEN error if the fragment is not recognized
    :rtype: Union[Token, EvaluationError]
    """
    if is_number(fragment):
        return Token(kind=TokenKind.NUMBER, text=fragment, value=float(fragment))
    if fragment == OPEN_PAREN:
        return Token(kind=TokenKind.OPEN_PAREN, text=fragment)
    if fragment == CLOSE_PAREN:
        return Token(kind=TokenKind.CLOSE_PAREN, text=fragment)
    if OperatorRegistry.is_operator(fragment):
        return Token(kind=TokenKind.OPERATOR, text=fragment)
    return EvaluationError(
        kind=ErrorKind.UNSUPPORTED_TOKEN,
        message=f"Unsupported token: {fragment}",
        token=fragment,
    )

