"""Registry of the supported binary arithmetic operators."""
from enum import Enum
import operator
from typing import Callable, Dict, Optional, Tuple


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


class Operator(str, Enum):
    """Closed set of binary operators, identified by their symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        """Precedence rank, higher binds tighter."""
        return OPERATORS[self][0]

    def apply(self, a: float, b: float) -> float:
        """
        Apply the operator to two operands.

        :param float a: Left operand
        :param float b: Right operand

        :return: Result of ``a <op> b``
        :rtype: float
        :raises ZeroDivisionError: If dividing by exactly zero
        """
        return OPERATORS[self][1](a, b)


# Mapping of operators to (precedence, function)
# operator.truediv raises ZeroDivisionError for 0.0 and -0.0 divisors alike
OPERATORS: Dict[Operator, Tuple[int, OperatorFn]] = {
    Operator.ADD: (1, operator.add),
    Operator.SUB: (1, operator.sub),
    Operator.MUL: (2, operator.mul),
    Operator.DIV: (2, operator.truediv),
}


class OperatorRegistry:
    """
    Read-only lookups over the operator table.

    Unknown symbols are reported as "not an operator" instead of raising, so
    callers can use the registry to tell operators apart from other tokens.
    """

    @staticmethod
    def lookup(symbol: str) -> Optional[Operator]:
        """
        Find the operator for a symbol, ignoring case and surrounding whitespace.

        :param str symbol: Candidate operator symbol

        :return: Matching operator, or None
        :rtype: Optional[Operator]
        """
        try:
            return Operator(symbol.strip().lower())
        except ValueError:
            return None

    @staticmethod
    def is_operator(symbol: str) -> bool:
        """Return True if the symbol is a recognized operator."""
        return OperatorRegistry.lookup(symbol) is not None

    @staticmethod
    def precedence(symbol: str) -> int:
        """Return the precedence rank of a symbol, 0 if it is not an operator."""
        op = OperatorRegistry.lookup(symbol)
        return op.precedence if op is not None else 0

    @staticmethod
    def apply(symbol: str, a: float, b: float) -> float:
        """
        Apply the operator named by a symbol to two operands.

        :param str symbol: Operator symbol
        :param float a: Left operand
        :param float b: Right operand

        :return: Computed value
        :rtype: float
        :raises ValueError: If the symbol is not an operator
        :raises ZeroDivisionError: If dividing by exactly zero
        """
        op = OperatorRegistry.lookup(symbol)
        if op is None:
            raise ValueError(f"Unsupported operator: {symbol}")
        return op.apply(a, b)
