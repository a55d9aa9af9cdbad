"""Evaluate arithmetic expressions without eval()."""
from typing import List, Optional, Union

from expression_evaluator.common.logger import logger
from expression_evaluator.common.models import (
    ErrorKind,
    EvaluationError,
    EvaluationResult,
    TokenKind,
)
from expression_evaluator.common.operators import Operator, OperatorRegistry
from expression_evaluator.evaluator.tokenizer import OPEN_PAREN, classify, tokenize


# Entries of the operator stack: pending operators and the "(" marker
StackEntry = Union[Operator, str]


class ExpressionEvaluator:
    """
    Evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Expected failures are returned as values, never raised

    Algorithm:
        Two-stack variant of the Shunting-yard algorithm. Numbers go to an operand
        stack, operators and "(" to an operator stack. Whenever an operator is
        resolved it is applied straight away to the top two operands, so the
        expression collapses to a value in a single left-to-right pass without
        building an intermediate Reverse Polish Notation list.

    Examples:
        - "3 + 4 * 2" evaluates to 11.0
        - "10 - 3 - 2" evaluates to 5.0 (left-associative)
        - "5 / 0" fails with DIVISION_BY_ZERO
    """

    @staticmethod
    def _apply_top(operands: List[float], operators: List[StackEntry]) -> Optional[EvaluationError]:
        """
        Pop the top operator and apply it to the top two operands.

        :param List[float] operands: Operand stack
        :param List[StackEntry] operators: Operator stack, top entry must be an Operator

        :return: None on success, else the error that aborts evaluation
        :rtype: Optional[EvaluationError]
        """
        op: Operator = operators.pop()

        # Operator requires two operands
        if len(operands) < 2:
            return EvaluationError(
                kind=ErrorKind.INVALID_EXPRESSION,
                message=f"Invalid expression (not enough operands for '{op.value}')",
                token=op.value,
            )

        b: float = operands.pop()
        a: float = operands.pop()
        try:
            operands.append(op.apply(a, b))
        except ZeroDivisionError:
            return EvaluationError(
                kind=ErrorKind.DIVISION_BY_ZERO,
                message=f"Cannot divide by zero: {a} / {b}",
                token=op.value,
            )
        return None

    @staticmethod
    def _close_paren(operands: List[float], operators: List[StackEntry]) -> Optional[EvaluationError]:
        """Resolve operators back to the matching "(" and discard it."""
        while operators and operators[-1] != OPEN_PAREN:
            error = ExpressionEvaluator._apply_top(operands, operators)
            if error is not None:
                return error

        if not operators:
            return EvaluationError(
                kind=ErrorKind.MISMATCHED_PARENTHESES,
                message="Mismatched parentheses: ')' without matching '('",
                token=")",
            )

        operators.pop()
        return None

    @staticmethod
    def _push_operator(
        op: Operator, operands: List[float], operators: List[StackEntry]
    ) -> Optional[EvaluationError]:
        """Resolve pending operators of higher or equal precedence, then push op."""
        while (
            operators
            and operators[-1] != OPEN_PAREN
            and operators[-1].precedence >= op.precedence
        ):
            error = ExpressionEvaluator._apply_top(operands, operators)
            if error is not None:
                return error

        operators.append(op)
        return None

    @staticmethod
    def _flush(operands: List[float], operators: List[StackEntry]) -> Optional[EvaluationError]:
        """Apply every remaining operator, top of the stack first."""
        while operators:
            if operators[-1] == OPEN_PAREN:
                return EvaluationError(
                    kind=ErrorKind.MISMATCHED_PARENTHESES,
                    message="Mismatched parentheses: '(' is never closed",
                    token=OPEN_PAREN,
                )
            error = ExpressionEvaluator._apply_top(operands, operators)
            if error is not None:
                return error
        return None

    @staticmethod
    def _run(expr: str) -> Union[float, EvaluationError]:
        """Run the two-stack algorithm over the tokens of expr."""
        operands: List[float] = []
        operators: List[StackEntry] = []

        for fragment in tokenize(expr):
            token = classify(fragment)
            if isinstance(token, EvaluationError):
                return token

            error: Optional[EvaluationError] = None
            if token.kind is TokenKind.NUMBER:
                operands.append(token.value)
            elif token.kind is TokenKind.OPEN_PAREN:
                operators.append(OPEN_PAREN)
            elif token.kind is TokenKind.CLOSE_PAREN:
                error = ExpressionEvaluator._close_paren(operands, operators)
            else:
                op = OperatorRegistry.lookup(token.text)
                error = ExpressionEvaluator._push_operator(op, operands, operators)

            if error is not None:
                return error

        error = ExpressionEvaluator._flush(operands, operators)
        if error is not None:
            return error

        if len(operands) != 1 or operators:
            return EvaluationError(
                kind=ErrorKind.INVALID_EXPRESSION,
                message=f"Invalid expression ({len(operands)} values left instead of 1)",
            )

        return operands[0]

    @staticmethod
    def evaluate(expr: str) -> EvaluationResult:
        """
        Evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Result holding either the computed value or the error
        :rtype: EvaluationResult
        :raises TypeError: If expr is not a string
        """
        if not isinstance(expr, str):
            raise TypeError(f"Expression must be a string, got {type(expr).__name__}")

        logger.debug(f"🧮 Evaluating expression: {expr!r}")

        outcome = ExpressionEvaluator._run(expr)

        if isinstance(outcome, EvaluationError):
            logger.warning(f"🧮❌ {outcome.kind.value}: {outcome.message} in {expr!r}")
            return EvaluationResult(expression=expr, error=outcome)

        logger.debug(f"🧮✅ {expr!r} = {outcome}")
        return EvaluationResult(expression=expr, value=outcome)


def evaluate(expression: str) -> EvaluationResult:
    """
    Evaluate an arithmetic expression.

    Shortcut for ExpressionEvaluator.evaluate().

    :param str expression: Arithmetic expression string

    :return: Result holding either the computed value or the error
    :rtype: EvaluationResult
    """
    return ExpressionEvaluator.evaluate(expression)
