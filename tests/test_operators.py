"""Test class OperatorRegistry and enum Operator."""
import pytest

from expression_evaluator.common.operators import OPERATORS, Operator, OperatorRegistry


@pytest.mark.parametrize("symbol,expected", [
    ("+", Operator.ADD),
    ("-", Operator.SUB),
    ("*", Operator.MUL),
    ("/", Operator.DIV),
    (" * ", Operator.MUL),
])
def test_lookup_known_symbols(symbol, expected):
    """lookup returns the operator for every supported symbol."""
    assert OperatorRegistry.lookup(symbol) is expected


@pytest.mark.parametrize("symbol", ["(", ")", "^", "%", "x", "", "12", "++"])
def test_lookup_unknown_symbols(symbol):
    """lookup reports unknown symbols as None instead of raising."""
    assert OperatorRegistry.lookup(symbol) is None
    assert OperatorRegistry.is_operator(symbol) is False


def test_lookup_ignores_case():
    """Lookup normalizes case, which leaves non-alphabetic symbols unchanged."""
    for op in Operator:
        assert OperatorRegistry.lookup(op.value.upper()) is op
        assert OperatorRegistry.lookup(op.value.lower()) is op


@pytest.mark.parametrize("symbol,expected", [
    ("+", 1),
    ("-", 1),
    ("*", 2),
    ("/", 2),
    ("(", 0),
    ("abc", 0),
])
def test_precedence(symbol, expected):
    """Multiplication and division bind tighter; non-operators rank 0."""
    assert OperatorRegistry.precedence(symbol) == expected


@pytest.mark.parametrize("symbol,a,b,expected", [
    ("+", 1.5, 2.0, 3.5),
    ("-", 1.0, 3.0, -2.0),
    ("*", 2.5, 4.0, 10.0),
    ("/", 7.0, 2.0, 3.5),
])
def test_apply(symbol, a, b, expected):
    """apply computes operand1 <op> operand2 in that order."""
    assert OperatorRegistry.apply(symbol, a, b) == expected


@pytest.mark.parametrize("a,b", [(5.0, 0.0), (-5.0, 0.0), (0.0, 0.0), (5.0, -0.0)])
def test_division_by_zero_raises(a, b):
    """Division fails for an exactly-zero divisor, whatever the signs."""
    with pytest.raises(ZeroDivisionError):
        Operator.DIV.apply(a, b)


def test_apply_unknown_symbol():
    """Applying something that is not an operator raises ValueError."""
    with pytest.raises(ValueError):
        OperatorRegistry.apply("^", 2.0, 3.0)


def test_operator_table_is_closed():
    """Every operator has an entry and there are exactly four of them."""
    assert set(OPERATORS) == set(Operator)
    assert len(OPERATORS) == 4
