"""
Tests for SimpleCalculator: dispatch, assignment and end-to-end properties.
"""

import math

import pytest

from backend.simplecalc import Environment, ErrorKind, IllegalExpressionError, SimpleCalculator


@pytest.fixture
def calculator():
    return SimpleCalculator()


class TestEvaluate:
    """Tests for plain expressions."""

    def test_precedence(self, calculator):
        """Test that multiplication binds tighter than addition."""
        assert calculator.evaluate("1 + 2 * 3") == 7.0

    def test_parentheses_override_precedence(self, calculator):
        assert calculator.evaluate("(1 + 2) * 3") == 9.0

    def test_signed_and_fractional_numbers(self, calculator):
        """Test numbers with signs, fractions and exponents."""
        assert calculator.evaluate("-5 + 2") == -3.0
        assert calculator.evaluate("2 * -3") == -6.0
        assert calculator.evaluate("0.5 + .25") == 0.75
        assert calculator.evaluate("1e3 + 1") == 1001.0

    def test_no_rounding(self, calculator):
        assert calculator.evaluate("0.1 + 0.2") == 0.1 + 0.2

    def test_division_by_zero_is_not_an_error(self, calculator):
        assert calculator.evaluate("1 / 0") == math.inf
        assert math.isnan(calculator.evaluate("0 / 0"))

    def test_unassigned_variable_is_zero(self, calculator):
        """Test that an unassigned variable reads as zero."""
        assert calculator.evaluate("y + 1") == 1.0
        assert "y" not in calculator.environment


class TestAssignment:
    """Tests for assignment lines."""

    def test_assignment_then_use(self, calculator):
        """Test that an assigned value is visible on later lines."""
        assert calculator.evaluate("x = 2 + 3") == 5.0
        assert calculator.evaluate("x * 4") == 20.0

    def test_reassignment_uses_previous_value(self, calculator):
        calculator.evaluate("x = 5")
        assert calculator.evaluate("x = x + 1") == 6.0
        assert calculator.environment.get("x") == 6.0

    def test_lhs_is_trimmed(self, calculator):
        assert calculator.evaluate(" \tz  =7") == 7.0
        assert calculator.environment.get("z") == 7.0

    def test_shared_environment(self):
        """Test that a calculator can start from an existing environment."""
        env = Environment({"a": 2.0})
        calc = SimpleCalculator(environment=env)
        calc.evaluate("b = a * 10")
        assert env.get("b") == 20.0

    @pytest.mark.parametrize("line", ["1 = 2", "X = 2", "xy = 2", "= 2", "(x) = 2"])
    def test_bad_lhs(self, calculator, line):
        """Test that the target must be one lowercase letter."""
        with pytest.raises(IllegalExpressionError) as exc_info:
            calculator.evaluate(line)
        assert exc_info.value.kind == ErrorKind.BAD_ASSIGN_LHS

    def test_too_many_equals(self, calculator):
        """Test that chained assignment is illegal."""
        with pytest.raises(IllegalExpressionError) as exc_info:
            calculator.evaluate("a = b = 1")
        assert exc_info.value.kind == ErrorKind.TOO_MANY_EQUALS
        assert len(calculator.environment) == 0

    def test_empty_rhs(self, calculator):
        with pytest.raises(IllegalExpressionError) as exc_info:
            calculator.evaluate("x =")
        assert exc_info.value.kind == ErrorKind.EMPTY_EXPRESSION


class TestIllegalLines:
    """Tests for error totality."""

    @pytest.mark.parametrize("line,kind", [
        ("", ErrorKind.EMPTY_EXPRESSION),
        ("   ", ErrorKind.EMPTY_EXPRESSION),
        ("(1 + 2", ErrorKind.BAD_PAREN),
        ("1 + 2)", ErrorKind.BAD_PAREN),
        ("1+2", ErrorKind.BAD_TOKEN),
        ("1 ^ 2", ErrorKind.BAD_TOKEN),
        ("sin(1)", ErrorKind.BAD_TOKEN),
        ("1 +", ErrorKind.STACK_UNDERFLOW),
        ("1 2", ErrorKind.STACK_RESIDUE),
        ("x = (1 + 2", ErrorKind.BAD_PAREN),
        ("x = 1 2", ErrorKind.STACK_RESIDUE),
        ("x = y = 2", ErrorKind.TOO_MANY_EQUALS),
    ])
    def test_rejected_with_kind(self, calculator, line, kind):
        """Test that illegal lines raise the expected error kind."""
        with pytest.raises(IllegalExpressionError) as exc_info:
            calculator.evaluate(line)
        assert exc_info.value.kind == kind

    @pytest.mark.parametrize("line", ["x = (1 + 2", "X = 1", "x = y = 2", "1 = x", "x = 1 +"])
    def test_environment_unchanged(self, calculator, line):
        """Test that a failed line leaves the environment as it was."""
        calculator.evaluate("x = 1")
        before = calculator.environment.snapshot()
        with pytest.raises(IllegalExpressionError):
            calculator.evaluate(line)
        assert calculator.environment.snapshot() == before

    def test_illegal_expression_is_value_error(self, calculator):
        with pytest.raises(ValueError):
            calculator.evaluate("1 +")

    def test_lenient_residue(self):
        """Test that a non-strict calculator returns the last operand."""
        calc = SimpleCalculator(strict=False)
        assert calc.evaluate("1 2") == 2.0


class TestProperties:
    """Algebraic properties of the evaluator."""

    @pytest.mark.parametrize("line", [
        "1 + 2 * 3",
        "1  +  2 * 3",
        "\t1 +\t2\t*\t3\t",
        " 1 + 2    *   3 ",
    ])
    def test_whitespace_does_not_matter(self, calculator, line):
        assert calculator.evaluate(line) == 7.0

    @pytest.mark.parametrize("line", ["2 * 3 - 1", "(2 * 3) - 1", "((2 * 3)) - (1)", "(((2 * 3 - 1)))"])
    def test_redundant_parentheses(self, calculator, line):
        assert calculator.evaluate(line) == 5.0

    @pytest.mark.parametrize("a,b,c", [(10, 4, 3), (1, 2, 3), (8, 2, 2), (-3, 5, 0.5)])
    def test_left_associativity(self, calculator, a, b, c):
        """Test that - and / group to the left."""
        assert calculator.evaluate(f"{a} - {b} - {c}") == calculator.evaluate(f"({a} - {b}) - {c}")
        assert calculator.evaluate(f"{a} / {b} / {c}") == calculator.evaluate(f"({a} / {b}) / {c}")

    def test_left_associativity_differs_from_right(self, calculator):
        assert calculator.evaluate("10 - 4 - 3") != calculator.evaluate("10 - (4 - 3)")
        assert calculator.evaluate("8 / 2 / 2") != calculator.evaluate("8 / (2 / 2)")

    @pytest.mark.parametrize("a,b,c", [(1, 2, 3), (4, 0.5, -2), (7, 7, 7)])
    def test_precedence(self, calculator, a, b, c):
        assert calculator.evaluate(f"{a} + {b} * {c}") == calculator.evaluate(f"{a} + ({b} * {c})")
        assert calculator.evaluate(f"{a} * {b} + {c}") == calculator.evaluate(f"({a} * {b}) + {c}")

    @pytest.mark.parametrize("expression", ["a * 2 + b", "(a - b) / 4", "c", "3"])
    def test_assignment_returns_expression_value(self, expression):
        """Test that an assignment yields the value of its right-hand side."""
        seed = {"a": 1.5, "b": -2.0}
        expected = SimpleCalculator(Environment(seed)).evaluate(expression)
        assert SimpleCalculator(Environment(seed)).evaluate(f"v = {expression}") == expected


class TestPostfixOperations:
    """Tests for the postfix helpers."""

    def test_to_postfix(self, calculator):
        assert calculator.to_postfix("(1 + 2) * x") == "1 2 + x *"

    def test_evaluate_postfix_uses_environment(self, calculator):
        calculator.evaluate("x = 4")
        assert calculator.evaluate_postfix("1 2 + x *") == 12.0
