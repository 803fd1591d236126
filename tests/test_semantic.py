import pytest

from exprasm.lexer import tokenize
from exprasm.parser import Node, parse
from exprasm.semantic import (
    SemanticError,
    check_semantic_errors,
    collect_declared_variables,
    semantic_check,
)


def _parse(code):
    return parse(tokenize(code))


def test_collect_variables():
    assert collect_declared_variables(_parse("y = x + 2")) == {"x", "y"}


def test_collect_ignores_numbers():
    assert collect_declared_variables(_parse("2 * 3")) == set()


def test_collect_none_is_empty():
    assert collect_declared_variables(None) == set()


def test_collect_ignores_empty_leaf():
    assert collect_declared_variables(Node("")) == set()


def test_collect_deduplicates():
    assert collect_declared_variables(_parse("x * x + x")) == {"x"}


def test_division_by_zero_detected():
    with pytest.raises(SemanticError, match="Division by zero"):
        semantic_check(_parse("y = x / 0"))


def test_nested_division_by_zero_detected():
    with pytest.raises(SemanticError, match="Division by zero"):
        semantic_check(_parse("y = (a + b / 0) * c"))


def test_undeclared_variable_reported():
    with pytest.raises(SemanticError, match="Undeclared variable used -> b"):
        check_semantic_errors(_parse("a + b"), {"a"})


def test_division_by_zero_found_before_undeclared():
    with pytest.raises(SemanticError, match="Division by zero"):
        check_semantic_errors(_parse("a / 0"), set())


def test_left_variable_reported_first():
    with pytest.raises(SemanticError, match="-> a"):
        check_semantic_errors(_parse("a + b"), set())


def test_semantic_error_is_value_error():
    with pytest.raises(ValueError):
        semantic_check(Node("/", Node("x"), Node("0")))