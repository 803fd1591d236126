import pytest

from exprasm.icg import generate_3ac
from exprasm.lexer import tokenize
from exprasm.parser import Node, parse


def _tac(source):
    return generate_3ac(parse(tokenize(source)))


def test_none_root_gives_no_code():
    assert generate_3ac(None) == []


def test_single_leaf_gives_no_code():
    assert generate_3ac(Node("x")) == []


def test_assignment_of_sum():
    assert _tac("y = a + b") == ["t1 = a + b", "y = t1"]


def test_assignment_always_targets_y():
    code = _tac("z = a + b")
    assert code[-1].split()[0] == "y"
    assert code[-1].split()[1] == "="


def test_power_is_right_associative():
    assert _tac("a ^ b ^ c") == ["t1 = b ^ c", "t2 = a ^ t1"]


def test_unary_node():
    assert generate_3ac(Node("-", Node("a"))) == ["t1 = - a"]


def test_division_keeps_operand_order():
    code = _tac("a / b")
    assert len(code) == 1
    assert code[0].split()[2:] == ["a", "/", "b"]


def test_taylor_pattern_left_nested_product():
    code = _tac("2*x*y/(x+y)")
    assert len(code) == 1
    assert code[0].split()[2:] == ["TAYLOR", "x", "y"]


def test_taylor_pattern_with_swapped_sum():
    code = _tac("2*p*q/(q+p)")
    assert len(code) == 1
    assert code[0].split()[2:] == ["TAYLOR", "p", "q"]


def test_taylor_pattern_right_nested_product():
    tree = Node(
        "/",
        Node("*", Node("2"), Node("*", Node("x"), Node("y"))),
        Node("+", Node("y"), Node("x")),
    )
    code = generate_3ac(tree)
    assert len(code) == 1
    assert code[0].split()[2:] == ["TAYLOR", "x", "y"]


def test_taylor_pattern_requires_matching_sum():
    code = _tac("2*x*y/(x+z)")
    assert all("TAYLOR" not in line for line in code)
    assert code[-1].split()[3] == "/"


def test_taylor_pattern_requires_two():
    code = _tac("3*x*y/(x+y)")
    assert all("TAYLOR" not in line for line in code)


@pytest.mark.parametrize(
    "source", ["a + b * c - d", "(a + b) * (c - d) / e", "a ^ 2 + b ^ 2", "x * y - 2 * x"]
)
def test_temporaries_are_sequential_and_defined_before_use(source):
    code = _tac(source)
    dests = [line.split()[0] for line in code]
    assert dests == [f"t{n}" for n in range(1, len(code) + 1)]
    defined = set()
    for line in code:
        dest, _, *operands = line.split()
        for operand in operands:
            if operand in dests:
                assert operand in defined
        defined.add(dest)


def test_temporary_counter_restarts_for_each_call():
    first = _tac("a + b * c")
    second = _tac("a + b * c")
    assert first == second
    assert first[0].split()[0] == "t1"


def test_operator_appears_in_its_line():
    code = _tac("a - b")
    assert code[0].split()[2:] == ["a", "-", "b"]