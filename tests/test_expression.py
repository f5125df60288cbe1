import pytest

from treekit.expression import ExprNode, evaluate, example_tree, main


def _op(token, a, b):
    return ExprNode(token, ExprNode(str(a)), ExprNode(str(b)))


def test_example_tree_value():
    assert evaluate(example_tree()) == 10


def test_leaf_is_parsed():
    assert evaluate(ExprNode("42")) == 42
    assert evaluate(ExprNode("-8")) == -8


@pytest.mark.parametrize("token", ["+", "*"])
def test_commutative_operators(token):
    assert evaluate(_op(token, 17, 5)) == evaluate(_op(token, 5, 17))


def test_subtraction_antisymmetric():
    assert evaluate(_op("-", 17, 5)) == -evaluate(_op("-", 5, 17))


def test_division_truncates_toward_zero():
    assert evaluate(_op("/", -7, 2)) == -3


def test_division_inverts_multiplication():
    product = evaluate(_op("*", 6, 9))
    assert evaluate(_op("/", product, 9)) == 6


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate(_op("/", 1, 0))


def test_invalid_operator():
    with pytest.raises(ValueError, match="Operador inválido: %"):
        evaluate(_op("%", 1, 2))


def test_missing_operand():
    with pytest.raises(ValueError):
        evaluate(ExprNode("+", ExprNode("1"), None))


def test_non_numeric_leaf():
    with pytest.raises(ValueError):
        evaluate(ExprNode("abc"))


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Resultado da expressão: 10\n"