import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.notation import (
    infix_to_postfix,
    is_operand,
    is_operator,
    postfix_to_prefix,
    prefix_to_infix,
    prefix_to_postfix,
)

_LEAVES = st.sampled_from(list("abcdefxyz0123456789"))
_OPS = st.sampled_from(list("+-*/^"))


def _tree_to_postfix(tree):
    if isinstance(tree, str):
        return tree
    op, left, right = tree
    return _tree_to_postfix(left) + _tree_to_postfix(right) + op


_TREES = st.recursive(
    _LEAVES,
    lambda children: st.tuples(_OPS, children, children),
    max_leaves=12,
)
_POSTFIX = _TREES.map(_tree_to_postfix)


@pytest.mark.parametrize("ch", ["a", "Z", "0", "9"])
def test_operands_recognised(ch):
    assert is_operand(ch) is True
    assert is_operator(ch) is False


@pytest.mark.parametrize("ch", ["+", "-", "*", "/", "^"])
def test_operators_recognised(ch):
    assert is_operator(ch) is True
    assert is_operand(ch) is False


@pytest.mark.parametrize("ch", ["(", " ", "é", ""])
def test_other_characters_are_neither(ch):
    assert is_operand(ch) is False
    assert is_operator(ch) is False


def test_documented_examples():
    assert infix_to_postfix("a+b*c") == "abc*+"
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_mixed_expression():
    assert infix_to_postfix("a+b*c-(d/e^f)*g") == "abc*+def^/g*-"


def test_left_associativity():
    assert infix_to_postfix("a-b-c") == infix_to_postfix("(a-b)-c")
    assert infix_to_postfix("a/b*c") == infix_to_postfix("(a/b)*c")


def test_right_associativity_of_power():
    assert infix_to_postfix("a^b^c") == infix_to_postfix("a^(b^c)")
    assert infix_to_postfix("a^b^c") != infix_to_postfix("(a^b)^c")


def test_single_operand_is_unchanged():
    assert infix_to_postfix("x") == "x"
    assert postfix_to_prefix("x") == "x"
    assert prefix_to_infix("x") == "x"
    assert prefix_to_postfix("x") == "x"


def test_unbalanced_close_paren_raises():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")


@pytest.mark.parametrize("func", [postfix_to_prefix, prefix_to_infix, prefix_to_postfix])
def test_empty_expression_raises(func):
    with pytest.raises(ValueError):
        func("")


def test_missing_operand_raises():
    with pytest.raises(ValueError):
        postfix_to_prefix("a+")
    with pytest.raises(ValueError):
        prefix_to_postfix("+a")
    with pytest.raises(ValueError):
        prefix_to_infix("*a")


@given(_POSTFIX)
def test_postfix_prefix_round_trip(postfix):
    prefix = postfix_to_prefix(postfix)
    assert prefix_to_postfix(prefix) == postfix
    assert len(prefix) == len(postfix)
    assert sorted(prefix) == sorted(postfix)


@given(_POSTFIX)
def test_parenthesised_infix_round_trip(postfix):
    infix = prefix_to_infix(postfix_to_prefix(postfix))
    assert infix_to_postfix(infix) == postfix


@given(_POSTFIX)
def test_infix_keeps_operand_order(postfix):
    infix = prefix_to_infix(postfix_to_prefix(postfix))
    operands = [ch for ch in infix if is_operand(ch)]
    assert operands == [ch for ch in postfix if is_operand(ch)]
    assert infix.count("(") == infix.count(")")
    assert infix.count("(") == sum(is_operator(ch) for ch in postfix)