import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from stackalgos.notation import (
    MalformedExpressionError,
    infix_to_postfix,
    infix_to_prefix,
    is_balanced,
    is_operand,
    postfix_to_infix,
    postfix_to_prefix,
    prefix_to_infix,
    prefix_to_postfix,
    print_string,
    priority,
)

OPERANDS = st.sampled_from("abcdxyzABC0123456789")
OPERATORS = st.sampled_from("+-*/^")

postfix_expressions = st.recursive(
    OPERANDS,
    lambda children: st.tuples(children, children, OPERATORS).map("".join),
    max_leaves=12,
)

balanced_brackets = st.recursive(
    st.just(""),
    lambda inner: st.one_of(
        st.tuples(st.sampled_from(["()", "[]", "{}"]), inner).map(
            lambda pair: pair[0][0] + pair[1] + pair[0][1]
        ),
        st.tuples(inner, inner).map("".join),
    ),
    max_leaves=10,
)


def test_infix_to_postfix_worked_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


def test_power_is_right_associative():
    assert infix_to_postfix("a^b^c") == "abc^^"


def test_infix_to_prefix_precedence():
    assert infix_to_prefix("a+b*c") == "+a*bc"


def test_operands_only_pass_through():
    assert infix_to_postfix("abc") == "abc"
    assert infix_to_prefix("xyz") == "xyz"


def test_priority_ordering():
    assert priority("^") > priority("*") == priority("/")
    assert priority("/") > priority("+") == priority("-")
    assert priority("+") > priority("a") == priority("(")


def test_is_operand():
    assert is_operand("a") and is_operand("Z") and is_operand("7")
    assert not is_operand("+")
    assert not is_operand("")
    assert not is_operand("ab")
    assert not is_operand("é")


@given(postfix_expressions)
def test_postfix_infix_round_trip(postfix):
    assert infix_to_postfix(postfix_to_infix(postfix)) == postfix


@given(postfix_expressions)
def test_postfix_prefix_round_trip(postfix):
    prefix = postfix_to_prefix(postfix)
    assert prefix_to_postfix(prefix) == postfix
    assert sorted(prefix) == sorted(postfix)


@given(postfix_expressions)
def test_infix_from_prefix_and_postfix_agree(postfix):
    assert prefix_to_infix(postfix_to_prefix(postfix)) == postfix_to_infix(postfix)


@given(postfix_expressions)
def test_infix_to_prefix_matches_postfix_route(postfix):
    assert infix_to_prefix(postfix_to_infix(postfix)) == postfix_to_prefix(postfix)


@pytest.mark.parametrize(
    "converter", [postfix_to_infix, postfix_to_prefix, prefix_to_infix, prefix_to_postfix]
)
@pytest.mark.parametrize("expression", ["", "+", "ab", "a+"])
def test_malformed_rebuild_raises(converter, expression):
    with pytest.raises(MalformedExpressionError):
        converter(expression)


@pytest.mark.parametrize("converter", [infix_to_postfix, infix_to_prefix])
@pytest.mark.parametrize("expression", ["(a+b", "a+b)", ")"])
def test_unmatched_parentheses_raise(converter, expression):
    with pytest.raises(MalformedExpressionError):
        converter(expression)


@pytest.mark.parametrize("text", ["", "()", "()[]{}", "{[()]}", "([]{})"])
def test_balanced(text):
    assert is_balanced(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "((", "(a)", "}{"])
def test_unbalanced(text):
    assert is_balanced(text) is False


@given(balanced_brackets)
def test_generated_brackets_balanced(text):
    assert is_balanced(text)
    assert not is_balanced(text + "(")
    assert not is_balanced(")" + text)


def test_print_string_to_buffer():
    buffer = io.StringIO()
    print_string("abc", file=buffer)
    assert buffer.getvalue() == "\nString is :abc\n"


def test_print_string_defaults_to_stdout(capsys):
    print_string("xyz")
    assert capsys.readouterr().out == "\nString is :xyz\n"