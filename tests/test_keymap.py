"""
Tests for key and action mapping
"""
import pytest

from calculator import Calculator, Operator
from keymap import UnknownInputError, classify_key, dispatch_key, perform


@pytest.mark.parametrize(
    "key,expected",
    [
        ("7", ("digit", "7")),
        (".", ("point", None)),
        ("+", ("operator", Operator.ADD)),
        ("-", ("operator", Operator.SUBTRACT)),
        ("*", ("operator", Operator.MULTIPLY)),
        ("/", ("operator", Operator.DIVIDE)),
        ("×", ("operator", Operator.MULTIPLY)),
        ("÷", ("operator", Operator.DIVIDE)),
        ("−", ("operator", Operator.SUBTRACT)),
        ("%", ("percent", None)),
        ("=", ("equals", None)),
        ("Return", ("equals", None)),
        ("\r", ("equals", None)),
        ("BackSpace", ("delete", None)),
        ("⌫", ("delete", None)),
        ("Escape", ("clear", None)),
        ("C", ("clear", None)),
        ("√", ("sqrt", None)),
        ("M+", ("memory_add", None)),
        ("MR", ("memory_recall", None)),
    ],
)
def test_classify_key(key, expected):
    assert classify_key(key) == expected


@pytest.mark.parametrize("key", ["", "x", "Shift_L", "ADD", "12", "F1"])
def test_classify_ignores_non_calculator_keys(key):
    assert classify_key(key) is None


def test_dispatch_key_sequence():
    calc = Calculator()
    for key in ["1", "2", "+", "8", "Return"]:
        dispatch_key(calc, key)
    assert calc.display_text == "20"


def test_dispatch_unknown_key_returns_none():
    calc = Calculator()
    dispatch_key(calc, "5")
    assert dispatch_key(calc, "Shift_L") is None
    assert calc.display_text == "5"


def test_perform_named_actions():
    calc = Calculator()
    perform(calc, "digit", "9")
    perform(calc, "operator", "ADD")
    perform(calc, "digit", "1")
    assert perform(calc, "equals") == "10"
    perform(calc, "memory_add")
    perform(calc, "clear")
    assert perform(calc, "memory_recall") == "10"
    perform(calc, "point")
    assert calc.display_text == "0."


@pytest.mark.parametrize(
    "action,value",
    [
        ("digit", None),
        ("digit", "12"),
        ("digit", "a"),
        ("operator", "^"),
        ("operator", None),
        ("explode", None),
        (None, None),
    ],
)
def test_perform_rejects_bad_input(action, value):
    with pytest.raises(UnknownInputError):
        perform(Calculator(), action, value)
