"""
Input mapping for PocketCalc
Classifies key presses, button labels and API actions into engine operations
"""
from calculator import Operator

DIGITS = "0123456789"


class UnknownInputError(ValueError):
    """Raised when an action name or its value is not a calculator input"""


# action name -> Calculator method taking no argument
_SIMPLE_ACTIONS = {
    "equals": "calculate",
    "percent": "percent",
    "sqrt": "sqrt",
    "delete": "delete_last",
    "clear": "clear",
    "memory_add": "add_to_memory",
    "memory_subtract": "subtract_from_memory",
    "memory_recall": "recall_memory",
    "memory_clear": "clear_memory",
}

ACTIONS = ("digit", "operator", "point") + tuple(_SIMPLE_ACTIONS)

# Raw keys/labels that map to a fixed action
_KEY_ACTIONS = {
    ".": "point",
    "%": "percent",
    "=": "equals",
    "\r": "equals",
    "\n": "equals",
    "Return": "equals",
    "KP_Enter": "equals",
    "Enter": "equals",
    "BackSpace": "delete",
    "Backspace": "delete",
    "Delete": "delete",
    "⌫": "delete",
    "CE": "delete",
    "Escape": "clear",
    "C": "clear",
    "√": "sqrt",
    "r": "sqrt",
    "s": "sqrt",
    "M+": "memory_add",
    "M-": "memory_subtract",
    "MR": "memory_recall",
    "MC": "memory_clear",
}


def perform(calculator, action, value=None):
    """Run one named action on the calculator and return the display text"""
    if action == "digit":
        if not isinstance(value, str) or len(value) != 1 or value not in DIGITS:
            raise UnknownInputError(f"Invalid digit: {value!r}")
        return calculator.input_digit(value)

    if action == "operator":
        operator = Operator.from_symbol(value)
        if operator is None:
            raise UnknownInputError(f"Unknown operator: {value!r}")
        return calculator.set_operator(operator)

    if action == "point":
        return calculator.input_digit(".")

    if action not in _SIMPLE_ACTIONS:
        raise UnknownInputError(f"Unknown action: {action!r}")
    return getattr(calculator, _SIMPLE_ACTIONS[action])()


def classify_key(key):
    """Map a key character, keysym or button label to (action, value), or None"""
    if not key:
        return None
    if len(key) == 1 and key in DIGITS:
        return ("digit", key)
    if key in _KEY_ACTIONS:
        return (_KEY_ACTIONS[key], None)

    operator = Operator.from_symbol(key)
    # Enum names ("ADD") are for API callers, not keys
    if operator is not None and key != operator.name:
        return ("operator", operator)
    return None


def dispatch_key(calculator, key):
    """Handle a raw key; returns the new display text, None if not a calculator key"""
    classified = classify_key(key)
    if classified is None:
        return None
    action, value = classified
    return perform(calculator, action, value)
