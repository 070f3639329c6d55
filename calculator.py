"""
Calculator Engine for PocketCalc
Handles keypad input and left-to-right evaluation with one pending operator
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import config
from display import format_number, is_error_sentinel, parse_operand


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self):
        """Symbol shown to the user"""
        return _DISPLAY_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, op):
        """Resolve '+', '−', '×', 'DIVIDE', ... to an Operator, None if unknown"""
        if isinstance(op, cls):
            return op
        if not isinstance(op, str):
            return None
        for member in cls:
            if op in (member.value, member.symbol, member.name):
                return member
        return None

    def apply(self, a, b):
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUBTRACT:
            return a - b
        if self is Operator.MULTIPLY:
            return a * b
        return a / b


_DISPLAY_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "−",
    Operator.MULTIPLY: "×",
    Operator.DIVIDE: "÷",
}


class EngineState(Enum):
    IDLE = "idle"
    AWAITING_OPERAND = "awaiting_operand"


@dataclass
class CalculatorState:
    """Everything the engine knows; the display doubles as the entry buffer"""
    display_text: str = "0"
    first_operand: Optional[float] = None
    pending_operator: Optional[Operator] = None
    is_next_input_fresh: bool = True
    memory: float = 0.0


class Calculator:
    def __init__(self, state=None):
        self.state = state if state is not None else CalculatorState()
        self._result_listeners = []

    # ── Read-only views ───────────────────────────────────────────────────
    @property
    def display_text(self):
        return self.state.display_text

    @property
    def engine_state(self):
        if self.state.pending_operator is None:
            return EngineState.IDLE
        return EngineState.AWAITING_OPERAND

    @property
    def has_memory(self):
        return self.state.memory != 0

    def add_result_listener(self, callback):
        """Call ``callback(expression, result)`` after every completed calculation"""
        self._result_listeners.append(callback)

    # ── Input operations ──────────────────────────────────────────────────
    def input_digit(self, digit):
        """Add a digit or decimal point to the number being entered"""
        state = self.state
        if is_error_sentinel(state.display_text) or state.is_next_input_fresh:
            state.display_text = "0." if digit == "." else digit
            state.is_next_input_fresh = False
        elif digit == "." and "." in state.display_text:
            pass
        else:
            state.display_text += digit
        return state.display_text

    def clear(self):
        """Reset display and pending operation (memory is kept)"""
        self.state.display_text = "0"
        self._reset_core_state()
        return self.state.display_text

    def delete_last(self):
        """Remove the last character of the display (backspace)"""
        state = self.state
        if is_error_sentinel(state.display_text):
            return self.clear()

        state.display_text = state.display_text[:-1]
        if state.display_text in ("", "-"):
            state.display_text = "0"
            state.is_next_input_fresh = True
        return state.display_text

    def set_operator(self, op):
        """Select the pending operator, folding in any finished operation first"""
        operator = Operator.from_symbol(op)
        if operator is None:
            return self.state.display_text

        state = self.state
        current = parse_operand(state.display_text)

        if math.isnan(current) and state.display_text != "0":
            if not is_error_sentinel(state.display_text):
                state.display_text = config.ERROR_TEXT
            self._reset_core_state()
            return state.display_text

        # Fresh flag still set means the user pressed two operators in a row:
        # the new one replaces the pending one without evaluating
        if (state.pending_operator is not None and state.first_operand is not None
                and not state.is_next_input_fresh):
            self.calculate()
            state.first_operand = parse_operand(state.display_text)
            if math.isnan(state.first_operand):
                self._reset_core_state()
                return state.display_text
        elif not math.isnan(current):
            state.first_operand = current

        state.pending_operator = operator
        state.is_next_input_fresh = True
        return state.display_text

    def calculate(self):
        """Apply the pending operator to the stored and displayed operands (=)"""
        state = self.state
        second = parse_operand(state.display_text)
        operator = state.pending_operator
        first = state.first_operand

        if operator is None or first is None or math.isnan(second):
            return state.display_text

        if operator is Operator.DIVIDE and second == 0:
            state.display_text = config.DIVIDE_BY_ZERO_TEXT
            self._reset_core_state()
            return state.display_text

        result = operator.apply(first, second)
        state.display_text = format_number(result)
        state.first_operand = result
        state.pending_operator = None
        state.is_next_input_fresh = True

        expression = f"{format_number(first)} {operator.symbol} {format_number(second)}"
        for callback in self._result_listeners:
            callback(expression, state.display_text)
        return state.display_text

    def sqrt(self):
        """Square root of the displayed number"""
        state = self.state
        value = parse_operand(state.display_text)
        if math.isnan(value):
            if not is_error_sentinel(state.display_text):
                state.display_text = config.ERROR_TEXT
        elif value < 0:
            state.display_text = config.ERROR_TEXT
        else:
            state.display_text = format_number(math.sqrt(value))
        self._reset_core_state()
        return state.display_text

    def percent(self):
        """X % -> X/100;  A op B % -> A op (A*B/100)"""
        state = self.state
        value = parse_operand(state.display_text)
        if math.isnan(value):
            if not is_error_sentinel(state.display_text):
                state.display_text = config.ERROR_TEXT
            return state.display_text

        if state.pending_operator is not None and state.first_operand is not None:
            state.display_text = format_number(state.first_operand * value / 100)
            return self.calculate()

        state.display_text = format_number(value / 100)
        self._reset_core_state()
        return state.display_text

    # ── Memory register ───────────────────────────────────────────────────
    def add_to_memory(self):
        """Add the displayed number to memory (M+)"""
        value = parse_operand(self.state.display_text)
        if not math.isnan(value):
            self.state.memory += value
        self.state.is_next_input_fresh = True
        return self.state.display_text

    def subtract_from_memory(self):
        """Subtract the displayed number from memory (M-)"""
        value = parse_operand(self.state.display_text)
        if not math.isnan(value):
            self.state.memory -= value
        self.state.is_next_input_fresh = True
        return self.state.display_text

    def recall_memory(self):
        """Show the memory value (MR)"""
        self.state.display_text = format_number(self.state.memory)
        self.state.is_next_input_fresh = True
        return self.state.display_text

    def clear_memory(self):
        """Clear memory (MC)"""
        self.state.memory = 0.0
        return self.state.display_text

    def _reset_core_state(self):
        self.state.first_operand = None
        self.state.pending_operator = None
        self.state.is_next_input_fresh = True
