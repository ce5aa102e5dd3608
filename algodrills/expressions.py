"""Stack-based work on expressions: notation conversion, evaluation and checks."""

from __future__ import annotations

import operator
from typing import Callable, Dict, Iterable, List

_OPERATORS = frozenset("+-*/")
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def precedence(symbol: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    return _PRECEDENCE.get(symbol, -1)


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalpha()


def _convert(symbols: Iterable[str], opening: str, closing: str) -> str:
    stack: List[str] = []
    output: List[str] = []
    for symbol in symbols:
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == opening:
            stack.append(symbol)
        elif symbol == closing:
            while stack and stack[-1] != opening:
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) > precedence(symbol):
                output.append(stack.pop())
            stack.append(symbol)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single letters to postfix notation."""
    return _convert(expression, "(", ")")


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression over single letters to prefix notation."""
    return _convert(reversed(expression), ")", "(")[::-1]


def _truncating_division(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    return int(base**exponent)


_APPLY: Dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_division,
    "^": _power,
}


def _evaluate(symbols: Iterable[str], top_is_left: bool) -> int:
    stack: List[int] = []
    for symbol in symbols:
        if "0" <= symbol <= "9":
            stack.append(int(symbol))
            continue
        try:
            apply = _APPLY[symbol]
        except KeyError:
            raise ValueError(f"unknown operator {symbol!r}") from None
        if len(stack) < 2:
            raise ValueError(f"operator {symbol!r} is missing an operand")
        top = stack.pop()
        below = stack.pop()
        left, right = (top, below) if top_is_left else (below, top)
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands."""
    return _evaluate(expression, top_is_left=False)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands."""
    return _evaluate(reversed(expression), top_is_left=True)


def has_redundant_parentheses(expression: str) -> bool:
    """Tell whether some pair of parentheses encloses no operator."""
    stack: List[str] = []
    for symbol in expression:
        if symbol in _OPERATORS or symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            if not stack:
                raise ValueError("unbalanced parentheses")
            if stack[-1] == "(":
                return True
            while stack and stack[-1] in _OPERATORS:
                stack.pop()
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
    return False


def reverse_words(sentence: str) -> str:
    """Return the whitespace-separated words of ``sentence`` in reverse order."""
    return " ".join(reversed(sentence.split()))