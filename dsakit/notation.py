"""Conversions between infix, postfix and prefix arithmetic notation.

Operands are single ASCII letters or digits. The binary operators are
``+ - * / ^``. ``^`` binds tightest and is right-associative. ``*`` and
``/`` come next, then ``+`` and ``-``, all of which are left-associative.
"""

from collections.abc import Callable, Iterable

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_LEFT_ASSOCIATIVE = frozenset("+-*/")
OPERATORS = frozenset(_PRECEDENCE)


def is_operand(ch: str) -> bool:
    """Return True if *ch* is a single ASCII letter or digit."""
    return len(ch) == 1 and ch.isascii() and ch.isalnum()


def is_operator(ch: str) -> bool:
    """Return True if *ch* is one of the binary operators."""
    return ch in OPERATORS


def _precedence(ch: str) -> int:
    return _PRECEDENCE.get(ch, 0)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix (reverse Polish) notation."""
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while True:
                if not stack:
                    raise ValueError("unbalanced ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        else:
            rank = _precedence(ch)
            while stack and rank < _precedence(stack[-1]):
                output.append(stack.pop())
            if (
                stack
                and rank == _precedence(stack[-1])
                and ch in _LEFT_ASSOCIATIVE
            ):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def _reduce(symbols: Iterable[str], build: Callable[[str, str, str], str]) -> str:
    """Fold a stream of symbols with a stack, combining two operands per operator."""
    stack: list[str] = []
    for ch in symbols:
        if is_operator(ch):
            if len(stack) < 2:
                raise ValueError(f"operator {ch!r} lacks two operands")
            first = stack.pop()
            second = stack.pop()
            stack.append(build(ch, first, second))
        else:
            stack.append(ch)
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def postfix_to_prefix(expression: str) -> str:
    """Convert a postfix expression to prefix notation."""
    return _reduce(expression, lambda op, right, left: op + left + right)


def prefix_to_infix(expression: str) -> str:
    """Convert a prefix expression to a fully parenthesised infix expression."""
    return _reduce(
        reversed(expression), lambda op, left, right: f"({left}{op}{right})"
    )


def prefix_to_postfix(expression: str) -> str:
    """Convert a prefix expression to postfix notation."""
    return _reduce(reversed(expression), lambda op, left, right: left + right + op)