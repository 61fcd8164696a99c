"""String algorithms: infix-to-postfix conversion and permutations."""

from __future__ import annotations

from collections.abc import Iterator

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "$": 3}
_RIGHT_ASSOCIATIVE = {"$"}
_SKIPPED = {" ", ","}


def _should_pop(top: str, incoming: str) -> bool:
    if _PRECEDENCE[top] == _PRECEDENCE[incoming]:
        return incoming not in _RIGHT_ASSOCIATIVE
    return _PRECEDENCE[top] > _PRECEDENCE[incoming]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operands are ASCII letters and digits; operators are ``+ - * /`` and
    ``$`` (exponentiation, right-associative). Spaces and commas are
    skipped, as is any other unrecognised character. Raises ValueError on
    mismatched parentheses.
    """
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char in _SKIPPED:
            continue
        if char in _PRECEDENCE:
            while stack and stack[-1] != "(" and _should_pop(stack[-1], char):
                output.append(stack.pop())
            stack.append(char)
        elif char.isascii() and char.isalnum():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
    while stack:
        top = stack.pop()
        if top == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(top)
    return "".join(output)


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of text's characters, generated by swapping.

    Repeated characters give repeated results.
    """
    chars = list(text)

    def walk(i: int) -> Iterator[str]:
        if i == len(chars):
            yield "".join(chars)
            return
        for j in range(i, len(chars)):
            chars[i], chars[j] = chars[j], chars[i]
            yield from walk(i + 1)
            chars[i], chars[j] = chars[j], chars[i]

    yield from walk(0)