"""Command-line calculator for two numbers and one arithmetic operator."""

from __future__ import annotations

import math
import operator
import re
import sys
from collections.abc import Callable, Sequence

PROG_NAME = "calculator"

_WHITESPACE = " \t\n\v\f\r"

_NUMBER_RE = re.compile(
    r"""
    [ \t\n\v\f\r]*
    [+-]?
    (?:
        0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?
      | (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?
      | inf(?:inity)?
      | nan(?:\([0-9a-z_]*\))?
    )
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class CalculatorError(ValueError):
    """Raised for invalid numbers, operators or arithmetic."""


def _mantissa_is_nonzero(literal: str) -> bool:
    body = literal.lstrip("+-").lower()
    if body.startswith("0x"):
        mantissa = body[2:].split("p", 1)[0]
    else:
        mantissa = body.split("e", 1)[0]
    return any(ch not in "0." for ch in mantissa)


def parse_number(text: str) -> float:
    """Parse a whole string as a floating-point number, strictly."""
    match = _NUMBER_RE.match(text)
    if match is None:
        raise CalculatorError(
            f"Invalid number provided. '{text}' is not a valid number."
        )
    rest = text[match.end():]
    if rest:
        raise CalculatorError(f"Trailing characters found after number: '{rest}'")

    literal = match.group(0).strip(_WHITESPACE)
    lowered = literal.lower()
    body = lowered.lstrip("+-")
    sign = -1.0 if lowered.startswith("-") else 1.0

    if body.startswith("inf"):
        return sign * math.inf
    if body.startswith("nan"):
        return math.copysign(math.nan, sign)

    try:
        value = float.fromhex(literal) if body.startswith("0x") else float(literal)
    except OverflowError:
        value = math.inf
    if math.isinf(value):
        raise CalculatorError(f"Number '{text}' is out of the representable range.")
    if abs(value) < sys.float_info.min and _mantissa_is_nonzero(literal):
        raise CalculatorError(f"Number '{text}' is out of the representable range.")
    return value


def calculate(num1: float, op: str, num2: float) -> float:
    """Apply the operator ``op`` (+, -, * or /) to the two operands."""
    if len(op) != 1:
        raise CalculatorError(
            f"Invalid operator '{op}'. Operator must be a single character: "
            "+, -, *, or /"
        )
    operation = _OPERATIONS.get(op)
    if operation is None:
        raise CalculatorError(
            f"Invalid operator '{op}'. Supported operators are +, -, *, /"
        )
    if op == "/" and num2 == 0:
        raise CalculatorError("Division by zero is not allowed.")
    return operation(num1, num2)


def format_number(value: float) -> str:
    """Format a number the way the ``%g`` conversion does."""
    return "%g" % value


def _usage(prog_name: str) -> str:
    return (
        f"Usage: {prog_name} <number1> <operator> <number2>\n"
        "  A simple command-line calculator.\n\n"
        "Arguments:\n"
        "  number1    The first number (integer or floating-point).\n"
        "  operator   One of the supported arithmetic operators: +, -, *, /.\n"
        "  number2    The second number (integer or floating-point).\n\n"
        "Example:\n"
        f'  {prog_name} 10.5 "*" 2\n'
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on ``number1 operator number2``; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        sys.stderr.write(_usage(PROG_NAME))
        return 1

    text1, op, text2 = args
    try:
        if len(op) != 1:
            calculate(0.0, op, 0.0)
        num1 = parse_number(text1)
        num2 = parse_number(text2)
        result = calculate(num1, op, num2)
    except CalculatorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(
        f"Result: {format_number(num1)} {op} {format_number(num2)} "
        f"= {format_number(result)}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())