"""Arithmetic expression evaluator for the calculator tool.

Expressions are evaluated by a small interpreter instead of ``eval``:

    tokenize -> recursive-descent parse -> tree-walking evaluation

Grammar (lowest to highest precedence)::

    expr    := term (("+" | "-") term)*
    term    := unary (("*" | "/") unary)*
    unary   := ("-" | "+") (unary | primary) | power
    power   := primary ("**" unary)?
    primary := NUMBER | "(" expr ")"

``**`` is right-associative, so ``2**3**2 == 512``. A unary operator may not be
the left operand of ``**``: ``-2**2`` is a syntax error, ``(-2)**2`` is not.
``++``, ``--`` and integer literals with a leading zero (``08``) are rejected.
Arithmetic follows IEEE-754 doubles: division by zero produces an infinity or
NaN rather than raising.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

from chat_tools.errors import CalculatorNumericError, CalculatorSyntaxError, ToolError

logger = logging.getLogger(__name__)

# Anything outside digits, operators, parentheses, dot and whitespace is dropped
UNSAFE_CHARS = re.compile(r"[^0-9+\-*/().\s]")


class TokenType(Enum):
    """Lexical token kinds."""
    NUMBER = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    POWER = auto()
    LPAREN = auto()
    RPAREN = auto()
    EOF = auto()


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str
    position: int


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class UnaryOp:
    op: TokenType
    operand: "Node"


@dataclass(frozen=True)
class BinaryOp:
    op: TokenType
    left: "Node"
    right: "Node"


Node = Number | UnaryOp | BinaryOp


def sanitize_expression(expression: str) -> str:
    """Drop every character that cannot appear in an arithmetic expression."""
    return UNSAFE_CHARS.sub("", expression)


def tokenize(text: str) -> list[Token]:
    """Split an expression into tokens, ending with an EOF token.

    Raises:
        CalculatorSyntaxError: On characters or number literals that are
            not part of the grammar.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]

        if char.isspace():
            pos += 1
            continue

        if char == "*":
            if text.startswith("**", pos):
                tokens.append(Token(TokenType.POWER, "**", pos))
                pos += 2
            else:
                tokens.append(Token(TokenType.STAR, "*", pos))
                pos += 1
            continue

        if char in "+-" and text.startswith(char * 2, pos):
            raise CalculatorSyntaxError(f"Unexpected {char * 2!r} at {pos}")

        if char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(SINGLE_CHAR_TOKENS[char], char, pos))
            pos += 1
            continue

        if char.isdigit() or char == ".":
            end = _scan_number(text, pos)
            tokens.append(Token(TokenType.NUMBER, text[pos:end], pos))
            pos = end
            continue

        raise CalculatorSyntaxError(f"Unexpected character {char!r} at {pos}")

    tokens.append(Token(TokenType.EOF, "", length))
    return tokens


def _scan_number(text: str, pos: int) -> int:
    """Return the end offset of the number literal starting at ``pos``."""
    end = pos
    seen_dot = False
    seen_digit = False
    while end < len(text):
        char = text[end]
        if char == "." and not seen_dot:
            seen_dot = True
        elif "0" <= char <= "9":
            seen_digit = True
        else:
            break
        end += 1

    if not seen_digit:
        raise CalculatorSyntaxError(f"Malformed number at {pos}")
    integer_part = text[pos:end].split(".")[0]
    if len(integer_part) > 1 and integer_part.startswith("0"):
        raise CalculatorSyntaxError(f"Leading zero in number at {pos}")
    return end


class ExpressionParser:
    """Recursive-descent parser producing an expression tree."""

    def __init__(self, tokens: list[Token]):
        self._tokens = tokens
        self._index = 0

    @property
    def _current(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.type is not TokenType.EOF:
            self._index += 1
        return token

    def _expect(self, token_type: TokenType) -> Token:
        token = self._current
        if token.type is not token_type:
            raise CalculatorSyntaxError(
                f"Expected {token_type.name} at {token.position}, got {token.type.name}"
            )
        return self._advance()

    def parse(self) -> Node:
        node = self._expr()
        self._expect(TokenType.EOF)
        return node

    def _expr(self) -> Node:
        node = self._term()
        while self._current.type in (TokenType.PLUS, TokenType.MINUS):
            op = self._advance().type
            node = BinaryOp(op, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._unary()
        while self._current.type in (TokenType.STAR, TokenType.SLASH):
            op = self._advance().type
            node = BinaryOp(op, node, self._unary())
        return node

    def _unary(self) -> Node:
        if self._current.type in (TokenType.PLUS, TokenType.MINUS):
            token = self._advance()
            if self._current.type in (TokenType.PLUS, TokenType.MINUS):
                operand = self._unary()
            else:
                operand = self._primary()
            if self._current.type is TokenType.POWER:
                raise CalculatorSyntaxError(
                    f"Unary operator at {token.position} before ** needs parentheses"
                )
            return UnaryOp(token.type, operand)
        return self._power()

    def _power(self) -> Node:
        base = self._primary()
        if self._current.type is TokenType.POWER:
            self._advance()
            # Right operand goes back through unary so 2**-1 and 2**3**2 work
            return BinaryOp(TokenType.POWER, base, self._unary())
        return base

    def _primary(self) -> Node:
        token = self._current
        if token.type is TokenType.NUMBER:
            self._advance()
            return Number(float(token.text))
        if token.type is TokenType.LPAREN:
            self._advance()
            node = self._expr()
            self._expect(TokenType.RPAREN)
            return node
        raise CalculatorSyntaxError(
            f"Unexpected {token.type.name} at {token.position}"
        )


def evaluate(node: Node) -> float:
    """Walk an expression tree and compute its value."""
    if isinstance(node, Number):
        return node.value

    if isinstance(node, UnaryOp):
        operand = evaluate(node.operand)
        return -operand if node.op is TokenType.MINUS else operand

    left = evaluate(node.left)
    right = evaluate(node.right)
    if node.op is TokenType.PLUS:
        return left + right
    if node.op is TokenType.MINUS:
        return left - right
    if node.op is TokenType.STAR:
        return left * right
    if node.op is TokenType.SLASH:
        return _divide(left, right)
    return _power(left, right)


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _power(base: float, exponent: float) -> float:
    if math.isnan(exponent):
        return math.nan
    odd_exponent = exponent.is_integer() and exponent % 2 == 1
    if base == 0 and exponent < 0:
        return math.copysign(math.inf, base) if odd_exponent else math.inf
    negative = base < 0 and odd_exponent
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if negative else math.inf
    except ValueError:
        # Negative base with a fractional exponent
        return math.nan


def evaluate_expression(expression: str) -> float:
    """Sanitize, parse and evaluate an expression.

    Raises:
        CalculatorSyntaxError: The sanitized text is not a valid expression.
        CalculatorNumericError: The value is NaN or infinite.
    """
    sanitized = sanitize_expression(expression)
    try:
        tree = ExpressionParser(tokenize(sanitized)).parse()
        value = evaluate(tree)
    except RecursionError as e:
        raise CalculatorSyntaxError("Expression is nested too deeply") from e

    if not math.isfinite(value):
        raise CalculatorNumericError(f"{sanitized!r} evaluated to {value}")
    return value


def format_number(value: float) -> str:
    """Render a finite float as its canonical decimal string.

    Uses the shortest round-trip digits. Integral values have no fractional
    part; magnitudes at or above 1e21 or below 1e-6 use exponent notation.

    Example:
        >>> format_number(256.0)
        '256'
        >>> format_number(0.1 + 0.2)
        '0.30000000000000004'
        >>> format_number(1e21)
        '1e+21'
    """
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    prefix = "-" if sign else ""
    k = len(digits)
    # Position of the decimal point relative to the start of ``digits``
    n = k + exponent

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits

    exp = n - 1
    exp_str = f"e+{exp}" if exp >= 0 else f"e-{-exp}"
    if k == 1:
        return prefix + digits + exp_str
    return prefix + digits[0] + "." + digits[1:] + exp_str


def calculate_expression(expression: str) -> str:
    """Calculator tool handler.

    Args:
        expression: Raw expression text, e.g. ``"2**8"``.

    Returns:
        The formatted result, or an ``Error: ...`` string.
    """
    try:
        value = evaluate_expression(expression)
    except ToolError as e:
        logger.debug("Calculator rejected %r: %s", expression, e)
        return e.to_result()
    return format_number(value)
