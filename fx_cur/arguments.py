"""Classify command line tokens and match them against accepted shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from fx_cur.ingestion.models import ConversionRequest
from fx_cur.utils.currencies import is_connector, is_supported_currency


class TokenKind(str, Enum):
    AMOUNT = "amount"
    CONNECTOR = "connector"
    CURRENCY = "currency"
    LONG_FLAG = "long"
    LIST_FLAG = "list"
    HELP_FLAG = "help"
    INVALID = "invalid"


LONG_FLAGS = frozenset({"-l", "--long"})
LIST_FLAGS = frozenset({"-c", "--currencies", "--list"})
HELP_FLAGS = frozenset({"-h", "--help"})


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    amount: float | None = None
    currency: str | None = None


def parse_amount(text: str) -> float | None:
    """Parse ``1,000.5`` or ``1_000.5`` style numbers; None when not a number."""

    cleaned = text.replace(",", "").replace("_", "")
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def classify_token(text: str) -> Token:
    """Return the single kind ``text`` belongs to."""

    if text in HELP_FLAGS:
        return Token(TokenKind.HELP_FLAG, text)
    if text in LIST_FLAGS:
        return Token(TokenKind.LIST_FLAG, text)
    if text in LONG_FLAGS:
        return Token(TokenKind.LONG_FLAG, text)
    amount = parse_amount(text)
    if amount is not None:
        return Token(TokenKind.AMOUNT, text, amount=amount)
    if is_connector(text):
        return Token(TokenKind.CONNECTOR, text)
    if is_supported_currency(text):
        return Token(TokenKind.CURRENCY, text, currency=text.upper())
    return Token(TokenKind.INVALID, text)


_C = TokenKind.CURRENCY
_K = TokenKind.CONNECTOR
_A = TokenKind.AMOUNT

ACCEPTED_SHAPES: tuple[tuple[TokenKind, ...], ...] = (
    (_C, _C),
    (_C, _K, _C),
    (_C, _C, _A),
    (_C, _K, _C, _A),
    (_A, _C, _C),
    (_A, _C, _K, _C),
)


def interpret(tokens: Sequence[str], *, long_output: bool = False) -> ConversionRequest | None:
    """Build a request from positional tokens, or None for any other shape."""

    classified = [classify_token(token) for token in tokens]
    shape = tuple(token.kind for token in classified)
    if shape not in ACCEPTED_SHAPES:
        return None

    currencies = [token.currency for token in classified if token.kind is _C]
    amounts = [token.amount for token in classified if token.kind is _A]
    source, destination = currencies
    return ConversionRequest(
        source=source,
        destination=destination,
        amount=amounts[0] if amounts else 1.0,
        long_output=long_output,
    )


__all__ = [
    "ACCEPTED_SHAPES",
    "Token",
    "TokenKind",
    "classify_token",
    "interpret",
    "parse_amount",
]
