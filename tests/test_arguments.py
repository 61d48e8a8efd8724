from __future__ import annotations

import pytest

from fx_cur.arguments import TokenKind, classify_token, interpret, parse_amount
from fx_cur.ingestion.models import ConversionRequest


@pytest.mark.parametrize(
    "token, kind",
    [
        ("10", TokenKind.AMOUNT),
        ("1,000.50", TokenKind.AMOUNT),
        ("1_000", TokenKind.AMOUNT),
        ("-3.5", TokenKind.AMOUNT),
        ("to", TokenKind.CONNECTOR),
        ("AS", TokenKind.CONNECTOR),
        ("in", TokenKind.CONNECTOR),
        ("usd", TokenKind.CURRENCY),
        ("Eur", TokenKind.CURRENCY),
        ("-l", TokenKind.LONG_FLAG),
        ("--long", TokenKind.LONG_FLAG),
        ("-c", TokenKind.LIST_FLAG),
        ("--currencies", TokenKind.LIST_FLAG),
        ("--list", TokenKind.LIST_FLAG),
        ("-h", TokenKind.HELP_FLAG),
        ("--help", TokenKind.HELP_FLAG),
        ("xyz", TokenKind.INVALID),
        ("nan", TokenKind.INVALID),
        ("inf", TokenKind.INVALID),
        ("", TokenKind.INVALID),
    ],
)
def test_classify_token(token: str, kind: TokenKind) -> None:
    assert classify_token(token).kind is kind


def test_currency_tokens_are_normalised_to_upper_case() -> None:
    assert classify_token("jpy").currency == "JPY"


def test_parse_amount_strips_separators() -> None:
    assert parse_amount("12,345.6") == 12345.6
    assert parse_amount("1_000_000") == 1_000_000.0
    assert parse_amount("ten") is None


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["usd", "eur"], ConversionRequest("USD", "EUR", 1.0)),
        (["usd", "to", "eur"], ConversionRequest("USD", "EUR", 1.0)),
        (["usd", "eur", "5"], ConversionRequest("USD", "EUR", 5.0)),
        (["usd", "in", "eur", "5"], ConversionRequest("USD", "EUR", 5.0)),
        (["5", "usd", "eur"], ConversionRequest("USD", "EUR", 5.0)),
        (["1,250", "gbp", "as", "chf"], ConversionRequest("GBP", "CHF", 1250.0)),
    ],
)
def test_interpret_accepted_shapes(tokens: list[str], expected: ConversionRequest) -> None:
    assert interpret(tokens) == expected


@pytest.mark.parametrize(
    "tokens",
    [
        [],
        ["usd"],
        ["5", "10"],
        ["5", "usd"],
        ["usd", "eur", "gbp"],
        ["to", "usd", "eur"],
        ["usd", "eur", "to"],
        ["5", "usd", "eur", "10"],
        ["usd", "eur", "5", "6"],
        ["usd", "xyz"],
        ["usd", "to", "to", "eur"],
    ],
)
def test_interpret_rejects_other_shapes(tokens: list[str]) -> None:
    assert interpret(tokens) is None


def test_interpret_carries_long_output_flag() -> None:
    request = interpret(["usd", "eur"], long_output=True)

    assert request is not None
    assert request.long_output is True
