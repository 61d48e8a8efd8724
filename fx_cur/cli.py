"""Convert between currencies using the ECB daily reference rates.

Examples:
    fx-cur usd eur
    fx-cur 100 gbp to jpy
    fx-cur chf in sek 1_250.50 --long
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence, TextIO

from fx_cur.arguments import interpret
from fx_cur.cache.file_store import RateCache
from fx_cur.config import Settings
from fx_cur.engine import ConversionEngine
from fx_cur.errors import FxCurError, UsageError
from fx_cur.ingestion.ecb_requests import ECBRequestsClient
from fx_cur.ingestion.strategy import RateSource
from fx_cur.utils.currencies import CONNECTORS, SORTED_CURRENCIES
from fx_cur.utils.formatting import format_conversion
from fx_cur.utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)

USAGE = "fx-cur [-h] [-c] [-l] [-v] [AMOUNT] CUR [to|as|in] CUR [AMOUNT]"

__all__ = ["build_engine", "build_parser", "main", "parse_args"]


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports problems as :class:`UsageError`."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="fx-cur",
        usage=USAGE,
        description=__doc__,
        epilog=f"Connectors (optional, ignored): {', '.join(CONNECTORS)}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        metavar="TOKEN",
        help="An optional amount and two currency codes, in either order",
    )
    parser.add_argument(
        "-l",
        "--long",
        dest="long_output",
        action="store_true",
        help="Print '<amount> <CUR> is <amount> <CUR>' instead of a bare number",
    )
    parser.add_argument(
        "-c",
        "--currencies",
        "--list",
        dest="list_currencies",
        action="store_true",
        help="List the supported currency codes and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log cache and network activity to stderr",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    # Flags may sit between positional tokens (``usd -l eur 5``).
    return build_parser().parse_intermixed_args(argv)


def build_engine(settings: Settings, client: RateSource) -> ConversionEngine:
    """Wire the file cache configured by ``settings`` to ``client``."""

    return ConversionEngine(RateCache(settings.cache_path), client)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    out = stdout or sys.stdout
    err = stderr or sys.stderr

    try:
        args = parse_args(argv)
    except UsageError as exc:
        print(f"Incorrect usage: {exc}", file=err)
        return 2

    if args.verbose:
        set_level("DEBUG")

    if args.list_currencies:
        for code in SORTED_CURRENCIES:
            print(code, file=out)
        return 0

    request = interpret(args.tokens, long_output=args.long_output)
    if request is None:
        print(f"Incorrect usage! Expected: {USAGE}", file=err)
        return 2

    try:
        settings = Settings.from_env()
        if not args.verbose:
            set_level(settings.log_level)
        with ECBRequestsClient(url=settings.source_url, timeout=settings.timeout) as client:
            result = build_engine(settings, client).convert(request)
    except (FxCurError, ValueError) as exc:
        LOGGER.debug("Conversion failed", exc_info=True)
        print(f"error: {exc}", file=err)
        return 1

    print(
        format_conversion(
            request.amount,
            request.source,
            result.converted,
            request.destination,
            long_output=request.long_output,
        ),
        file=out,
    )
    return 0
