"""Parse the ECB ``eurofxref`` XML into a :class:`RateDocument`."""

from __future__ import annotations

from datetime import date, datetime

from bs4 import BeautifulSoup
from lxml import etree

from fx_cur.errors import RateParseError
from fx_cur.ingestion.models import RateDocument, RateTable
from fx_cur.utils.currencies import BASE_CURRENCY
from fx_cur.utils.logger import get_logger

LOGGER = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise RateParseError(f"Invalid publication date {value!r}") from exc


def _parse_rate(currency: str, value: str | None) -> float:
    if value is None:
        raise RateParseError(f"Missing rate for {currency}")
    try:
        rate = float(value)
    except ValueError as exc:
        raise RateParseError(f"Invalid rate {value!r} for {currency}") from exc
    if not rate > 0:
        raise RateParseError(f"Rate for {currency} must be positive, got {value!r}")
    return rate


def _ensure_well_formed(data: bytes) -> None:
    # BeautifulSoup's lxml builder recovers from broken markup, so a truncated
    # download would otherwise yield a partial table.
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        etree.fromstring(data, parser)
    except (etree.LxmlError, ValueError) as exc:
        raise RateParseError(f"Malformed rate document: {exc}") from exc


def parse_rate_document(raw: bytes | str, *, base: str = BASE_CURRENCY) -> RateDocument:
    """Extract the publication date and rates from an ECB daily document.

    The document nests ``<Cube time="YYYY-MM-DD">`` inside an outer ``<Cube>``
    and lists one ``<Cube currency=".." rate=".."/>`` per quoted currency. Only
    the first dated cube is read, which is the newest one in multi-day files.
    The base currency is implicit in the document and added with a rate of 1.0.
    """

    data = raw.encode("utf-8") if isinstance(raw, str) else raw
    if not data.strip():
        raise RateParseError("Empty rate document")
    _ensure_well_formed(data)

    soup = BeautifulSoup(data, "xml")
    dated = soup.find("Cube", attrs={"time": True})
    if dated is None:
        raise RateParseError("No publication date found in rate document")
    publication_date = _parse_date(dated["time"])

    rates: dict[str, float] = {base: 1.0}
    for cube in dated.find_all("Cube", attrs={"currency": True}):
        currency = cube["currency"].strip().upper()
        rates[currency] = _parse_rate(currency, cube.get("rate"))

    if len(rates) == 1:
        raise RateParseError(f"No rates listed for {publication_date.isoformat()}")

    LOGGER.debug("Parsed %d rates published on %s", len(rates), publication_date)
    return RateDocument(publication_date=publication_date, table=RateTable(rates, base=base))


__all__ = ["DATE_FORMAT", "parse_rate_document"]
