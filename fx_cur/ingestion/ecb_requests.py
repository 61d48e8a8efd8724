"""requests-based downloader for the ECB daily euro reference rates."""

from __future__ import annotations

from typing import Optional

import requests

from fx_cur.errors import RateFetchError
from fx_cur.utils.logger import get_logger

LOGGER = get_logger(__name__)

ECB_DAILY_URL = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"


class ECBRequestsClient:
    """Fetch the ECB daily XML with one plain GET request."""

    def __init__(
        self,
        *,
        url: str = ECB_DAILY_URL,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", "fx-cur/1.0")
        self.session.headers.setdefault("Accept", "application/xml,text/xml;q=0.9,*/*;q=0.8")

    def fetch(self) -> bytes:
        """Download the reference-rate document and return its raw bytes."""

        LOGGER.info("Fetching ECB reference rates from %s", self.url)
        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RateFetchError(f"Unable to reach {self.url}: {exc}") from exc
        self._raise_with_context(response)
        return response.content

    def _raise_with_context(self, response: requests.Response) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise RateFetchError(
                f"ECB responded with HTTP {response.status_code} for {self.url}"
            ) from exc

    def __enter__(self) -> "ECBRequestsClient":
        return self

    def close(self) -> None:
        self.session.close()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["ECB_DAILY_URL", "ECBRequestsClient"]
