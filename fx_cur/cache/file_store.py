"""Single-file store for the raw reference-rate document."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from fx_cur.cache import DEFAULT_CACHE_PATH
from fx_cur.errors import CacheError
from fx_cur.utils.logger import get_logger

LOGGER = get_logger(__name__)


class RateCache:
    """Read and replace the cached document at ``path``.

    Writes go to a sibling temporary file that is then renamed over the cache,
    so readers see either the previous document or the new one, never a mix.
    Concurrent writers are not coordinated; the last rename wins.
    """

    __slots__ = ("path",)

    def __init__(self, path: str | Path = DEFAULT_CACHE_PATH) -> None:
        self.path = Path(path)

    def read(self) -> bytes | None:
        """Return the cached document, or ``None`` when no cache exists yet.

        The bytes are returned exactly as stored; decoding is left to the parser.
        """

        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            LOGGER.debug("No cached rates at %s", self.path)
            return None
        except OSError as exc:
            raise CacheError(f"Unable to read cache file {self.path}: {exc}") from exc
        LOGGER.debug("Read cached rates from %s", self.path)
        return data

    def write(self, document: bytes) -> None:
        """Create or replace the cache with ``document``."""

        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "wb") as handle:
                handle.write(document)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            raise CacheError(f"Unable to write cache file {self.path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
        LOGGER.info("Saved reference rates to %s", self.path)


__all__ = ["RateCache"]
