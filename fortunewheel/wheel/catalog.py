"""Cache-or-fetch loading of the prize catalog."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Optional

from .prize import Prize
from ..errors import CatalogError, DataUnavailable
from ..sheets.utils import PRIZES_RANGE
from ..storage.base import KeyValueStore

if TYPE_CHECKING:
    from ..sheets.api import SheetsClient

logger = logging.getLogger(__name__)

PRIZES_KEY = "wheelPrizes"
TOTAL_KEY = "prizesTotal"


@dataclass(frozen=True)
class PrizeCatalog:
    """Ordered prizes available for one spin session.

    Attributes
    ----------
    prizes : tuple[Prize, ...]
        Prizes in sheet order; the order fixes tie-breaking and wheel layout.
    total : int
        Number of prizes.
    source : str
        ``"cache"`` when read from the key-value store, ``"remote"`` when
        freshly fetched.
    """

    prizes: tuple[Prize, ...]
    total: int
    source: str

    def __len__(self) -> int:
        return len(self.prizes)


class PrizeCatalogProvider:
    """Load prizes from the key-value cache, falling back to the sheet."""

    def __init__(self, client: "SheetsClient", store: KeyValueStore) -> None:
        """Create a provider.

        Parameters
        ----------
        client : SheetsClient
            Client used when the cache is missing or invalid.
        store : KeyValueStore
            Store holding the serialized catalog under ``wheelPrizes`` and
            its length under ``prizesTotal``.
        """

        self._client = client
        self._store = store

    def load(
        self,
        source_id: Optional[str] = None,
        credential: Optional[str] = None,
    ) -> PrizeCatalog:
        """Return the prize catalog, preferring the cached copy.

        Parameters
        ----------
        source_id : Optional[str], default: None
            Spreadsheet id; defaults to the client's configured sheet.
        credential : Optional[str], default: None
            API key; defaults to the client's configured key.

        Returns
        -------
        PrizeCatalog
            Cached catalog when the stored list length matches the stored
            count, otherwise the freshly fetched one.

        Notes
        -----
        The cache has no expiry. It is bypassed only when its two keys
        disagree on length, so a changed sheet is not picked up until
        :meth:`invalidate` is called or the store is cleared.

        Concurrent calls are not coalesced; each may fetch and the last
        write to the store wins.

        Raises
        ------
        DataUnavailable
            If the sheet returned no rows.
        NetworkFailure
            If the request failed.
        """
        cached = self._read_cache()
        if cached is not None:
            logger.debug(f"Using cached prize data ({cached.total} prizes)")
            return cached

        logger.debug("Prize cache missing or invalid, fetching from sheet")
        try:
            payload = self._client.get_values(
                PRIZES_RANGE, sheet_id=source_id, api_key=credential
            )
            if not isinstance(payload, Mapping):
                raise DataUnavailable("Unexpected response from Google Sheets")
            rows = payload.get("values")
            if not rows or not isinstance(rows, list):
                raise DataUnavailable("No data received from Google Sheets")
        except CatalogError as e:
            logger.error(f"Error fetching prize data: {e}")
            raise

        prizes = tuple(Prize.from_row(row) for row in rows)
        catalog = PrizeCatalog(prizes=prizes, total=len(prizes), source="remote")
        self._write_cache(catalog)
        return catalog

    def invalidate(self) -> None:
        """Force the next :meth:`load` to fetch from the sheet."""
        self._store.set(PRIZES_KEY, "")
        self._store.set(TOTAL_KEY, "")

    def _read_cache(self) -> Optional[PrizeCatalog]:
        stored_prizes = self._store.get(PRIZES_KEY)
        stored_total = self._store.get(TOTAL_KEY)
        if not stored_prizes or not stored_total:
            return None

        try:
            parsed = json.loads(stored_prizes)
            total = int(stored_total)
            if not isinstance(parsed, list):
                raise TypeError("cached prize list is not a JSON array")
            prizes = tuple(Prize.from_json(item) for item in parsed)
        except (ValueError, TypeError, OverflowError) as e:
            logger.warning(f"Ignoring unreadable prize cache: {e}")
            return None

        if len(prizes) != total:
            logger.debug(
                f"Prize cache length mismatch ({len(prizes)} != {total})"
            )
            return None
        return PrizeCatalog(prizes=prizes, total=total, source="cache")

    def _write_cache(self, catalog: PrizeCatalog) -> None:
        try:
            self._store.set(
                PRIZES_KEY,
                json.dumps([prize.to_json() for prize in catalog.prizes]),
            )
            self._store.set(TOTAL_KEY, str(catalog.total))
        except Exception as e:
            # The fetched catalog is still good; only reuse is lost
            logger.warning(f"Failed to cache prize data: {e}")


__all__ = ["PRIZES_KEY", "PrizeCatalog", "PrizeCatalogProvider", "TOTAL_KEY"]
