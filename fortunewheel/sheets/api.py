import os
import logging
from typing import Any, Mapping, Optional

import requests
from dotenv import load_dotenv

from .utils import PRIZES_RANGE, open_session, quote_range
from ..errors import NetworkFailure

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"


class SheetsClient:
    """Read-only client for the spreadsheet values endpoint."""

    def __init__(
        self,
        sheet_id: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: int = 45,
    ):
        load_dotenv()
        self.sheet_id = sheet_id or os.getenv("GOOGLE_SHEET_ID")
        self.api_key = api_key or os.getenv("GOOGLE_API_KEY")
        self.base_url = (
            base_url or os.getenv("SHEETS_BASE_URL") or DEFAULT_BASE_URL
        ).rstrip("/")
        self.session = session or open_session()
        self.timeout = timeout

    # -------- headers --------
    @property
    def public_headers(self) -> Mapping[str, str]:
        return {"Accept": "application/json"}

    # -------- core request --------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        # Never log params, they carry the API key
        logger.debug(f"{method.upper()} {url}")
        try:
            r = self.session.request(
                method=method.upper(),
                url=url,
                headers=self.public_headers,
                params=params,
                timeout=self.timeout,
            )
            r.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Sheets request failed: {e}")
            raise NetworkFailure(f"Failed to fetch sheet data: {e}") from e
        try:
            return r.json() if r.content else {}
        except ValueError as e:
            raise NetworkFailure(f"Sheet response is not valid JSON: {e}") from e

    # -------- API callers --------
    def get_values(
        self,
        cell_range: str = PRIZES_RANGE,
        *,
        sheet_id: Optional[str] = None,
        api_key: Optional[str] = None,
    ) -> dict:
        """
        Fetch the values of ``cell_range``.

        ``sheet_id`` and ``api_key`` override the client's configured values.
        The response has the shape ``{"range": ..., "values": [[...], ...]}``;
        ``values`` is omitted by the API when the range is empty.
        """
        target_sheet = sheet_id or self.sheet_id
        key = api_key or self.api_key
        if not target_sheet:
            raise ValueError("Environment variable 'GOOGLE_SHEET_ID' is not set")
        if not key:
            raise ValueError("Environment variable 'GOOGLE_API_KEY' is not set")
        return self._request(
            "GET",
            f"{target_sheet}/values/{quote_range(cell_range)}",
            params={"key": key},
        )
