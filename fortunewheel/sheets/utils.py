import logging
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

PRIZES_RANGE = "prizes!A2:C"


def open_session() -> requests.Session:
    """Open a requests session preconfigured for the Sheets values API.

    Returns
    -------
    requests.Session
        A session that asks for JSON responses.
    """
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    logger.debug("Opened Sheets API session")
    return session


def quote_range(cell_range: str) -> str:
    """Percent-encode an A1 range for use as a URL path segment.

    ``!`` and ``:`` are left intact since the API accepts them verbatim.

    Parameters
    ----------
    cell_range : str
        Range in A1 notation, e.g. ``"prizes!A2:C"``.

    Raises
    ------
    ValueError
        If ``cell_range`` is empty or blank.
    """
    if not cell_range or not cell_range.strip():
        raise ValueError("cell_range must not be empty")
    return quote(cell_range.strip(), safe="!:")
