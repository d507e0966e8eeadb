"""Recording spins and querying them for the results table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from .db.utils import as_utc
from .models import SpinResult

ROWS_PER_PAGE = 10

# Longest unit first; months and years are fixed-length approximations.
_INTERVALS = (
    ("year", 31536000),
    ("month", 2592000),
    ("week", 604800),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


@dataclass(frozen=True)
class ResultsPage:
    """One page of spin results.

    Attributes
    ----------
    items : list[SpinResult]
        Results on this page.
    page : int
        1-based page number.
    page_count : int
        Number of pages for the filtered results; ``0`` when there are none.
    total : int
        Number of filtered results across all pages.
    """

    items: list[SpinResult]
    page: int
    page_count: int
    total: int


def record_spin(
    session: Session,
    username: str,
    prize_text: str,
    *,
    won_at: Optional[datetime] = None,
) -> SpinResult:
    """Append a spin result and flush it.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session; the caller commits.
    username : str
        Player name. Surrounding whitespace is trimmed.
    prize_text : str
        Text of the prize won.
    won_at : Optional[datetime], default: None
        Time of the win; defaults to now in UTC.

    Raises
    ------
    ValueError
        If ``username`` is blank.
    """
    result = SpinResult(
        username=username,
        prize=prize_text,
        won_at=won_at or datetime.now(timezone.utc),
    )
    session.add(result)
    session.flush()
    return result


def list_results(session: Session) -> list[SpinResult]:
    """Return every recorded spin, newest first."""
    stmt = select(SpinResult).order_by(SpinResult.won_at.desc(), SpinResult.id.desc())
    return list(session.scalars(stmt))


def filter_results(
    results: Iterable[SpinResult],
    username_filter: str = "",
    prize_filter: str = "",
) -> list[SpinResult]:
    """Keep results whose username and prize contain the given substrings.

    Matching is case-insensitive; an empty filter matches everything.
    """
    username_needle = (username_filter or "").casefold()
    prize_needle = (prize_filter or "").casefold()
    return [
        result
        for result in results
        if username_needle in result.username.casefold()
        and prize_needle in result.prize.casefold()
    ]


def paginate(
    results: Sequence[SpinResult],
    page: int = 1,
    rows_per_page: int = ROWS_PER_PAGE,
) -> ResultsPage:
    """Slice ``results`` into the requested 1-based page."""
    if page < 1:
        raise ValueError("page must be 1 or greater")
    if rows_per_page < 1:
        raise ValueError("rows_per_page must be 1 or greater")
    start = (page - 1) * rows_per_page
    return ResultsPage(
        items=list(results[start : start + rows_per_page]),
        page=page,
        page_count=math.ceil(len(results) / rows_per_page),
        total=len(results),
    )


def time_since(won_at: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``won_at`` was, e.g. ``"3 hours ago"``.

    Anything under a minute, including timestamps in the future, reads
    ``"just now"``.
    """
    current = as_utc(now) if now is not None else datetime.now(timezone.utc)
    seconds = math.floor((current - as_utc(won_at)).total_seconds())
    for unit, unit_seconds in _INTERVALS:
        interval = seconds // unit_seconds
        if interval >= 1:
            return f"{interval} {unit}{'' if interval == 1 else 's'} ago"
    return "just now"


__all__ = [
    "ROWS_PER_PAGE",
    "ResultsPage",
    "filter_results",
    "list_results",
    "paginate",
    "record_spin",
    "time_since",
]
