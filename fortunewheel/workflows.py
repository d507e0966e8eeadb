from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from .models import SpinResult
from .results import record_spin
from .wheel.catalog import PrizeCatalog
from .wheel.prize import Prize
from .wheel.rotation import next_rotation
from .wheel.selector import WeightedSelector


@dataclass
class SpinOutcome:
    """Everything a front end needs after one spin.

    Attributes
    ----------
    prize : Prize
        The winning prize.
    index : int
        Position of ``prize`` in the catalog, i.e. its wheel section.
    rotation : float
        Cumulative wheel rotation in degrees to animate to.
    result : SpinResult
        The persisted record of the win.
    """

    prize: Prize
    index: int
    rotation: float
    result: SpinResult


def spin_wheel(
    session: Session,
    catalog: PrizeCatalog,
    username: str,
    *,
    selector: Optional[WeightedSelector] = None,
    current_rotation: float = 0.0,
    now: Optional[datetime] = None,
) -> SpinOutcome:
    """Spin the wheel for ``username`` and record the prize they win.

    The workflow performs three steps:

    1. Pick the winning section with the weighted selector.
    2. Compute the rotation that stops the pointer on that section.
    3. Append a :class:`SpinResult` for the win.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session. The result is flushed, not committed.
    catalog : PrizeCatalog
        Prizes on the wheel, usually from
        :meth:`~fortunewheel.wheel.catalog.PrizeCatalogProvider.load`.
    username : str
        Name the player entered. Must not be blank.
    selector : Optional[WeightedSelector]
        Selector to use. If not provided, a default one will be created.
    current_rotation : float
        Rotation the wheel currently rests at, in degrees.
    now : Optional[datetime]
        Timestamp recorded for the win; defaults to the current UTC time.

    Returns
    -------
    SpinOutcome
        The prize, its section index, the rotation target and the stored result.
    """
    if not username or not username.strip():
        raise ValueError("A username is required to spin the wheel.")
    if not catalog.prizes:
        raise ValueError("Cannot spin a wheel without prizes.")

    if selector is None:
        selector = WeightedSelector()

    index = selector.select_index(catalog.prizes)
    prize = catalog.prizes[index]
    rotation = next_rotation(current_rotation, index, len(catalog.prizes))
    result = record_spin(session, username, prize.text, won_at=now)
    return SpinOutcome(prize=prize, index=index, rotation=rotation, result=result)
