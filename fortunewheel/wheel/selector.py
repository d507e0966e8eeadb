"""Weighted random selection of a prize from an ordered catalog."""

from __future__ import annotations

import math
import os
import random
from typing import Callable, Optional, Sequence

from dotenv import load_dotenv

from .prize import Prize

PERCENT_SCALE = 100.0

_TRUTHY = {"1", "true", "yes", "on"}


def _weight(prize: Prize) -> float:
    weight = getattr(prize, "weight", None)
    if weight is None:
        return 0.0
    try:
        value = float(weight)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def _normalize_from_env() -> bool:
    load_dotenv()
    return os.getenv("WHEEL_NORMALIZE_WEIGHTS", "").strip().lower() in _TRUTHY


class WeightedSelector:
    """Pick one prize per call using a single uniform random draw.

    Weights are authored as percentages. By default the draw is taken on a
    fixed ``[0, 100)`` scale: when the weights add up to less than 100 the
    leftover probability falls through to the last prize, and prizes past
    the 100 mark can never win. With ``normalize=True`` the draw is scaled
    to the catalog's actual total weight instead.

    Prizes are matched with ``draw <= cumulative``, so the earliest prize
    whose running total reaches the draw wins. Zero-weight prizes are never
    matched; when the total weight is zero the last prize is returned.
    """

    def __init__(
        self,
        rng: Optional[Callable[[], float]] = None,
        *,
        normalize: Optional[bool] = None,
    ) -> None:
        """Create a selector.

        Parameters
        ----------
        rng : Optional[Callable[[], float]], default: None
            Zero-argument callable returning a float in ``[0, 1)``.
            Defaults to :func:`random.random`.
        normalize : Optional[bool], default: None
            Scale the draw to the total weight instead of 100. When omitted
            the ``WHEEL_NORMALIZE_WEIGHTS`` environment variable decides.
        """

        self._rng = rng or random.random
        self.normalize = _normalize_from_env() if normalize is None else normalize

    def scale_for(self, prizes: Sequence[Prize]) -> float:
        """Return the upper bound of the draw for ``prizes``."""
        if self.normalize:
            return sum(_weight(prize) for prize in prizes)
        return PERCENT_SCALE

    def select_index(self, prizes: Sequence[Prize]) -> int:
        """Return the position of the winning prize in ``prizes``.

        Raises
        ------
        ValueError
            If ``prizes`` is empty.
        """
        if not prizes:
            raise ValueError("Cannot select a prize from an empty catalog")

        scale = self.scale_for(prizes)
        if scale <= 0:
            return len(prizes) - 1

        draw = self._rng() * scale
        cumulative = 0.0
        for index, prize in enumerate(prizes):
            weight = _weight(prize)
            cumulative += weight
            # Zero-weight prizes never match, even on a 0.0 draw
            if weight > 0 and draw <= cumulative:
                return index
        return len(prizes) - 1

    def select(self, prizes: Sequence[Prize]) -> Prize:
        """Return the winning prize; see :meth:`select_index`."""
        return prizes[self.select_index(prizes)]


__all__ = ["PERCENT_SCALE", "WeightedSelector"]
