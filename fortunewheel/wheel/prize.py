"""Prize value object and the lenient parsing applied to sheet rows."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

DEFAULT_TEXT = "Prize"
DEFAULT_COLOR = "#FFBC0D"

# Leading decimal literal, the same prefix a spreadsheet user expects
# "12.5%" or "10 pts" to be read as.
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_chance(raw: Any) -> float:
    """Convert a raw ``chance`` cell into a non-negative weight.

    Parameters
    ----------
    raw : Any
        Cell value as returned by the sheet (normally a string) or a number
        read back from the cache.

    Returns
    -------
    float
        The parsed weight; ``0.0`` when ``raw`` is missing, unparsable,
        NaN, infinite, too large for a float or negative.
    """

    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        if isinstance(raw, (int, float)):
            value = float(raw)
        else:
            match = _LEADING_NUMBER.match(str(raw))
            if match is None:
                return 0.0
            value = float(match.group(1))
    except OverflowError:
        # Integers too large for a float
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def _cell(row: Sequence[Any], index: int) -> Optional[Any]:
    # The API trims trailing empty cells, so rows may be short
    return row[index] if index < len(row) else None


@dataclass(frozen=True)
class Prize:
    """A labeled, colored, weighted outcome of a spin.

    Attributes
    ----------
    text : str
        Label shown on the wheel section.
    color : str
        Fill color of the wheel section.
    weight : float
        Relative likelihood of being selected, stored as ``chance`` in the
        sheet and in the cache.
    """

    text: str = DEFAULT_TEXT
    color: str = DEFAULT_COLOR
    weight: float = 0.0

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Prize":
        """Build a prize from a ``[text, color, chance]`` sheet row."""
        return cls(
            text=str(_cell(row, 0) or "") or DEFAULT_TEXT,
            color=str(_cell(row, 1) or "") or DEFAULT_COLOR,
            weight=parse_chance(_cell(row, 2)),
        )

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Prize":
        """Build a prize from its serialized form, applying the row defaults."""
        if not isinstance(data, Mapping):
            raise TypeError("serialized prize must be a mapping")
        return cls(
            text=str(data.get("text") or "") or DEFAULT_TEXT,
            color=str(data.get("color") or "") or DEFAULT_COLOR,
            weight=parse_chance(data.get("chance")),
        )

    def to_json(self) -> dict[str, Any]:
        return {"text": self.text, "color": self.color, "chance": self.weight}


__all__ = ["DEFAULT_COLOR", "DEFAULT_TEXT", "Prize", "parse_chance"]
