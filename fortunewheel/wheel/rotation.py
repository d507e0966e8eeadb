"""Stop angles that center the wheel pointer on the winning section."""

from __future__ import annotations

FULL_TURN = 360.0
DEFAULT_SPINS = 5


def section_size(count: int) -> float:
    """Angular size in degrees of one of ``count`` equal sections."""
    if count <= 0:
        raise ValueError("count must be positive")
    return FULL_TURN / count


def target_rotation(index: int, count: int, spins: int = DEFAULT_SPINS) -> float:
    """Degrees to turn so the pointer stops on the middle of section ``index``.

    ``spins`` full turns are added in front of the final offset.
    """
    size = section_size(count)
    if not 0 <= index < count:
        raise ValueError(f"index {index} is out of range for {count} sections")
    if spins < 0:
        raise ValueError("spins must not be negative")
    return spins * FULL_TURN + (FULL_TURN - (index * size + size / 2))


def next_rotation(
    current: float, index: int, count: int, spins: int = DEFAULT_SPINS
) -> float:
    """Cumulative rotation after spinning from ``current`` onto ``index``.

    The partial turn left over from earlier spins is dropped first so the
    pointer lands on ``index`` no matter where the wheel currently rests.
    """
    return current - (current % FULL_TURN) + target_rotation(index, count, spins)


__all__ = ["DEFAULT_SPINS", "next_rotation", "section_size", "target_rotation"]
