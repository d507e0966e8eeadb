"""Prize catalog loading, weighted selection and wheel geometry."""

from .catalog import PrizeCatalog, PrizeCatalogProvider
from .prize import Prize, parse_chance
from .rotation import next_rotation, section_size, target_rotation
from .selector import WeightedSelector

__all__ = [
    "Prize",
    "PrizeCatalog",
    "PrizeCatalogProvider",
    "WeightedSelector",
    "next_rotation",
    "parse_chance",
    "section_size",
    "target_rotation",
]
