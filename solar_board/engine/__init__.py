"""Board engine components."""

from .catalog import build_default_board
from .reachability import (
    DEFAULT_RULES,
    SETI_RULES,
    MovementRules,
    ReachabilityEntry,
    reachable_cells,
    reachable_cells_with_energy,
)
from .resolver import absolute_to_relative, locate, relative_to_absolute
from .solar_system import SolarSystem, new_solar_system

__all__ = [
    "build_default_board",
    "DEFAULT_RULES",
    "SETI_RULES",
    "MovementRules",
    "ReachabilityEntry",
    "reachable_cells",
    "reachable_cells_with_energy",
    "absolute_to_relative",
    "locate",
    "relative_to_absolute",
    "SolarSystem",
    "new_solar_system",
]
