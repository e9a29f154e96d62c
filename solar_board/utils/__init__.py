"""Utility functions and constants for the solar board."""

from .constants import (
    ASTEROID,
    ASTEROID_EXIT_SURCHARGE,
    COMET,
    DEFAULT_INITIAL_ANGLES,
    DEGREES_PER_SECTOR,
    DISK_NAMES,
    EMPTY,
    FIXED_LEVEL,
    HOLLOW,
    LAUNCH_OBJECT_ID,
    LEVELS,
    MAX_PROBES_PER_OWNER,
    MOVE_COST,
    OBJECT_TYPES,
    PHYSICAL_OBJECT_TYPES,
    PLANET,
    ROTATING_LEVELS,
    SECTOR_COUNT,
    STANDARD_ROTATION_STEPS,
)

__all__ = [
    "ASTEROID",
    "ASTEROID_EXIT_SURCHARGE",
    "COMET",
    "DEFAULT_INITIAL_ANGLES",
    "DEGREES_PER_SECTOR",
    "DISK_NAMES",
    "EMPTY",
    "FIXED_LEVEL",
    "HOLLOW",
    "LAUNCH_OBJECT_ID",
    "LEVELS",
    "MAX_PROBES_PER_OWNER",
    "MOVE_COST",
    "OBJECT_TYPES",
    "PHYSICAL_OBJECT_TYPES",
    "PLANET",
    "ROTATING_LEVELS",
    "SECTOR_COUNT",
    "STANDARD_ROTATION_STEPS",
]
