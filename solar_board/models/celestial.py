"""Celestial object data model."""

from dataclasses import dataclass

from ..utils.constants import HOLLOW, LEVELS, OBJECT_TYPES, PHYSICAL_OBJECT_TYPES
from .position import Position


@dataclass(frozen=True)
class CelestialObject:
    """An object printed on one of the board's platforms.

    The position is expressed in the platform's own unrotated frame, so the
    catalog never changes when platforms turn. Two marker types exist besides
    the physical ones: "hollow" (a cut-out, no cell on this platform) and
    "empty" (a plain cell with nothing on it).
    """

    id: str  # Unique identifier (e.g., "earth", "hollow-a4-l1")
    name: str  # Display name
    type: str  # planet, comet, asteroid, hollow or empty
    level: int  # 0 = fixed board, 1-3 = rotating platforms
    position: Position  # Relative to the platform's own frame

    def __post_init__(self):
        """Validate object data after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if self.type not in OBJECT_TYPES:
            raise ValueError(
                f"Invalid type: {self.type!r} (must be one of {', '.join(OBJECT_TYPES)})"
            )
        if self.level not in LEVELS:
            raise ValueError(f"Invalid level: {self.level} (must be 0-3)")

    @property
    def is_hollow(self) -> bool:
        return self.type == HOLLOW

    @property
    def is_physical(self) -> bool:
        return self.type in PHYSICAL_OBJECT_TYPES
