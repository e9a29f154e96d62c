"""Rotation state of the nested platforms."""

from dataclasses import dataclass, field

from ..utils.constants import (
    DEFAULT_INITIAL_ANGLES,
    DEGREES_PER_SECTOR,
    FIXED_LEVEL,
    ROTATING_LEVELS,
    STANDARD_ROTATION_STEPS,
)


def _check_angle(angle: int, label: str) -> None:
    if isinstance(angle, bool) or not isinstance(angle, int):
        raise ValueError(f"Invalid {label}: {angle!r} (must be an integer)")
    if angle % DEGREES_PER_SECTOR != 0:
        raise ValueError(f"Invalid {label}: {angle} (must be a multiple of {DEGREES_PER_SECTOR})")


@dataclass
class RotationState:
    """Angles of the three rotating platforms.

    Each angle is the platform's own rotation relative to the platform that
    carries it: level 2 sits on level 1 and level 3 sits on level 2. The
    rotation actually applied to something on level N is therefore the sum of
    the angles of levels 1..N, so turning level 1 also carries levels 2 and 3
    without touching their stored angles.
    """

    angle1: int = 0  # Level 1 rotation in degrees
    angle2: int = 0  # Level 2 rotation relative to level 1
    angle3: int = 0  # Level 3 rotation relative to level 2
    initial_angles: tuple[int, int, int] = field(default=DEFAULT_INITIAL_ANGLES)
    next_level: int = 1  # Platform turned by the next standard rotation

    def __post_init__(self):
        """Validate rotation data after initialization."""
        for level in ROTATING_LEVELS:
            _check_angle(self.angle(level), f"angle{level}")
        if len(self.initial_angles) != len(ROTATING_LEVELS):
            raise ValueError(
                f"Invalid initial_angles: {self.initial_angles} (must hold 3 angles)"
            )
        self.initial_angles = tuple(self.initial_angles)
        for level, angle in zip(ROTATING_LEVELS, self.initial_angles):
            _check_angle(angle, f"initial angle for level {level}")
        if self.next_level not in ROTATING_LEVELS:
            raise ValueError(f"Invalid next_level: {self.next_level} (must be 1-3)")

    @classmethod
    def initial(cls, initial_angles: tuple[int, int, int] = DEFAULT_INITIAL_ANGLES) -> "RotationState":
        """Create a rotation state sitting at its initial angles."""
        angle1, angle2, angle3 = initial_angles
        return cls(
            angle1=angle1,
            angle2=angle2,
            angle3=angle3,
            initial_angles=tuple(initial_angles),
        )

    def angle(self, level: int) -> int:
        """Stored (own) angle of a rotating level."""
        _check_rotating_level(level)
        return getattr(self, f"angle{level}")

    def total_rotation(self, level: int) -> int:
        """Rotation in degrees applied to objects sitting on a level.

        Level 0 is the fixed board and never rotates.
        """
        if level == FIXED_LEVEL:
            return 0
        _check_rotating_level(level)
        return sum(self.angle(inner) for inner in range(1, level + 1))

    def rotate(self, level: int, steps: int) -> None:
        """Turn a platform by a number of sectors.

        Everything mounted on the platform (the levels above it) turns with it
        through the summed totals.

        Args:
            level: Rotating level (1-3)
            steps: Sectors to turn; negative turns the other way

        Raises:
            ValueError: If level or steps are invalid
        """
        _check_rotating_level(level)
        if isinstance(steps, bool) or not isinstance(steps, int):
            raise ValueError(f"Invalid steps: {steps!r} (must be an integer)")
        setattr(self, f"angle{level}", self.angle(level) + steps * DEGREES_PER_SECTOR)

    def reset(self, level: int) -> None:
        """Restore a level's own angle to its initial value.

        Levels it carries keep their stored angles; their totals still change.
        """
        _check_rotating_level(level)
        setattr(self, f"angle{level}", self.initial_angles[level - 1])

    def rotate_next(self, steps: int = STANDARD_ROTATION_STEPS) -> int:
        """Perform the standard game rotation and advance to the next platform.

        Returns:
            The level that was turned
        """
        level = self.next_level
        self.rotate(level, steps)
        self.next_level = level % len(ROTATING_LEVELS) + 1
        return level

    def copy(self) -> "RotationState":
        return RotationState(
            angle1=self.angle1,
            angle2=self.angle2,
            angle3=self.angle3,
            initial_angles=self.initial_angles,
            next_level=self.next_level,
        )


def _check_rotating_level(level: int) -> None:
    if level not in ROTATING_LEVELS:
        raise ValueError(f"Invalid rotating level: {level} (must be 1-3)")
