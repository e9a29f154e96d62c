"""Standard solar system board catalog.

Every platform's objects are listed in that platform's own unrotated frame.
Rotating the platforms never rewrites this table; the resolver maps positions
on the fly.
"""

from ..models import Board, CelestialObject, DiskLayout, Position
from ..utils import ASTEROID, COMET, EMPTY, HOLLOW, PLANET

# Which platforms carry a surface for each disk, bottom to top
DEFAULT_DISK_LEVELS = {
    "A": (0, 1, 2, 3),
    "B": (0, 1, 2),
    "C": (0, 1),
    "D": (0,),
    "E": (0,),
}

# (id, name, type, disk, sector) per level
LEVEL_OBJECTS = {
    0: [
        ("neptune", "Neptune", PLANET, "D", 3),
        ("uranus", "Uranus", PLANET, "D", 6),
        ("comet-d1", "Comet", COMET, "D", 1),
        ("comet-d7", "Comet", COMET, "D", 7),
        ("comet-c4", "Comet", COMET, "C", 4),
        ("comet-b2", "Comet", COMET, "B", 2),
        ("comet-b5", "Comet", COMET, "B", 5),
        ("comet-a5", "Comet", COMET, "A", 5),
        ("comet-a7", "Comet", COMET, "A", 7),
        ("comet-a8", "Comet", COMET, "A", 8),
        ("asteroid-c2", "Asteroids", ASTEROID, "C", 2),
        ("asteroid-c3", "Asteroids", ASTEROID, "C", 3),
        ("asteroid-c5", "Asteroids", ASTEROID, "C", 5),
        ("asteroid-c7", "Asteroids", ASTEROID, "C", 7),
        ("asteroid-b4", "Asteroids", ASTEROID, "B", 4),
        ("asteroid-b8", "Asteroids", ASTEROID, "B", 8),
        ("asteroid-a2", "Asteroids", ASTEROID, "A", 2),
        ("asteroid-a3", "Asteroids", ASTEROID, "A", 3),
        ("asteroid-a6", "Asteroids", ASTEROID, "A", 6),
    ],
    1: [
        ("saturn", "Saturn", PLANET, "C", 1),
        ("hollow-c2-l1", "Hollow C2", HOLLOW, "C", 2),
        ("hollow-c3-l1", "Hollow C3", HOLLOW, "C", 3),
        ("empty-c4-l1", "Empty C4", EMPTY, "C", 4),
        ("jupiter", "Jupiter", PLANET, "C", 5),
        ("empty-c6-l1", "Empty C6", EMPTY, "C", 6),
        ("hollow-c7-l1", "Hollow C7", HOLLOW, "C", 7),
        ("hollow-c8-l1", "Hollow C8", HOLLOW, "C", 8),
        ("asteroid-b1-l1", "Asteroids", ASTEROID, "B", 1),
        ("hollow-b2-l1", "Hollow B2", HOLLOW, "B", 2),
        ("empty-b3-l1", "Empty B3", EMPTY, "B", 3),
        ("asteroid-b4-l1", "Asteroids", ASTEROID, "B", 4),
        ("hollow-b5-l1", "Hollow B5", HOLLOW, "B", 5),
        ("empty-b6-l1", "Empty B6", EMPTY, "B", 6),
        ("hollow-b7-l1", "Hollow B7", HOLLOW, "B", 7),
        ("comet-b8-l1", "Comet", COMET, "B", 8),
        ("asteroid-a1-l1", "Asteroids", ASTEROID, "A", 1),
        ("asteroid-a2-l1", "Asteroids", ASTEROID, "A", 2),
        ("empty-a3-l1", "Empty A3", EMPTY, "A", 3),
        ("hollow-a4-l1", "Hollow A4", HOLLOW, "A", 4),
        ("hollow-a5-l1", "Hollow A5", HOLLOW, "A", 5),
        ("asteroid-a6-l1", "Asteroids", ASTEROID, "A", 6),
        ("comet-a7-l1", "Comet", COMET, "A", 7),
        ("empty-a8-l1", "Empty A8", EMPTY, "A", 8),
    ],
    2: [
        ("mars", "Mars", PLANET, "B", 1),
        ("hollow-b2-l2", "Hollow B2", HOLLOW, "B", 2),
        ("hollow-b3-l2", "Hollow B3", HOLLOW, "B", 3),
        ("hollow-b4-l2", "Hollow B4", HOLLOW, "B", 4),
        ("asteroid-b5-l2", "Asteroids", ASTEROID, "B", 5),
        ("empty-b6-l2", "Empty B6", EMPTY, "B", 6),
        ("hollow-b7-l2", "Hollow B7", HOLLOW, "B", 7),
        ("hollow-b8-l2", "Hollow B8", HOLLOW, "B", 8),
        ("empty-a1-l2", "Empty A1", EMPTY, "A", 1),
        ("hollow-a2-l2", "Hollow A2", HOLLOW, "A", 2),
        ("hollow-a3-l2", "Hollow A3", HOLLOW, "A", 3),
        ("hollow-a4-l2", "Hollow A4", HOLLOW, "A", 4),
        ("empty-a5-l2", "Empty A5", EMPTY, "A", 5),
        ("asteroid-a6-l2", "Asteroids", ASTEROID, "A", 6),
        ("empty-a7-l2", "Empty A7", EMPTY, "A", 7),
        ("asteroid-a8-l2", "Asteroids", ASTEROID, "A", 8),
    ],
    3: [
        ("empty-a1-l3", "Empty A1", EMPTY, "A", 1),
        ("earth", "Earth", PLANET, "A", 2),
        ("hollow-a3-l3", "Hollow A3", HOLLOW, "A", 3),
        ("venus", "Venus", PLANET, "A", 4),
        ("empty-a5-l3", "Empty A5", EMPTY, "A", 5),
        ("mercury", "Mercury", PLANET, "A", 6),
        ("hollow-a7-l3", "Hollow A7", HOLLOW, "A", 7),
        ("hollow-a8-l3", "Hollow A8", HOLLOW, "A", 8),
    ],
}


def default_objects() -> list[CelestialObject]:
    """Build the catalog objects of the standard board, fixed level first."""
    objects = []
    for level in sorted(LEVEL_OBJECTS):
        for object_id, name, object_type, disk, sector in LEVEL_OBJECTS[level]:
            objects.append(
                CelestialObject(
                    id=object_id,
                    name=name,
                    type=object_type,
                    level=level,
                    position=Position(disk=disk, sector=sector),
                )
            )
    return objects


def build_default_board() -> Board:
    """Build the standard five-disk solar system board.

    Returns:
        Validated Board with all disks A-E and the standard catalog
    """
    disks = [DiskLayout(name=name, levels=levels) for name, levels in DEFAULT_DISK_LEVELS.items()]
    return Board(disks=disks, objects=default_objects())
