"""Position resolver: platform frames <-> absolute board frame.

A platform turned by N sectors shows its relative sector s at absolute sector
s - N (counter-clockwise numbering, cyclic over 1-8). Catalog objects are
stored relative to their own platform, so locating anything is a matter of
applying the platform's total rotation.

This module handles:
1. Sector conversion in both directions
2. Locating catalog objects under a rotation state
3. Resolving which platform surface a probe stands on at an absolute cell
4. Cell snapshots (planet / comet / asteroid flags) for display
"""

from dataclasses import dataclass

from ..models import Board, CelestialObject, Position, RotationState
from ..utils import (
    ASTEROID,
    COMET,
    DEGREES_PER_SECTOR,
    PLANET,
    SECTOR_COUNT,
)


@dataclass
class CellState:
    """Snapshot of one absolute cell under a rotation state.

    Attributes:
        position: Absolute cell
        surface_level: Level the cell's surface belongs to, None if no cell exists
        has_planet: A planet is visible on the cell
        has_comet: A comet is visible on the cell
        has_asteroid: An asteroid field is visible on the cell
        planet_name: Name of the visible planet, if any
    """

    position: Position
    surface_level: int | None
    has_planet: bool = False
    has_comet: bool = False
    has_asteroid: bool = False
    planet_name: str | None = None

    @property
    def exists(self) -> bool:
        return self.surface_level is not None


def rotation_steps(degrees: int) -> int:
    """Convert a rotation in degrees to whole sectors.

    Raises:
        ValueError: If the rotation is not a multiple of 45 degrees
    """
    if isinstance(degrees, bool) or not isinstance(degrees, int):
        raise ValueError(f"Invalid rotation: {degrees!r} (must be an integer number of degrees)")
    if degrees % DEGREES_PER_SECTOR != 0:
        raise ValueError(f"Invalid rotation: {degrees} (must be a multiple of {DEGREES_PER_SECTOR})")
    return degrees // DEGREES_PER_SECTOR


def _check_sector(sector: int) -> None:
    if isinstance(sector, bool) or not isinstance(sector, int) or not (1 <= sector <= SECTOR_COUNT):
        raise ValueError(f"Invalid sector: {sector!r} (must be 1-{SECTOR_COUNT})")


def relative_to_absolute(sector: int, total_rotation: int) -> int:
    """Map a platform-relative sector to the absolute sector it currently covers.

    Args:
        sector: Sector in the platform's own frame (1-8)
        total_rotation: Total rotation of the platform in degrees

    Returns:
        Absolute sector (1-8)

    Examples:
        >>> relative_to_absolute(2, 0)
        2
        >>> relative_to_absolute(2, -45)
        3
        >>> relative_to_absolute(1, 45)
        8
    """
    _check_sector(sector)
    steps = rotation_steps(total_rotation)
    return (sector - 1 - steps) % SECTOR_COUNT + 1


def absolute_to_relative(sector: int, total_rotation: int) -> int:
    """Inverse of relative_to_absolute: which relative sector lies under an absolute one."""
    _check_sector(sector)
    steps = rotation_steps(total_rotation)
    return (sector - 1 + steps) % SECTOR_COUNT + 1


def absolute_position(obj: CelestialObject, rotation: RotationState) -> Position:
    """Current absolute position of a catalog object."""
    sector = relative_to_absolute(obj.position.sector, rotation.total_rotation(obj.level))
    return Position(disk=obj.position.disk, sector=sector)


def locate(board: Board, object_id: str, rotation: RotationState) -> Position | None:
    """Find where a catalog object currently sits.

    Args:
        board: Board holding the catalog
        object_id: Catalog object id (e.g. "earth")
        rotation: Current rotation state

    Returns:
        Absolute position, or None if the id is unknown
    """
    obj = board.find(object_id)
    if obj is None:
        return None
    return absolute_position(obj, rotation)


def locate_all(board: Board, rotation: RotationState) -> dict[str, Position]:
    """Absolute positions of every catalog object, keyed by id."""
    return {obj.id: absolute_position(obj, rotation) for obj in board.objects}


def surface_level(board: Board, rotation: RotationState, position: Position) -> int | None:
    """Level whose surface is exposed at an absolute cell.

    Walks the disk's platforms from the top down and stops at the first one
    that is not cut out (hollow) under this cell.

    Returns:
        The surface level, or None if the disk is not on the board or every
        platform carrying it is hollow here (the cell does not exist)
    """
    layout = board.disk(position.disk)
    if layout is None:
        return None
    for level in reversed(layout.levels):
        relative = absolute_to_relative(position.sector, rotation.total_rotation(level))
        obj = board.lookup(level, position.disk, relative)
        if obj is None or not obj.is_hollow:
            return level
    return None


def cell_exists(board: Board, rotation: RotationState, position: Position) -> bool:
    """True if some platform shows a surface at this absolute cell."""
    return surface_level(board, rotation, position) is not None


def surface_object(
    board: Board, rotation: RotationState, position: Position
) -> CelestialObject | None:
    """Catalog object printed on the exposed surface of a cell, if any."""
    level = surface_level(board, rotation, position)
    if level is None:
        return None
    relative = absolute_to_relative(position.sector, rotation.total_rotation(level))
    return board.lookup(level, position.disk, relative)


def is_visible(board: Board, rotation: RotationState, object_id: str) -> bool:
    """Whether a catalog object lies on the exposed surface (not covered by a platform)."""
    obj = board.find(object_id)
    if obj is None or obj.is_hollow:
        return False
    return surface_level(board, rotation, absolute_position(obj, rotation)) == obj.level


def objects_on_cell(
    board: Board, rotation: RotationState, position: Position
) -> list[CelestialObject]:
    """Visible physical objects (planets, comets, asteroid fields) on a cell."""
    obj = surface_object(board, rotation, position)
    if obj is None or not obj.is_physical:
        return []
    return [obj]


def cell_state(board: Board, rotation: RotationState, position: Position) -> CellState:
    """Build the display snapshot of one absolute cell."""
    state = CellState(position=position, surface_level=surface_level(board, rotation, position))
    for obj in objects_on_cell(board, rotation, position):
        if obj.type == PLANET:
            state.has_planet = True
            state.planet_name = obj.name
        elif obj.type == COMET:
            state.has_comet = True
        elif obj.type == ASTEROID:
            state.has_asteroid = True
    return state


def all_cells(board: Board, rotation: RotationState) -> dict[str, CellState]:
    """Snapshots of every cell of the board, keyed by cell key, inner disks first."""
    cells = {}
    for disk in board.disk_names:
        for sector in range(1, SECTOR_COUNT + 1):
            position = Position(disk=disk, sector=sector)
            cells[position.key] = cell_state(board, rotation, position)
    return cells
