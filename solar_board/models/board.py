"""Board definition: disk layout and the catalog of platform objects."""

from dataclasses import dataclass, field

from ..utils.constants import DISK_NAMES, LEVELS
from .celestial import CelestialObject


@dataclass(frozen=True)
class DiskLayout:
    """One ring of the board and the platforms that carry a surface for it.

    Levels are listed bottom to top: the highest level whose cell is not
    hollow is the one a probe actually stands on.
    """

    name: str  # "A" to "E"
    levels: tuple[int, ...] = (0,)

    def __post_init__(self):
        """Validate disk layout after initialization."""
        if self.name not in DISK_NAMES:
            raise ValueError(f"Invalid disk: {self.name!r} (must be one of {', '.join(DISK_NAMES)})")
        object.__setattr__(self, "levels", tuple(self.levels))
        if not self.levels:
            raise ValueError(f"Disk {self.name} must be carried by at least one level")
        for level in self.levels:
            if level not in LEVELS:
                raise ValueError(f"Invalid level {level} for disk {self.name} (must be 0-3)")
        if list(self.levels) != sorted(set(self.levels)):
            raise ValueError(
                f"Levels for disk {self.name} must be strictly increasing: {self.levels}"
            )


@dataclass
class Board:
    """Static board: which disks exist, which levels carry them, what is printed where.

    All validation happens here, at construction time, so queries never have
    to deal with a malformed catalog.
    """

    disks: list[DiskLayout]
    objects: list[CelestialObject] = field(default_factory=list)

    def __post_init__(self):
        """Validate the board and build lookup indexes."""
        if not self.disks:
            raise ValueError("Board must have at least one disk")

        names = [d.name for d in self.disks]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate disks in board layout: {names}")
        if names != sorted(names, key=DISK_NAMES.index):
            raise ValueError(f"Disks must be listed from the centre outwards: {names}")

        self._disks: dict[str, DiskLayout] = {d.name: d for d in self.disks}
        self._by_id: dict[str, CelestialObject] = {}
        self._by_cell: dict[tuple[int, str, int], CelestialObject] = {}

        for obj in self.objects:
            if obj.id in self._by_id:
                raise ValueError(f"Duplicate object id: {obj.id}")

            layout = self._disks.get(obj.position.disk)
            if layout is None:
                raise ValueError(f"Object {obj.id} sits on disk {obj.position.disk}, which is not on the board")
            if obj.level not in layout.levels:
                raise ValueError(
                    f"Object {obj.id} is on level {obj.level}, which does not carry disk {layout.name}"
                )

            cell = (obj.level, obj.position.disk, obj.position.sector)
            if cell in self._by_cell:
                other = self._by_cell[cell]
                raise ValueError(
                    f"Objects {other.id} and {obj.id} both occupy "
                    f"{obj.position.key} on level {obj.level}"
                )

            self._by_id[obj.id] = obj
            self._by_cell[cell] = obj

    @property
    def disk_names(self) -> list[str]:
        """Disk names from the centre outwards."""
        return [d.name for d in self.disks]

    def disk(self, name: str) -> DiskLayout | None:
        return self._disks.get(name)

    def find(self, object_id: str) -> CelestialObject | None:
        return self._by_id.get(object_id)

    def lookup(self, level: int, disk: str, relative_sector: int) -> CelestialObject | None:
        """Return the object printed at a platform-relative cell, if any.

        Args:
            level: Platform level (0-3)
            disk: Disk name
            relative_sector: Sector in the platform's own unrotated frame

        Returns:
            The catalog object, or None for a plain cell
        """
        return self._by_cell.get((level, disk, relative_sector))

    def objects_on_level(self, level: int) -> list[CelestialObject]:
        return [obj for obj in self.objects if obj.level == level]
