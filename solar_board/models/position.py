"""Board cell position model."""

from dataclasses import dataclass

from ..utils.constants import DISK_NAMES, SECTOR_COUNT


@dataclass(frozen=True)
class Position:
    """A single cell of the board, identified by disk and sector.

    Sectors are numbered 1-8 in absolute board coordinates unless a caller
    explicitly works in a platform's own frame (catalog entries do).
    """

    disk: str  # "A" (innermost) to "E" (outermost)
    sector: int  # 1-8, cyclic

    def __post_init__(self):
        """Validate position data after initialization."""
        if self.disk not in DISK_NAMES:
            raise ValueError(f"Invalid disk: {self.disk!r} (must be one of {', '.join(DISK_NAMES)})")
        if isinstance(self.sector, bool) or not isinstance(self.sector, int):
            raise ValueError(f"Invalid sector: {self.sector!r} (must be an integer)")
        if not (1 <= self.sector <= SECTOR_COUNT):
            raise ValueError(f"Invalid sector: {self.sector} (must be 1-{SECTOR_COUNT})")

    @property
    def key(self) -> str:
        """Cell key used in reachability maps, e.g. "A1"."""
        return f"{self.disk}{self.sector}"

    @property
    def disk_index(self) -> int:
        """Ordinal distance band of the disk (A=0 .. E=4)."""
        return DISK_NAMES.index(self.disk)

    @classmethod
    def from_key(cls, key: str) -> "Position":
        """Parse a cell key such as "C7" back into a Position.

        Only the canonical form produced by ``key`` is accepted, so "A01"
        is rejected.

        Raises:
            ValueError: If the key is not a disk letter followed by a sector
        """
        if not isinstance(key, str) or len(key) != 2 or key[1] not in "0123456789":
            raise ValueError(f"Invalid cell key: {key!r}")
        return cls(disk=key[0], sector=int(key[1:]))

    def __str__(self) -> str:
        return self.key
