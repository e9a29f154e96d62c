"""Probe data model and registry."""

from dataclasses import dataclass, field

from .position import Position


@dataclass
class Probe:
    """A player's probe standing on one absolute cell of the board."""

    id: str  # Unique identifier (e.g., "p1-probe-001")
    owner_id: str  # Player who launched it
    position: Position  # Absolute cell

    def __post_init__(self):
        """Validate probe data after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.owner_id:
            raise ValueError("owner_id cannot be empty")
        if not isinstance(self.position, Position):
            raise ValueError(f"Invalid position: {self.position!r} (must be a Position)")


@dataclass
class ProbeRegistry:
    """All probes currently on the board, keyed by id.

    Each probe has exactly one position at any time. The registry only records
    positions; energy spending is decided by the caller.
    """

    probes: dict[str, Probe] = field(default_factory=dict)
    probe_counter: dict[str, int] = field(default_factory=dict)  # Owner -> probes launched

    def add(self, probe: Probe) -> Probe:
        if probe.id in self.probes:
            raise ValueError(f"Probe {probe.id} already exists")
        self.probes[probe.id] = probe
        return probe

    def get(self, probe_id: str) -> Probe | None:
        return self.probes.get(probe_id)

    def remove(self, probe_id: str) -> Probe:
        """Take a probe off the board (orbit, landing, ...)."""
        if probe_id not in self.probes:
            raise ValueError(f"Probe {probe_id} not found")
        return self.probes.pop(probe_id)

    def move(self, probe_id: str, to: Position) -> Probe:
        """Set a probe's position.

        Args:
            probe_id: Probe to move
            to: New absolute position

        Returns:
            The moved probe

        Raises:
            ValueError: If the probe does not exist
        """
        probe = self.probes.get(probe_id)
        if probe is None:
            raise ValueError(f"Probe {probe_id} not found")
        if not isinstance(to, Position):
            raise ValueError(f"Invalid destination: {to!r} (must be a Position)")
        probe.position = to
        return probe

    def probes_of(self, owner_id: str) -> list[Probe]:
        return [p for p in self.probes.values() if p.owner_id == owner_id]

    def probes_at(self, position: Position) -> list[Probe]:
        return [p for p in self.probes.values() if p.position == position]

    def next_probe_id(self, owner_id: str) -> str:
        """Generate the next probe id for an owner."""
        self.probe_counter[owner_id] = self.probe_counter.get(owner_id, 0) + 1
        return f"{owner_id}-probe-{self.probe_counter[owner_id]:03d}"

    def __len__(self) -> int:
        return len(self.probes)

    def __iter__(self):
        return iter(list(self.probes.values()))
