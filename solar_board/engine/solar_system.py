"""Solar system orchestrator.

Owns the state of one board in play: the static board, its rotation state and
its probes. Presentation layers talk only to this class:

- rotate / reset / rotate_next: turn the platforms (probes ride along)
- locate_object: where a catalog object currently sits
- reachable_cells: highlight destinations for a selected probe
- move_probe: commit a probe move after validating it against reachability
- launch_probe / cells: probe deployment and per-cell display snapshots
"""

import logging
from dataclasses import dataclass, field

from ..models import Board, Position, Probe, ProbeRegistry, RotationState
from ..utils import DEFAULT_INITIAL_ANGLES, MAX_PROBES_PER_OWNER
from .catalog import build_default_board
from .probes import ProbeShift, carry_probes, launch_probe
from .reachability import DEFAULT_RULES, MovementRules, ReachabilityEntry, reachable_cells
from .resolver import CellState, all_cells, locate, locate_all

logger = logging.getLogger(__name__)


@dataclass
class SolarSystem:
    """One board in play.

    All mutable state lives on the instance; nothing is shared between boards.
    """

    board: Board
    rotation: RotationState = field(default_factory=RotationState)
    probes: ProbeRegistry = field(default_factory=ProbeRegistry)
    rules: MovementRules = DEFAULT_RULES
    max_probes_per_owner: int = MAX_PROBES_PER_OWNER

    # =========================================================================
    # ROTATION
    # =========================================================================

    def rotate(self, level: int, steps: int) -> list[ProbeShift]:
        """Turn a platform (and everything mounted on it) by a number of sectors.

        Args:
            level: Rotating level (1-3)
            steps: Sectors to turn, negative for the other direction

        Returns:
            Probes displaced by the rotation
        """
        before = self.rotation.copy()
        self.rotation.rotate(level, steps)
        logger.info(
            f"Level {level} rotated by {steps} step(s): totals "
            f"{[self.rotation.total_rotation(lvl) for lvl in (1, 2, 3)]}"
        )
        return carry_probes(self.board, self.probes, before, self.rotation)

    def reset(self, level: int) -> list[ProbeShift]:
        """Return a platform's own angle to its initial value."""
        before = self.rotation.copy()
        self.rotation.reset(level)
        logger.info(f"Level {level} reset to {self.rotation.angle(level)} degrees")
        return carry_probes(self.board, self.probes, before, self.rotation)

    def rotate_next(self) -> tuple[int, list[ProbeShift]]:
        """Perform the standard game rotation on the next platform in turn.

        Returns:
            Tuple of (level turned, probes displaced)
        """
        before = self.rotation.copy()
        level = self.rotation.rotate_next()
        logger.info(f"Standard rotation turned level {level}")
        return level, carry_probes(self.board, self.probes, before, self.rotation)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def locate_object(self, object_id: str) -> Position | None:
        return locate(self.board, object_id, self.rotation)

    def object_positions(self) -> dict[str, Position]:
        return locate_all(self.board, self.rotation)

    def cells(self) -> dict[str, CellState]:
        return all_cells(self.board, self.rotation)

    def reachable_cells(self, start: Position, energy: int) -> dict[str, ReachabilityEntry]:
        return reachable_cells(self.board, self.rotation, start, energy, self.rules)

    # =========================================================================
    # PROBES
    # =========================================================================

    def launch_probe(self, owner_id: str) -> Probe:
        return launch_probe(
            self.probes, self.board, self.rotation, owner_id, self.max_probes_per_owner
        )

    def move_probe(self, probe_id: str, destination: Position, energy: int) -> ReachabilityEntry:
        """Move a probe to a destination reachable with the given energy.

        Args:
            probe_id: Probe to move
            destination: Absolute target cell
            energy: Energy the owner can spend

        Returns:
            The reachability entry used (cost and path), so the caller can
            deduct the energy

        Raises:
            ValueError: If the probe is unknown or the destination is out of reach
        """
        probe = self.probes.get(probe_id)
        if probe is None:
            raise ValueError(f"Probe {probe_id} not found")

        reachable = self.reachable_cells(probe.position, energy)
        entry = reachable.get(destination.key)
        if entry is None:
            raise ValueError(
                f"Cell {destination.key} is not reachable from {probe.position.key} "
                f"with {energy} energy"
            )

        origin = probe.position
        self.probes.move(probe_id, destination)
        logger.info(
            f"Probe {probe_id} moved {origin.key} -> {destination.key} "
            f"({entry.movements} energy, path {'-'.join(entry.path)})"
        )
        return entry


def new_solar_system(
    board: Board | None = None,
    initial_angles: tuple[int, int, int] = DEFAULT_INITIAL_ANGLES,
    rules: MovementRules = DEFAULT_RULES,
) -> SolarSystem:
    """Create a solar system in its starting state.

    Args:
        board: Board definition (defaults to the standard board)
        initial_angles: Starting own angle of levels 1-3
        rules: Movement costs

    Returns:
        SolarSystem with no probes
    """
    if board is None:
        board = build_default_board()
    return SolarSystem(
        board=board,
        rotation=RotationState.initial(tuple(initial_angles)),
        rules=rules,
    )
