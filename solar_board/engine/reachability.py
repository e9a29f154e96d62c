"""Energy-bounded probe reachability.

The movement graph depends on the rotation state (which cells exist, and
which platform surface a probe stands on), so it is rebuilt on every query
instead of being cached. The board has at most 40 cells, so this stays cheap.

Search:
1. Uniform-cost search from the start cell (Dijkstra over a binary heap)
2. Same-disk neighbours (next sector, then previous) before radial ones
   (inner disk, then outer disk), all at the same absolute sector
3. Cells with no surface on any platform are never entered
4. Ties are broken by insertion order so paths are reproducible
"""

import heapq
import logging
from dataclasses import dataclass, field

from ..models import Board, Position, RotationState
from ..utils import ASTEROID, ASTEROID_EXIT_SURCHARGE, DISK_NAMES, MOVE_COST, SECTOR_COUNT
from .resolver import cell_exists, surface_object

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovementRules:
    """Energy costs of probe movement.

    Attributes:
        move_cost: Energy spent per cell entered
        asteroid_exit_surcharge: Extra energy spent when leaving an asteroid field
    """

    move_cost: int = MOVE_COST
    asteroid_exit_surcharge: int = 0

    def __post_init__(self):
        """Validate movement rules after initialization."""
        if self.move_cost <= 0:
            raise ValueError(f"Invalid move_cost: {self.move_cost} (must be > 0)")
        if self.asteroid_exit_surcharge < 0:
            raise ValueError(
                f"Invalid asteroid_exit_surcharge: {self.asteroid_exit_surcharge} (must be >= 0)"
            )


DEFAULT_RULES = MovementRules()
SETI_RULES = MovementRules(asteroid_exit_surcharge=ASTEROID_EXIT_SURCHARGE)


@dataclass
class ReachabilityEntry:
    """Cheapest way to reach one cell.

    Attributes:
        movements: Minimum energy needed
        path: Cell keys from the start (exclusive) to the cell (inclusive)
    """

    movements: int
    path: list[str] = field(default_factory=list)


def energy_to_movements(energy: int) -> int:
    """Convert energy to movement points (one energy buys one move)."""
    return energy


def neighbors(board: Board, rotation: RotationState, position: Position) -> list[Position]:
    """Existing cells one move away from a position, in expansion order.

    Order: same disk next sector, same disk previous sector, inner disk,
    outer disk. A position that does not exist itself has no neighbours.
    Radial moves only reach the adjacent disk band; a disk missing from the
    board is a gap, not a shortcut.
    """
    if not cell_exists(board, rotation, position):
        return []

    candidates = [
        Position(position.disk, position.sector % SECTOR_COUNT + 1),
        Position(position.disk, (position.sector - 2) % SECTOR_COUNT + 1),
    ]

    index = position.disk_index
    if index > 0:
        candidates.append(Position(DISK_NAMES[index - 1], position.sector))
    if index < len(DISK_NAMES) - 1:
        candidates.append(Position(DISK_NAMES[index + 1], position.sector))

    return [c for c in candidates if cell_exists(board, rotation, c)]


def _exit_cost(
    board: Board, rotation: RotationState, position: Position, rules: MovementRules
) -> int:
    cost = rules.move_cost
    if rules.asteroid_exit_surcharge:
        obj = surface_object(board, rotation, position)
        if obj is not None and obj.type == ASTEROID:
            cost += rules.asteroid_exit_surcharge
    return cost


def reachable_cells(
    board: Board,
    rotation: RotationState,
    start: Position,
    budget: int,
    rules: MovementRules = DEFAULT_RULES,
) -> dict[str, ReachabilityEntry]:
    """Compute every cell a probe can reach within an energy budget.

    Args:
        board: Board definition
        rotation: Current rotation state
        start: Absolute starting cell
        budget: Energy available (>= 0)
        rules: Movement costs

    Returns:
        Mapping from cell key to its cheapest cost and path, excluding the
        start cell. Empty when the budget is 0 or the start cell does not exist.

    Raises:
        ValueError: If the budget is negative
    """
    if isinstance(budget, bool) or not isinstance(budget, int):
        raise ValueError(f"Invalid budget: {budget!r} (must be an integer)")
    if budget < 0:
        raise ValueError(f"Invalid budget: {budget} (must be >= 0)")

    if budget == 0:
        return {}

    if not cell_exists(board, rotation, start):
        logger.debug(f"Start cell {start.key} does not exist under current rotation")
        return {}

    best: dict[str, int] = {start.key: 0}
    settled: set[str] = set()
    reachable: dict[str, ReachabilityEntry] = {}

    # (cost, insertion order, position, path)
    counter = 0
    frontier: list[tuple[int, int, Position, list[str]]] = [(0, counter, start, [])]

    while frontier:
        cost, _, current, path = heapq.heappop(frontier)
        if current.key in settled:
            continue
        settled.add(current.key)

        if current != start:
            reachable[current.key] = ReachabilityEntry(movements=cost, path=path)

        step_cost = _exit_cost(board, rotation, current, rules)
        new_cost = cost + step_cost
        if new_cost > budget:
            continue

        for neighbor in neighbors(board, rotation, current):
            if neighbor.key in settled:
                continue
            if new_cost >= best.get(neighbor.key, budget + 1):
                continue
            best[neighbor.key] = new_cost
            counter += 1
            heapq.heappush(frontier, (new_cost, counter, neighbor, path + [neighbor.key]))

    logger.debug(
        f"Reachability from {start.key} with budget {budget}: "
        f"{len(reachable)} cells, {len(settled)} settled"
    )
    return reachable


def reachable_cells_with_energy(
    board: Board,
    rotation: RotationState,
    start: Position,
    movements: int,
    energy: int,
    rules: MovementRules = DEFAULT_RULES,
) -> dict[str, ReachabilityEntry]:
    """Reachability for free movement points plus energy converted to moves."""
    if movements < 0:
        raise ValueError(f"Invalid movements: {movements} (must be >= 0)")
    if energy < 0:
        raise ValueError(f"Invalid energy: {energy} (must be >= 0)")
    return reachable_cells(
        board, rotation, start, movements + energy_to_movements(energy), rules
    )
