"""Probe placement and rotation effects.

This module handles:
1. Launching a probe onto Earth's current cell
2. Carrying probes along when the platform under them turns
3. Pushing probes aside when a turning platform covers their cell
"""

import logging
from dataclasses import dataclass

from ..models import Board, Position, Probe, ProbeRegistry, RotationState
from ..utils import LAUNCH_OBJECT_ID, MAX_PROBES_PER_OWNER, SECTOR_COUNT
from .resolver import absolute_to_relative, locate, relative_to_absolute, rotation_steps, surface_level

logger = logging.getLogger(__name__)


@dataclass
class ProbeShift:
    """Record of a probe displaced by a rotation.

    Attributes:
        probe_id: ID of the displaced probe
        owner_id: Owner of the probe
        origin: Cell before the rotation
        dest: Cell after the rotation
        reason: "carried" (rode its platform) or "pushed" (covered by a platform)
    """

    probe_id: str
    owner_id: str
    origin: Position
    dest: Position
    reason: str


def launch_probe(
    registry: ProbeRegistry,
    board: Board,
    rotation: RotationState,
    owner_id: str,
    max_probes: int = MAX_PROBES_PER_OWNER,
) -> Probe:
    """Place a new probe on Earth's current position.

    Args:
        registry: Probe registry to add to
        board: Board holding the launch object
        rotation: Current rotation state
        owner_id: Player launching the probe
        max_probes: Probes an owner may have on the board at once

    Returns:
        The new probe

    Raises:
        ValueError: If the owner is at the probe limit or the board has no Earth
    """
    owned = registry.probes_of(owner_id)
    if len(owned) >= max_probes:
        raise ValueError(
            f"Player {owner_id} already has {len(owned)} probe(s) on the board (max {max_probes})"
        )

    position = locate(board, LAUNCH_OBJECT_ID, rotation)
    if position is None:
        raise ValueError(f"Board has no launch object {LAUNCH_OBJECT_ID!r}")

    probe = registry.add(
        Probe(id=registry.next_probe_id(owner_id), owner_id=owner_id, position=position)
    )
    logger.info(f"Probe {probe.id} launched by {owner_id} at {position.key}")
    return probe


def carry_probes(
    board: Board,
    registry: ProbeRegistry,
    before: RotationState,
    after: RotationState,
) -> list[ProbeShift]:
    """Update probe positions after the platforms turned.

    A probe stands on the surface level of its cell. If that level's total
    rotation changed, the probe rides along and keeps its relative sector.
    Otherwise, if a turning platform now covers the cell, the probe is pushed
    one sector in the direction that platform travelled, provided that cell
    exists. Probes on unaffected cells stay put.

    Args:
        board: Board definition
        registry: Probes to update in place
        before: Rotation state before the turn
        after: Rotation state after the turn

    Returns:
        List of displacements
    """
    shifts = []

    for probe in registry:
        origin = probe.position
        level = surface_level(board, before, origin)
        if level is None:
            continue

        old_total = before.total_rotation(level)
        new_total = after.total_rotation(level)

        if old_total != new_total:
            relative = absolute_to_relative(origin.sector, old_total)
            dest = Position(origin.disk, relative_to_absolute(relative, new_total))
            reason = "carried"
        else:
            dest = _push_destination(board, before, after, origin, level)
            reason = "pushed"

        if dest is None or dest == origin:
            continue

        registry.move(probe.id, dest)
        shifts.append(
            ProbeShift(
                probe_id=probe.id,
                owner_id=probe.owner_id,
                origin=origin,
                dest=dest,
                reason=reason,
            )
        )
        logger.info(f"Probe {probe.id} {reason} from {origin.key} to {dest.key}")

    return shifts


def _push_destination(
    board: Board,
    before: RotationState,
    after: RotationState,
    origin: Position,
    level: int,
) -> Position | None:
    """Cell a covered probe is pushed to, or None if it is not covered."""
    covering = surface_level(board, after, origin)
    if covering is None or covering == level:
        return None

    layout = board.disk(origin.disk)
    if layout.levels.index(covering) < layout.levels.index(level):
        return None

    moved_steps = rotation_steps(after.total_rotation(covering)) - rotation_steps(
        before.total_rotation(covering)
    )
    if moved_steps == 0:
        return None

    # Content of a platform turned by +n steps moves n sectors down the numbering
    direction = -1 if moved_steps > 0 else 1
    dest = Position(origin.disk, (origin.sector - 1 + direction) % SECTOR_COUNT + 1)
    if surface_level(board, after, dest) is None:
        return None
    return dest
