"""Plain dict views of board state.

These are the JSON-compatible shapes the HTTP layer sends to clients: plain
integers, strings and position pairs.
"""

from typing import Any

from ..engine.probes import ProbeShift
from ..engine.reachability import ReachabilityEntry
from ..engine.resolver import CellState
from ..models.position import Position
from ..models.probe import Probe
from ..models.rotation import RotationState


def serialize_position(position: Position | None) -> dict[str, Any] | None:
    """Convert Position to dictionary."""
    if position is None:
        return None
    return {"disk": position.disk, "sector": position.sector, "key": position.key}


def deserialize_position(data: dict[str, Any]) -> Position:
    """Reconstruct Position from dictionary."""
    return Position(disk=data["disk"], sector=data["sector"])


def serialize_rotation(rotation: RotationState) -> dict[str, Any]:
    """Convert RotationState to dictionary, including the compound totals."""
    return {
        "angle1": rotation.angle1,
        "angle2": rotation.angle2,
        "angle3": rotation.angle3,
        "initialAngles": list(rotation.initial_angles),
        "nextLevel": rotation.next_level,
        "totals": {str(level): rotation.total_rotation(level) for level in (1, 2, 3)},
    }


def deserialize_rotation(data: dict[str, Any]) -> RotationState:
    """Reconstruct RotationState from dictionary."""
    return RotationState(
        angle1=data["angle1"],
        angle2=data["angle2"],
        angle3=data["angle3"],
        initial_angles=tuple(data.get("initialAngles", (0, 0, 0))),
        next_level=data.get("nextLevel", 1),
    )


def serialize_probe(probe: Probe) -> dict[str, Any]:
    """Convert Probe to dictionary."""
    return {
        "id": probe.id,
        "ownerId": probe.owner_id,
        "position": serialize_position(probe.position),
    }


def deserialize_probe(data: dict[str, Any]) -> Probe:
    """Reconstruct Probe from dictionary."""
    return Probe(
        id=data["id"],
        owner_id=data["ownerId"],
        position=deserialize_position(data["position"]),
    )


def serialize_shift(shift: ProbeShift) -> dict[str, Any]:
    """Convert ProbeShift to dictionary."""
    return {
        "probeId": shift.probe_id,
        "ownerId": shift.owner_id,
        "origin": shift.origin.key,
        "dest": shift.dest.key,
        "reason": shift.reason,
    }


def serialize_cell(cell: CellState) -> dict[str, Any]:
    """Convert CellState to dictionary."""
    return {
        "key": cell.position.key,
        "disk": cell.position.disk,
        "sector": cell.position.sector,
        "exists": cell.exists,
        "surfaceLevel": cell.surface_level,
        "hasPlanet": cell.has_planet,
        "hasComet": cell.has_comet,
        "hasAsteroid": cell.has_asteroid,
        "planetName": cell.planet_name,
    }


def serialize_reachability(reachable: dict[str, ReachabilityEntry]) -> dict[str, dict[str, Any]]:
    """Convert a reachability map to {key: {movements, path}}."""
    return {
        key: {"movements": entry.movements, "path": list(entry.path)}
        for key, entry in reachable.items()
    }
