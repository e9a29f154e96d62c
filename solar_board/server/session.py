"""Board session management."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field

from ..engine.reachability import DEFAULT_RULES, SETI_RULES
from ..engine.resolver import is_visible
from ..engine.solar_system import SolarSystem, new_solar_system
from ..utils.serialization import (
    serialize_cell,
    serialize_position,
    serialize_probe,
    serialize_rotation,
)

logger = logging.getLogger(__name__)


@dataclass
class BoardSession:
    """One board in play behind the API.

    Every request that reads or mutates the board holds the lock, so a
    rotation and a reachability query never interleave.
    """

    id: str
    system: SolarSystem
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def get_state(self) -> dict:
        """Serialize the full board state for clients.

        Returns:
            Dictionary with rotation, probes, object positions and cells
        """
        board = self.system.board
        rotation = self.system.rotation
        objects = {}
        for object_id, position in self.system.object_positions().items():
            obj = board.find(object_id)
            if not obj.is_physical:
                continue
            objects[object_id] = {
                "name": obj.name,
                "type": obj.type,
                "level": obj.level,
                "position": serialize_position(position),
                "visible": is_visible(board, rotation, object_id),
            }

        return {
            "boardId": self.id,
            "rotation": serialize_rotation(rotation),
            "probes": [serialize_probe(p) for p in self.system.probes],
            "objects": objects,
            "cells": [serialize_cell(c) for c in self.system.cells().values()],
        }


class BoardSessionManager:
    """Manages all active board sessions.

    In-memory storage; sessions live as long as the process.
    """

    def __init__(self):
        self.sessions: dict[str, BoardSession] = {}

    def create_session(
        self,
        initial_angles: tuple[int, int, int] = (0, 0, 0),
        asteroid_rule: bool = False,
    ) -> BoardSession:
        """Create a new session on the standard board.

        Args:
            initial_angles: Starting own angle of levels 1-3
            asteroid_rule: Charge extra energy to leave asteroid fields

        Returns:
            Newly created BoardSession

        Raises:
            ValueError: If the initial angles are not multiples of 45
        """
        board_id = f"board-{uuid.uuid4().hex[:8]}"
        system = new_solar_system(
            initial_angles=tuple(initial_angles),
            rules=SETI_RULES if asteroid_rule else DEFAULT_RULES,
        )
        session = BoardSession(id=board_id, system=system)
        self.sessions[board_id] = session

        logger.info(
            f"Created board {board_id}: initial angles={tuple(initial_angles)}, "
            f"asteroid rule={asteroid_rule}"
        )
        return session

    def get(self, board_id: str) -> BoardSession | None:
        return self.sessions.get(board_id)

    def delete(self, board_id: str) -> bool:
        """Delete a board session.

        Returns:
            True if deleted, False if not found
        """
        if board_id in self.sessions:
            del self.sessions[board_id]
            logger.info(f"Deleted board {board_id}")
            return True
        return False

    def cleanup_all(self):
        """Clean up all sessions (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} board sessions")
        self.sessions.clear()
