"""Data models for the solar board."""

from .board import Board, DiskLayout
from .celestial import CelestialObject
from .position import Position
from .probe import Probe, ProbeRegistry
from .rotation import RotationState

__all__ = [
    "Board",
    "CelestialObject",
    "DiskLayout",
    "Position",
    "Probe",
    "ProbeRegistry",
    "RotationState",
]
