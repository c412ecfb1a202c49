"""Data models for Orrery."""

from .celestial import CelestialObject, ObjectKind, SectorType
from .cell import AbsolutePosition, BoardCell, CellKey, ReachableCell
from .probe import Probe, ProbePosition
from .rotation import RotationState
from .sector import MarkerSlot, ScanSector
from .solar_system import SolarSystem

__all__ = [
    "AbsolutePosition",
    "BoardCell",
    "CelestialObject",
    "CellKey",
    "MarkerSlot",
    "ObjectKind",
    "Probe",
    "ProbePosition",
    "ReachableCell",
    "RotationState",
    "ScanSector",
    "SectorType",
    "SolarSystem",
]
