"""Utility functions and constants for Orrery."""

from .constants import (
    ASTEROID_EXIT_PENALTY,
    BASE_LEVEL,
    DISKS,
    EARTH_ID,
    INITIAL_ROTATION_ANGLES,
    LEVELS,
    MOVE_COST,
    RING_LEVELS,
    ROTATION_STEP,
    SECTOR_ANGLE,
    SECTOR_COUNT,
    SECTORS,
    TRAVERSABLE_DISKS,
)
from .sectors import (
    angle_to_steps,
    index_to_sector,
    rotate_sector,
    sector_to_index,
    shift_sector,
    snap_angle,
)

__all__ = [
    "ASTEROID_EXIT_PENALTY",
    "BASE_LEVEL",
    "DISKS",
    "EARTH_ID",
    "INITIAL_ROTATION_ANGLES",
    "LEVELS",
    "MOVE_COST",
    "RING_LEVELS",
    "ROTATION_STEP",
    "SECTOR_ANGLE",
    "SECTOR_COUNT",
    "SECTORS",
    "TRAVERSABLE_DISKS",
    "angle_to_steps",
    "index_to_sector",
    "rotate_sector",
    "sector_to_index",
    "shift_sector",
    "snap_angle",
]
