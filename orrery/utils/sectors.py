"""Sector and rotation-index arithmetic for the circular board."""

import math

from .constants import SECTOR_ANGLE, SECTOR_COUNT


def sector_to_index(sector: int) -> int:
    """Convert a 1-based clock sector to a 0-based rotation index.

    Args:
        sector: Sector number (1-8)

    Returns:
        Rotation index (0-7)

    Raises:
        ValueError: If sector is outside 1-8
    """
    if isinstance(sector, bool) or not isinstance(sector, int) or not (1 <= sector <= SECTOR_COUNT):
        raise ValueError(f"Invalid sector: {sector} (must be 1-{SECTOR_COUNT})")
    return sector - 1


def index_to_sector(index: int) -> int:
    """Convert a 0-based rotation index back to a 1-based sector.

    Raises:
        ValueError: If index is outside 0-7
    """
    if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < SECTOR_COUNT):
        raise ValueError(f"Invalid sector index: {index} (must be 0-{SECTOR_COUNT - 1})")
    return index + 1


def angle_to_steps(angle: float) -> int:
    """Convert a rotation angle to a whole number of sector steps.

    Angles that are not multiples of 45 degrees are snapped to the nearest
    step, with halves rounded up (22.5 -> 1, -22.5 -> 0). This is a
    deliberate simplification: animated in-between angles resolve to the
    sector the ring is closest to.

    Examples:
        >>> angle_to_steps(90)
        2
        >>> angle_to_steps(-50)
        -1
    """
    return math.floor(angle / SECTOR_ANGLE + 0.5)


def snap_angle(angle: float) -> int:
    """Round an angle to the nearest multiple of 45 degrees."""
    return angle_to_steps(angle) * SECTOR_ANGLE


def shift_sector(sector: int, steps: int) -> int:
    """Move a sector by a number of steps around the board, wrapping 8 -> 1."""
    return index_to_sector((sector_to_index(sector) + steps) % SECTOR_COUNT)


def rotate_sector(sector: int, angle: float) -> int:
    """Return where content at `sector` sits after a clockwise rotation.

    Sectors are numbered clockwise, so turning a ring clockwise by one step
    moves whatever was at sector 1 to sector 2. Rotating by the negated angle
    undoes the rotation, which is how an absolute sector is mapped back to a
    ring-relative one.

    Args:
        sector: Sector before rotation (1-8)
        angle: Rotation in degrees, positive clockwise (snapped to 45)

    Returns:
        Sector after rotation (1-8)

    Examples:
        >>> rotate_sector(1, 45)
        2
        >>> rotate_sector(1, -45)
        8
    """
    return shift_sector(sector, angle_to_steps(angle))
