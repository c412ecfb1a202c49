"""Ring occlusion: which level a viewer sees at each board position.

Rings are stacked with ring 1 on top, ring 2 under it and ring 3 at the
bottom, all of them above the static board. A ring hides whatever is under
it unless the cell over that position is a hollow cut-out.
"""

from ..models.cell import CellKey
from ..models.rotation import RotationState
from ..utils.constants import BASE_LEVEL, LEVELS, RING_LEVELS
from ..utils.sectors import rotate_sector
from .catalog import is_hollow, ring_covers


def relative_sector(level: int, absolute_sector: int, rotation: RotationState) -> int:
    """Map an absolute board sector onto the sector of a ring under it.

    Args:
        level: Ring level (0 returns the sector unchanged)
        absolute_sector: Sector on the fixed board (1-8)
        rotation: Current ring angles

    Returns:
        Sector relative to the ring
    """
    if level == BASE_LEVEL:
        return absolute_sector
    return rotate_sector(absolute_sector, -rotation.angle(level))


def _ring_blocks(level: int, disk: str, absolute_sector: int, rotation: RotationState) -> bool:
    if not ring_covers(level, disk):
        return False
    return not is_hollow(level, disk, relative_sector(level, absolute_sector, rotation))


def visible_level(disk: str, absolute_sector: int, rotation: RotationState) -> int:
    """Return the topmost opaque level at a board position.

    Rings are checked from the top down; the first ring that covers the disk
    and is not hollow at that position is what the viewer sees. When every
    ring is hollow there (or none covers the disk) the static board shows.

    Args:
        disk: Disk name ("A" to "E")
        absolute_sector: Sector on the fixed board (1-8)
        rotation: Current ring angles

    Returns:
        Visible level (0-3)

    Raises:
        ValueError: If the disk or sector is off the board
    """
    CellKey(disk, absolute_sector)  # Raises on off-board coordinates
    for level in RING_LEVELS:
        if _ring_blocks(level, disk, absolute_sector, rotation):
            return level
    return BASE_LEVEL


def is_occluded_above(
    object_level: int, disk: str, absolute_sector: int, rotation: RotationState
) -> bool:
    """Check whether a ring sitting above an object hides it.

    Only rings strictly above the object's own level are tested: an object's
    own ring cell is the thing occupying the position, not a cover over it.
    Everything is above the static board, so level 0 tests all three rings.

    Args:
        object_level: Level the object rests on (0-3)
        disk: Disk name
        absolute_sector: Sector on the fixed board
        rotation: Current ring angles

    Returns:
        True if some ring above the object is opaque at that position

    Raises:
        ValueError: If the level, disk or sector is out of range
    """
    if object_level not in LEVELS:
        raise ValueError(f"Invalid level: {object_level} (must be 0-3)")
    CellKey(disk, absolute_sector)  # Raises on off-board coordinates
    rings_above = RING_LEVELS if object_level == BASE_LEVEL else range(1, object_level)
    return any(_ring_blocks(level, disk, absolute_sector, rotation) for level in rings_above)
