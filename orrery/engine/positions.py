"""Absolute positions of catalog objects and tokens."""

from typing import Optional

from ..models.celestial import CelestialObject
from ..models.cell import AbsolutePosition, CellKey
from ..models.rotation import RotationState
from ..utils.constants import BASE_LEVEL, LEVELS
from ..utils.sectors import rotate_sector
from .catalog import all_objects, find_object
from .visibility import is_occluded_above


def token_position(
    disk: str, relative_sector: int, level: int, rotation: RotationState
) -> AbsolutePosition:
    """Compute where something resting on a ring currently sits.

    Works for any token, catalogued or not (probes, markers).

    Args:
        disk: Disk name
        relative_sector: Sector relative to the token's ring (1-8)
        level: Ring the token rests on (0 = static board)
        rotation: Current ring angles

    Returns:
        AbsolutePosition with the absolute sector and visibility

    Raises:
        ValueError: If the level, disk or sector is out of range
    """
    if level not in LEVELS:
        raise ValueError(f"Invalid level: {level} (must be 0-3)")
    CellKey(disk, relative_sector)  # Raises on off-board coordinates
    if level == BASE_LEVEL:
        absolute_sector = rotate_sector(relative_sector, 0)
    else:
        absolute_sector = rotate_sector(relative_sector, rotation.angle(level))

    return AbsolutePosition(
        disk=disk,
        relative_sector=relative_sector,
        absolute_sector=absolute_sector,
        visible=not is_occluded_above(level, disk, absolute_sector, rotation),
    )


def absolute_position(obj: CelestialObject, rotation: RotationState) -> AbsolutePosition:
    """Compute a catalog object's absolute position after rotation."""
    return token_position(obj.disk, obj.sector, obj.level, rotation)


def object_position(object_id: str, rotation: RotationState) -> Optional[AbsolutePosition]:
    """Look up a catalog object by id and compute its absolute position.

    Returns:
        AbsolutePosition, or None if the id is not in the catalog
    """
    obj = find_object(object_id)
    if obj is None:
        return None
    return absolute_position(obj, rotation)


def all_absolute_positions(rotation: RotationState) -> dict[str, AbsolutePosition]:
    """Compute the absolute position of every catalog object, keyed by id."""
    return {obj.id: absolute_position(obj, rotation) for obj in all_objects()}
