"""Board cell aggregation.

Projects the catalog and the current rotation state onto the 40 cells of
the fixed board. Cells have no state of their own: they are recomputed from
scratch for every rotation state.
"""

from ..models.celestial import CelestialObject, ObjectKind
from ..models.cell import BoardCell, CellKey
from ..models.rotation import RotationState
from ..utils.constants import BASE_LEVEL, DISKS, SECTORS
from .catalog import all_objects
from .positions import absolute_position
from .visibility import is_occluded_above


def _visible_occupants(rotation: RotationState) -> dict[CellKey, list[CelestialObject]]:
    """Group every visible planet, comet and asteroid field by its current cell."""
    occupants: dict[CellKey, list[CelestialObject]] = {}
    for obj in all_objects():
        if not obj.kind.is_occupant:
            continue
        position = absolute_position(obj, rotation)
        if position.visible:
            occupants.setdefault(position.cell, []).append(obj)
    return occupants


def _build_cell(key: CellKey, objects: list[CelestialObject], rotation: RotationState) -> BoardCell:
    planets = [obj for obj in objects if obj.kind is ObjectKind.PLANET]
    return BoardCell(
        disk=key.disk,
        sector=key.sector,
        has_asteroid=any(obj.kind is ObjectKind.ASTEROID for obj in objects),
        has_comet=any(obj.kind is ObjectKind.COMET for obj in objects),
        has_planet=bool(planets),
        planet_id=planets[0].id if planets else None,
        planet_name=planets[0].name if planets else None,
        occupants=tuple(obj.id for obj in objects),
        visible=not is_occluded_above(BASE_LEVEL, key.disk, key.sector, rotation),
    )


def all_cells(rotation: RotationState) -> dict[CellKey, BoardCell]:
    """Compute every board cell for a rotation state.

    A cell's occupancy flags accumulate over every visible object whose
    absolute position falls on it, whatever ring the object sits on. The
    cell's own `visible` flag says whether the static board shows there.

    Args:
        rotation: Current ring angles

    Returns:
        Mapping of CellKey -> BoardCell for all disks and sectors
    """
    occupants = _visible_occupants(rotation)
    cells = {}
    for disk in DISKS:
        for sector in SECTORS:
            key = CellKey(disk, sector)
            cells[key] = _build_cell(key, occupants.get(key, []), rotation)
    return cells


def get_cell(key: CellKey, rotation: RotationState) -> BoardCell:
    """Compute a single board cell."""
    return _build_cell(key, objects_on_cell(key, rotation), rotation)


def objects_on_cell(key: CellKey, rotation: RotationState) -> list[CelestialObject]:
    """Return the visible catalog objects currently on a cell."""
    return _visible_occupants(rotation).get(key, [])
