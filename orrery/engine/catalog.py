"""Static catalog of celestial objects, one table per board level.

The static board (level 0) carries the outer planets and the comets and
asteroid fields printed under the rings. Each rotating ring carries a full
description of the disks it covers: every (disk, sector) of its jurisdiction
is either an object, a hollow cut-out, or an empty opaque cell.

Tables are validated once at import time.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from ..models.celestial import CelestialObject, ObjectKind, SectorType
from ..utils.constants import RING_LEVELS, SECTORS

logger = logging.getLogger(__name__)

_PLANET = ObjectKind.PLANET
_COMET = ObjectKind.COMET
_ASTEROID = ObjectKind.ASTEROID
_HOLLOW = ObjectKind.HOLLOW
_EMPTY = ObjectKind.EMPTY


def _entries(level: int, rows: Iterable[tuple[str, ObjectKind, str, str, int]]) -> tuple[CelestialObject, ...]:
    return tuple(
        CelestialObject(id=obj_id, kind=kind, name=name, disk=disk, sector=sector, level=level)
        for obj_id, kind, name, disk, sector in rows
    )


FIXED_OBJECTS = _entries(
    0,
    [
        ("neptune", _PLANET, "Neptune", "D", 3),
        ("uranus", _PLANET, "Uranus", "D", 6),
        ("comet-d1", _COMET, "Comet", "D", 1),
        ("comet-d7", _COMET, "Comet", "D", 7),
        ("comet-c4", _COMET, "Comet", "C", 4),
        ("comet-b2", _COMET, "Comet", "B", 2),
        ("comet-b5", _COMET, "Comet", "B", 5),
        ("comet-a5", _COMET, "Comet", "A", 5),
        ("comet-a7", _COMET, "Comet", "A", 7),
        ("comet-a8", _COMET, "Comet", "A", 8),
        ("asteroid-c2", _ASTEROID, "Asteroids", "C", 2),
        ("asteroid-c3", _ASTEROID, "Asteroids", "C", 3),
        ("asteroid-c5", _ASTEROID, "Asteroids", "C", 5),
        ("asteroid-c7", _ASTEROID, "Asteroids", "C", 7),
        ("asteroid-b4", _ASTEROID, "Asteroids", "B", 4),
        ("asteroid-b8", _ASTEROID, "Asteroids", "B", 8),
        ("asteroid-a2", _ASTEROID, "Asteroids", "A", 2),
        ("asteroid-a3", _ASTEROID, "Asteroids", "A", 3),
        ("asteroid-a6", _ASTEROID, "Asteroids", "A", 6),
    ],
)

# Ring 1: topmost ring, covers disks A to C
RING1_OBJECTS = _entries(
    1,
    [
        ("saturn", _PLANET, "Saturn", "C", 1),
        ("hollow-c2-l1", _HOLLOW, "Hollow C2", "C", 2),
        ("hollow-c3-l1", _HOLLOW, "Hollow C3", "C", 3),
        ("empty-c4-l1", _EMPTY, "Empty C4", "C", 4),
        ("jupiter", _PLANET, "Jupiter", "C", 5),
        ("empty-c6-l1", _EMPTY, "Empty C6", "C", 6),
        ("hollow-c7-l1", _HOLLOW, "Hollow C7", "C", 7),
        ("hollow-c8-l1", _HOLLOW, "Hollow C8", "C", 8),
        ("asteroid-b1-l1", _ASTEROID, "Asteroids", "B", 1),
        ("hollow-b2-l1", _HOLLOW, "Hollow B2", "B", 2),
        ("empty-b3-l1", _EMPTY, "Empty B3", "B", 3),
        ("asteroid-b4-l1", _ASTEROID, "Asteroids", "B", 4),
        ("hollow-b5-l1", _HOLLOW, "Hollow B5", "B", 5),
        ("empty-b6-l1", _EMPTY, "Empty B6", "B", 6),
        ("hollow-b7-l1", _HOLLOW, "Hollow B7", "B", 7),
        ("comet-b8-l1", _COMET, "Comet", "B", 8),
        ("asteroid-a1-l1", _ASTEROID, "Asteroids", "A", 1),
        ("asteroid-a2-l1", _ASTEROID, "Asteroids", "A", 2),
        ("empty-a3-l1", _EMPTY, "Empty A3", "A", 3),
        ("hollow-a4-l1", _HOLLOW, "Hollow A4", "A", 4),
        ("hollow-a5-l1", _HOLLOW, "Hollow A5", "A", 5),
        ("asteroid-a6-l1", _ASTEROID, "Asteroids", "A", 6),
        ("comet-a7-l1", _COMET, "Comet", "A", 7),
        ("empty-a8-l1", _EMPTY, "Empty A8", "A", 8),
    ],
)

# Ring 2: covers disks A and B
RING2_OBJECTS = _entries(
    2,
    [
        ("mars", _PLANET, "Mars", "B", 1),
        ("hollow-b2-l2", _HOLLOW, "Hollow B2", "B", 2),
        ("hollow-b3-l2", _HOLLOW, "Hollow B3", "B", 3),
        ("hollow-b4-l2", _HOLLOW, "Hollow B4", "B", 4),
        ("asteroid-b5-l2", _ASTEROID, "Asteroids", "B", 5),
        ("empty-b6-l2", _EMPTY, "Empty B6", "B", 6),
        ("hollow-b7-l2", _HOLLOW, "Hollow B7", "B", 7),
        ("hollow-b8-l2", _HOLLOW, "Hollow B8", "B", 8),
        ("empty-a1-l2", _EMPTY, "Empty A1", "A", 1),
        ("hollow-a2-l2", _HOLLOW, "Hollow A2", "A", 2),
        ("hollow-a3-l2", _HOLLOW, "Hollow A3", "A", 3),
        ("hollow-a4-l2", _HOLLOW, "Hollow A4", "A", 4),
        ("empty-a5-l2", _EMPTY, "Empty A5", "A", 5),
        ("asteroid-a6-l2", _ASTEROID, "Asteroids", "A", 6),
        ("empty-a7-l2", _EMPTY, "Empty A7", "A", 7),
        ("asteroid-a8-l2", _ASTEROID, "Asteroids", "A", 8),
    ],
)

# Ring 3: bottom ring, covers disk A only
RING3_OBJECTS = _entries(
    3,
    [
        ("empty-a1-l3", _EMPTY, "Empty A1", "A", 1),
        ("earth", _PLANET, "Earth", "A", 2),
        ("hollow-a3-l3", _HOLLOW, "Hollow A3", "A", 3),
        ("venus", _PLANET, "Venus", "A", 4),
        ("empty-a5-l3", _EMPTY, "Empty A5", "A", 5),
        ("mercury", _PLANET, "Mercury", "A", 6),
        ("hollow-a7-l3", _HOLLOW, "Hollow A7", "A", 7),
        ("hollow-a8-l3", _HOLLOW, "Hollow A8", "A", 8),
    ],
)

TABLES: dict[int, tuple[CelestialObject, ...]] = {
    0: FIXED_OBJECTS,
    1: RING1_OBJECTS,
    2: RING2_OBJECTS,
    3: RING3_OBJECTS,
}


def validate_catalog(tables: dict[int, tuple[CelestialObject, ...]]) -> dict[int, tuple[str, ...]]:
    """Check catalog tables for consistency and derive ring jurisdictions.

    Rules:
    - Object ids are unique across all tables
    - Every entry's level matches the table it sits in
    - The static board has no hollow or empty cells
    - Each rotating ring describes every sector of every disk it covers,
      exactly once

    Args:
        tables: Mapping of level -> catalog entries

    Returns:
        Mapping of ring level -> disks covered by that ring

    Raises:
        ValueError: If any rule is broken
    """
    seen_ids: set[str] = set()
    coverage: dict[int, tuple[str, ...]] = {}

    for level, objects in tables.items():
        cells: dict[tuple[str, int], str] = {}
        for obj in objects:
            if obj.id in seen_ids:
                raise ValueError(f"Duplicate catalog id: {obj.id}")
            seen_ids.add(obj.id)

            if obj.level != level:
                raise ValueError(
                    f"Catalog entry {obj.id} has level {obj.level} but is listed under level {level}"
                )
            if level == 0:
                if not obj.kind.is_occupant:
                    raise ValueError(f"Static board entry {obj.id} cannot be {obj.kind.value}")
                continue

            cell = (obj.disk, obj.sector)
            if cell in cells:
                raise ValueError(
                    f"Ring {level} describes {obj.disk}{obj.sector} twice ({cells[cell]}, {obj.id})"
                )
            cells[cell] = obj.id

        if level == 0:
            continue

        disks = tuple(sorted({disk for disk, _ in cells}))
        for disk in disks:
            missing = [s for s in SECTORS if (disk, s) not in cells]
            if missing:
                raise ValueError(
                    f"Ring {level} covers disk {disk} but does not describe sectors {missing}"
                )
        coverage[level] = disks

    for level in RING_LEVELS:
        coverage.setdefault(level, ())

    return coverage


RING_COVERAGE = validate_catalog(TABLES)

_SECTOR_TYPES: dict[tuple[int, str, int], SectorType] = {
    (obj.level, obj.disk, obj.sector): obj.kind.sector_type
    for level in RING_LEVELS
    for obj in TABLES[level]
}
_BY_ID: dict[str, CelestialObject] = {obj.id: obj for table in TABLES.values() for obj in table}

logger.debug(
    f"Catalog validated: {len(_BY_ID)} objects, ring coverage "
    + ", ".join(f"{level}={''.join(disks)}" for level, disks in RING_COVERAGE.items())
)


def all_objects() -> tuple[CelestialObject, ...]:
    """Return every catalog entry, static board first then rings 1 to 3."""
    return FIXED_OBJECTS + RING1_OBJECTS + RING2_OBJECTS + RING3_OBJECTS


def objects_for_level(level: int) -> tuple[CelestialObject, ...]:
    """Return the catalog table of one level."""
    if level not in TABLES:
        raise ValueError(f"Invalid level: {level} (must be 0-3)")
    return TABLES[level]


def find_object(object_id: str) -> Optional[CelestialObject]:
    """Look up a catalog entry by id.

    Returns:
        The entry, or None if no table lists that id
    """
    return _BY_ID.get(object_id)


def ring_covers(level: int, disk: str) -> bool:
    """Return True if the ring at `level` lies over `disk`."""
    return disk in RING_COVERAGE.get(level, ())


def sector_type(level: int, disk: str, relative_sector: int) -> Optional[SectorType]:
    """Classify a ring cell.

    Returns:
        The cell's SectorType, or None when the ring does not cover the disk
    """
    return _SECTOR_TYPES.get((level, disk, relative_sector))


def is_hollow(level: int, disk: str, relative_sector: int) -> bool:
    """Return True if the ring cell is a transparent cut-out."""
    return sector_type(level, disk, relative_sector) is SectorType.HOLLOW
