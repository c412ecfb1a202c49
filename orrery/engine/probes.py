"""Probe placement and probe movement caused by ring rotation.

A probe is stored relative to the level it rests on. When rings turn:

1. A probe on a ring that turned rides it to a new absolute sector
2. A probe left behind that is now covered by a ring above it is pushed one
   sector in the direction the rings moved, and may pick up media on the
   cell it lands on
3. Any other probe keeps its absolute sector

In every case the probe is then re-levelled: it rests on whatever level is
visible at its (new) absolute cell.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from ..models.cell import CellKey
from ..models.probe import Probe, ProbePosition
from ..models.rotation import RotationState
from ..models.solar_system import SolarSystem
from ..utils.constants import BASE_LEVEL, EARTH_ID, RING_LEVELS
from ..utils.sectors import angle_to_steps, shift_sector
from .board import get_cell
from .catalog import find_object
from .positions import token_position
from .reachability import media_bonus
from .visibility import relative_sector, visible_level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeShift:
    """Record of a probe displaced by a rotation.

    Attributes:
        probe_id: ID of the probe
        owner: Owner of the probe
        from_cell: Absolute cell before the rotation
        to_cell: Absolute cell after the rotation
        pushed: True if a ring above shoved the probe aside
        media: Media earned on the landing cell (pushes only)
    """

    probe_id: str
    owner: str
    from_cell: CellKey
    to_cell: CellKey
    pushed: bool
    media: int = 0


def place_probe(key: CellKey, rotation: RotationState) -> ProbePosition:
    """Store a probe on whatever level is visible at an absolute cell.

    Args:
        key: Absolute cell the probe is placed on
        rotation: Current ring angles

    Returns:
        Position relative to the visible level
    """
    level = visible_level(key.disk, key.sector, rotation)
    return ProbePosition(
        disk=key.disk,
        sector=relative_sector(level, key.sector, rotation),
        level=level,
    )


def probe_cell(position: ProbePosition, rotation: RotationState) -> CellKey:
    """Return the absolute cell a stored probe position currently maps to."""
    return token_position(position.disk, position.sector, position.level, rotation).cell


def launch_position() -> ProbePosition:
    """Position of a freshly launched probe: on Earth, riding Earth's ring."""
    earth = find_object(EARTH_ID)
    return ProbePosition(disk=earth.disk, sector=earth.sector, level=earth.level)


def _push_direction(old: RotationState, new: RotationState) -> int:
    """Direction rings moved in, as a sector step (+1, -1, or 0)."""
    moves = [
        angle_to_steps(new.angle(level)) - angle_to_steps(old.angle(level))
        for level in RING_LEVELS
    ]
    if any(step > 0 for step in moves):
        return 1
    if any(step < 0 for step in moves):
        return -1
    return 0


def _is_riding(position: ProbePosition, old: RotationState, new: RotationState) -> bool:
    if position.level == BASE_LEVEL:
        return False
    return angle_to_steps(old.angle(position.level)) != angle_to_steps(new.angle(position.level))


def _is_covered(position: ProbePosition, level_now: int) -> bool:
    """True when a ring now lies over the probe's own level."""
    if level_now == BASE_LEVEL:
        return False
    return position.level == BASE_LEVEL or level_now < position.level


def update_probe_after_rotation(
    probe: Probe,
    old: RotationState,
    new: RotationState,
    asteroid_media: bool = False,
) -> tuple[Probe, ProbeShift | None]:
    """Move one probe according to a rotation.

    Args:
        probe: Probe before the rotation
        old: Ring angles before the rotation
        new: Ring angles after the rotation
        asteroid_media: Whether the owner earns media from asteroid fields

    Returns:
        Tuple of (updated probe, shift event or None if it did not move)
    """
    position = probe.position
    old_cell = probe_cell(position, old)

    if _is_riding(position, old, new):
        new_cell = probe_cell(position, new)
        pushed = False
    else:
        direction = _push_direction(old, new)
        level_now = visible_level(old_cell.disk, old_cell.sector, new)
        pushed = direction != 0 and _is_covered(position, level_now)
        if pushed:
            new_cell = CellKey(old_cell.disk, shift_sector(old_cell.sector, direction))
        else:
            new_cell = old_cell

    media = 0
    if pushed:
        media = media_bonus(get_cell(new_cell, new), asteroid_media)
        logger.info(f"Probe {probe.id} ({probe.owner}) pushed from {old_cell} to {new_cell}, +{media} media")

    updated = replace(probe, position=place_probe(new_cell, new))
    if new_cell == old_cell:
        return updated, None
    return updated, ProbeShift(
        probe_id=probe.id,
        owner=probe.owner,
        from_cell=old_cell,
        to_cell=new_cell,
        pushed=pushed,
        media=media,
    )


def update_probes_after_rotation(
    probes: Iterable[Probe],
    old: RotationState,
    new: RotationState,
    asteroid_media_owners: frozenset[str] = frozenset(),
) -> tuple[tuple[Probe, ...], list[ProbeShift]]:
    """Move every probe according to a rotation.

    Args:
        probes: Probes before the rotation
        old: Ring angles before the rotation
        new: Ring angles after the rotation
        asteroid_media_owners: Players who earn media from asteroid fields

    Returns:
        Tuple of (updated probes in the same order, shift events)
    """
    updated = []
    shifts = []
    for probe in probes:
        moved, shift = update_probe_after_rotation(
            probe, old, new, asteroid_media=probe.owner in asteroid_media_owners
        )
        updated.append(moved)
        if shift is not None:
            shifts.append(shift)
    return tuple(updated), shifts


def rotate_solar_system(
    system: SolarSystem,
    asteroid_media_owners: frozenset[str] = frozenset(),
) -> tuple[SolarSystem, list[ProbeShift]]:
    """Turn the next ring one step and carry the probes along.

    The ring to turn cycles 1 -> 2 -> 3 -> 1. Turning a ring also turns the
    rings stacked above it.

    Args:
        system: Solar system before the rotation
        asteroid_media_owners: Players who earn media from asteroid fields

    Returns:
        Tuple of (new solar system, probe shift events)
    """
    old = system.rotation
    new = old.advance(system.next_ring_level)
    probes, shifts = update_probes_after_rotation(system.probes, old, new, asteroid_media_owners)
    logger.info(
        f"Ring {system.next_ring_level} advanced: angles "
        f"({new.level1_angle}, {new.level2_angle}, {new.level3_angle}), {len(shifts)} probes moved"
    )
    return (
        SolarSystem(
            rotation=new,
            next_ring_level=system.next_ring_level % len(RING_LEVELS) + 1,
            probes=probes,
        ),
        shifts,
    )


def launch_probe(system: SolarSystem, probe_id: str, owner: str) -> SolarSystem:
    """Add a new probe on Earth."""
    probe = Probe(id=probe_id, owner=owner, position=launch_position())
    return replace(system, probes=system.probes + (probe,))
