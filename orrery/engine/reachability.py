"""Probe movement: cells reachable within a movement budget.

The board graph links each cell to its two neighbours on the same disk
(wrapping 8 -> 1) and to the cells at the same sector on the disks directly
inside and outside it. Disk E is never part of the graph.

Moving costs 1 per step. Leaving a cell with an asteroid field costs one
extra point unless the penalty is waived. Because steps can cost 2, the
search is label-correcting: a cell found again at a lower cost is queued
again and its record replaced, so results are true minimum costs.
"""

import logging
from collections import deque
from collections.abc import Callable
from typing import Optional

from ..models.cell import BoardCell, CellKey, ReachableCell
from ..models.rotation import RotationState
from ..utils.constants import ASTEROID_EXIT_PENALTY, EARTH_ID, MOVE_COST, TRAVERSABLE_DISKS
from ..utils.sectors import shift_sector
from .board import all_cells

logger = logging.getLogger(__name__)

BonusFn = Callable[[BoardCell], int]


def adjacent_cells(key: CellKey) -> list[CellKey]:
    """Return the traversable neighbours of a cell.

    Order is fixed: previous sector, next sector, inner disk, outer disk.
    Search tie-breaks depend on it.
    """
    neighbours = [
        CellKey(key.disk, shift_sector(key.sector, -1)),
        CellKey(key.disk, shift_sector(key.sector, 1)),
    ]
    disk_index = TRAVERSABLE_DISKS.index(key.disk)
    if disk_index > 0:
        neighbours.append(CellKey(TRAVERSABLE_DISKS[disk_index - 1], key.sector))
    if disk_index < len(TRAVERSABLE_DISKS) - 1:
        neighbours.append(CellKey(TRAVERSABLE_DISKS[disk_index + 1], key.sector))
    return neighbours


def exit_cost(cell: BoardCell, ignore_asteroid_penalty: bool = False) -> int:
    """Movement cost of one step out of `cell`."""
    if cell.has_asteroid and not ignore_asteroid_penalty:
        return MOVE_COST + ASTEROID_EXIT_PENALTY
    return MOVE_COST


def media_bonus(cell: BoardCell, asteroid_media: bool = False) -> int:
    """Media earned by a probe entering a cell.

    Comets and planets other than Earth give 1 each. Asteroid fields give 1
    only to players holding the matching technology.
    """
    bonus = 0
    if cell.has_comet:
        bonus += 1
    if cell.has_planet and cell.planet_id != EARTH_ID:
        bonus += 1
    if cell.has_asteroid and asteroid_media:
        bonus += 1
    return bonus


def media_bonus_fn(asteroid_media: bool = False) -> BonusFn:
    """Build a bonus callback that accrues media along a path."""

    def _bonus(cell: BoardCell) -> int:
        return media_bonus(cell, asteroid_media)

    return _bonus


def reachable_cells(
    start: CellKey,
    max_movements: int,
    rotation: RotationState,
    *,
    ignore_asteroid_penalty: bool = False,
    bonus_fn: Optional[BonusFn] = None,
) -> dict[CellKey, ReachableCell]:
    """Find every cell a probe can reach within a movement budget.

    Args:
        start: Cell the probe starts on (disk A to D)
        max_movements: Total movement budget
        rotation: Current ring angles
        ignore_asteroid_penalty: Waive the extra cost of leaving asteroid fields
        bonus_fn: Optional value gained on entering each cell, summed along
            the chosen path

    Returns:
        Mapping of destination -> ReachableCell. The start cell is never
        included. Among equal-cost routes the first one discovered is kept.

    Raises:
        ValueError: If the start cell is on disk E
    """
    if start.disk not in TRAVERSABLE_DISKS:
        raise ValueError(f"Invalid start cell: {start} (disk {start.disk} is not traversable)")
    if max_movements <= 0:
        return {}

    cells = all_cells(rotation)
    best: dict[CellKey, ReachableCell] = {start: ReachableCell(movements=0, path=(start,))}
    queue: deque[CellKey] = deque([start])

    while queue:
        current_key = queue.popleft()
        current = best[current_key]
        step_cost = exit_cost(cells[current_key], ignore_asteroid_penalty)
        movements = current.movements + step_cost
        if movements > max_movements:
            continue

        for neighbour in adjacent_cells(current_key):
            known = best.get(neighbour)
            if known is not None and known.movements <= movements:
                continue
            bonus = current.bonus
            if bonus_fn is not None:
                bonus += bonus_fn(cells[neighbour])
            best[neighbour] = ReachableCell(
                movements=movements,
                path=current.path + (neighbour,),
                bonus=bonus,
            )
            queue.append(neighbour)

    del best[start]
    logger.debug(
        f"Reachability from {start} with budget {max_movements}: {len(best)} cells "
        f"(asteroid penalty {'waived' if ignore_asteroid_penalty else 'applied'})"
    )
    return best


def reachable_cells_with_energy(
    start: CellKey,
    movements: int,
    energy: int,
    rotation: RotationState,
    **kwargs,
) -> dict[CellKey, ReachableCell]:
    """Find reachable cells when energy can be spent as extra movement.

    Each point of energy converts to one movement point.
    """
    return reachable_cells(start, movements + energy, rotation, **kwargs)
