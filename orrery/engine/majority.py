"""Sector majority resolution and sector covering.

Marks are placed into a sector's slots front to back, so slot order is the
order in which marks were placed. When parties tie on mark count, the one
whose latest mark is most recent (furthest along the row) ranks higher.

Covering a sector:
1. The party with the majority covers it and takes its markers back
2. The runner-up keeps one marker, placed in the first slot
3. Every other marker is removed
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Optional

from ..models.sector import MarkerSlot, ScanSector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MajorityEntry:
    """One party's standing in a sector."""

    party: str
    count: int  # Number of slots marked by the party
    last_mark: int  # Slot index of the party's most recent mark


@dataclass(frozen=True)
class MajorityResult:
    """Outcome of a majority count.

    Attributes:
        winner: Party in control, or None if nothing is marked
        runner_up: Best party other than the winner, or None
        ranking: Every marking party, best first
    """

    winner: Optional[str] = None
    runner_up: Optional[str] = None
    ranking: tuple[MajorityEntry, ...] = ()

    @property
    def has_winner(self) -> bool:
        return self.winner is not None


@dataclass(frozen=True)
class CoverResult:
    """Outcome of covering a sector.

    Attributes:
        sector: Sector after the cover (markers reset)
        winner: Party that covered the sector, or None if nothing was marked
        runner_up: Party whose marker stays in the first slot, if any
        participants: Every party that had a mark, in order of first mark
    """

    sector: ScanSector
    winner: Optional[str] = None
    runner_up: Optional[str] = None
    participants: tuple[str, ...] = field(default_factory=tuple)


def count_marks(slots: Sequence[MarkerSlot]) -> dict[str, int]:
    """Count marks per party, in order of each party's first mark."""
    counts: dict[str, int] = {}
    for slot in slots:
        if slot.marked:
            counts[slot.marked_by] = counts.get(slot.marked_by, 0) + 1
    return counts


def last_mark_positions(slots: Sequence[MarkerSlot]) -> dict[str, int]:
    """Return the index of each party's most recent mark."""
    positions: dict[str, int] = {}
    for index, slot in enumerate(slots):
        if slot.marked:
            positions[slot.marked_by] = index
    return positions


def _most_recent(candidates: list[MajorityEntry]) -> MajorityEntry:
    """Among parties tied on count, pick the one that marked last."""
    return max(candidates, key=lambda entry: entry.last_mark)


def _leader(entries: list[MajorityEntry]) -> Optional[MajorityEntry]:
    if not entries:
        return None
    top = max(entry.count for entry in entries)
    return _most_recent([entry for entry in entries if entry.count == top])


def resolve_majority(slots: Sequence[MarkerSlot]) -> MajorityResult:
    """Rank the parties marking a row of slots.

    The winner has the most marks; a tie goes to whichever tied party placed
    the most recent mark. The runner-up is chosen the same way, but only
    among the parties other than the winner, so a party tied with the winner
    on count becomes the runner-up.

    Args:
        slots: Slots in placement order

    Returns:
        MajorityResult; winner and runner_up are None when nothing is marked

    Examples:
        Slots marked Blue, Red, Blue, Red: Red wins (2-2, Red marked last)
        and Blue is runner-up.
    """
    counts = count_marks(slots)
    if not counts:
        return MajorityResult()

    last = last_mark_positions(slots)
    entries = [MajorityEntry(party=party, count=count, last_mark=last[party]) for party, count in counts.items()]

    winner = _leader(entries)
    runner_up = _leader([entry for entry in entries if entry.party != winner.party])
    ranking = sorted(entries, key=lambda entry: (entry.count, entry.last_mark), reverse=True)

    return MajorityResult(
        winner=winner.party,
        runner_up=runner_up.party if runner_up else None,
        ranking=tuple(ranking),
    )


def is_full(sector: ScanSector) -> bool:
    """Return True when every slot of the sector is marked."""
    return all(slot.marked for slot in sector.slots)


def mark_next_slot(sector: ScanSector, party: str) -> tuple[ScanSector, Optional[int]]:
    """Mark the first free slot of a sector.

    Args:
        sector: Sector to mark
        party: Party placing the mark

    Returns:
        Tuple of (updated sector, index of the marked slot). The index is
        None and the sector unchanged when every slot is already marked.
    """
    if not party:
        raise ValueError("party cannot be empty")
    for index, slot in enumerate(sector.slots):
        if not slot.marked:
            slots = list(sector.slots)
            slots[index] = replace(slot, marked_by=party)
            return replace(sector, slots=tuple(slots)), index
    logger.debug(f"Sector {sector.id} is full, {party} cannot mark it")
    return sector, None


def cover_sector(sector: ScanSector) -> CoverResult:
    """Resolve the majority of a sector and reset its markers.

    Args:
        sector: Sector being covered

    Returns:
        CoverResult with the reset sector. If nothing is marked the sector
        is returned unchanged with no winner.
    """
    result = resolve_majority(sector.slots)
    if not result.has_winner:
        return CoverResult(sector=sector)

    participants = tuple(count_marks(sector.slots))
    slots = [replace(slot, marked_by=None) for slot in sector.slots]
    if result.runner_up is not None and slots:
        slots[0] = replace(slots[0], marked_by=result.runner_up)

    covered = replace(sector, slots=tuple(slots), covered_by=sector.covered_by + (result.winner,))
    logger.info(
        f"Sector {sector.id} covered by {result.winner}"
        + (f", {result.runner_up} keeps a marker" if result.runner_up else "")
    )
    return CoverResult(
        sector=covered,
        winner=result.winner,
        runner_up=result.runner_up,
        participants=participants,
    )
