"""Scan sector data models."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MarkerSlot:
    """One signal slot in a scan sector, marked or not."""

    id: str
    marked_by: Optional[str] = None  # Party id, or None while the slot is free

    @property
    def marked(self) -> bool:
        return self.marked_by is not None


@dataclass(frozen=True)
class ScanSector:
    """A named sector with an ordered row of marker slots.

    Slots are filled front to back, so their order is also the order in
    which marks were placed: a later slot holds a more recent mark. Majority
    tie-breaks rely on this.
    """

    id: str
    name: str
    slots: tuple[MarkerSlot, ...] = ()
    covered_by: tuple[str, ...] = ()  # Winner of each cover so far, oldest first

    def __post_init__(self):
        """Validate sector data after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        seen_free = False
        for slot in self.slots:
            if not slot.marked:
                seen_free = True
            elif seen_free:
                raise ValueError(
                    f"Sector {self.id}: marked slot {slot.id} follows a free slot "
                    "(slots must be filled in order)"
                )

    @property
    def is_covered(self) -> bool:
        return bool(self.covered_by)
