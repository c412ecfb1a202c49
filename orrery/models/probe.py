"""Probe data models."""

from dataclasses import dataclass

from ..utils.constants import DISKS, LEVELS, SECTOR_COUNT


@dataclass(frozen=True)
class ProbePosition:
    """Where a probe rests, stored relative to the ring it sits on.

    A probe on a ring moves with it; its absolute cell is derived from the
    current rotation state.
    """

    disk: str
    sector: int  # Sector relative to `level`'s ring
    level: int = 0  # Ring the probe rests on (0 = static board)

    def __post_init__(self):
        """Validate probe position after initialization."""
        if self.disk not in DISKS:
            raise ValueError(f"Invalid disk: {self.disk!r} (must be one of {', '.join(DISKS)})")
        if not (1 <= self.sector <= SECTOR_COUNT):
            raise ValueError(f"Invalid sector: {self.sector} (must be 1-{SECTOR_COUNT})")
        if self.level not in LEVELS:
            raise ValueError(f"Invalid level: {self.level} (must be 0-3)")


@dataclass(frozen=True)
class Probe:
    """A player's probe in the solar system."""

    id: str  # Unique identifier (e.g., "p1-probe-1")
    owner: str  # Player id
    position: ProbePosition

    def __post_init__(self):
        """Validate probe data after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.owner:
            raise ValueError("owner cannot be empty")
