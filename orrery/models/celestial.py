"""Celestial catalog entries."""

from dataclasses import dataclass
from enum import Enum

from ..utils.constants import DISKS, LEVELS, SECTOR_COUNT


class SectorType(str, Enum):
    """How a ring cell treats what lies beneath it."""

    NORMAL = "normal"  # Opaque, carries an object
    HOLLOW = "hollow"  # Transparent cut-out
    EMPTY = "empty"  # Opaque, nothing on it


class ObjectKind(str, Enum):
    """Kinds of catalog entry."""

    PLANET = "planet"
    COMET = "comet"
    ASTEROID = "asteroid"
    HOLLOW = "hollow"
    EMPTY = "empty"

    @property
    def sector_type(self) -> SectorType:
        if self is ObjectKind.HOLLOW:
            return SectorType.HOLLOW
        if self is ObjectKind.EMPTY:
            return SectorType.EMPTY
        return SectorType.NORMAL

    @property
    def is_occupant(self) -> bool:
        """True for kinds that occupy a cell (planets, comets, asteroid fields)."""
        return self.sector_type is SectorType.NORMAL


@dataclass(frozen=True)
class CelestialObject:
    """Immutable catalog entry bound to a ring position.

    The sector is relative to the object's own ring. Only the interpretation
    of that sector changes as the rings turn; entries never mutate.
    """

    id: str  # Unique identifier (e.g., "saturn", "asteroid-b1-l1")
    kind: ObjectKind
    name: str  # Display name
    disk: str  # "A" to "E"
    sector: int  # Relative sector (1-8)
    level: int = 0  # 0 = static board, 1-3 = rotating ring

    def __post_init__(self):
        """Validate catalog entry after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not isinstance(self.kind, ObjectKind):
            raise ValueError(f"Invalid kind: {self.kind!r}")
        if self.disk not in DISKS:
            raise ValueError(f"Invalid disk: {self.disk!r} (must be one of {', '.join(DISKS)})")
        if not (1 <= self.sector <= SECTOR_COUNT):
            raise ValueError(f"Invalid sector: {self.sector} (must be 1-{SECTOR_COUNT})")
        if self.level not in LEVELS:
            raise ValueError(f"Invalid level: {self.level} (must be 0-3)")
