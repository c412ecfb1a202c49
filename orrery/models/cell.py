"""Board cell identity and the derived per-cell views."""

from dataclasses import dataclass, field
from typing import Optional

from ..utils.constants import DISKS, SECTOR_COUNT


@dataclass(frozen=True, order=True)
class CellKey:
    """Composite key for one (disk, sector) cell of the board.

    Keys are hashable values, ordered disk-major, and render as the short
    label used on the physical board ("A1", "D7").
    """

    disk: str  # "A" (innermost) to "E" (outermost)
    sector: int  # 1-8, clockwise from 12 o'clock

    def __post_init__(self):
        """Validate the cell coordinates."""
        if self.disk not in DISKS:
            raise ValueError(f"Invalid disk: {self.disk!r} (must be one of {', '.join(DISKS)})")
        if isinstance(self.sector, bool) or not isinstance(self.sector, int):
            raise ValueError(f"Invalid sector: {self.sector!r} (must be an integer)")
        if not (1 <= self.sector <= SECTOR_COUNT):
            raise ValueError(f"Invalid sector: {self.sector} (must be 1-{SECTOR_COUNT})")

    def __str__(self) -> str:
        return f"{self.disk}{self.sector}"

    @classmethod
    def parse(cls, label: str) -> "CellKey":
        """Build a key from its board label.

        Args:
            label: Two-character label such as "C5"

        Returns:
            Matching CellKey

        Raises:
            ValueError: If the label is malformed or out of range
        """
        if not isinstance(label, str) or len(label) != 2 or not label[1].isdigit():
            raise ValueError(f"Invalid cell label: {label!r} (expected e.g. 'A1')")
        return cls(label[0].upper(), int(label[1]))


@dataclass(frozen=True)
class AbsolutePosition:
    """Where an object currently sits on the fixed board.

    Derived on demand from a catalog entry (or a token) and a rotation state.
    """

    disk: str
    relative_sector: int  # Sector on the object's own ring
    absolute_sector: int  # Sector on the fixed board after rotation
    visible: bool  # False when a ring above hides it

    @property
    def cell(self) -> CellKey:
        return CellKey(self.disk, self.absolute_sector)


@dataclass(frozen=True)
class BoardCell:
    """What a viewer sees on one cell for a given rotation state."""

    disk: str
    sector: int
    has_asteroid: bool = False
    has_comet: bool = False
    has_planet: bool = False
    planet_id: Optional[str] = None  # First visible planet on the cell
    planet_name: Optional[str] = None
    occupants: tuple[str, ...] = ()  # Ids of every visible object on the cell
    visible: bool = True  # Whether the static base board shows here

    @property
    def key(self) -> CellKey:
        return CellKey(self.disk, self.sector)


@dataclass(frozen=True)
class ReachableCell:
    """Cheapest known way to reach a destination cell."""

    movements: int  # Movement points spent
    path: tuple[CellKey, ...] = field(default_factory=tuple)  # Origin first, destination last
    bonus: int = 0  # Value accrued on the way (e.g. media)

    @property
    def destination(self) -> CellKey:
        return self.path[-1]
