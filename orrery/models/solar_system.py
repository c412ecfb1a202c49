"""Solar system state snapshot."""

from dataclasses import dataclass, field

from ..utils.constants import RING_LEVELS
from .probe import Probe
from .rotation import RotationState


@dataclass(frozen=True)
class SolarSystem:
    """Time-varying part of the board: ring angles and probes.

    Snapshots are immutable; rotating the system returns a new snapshot.
    """

    rotation: RotationState = field(default_factory=RotationState.initial)
    next_ring_level: int = 1  # Ring turned by the next rotation (1-3)
    probes: tuple[Probe, ...] = ()

    def __post_init__(self):
        """Validate solar system state after initialization."""
        if self.next_ring_level not in RING_LEVELS:
            raise ValueError(
                f"Invalid next_ring_level: {self.next_ring_level} (must be 1-3)"
            )
        ids = [probe.id for probe in self.probes]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate probe ids: {ids}")
