"""Rotation state of the three rings."""

import logging
from dataclasses import dataclass

from ..utils.constants import INITIAL_ROTATION_ANGLES, RING_LEVELS, ROTATION_STEP, SECTOR_ANGLE
from ..utils.sectors import snap_angle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RotationState:
    """Angles of the three rotating rings, in degrees.

    Positive angles are clockwise. Observed states are multiples of 45;
    anything else is tolerated and snapped to the nearest sector whenever a
    sector is computed from it.
    """

    level1_angle: float = 0
    level2_angle: float = 0
    level3_angle: float = 0

    def __post_init__(self):
        """Note angles that will be snapped."""
        for level in RING_LEVELS:
            angle = self.angle(level)
            if angle % SECTOR_ANGLE != 0:
                logger.debug(
                    f"Ring {level} angle {angle} is not a multiple of {SECTOR_ANGLE}, "
                    f"sectors will use {snap_angle(angle)}"
                )

    @classmethod
    def initial(cls) -> "RotationState":
        """Rotation the board is set up with at the start of a game."""
        return cls(*INITIAL_ROTATION_ANGLES)

    def angle(self, level: int) -> float:
        """Return the angle of a ring level (0 for the static board)."""
        if level == 0:
            return 0
        if level == 1:
            return self.level1_angle
        if level == 2:
            return self.level2_angle
        if level == 3:
            return self.level3_angle
        raise ValueError(f"Invalid level: {level} (must be 0-3)")

    def advance(self, ring_level: int, step: float = ROTATION_STEP) -> "RotationState":
        """Turn a ring, carrying every ring stacked above it.

        Rings sit on top of one another, so turning ring 2 also turns ring 1
        and turning ring 3 turns all three.

        Args:
            ring_level: Ring being turned (1-3)
            step: Angle to turn by, clockwise positive

        Returns:
            New rotation state
        """
        if ring_level not in RING_LEVELS:
            raise ValueError(f"Invalid ring level: {ring_level} (must be 1-3)")
        angles = [self.angle(level) for level in RING_LEVELS]
        for i in range(ring_level):
            angles[i] += step
        return RotationState(*angles)

    def snapped(self) -> "RotationState":
        """Return the state with every angle on a 45 degree step."""
        return RotationState(*(snap_angle(self.angle(level)) for level in RING_LEVELS))
