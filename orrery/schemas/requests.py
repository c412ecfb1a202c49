"""Pydantic request schemas for engine queries."""

from typing import Annotated

from pydantic import BaseModel, Field

Party = Annotated[str, Field(min_length=1)]


class RotationRequest(BaseModel):
    """Ring angles supplied by the caller, in degrees (clockwise positive)."""

    level1Angle: float = Field(default=0, description="Angle of ring 1 (topmost)")  # noqa: N815
    level2Angle: float = Field(default=0, description="Angle of ring 2")  # noqa: N815
    level3Angle: float = Field(default=0, description="Angle of ring 3 (bottom)")  # noqa: N815


class ReachabilityRequest(BaseModel):
    """Request for the cells a probe can reach."""

    disk: str = Field(pattern="^[A-D]$", description="Start disk (A-D)")
    sector: int = Field(ge=1, le=8, description="Start sector (1-8)")
    movements: int = Field(ge=0, description="Movement points available")
    energy: int = Field(default=0, ge=0, description="Energy convertible 1:1 into movement")
    rotation: RotationRequest = Field(default_factory=RotationRequest)
    ignoreAsteroidPenalty: bool = Field(  # noqa: N815
        default=False, description="Waive the extra cost of leaving asteroid fields"
    )
    trackMedia: bool = Field(  # noqa: N815
        default=False, description="Accrue media gained along each path"
    )
    asteroidMedia: bool = Field(  # noqa: N815
        default=False, description="Asteroid fields count as media when tracking"
    )


class MajorityRequest(BaseModel):
    """Marker row of a sector, in placement order (None for a free slot)."""

    slots: list[Party | None] = Field(description="Party id per slot, or null")
