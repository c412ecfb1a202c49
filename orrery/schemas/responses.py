"""Pydantic response schemas for engine queries."""

from pydantic import BaseModel, Field


class AbsolutePositionResponse(BaseModel):
    """Current position of a catalog object."""

    objectId: str  # noqa: N815
    disk: str
    sector: int
    absoluteSector: int  # noqa: N815
    visible: bool


class CellResponse(BaseModel):
    """State of one board cell."""

    key: str
    disk: str
    sector: int
    hasAsteroid: bool  # noqa: N815
    hasComet: bool  # noqa: N815
    hasPlanet: bool  # noqa: N815
    planetId: str | None = None  # noqa: N815
    planetName: str | None = None  # noqa: N815
    visible: bool
    visibleLevel: int  # noqa: N815


class BoardResponse(BaseModel):
    """Every board cell for a rotation state."""

    cells: list[CellResponse] = Field(default_factory=list)


class ReachableCellResponse(BaseModel):
    """Cheapest route to one destination."""

    key: str
    movements: int
    path: list[str]
    bonus: int = 0


class ReachabilityResponse(BaseModel):
    """Cells a probe can reach."""

    start: str
    budget: int
    cells: list[ReachableCellResponse] = Field(default_factory=list)


class MajorityEntryResponse(BaseModel):
    """One party's standing in a sector."""

    party: str
    count: int


class MajorityResponse(BaseModel):
    """Ranked majority of a sector."""

    winner: str | None = None
    runnerUp: str | None = None  # noqa: N815
    ranking: list[MajorityEntryResponse] = Field(default_factory=list)
