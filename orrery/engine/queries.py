"""Query handlers: validated requests in, serializable responses out.

These are the read-only entry points used by renderers and rules code that
exchange plain JSON-like data rather than engine models.
"""

import logging
from typing import Optional

from ..models.cell import CellKey
from ..models.rotation import RotationState
from ..models.sector import MarkerSlot
from ..schemas.requests import MajorityRequest, ReachabilityRequest, RotationRequest
from ..schemas.responses import (
    AbsolutePositionResponse,
    BoardResponse,
    CellResponse,
    MajorityEntryResponse,
    MajorityResponse,
    ReachabilityResponse,
    ReachableCellResponse,
)
from .board import all_cells
from .majority import resolve_majority
from .positions import object_position
from .reachability import media_bonus_fn, reachable_cells_with_energy
from .visibility import visible_level

logger = logging.getLogger(__name__)


def rotation_from_request(request: RotationRequest) -> RotationState:
    """Convert request angles into a RotationState."""
    return RotationState(request.level1Angle, request.level2Angle, request.level3Angle)


def query_object_position(
    object_id: str, request: RotationRequest
) -> Optional[AbsolutePositionResponse]:
    """Current position of a catalog object, or None if the id is unknown."""
    position = object_position(object_id, rotation_from_request(request))
    if position is None:
        logger.debug(f"Unknown object id: {object_id}")
        return None
    return AbsolutePositionResponse(
        objectId=object_id,
        disk=position.disk,
        sector=position.relative_sector,
        absoluteSector=position.absolute_sector,
        visible=position.visible,
    )


def query_board(request: RotationRequest) -> BoardResponse:
    """Every board cell for the requested rotation."""
    rotation = rotation_from_request(request)
    return BoardResponse(
        cells=[
            CellResponse(
                key=str(key),
                disk=cell.disk,
                sector=cell.sector,
                hasAsteroid=cell.has_asteroid,
                hasComet=cell.has_comet,
                hasPlanet=cell.has_planet,
                planetId=cell.planet_id,
                planetName=cell.planet_name,
                visible=cell.visible,
                visibleLevel=visible_level(cell.disk, cell.sector, rotation),
            )
            for key, cell in all_cells(rotation).items()
        ]
    )


def query_reachable(request: ReachabilityRequest) -> ReachabilityResponse:
    """Cells reachable from the requested start, cheapest first."""
    start = CellKey(request.disk, request.sector)
    bonus_fn = media_bonus_fn(request.asteroidMedia) if request.trackMedia else None
    reachable = reachable_cells_with_energy(
        start,
        request.movements,
        request.energy,
        rotation_from_request(request.rotation),
        ignore_asteroid_penalty=request.ignoreAsteroidPenalty,
        bonus_fn=bonus_fn,
    )
    ordered = sorted(reachable.items(), key=lambda item: (item[1].movements, item[0]))
    return ReachabilityResponse(
        start=str(start),
        budget=request.movements + request.energy,
        cells=[
            ReachableCellResponse(
                key=str(key),
                movements=entry.movements,
                path=[str(step) for step in entry.path],
                bonus=entry.bonus,
            )
            for key, entry in ordered
        ],
    )


def query_majority(request: MajorityRequest) -> MajorityResponse:
    """Ranked majority of a marker row."""
    slots = [MarkerSlot(id=str(index), marked_by=party) for index, party in enumerate(request.slots)]
    result = resolve_majority(slots)
    return MajorityResponse(
        winner=result.winner,
        runnerUp=result.runner_up,
        ranking=[MajorityEntryResponse(party=entry.party, count=entry.count) for entry in result.ranking],
    )
