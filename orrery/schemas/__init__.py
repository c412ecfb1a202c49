"""Request and response schemas for engine queries."""

from .requests import MajorityRequest, ReachabilityRequest, RotationRequest
from .responses import (
    AbsolutePositionResponse,
    BoardResponse,
    CellResponse,
    MajorityEntryResponse,
    MajorityResponse,
    ReachabilityResponse,
    ReachableCellResponse,
)

__all__ = [
    "AbsolutePositionResponse",
    "BoardResponse",
    "CellResponse",
    "MajorityEntryResponse",
    "MajorityRequest",
    "MajorityResponse",
    "ReachabilityRequest",
    "ReachabilityResponse",
    "ReachableCellResponse",
    "RotationRequest",
]
