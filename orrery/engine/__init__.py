"""Board engine components."""

from .board import all_cells, get_cell, objects_on_cell
from .catalog import all_objects, find_object, is_hollow, objects_for_level, ring_covers, sector_type
from .majority import (
    CoverResult,
    MajorityEntry,
    MajorityResult,
    count_marks,
    cover_sector,
    is_full,
    mark_next_slot,
    resolve_majority,
)
from .positions import absolute_position, all_absolute_positions, object_position, token_position
from .probes import (
    ProbeShift,
    launch_position,
    launch_probe,
    place_probe,
    probe_cell,
    rotate_solar_system,
    update_probes_after_rotation,
)
from .reachability import (
    adjacent_cells,
    media_bonus,
    media_bonus_fn,
    reachable_cells,
    reachable_cells_with_energy,
)
from .visibility import is_occluded_above, relative_sector, visible_level

__all__ = [
    "CoverResult",
    "MajorityEntry",
    "MajorityResult",
    "ProbeShift",
    "absolute_position",
    "adjacent_cells",
    "all_absolute_positions",
    "all_cells",
    "all_objects",
    "count_marks",
    "cover_sector",
    "find_object",
    "get_cell",
    "is_full",
    "is_hollow",
    "is_occluded_above",
    "launch_position",
    "launch_probe",
    "mark_next_slot",
    "media_bonus",
    "media_bonus_fn",
    "object_position",
    "objects_for_level",
    "objects_on_cell",
    "place_probe",
    "probe_cell",
    "reachable_cells",
    "reachable_cells_with_energy",
    "relative_sector",
    "resolve_majority",
    "ring_covers",
    "rotate_solar_system",
    "sector_type",
    "token_position",
    "update_probes_after_rotation",
    "visible_level",
]
