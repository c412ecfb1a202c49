"""Tests for probe placement and rotation updates."""

import pytest

from orrery.engine.probes import (
    launch_position,
    launch_probe,
    place_probe,
    probe_cell,
    rotate_solar_system,
    update_probe_after_rotation,
    update_probes_after_rotation,
)
from orrery.models import CellKey, Probe, ProbePosition, RotationState, SolarSystem

ZERO = RotationState()
RING1_TURNED = RotationState(45, 0, 0)


def make_probe(disk, sector, level=0, owner="p1", probe_id="probe-1"):
    return Probe(id=probe_id, owner=owner, position=ProbePosition(disk, sector, level))


class TestPlacement:
    """Test storing probes relative to the visible level."""

    def test_place_on_static_board(self):
        """Test a probe on disk D rests on the static board."""
        assert place_probe(CellKey("D", 4), RING1_TURNED) == ProbePosition("D", 4, 0)

    def test_place_on_bottom_ring(self):
        """Test a probe placed where ring 3 shows rests on ring 3."""
        assert place_probe(CellKey("A", 4), ZERO) == ProbePosition("A", 4, 3)

    def test_place_on_turned_ring(self):
        """Test the stored sector is relative to the ring."""
        assert place_probe(CellKey("A", 2), RING1_TURNED) == ProbePosition("A", 1, 1)

    def test_probe_cell_round_trip(self):
        """Test a placed probe maps back to the same cell."""
        rotation = RotationState(45, 90, -45)
        for key in (CellKey("A", 3), CellKey("B", 6), CellKey("C", 2), CellKey("D", 8)):
            assert probe_cell(place_probe(key, rotation), rotation) == key

    def test_launch_position(self):
        """Test new probes start on Earth's ring."""
        assert launch_position() == ProbePosition("A", 2, 3)


class TestRotationUpdate:
    """Test probes moved by a ring turn."""

    def test_probe_rides_ring(self):
        """Test a probe on the turned ring moves with it."""
        probe, shift = update_probe_after_rotation(make_probe("A", 1, 1), ZERO, RING1_TURNED)
        assert probe.position == ProbePosition("A", 1, 1)
        assert shift.from_cell == CellKey("A", 1)
        assert shift.to_cell == CellKey("A", 2)
        assert not shift.pushed
        assert shift.media == 0

    def test_probe_pushed_off_static_board(self):
        """Test a probe newly covered by a ring is pushed one sector."""
        probe, shift = update_probe_after_rotation(make_probe("C", 2), ZERO, RING1_TURNED)
        assert probe.position == ProbePosition("C", 3, 0)
        assert shift.pushed
        assert shift.from_cell == CellKey("C", 2)
        assert shift.to_cell == CellKey("C", 3)
        assert shift.media == 0

    def test_push_earns_asteroid_media(self):
        """Test landing on an asteroid field earns media with the technology."""
        _, shift = update_probe_after_rotation(
            make_probe("C", 2), ZERO, RING1_TURNED, asteroid_media=True
        )
        assert shift.media == 1

    def test_probe_pushed_on_lower_ring(self):
        """Test a ring 2 probe covered by ring 1 is pushed."""
        probe, shift = update_probe_after_rotation(make_probe("B", 5, 2), ZERO, RING1_TURNED)
        assert probe.position == ProbePosition("B", 6, 2)
        assert shift.pushed
        assert shift.to_cell == CellKey("B", 6)

    def test_lower_ring_turn_carries_probe(self):
        """Test turning ring 2 carries its probes even though ring 1 turns too."""
        probe, shift = update_probe_after_rotation(
            make_probe("B", 5, 2), ZERO, RotationState(45, 45, 0)
        )
        assert probe.position == ProbePosition("B", 5, 2)
        assert shift.to_cell == CellKey("B", 6)
        assert not shift.pushed

    def test_uncovered_probe_stays(self):
        """Test a probe left under a hollow does not move."""
        probe, shift = update_probe_after_rotation(make_probe("C", 8), ZERO, RING1_TURNED)
        assert probe.position == ProbePosition("C", 8, 0)
        assert shift is None

    def test_no_rotation(self):
        """Test nothing moves when the rings keep their angles."""
        probe = make_probe("C", 5, 1)
        updated, shift = update_probe_after_rotation(probe, ZERO, ZERO)
        assert updated == probe
        assert shift is None

    def test_update_all_probes(self):
        """Test bulk updates keep order and report only moved probes."""
        probes = [
            make_probe("C", 2, owner="p1", probe_id="a"),
            make_probe("C", 8, owner="p2", probe_id="b"),
            make_probe("C", 2, owner="p2", probe_id="c"),
        ]
        updated, shifts = update_probes_after_rotation(
            probes, ZERO, RING1_TURNED, asteroid_media_owners=frozenset({"p2"})
        )
        assert [probe.id for probe in updated] == ["a", "b", "c"]
        assert [(shift.probe_id, shift.media) for shift in shifts] == [("a", 0), ("c", 1)]


class TestSolarSystem:
    """Test rotating the whole solar system."""

    def test_ring_cycle(self):
        """Test the ring to turn cycles 1, 2, 3 and back."""
        system = SolarSystem()
        levels = []
        for _ in range(4):
            levels.append(system.next_ring_level)
            system, _ = rotate_solar_system(system)
        assert levels == [1, 2, 3, 1]
        assert system.next_ring_level == 2

    def test_rotation_angles(self):
        """Test each turn also turns the rings above."""
        system, _ = rotate_solar_system(SolarSystem())
        assert system.rotation == RotationState(45, 45, 0)
        system, _ = rotate_solar_system(system)
        assert system.rotation == RotationState(90, 90, 0)
        system, _ = rotate_solar_system(system)
        assert system.rotation == RotationState(135, 135, 45)

    def test_launch_and_rotate(self):
        """Test a probe on Earth is pushed when ring 1 closes over it."""
        system = launch_probe(SolarSystem(), "p1-probe-1", "p1")
        assert system.probes[0].position == ProbePosition("A", 2, 3)

        system, shifts = rotate_solar_system(system)
        assert len(shifts) == 1
        assert shifts[0].pushed
        assert shifts[0].to_cell == CellKey("A", 3)
        assert probe_cell(system.probes[0].position, system.rotation) == CellKey("A", 3)

    def test_duplicate_launch(self):
        """Test probe ids stay unique."""
        system = launch_probe(SolarSystem(), "x", "p1")
        with pytest.raises(ValueError, match="Duplicate probe ids"):
            launch_probe(system, "x", "p2")
