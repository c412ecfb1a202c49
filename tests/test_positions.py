"""Tests for absolute positions of catalog objects."""

import pytest

from orrery.engine.catalog import all_objects, find_object
from orrery.engine.positions import (
    absolute_position,
    all_absolute_positions,
    object_position,
    token_position,
)
from orrery.models import CellKey, RotationState

ZERO = RotationState()


class TestObjectPosition:
    """Test object_position lookups."""

    def test_planets_at_zero(self):
        """Test planet visibility with every ring at zero."""
        earth = object_position("earth", ZERO)
        assert earth.absolute_sector == 2
        assert not earth.visible

        venus = object_position("venus", ZERO)
        assert venus.cell == CellKey("A", 4)
        assert venus.visible

        assert not object_position("mars", ZERO).visible
        assert object_position("saturn", ZERO).visible

    def test_ring_object_moves(self):
        """Test a ring 1 object moves with its ring."""
        position = object_position("asteroid-a1-l1", RotationState(45, 0, 0))
        assert position.relative_sector == 1
        assert position.absolute_sector == 2
        assert position.visible

    def test_earth_revealed(self):
        """Test Earth shows when hollows line up above it."""
        earth = object_position("earth", RotationState(-90, 0, 0))
        assert earth.absolute_sector == 2
        assert earth.visible

    def test_static_objects_never_move(self):
        """Test level 0 objects ignore ring angles."""
        rotation = RotationState(135, -90, 45)
        assert object_position("neptune", rotation).cell == CellKey("D", 3)
        assert object_position("comet-c4", rotation).absolute_sector == 4

    def test_unknown_object(self):
        """Test an unknown id yields None."""
        assert object_position("pluto", ZERO) is None

    def test_zero_rotation_is_identity(self):
        """Test every object sits on its catalog sector when no ring is turned."""
        for obj in all_objects():
            position = absolute_position(obj, ZERO)
            assert position.absolute_sector == obj.sector
            assert position.relative_sector == obj.sector
            assert position.disk == obj.disk

    def test_full_turn_restores(self):
        """Test a full turn of every ring changes nothing."""
        turned = RotationState(360, -360, 720)
        for obj in all_objects():
            assert absolute_position(obj, turned) == absolute_position(obj, ZERO)


class TestTokenPosition:
    """Test positions of tokens resting on a level."""

    def test_token_on_ring(self):
        """Test a token rides its ring."""
        position = token_position("B", 5, 2, RotationState(0, 90, 0))
        assert position.absolute_sector == 7

    def test_token_on_static_board(self):
        """Test a level 0 token stays put."""
        position = token_position("D", 4, 0, RotationState(90, 90, 90))
        assert position.absolute_sector == 4
        assert position.visible

    def test_invalid_level(self):
        """Test unknown levels are rejected."""
        with pytest.raises(ValueError, match="Invalid level"):
            token_position("A", 1, 4, ZERO)

    def test_off_board_token(self):
        """Test tokens off the board are rejected."""
        with pytest.raises(ValueError, match="Invalid disk"):
            token_position("Z", 1, 0, ZERO)
        with pytest.raises(ValueError, match="Invalid sector"):
            token_position("D", 9, 0, ZERO)
        with pytest.raises(ValueError, match="Invalid sector"):
            token_position("A", 0, 2, ZERO)

    def test_matches_catalog_position(self):
        """Test token_position agrees with absolute_position."""
        rotation = RotationState(45, 90, -45)
        earth = find_object("earth")
        assert token_position("A", 2, 3, rotation) == absolute_position(earth, rotation)


class TestAllPositions:
    """Test the bulk position query."""

    def test_every_object_listed(self):
        """Test every catalog entry gets a position."""
        positions = all_absolute_positions(ZERO)
        assert len(positions) == len(all_objects())
        assert positions["jupiter"].cell == CellKey("C", 5)
