"""Tests for sector majority resolution."""

import pytest

from orrery.engine.majority import (
    count_marks,
    cover_sector,
    is_full,
    last_mark_positions,
    mark_next_slot,
    resolve_majority,
)
from orrery.models import MarkerSlot, ScanSector


def make_slots(*parties, size=None):
    size = size or len(parties)
    marks = list(parties) + [None] * (size - len(parties))
    return tuple(MarkerSlot(id=f"slot-{i}", marked_by=party) for i, party in enumerate(marks))


def make_sector(*parties, size=None):
    return ScanSector(id="kepler", name="Kepler-22", slots=make_slots(*parties, size=size))


class TestCounting:
    """Test mark counting helpers."""

    def test_count_marks(self):
        """Test counts keep first-mark order."""
        counts = count_marks(make_slots("Red", "Blue", "Red", size=5))
        assert counts == {"Red": 2, "Blue": 1}
        assert list(counts) == ["Red", "Blue"]

    def test_last_mark_positions(self):
        """Test each party's latest mark index."""
        assert last_mark_positions(make_slots("Red", "Blue", "Red")) == {"Red": 2, "Blue": 1}


class TestResolveMajority:
    """Test majority and tie-break rules."""

    def test_tie_goes_to_latest_mark(self):
        """Test a tie on count goes to the party that marked last."""
        result = resolve_majority(make_slots("Blue", "Red", "Blue", "Red"))
        assert result.winner == "Red"
        assert result.runner_up == "Blue"

    def test_clear_majority(self):
        """Test the party with the most marks wins."""
        result = resolve_majority(make_slots("Blue", "Blue", "Green"))
        assert result.winner == "Blue"
        assert result.runner_up == "Green"

    def test_runner_up_tie_break(self):
        """Test the runner-up tie-break also favours the latest mark."""
        result = resolve_majority(make_slots("B", "C", "A", "A", "A"))
        assert result.winner == "A"
        assert result.runner_up == "C"

    def test_single_party(self):
        """Test a lone party wins with no runner-up."""
        result = resolve_majority(make_slots("Blue", "Blue", size=4))
        assert result.winner == "Blue"
        assert result.runner_up is None

    def test_no_marks(self):
        """Test nothing marked means no winner."""
        result = resolve_majority(make_slots(size=3))
        assert not result.has_winner
        assert result.runner_up is None
        assert result.ranking == ()

    def test_empty_row(self):
        """Test a sector without slots has no winner."""
        assert resolve_majority(()).winner is None

    def test_ranking(self):
        """Test the ranking orders by count, then latest mark."""
        result = resolve_majority(make_slots("A", "B", "C", "A", "B"))
        assert [(entry.party, entry.count) for entry in result.ranking] == [("B", 2), ("A", 2), ("C", 1)]
        assert result.ranking[0].party == result.winner
        assert result.ranking[1].party == result.runner_up

    def test_winner_has_max_count(self):
        """Test the winner always holds the highest count."""
        rows = [
            ("A", "B", "B"),
            ("B", "A", "A", "C", "C", "C"),
            ("C", "A", "B", "A", "B", "C"),
        ]
        for row in rows:
            result = resolve_majority(make_slots(*row))
            assert count_marks(make_slots(*row))[result.winner] == max(count_marks(make_slots(*row)).values())


class TestMarking:
    """Test placing marks."""

    def test_mark_next_slot(self):
        """Test marks fill the first free slot."""
        sector, index = mark_next_slot(make_sector("Red", size=3), "Blue")
        assert index == 1
        assert sector.slots[1].marked_by == "Blue"
        assert not sector.slots[2].marked

    def test_full_sector(self):
        """Test a full sector cannot be marked."""
        sector = make_sector("Red", "Blue")
        assert is_full(sector)
        updated, index = mark_next_slot(sector, "Green")
        assert index is None
        assert updated == sector

    def test_empty_party(self):
        """Test a mark needs a party."""
        with pytest.raises(ValueError, match="party cannot be empty"):
            mark_next_slot(make_sector(size=2), "")


class TestCoverSector:
    """Test covering a sector."""

    def test_cover(self):
        """Test the winner covers and the runner-up keeps one marker."""
        result = cover_sector(make_sector("Blue", "Red", "Blue", "Red"))
        assert result.winner == "Red"
        assert result.runner_up == "Blue"
        assert result.participants == ("Blue", "Red")
        assert result.sector.slots[0].marked_by == "Blue"
        assert not any(slot.marked for slot in result.sector.slots[1:])
        assert result.sector.covered_by == ("Red",)

    def test_cover_single_party(self):
        """Test a lone party leaves the row empty."""
        result = cover_sector(make_sector("Blue", size=3))
        assert result.winner == "Blue"
        assert not any(slot.marked for slot in result.sector.slots)

    def test_cover_twice(self):
        """Test covers accumulate."""
        first = cover_sector(make_sector("Blue", "Red", "Red")).sector
        first, _ = mark_next_slot(first, "Green")
        first, _ = mark_next_slot(first, "Green")
        second = cover_sector(first)
        assert second.winner == "Green"
        assert second.sector.covered_by == ("Red", "Green")

    def test_cover_unmarked(self):
        """Test an unmarked sector is left as is."""
        sector = make_sector(size=3)
        result = cover_sector(sector)
        assert result.winner is None
        assert result.sector == sector
