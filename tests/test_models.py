"""Tests for data models."""

import pytest

from solar_board.models import (
    Board,
    CelestialObject,
    DiskLayout,
    Position,
    Probe,
    ProbeRegistry,
)
from solar_board.utils import ASTEROID, HOLLOW, PLANET


class TestPosition:
    """Test Position dataclass."""

    def test_create_position(self):
        """Test basic position creation and key."""
        position = Position(disk="C", sector=7)
        assert position.disk == "C"
        assert position.sector == 7
        assert position.key == "C7"
        assert position.disk_index == 2

    def test_from_key(self):
        """Test parsing a cell key."""
        assert Position.from_key("B8") == Position("B", 8)

    def test_invalid_disk(self):
        """Test position validation for unknown disks."""
        with pytest.raises(ValueError, match="Invalid disk"):
            Position(disk="F", sector=1)

    def test_invalid_sector(self):
        """Test position validation for sectors outside 1-8."""
        with pytest.raises(ValueError, match="Invalid sector"):
            Position(disk="A", sector=0)
        with pytest.raises(ValueError, match="Invalid sector"):
            Position(disk="A", sector=9)

    def test_invalid_key(self):
        """Test that malformed keys are rejected."""
        with pytest.raises(ValueError, match="Invalid cell key"):
            Position.from_key("A")
        with pytest.raises(ValueError, match="Invalid cell key"):
            Position.from_key("AX")

    def test_non_canonical_key(self):
        """Test that only the form produced by key is parsed."""
        for key in ("A01", "A+1", "A 1", "a1x"):
            with pytest.raises(ValueError, match="Invalid cell key"):
                Position.from_key(key)
        assert Position.from_key(Position("E", 3).key).key == "E3"

    def test_positions_are_hashable(self):
        """Test positions can be used as dict keys and compare by value."""
        cells = {Position("A", 1): "start"}
        assert cells[Position("A", 1)] == "start"


class TestCelestialObject:
    """Test CelestialObject dataclass."""

    def test_create_planet(self):
        obj = CelestialObject(
            id="earth", name="Earth", type=PLANET, level=3, position=Position("A", 2)
        )
        assert obj.is_physical
        assert not obj.is_hollow

    def test_hollow_marker(self):
        obj = CelestialObject(
            id="hollow-a4", name="Hollow A4", type=HOLLOW, level=1, position=Position("A", 4)
        )
        assert obj.is_hollow
        assert not obj.is_physical

    def test_invalid_type(self):
        """Test object validation for unknown types."""
        with pytest.raises(ValueError, match="Invalid type"):
            CelestialObject(
                id="x", name="X", type="nebula", level=0, position=Position("A", 1)
            )

    def test_invalid_level(self):
        """Test object validation for levels outside 0-3."""
        with pytest.raises(ValueError, match="Invalid level"):
            CelestialObject(
                id="x", name="X", type=PLANET, level=4, position=Position("A", 1)
            )


class TestBoard:
    """Test Board construction-time validation and lookups."""

    def make_board(self, objects):
        return Board(
            disks=[DiskLayout("A", (0, 1)), DiskLayout("B", (0,))],
            objects=objects,
        )

    def test_lookup(self):
        """Test lookup by level and relative position."""
        rock = CelestialObject(
            id="rock", name="Rock", type=ASTEROID, level=1, position=Position("A", 3)
        )
        board = self.make_board([rock])

        assert board.lookup(1, "A", 3) is rock
        assert board.lookup(0, "A", 3) is None
        assert board.find("rock") is rock
        assert board.find("missing") is None
        assert board.disk_names == ["A", "B"]

    def test_duplicate_ids(self):
        with pytest.raises(ValueError, match="Duplicate object id"):
            self.make_board(
                [
                    CelestialObject("x", "X", PLANET, 0, Position("A", 1)),
                    CelestialObject("x", "X", PLANET, 0, Position("A", 2)),
                ]
            )

    def test_conflicting_positions(self):
        """Test that two objects on the same level cell are rejected."""
        with pytest.raises(ValueError, match="both occupy A1 on level 0"):
            self.make_board(
                [
                    CelestialObject("x", "X", PLANET, 0, Position("A", 1)),
                    CelestialObject("y", "Y", HOLLOW, 0, Position("A", 1)),
                ]
            )

    def test_object_on_uncarried_level(self):
        """Test that an object cannot sit on a level that does not carry its disk."""
        with pytest.raises(ValueError, match="does not carry disk B"):
            self.make_board([CelestialObject("x", "X", PLANET, 1, Position("B", 1))])

    def test_object_on_missing_disk(self):
        with pytest.raises(ValueError, match="not on the board"):
            self.make_board([CelestialObject("x", "X", PLANET, 0, Position("C", 1))])

    def test_disks_out_of_order(self):
        with pytest.raises(ValueError, match="from the centre outwards"):
            Board(disks=[DiskLayout("B"), DiskLayout("A")])

    def test_duplicate_disks(self):
        with pytest.raises(ValueError, match="Duplicate disks"):
            Board(disks=[DiskLayout("A"), DiskLayout("A")])

    def test_levels_must_increase(self):
        with pytest.raises(ValueError, match="strictly increasing"):
            DiskLayout("A", (1, 0))

    def test_invalid_disk_level(self):
        with pytest.raises(ValueError, match="Invalid level"):
            DiskLayout("A", (0, 5))


class TestProbeRegistry:
    """Test probe registry bookkeeping."""

    def test_add_and_move(self):
        registry = ProbeRegistry()
        registry.add(Probe(id="p1-probe-001", owner_id="p1", position=Position("A", 2)))

        moved = registry.move("p1-probe-001", Position("B", 2))

        assert moved.position == Position("B", 2)
        assert registry.get("p1-probe-001").position == Position("B", 2)
        assert registry.probes_at(Position("B", 2)) == [moved]
        assert registry.probes_at(Position("A", 2)) == []

    def test_move_unknown_probe(self):
        with pytest.raises(ValueError, match="not found"):
            ProbeRegistry().move("ghost", Position("A", 1))

    def test_duplicate_probe(self):
        registry = ProbeRegistry()
        registry.add(Probe(id="x", owner_id="p1", position=Position("A", 1)))
        with pytest.raises(ValueError, match="already exists"):
            registry.add(Probe(id="x", owner_id="p2", position=Position("A", 1)))

    def test_remove(self):
        registry = ProbeRegistry()
        registry.add(Probe(id="x", owner_id="p1", position=Position("A", 1)))
        registry.remove("x")
        assert len(registry) == 0
        with pytest.raises(ValueError, match="not found"):
            registry.remove("x")

    def test_probes_of_owner(self):
        registry = ProbeRegistry()
        registry.add(Probe(id="a", owner_id="p1", position=Position("A", 1)))
        registry.add(Probe(id="b", owner_id="p2", position=Position("A", 1)))
        assert [p.id for p in registry.probes_of("p2")] == ["b"]

    def test_probe_ids_per_owner(self):
        registry = ProbeRegistry()
        assert registry.next_probe_id("p1") == "p1-probe-001"
        assert registry.next_probe_id("p1") == "p1-probe-002"
        assert registry.next_probe_id("p2") == "p2-probe-001"

    def test_invalid_probe(self):
        with pytest.raises(ValueError, match="owner_id cannot be empty"):
            Probe(id="x", owner_id="", position=Position("A", 1))
        with pytest.raises(ValueError, match="Invalid position"):
            Probe(id="x", owner_id="p1", position=("A", 1))
