"""Tests for the solar system orchestrator."""

import pytest

from solar_board.engine.reachability import SETI_RULES
from solar_board.engine.solar_system import SolarSystem, new_solar_system
from solar_board.models import Position


def test_new_solar_system_defaults():
    """Test a fresh system on the standard board."""
    system = new_solar_system()
    assert system.board.disk_names == ["A", "B", "C", "D", "E"]
    assert system.rotation.total_rotation(3) == 0
    assert len(system.probes) == 0


def test_initial_angles():
    system = new_solar_system(initial_angles=(-45, 0, 0))
    assert system.locate_object("earth") == Position("A", 3)

    system.rotate(1, 1)
    system.reset(1)
    assert system.rotation.angle1 == -45


def test_systems_do_not_share_state():
    first = new_solar_system()
    second = new_solar_system()
    first.rotate(1, 2)
    first.launch_probe("p1")
    assert second.rotation.angle1 == 0
    assert len(second.probes) == 0


def test_rotate_and_locate():
    system = new_solar_system()
    system.rotate(2, -1)
    assert system.locate_object("mars") == Position("B", 2)
    assert system.locate_object("saturn") == Position("C", 1)
    assert system.locate_object("pluto") is None


def test_rotate_carries_probes():
    system = new_solar_system()
    probe = system.launch_probe("p1")

    shifts = system.rotate(3, -1)

    assert probe.position == Position("A", 3)
    assert [s.probe_id for s in shifts] == [probe.id]


def test_rotate_next():
    system = new_solar_system()
    level, _ = system.rotate_next()
    assert level == 1
    assert system.rotation.angle1 == -45
    assert system.rotation.next_level == 2


def test_move_probe_within_reach():
    """Test committing a move reported by the reachability search."""
    system = new_solar_system()
    probe = system.launch_probe("p1")

    entry = system.move_probe(probe.id, Position("B", 2), energy=1)

    assert entry.movements == 1
    assert entry.path == ["B2"]
    assert probe.position == Position("B", 2)


def test_move_probe_out_of_reach():
    system = new_solar_system()
    probe = system.launch_probe("p1")

    with pytest.raises(ValueError, match="not reachable"):
        system.move_probe(probe.id, Position("D", 2), energy=1)
    assert probe.position == Position("A", 2)


def test_move_probe_to_own_cell_rejected():
    system = new_solar_system()
    probe = system.launch_probe("p1")
    with pytest.raises(ValueError, match="not reachable"):
        system.move_probe(probe.id, Position("A", 2), energy=3)


def test_move_unknown_probe():
    system = new_solar_system()
    with pytest.raises(ValueError, match="not found"):
        system.move_probe("ghost", Position("A", 1), energy=1)


def test_reachable_cells_uses_rules():
    system = new_solar_system(rules=SETI_RULES)
    assert system.reachable_cells(Position("A", 8), 1) == {}


def test_cells_snapshot():
    system = SolarSystem(board=new_solar_system().board)
    cells = system.cells()
    assert len(cells) == 40
    assert cells["A2"].planet_name == "Earth"
