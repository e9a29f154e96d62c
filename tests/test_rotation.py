"""Tests for platform rotation state."""

import pytest

from solar_board.models import RotationState


def totals(rotation):
    return [rotation.total_rotation(level) for level in (0, 1, 2, 3)]


class TestRotate:
    """Test rotate and the compounding of nested platforms."""

    def test_rotate_level_1_carries_nested_levels(self):
        """Test that turning level 1 shifts the totals of levels 2 and 3 equally."""
        rotation = RotationState()
        rotation.rotate(1, 2)

        assert rotation.angle1 == 90
        assert rotation.angle2 == 0
        assert rotation.angle3 == 0
        assert totals(rotation) == [0, 90, 90, 90]

    def test_rotate_level_2(self):
        rotation = RotationState()
        rotation.rotate(2, -1)
        assert totals(rotation) == [0, 0, -45, -45]

    def test_rotate_level_3_only_affects_level_3(self):
        rotation = RotationState(angle1=45, angle2=90)
        before = totals(rotation)

        rotation.rotate(3, 1)

        after = totals(rotation)
        assert after[:3] == before[:3]
        assert after[3] == before[3] + 45

    def test_rotate_round_trip(self):
        """Test rotate(n) followed by rotate(-n) restores every total."""
        for level in (1, 2, 3):
            for n in range(-9, 10):
                rotation = RotationState(angle1=-45, angle2=90, angle3=135)
                before = totals(rotation)
                rotation.rotate(level, n)
                rotation.rotate(level, -n)
                assert totals(rotation) == before

    def test_fixed_level_never_rotates(self):
        rotation = RotationState()
        rotation.rotate(1, 3)
        assert rotation.total_rotation(0) == 0

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid rotating level"):
            RotationState().rotate(0, 1)
        with pytest.raises(ValueError, match="Invalid rotating level"):
            RotationState().rotate(4, 1)

    def test_invalid_steps(self):
        with pytest.raises(ValueError, match="Invalid steps"):
            RotationState().rotate(1, 0.5)


class TestReset:
    """Test reset of a single level."""

    def test_reset_restores_initial_angle(self):
        rotation = RotationState.initial((45, 0, -90))
        rotation.rotate(1, 2)
        assert rotation.angle1 == 135

        rotation.reset(1)

        assert rotation.angle1 == 45
        assert rotation.total_rotation(3) == -45

    def test_reset_does_not_touch_other_levels(self):
        """Test that resetting level 1 keeps the stored angles of levels 2 and 3."""
        rotation = RotationState()
        rotation.rotate(1, 1)
        rotation.rotate(2, 2)
        rotation.rotate(3, 3)

        rotation.reset(1)

        assert rotation.angle1 == 0
        assert rotation.angle2 == 90
        assert rotation.angle3 == 135
        assert totals(rotation) == [0, 0, 90, 225]


class TestValidation:
    """Test rotation state validation."""

    def test_angles_must_be_multiples_of_45(self):
        with pytest.raises(ValueError, match="multiple of 45"):
            RotationState(angle1=30)

    def test_initial_angles_must_be_multiples_of_45(self):
        with pytest.raises(ValueError, match="multiple of 45"):
            RotationState.initial((0, 10, 0))

    def test_initial_angles_length(self):
        with pytest.raises(ValueError, match="must hold 3 angles"):
            RotationState(initial_angles=(0, 0))

    def test_total_rotation_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid rotating level"):
            RotationState().total_rotation(5)


class TestRotateNext:
    """Test the standard game rotation cycle."""

    def test_cycles_through_levels(self):
        rotation = RotationState()

        assert rotation.rotate_next() == 1
        assert rotation.rotate_next() == 2
        assert rotation.rotate_next() == 3
        assert rotation.rotate_next() == 1

        assert rotation.angle1 == -90
        assert rotation.angle2 == -45
        assert rotation.angle3 == -45
        assert rotation.next_level == 2

    def test_copy_is_independent(self):
        rotation = RotationState(angle1=45)
        snapshot = rotation.copy()
        rotation.rotate(1, 1)
        assert snapshot.angle1 == 45
        assert rotation.angle1 == 90
