# tests/test_geometry.py
import math

import pytest

from timberplan.core.errors import ConstructionError
from timberplan.geometry.braces import head_brace_leg, mitered_brace, solve_brace
from timberplan.geometry.layout import post_positions, rafter_layout, stud_layout
from timberplan.geometry.rafters import (
    ShedLine, gable_middle_purlin_seat, gable_rafter_profile, shed_rafter_profile,
)


class TestStudLayout:
    @pytest.mark.parametrize("length", [1.2, 3.0, 4.76, 6.0, 9.35])
    def test_studs_span_the_run(self, length):
        layout = stud_layout(length, 0.055, 0.625)
        assert layout.positions[0] == pytest.approx(0.0275)
        assert layout.positions[-1] == pytest.approx(length - 0.0275)
        assert layout.count == len(layout.spacings) + 1
        assert sum(layout.spacings) == pytest.approx(length - 0.055)

    @pytest.mark.parametrize("length", [1.2, 3.0, 4.76, 6.0, 9.35])
    def test_last_bay_absorbs_remainder(self, length):
        layout = stud_layout(length, 0.055, 0.625)
        assert all(s == pytest.approx(0.625) for s in layout.spacings[:-1])
        assert 0.625 / 2 < layout.spacings[-1] <= 0.625 * 1.5 + 1e-9

    def test_short_run_gets_two_studs(self):
        layout = stud_layout(0.08, 0.055, 0.625)
        assert layout.positions == pytest.approx([0.0275, 0.0525])

    def test_non_positive_spacing_rejected(self):
        with pytest.raises(ConstructionError):
            stud_layout(3.0, 0.055, 0.0)


class TestRafterLayout:
    def test_outer_rafters_flush_with_ends(self):
        layout = rafter_layout(6.0, 0.08)
        assert layout.count == 8
        assert layout.positions[0] == pytest.approx(-3.0 + 0.04)
        assert layout.positions[-1] == pytest.approx(3.0 - 0.04)

    def test_minimum_two_rafters(self):
        assert rafter_layout(0.5, 0.08).count == 2


class TestPostPositions:
    def test_even_spacing_inside_overhangs(self):
        positions = post_positions(6.0, 0.5, 3)
        assert positions == pytest.approx([-2.5, 0.0, 2.5])

    def test_overhang_eating_the_depth_rejected(self):
        with pytest.raises(ConstructionError):
            post_positions(1.0, 0.5, 2)


class TestSolveBrace:
    def test_outer_edge_follows_cut_angle(self):
        sol = solve_brace(2.4, 1.0, 0.1)
        assert not sol.degenerate
        assert sol.outer_length == pytest.approx(2.4 / math.cos(sol.cut_angle))
        assert sol.angle + sol.cut_angle == pytest.approx(math.pi / 2)

    def test_thick_brace_is_steeper_than_the_diagonal(self):
        sol = solve_brace(2.4, 1.0, 0.1)
        assert math.degrees(math.atan2(2.4, 1.0)) < sol.angle_deg < 90

    def test_zero_thickness_is_the_bay_diagonal(self):
        sol = solve_brace(2.4, 1.0, 0.0)
        assert sol.angle == pytest.approx(math.atan2(2.4, 1.0))
        assert sol.outer_length == pytest.approx(math.hypot(2.4, 1.0))

    def test_narrow_bay_is_nearly_vertical(self):
        sol = solve_brace(2.4, 0.01, 0.1)
        assert not sol.degenerate
        assert sol.angle_deg > 85

    def test_parallelogram_points(self):
        sol = solve_brace(2.4, 1.0, 0.1)
        p1, p2, p3, p4 = sol.points
        assert p2.x - p1.x == pytest.approx(sol.outer_length)
        assert p3.y == pytest.approx(0.1)
        assert p3.x - p4.x == pytest.approx(sol.outer_length)
        assert sol.tip_length == pytest.approx(p1.distance_to(p3))

    @pytest.mark.parametrize("height,width,thickness", [
        (2.4, 1.0, 2.4),
        (2.4, 1.0, 3.0),
        (0.0, 1.0, 0.1),
        (2.4, 0.0, 0.1),
    ])
    def test_unsolvable_bays_are_degenerate(self, height, width, thickness):
        sol = solve_brace(height, width, thickness)
        assert sol.degenerate
        assert sol.outer_length == 0.0
        assert sol.points == []


class TestHeadBraces:
    def test_mitered_brace_length(self):
        brace = mitered_brace(0.7, 0.1)
        assert brace.outer_length == pytest.approx(0.7 * math.sqrt(2))
        assert brace.points[1].x == pytest.approx(brace.outer_length - 0.1)

    def test_tiny_leg_clamps(self):
        assert mitered_brace(0.0, 0.1).leg == pytest.approx(0.1)

    def test_leg_limits(self):
        assert head_brace_leg(2.0) == pytest.approx(0.7)
        assert head_brace_leg(2.0, 0.4) == pytest.approx(0.4)
        assert head_brace_leg(0.02) == pytest.approx(0.1)


class TestRafterProfiles:
    def _profile(self, purlin=None):
        return gable_rafter_profile(2.44, 2.56, 3.0, 0.12, 0.16, 0.5, 15.0, purlin)

    def test_outline_has_no_repeated_points(self):
        points = self._profile().points
        for a, b in zip(points, points[1:]):
            assert a.distance_to(b) > 1e-6

    def test_total_length_is_ridge_to_tail(self):
        profile = self._profile()
        assert profile.points[0] == profile.key("ridge_top")
        assert profile.total_length == pytest.approx(
            profile.key("ridge_top").distance_to(profile.key("tail_bottom"))
        )

    def test_birdsmouth_sits_on_plate(self):
        profile = self._profile()
        assert profile.key("heel_top").y == pytest.approx(3.0)
        assert profile.key("seat_inner").y == pytest.approx(3.0)
        assert profile.key("seat_inner").x == pytest.approx(2.44)

    def test_top_edge_keeps_the_pitch(self):
        profile = self._profile()
        top, tail = profile.key("ridge_top"), profile.key("tail_top")
        assert (top.y - tail.y) / (tail.x - top.x) == pytest.approx(math.tan(math.radians(15)))

    def test_middle_purlin_adds_a_notch(self):
        seat = gable_middle_purlin_seat(2.44, 3.0, 0.12, 0.12, 0.16, 15.0)
        plain, notched = self._profile(), self._profile(seat)
        # The seat starts where the uphill plumb line meets the underside
        assert len(notched.points) == len(plain.points) + 3
        assert notched.key("purlin_seat_start").y == pytest.approx(seat.seat_y)
        assert notched.total_length == pytest.approx(plain.total_length)

    def test_shed_rafter_overhangs_both_ends(self):
        line = ShedLine(high_post_x=-2.5, low_post_x=2.5, beam_width=0.12, high_seat_y=3.0, pitch=8.0)
        profile = shed_rafter_profile(line, 0.16, 0.5)
        assert profile.key("ridge_top").x == pytest.approx(-2.56 - 0.5)
        assert profile.key("tail_top").x == pytest.approx(2.56 + 0.5)
        assert line.low_seat_y == pytest.approx(3.0 - math.tan(math.radians(8)) * 5.0)
        assert profile.points[-1] == profile.key("head_bottom")
