# tests/test_search.py
import pytest

from timberplan.config import Settings
from timberplan.core.errors import OptimizationExhausted
from timberplan.core.search import (
    DimensionSearch, SearchState, enlarge_sections, failure_category, next_standard,
)
from timberplan.models import CrossSections, FrameParameters


HEIGHTS = [0.10, 0.12, 0.14, 0.16, 0.18, 0.20]


class TestNextStandard:
    def test_next_size_up(self):
        assert next_standard(0.16, HEIGHTS) == pytest.approx(0.18)
        assert next_standard(0.155, HEIGHTS) == pytest.approx(0.16)

    def test_tolerance_skips_current_size(self):
        assert next_standard(0.1595, HEIGHTS) == pytest.approx(0.18)

    def test_beyond_largest_adds_two_cm(self):
        assert next_standard(0.20, HEIGHTS) == pytest.approx(0.22)


@pytest.mark.parametrize("key,category", [
    ("rafter", "rafter_height"),
    ("rafter_sloped", "rafter_height"),
    ("middle_purlin", "middle_purlin_height"),
    ("middle_purlin_pult", "middle_purlin_height"),
    ("cross_member", "tie_beam_height"),
    ("side_plate", "beam_height"),
    ("ridge_beam", "beam_height"),
    ("tie_beam", "beam_height"),
    ("top_plate_d", "beam_height"),
    ("ceiling_joist", "beam_height"),
    ("post", None),
])
def test_failure_category(key, category):
    assert failure_category(key) == category


class TestEnlargeSections:
    def test_only_failing_category_grows(self, settings):
        sections = CrossSections()
        bigger = enlarge_sections(sections, ["rafter"], settings)
        assert bigger.rafter_height == pytest.approx(0.18)
        assert bigger.beam_height == sections.beam_height
        assert bigger.rafter_width == sections.rafter_width

    def test_each_category_bumped_once(self, settings):
        bigger = enlarge_sections(CrossSections(), ["side_plate", "ridge_beam", "tie_beam"], settings)
        assert bigger.beam_height == pytest.approx(0.14)

    def test_slender_beam_widens(self, settings):
        sections = CrossSections(beam_width=0.12, beam_height=0.30)
        bigger = enlarge_sections(sections, ["ridge_beam"], settings)
        assert bigger.beam_height == pytest.approx(0.32)
        assert bigger.beam_width == pytest.approx(0.14)

    def test_width_capped(self, settings):
        sections = CrossSections(beam_width=0.24, beam_height=0.60)
        bigger = enlarge_sections(sections, ["ridge_beam"], settings)
        assert bigger.beam_width == pytest.approx(0.24)

    def test_no_failures_no_change(self, settings):
        sections = CrossSections()
        assert enlarge_sections(sections, [], settings) == sections


def test_search_reports_only_terminal_states():
    assert [s.value for s in SearchState] == ["converged", "exhausted"]


class TestDimensionSearch:
    def test_converges_for_default_carport(self, generator, carport_gable, settings):
        result = DimensionSearch(generator, settings=settings).run(carport_gable)

        assert result.state == SearchState.CONVERGED
        assert result.failing == []
        assert result.iterations == len(result.history)
        checked = [p for p in result.parts if p.statics is not None]
        assert checked
        assert all(p.statics.passed for p in checked)
        assert result.parameters.sections.post == result.parameters.sections.beam_width

    def test_sections_never_shrink(self, generator, carport_gable, settings):
        result = DimensionSearch(generator, settings=settings).run(carport_gable)
        for before, after in zip(result.history, result.history[1:]):
            assert after.beam_height >= before.beam_height
            assert after.rafter_height >= before.rafter_height
            assert after.beam_width >= before.beam_width

    def test_passing_input_converges_first_time(self, generator, settings):
        params = FrameParameters(width=3.0, depth=3.0).with_sections(
            beam_width=0.20, beam_height=0.30, rafter_height=0.24,
        )
        result = DimensionSearch(generator, settings=settings).run(params)
        assert result.iterations == 1

    def test_rafter_only_failure_bumps_rafter(self, generator, settings):
        params = FrameParameters(width=4.0, depth=3.0).with_sections(
            beam_width=0.20, beam_height=0.30, rafter_height=0.06,
        )
        search = DimensionSearch(generator, settings=settings)
        _, failing = search.check(params)
        assert failing == ["rafter"]

        result = search.run(params)
        assert result.history[1].rafter_height > result.history[0].rafter_height
        assert result.history[1] == result.history[0].model_copy(
            update={"rafter_height": result.history[1].rafter_height}
        )

    def test_exhaustion_reports_last_attempt(self, generator):
        settings = Settings(_env_file=None, max_iterations=2)
        params = FrameParameters(width=20.0, depth=12.0)
        with pytest.raises(OptimizationExhausted) as info:
            DimensionSearch(generator, settings=settings).run(params)

        result = info.value.result
        assert result.state == SearchState.EXHAUSTED
        assert result.iterations == 2
        assert result.failing
        assert result.parameters.sections == result.history[-1]
        assert "2 iterations" in str(info.value)
