# tests/test_models.py
import pytest
from pydantic import ValidationError

from timberplan.core.statics import StaticsEngine
from timberplan.models import (
    BuildingType, CrossSections, FrameParameters, Part, PartRegistry, Point2D, RoofType,
    dedupe_points,
)


class TestPartRegistry:
    def test_same_key_merges_quantity(self):
        parts = PartRegistry()
        parts.add("post", "Pfosten A", 2, width=0.12)
        parts.add("post", "Pfosten B", 3, width=0.14)
        [post] = parts.to_list()
        assert post.quantity == 5
        assert post.description == "Pfosten A"
        assert post.width == 0.12

    def test_zero_quantity_skipped(self):
        parts = PartRegistry()
        parts.add("king_post", "First-Stütze", 0)
        assert "king_post" not in parts
        assert len(parts) == 0

    def test_insert_does_not_alias_the_source(self):
        parts = PartRegistry()
        source = Part(key="post", description="Pfosten", quantity=2)
        parts.insert(source)
        parts.insert(source)
        assert parts.get("post").quantity == 4
        assert source.quantity == 2

    def test_find_by_prefix(self):
        parts = PartRegistry()
        parts.add("brace_main_trans_99", "Kopfband", 4)
        assert parts.find("brace_main").key == "brace_main_trans_99"
        assert parts.find("brace_king") is None


class TestFrameParameters:
    def test_with_sections_copies(self):
        params = FrameParameters()
        bigger = params.with_sections(rafter_height=0.2)
        assert bigger.sections.rafter_height == 0.2
        assert params.sections.rafter_height == 0.16

    def test_frozen(self):
        with pytest.raises(ValidationError):
            FrameParameters().width = 3.0

    def test_garden_house_needs_gable_roof(self):
        with pytest.raises(ValidationError):
            FrameParameters(building_type=BuildingType.GARDEN_HOUSE, roof_type=RoofType.SHED)

    def test_german_aliases(self):
        assert RoofType("Satteldach") is RoofType.GABLE
        assert BuildingType("sauna") is BuildingType.GARDEN_HOUSE


def test_section_helpers():
    sections = CrossSections(beam_width=0.06, beam_height=0.08)
    assert sections.top_plate_width == pytest.approx(0.10)
    assert sections.top_plate_height == pytest.approx(0.12)
    assert sections.middle_purlin is None
    assert CrossSections(use_middle_purlin=True).middle_purlin.height == pytest.approx(0.16)
    assert CrossSections(posts_per_side=1).post_count == 2


def test_dedupe_points():
    points = [Point2D(x=0, y=0), Point2D(x=0, y=1e-9), Point2D(x=1, y=0), Point2D(x=0, y=0)]
    assert dedupe_points(points) == [Point2D(x=0, y=0), Point2D(x=1, y=0), Point2D(x=0, y=0)]


def test_part_nominal_volume():
    part = Part(key="post", description="Pfosten", quantity=4, width=0.12, height=0.12, length=2.88)
    assert part.nominal_volume == pytest.approx(0.12 * 0.12 * 2.88 * 4)
    assert Part(key="misc", description="Schrauben").nominal_volume == 0.0


def test_statics_utilization(generator, carport_gable, settings):
    parts = StaticsEngine(settings).evaluate(generator.generate(carport_gable), carport_gable)
    rafter = next(p for p in parts if p.key == "rafter")
    expected = rafter.statics.max_deflection / rafter.statics.allowed_deflection
    assert rafter.statics.utilization == pytest.approx(expected)
    assert (rafter.statics.utilization <= 1) == rafter.statics.passed
