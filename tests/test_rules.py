# tests/test_rules.py
import pytest

from timberplan.core.analyzer import FrameAnalyzer
from timberplan.core.errors import ConstructionError
from timberplan.core.registry import RuleRegistry, create_default_registry
from timberplan.models import BuildingType, FrameParameters, PlanContext, RoofType
from timberplan.rules.base import FramingRule


def _by_key(parts):
    return {p.key: p for p in parts}


class TestRegistry:
    def test_default_rules(self):
        ids = [r.get_id() for r in create_default_registry().list_rules()]
        assert ids == [
            "carport.gable_frame",
            "carport.shed_frame",
            "garden_house.walls",
            "garden_house.gable_roof",
            "roof.battens",
        ]

    def test_garden_house_order(self, garden_house):
        context = PlanContext(params=garden_house)
        rules = create_default_registry().get_applicable_rules(context)
        assert [r.get_id() for r in rules] == [
            "garden_house.walls", "garden_house.gable_roof", "roof.battens",
        ]

    def test_dependencies_run_first(self, carport_gable):
        class Late(FramingRule):
            priority = 10
            dependencies = ["early"]

            def get_id(self):
                return "late"

            def get_name(self):
                return "Late"

            def applies(self, context):
                return True

            def generate(self, context):
                return []

        class Early(Late):
            priority = 90
            dependencies = []

            def get_id(self):
                return "early"

        registry = RuleRegistry()
        registry.register(Late())
        registry.register(Early())
        rules = registry.get_applicable_rules(PlanContext(params=carport_gable))
        assert [r.get_id() for r in rules] == ["early", "late"]

    def test_unregister(self, garden_house):
        registry = create_default_registry()
        assert registry.get_rule("roof.battens") is not None
        registry.unregister("roof.battens")
        assert registry.get_rule("roof.battens") is None
        rules = registry.get_applicable_rules(PlanContext(params=garden_house))
        assert [r.get_id() for r in rules] == ["garden_house.walls", "garden_house.gable_roof"]


class TestAnalyzer:
    def test_carport_layouts(self, carport_gable):
        context = PlanContext(params=carport_gable)
        FrameAnalyzer().analyze(context)
        assert context.rafters.count == 8
        assert context.post_positions == pytest.approx([-2.5, 2.5])
        assert context.gable_studs is None

    def test_garden_house_layouts(self, garden_house):
        context = PlanContext(params=garden_house)
        FrameAnalyzer().analyze(context)
        assert context.gable_studs.positions[-1] == pytest.approx(4.0 - 0.24 - 0.0275)
        assert context.side_studs.positions[-1] == pytest.approx(3.0 - 0.0275)
        assert context.post_positions == []

    @pytest.mark.parametrize("params", [
        FrameParameters(wall_height=0.1),
        FrameParameters(width=0.1),
        FrameParameters(depth=1.0, roof_overhang=0.5),
        FrameParameters(building_type="garden_house", wall_height=0.15),
        FrameParameters(building_type="garden_house", width=0.3),
    ])
    def test_impossible_frames_rejected(self, params):
        with pytest.raises(ConstructionError):
            FrameAnalyzer().analyze(PlanContext(params=params))


class TestCarportGable:
    def test_parts(self, generator, carport_gable):
        parts = _by_key(generator.generate(carport_gable))
        assert parts["post"].quantity == 4
        assert parts["post"].length == pytest.approx(3.0 - 0.12)
        assert parts["side_plate"].quantity == 2
        assert parts["tie_beam"].quantity == 2
        assert parts["tie_beam"].length == pytest.approx(5.0 - 0.12)
        assert parts["ridge_beam"].quantity == 1
        assert parts["king_post"].quantity == 2
        assert parts["rafter"].quantity == 16
        assert parts["counter_batten"].cutting_plan is not None
        assert "middle_purlin" not in parts

    def test_head_braces(self, generator, carport_gable):
        keys = [p.key for p in generator.generate(carport_gable)]
        for prefix in ("brace_main_trans_", "brace_main_long_", "brace_king_"):
            assert any(k.startswith(prefix) for k in keys), prefix

    def test_middle_purlin(self, generator):
        params = FrameParameters(width=12.0).with_sections(use_middle_purlin=True)
        parts = _by_key(generator.generate(params))
        assert parts["middle_purlin"].quantity == 2
        assert parts["support_post"].quantity == 4
        assert parts["middle_purlin"].length == pytest.approx(6.0)

    def test_ridge_always_on_king_posts(self, generator):
        params = FrameParameters().with_sections(use_king_posts=False)
        parts = _by_key(generator.generate(params))
        assert parts["ridge_beam"].quantity == 1
        assert parts["king_post"].quantity == 2
        assert any(k.startswith("brace_king_") for k in parts)

    def test_no_king_posts_below_minimum_height(self, generator):
        params = FrameParameters(roof_pitch=2.0)
        keys = [p.key for p in generator.generate(params)]
        assert "king_post" not in keys
        assert not any(k.startswith("brace_king_") for k in keys)

    def test_posts_per_side(self, generator):
        params = FrameParameters(depth=10.0).with_sections(posts_per_side=4)
        parts = _by_key(generator.generate(params))
        assert parts["post"].quantity == 8
        assert parts["tie_beam"].quantity == 4


class TestCarportShed:
    def test_parts(self, generator, carport_shed):
        parts = _by_key(generator.generate(carport_shed))
        assert parts["post_high"].quantity == 2
        assert parts["post_low"].quantity == 2
        assert parts["post_low"].length < parts["post_high"].length
        assert parts["purlin_high"].quantity == 1
        assert parts["purlin_low"].quantity == 1
        assert parts["cross_member"].height == pytest.approx(0.14)
        assert parts["rafter_sloped"].quantity == 8
        assert "rafter" not in parts
        assert "tie_beam" not in parts
        assert parts["counter_batten"].cutting_plan.stock_count > 0

    def test_flat_roof_uses_shed_frame(self, generator):
        params = FrameParameters(roof_type=RoofType.FLAT, roof_pitch=2.0)
        keys = [p.key for p in generator.generate(params)]
        assert "rafter_sloped" in keys

    def test_middle_purlin(self, generator):
        params = FrameParameters(roof_type=RoofType.SHED, roof_pitch=5.0, width=7.0).with_sections(
            use_middle_purlin=True,
        )
        parts = _by_key(generator.generate(params))
        assert parts["middle_purlin_pult"].quantity == 1
        assert parts["support_post_pult"].quantity == 2

    def test_low_side_below_ground_rejected(self, generator):
        params = FrameParameters(roof_type=RoofType.SHED, roof_pitch=45.0, width=5.0, wall_height=3.0)
        with pytest.raises(ConstructionError):
            generator.generate(params)


class TestGardenHouse:
    def test_parts(self, generator, garden_house):
        parts = _by_key(generator.generate(garden_house))
        for key in ("stud_gable", "stud_side", "sill_d", "sill_w", "top_plate_d", "top_plate_w",
                    "ridge_beam", "gable_post", "king_post", "ceiling_joist", "rafter", "counter_batten"):
            assert key in parts, key
        assert parts["top_plate_d"].length == pytest.approx(3.0 + 2 * 0.5)
        assert parts["ridge_beam"].length == pytest.approx(3.0 + 2 * 0.5)
        assert parts["sill_w"].length == pytest.approx(4.0 - 2 * 0.12)
        assert parts["stud_side"].length == pytest.approx(2.4 - 0.08 - 0.12)

    def test_stud_counts_match_layout(self, generator, garden_house):
        context = PlanContext(params=garden_house)
        FrameAnalyzer().analyze(context)
        parts = _by_key(generator.generate(garden_house))
        assert parts["stud_gable"].quantity == context.gable_studs.count * 2
        assert parts["stud_side"].quantity == context.side_studs.count * 2

    def test_wall_braces(self, generator, garden_house):
        braces = [p for p in generator.generate(garden_house) if p.key.startswith("brace_")]
        assert braces
        assert all(p.quantity == 2 for p in braces)
        assert all(p.drawing.points for p in braces)

    def test_no_king_posts(self, generator, garden_house):
        params = garden_house.with_sections(use_king_posts=False)
        keys = [p.key for p in generator.generate(params)]
        assert "ceiling_joist" not in keys
        assert "king_post" not in keys
        assert "gable_post" in keys


def test_batten_plan_covers_the_rows(generator, carport_gable, settings):
    parts = _by_key(generator.generate(carport_gable))
    battens = parts["counter_batten"]
    plan = battens.cutting_plan
    assert battens.quantity == plan.stock_count
    assert plan.rejected == []
    assert battens.description.startswith("Traglatten 60x80mm")
    assert "Zuschnittplan" in battens.description


@pytest.mark.parametrize("depth", [10.08, 12.58, 7.5, 9.16, 11.24, 14.0])
@pytest.mark.parametrize("building_type", [BuildingType.CARPORT, BuildingType.GARDEN_HOUSE])
def test_batten_pieces_always_fit_stock(generator, settings, building_type, depth):
    params = FrameParameters(width=4.0, depth=depth, wall_height=2.4, building_type=building_type)
    plan = _by_key(generator.generate(params))["counter_batten"].cutting_plan
    assert plan.rejected == []
    assert all(c <= settings.stock_length for b in plan.bins for c in b.cuts)
