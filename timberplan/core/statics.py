"""Beam deflection checks for the load-bearing parts of a plan.

Closed-form Euler-Bernoulli formulas for simply supported beams (uniform
and midspan point load) and cantilevers. Loads are per metre of member;
roof loads are taken on the horizontal projection and distributed by
tributary width.
"""

from __future__ import annotations
import logging
import math

from timberplan.config import Settings, get_settings
from timberplan.geometry.layout import post_spacing, rafter_layout, stud_layout
from timberplan.geometry.rafters import MIN_KING_POST, king_post_height
from timberplan.models import STUD_SPACING, FrameParameters, Part, StaticsResult

logger = logging.getLogger(__name__)

MIN_SPAN = 0.1

UDL_FORMULA = "w = (5 · q · L⁴) / (384 · E · I)"
UDL_DESCRIPTION = "Berechnung der Durchbiegung (w) eines Balkens unter Gleichlast (q)."
CANTILEVER_FORMULA = "w = (q · L⁴) / (8 · E · I)"

# Part key -> check family
CARPORT_CLASSES = {
    "rafter": "rafter",
    "rafter_sloped": "rafter",
    "side_plate": "purlin",
    "ridge_beam": "purlin",
    "middle_purlin": "purlin",
    "middle_purlin_pult": "purlin",
    "purlin_high": "purlin",
    "purlin_low": "purlin",
    "tie_beam": "tie_beam",
    "cross_member": "tie_beam",
}
GARDEN_HOUSE_CLASSES = {
    "rafter": "rafter",
    "top_plate_d": "plate",
    "ridge_beam": "plate",
    "ceiling_joist": "ceiling_joist",
}


def second_moment(width: float, height: float) -> float:
    """Second moment of area of a rectangle about its strong axis (m^4)."""
    return width * height ** 3 / 12


def deflection_udl(q: float, span: float, e_modulus: float, inertia: float) -> float:
    return 5 * q * span ** 4 / (384 * e_modulus * inertia)


def deflection_point_midspan(p: float, span: float, e_modulus: float, inertia: float) -> float:
    return p * span ** 3 / (48 * e_modulus * inertia)


def deflection_cantilever_udl(q: float, span: float, e_modulus: float, inertia: float) -> float:
    return q * span ** 4 / (8 * e_modulus * inertia)


def check_span(max_deflection: float, span: float, divisor: float) -> tuple[float, bool]:
    """Allowed deflection ``span / divisor`` and whether ``max_deflection`` stays within it."""
    allowed = span / divisor
    return allowed, max_deflection <= allowed


def snow_load(altitude: float) -> float:
    """Characteristic roof snow load in N/m^2 for a site altitude in metres."""
    return (altitude / 500 + 0.4) * 0.8 * 1000


class StaticsEngine:
    """Attaches a ``StaticsResult`` to every recognised load-bearing part.

    Parts outside the recognised families, or with spans of 10cm or less,
    are passed through unchanged. Evaluation never raises.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @property
    def e_modulus(self) -> float:
        return self.settings.e_modulus

    def roof_load(self, params: FrameParameters) -> float:
        """Snow plus rafter self-weight per m^2 of roof plan."""
        s = params.sections
        spacing = rafter_layout(params.depth, s.rafter_width).spacing or params.depth
        self_weight = s.rafter_width * s.rafter_height * self.settings.wood_weight_density / spacing
        return snow_load(params.altitude) + self_weight

    def evaluate(self, parts: list[Part], params: FrameParameters) -> list[Part]:
        classes = CARPORT_CLASSES if params.is_carport else GARDEN_HOUSE_CLASSES
        roof_load = self.roof_load(params)
        result = []
        for part in parts:
            family = classes.get(part.key)
            statics = None
            if family == "rafter":
                statics = self._rafter(params, roof_load)
            elif family == "purlin":
                statics = self._purlin(part.key, params, roof_load)
            elif family == "tie_beam":
                statics = self._tie_beam(part.key, params, roof_load)
            elif family == "ceiling_joist":
                statics = self._ceiling_joist(params, roof_load)
            elif family == "plate":
                statics = self._plate(part.key, params, roof_load)

            if statics is None:
                result.append(part)
                continue
            if not statics.passed:
                logger.debug(
                    "%s fails: w=%.2fmm > %.2fmm over %.2fm",
                    part.key, statics.max_deflection * 1000,
                    statics.allowed_deflection * 1000, statics.span,
                )
            result.append(part.model_copy(update={"statics": statics}))
        return result

    # -- families --------------------------------------------------------

    def _middle_purlin(self, params: FrameParameters):
        return params.sections.middle_purlin if params.is_carport else None

    def _udl_result(self, span: float, q: float, width: float, height: float,
                    formula: str = UDL_FORMULA, description: str = UDL_DESCRIPTION) -> StaticsResult | None:
        if span <= MIN_SPAN:
            return None
        inertia = second_moment(width, height)
        w = deflection_udl(q, span, self.e_modulus, inertia)
        allowed, passed = check_span(w, span, self.settings.span_deflection_divisor)
        return StaticsResult(
            span=span, load=q, max_deflection=w, allowed_deflection=allowed, passed=passed,
            inertia=inertia, e_modulus=self.e_modulus, formula=formula,
            formula_description=description,
        )

    def _rafter(self, params: FrameParameters, roof_load: float) -> StaticsResult | None:
        s = params.sections
        cos_a = math.cos(math.radians(params.roof_pitch))
        purlin = self._middle_purlin(params)
        if params.is_gable:
            horizontal = params.width / 2 - s.beam_width / 2
        else:
            horizontal = params.width
        if purlin is not None:
            horizontal /= 2
        span = horizontal / cos_a

        spacing = rafter_layout(params.depth, s.rafter_width).spacing
        q = s.rafter_width * s.rafter_height * self.settings.wood_weight_density
        q += roof_load * spacing * cos_a
        q_perpendicular = q * cos_a
        return self._udl_result(
            span, q_perpendicular, s.rafter_width, s.rafter_height,
            formula="w = (5 · q⟂ · L⁴) / (384 · E · I)",
            description="Berechnung der Durchbiegung (w) für Gleichlast (q) senkrecht zum Bauteil.",
        )

    def _purlin(self, key: str, params: FrameParameters, roof_load: float) -> StaticsResult | None:
        s = params.sections
        purlin = self._middle_purlin(params)
        if key.startswith("middle_purlin") and purlin is not None:
            width, height = purlin.width, purlin.height
        else:
            width, height = s.beam_width, s.beam_height
        span = post_spacing(params.depth, params.roof_overhang, s.post_count)

        if params.is_gable:
            horizontal = params.width / 2 - s.beam_width / 2
            if key == "side_plate":
                tributary = (horizontal / 4 if purlin else horizontal / 2) + params.roof_overhang
            elif key == "middle_purlin":
                tributary = horizontal / 2
            else:
                tributary = horizontal / 4 if purlin else horizontal / 2
        else:
            horizontal = params.width - s.beam_width
            if key in ("purlin_high", "purlin_low"):
                tributary = (horizontal / 4 if purlin else horizontal / 2) + params.roof_overhang
            else:
                tributary = horizontal / 2

        q = width * height * self.settings.wood_weight_density + roof_load * tributary
        return self._udl_result(span, q, width, height)

    def _tie_beam(self, key: str, params: FrameParameters, roof_load: float) -> StaticsResult | None:
        s = params.sections
        width = s.beam_width
        height = s.tie_beam_height if key == "cross_member" else s.beam_height
        span = params.width - s.post
        bay = post_spacing(params.depth, params.roof_overhang, s.post_count)
        purlin = self._middle_purlin(params)
        density = self.settings.wood_weight_density

        point_load = 0.0
        if params.is_gable:
            king_height = king_post_height(
                params.width / 2 - s.beam_width / 2, params.wall_height,
                s.beam_width, s.beam_height, s.rafter_height, params.roof_pitch,
            )
            if king_height > MIN_KING_POST:
                tributary = params.width / 2 - s.beam_width / 2
                if purlin is not None:
                    tributary /= 2
                point_load = roof_load * tributary * bay + s.beam_width * s.beam_height * density * bay
        elif purlin is not None:
            point_load = roof_load * params.width / 2 * bay + purlin.width * purlin.height * density * bay

        return self._point_result(span, width, height, point_load, "Stütze")

    def _ceiling_joist(self, params: FrameParameters, roof_load: float) -> StaticsResult | None:
        s = params.sections
        span = params.width - 2 * s.top_plate_width
        spacing = rafter_layout(params.depth, s.rafter_width).spacing
        point_load = 0.0
        if params.is_gable and s.use_king_posts and king_post_height(
            params.width / 2 - s.top_plate_width, params.wall_height,
            s.beam_width, s.beam_height, s.rafter_height, params.roof_pitch,
        ) > MIN_KING_POST:
            tributary = params.width / 2 - s.top_plate_width
            point_load = (
                roof_load * tributary * spacing
                + s.beam_width * s.beam_height * self.settings.wood_weight_density * spacing
            )
        return self._point_result(span, s.rafter_width, s.top_plate_height, point_load, "First-Stütze")

    def _point_result(self, span: float, width: float, height: float,
                      point_load: float, source: str) -> StaticsResult | None:
        """Self-weight UDL plus an optional midspan point load from a post."""
        if span <= MIN_SPAN:
            return None
        inertia = second_moment(width, height)
        q = width * height * self.settings.wood_weight_density
        w = deflection_udl(q, span, self.e_modulus, inertia)
        description = "Gesamtdurchbiegung aus Eigengewicht (q)"
        formula = "w_ges = w(q)"
        if point_load > 0:
            w += deflection_point_midspan(point_load, span, self.e_modulus, inertia)
            formula += " + w(P)"
            description += (
                f" und Punktlast (P) von {source}.\n"
                "w(q) = (5·q·L⁴)/(384·E·I)\nw(P) = (P·L³)/(48·E·I)"
            )
        else:
            description += ".\nw(q) = (5·q·L⁴)/(384·E·I)"
        allowed, passed = check_span(w, span, self.settings.span_deflection_divisor)
        return StaticsResult(
            span=span, load=q, point_load=point_load if point_load > 0 else None,
            max_deflection=w, allowed_deflection=allowed, passed=passed,
            inertia=inertia, e_modulus=self.e_modulus, formula=formula,
            formula_description=description,
        )

    def _plate(self, key: str, params: FrameParameters, roof_load: float) -> StaticsResult | None:
        """Garden-house eaves plate or ridge beam: inner span and overhang cantilever."""
        s = params.sections
        horizontal = params.width / 2
        if key == "top_plate_d":
            width, height = s.top_plate_width, s.top_plate_height
            inner = stud_layout(params.depth, s.stud_thickness, STUD_SPACING).max_spacing
            tributary = horizontal / 2
        else:
            width, height = s.beam_width, s.beam_height
            inner = params.depth
            tributary = horizontal

        if inner <= MIN_SPAN:
            return None
        cantilever = params.roof_overhang if params.roof_overhang >= MIN_SPAN else 0.0

        inertia = second_moment(width, height)
        q = roof_load * tributary + width * height * self.settings.wood_weight_density

        w_inner = deflection_udl(q, inner, self.e_modulus, inertia)
        allowed_inner, passed_inner = check_span(w_inner, inner, self.settings.span_deflection_divisor)
        w_cant, allowed_cant, passed_cant = 0.0, math.inf, True
        if cantilever > 0:
            w_cant = deflection_cantilever_udl(q, cantilever, self.e_modulus, inertia)
            allowed_cant, passed_cant = check_span(w_cant, cantilever, self.settings.cantilever_deflection_divisor)

        passed = passed_inner and passed_cant
        if cantilever > 0 and w_cant / allowed_cant > w_inner / allowed_inner:
            return StaticsResult(
                span=cantilever, load=q, max_deflection=w_cant, allowed_deflection=allowed_cant,
                passed=passed, inertia=inertia, e_modulus=self.e_modulus,
                formula=CANTILEVER_FORMULA,
                formula_description=(
                    f"Kritischer Punkt: Auskragung ({cantilever * 100:.0f}cm).\n"
                    "Durchbiegung (w) für Kragarm unter Gleichlast (q)."
                ),
            )
        return StaticsResult(
            span=inner, load=q, max_deflection=w_inner, allowed_deflection=allowed_inner,
            passed=passed, inertia=inertia, e_modulus=self.e_modulus,
            formula=UDL_FORMULA,
            formula_description=(
                f"Kritischer Punkt: Innenfeld ({inner * 100:.0f}cm).\n"
                "Durchbiegung (w) eines Balkens unter Gleichlast (q)."
            ),
        )
