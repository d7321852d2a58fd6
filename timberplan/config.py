"""Application settings, overridable through ``TIMBERPLAN_*`` environment variables."""

from __future__ import annotations
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TIMBERPLAN_", env_file=".env", extra="ignore")

    # Server
    app_name: str = "Timber Plan Generator"
    version: str = "0.2.0"
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"

    # Material (C24 structural timber)
    e_modulus: float = 11e9             # N/m^2
    wood_weight_density: float = 4900.0 # N/m^3, statics self-weight
    wood_mass_density: float = 500.0    # kg/m^3, summary weight
    gravity: float = 9.81               # m/s^2

    # Serviceability limits (span / divisor)
    span_deflection_divisor: float = 300.0
    cantilever_deflection_divisor: float = 150.0

    # Dimension search
    max_iterations: int = 30
    max_slenderness: float = 2.5        # Beam height / width before widening
    max_beam_width: float = 0.24
    standard_widths: list[float] = [0.06, 0.08, 0.10, 0.12, 0.14, 0.16, 0.18, 0.20, 0.22, 0.24]
    standard_heights: list[float] = [
        0.10, 0.12, 0.14, 0.16, 0.18, 0.20, 0.22, 0.24, 0.26, 0.28,
        0.30, 0.32, 0.34, 0.36, 0.38, 0.40, 0.44, 0.48, 0.50,
    ]

    # Battens
    stock_length: float = 5.0           # Meters per batten bar
    kerf: float = 0.005                 # Saw kerf (5mm)
    batten_spacing: float = 0.35        # Row spacing along the rafter


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Set up root logging once for the application process."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
