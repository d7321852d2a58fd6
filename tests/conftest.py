# tests/conftest.py
import pytest

from timberplan.config import Settings
from timberplan.core.generator import PlanGenerator
from timberplan.core.registry import create_default_registry
from timberplan.models import BuildingType, FrameParameters, RoofType


@pytest.fixture
def settings():
    """Default settings, independent of the process environment."""
    return Settings(_env_file=None)


@pytest.fixture
def generator():
    return PlanGenerator(create_default_registry())


@pytest.fixture
def carport_gable():
    return FrameParameters()


@pytest.fixture
def carport_shed():
    return FrameParameters(roof_type=RoofType.SHED, roof_pitch=8.0)


@pytest.fixture
def garden_house():
    return FrameParameters(width=4.0, depth=3.0, wall_height=2.4, building_type=BuildingType.GARDEN_HOUSE)
