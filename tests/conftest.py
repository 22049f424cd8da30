"""Shared fixtures for RainWise tests."""

import pytest

from rainwise.estimator import calculate_rainwater_potential
from rainwise.models import AssessmentForm, AssessmentInput, BuildingType


@pytest.fixture
def mumbai_input() -> AssessmentInput:
    """Residential property in Mumbai with space for a recharge pit."""
    return AssessmentInput(
        location="Mumbai, Maharashtra",
        roof_area=150,
        dwellers=4,
        open_space=50,
        building_type=BuildingType.RESIDENTIAL,
        water_usage=150,
    )


@pytest.fixture
def mumbai_result(mumbai_input):
    return calculate_rainwater_potential(mumbai_input)


@pytest.fixture
def mumbai_form() -> AssessmentForm:
    return AssessmentForm(
        location="Mumbai, Maharashtra",
        roof_area=150,
        dwellers=4,
        open_space=50,
        building_type="residential",
        water_usage=150,
    )
