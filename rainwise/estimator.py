"""Rainwater harvesting potential estimate.

Combines the location lookups with the calculators into a single pure
function from AssessmentInput to AssessmentResult.
"""

import logging

from rainwise.calculators import (
    calculate_harvested_water,
    calculate_monthly_savings,
    calculate_payback_period,
    calculate_water_saved,
    estimate_cost,
    litres_to_cubic_metres,
    round_to_int,
    select_structure_type,
    size_structure,
)
from rainwise.lookups import aquifer_depth_for, normalize_location_key, rainfall_for
from rainwise.models.domain import AssessmentInput, AssessmentResult

logger = logging.getLogger(__name__)


def calculate_rainwater_potential(data: AssessmentInput) -> AssessmentResult:
    """Estimate the rainwater harvesting potential of a property.

    Pipeline:
    1. Look up rainfall and aquifer depth for the normalised location
    2. Harvested water from roof area, rainfall and runoff coefficient
    3. Structure type from open space
    4. Structure dimensions from the harvested volume
    5. Cost from roof area and structure type
    6. Monthly water saved, capped by household consumption
    7. Monthly bill savings and payback period

    The result depends only on the input and the static lookup tables. Unknown
    locations use the default rainfall and aquifer depth; degenerate inputs are
    clamped rather than rejected.

    Args:
        data: Property attributes (validated upstream)

    Returns:
        AssessmentResult with all derived figures.
    """
    location_key = normalize_location_key(data.location)
    rainfall = rainfall_for(location_key)
    aquifer_depth = aquifer_depth_for(location_key)

    harvested_water = calculate_harvested_water(data.roof_area, rainfall)

    structure_type = select_structure_type(data.open_space)
    volume_needed = litres_to_cubic_metres(harvested_water)
    dimensions = size_structure(structure_type, volume_needed)

    estimated_cost = estimate_cost(data.roof_area, structure_type)

    water_saved = calculate_water_saved(harvested_water, data.dwellers, data.water_usage)
    monthly_savings = calculate_monthly_savings(water_saved)
    payback_period = calculate_payback_period(estimated_cost, monthly_savings)

    logger.debug(
        f"Estimated '{location_key}': {harvested_water} L/yr, {structure_type.value} "
        f"{dimensions.length}x{dimensions.width}x{dimensions.depth}m, payback {payback_period}y"
    )

    return AssessmentResult(
        harvested_water=harvested_water,
        structure_type=structure_type,
        dimensions=dimensions,
        estimated_cost=estimated_cost,
        rainfall=rainfall,
        aquifer_depth=aquifer_depth,
        payback_period=payback_period,
        water_saved=round_to_int(water_saved),
        monthly_savings=monthly_savings,
    )
