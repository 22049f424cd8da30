"""Cost, water savings and payback calculations."""

import math

from rainwise.calculators.rounding import round_half_up, round_to_int
from rainwise.config import CONSTANTS, STRUCTURE_SPECS
from rainwise.models.enums import StructureType


def estimate_cost(roof_area_m2: float, structure_type: StructureType) -> int:
    """Estimate implementation cost.

    Formula:
        cost = round(roof_area_m2 * 50 * multiplier)
        multiplier: Tank 1.5, Trench 1.2, Pit 1.0

    Args:
        roof_area_m2: Roof catchment area (square metres)
        structure_type: Recommended structure

    Returns:
        Cost in whole currency units.
    """
    base_cost = roof_area_m2 * CONSTANTS.COST_PER_SQUARE_METRE_ROOF
    return round_to_int(base_cost * STRUCTURE_SPECS[structure_type].cost_multiplier)


def calculate_water_saved(
    harvested_litres_per_year: float,
    dwellers: int,
    water_usage_litres_per_person_per_day: float,
) -> float:
    """Calculate municipal water replaced by harvested water each month.

    The monthly share of the annual harvest counts only up to what the
    household consumes; surplus earns no credit.

    Formula:
        monthly_need = dwellers * water_usage * 30
        water_saved = min(harvested / 12, monthly_need)

    Args:
        harvested_litres_per_year: Annual harvest (litres/year)
        dwellers: Number of occupants
        water_usage_litres_per_person_per_day: Consumption per person per day

    Returns:
        Water saved in litres per month (unrounded).
    """
    daily_water_need = dwellers * water_usage_litres_per_person_per_day
    monthly_water_need = daily_water_need * CONSTANTS.DAYS_PER_MONTH
    return min(harvested_litres_per_year / CONSTANTS.MONTHS_PER_YEAR, monthly_water_need)


def calculate_monthly_savings(water_saved_litres_per_month: float) -> int:
    """Bill savings per month at the fixed municipal water price."""
    return round_to_int(water_saved_litres_per_month * CONSTANTS.WATER_PRICE_PER_LITRE)


def calculate_payback_period(estimated_cost: float, monthly_savings: float) -> float:
    """Calculate years until cumulative savings cover the implementation cost.

    Formula:
        annual_savings = monthly_savings * 12
        payback = round((cost / annual_savings) * 10) / 10
        payback = max(payback, 0.5)

    With no annual savings the division is undefined; that case, and any
    non-finite quotient, collapses to the 0.5 year floor. Large finite
    paybacks are returned as computed (there is no upper limit).

    Args:
        estimated_cost: Implementation cost (currency units)
        monthly_savings: Bill savings per month (currency units)

    Returns:
        Payback period in years, one decimal place, never below 0.5.
    """
    annual_savings = monthly_savings * CONSTANTS.MONTHS_PER_YEAR
    if annual_savings == 0:
        return CONSTANTS.MIN_PAYBACK_YEARS

    payback_period = round_half_up(estimated_cost / annual_savings, 1)
    if not math.isfinite(payback_period):
        return CONSTANTS.MIN_PAYBACK_YEARS

    return max(payback_period, CONSTANTS.MIN_PAYBACK_YEARS)
