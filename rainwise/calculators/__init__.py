"""Business logic calculators for rainwater harvesting assessment.

This package contains pure functions for the estimate formulas.
All calculators are stateless and testable without the lookup tables.
"""

from rainwise.calculators.financial import (
    calculate_monthly_savings,
    calculate_payback_period,
    calculate_water_saved,
    estimate_cost,
)
from rainwise.calculators.harvest import calculate_harvested_water, litres_to_cubic_metres
from rainwise.calculators.rounding import round_half_up, round_to_int
from rainwise.calculators.structure import select_structure_type, size_structure

__all__ = [
    "calculate_harvested_water",
    "litres_to_cubic_metres",
    "select_structure_type",
    "size_structure",
    "estimate_cost",
    "calculate_water_saved",
    "calculate_monthly_savings",
    "calculate_payback_period",
    "round_half_up",
    "round_to_int",
]
