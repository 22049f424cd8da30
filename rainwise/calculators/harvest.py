"""Rooftop rainwater harvesting volume calculations."""

from rainwise.calculators.rounding import round_to_int
from rainwise.config import CONSTANTS


def calculate_harvested_water(roof_area_m2: float, rainfall_mm: float) -> int:
    """Calculate annual harvestable rainwater from a roof.

    One millimetre of rain on one square metre is one litre, scaled by the
    fixed runoff coefficient for an impervious roof. The coefficient does not
    vary with building type or roof material.

    Formula:
        harvested_litres = round(roof_area_m2 * rainfall_mm * 0.85)

    Args:
        roof_area_m2: Roof catchment area (square metres)
        rainfall_mm: Annual rainfall (mm/year)

    Returns:
        Harvested water in litres per year.
    """
    return round_to_int(roof_area_m2 * rainfall_mm * CONSTANTS.RUNOFF_COEFFICIENT)


def litres_to_cubic_metres(litres: float) -> float:
    return litres / CONSTANTS.LITRES_PER_CUBIC_METRE
