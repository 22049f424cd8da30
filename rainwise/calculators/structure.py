"""Storage structure selection and sizing.

Chooses between a recharge pit, a recharge trench and a storage tank from the
available open space, then sizes the structure to hold the annual harvest.
"""

import math

from rainwise.calculators.rounding import round_half_up
from rainwise.config import CONSTANTS, STRUCTURE_SPECS
from rainwise.models.domain import Dimensions
from rainwise.models.enums import StructureType


def select_structure_type(open_space_m2: float) -> StructureType:
    """Select a structure type from the available open space.

    A step function of open space alone; roof area, rainfall and occupants
    play no part. Both thresholds are strict, so exactly 20 m² and exactly
    100 m² select a pit.

    Rules:
        open_space < 20   -> Tank
        open_space > 100  -> Trench
        otherwise         -> Pit

    Args:
        open_space_m2: Open ground available (square metres)

    Returns:
        Recommended StructureType.
    """
    if open_space_m2 < CONSTANTS.TANK_MAX_OPEN_SPACE_M2:
        return StructureType.TANK
    if open_space_m2 > CONSTANTS.TRENCH_MIN_OPEN_SPACE_M2:
        return StructureType.TRENCH
    return StructureType.PIT


def size_structure(structure_type: StructureType, volume_m3: float) -> Dimensions:
    """Size a structure to store the given volume.

    Each structure has a fixed depth. Plan dimensions are derived from the
    volume and rounded to one decimal place, then clamped to the minimum
    buildable size.

    Formula:
        Pit (circular, 2.0m deep):
            radius = sqrt(volume / (pi * 2))
            length = width = round(2 * radius, 1)
        Trench (1.5m deep, 8:1) and Tank (2.5m deep, 1.5:1), ratio r:
            length = round(sqrt(volume * r), 1)
            width = round(sqrt(volume / r), 1)
        Then: length >= 2, width >= 2, depth >= 1

    Args:
        structure_type: Structure to size
        volume_m3: Volume to store (cubic metres)

    Returns:
        Dimensions in metres.

    Note:
        A negative volume (only reachable with a negative roof area) is sized
        as zero, yielding the minimum dimensions.
    """
    spec = STRUCTURE_SPECS[structure_type]
    volume_m3 = max(volume_m3, 0.0)

    if spec.length_to_width is None:
        radius = math.sqrt(volume_m3 / (math.pi * 2))
        length = width = round_half_up(radius * 2, 1)
    else:
        length = round_half_up(math.sqrt(volume_m3 * spec.length_to_width), 1)
        width = round_half_up(math.sqrt(volume_m3 / spec.length_to_width), 1)

    return Dimensions(
        length=max(length, CONSTANTS.MIN_LENGTH_M),
        width=max(width, CONSTANTS.MIN_WIDTH_M),
        depth=max(spec.depth_m, CONSTANTS.MIN_DEPTH_M),
    )
