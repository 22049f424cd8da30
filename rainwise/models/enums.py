"""Enumerations shared by the assessment models."""

from enum import Enum


class BuildingType(str, Enum):
    """Building categories offered on the assessment form.

    Carried through to the report; the estimate does not depend on it.
    """

    RESIDENTIAL = "residential"
    APARTMENT = "apartment"
    COMMERCIAL = "commercial"
    INSTITUTIONAL = "institutional"
    INDUSTRIAL = "industrial"


class StructureType(str, Enum):
    """Recommended rainwater storage or recharge structure."""

    PIT = "Pit"
    TRENCH = "Trench"
    TANK = "Tank"
