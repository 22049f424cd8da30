"""Core domain models for rainwater harvesting assessments.

These models represent the assessment input, the derived estimate and the
report content as immutable value objects. Field names are snake_case in
Python and camelCase (the names used by the web form) in JSON.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rainwise.models.enums import BuildingType, StructureType

_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

# Largest magnitude accepted for any numeric property attribute. Keeps every
# intermediate figure of the estimate finite and convertible to int.
MAX_INPUT_MAGNITUDE = 1_000_000_000


class AssessmentInput(BaseModel):
    """Property attributes submitted for a rainwater harvesting assessment.

    Only types and magnitudes are enforced here (finite numbers no larger than
    MAX_INPUT_MAGNITUDE either side of zero, known building type). Range
    checks (non-empty location, minimum roof area) belong to the form
    validator; the estimator accepts any value this model admits.

    Attributes:
        location: Free-text location, e.g. "Mumbai, Maharashtra"
        roof_area: Roof catchment area in square metres
        dwellers: Number of occupants
        open_space: Open ground available for a structure in square metres
        building_type: Building category (not used in the estimate)
        water_usage: Water consumption in litres per person per day
        notes: Free-text notes (not used in the estimate)
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )

    location: str = Field(description="Free-text location")
    roof_area: float = Field(
        ge=-MAX_INPUT_MAGNITUDE, le=MAX_INPUT_MAGNITUDE, description="Roof area (square metres)"
    )
    dwellers: int = Field(
        ge=-MAX_INPUT_MAGNITUDE, le=MAX_INPUT_MAGNITUDE, description="Number of occupants"
    )
    open_space: float = Field(
        ge=-MAX_INPUT_MAGNITUDE,
        le=MAX_INPUT_MAGNITUDE,
        description="Available open space (square metres)",
    )
    building_type: BuildingType = Field(description="Building category")
    water_usage: float = Field(
        ge=-MAX_INPUT_MAGNITUDE,
        le=MAX_INPUT_MAGNITUDE,
        description="Water usage (litres/person/day)",
    )
    notes: str = Field(default="", description="Free-text notes")


class Dimensions(BaseModel):
    """Recommended structure dimensions in metres."""

    model_config = _MODEL_CONFIG

    length: float = Field(description="Length (metres)")
    width: float = Field(description="Width (metres)")
    depth: float = Field(description="Depth (metres)")

    @property
    def volume(self) -> float:
        """Bounding volume in cubic metres, rounded to one decimal place."""
        return round(self.length * self.width * self.depth, 1)


class AssessmentResult(BaseModel):
    """Derived rainwater harvesting estimate for a property.

    Attributes:
        harvested_water: Annual harvesting potential (litres/year)
        structure_type: Recommended structure
        dimensions: Recommended structure dimensions
        estimated_cost: Implementation cost (currency units)
        rainfall: Annual rainfall at the location (mm/year)
        aquifer_depth: Depth to the local water table (metres, display only)
        payback_period: Years until savings cover the cost (>= 0.5)
        water_saved: Municipal water replaced per month (litres/month)
        monthly_savings: Bill savings per month (currency units)
    """

    model_config = _MODEL_CONFIG

    harvested_water: int = Field(description="Annual harvesting potential (litres/year)")
    structure_type: StructureType = Field(description="Recommended structure")
    dimensions: Dimensions
    estimated_cost: int = Field(description="Implementation cost (currency units)")
    rainfall: int = Field(description="Annual rainfall (mm/year)")
    aquifer_depth: int = Field(description="Aquifer depth (metres)")
    payback_period: float = Field(ge=0.5, description="Payback period (years)")
    water_saved: int = Field(description="Water saved (litres/month)")
    monthly_savings: int = Field(description="Bill savings (currency units/month)")


class ReportSection(BaseModel):
    """A titled block of report lines."""

    model_config = _MODEL_CONFIG

    title: str
    lines: tuple[str, ...]


class ReportContent(BaseModel):
    """Medium-independent text of an assessment report.

    Every renderer (API, plain text, PDF) transcribes the same sections in
    the same order.
    """

    model_config = _MODEL_CONFIG

    title: str
    subtitle: str
    location: str
    sections: tuple[ReportSection, ...]

    def as_pairs(self) -> list[tuple[str, list[str]]]:
        """Return sections as ordered (title, lines) pairs."""
        return [(section.title, list(section.lines)) for section in self.sections]


class MapPreview(BaseModel):
    """Everything a map widget needs to preview the assessment location.

    Attributes:
        location: Location label as entered
        latitude: Marker latitude
        longitude: Marker longitude
        zoom: Initial zoom level
        radius_m: Radius of the highlighted area of influence
        tile_url: Tile server URL template
        attribution: Tile attribution text
        is_default: True when the location was not found and the default
            centre point is used
    """

    model_config = _MODEL_CONFIG

    location: str
    latitude: float
    longitude: float
    zoom: int = Field(default=13, ge=0)
    radius_m: float = Field(default=500.0, gt=0)
    tile_url: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    attribution: str = "© OpenStreetMap contributors"
    is_default: bool = False
