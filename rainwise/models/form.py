"""Assessment form schema for submissions from the API, CLI or batch files."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rainwise.models.domain import AssessmentInput
from rainwise.models.enums import BuildingType


class AssessmentForm(BaseModel):
    """Raw assessment form as submitted, before validation.

    Defaults match an untouched form: no location, no roof area, a single
    occupant and 150 litres per person per day.

    Note:
        building_type is a plain string here. Incomplete or unknown values are
        reported by AssessmentFormValidator as user-facing messages.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "location": "Mumbai, Maharashtra",
                "roofArea": 150,
                "dwellers": 4,
                "openSpace": 50,
                "buildingType": "residential",
                "waterUsage": 150,
                "notes": "",
            }
        },
    )

    location: str = Field(default="", description="City, district, state")
    roof_area: float = Field(default=0.0, description="Roof area (square metres)")
    dwellers: int = Field(default=1, description="Number of occupants")
    open_space: float = Field(default=0.0, description="Available open space (square metres)")
    building_type: str = Field(default="", description="Building category")
    water_usage: float = Field(default=150.0, description="Water usage (litres/person/day)")
    notes: str = Field(default="", description="Additional notes")

    def to_input(self) -> AssessmentInput:
        """Build the estimator input from a validated form.

        Raises:
            ValueError: If building_type is not a known category (the form
                should have been validated first)
        """
        return AssessmentInput(
            location=self.location,
            roof_area=self.roof_area,
            dwellers=self.dwellers,
            open_space=self.open_space,
            building_type=BuildingType(self.building_type.lower()),
            water_usage=self.water_usage,
            notes=self.notes,
        )
