"""Assessment form validator."""

from rainwise.config import FORM_RULES
from rainwise.models.domain import MAX_INPUT_MAGNITUDE
from rainwise.models.enums import BuildingType
from rainwise.models.form import AssessmentForm
from rainwise.validation.errors import ValidationError

MISSING_INFORMATION = "Missing Information"
MISSING_INFORMATION_MESSAGE = (
    "Please fill in all required fields to proceed with the assessment."
)
INVALID_ROOF_AREA = "Invalid Roof Area"
INVALID_ROOF_AREA_MESSAGE = (
    "Roof area should be at least {min_area:g} square meters "
    "for effective rainwater harvesting."
)
INVALID_BUILDING_TYPE = "Invalid Building Type"
INVALID_VALUE = "Invalid Value"
INVALID_VALUE_MESSAGE = "{label} must be a finite number between -{limit:,} and {limit:,}."

NUMERIC_FIELD_LABELS = {
    "roof_area": "Roof area",
    "dwellers": "Number of occupants",
    "open_space": "Open space",
    "water_usage": "Water usage",
}


class AssessmentFormValidator:
    """Validates a submitted assessment form before estimation.

    Checks:
    - Required fields present (location, roof area, building type)
    - Roof area at or above the minimum for effective harvesting
    - Numeric fields finite and within MAX_INPUT_MAGNITUDE of zero
    - Building type is one of the offered categories

    Missing required fields are reported first; the remaining checks only run
    on a complete form.
    """

    def required_fields(self) -> list[str]:
        """Return required form fields."""
        return ["location", "roof_area", "building_type"]

    def validate(self, form: AssessmentForm) -> list[ValidationError]:
        """Validate an assessment form.

        Args:
            form: Submitted form

        Returns:
            List of validation errors (empty if valid)
        """
        errors = [
            ValidationError(
                title=MISSING_INFORMATION,
                message=MISSING_INFORMATION_MESSAGE,
                field=field,
            )
            for field in self.required_fields()
            if not getattr(form, field)
        ]
        if errors:
            return errors

        if form.roof_area < FORM_RULES.MIN_ROOF_AREA_M2:
            errors.append(
                ValidationError(
                    title=INVALID_ROOF_AREA,
                    message=INVALID_ROOF_AREA_MESSAGE.format(
                        min_area=FORM_RULES.MIN_ROOF_AREA_M2
                    ),
                    field="roof_area",
                )
            )

        for field, label in NUMERIC_FIELD_LABELS.items():
            # NaN fails every comparison
            if not abs(getattr(form, field)) <= MAX_INPUT_MAGNITUDE:
                errors.append(
                    ValidationError(
                        title=INVALID_VALUE,
                        message=INVALID_VALUE_MESSAGE.format(
                            label=label, limit=MAX_INPUT_MAGNITUDE
                        ),
                        field=field,
                    )
                )

        allowed = [building_type.value for building_type in BuildingType]
        if form.building_type.lower() not in allowed:
            errors.append(
                ValidationError(
                    title=INVALID_BUILDING_TYPE,
                    message=f"Building type must be one of: {', '.join(allowed)}",
                    field="building_type",
                )
            )

        return errors
