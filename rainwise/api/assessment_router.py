"""Assessment endpoints.

- GET  /locations:          Reference data for every known location
- POST /assessments:        Validate the form, estimate, return result and report text
- POST /assessments/report: Validate the form, estimate, return the PDF report
- GET  /map:                Map preview for a location
"""

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rainwise.config import DEFAULT_REPORT_CONFIG
from rainwise.estimator import calculate_rainwater_potential
from rainwise.lookups import aquifer_depth_for, coordinates_for, known_locations, rainfall_for
from rainwise.maps import build_map_preview
from rainwise.models.domain import AssessmentInput, AssessmentResult, MapPreview, ReportContent
from rainwise.models.form import AssessmentForm
from rainwise.reports import (
    PDFReportRenderer,
    ReportGenerationError,
    build_report_content,
    report_filename,
)
from rainwise.validation import AssessmentFormValidator

logger = logging.getLogger(__name__)

router = APIRouter()

REPORT_FAILED_MESSAGE = "Failed to generate report, please try again"


class LocationSummary(BaseModel):
    """Reference data for one known location."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    location: str
    rainfall: int
    aquifer_depth: int
    latitude: float
    longitude: float


class AssessmentResponse(BaseModel):
    """Estimate and report content for a submitted form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    input: AssessmentInput
    result: AssessmentResult
    report: ReportContent


def _validated_input(form: AssessmentForm) -> AssessmentInput:
    """Validate a submitted form, raising HTTP 422 with user-facing messages."""
    errors = AssessmentFormValidator().validate(form)
    if errors:
        logger.warning(f"Rejected assessment form: {'; '.join(str(e) for e in errors)}")
        raise HTTPException(
            status_code=422,
            detail=[
                {"field": error.field, "title": error.title, "message": error.message}
                for error in errors
            ],
        )
    return form.to_input()


@router.get("/locations", response_model=list[LocationSummary])
def list_locations():
    """Return rainfall, aquifer depth and coordinates for every known location."""
    summaries = []
    for location in known_locations():
        latitude, longitude = coordinates_for(location)
        summaries.append(
            LocationSummary(
                location=location,
                rainfall=rainfall_for(location),
                aquifer_depth=aquifer_depth_for(location),
                latitude=latitude,
                longitude=longitude,
            )
        )
    return summaries


@router.post("/assessments", response_model=AssessmentResponse)
def create_assessment(form: AssessmentForm):
    """Run an assessment and return the estimate with its report content.

    Raises:
        HTTPException 422: If the form fails validation
    """
    data = _validated_input(form)
    result = calculate_rainwater_potential(data)
    logger.info(
        f"Assessment for '{data.location}': {result.harvested_water} L/yr, "
        f"{result.structure_type.value}"
    )
    return AssessmentResponse(
        input=data, result=result, report=build_report_content(data, result)
    )


@router.post(
    "/assessments/report",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def create_assessment_report(form: AssessmentForm):
    """Run an assessment and return the PDF report as a download.

    Raises:
        HTTPException 422: If the form fails validation
        HTTPException 500: If the PDF cannot be generated
    """
    data = _validated_input(form)
    result = calculate_rainwater_potential(data)
    content = build_report_content(data, result)

    today = date.today()
    renderer = PDFReportRenderer(DEFAULT_REPORT_CONFIG, generated_on=today)
    try:
        document = renderer.render(content)
    except ReportGenerationError as e:
        logger.error(f"Report download failed for '{data.location}': {e}")
        raise HTTPException(status_code=500, detail=REPORT_FAILED_MESSAGE) from e

    filename = report_filename(data.location, today, DEFAULT_REPORT_CONFIG.brand_name)
    return Response(
        content=document,
        media_type=renderer.media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/map", response_model=MapPreview)
def map_preview(location: str = ""):
    """Return the map preview descriptor for a location."""
    return build_map_preview(location)
