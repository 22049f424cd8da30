"""Domain models for rainwater harvesting assessment."""

from rainwise.models.domain import (
    AssessmentInput,
    AssessmentResult,
    Dimensions,
    MapPreview,
    ReportContent,
    ReportSection,
)
from rainwise.models.enums import BuildingType, StructureType
from rainwise.models.form import AssessmentForm

__all__ = [
    "AssessmentForm",
    "AssessmentInput",
    "AssessmentResult",
    "BuildingType",
    "Dimensions",
    "MapPreview",
    "ReportContent",
    "ReportSection",
    "StructureType",
]
