"""Report content assembly.

Turns an assessment input and its result into titled sections of plain text
lines. Renderers only lay these lines out; they never compute figures, so the
on-screen report and the exported PDF always carry identical content.
"""

from rainwise.config import DEFAULT_REPORT_CONFIG
from rainwise.models.domain import AssessmentInput, AssessmentResult, ReportContent, ReportSection

REPORT_TITLE = "Rainwater Harvesting Assessment Report"

RECOMMENDATIONS = (
    "• Install first flush diverter to improve water quality",
    "• Use mesh filters to prevent debris accumulation",
    "• Regular maintenance every 6 months recommended",
    "• Consider connecting to existing plumbing for optimal use",
    "• Monitor groundwater levels annually",
)


def _plain(value: float) -> str:
    """Format a measurement without a trailing .0 (150, 12.5)."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _grouped(value: float) -> str:
    """Format a quantity with thousands separators (306,000)."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def build_report_content(
    data: AssessmentInput,
    results: AssessmentResult,
    currency_symbol: str | None = None,
) -> ReportContent:
    """Build the ordered report sections for an assessment.

    Sections:
    1. Property Information - the submitted attributes
    2. Assessment Results - harvest, structure, dimensions, cost, payback
    3. Local Conditions - rainfall, aquifer depth, water and bill savings
    4. Recommendations - fixed guidance, independent of the input

    Args:
        data: Submitted property attributes
        results: Estimate for those attributes
        currency_symbol: Symbol for cost figures (defaults to ReportConfig)

    Returns:
        ReportContent with title, subtitle and sections.
    """
    if currency_symbol is None:
        currency_symbol = DEFAULT_REPORT_CONFIG.currency_symbol
    currency = currency_symbol
    dims = results.dimensions

    property_info = ReportSection(
        title="Property Information",
        lines=(
            f"Location: {data.location}",
            f"Building Type: {data.building_type.value}",
            f"Roof Area: {_plain(data.roof_area)} sq. meters",
            f"Number of Occupants: {data.dwellers}",
            f"Available Open Space: {_plain(data.open_space)} sq. meters",
            f"Daily Water Usage: {_plain(data.water_usage)} liters per person",
        ),
    )

    assessment = ReportSection(
        title="Assessment Results",
        lines=(
            f"Annual Harvesting Potential: {_grouped(results.harvested_water)} liters",
            f"Recommended Structure: {results.structure_type.value}",
            f"Structure Dimensions: {_plain(dims.length)}m × {_plain(dims.width)}m × "
            f"{_plain(dims.depth)}m",
            f"Structure Volume: {dims.volume:.1f} cubic meters",
            f"Estimated Implementation Cost: {currency}{_grouped(results.estimated_cost)}",
            f"Expected Payback Period: {_plain(results.payback_period)} years",
        ),
    )

    local_conditions = ReportSection(
        title="Local Conditions",
        lines=(
            f"Annual Rainfall: {results.rainfall}mm",
            f"Aquifer Depth: {results.aquifer_depth}m",
            f"Monthly Water Savings: {_grouped(results.water_saved)} liters",
            f"Monthly Bill Savings: {currency}{_grouped(results.monthly_savings)}",
        ),
    )

    recommendations = ReportSection(title="Recommendations", lines=RECOMMENDATIONS)

    return ReportContent(
        title=REPORT_TITLE,
        subtitle=f"Generated for {data.location}",
        location=data.location,
        sections=(property_info, assessment, local_conditions, recommendations),
    )
