"""Command line interface for rainwater harvesting assessments.

Usage:
    rainwise assess --location "Mumbai, Maharashtra" --roof-area 150 \\
        --dwellers 4 --open-space 50 --building-type residential
    rainwise assess ... --pdf report.pdf
    rainwise assess ... --save-pdf
    rainwise batch properties.csv results.csv
    rainwise locations
"""

import json
import logging
from datetime import date
from pathlib import Path

import pandas as pd
import pydantic
import typer
from pydantic.alias_generators import to_camel

from rainwise.common.log_utils import configure_logging
from rainwise.config import DEFAULT_REPORT_CONFIG, LoggingConfig
from rainwise.estimator import calculate_rainwater_potential
from rainwise.lookups import aquifer_depth_for, known_locations, rainfall_for
from rainwise.models.domain import AssessmentInput, AssessmentResult
from rainwise.models.form import AssessmentForm
from rainwise.reports import (
    CSVResultWriter,
    PDFReportRenderer,
    PlainTextReportRenderer,
    ReportGenerationError,
    build_report_content,
    report_filename,
    write_report,
)
from rainwise.validation import AssessmentFormValidator

logger = logging.getLogger(__name__)

app = typer.Typer(help="Estimate rooftop rainwater harvesting potential")

REQUIRED_BATCH_COLUMNS = AssessmentFormValidator().required_fields()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for every command."""
    config = LoggingConfig()
    if verbose:
        config = config.model_copy(update={"level": "DEBUG"})
    configure_logging(config)


@app.command()
def assess(
    location: str = typer.Option(..., "--location", "-l", help="City, district, state"),
    roof_area: float = typer.Option(
        ..., "--roof-area", "-r", help="Roof area in square metres"
    ),
    building_type: str = typer.Option(
        ...,
        "--building-type",
        "-b",
        help="residential, apartment, commercial, institutional or industrial",
    ),
    dwellers: int = typer.Option(1, "--dwellers", "-d", help="Number of occupants"),
    open_space: float = typer.Option(
        0.0, "--open-space", "-o", help="Available open space in square metres"
    ),
    water_usage: float = typer.Option(
        150.0, "--water-usage", "-w", help="Water usage in litres per person per day"
    ),
    notes: str = typer.Option("", "--notes", help="Additional notes"),
    pdf: Path | None = typer.Option(
        None, "--pdf", help="Write the PDF report to this path (a directory uses the default name)"
    ),
    save_pdf: bool = typer.Option(
        False,
        "--save-pdf",
        help="Write the PDF report under REPORT_OUTPUT_DIR with the default name",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of the text report"),
):
    """Assess a single property and print the report."""
    form = AssessmentForm(
        location=location,
        roof_area=roof_area,
        dwellers=dwellers,
        open_space=open_space,
        building_type=building_type,
        water_usage=water_usage,
        notes=notes,
    )

    errors = AssessmentFormValidator().validate(form)
    if errors:
        for error in errors:
            typer.echo(str(error), err=True)
        raise typer.Exit(1)

    data = form.to_input()
    result = calculate_rainwater_potential(data)
    content = build_report_content(data, result)

    if as_json:
        payload = {
            "input": data.model_dump(by_alias=True, mode="json"),
            "result": result.model_dump(by_alias=True, mode="json"),
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        typer.echo(PlainTextReportRenderer().render_text(content))

    if pdf is not None or save_pdf:
        today = date.today()
        if pdf is None:
            output_path = DEFAULT_REPORT_CONFIG.output_dir / report_filename(data.location, today)
        elif pdf.is_dir():
            output_path = pdf / report_filename(data.location, today)
        else:
            output_path = pdf
        try:
            write_report(
                PDFReportRenderer(DEFAULT_REPORT_CONFIG, generated_on=today), content, output_path
            )
        except ReportGenerationError as e:
            logger.error(f"Could not write PDF report: {e}")
            raise typer.Exit(1)
        typer.echo(f"PDF report written to {output_path}", err=True)


def load_forms(input_csv: Path) -> list[tuple[int, AssessmentForm | None]]:
    """Read assessment forms from a CSV file.

    Column names may be snake_case (roof_area) or camelCase (roofArea). Empty
    cells take the form defaults. Rows that cannot be parsed are returned as
    None so callers can report them by row number.

    Args:
        input_csv: Path to the CSV file

    Returns:
        List of (row number, form or None) in file order

    Raises:
        ValueError: If required columns are missing
    """
    df = pd.read_csv(input_csv, dtype=str, keep_default_na=False)

    field_names = list(AssessmentForm.model_fields)
    renames = {to_camel(name): name for name in field_names if to_camel(name) != name}
    df = df.rename(columns=renames)

    missing = [column for column in REQUIRED_BATCH_COLUMNS if column not in df.columns]
    if missing:
        msg = f"Input CSV is missing required columns: {', '.join(missing)}"
        raise ValueError(msg)

    forms = []
    for row_number, row in enumerate(df.to_dict(orient="records"), start=1):
        values = {k: v for k, v in row.items() if k in field_names and v != ""}
        try:
            forms.append((row_number, AssessmentForm(**values)))
        except pydantic.ValidationError as e:
            logger.warning(f"Row {row_number}: could not parse values: {e.error_count()} errors")
            forms.append((row_number, None))
    return forms


@app.command()
def batch(
    input_csv: Path = typer.Argument(..., help="CSV file with one property per row", exists=True),
    output_csv: Path = typer.Argument(..., help="Where to write the results CSV"),
):
    """Assess every property in a CSV file and write the results to CSV."""
    try:
        forms = load_forms(input_csv)
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    validator = AssessmentFormValidator()
    rows: list[tuple[AssessmentInput, AssessmentResult]] = []
    for row_number, form in forms:
        if form is None:
            continue
        errors = validator.validate(form)
        if errors:
            logger.warning(f"Row {row_number}: skipped ({'; '.join(str(e) for e in errors)})")
            continue
        data = form.to_input()
        rows.append((data, calculate_rainwater_potential(data)))

    if not rows:
        logger.error(f"No valid rows in {input_csv}")
        raise typer.Exit(1)

    CSVResultWriter().write(rows, output_csv)
    logger.info(f"Assessed {len(rows)} of {len(forms)} rows, results written to {output_csv}")
    typer.echo(f"{len(rows)} assessments written to {output_csv}")


@app.command()
def locations():
    """List known locations with their rainfall and aquifer depth."""
    for location in known_locations():
        typer.echo(
            f"{location:<15} rainfall {rainfall_for(location):>5} mm  "
            f"aquifer {aquifer_depth_for(location):>3} m"
        )


if __name__ == "__main__":
    app()
