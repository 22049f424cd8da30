"""Base report renderer interface and file helpers."""

import logging
import re
from datetime import date
from pathlib import Path
from typing import Protocol

from rainwise.config import DEFAULT_REPORT_CONFIG
from rainwise.models.domain import ReportContent

logger = logging.getLogger(__name__)


class ReportGenerationError(RuntimeError):
    """Raised when a report cannot be rendered. Safe to retry."""


class ReportRenderer(Protocol):
    """Protocol for renderers that lay out report content in some medium.

    Renderers receive finished ReportContent and never compute figures
    themselves, so every medium shows the same text.
    """

    media_type: str

    def render(self, content: ReportContent) -> bytes:
        """Render report content.

        Args:
            content: Report sections built by build_report_content()

        Returns:
            Encoded document bytes

        Raises:
            ReportGenerationError: If rendering fails
        """
        ...


def report_filename(location: str, on_date: date, brand_name: str | None = None) -> str:
    """Build the download filename for a PDF report.

    Non-alphanumeric characters in the location become underscores, e.g.
    "Mumbai, MH" on 2025-03-01 -> "RainWise_Assessment_Mumbai__MH_2025-03-01.pdf".
    """
    brand = brand_name or DEFAULT_REPORT_CONFIG.brand_name
    safe_location = re.sub(r"[^a-zA-Z0-9]", "_", location)
    return f"{brand}_Assessment_{safe_location}_{on_date.isoformat()}.pdf"


def write_report(renderer: ReportRenderer, content: ReportContent, output_path: Path) -> Path:
    """Render a report and write it to disk.

    Args:
        renderer: Renderer for the output medium
        content: Report content
        output_path: Destination file (parent directories are created)

    Returns:
        Path to the written file
    """
    document = renderer.render(content)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(document)
    logger.info(f"Wrote {len(document)} byte report to {output_path}")

    return output_path
