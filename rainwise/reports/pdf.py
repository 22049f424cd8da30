"""PDF report renderer.

Lays out report content on an A4 page with a branded header band and footer
using fpdf2. Without a configured TrueType font the PDF core font is used,
which only covers Latin-1, so the few symbols outside it are transliterated.
"""

import logging
from datetime import date

from fpdf import FPDF, XPos, YPos

from rainwise.config import ReportConfig
from rainwise.models.domain import ReportContent
from rainwise.reports.base import ReportGenerationError

logger = logging.getLogger(__name__)

_PRIMARY_BLUE = (59, 130, 246)
_LIGHT_BLUE = (240, 249, 255)
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_GREY = (100, 100, 100)

_MARGIN_MM = 20
_HEADER_HEIGHT_MM = 40
_LINE_HEIGHT_MM = 6

_CORE_FONT = "helvetica"
_CUSTOM_FONT = "ReportFont"

_LATIN1_SUBSTITUTES = {
    "₹": "Rs. ",
    "×": "x",
    "•": "-",
    "²": "2",
    "–": "-",
    "—": "-",
}


def to_latin1(text: str) -> str:
    """Transliterate text for the Latin-1 PDF core fonts."""
    for symbol, replacement in _LATIN1_SUBSTITUTES.items():
        text = text.replace(symbol, replacement)
    return text.encode("latin-1", errors="replace").decode("latin-1")


class _AssessmentPDF(FPDF):
    """FPDF document with the report header band and footer on every page."""

    def __init__(self, brand_name: str, location: str, generated_on: date, report_font: str):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.brand_name = brand_name
        self.location = location
        self.generated_on = generated_on
        self.report_font = report_font
        self.transliterate = report_font == _CORE_FONT

    def text_for(self, text: str) -> str:
        return to_latin1(text) if self.transliterate else text

    def header(self) -> None:
        self.set_fill_color(*_PRIMARY_BLUE)
        self.rect(0, 0, self.w, _HEADER_HEIGHT_MM, style="F")

        self.set_text_color(*_WHITE)
        self.set_xy(_MARGIN_MM, 12)
        self.set_font(self.report_font, "B", 24)
        self.cell(text=self.text_for(f"{self.brand_name} Assessment Report"))
        self.set_xy(_MARGIN_MM, 28)
        self.set_font(self.report_font, "", 12)
        self.cell(text=f"Generated on {self.generated_on.strftime('%d %B %Y')}")

        self.set_text_color(*_BLACK)
        self.set_y(_HEADER_HEIGHT_MM + 15)

    def footer(self) -> None:
        footer_y = self.h - 20
        self.set_fill_color(*_LIGHT_BLUE)
        self.rect(0, footer_y - 10, self.w, 30, style="F")

        self.set_text_color(*_GREY)
        self.set_font(self.report_font, "I", 8)
        self.set_xy(_MARGIN_MM, footer_y - 3)
        self.cell(
            text=self.text_for(
                f"Generated by {self.brand_name} - Smart Water Management Platform"
            ),
            new_x=XPos.LMARGIN,
            new_y=YPos.NEXT,
        )
        self.cell(
            text=self.text_for(
                f"Report Date: {self.generated_on.isoformat()} | Location: {self.location}"
            )
        )
        self.set_text_color(*_BLACK)


class PDFReportRenderer:
    """Renders report content as an A4 PDF document.

    Args:
        config: Report configuration (brand name, optional TrueType font)
        generated_on: Date printed on the report (defaults to today)
    """

    media_type = "application/pdf"

    def __init__(self, config: ReportConfig | None = None, generated_on: date | None = None):
        self.config = config or ReportConfig()
        self.generated_on = generated_on

    def render(self, content: ReportContent) -> bytes:
        """Render report content to PDF bytes.

        Raises:
            ReportGenerationError: If the document cannot be built
        """
        try:
            pdf = self._build(content)
            document = bytes(pdf.output())
        except Exception as e:
            logger.error(f"PDF generation failed for '{content.location}': {e}")
            msg = "Failed to generate PDF report"
            raise ReportGenerationError(msg) from e

        logger.info(f"Generated PDF report for '{content.location}' ({len(document)} bytes)")
        return document

    def _build(self, content: ReportContent) -> _AssessmentPDF:
        pdf = _AssessmentPDF(
            brand_name=self.config.brand_name,
            location=content.location,
            generated_on=self.generated_on or date.today(),
            report_font=_CORE_FONT if self.config.font_path is None else _CUSTOM_FONT,
        )
        if self.config.font_path is not None:
            for style in ("", "B", "I"):
                pdf.add_font(_CUSTOM_FONT, style=style, fname=str(self.config.font_path))

        pdf.set_margins(_MARGIN_MM, _HEADER_HEIGHT_MM + 15, _MARGIN_MM)
        pdf.set_auto_page_break(auto=True, margin=35)
        pdf.add_page()

        pdf.set_font(pdf.report_font, "B", 14)
        pdf.multi_cell(
            0, 8, pdf.text_for(content.subtitle), new_x=XPos.LMARGIN, new_y=YPos.NEXT
        )
        pdf.ln(4)

        for title, lines in content.as_pairs():
            pdf.set_font(pdf.report_font, "B", 16)
            pdf.cell(0, 10, pdf.text_for(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            pdf.set_font(pdf.report_font, "", 10)
            for line in lines:
                pdf.multi_cell(
                    0, _LINE_HEIGHT_MM, pdf.text_for(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT
                )
            pdf.ln(8)

        return pdf
