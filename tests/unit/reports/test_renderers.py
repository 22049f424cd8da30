"""Unit tests for plain text and PDF report renderers."""

from datetime import date

import pytest

from rainwise.config import ReportConfig
from rainwise.reports import (
    PDFReportRenderer,
    PlainTextReportRenderer,
    ReportGenerationError,
    build_report_content,
    report_filename,
    write_report,
)
from rainwise.reports.pdf import _AssessmentPDF, to_latin1


@pytest.fixture
def content(mumbai_input, mumbai_result):
    return build_report_content(mumbai_input, mumbai_result)


class TestPlainTextReportRenderer:
    """Tests for PlainTextReportRenderer."""

    def test_layout(self, content):
        """Test title, underlined section headings and indented lines."""
        text = PlainTextReportRenderer().render_text(content)
        lines = text.splitlines()

        assert lines[0] == "Rainwater Harvesting Assessment Report"
        assert lines[1] == "Generated for Mumbai, Maharashtra"
        assert lines[3] == "Property Information"
        assert lines[4] == "-" * len("Property Information")
        assert lines[5] == "  Location: Mumbai, Maharashtra"
        assert "  Structure Dimensions: 14m × 14m × 2m" in lines

    def test_render_bytes_are_utf8(self, content):
        """Test render() encodes the text as UTF-8."""
        renderer = PlainTextReportRenderer(indent="    ")

        document = renderer.render(content)

        assert renderer.media_type == "text/plain"
        assert "    Monthly Bill Savings: ₹72,000" in document.decode("utf-8")


class TestPDFReportRenderer:
    """Tests for PDFReportRenderer."""

    def test_render_pdf(self, content):
        """Test a PDF document is produced with the core font."""
        renderer = PDFReportRenderer(ReportConfig(), generated_on=date(2025, 3, 1))

        document = renderer.render(content)

        assert renderer.media_type == "application/pdf"
        assert document.startswith(b"%PDF")
        assert len(document) > 1000

    def test_output_failure_raises_report_generation_error(self, content, mocker):
        """Test rendering failures are wrapped."""
        mocker.patch.object(_AssessmentPDF, "output", side_effect=RuntimeError("disk full"))

        with pytest.raises(ReportGenerationError, match="Failed to generate PDF report") as exc:
            PDFReportRenderer().render(content)

        assert isinstance(exc.value.__cause__, RuntimeError)

    def test_missing_font_file(self, content, tmp_path):
        """Test a configured font that does not exist fails cleanly."""
        config = ReportConfig(font_path=tmp_path / "missing.ttf")

        with pytest.raises(ReportGenerationError):
            PDFReportRenderer(config).render(content)

    def test_report_generation_error_is_runtime_error(self):
        """Test callers can catch rendering failures as RuntimeError."""
        assert issubclass(ReportGenerationError, RuntimeError)


class TestLatin1Transliteration:
    """Tests for to_latin1()."""

    def test_symbols(self):
        """Test symbols outside Latin-1 are replaced."""
        assert to_latin1("₹7,500") == "Rs. 7,500"
        assert to_latin1("14m × 14m × 2m") == "14m x 14m x 2m"
        assert to_latin1("• Monitor groundwater levels annually") == (
            "- Monitor groundwater levels annually"
        )

    def test_latin1_text_unchanged(self):
        """Test Latin-1 text passes through."""
        assert to_latin1("Café, São Paulo") == "Café, São Paulo"

    def test_other_characters_replaced(self):
        """Test characters with no substitute become question marks."""
        assert to_latin1("मुंबई") == "?????"


class TestReportFiles:
    """Tests for report file helpers."""

    def test_report_filename(self):
        """Test non-alphanumeric characters become underscores."""
        filename = report_filename("Mumbai, Maharashtra", date(2025, 3, 1))

        assert filename == "RainWise_Assessment_Mumbai__Maharashtra_2025-03-01.pdf"

    def test_report_filename_custom_brand(self):
        """Test brand name prefix."""
        assert report_filename("Pune", date(2025, 3, 1), brand_name="AquaCheck") == (
            "AquaCheck_Assessment_Pune_2025-03-01.pdf"
        )

    def test_write_report(self, content, tmp_path):
        """Test rendered bytes are written and parent directories created."""
        output_path = tmp_path / "reports" / "mumbai.txt"

        written = write_report(PlainTextReportRenderer(), content, output_path)

        assert written == output_path
        assert output_path.read_text(encoding="utf-8").startswith(
            "Rainwater Harvesting Assessment Report"
        )
