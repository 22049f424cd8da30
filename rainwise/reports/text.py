"""Plain text report renderer."""

from rainwise.models.domain import ReportContent


class PlainTextReportRenderer:
    """Renders report content as UTF-8 text for terminals and logs."""

    media_type = "text/plain"

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def render(self, content: ReportContent) -> bytes:
        return self.render_text(content).encode("utf-8")

    def render_text(self, content: ReportContent) -> str:
        """Render report content as a string."""
        lines = [content.title, content.subtitle, ""]
        for title, section_lines in content.as_pairs():
            lines.append(title)
            lines.append("-" * len(title))
            lines.extend(f"{self.indent}{line}" for line in section_lines)
            lines.append("")
        return "\n".join(lines)
