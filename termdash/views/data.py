"""
Data browser view.

Shows a fixed in-memory sample table; rows are never loaded from anywhere
and cannot be edited.
"""

from collections import Counter
from dataclasses import dataclass

from rich.style import Style
from rich.text import Text

from .base import BaseView, ViewId


@dataclass(frozen=True)
class SampleRecord:
    id: str
    name: str
    status: str
    value: str


SAMPLE_RECORDS = (
    SampleRecord("001", "Project Alpha", "Active", "$1,234"),
    SampleRecord("002", "Project Beta", "Pending", "$5,678"),
    SampleRecord("003", "Project Gamma", "Completed", "$9,012"),
    SampleRecord("004", "Project Delta", "Active", "$3,456"),
    SampleRecord("005", "Project Epsilon", "Cancelled", "$0"),
)

# Palette colour per status; exact, case-sensitive match
STATUS_COLORS = {
    "Active": "success",
    "Completed": "success",
    "Pending": "warning",
    "Cancelled": "error",
}
DEFAULT_STATUS_COLOR = "success"

TABLE_RULE_WIDTH = 60


def _columns(id_: str, name: str) -> str:
    return f"{id_:<15} {name:<20} "


class DataView(BaseView):
    view_id = ViewId.DATA
    heading = "📁 Data Browser"

    def __init__(self, *args, records: tuple[SampleRecord, ...] = SAMPLE_RECORDS, **kwargs):
        super().__init__(*args, **kwargs)
        self.records = records

    def status_style(self, status: str) -> Style:
        """Text style for a status cell. Unknown statuses fall back to the success colour."""
        color_name = STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR)
        return self.palette.foreground(getattr(self.palette, color_name))

    def render(self) -> Text:
        text = self._begin()

        self._section(text, "Sample Data Table:")
        text.append("\n")

        header = f"{'ID':<15} {'Name':<20} {'Status':<10} {'Value':<8}"
        text.append_text(self.palette.button.apply(header))
        text.append("\n")
        text.append("─" * TABLE_RULE_WIDTH)
        text.append("\n")

        for record in self.records:
            text.append(_columns(record.id, record.name))
            text.append(f"{record.status:<10}", style=self.status_style(record.status))
            text.append(f" {record.value:<8}".rstrip())
            text.append("\n")
        text.append("\n")

        counts = Counter(record.status for record in self.records)
        self._section(text, "Data Summary:")
        text.append("• Total Records: ")
        text.append(str(len(self.records)), style=self.palette.foreground(self.palette.info))
        text.append("\n")
        for status, rule in (
            ("Active", self.palette.success_text),
            ("Pending", self.palette.warning_text),
            ("Completed", self.palette.success_text),
            ("Cancelled", self.palette.error_text),
        ):
            text.append(f"• {status}: ")
            text.append(str(counts[status]), style=rule.style)
            text.append("\n")

        return self._finish(text)

    def title(self) -> str:
        return "Data Browser"

    def description(self) -> str:
        return "Browse and manage data"
