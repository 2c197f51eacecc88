"""PDF generation for calculation results.

This module creates a printable one-page summary showing:
- The release window, normal day and legal limits
- A timeline per scenario with regular work, release and next-day shift
- The labeled values for each scenario
"""

from io import BytesIO
from pathlib import Path
from typing import Union

from nightrelcalc.domain.clock import MINUTES_PER_DAY, format_clock
from nightrelcalc.domain.models import CalcResult, Scenario, TimeWindow

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    "work": (0.4, 0.7, 0.4),  # Green
    "release": (0.4, 0.4, 0.8),  # Blue
    "overtime": (0.9, 0.6, 0.2),  # Orange
    "next_day": (0.7, 0.4, 0.7),  # Purple
    "rest": (0.95, 0.95, 0.95),  # Light gray
}


class PDFGenerator:
    """Generates a printable PDF for a calculation result.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(result, "release.pdf")
    """

    def __init__(
        self,
        page_width: float = 792,  # Letter landscape width (11")
        page_height: float = 612,  # Letter landscape height (8.5")
        margin: float = 36,  # 0.5 inch margins
        version: str = "",
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin
        self.version = version

    def generate(self, result: CalcResult, output_path: Union[str, Path]) -> None:
        """Generate the PDF and save it to a file."""
        canvas = self._canvas_module()
        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))
        self._draw_page(c, result)
        c.save()

    def generate_to_buffer(self, result: CalcResult) -> BytesIO:
        """Generate the PDF and return it as a bytes buffer."""
        canvas = self._canvas_module()
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self._draw_page(c, result)
        c.save()
        buffer.seek(0)
        return buffer

    @staticmethod
    def _canvas_module():
        try:
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )
        return canvas

    def _draw_page(self, c, result: CalcResult) -> None:
        """Draw header, timelines and legend on a single page."""
        s = result.summary()

        c.setFont("Helvetica-Bold", 16)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 20,
            f"Night Release {s['release_start']} -> {s['release_end']} "
            f"(len {s['release_length']})",
        )

        c.setFont("Helvetica", 10)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 36,
            f"Normal day: {s['normal_start']} -> {s['normal_end']} "
            f"(len {s['normal_length']})   Full day used: {s['full_day']}   "
            f"Min rest: {s['min_rest']}   Max overtime (cap): {s['max_overtime']}",
        )

        axis_start, axis_end = self._axis_bounds(result)
        timeline_left = self.margin + 150  # Space for labels
        timeline_width = self.page_width - self.margin - 20 - timeline_left

        y = self.page_height - self.margin - 70
        self._draw_time_axis(c, axis_start, axis_end, timeline_left, y, timeline_width)

        row_height = (y - self.margin - 40) / max(len(result.scenarios), 1)
        for scenario in result.scenarios:
            y -= row_height
            self._draw_scenario_row(
                c,
                scenario,
                axis_start,
                axis_end,
                timeline_left,
                timeline_width,
                y,
                row_height,
            )

        self._draw_legend(c, self.margin, self.margin + 10)
        if self.version:
            c.setFont("Helvetica", 8)
            c.drawRightString(
                self.page_width - self.margin, self.margin - 10,
                f"nightrelcalc v{self.version}",
            )
        c.showPage()

    @staticmethod
    def _axis_bounds(result: CalcResult) -> tuple[int, int]:
        """Whole hours covering every window in every scenario."""
        starts = [s.work_hours.start for s in result.scenarios]
        ends = [s.next_day_hours.end for s in result.scenarios]
        start = min(starts) // 60 * 60
        end = -(-max(ends) // 60) * 60
        return start, max(end, start + 60)

    def _draw_time_axis(
        self,
        c,
        axis_start: int,
        axis_end: int,
        x: float,
        y: float,
        width: float,
    ) -> None:
        """Draw time axis with markers every few hours."""
        span = axis_end - axis_start
        step = 120 if span <= 2 * MINUTES_PER_DAY else 240

        c.setFont("Helvetica", 7)
        c.setStrokeColorRGB(0.7, 0.7, 0.7)
        for minute in range(axis_start, axis_end + 1, 60):
            if (minute - axis_start) % step:
                continue
            tick_x = x + (minute - axis_start) / span * width
            c.line(tick_x, y, tick_x, y - 5)
            c.drawCentredString(tick_x, y + 4, format_clock(minute)[:5])

    def _draw_scenario_row(
        self,
        c,
        scenario: Scenario,
        axis_start: int,
        axis_end: int,
        timeline_x: float,
        timeline_width: float,
        y: float,
        row_height: float,
    ) -> None:
        """Draw one scenario: title, bars and labeled values."""
        span = axis_end - axis_start
        bar_height = 14
        bar_y = y + row_height - bar_height - 22

        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 10)
        c.drawString(self.margin, y + row_height - 14, scenario.title)

        def bar(window: TimeWindow, color_key: str, offset: float = 0) -> None:
            bx = timeline_x + (window.start - axis_start) / span * timeline_width
            bw = window.duration_minutes / span * timeline_width
            c.setFillColorRGB(*COLORS[color_key])
            c.rect(bx, bar_y - offset, bw, bar_height, fill=1, stroke=0)

        c.setFillColorRGB(*COLORS["rest"])
        c.rect(timeline_x, bar_y, timeline_width, bar_height, fill=1, stroke=0)

        bar(scenario.work_hours, "work")
        overtime_start = scenario.release_window.end - scenario.overtime_minutes
        if scenario.overtime_minutes > 0:
            bar(TimeWindow(overtime_start, scenario.release_window.end), "overtime")
        bar(scenario.release_window, "release", offset=bar_height + 2)
        bar(scenario.next_day_hours, "next_day")

        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 8)
        rows = [
            f"Work Hours: {scenario.work_hours}",
            f"Total Work: {scenario.total_work}",
            f"Included: {scenario.included}   Overtime: {scenario.overtime}",
            f"Next Day Hours: {scenario.next_day_hours}",
        ]
        text_y = y + row_height - 28
        for row in rows:
            c.drawString(self.margin, text_y, row)
            text_y -= 11

    def _draw_legend(self, c, x: float, y: float) -> None:
        """Draw legend for colors."""
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 8)
        c.drawString(x, y, "Legend:")

        items = [
            ("work", "Regular work"),
            ("overtime", "Overtime"),
            ("release", "Release"),
            ("next_day", "Next day"),
        ]

        c.setFont("Helvetica", 7)
        current_x = x + 45
        for key, label in items:
            c.setFillColorRGB(*COLORS[key])
            c.rect(current_x, y - 2, 12, 10, fill=1, stroke=1)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(current_x + 15, y, label)
            current_x += 80
