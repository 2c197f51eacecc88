"""Plain-text output for calculation results.

This module renders a CalcResult as labeled text (the command-line output)
and builds the one-line share description used for link previews.
"""

from pathlib import Path
from typing import Union

from nightrelcalc.domain.models import CalcResult, Scenario

LABEL_WIDTH = 30


class TextGenerator:
    """Generates labeled plain-text output for a calculation.

    Example:
        >>> generator = TextGenerator()
        >>> print(generator.generate_to_string(result))
    """

    def generate(self, result: CalcResult, output_path: Union[str, Path]) -> str:
        """Generate text output and save to file.

        Returns:
            The generated text content.
        """
        content = self.generate_to_string(result)
        Path(output_path).write_text(content)
        return content

    def generate_to_string(self, result: CalcResult) -> str:
        """Generate text output and return as string."""
        s = result.summary()
        lines = [
            f"Release Window: {s['release_start']} -> {s['release_end']} "
            f"(len {s['release_length']})",
            f"Normal day: {s['normal_start']} -> {s['normal_end']} "
            f"(len {s['normal_length']})",
            f"Full day used: {s['full_day']}, Min rest: {s['min_rest']}, "
            f"Max overtime (cap): {s['max_overtime']}",
            "",
        ]
        for scenario in result.scenarios:
            lines.extend(self._scenario_lines(scenario))
            lines.append("")
        return "\n".join(lines) + "\n"

    def _scenario_lines(self, scenario: Scenario) -> list[str]:
        rows = [
            ("Work Hours:", str(scenario.work_hours)),
            ("Release Window:", str(scenario.release_window)),
            ("Total Work:", str(scenario.total_work)),
            ("Release Hours Included in Full", scenario.included),
            ("Overtime:", scenario.overtime),
            ("Next Day Hours:", str(scenario.next_day_hours)),
        ]
        lines = [scenario.title]
        for label, value in rows:
            lines.append(f"  {label:<{LABEL_WIDTH}} {value}")
        return lines


def build_share_description(result: CalcResult) -> str:
    """One-line summary of the first scenario for link previews."""
    s = result.summary()
    first = result.scenarios[0]
    return (
        f"Release {s['release_start']}→{s['release_end']} ({s['release_length']}). "
        f"Work {first.work_hours}. Included {first.included}, "
        f"overtime {first.overtime}. Next day {first.next_day_hours}."
    )
