"""
Report Formatter - Renders test cases into the downloadable execute log
"""
from datetime import datetime
from typing import Any, Dict, List, Sequence

from .base_generator import BaseGenerator
from ..config import settings
from ..models import Report, Strategy, TestCase
from ..utils.helpers import format_area, format_date_time, format_time

# Column widths for ID, W, H and Area
COLUMN_WIDTHS = (6, 10, 10, 15)


class ReportFormatter(BaseGenerator):
    """
    Formats the execute log:
    - Header with tester, generation time and mode
    - Fixed-width table of ID, W, H and Area
    - Footer with finish time and the total count
    """

    def __init__(self):
        super().__init__(
            name="ReportFormatter",
            description="Renders test cases as a text log"
        )

    def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """Format the context's test cases and return the log text."""
        text = self.format(
            context.get("tester_name", ""),
            Strategy(context.get("strategy", Strategy.BVA)),
            context.get("test_cases", []),
            context["generation_start"],
            context["generation_end"]
        )
        return {"text": text}

    def format(
        self,
        tester_name: str,
        strategy: Strategy,
        cases: Sequence[TestCase],
        generation_start: datetime,
        generation_end: datetime
    ) -> str:
        """
        Render the execute log.

        Args:
            tester_name: Name typed into the form; blank becomes "Unknown"
            strategy: Selected test strategy
            cases: Test cases in id order
            generation_start: When generation began
            generation_end: When generation finished

        Returns:
            The log text, without a trailing newline
        """
        separator = "-" * settings.SEPARATOR_WIDTH
        name = tester_name if tester_name and tester_name.strip() else settings.UNKNOWN_TESTER

        lines: List[str] = [
            f"Tester Name : {name}",
            f"DateTime Generate : {format_date_time(generation_start)}",
            f"Mode : {strategy.value}",
            separator,
            "Loop :",
            self._row("ID", "W", "H", "Area"),
        ]
        for case in cases:
            lines.append(self._row(
                str(case.id),
                str(case.width),
                str(case.height),
                format_area(case.area)
            ))
        lines.append(separator)
        lines.append(f"DateTime finish : {format_time(generation_end)}")
        lines.append(f"Total number of test case :> {len(cases)}")

        return "\n".join(lines)

    def build(
        self,
        tester_name: str,
        strategy: Strategy,
        cases: Sequence[TestCase],
        generation_start: datetime,
        generation_end: datetime
    ) -> Report:
        """Format the log and wrap it with its inputs in a Report."""
        text = self.format(tester_name, strategy, cases, generation_start, generation_end)
        self.log_info(f"Formatted report with {len(cases)} test cases")
        return Report(
            tester_name=tester_name,
            strategy=strategy,
            generated_at=generation_start,
            finished_at=generation_end,
            test_cases=list(cases),
            text=text
        )

    @staticmethod
    def _row(*cells: str) -> str:
        return " ".join(cell.ljust(width) for cell, width in zip(cells, COLUMN_WIDTHS))
