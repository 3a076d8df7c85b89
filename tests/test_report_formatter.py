"""
Report Formatter Tests
======================
Layout of the execute log.
"""
import pytest

from triangle_tester.models import Strategy, TestCase

from .conftest import GENERATION_END, GENERATION_START


def render(formatter, cases, tester_name="Somchai", strategy=Strategy.BVA):
    return formatter.format(tester_name, strategy, cases, GENERATION_START, GENERATION_END)


class TestHeaderAndFooter:

    def test_full_layout(self, report_formatter):
        cases = [TestCase(id=1, width=5, height=1), TestCase(id=2, width=10, height=10)]
        text = render(report_formatter, cases)

        assert text.split("\n") == [
            "Tester Name : Somchai",
            "DateTime Generate : 19/10/2026 14:03:22",
            "Mode : Bva",
            "-" * 50,
            "Loop :",
            "ID" + " " * 5 + "W" + " " * 10 + "H" + " " * 10 + "Area" + " " * 11,
            "1" + " " * 6 + "5" + " " * 10 + "1" + " " * 10 + "2.50" + " " * 11,
            "2" + " " * 6 + "10" + " " * 9 + "10" + " " * 9 + "50.00" + " " * 10,
            "-" * 50,
            "DateTime finish : 14:03:23",
            "Total number of test case :> 2",
        ]

    def test_no_trailing_newline(self, report_formatter):
        text = render(report_formatter, [TestCase(id=1, width=1, height=1)])
        assert not text.endswith("\n")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_tester_name_is_unknown(self, report_formatter, name):
        text = render(report_formatter, [], tester_name=name)
        assert text.startswith("Tester Name : Unknown\n")

    @pytest.mark.parametrize("strategy, mode", [
        (Strategy.BVA, "Bva"),
        (Strategy.ROBUSTNESS, "Robustness"),
        (Strategy.WORST_CASE, "Worst case"),
        (Strategy.WORST_CASE_ROBUSTNESS, "Worst case Robustness"),
    ])
    def test_mode_line(self, report_formatter, strategy, mode):
        text = render(report_formatter, [], strategy=strategy)
        assert f"\nMode : {mode}\n" in text

    def test_empty_case_list(self, report_formatter):
        text = render(report_formatter, [])
        assert text.endswith("Total number of test case :> 0")


class TestAreaColumn:

    @pytest.mark.parametrize("width, height, area", [
        (5, 1, "2.50"),
        (2, 2, "2.00"),
        (0, 5, "0.00"),
        (-1, 5, "-2.50"),
        (0, -1, "0.00"),
        (11, 11, "60.50"),
    ])
    def test_area_has_two_decimals(self, report_formatter, width, height, area):
        text = render(report_formatter, [TestCase(id=1, width=width, height=height)])
        row = text.split("\n")[6]
        assert row.split()[3] == area


class TestBuild:

    def test_build_wraps_text_in_report(self, report_formatter):
        cases = [TestCase(id=1, width=5, height=5)]
        report = report_formatter.build("", Strategy.WORST_CASE, cases, GENERATION_START, GENERATION_END)

        assert report.text == render(report_formatter, cases, tester_name="", strategy=Strategy.WORST_CASE)
        assert report.total == 1
        assert report.generated_at == GENERATION_START
        assert report.finished_at == GENERATION_END
        assert report.strategy is Strategy.WORST_CASE

    def test_execute(self, report_formatter):
        result = report_formatter.execute({
            "tester_name": "QA",
            "strategy": "Robustness",
            "test_cases": [],
            "generation_start": GENERATION_START,
            "generation_end": GENERATION_END,
        })
        assert result["text"].startswith("Tester Name : QA\n")
