"""Shared fixtures for the Triangle Test Generator tests."""
from datetime import datetime

import pytest

from triangle_tester.generators import CasePairer, PointGenerator, ReportFormatter, TestPlanner


GENERATION_START = datetime(2026, 10, 19, 14, 3, 22)
GENERATION_END = datetime(2026, 10, 19, 14, 3, 23)


@pytest.fixture
def point_generator():
    return PointGenerator()


@pytest.fixture
def case_pairer():
    return CasePairer()


@pytest.fixture
def report_formatter():
    return ReportFormatter()


@pytest.fixture
def fixed_clock():
    """Clock returning the generation start, then the end time."""
    moments = iter([GENERATION_START, GENERATION_END])
    return lambda: next(moments)


@pytest.fixture
def planner(fixed_clock):
    return TestPlanner(clock=fixed_clock)
