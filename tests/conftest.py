import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

import sample_data
from engine import AnalyticsEngine


@pytest.fixture
def engine():
    return AnalyticsEngine(sample_data.EMPLOYEES, sample_data.REVIEWS)
