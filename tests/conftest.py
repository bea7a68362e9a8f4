# Shared fixtures for the overview chart tests.
# Matplotlib is forced onto the headless Agg backend before any test module
# imports the charting package.

import os
from datetime import date

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from domain.mapping import sample_to_record  # noqa: E402
from services.sample_data import demo_samples  # noqa: E402

TODAY = date(2026, 10, 19)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def samples(today):
    return demo_samples(today)


@pytest.fixture
def records(samples):
    return [sample_to_record(s) for s in samples]
