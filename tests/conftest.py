"""Shared test fixtures for bin-paradigm."""

from pathlib import Path

import pytest

from bin_paradigm import load_index_file

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_path():
    """Path to the sample BÍN extract."""
    return FIXTURES / "sample.csv"


@pytest.fixture(scope="session")
def index(sample_path):
    """Index loaded from the sample extract; shared, it is read-only."""
    return load_index_file(sample_path)


@pytest.fixture
def wordlist_path():
    return FIXTURES / "wordlist.tsv"


@pytest.fixture
def queries_path():
    return FIXTURES / "queries.yaml"
