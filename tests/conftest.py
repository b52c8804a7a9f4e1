"""
Pytest fixtures for the wage report tests.

Worker frames are built from WorkerRecord objects so every test goes through
the same validation as real data. CSV fixtures are written to tmp_path.

Usage:
    pytest tests/              # runs all tests
    pytest tests/ -k features  # runs only feature tests
"""

from dataclasses import replace

import pytest

from cps_wages import WorkerRecord, frame_from_records

CSV_HEADER = "EDUCATION,SOUTH,SEX,EXPERIENCE,UNION,WAGE,AGE,RACE,OCCUPATION,SECTOR,MARR"

# A typical respondent; tests override only the fields they care about
BASE_WORKER = WorkerRecord(
    wage=9.0,
    occupation=3,
    education=12,
    experience=10,
    age=28,
    sex="male",
    marital_status="married",
    race="caucasian",
)


@pytest.fixture
def base_worker():
    return BASE_WORKER


@pytest.fixture
def make_workers():
    """Factory: one worker per dict of overrides on BASE_WORKER."""

    def _make(*overrides: dict):
        return frame_from_records(replace(BASE_WORKER, **fields) for fields in overrides)

    return _make


@pytest.fixture
def scenario_workers(make_workers):
    """Two men and two women at ages 20 and 40 with 12 or 16 years of education."""
    return make_workers(
        {"wage": 8.0, "sex": "male", "age": 20, "education": 12, "experience": 2},
        {"wage": 12.0, "sex": "male", "age": 40, "education": 16, "experience": 18},
        {"wage": 6.0, "sex": "female", "age": 20, "education": 12, "experience": 2},
        {"wage": 7.0, "sex": "female", "age": 40, "education": 16, "experience": 18},
    )


@pytest.fixture
def write_csv(tmp_path):
    """Factory: write CSV rows (header included) and return the file path."""

    def _write(*rows: str, header: str = CSV_HEADER):
        csv_path = tmp_path / "cps_85_wages.csv"
        csv_path.write_text("\n".join([header, *rows]) + "\n")
        return csv_path

    return _write


@pytest.fixture
def sample_csv(write_csv):
    """Six rows in the public file layout, the last one a wage outlier."""
    return write_csv(
        "8,0,1,21,0,5.1,35,2,6,1,1",
        "9,0,1,42,0,4.95,57,3,6,1,1",
        "12,0,0,1,0,6.67,19,3,6,1,0",
        "12,0,0,4,0,4,22,3,6,0,0",
        "16,1,1,10,1,22.2,32,3,5,0,1",
        "14,0,0,21,0,44.5,41,3,1,0,1",
    )
