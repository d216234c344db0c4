"""Shared fixtures: a small health/locations dataset written to local CSV files."""

from pathlib import Path

import pytest

from sql_tutorial.config import TutorialSettings, get_settings
from sql_tutorial.workflow import TutorialWorkflow

from fixture_data import HEALTH_CSV, LOCATIONS_CSV


@pytest.fixture
def health_csv(tmp_path: Path) -> Path:
    path = tmp_path / "health.csv"
    path.write_text(HEALTH_CSV)
    return path


@pytest.fixture
def locations_csv(tmp_path: Path) -> Path:
    path = tmp_path / "locations.csv"
    path.write_text(LOCATIONS_CSV)
    return path


@pytest.fixture
def settings(tmp_path: Path, health_csv: Path, locations_csv: Path) -> TutorialSettings:
    return get_settings(
        DUCKDB_DATABASE=":memory:",
        HEALTH_CSV_URL=str(health_csv),
        LOCATIONS_CSV_URL=str(locations_csv),
        OUTPUT_DIR=str(tmp_path / "output"),
    )


@pytest.fixture
def workflow(settings: TutorialSettings):
    with TutorialWorkflow(settings) as wf:
        yield wf
