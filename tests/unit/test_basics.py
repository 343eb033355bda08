import csv
from pathlib import Path

import pytest
from pydantic import ValidationError

from burnout_dashboard import config
from burnout_dashboard.domain.models import Ethnicity, PlotType
from burnout_dashboard.renderer import available_views
from scripts import generate_data

EXPECTED_PEOPLE_ROWS = 100
EXPECTED_CITY_ROWS = 5


def test_get_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for name in ("DASHBOARD_HOST", "DASHBOARD_PORT", "TABLE_PAGE_SIZE", "DATASET_SEED"):
        monkeypatch.delenv(name, raising=False)
    settings = config.get_settings()
    assert settings.host == "127.0.0.1"
    assert settings.port == 8050
    assert settings.table_page_size == 10
    assert settings.map_radius_scale == 1000.0
    assert settings.default_plot_type is PlotType.GENDER_SALARY
    assert settings.default_ethnicity is Ethnicity.ASIAN


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DASHBOARD_PORT", "9000")
    monkeypatch.setenv("DATASET_SEED", "7")
    monkeypatch.setenv("DEFAULT_PLOT_TYPE", "Cultural Influence")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config.get_settings()

    assert settings.port == 9000
    assert settings.dataset_seed == 7
    assert settings.default_plot_type is PlotType.CULTURAL_INFLUENCE
    assert settings.log_level == "DEBUG"


def test_settings_reject_unknown_default_plot_type():
    with pytest.raises(ValidationError):
        config.Settings(default_plot_type="Pie Chart")


def test_available_views_lists_every_plot_type_in_order():
    names = available_views()
    assert names == [p.value for p in PlotType]


def test_generate_data_writes_csv(tmp_path: Path):
    people_path, cities_path = generate_data.export_dataset(tmp_path / "out", seed=123)
    assert people_path.exists()
    assert cities_path.exists()

    with people_path.open("r", newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    # header + 100 rows
    assert len(rows) == EXPECTED_PEOPLE_ROWS + 1
    assert rows[0] == generate_data.PEOPLE_HEADER
    assert rows[1][0] == "Male"
    assert rows[-1][0] == "Female"

    with cities_path.open("r", newline="", encoding="utf-8") as f:
        city_rows = list(csv.reader(f))
    assert len(city_rows) == EXPECTED_CITY_ROWS + 1
    assert city_rows[0] == generate_data.CITIES_HEADER
