"""Tests for the FastAPI routes, served over the local fixture dataset."""

import pytest
from fastapi.testclient import TestClient

from sql_tutorial.lessons import LESSONS
from sql_tutorial.main import create_app


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def test_root(client: TestClient) -> None:
    assert client.get("/").json() == {"ok": True}


def test_health(client: TestClient) -> None:
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["tables"] == ["health", "locations"]


def test_primer(client: TestClient) -> None:
    body = client.get("/primer").json()
    assert body["format"] == "markdown"
    assert "Tuple" in body["content"]


def test_tables(client: TestClient) -> None:
    body = client.get("/tables").json()
    assert body["loaded_tables"] == ["health", "locations"]
    assert [dataset["name"] for dataset in body["datasets"]] == ["health", "locations"]


def test_describe_table(client: TestClient) -> None:
    response = client.get("/tables/health")
    assert response.status_code == 200
    body = response.json()
    assert [column["name"] for column in body["columns"]] == ["location_key", "life_expectancy", "smoking_prevalence"]
    assert body["row_count"] == 10


def test_describe_table_ignores_case(client: TestClient) -> None:
    response = client.get("/tables/HEALTH")
    assert response.status_code == 200
    assert response.json()["table_name"] == "health"


def test_describe_missing_table(client: TestClient) -> None:
    assert client.get("/tables/vaccinations").status_code == 404


def test_describe_invalid_name(client: TestClient) -> None:
    assert client.get("/tables/bad-name").status_code == 422


def test_list_lessons(client: TestClient) -> None:
    body = client.get("/lessons").json()
    assert [item["slug"] for item in body] == [lesson.slug for lesson in LESSONS]
    assert body[0]["position"] == 1


def test_run_lesson(client: TestClient) -> None:
    response = client.get("/lessons/select-star", params={"limit": 3})
    assert response.status_code == 200
    body = response.json()
    assert body["lesson"]["slug"] == "select-star"
    assert body["columns"] == ["location_key", "life_expectancy", "smoking_prevalence"]
    assert len(body["data"]) == 3
    assert body["total_rows"] == 10
    assert body["truncated"] is True
    assert "execution_time_ms" in body["query_performance"]


def test_run_lesson_returns_outlier_first(client: TestClient) -> None:
    body = client.get("/lessons/find-outlier").json()
    assert body["data"][0] == {"location_key": "GB", "life_expectancy": 900.0}


def test_unknown_lesson(client: TestClient) -> None:
    assert client.get("/lessons/nope").status_code == 404


def test_life_expectancy_stats(client: TestClient) -> None:
    unfiltered = client.get("/stats/life-expectancy").json()
    filtered = client.get("/stats/life-expectancy", params={"exclude_outliers": True}).json()
    assert unfiltered["max_life_expectancy"] == 900.0
    assert filtered["max_life_expectancy"] == 84.2
    assert filtered["exclude_outliers"] is True
    assert filtered["row_count"] < unfiltered["row_count"]


def test_life_expectancy_chart(client: TestClient) -> None:
    body = client.get("/charts/life-expectancy", params={"exclude_outliers": True}).json()
    assert body["chart_type"] == "scatter"
    assert body["metadata"] == {"exclude_outliers": True, "row_count": 8}
    assert body["figure"]["data"][0]["type"] == "scatter"
    assert all(row["life_expectancy"] < 100 for row in body["data"])
