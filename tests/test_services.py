"""Tests for result formatting and timing helpers."""

import asyncio

import numpy as np
import pandas as pd

from sql_tutorial.utils.services import format_frame, frame_to_records, query_timer


def test_query_timer_annotates_dict() -> None:
    @query_timer
    async def handler(value):
        return {"value": value}

    result = asyncio.run(handler(3))
    assert result["value"] == 3
    assert "execution_time_ms" in result["query_performance"]


def test_query_timer_leaves_other_results_alone() -> None:
    @query_timer
    async def handler():
        return [1, 2]

    assert asyncio.run(handler()) == [1, 2]
    assert handler.__name__ == "handler"


def test_frame_to_records_is_json_safe() -> None:
    frame = pd.DataFrame(
        {"location_key": ["AR", "ZZ"], "smoking_prevalence": [21.8, np.nan], "n": np.array([1, 2], dtype="int64")}
    )
    records = frame_to_records(frame)
    assert records == [
        {"location_key": "AR", "smoking_prevalence": 21.8, "n": 1},
        {"location_key": "ZZ", "smoking_prevalence": None, "n": 2},
    ]
    assert type(records[0]["n"]) is int


def test_frame_to_records_empty() -> None:
    assert frame_to_records(pd.DataFrame({"a": []})) == []


def test_format_frame() -> None:
    frame = pd.DataFrame({"n": range(5)})
    assert format_frame(frame.head(0)) == "Query executed successfully but returned no results."
    assert format_frame(frame).startswith("Query returned 5 rows:")
    truncated = format_frame(frame, max_rows=2)
    assert truncated.startswith("Query returned 5 rows. First 2 rows:")
    assert truncated.endswith("... and 3 more rows.")
