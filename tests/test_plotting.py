"""Tests for the scatterplot helpers."""

from pathlib import Path

import pandas as pd

from sql_tutorial.plotting import scatter_figure, write_figure


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "country_name": ["Argentina", "Japan"],
            "smoking_prevalence": [21.8, 22.1],
            "life_expectancy": [76.5, 84.2],
        }
    )


def test_scatter_figure_plots_two_columns() -> None:
    fig = scatter_figure(_frame(), x="smoking_prevalence", y="life_expectancy", title="t", hover_name="country_name")
    trace = fig.data[0]
    assert trace.type == "scatter"
    assert trace.mode == "markers"
    assert list(trace.x) == [21.8, 22.1]
    assert list(trace.y) == [76.5, 84.2]
    assert list(trace.hovertext) == ["Argentina", "Japan"]
    assert fig.layout.title.text == "t"


def test_scatter_figure_ignores_missing_hover_column() -> None:
    fig = scatter_figure(_frame(), x="smoking_prevalence", y="life_expectancy", hover_name="nope")
    assert fig.data[0].hovertext is None


def test_write_figure_creates_html(tmp_path: Path) -> None:
    fig = scatter_figure(_frame(), x="smoking_prevalence", y="life_expectancy")
    path = write_figure(fig, tmp_path / "nested" / "plot.html")
    assert path.exists()
    assert "plotly" in path.read_text().lower()
