import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

logger = logging.getLogger(__name__)


def scatter_figure(
    frame: pd.DataFrame,
    x: str,
    y: str,
    title: Optional[str] = None,
    hover_name: Optional[str] = None,
) -> go.Figure:
    if hover_name is not None and hover_name not in frame.columns:
        hover_name = None
    return px.scatter(frame, x=x, y=y, hover_name=hover_name, title=title)


def write_figure(fig: go.Figure, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(path), include_plotlyjs="cdn")
    logger.info(f"Wrote figure to {path}")
    return path
