import json
import time
from functools import wraps
from typing import Any, Dict, List

import pandas as pd


def query_timer(func):
    """Decorator to measure query execution time"""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = time.time()
        result = await func(*args, **kwargs)
        execution_time = time.time() - start_time

        # Add timing to response if it's a dict
        if isinstance(result, dict):
            result.setdefault("query_performance", {})["execution_time_ms"] = round(
                execution_time * 1000, 2
            )

        return result

    return wrapper


def frame_to_records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    """JSON-safe rows; NaN/NaT become None and numpy scalars become plain Python"""
    if frame.empty:
        return []
    return json.loads(frame.to_json(orient="records", date_format="iso"))


def format_frame(frame: pd.DataFrame, max_rows: int = 100) -> str:
    if frame.empty:
        return "Query executed successfully but returned no results."
    if len(frame) > max_rows:
        formatted = f"Query returned {len(frame)} rows. First {max_rows} rows:\n\n"
        formatted += frame.head(max_rows).to_string(index=False)
        formatted += f"\n\n... and {len(frame) - max_rows} more rows."
        return formatted
    return f"Query returned {len(frame)} rows:\n\n" + frame.to_string(index=False)
