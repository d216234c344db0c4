import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import duckdb
import pandas as pd

from .config import TutorialSettings, settings as default_settings
from .database import catalog
from .database.session import enable_remote_fetch, open_connection
from .datasets import dataset_sources, is_remote
from .lessons import (
    LESSONS,
    SCATTER_QUERY,
    SCATTER_QUERY_FILTERED,
    Lesson,
    life_expectancy_stats_query,
)

logger = logging.getLogger(__name__)


@dataclass
class LessonRun:
    lesson: Lesson
    frame: pd.DataFrame
    elapsed_ms: float


class TutorialWorkflow:
    """Runs the tutorial steps in order over a single DuckDB session.

    Nothing is retried or cached: every call goes straight to the engine and
    engine errors (``duckdb.Error``) propagate to the caller.
    """

    def __init__(self, settings: Optional[TutorialSettings] = None):
        self.settings = settings or default_settings
        self.connection: Optional[duckdb.DuckDBPyConnection] = None

    def __enter__(self) -> "TutorialWorkflow":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def setup(self) -> "TutorialWorkflow":
        self.connect()
        if self.settings.ENABLE_REMOTE_FETCH and any(
            is_remote(source) for _, source in dataset_sources(self.settings)
        ):
            self.enable_remote_fetch()
        self.load_tables()
        return self

    def connect(self) -> duckdb.DuckDBPyConnection:
        if self.connection is None:
            self.connection = open_connection(self.settings)
        return self.connection

    def enable_remote_fetch(self) -> None:
        enable_remote_fetch(self._require_connection())

    def load_tables(self) -> List[str]:
        con = self._require_connection()
        loaded = []
        for table_name, source in dataset_sources(self.settings):
            catalog.load_csv_table(con, table_name, source)
            loaded.append(table_name)
        return loaded

    def list_tables(self) -> List[str]:
        return catalog.list_tables(self._require_connection())

    def describe(self, table_name: str) -> List[Tuple[str, str]]:
        return catalog.describe_table(self._require_connection(), table_name)

    def query(self, sql: str) -> pd.DataFrame:
        return self._require_connection().execute(sql.rstrip().rstrip(";")).df()

    def run_lesson(self, lesson: Lesson) -> LessonRun:
        start_time = time.time()
        frame = self.query(lesson.sql)
        elapsed_ms = round((time.time() - start_time) * 1000, 2)
        logger.debug(f"Lesson {lesson.slug} returned {len(frame)} rows in {elapsed_ms} ms")
        return LessonRun(lesson=lesson, frame=frame, elapsed_ms=elapsed_ms)

    def run_all(self, lessons: Iterable[Lesson] = LESSONS) -> Iterator[LessonRun]:
        for lesson in lessons:
            yield self.run_lesson(lesson)

    def scatter_frame(self, exclude_outliers: bool = False) -> pd.DataFrame:
        return self.query(SCATTER_QUERY_FILTERED if exclude_outliers else SCATTER_QUERY)

    def life_expectancy_stats(self, exclude_outliers: bool = False) -> Dict[str, Any]:
        frame = self.query(life_expectancy_stats_query(exclude_outliers))
        row = frame.iloc[0]
        return {
            "row_count": int(row["row_count"]),
            "min_life_expectancy": None if pd.isna(row["min_life_expectancy"]) else float(row["min_life_expectancy"]),
            "max_life_expectancy": None if pd.isna(row["max_life_expectancy"]) else float(row["max_life_expectancy"]),
            "avg_life_expectancy": None if pd.isna(row["avg_life_expectancy"]) else float(row["avg_life_expectancy"]),
        }

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()
            self.connection = None
            logger.info("DuckDB session closed")

    def _require_connection(self) -> duckdb.DuckDBPyConnection:
        if self.connection is None:
            raise RuntimeError("Workflow is not connected; call connect() or setup() first")
        return self.connection
