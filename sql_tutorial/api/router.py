from fastapi import APIRouter
from fastapi import Depends, HTTPException, Query
from typing import Annotated, Dict, Any, List
import json
import logging

import duckdb

from ..database.catalog import (
    InvalidIdentifierError, TableNotFoundError, describe_table, list_tables, resolve_table_name, row_count,
)
from ..database.session import DuckDBDep, get_workflow
from ..datasets import DATASETS
from ..lessons import LESSONS, SCATTER_X, SCATTER_Y, LIFE_EXPECTANCY_CEILING, get_lesson
from ..plotting import scatter_figure
from ..primer import sql_primer
from ..utils.services import query_timer, frame_to_records
from ..workflow import TutorialWorkflow
from .schemas.tutorial import (
    ChartData, ChartType, ColumnInfo, LessonResult, LessonSummary,
    LifeExpectancyStats, TableDescription,
)

router = APIRouter()
logger = logging.getLogger(__name__)

WorkflowDep = Annotated[TutorialWorkflow, Depends(get_workflow)]


def _summary(position: int, lesson) -> LessonSummary:
    return LessonSummary(position=position, slug=lesson.slug, title=lesson.title, sql=lesson.sql)


@router.get("/")
def root():
    return {"ok": True}


@router.get("/health")
async def health_check(con: DuckDBDep) -> Dict[str, Any]:
    try:
        con.execute("SELECT 1").fetchone()
        return {
            "status": "healthy",
            "engine": f"duckdb {duckdb.__version__}",
            "tables": list_tables(con),
        }
    except duckdb.Error as e:
        logger.error(f"Health check failed: {e}")
        return {"status": "unhealthy", "error": str(e)}


@router.get("/primer")
async def get_primer() -> Dict[str, str]:
    return {"format": "markdown", "content": sql_primer}


@router.get("/tables")
async def list_available_tables(con: DuckDBDep) -> Dict[str, Any]:
    """List the tutorial datasets and the tables currently loaded"""
    try:
        return {
            "status": "success",
            "loaded_tables": list_tables(con),
            "datasets": [
                {
                    "name": table["table_name"],
                    "description": table["table_description"],
                    "use_case": table["use_case"],
                    "key_column": table["key_column"],
                }
                for table in DATASETS["tables"]
            ],
        }
    except duckdb.Error as e:
        logger.error(f"List tables error: {str(e)}")
        raise HTTPException(status_code=500, detail=f"List tables error: {str(e)}")


@router.get("/tables/{table_name}")
async def get_table_description(con: DuckDBDep, table_name: str) -> TableDescription:
    """Column names and inferred types of a loaded table"""
    try:
        table_name = resolve_table_name(con, table_name)
        columns = describe_table(con, table_name)
        return TableDescription(
            table_name=table_name,
            columns=[ColumnInfo(name=name, type=type_) for name, type_ in columns],
            row_count=row_count(con, table_name),
        )
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except TableNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except duckdb.Error as e:
        logger.error(f"Describe table error: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Describe table error: {str(e)}")


@router.get("/lessons")
async def list_lessons() -> List[LessonSummary]:
    return [_summary(position, lesson) for position, lesson in enumerate(LESSONS, start=1)]


@router.get("/lessons/{slug}", response_model=LessonResult)
@query_timer
async def run_lesson(
    workflow: WorkflowDep,
    slug: str,
    limit: int = Query(100, ge=1, le=2000),
) -> Dict[str, Any]:
    """Run one lesson query and return its prose, SQL and result rows"""
    try:
        lesson = get_lesson(slug)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown lesson: {slug}")

    position = next(i for i, item in enumerate(LESSONS, start=1) if item.slug == slug)

    try:
        run = workflow.run_lesson(lesson)
    except duckdb.Error as e:
        logger.error(f"Lesson {slug} error: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Lesson {slug} error: {str(e)}")

    return {
        "lesson": _summary(position, lesson),
        "prose": lesson.prose,
        "columns": [str(column) for column in run.frame.columns],
        "data": frame_to_records(run.frame.head(limit)),
        "total_rows": len(run.frame),
        "truncated": len(run.frame) > limit,
    }


@router.get("/stats/life-expectancy")
async def get_life_expectancy_stats(
    workflow: WorkflowDep,
    exclude_outliers: bool = False,
) -> LifeExpectancyStats:
    """Count, minimum, maximum and average life expectancy"""
    try:
        stats = workflow.life_expectancy_stats(exclude_outliers=exclude_outliers)
        return LifeExpectancyStats(exclude_outliers=exclude_outliers, **stats)
    except duckdb.Error as e:
        logger.error(f"Life expectancy stats error: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Life expectancy stats error: {str(e)}")


@router.get("/charts/life-expectancy")
async def get_life_expectancy_chart(
    workflow: WorkflowDep,
    exclude_outliers: bool = False,
) -> ChartData:
    """Scatterplot of life expectancy against smoking prevalence"""
    try:
        frame = workflow.scatter_frame(exclude_outliers=exclude_outliers)
    except duckdb.Error as e:
        logger.error(f"Chart query error: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Chart query error: {str(e)}")

    title = "Life expectancy vs. smoking prevalence"
    if exclude_outliers:
        title += f" (life expectancy < {LIFE_EXPECTANCY_CEILING})"

    fig = scatter_figure(frame, x=SCATTER_X, y=SCATTER_Y, title=title, hover_name="country_name")

    return ChartData(
        chart_type=ChartType.scatter,
        title=title,
        data=frame_to_records(frame),
        figure=json.loads(fig.to_json()),
        options={"x": SCATTER_X, "y": SCATTER_Y},
        metadata={"exclude_outliers": exclude_outliers, "row_count": int(len(frame))},
    )
