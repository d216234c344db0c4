from typing import Optional, List, Dict, Any
from enum import Enum
from pydantic import BaseModel, Field


class ChartType(str, Enum):
    scatter = "scatter"


class ColumnInfo(BaseModel):
    name: str
    type: str


class TableDescription(BaseModel):
    table_name: str
    columns: List[ColumnInfo]
    row_count: int


class LessonSummary(BaseModel):
    position: int = Field(..., ge=1)
    slug: str
    title: str
    sql: str


class LessonResult(BaseModel):
    """One lesson together with the rows its query returned"""

    lesson: LessonSummary
    prose: str
    columns: List[str]
    data: List[Dict[str, Any]]
    total_rows: int
    truncated: bool
    query_performance: Dict[str, Any] = {}


class LifeExpectancyStats(BaseModel):
    exclude_outliers: bool
    row_count: int
    min_life_expectancy: Optional[float] = None
    max_life_expectancy: Optional[float] = None
    avg_life_expectancy: Optional[float] = None


class ChartData(BaseModel):
    chart_type: ChartType
    title: str
    data: List[Dict[str, Any]]
    figure: Dict[str, Any]
    options: Dict[str, Any] = {}
    metadata: Dict[str, Any] = {}
