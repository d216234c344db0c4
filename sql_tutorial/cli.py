import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import duckdb
import pandas as pd
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .config import get_settings
from .lessons import LESSONS, LIFE_EXPECTANCY_CEILING, SCATTER_X, SCATTER_Y, get_lesson
from .plotting import scatter_figure, write_figure
from .primer import sql_primer
from .utils.services import format_frame
from .workflow import LessonRun, TutorialWorkflow

logger = logging.getLogger(__name__)

PLOT_FILENAME = "life_expectancy_vs_smoking.html"
FILTERED_PLOT_FILENAME = "life_expectancy_vs_smoking_filtered.html"


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="health-sql-tutorial",
        description="Walk through SQL basics on a public health dataset with DuckDB.",
    )
    parser.add_argument("--list", action="store_true", help="list the lessons and exit")
    parser.add_argument(
        "--lesson",
        action="append",
        dest="lessons",
        metavar="SLUG",
        help="run only this lesson (repeatable)",
    )
    parser.add_argument("--max-rows", type=positive_int, help="rows shown per result table")
    parser.add_argument("--output-dir", help="where the scatterplots are written")
    parser.add_argument("--database", help="DuckDB database path (default: in-memory)")
    parser.add_argument("--no-plots", action="store_true", help="skip writing the scatterplots")
    parser.add_argument("--plain", action="store_true", help="print results as plain text instead of tables")
    return parser


def frame_table(frame: pd.DataFrame, max_rows: int) -> Table:
    table = Table(show_lines=False, header_style="bold cyan")
    for column in frame.columns:
        table.add_column(escape(str(column)))
    for row in frame.head(max_rows).itertuples(index=False):
        table.add_row(*("NULL" if pd.isna(value) else escape(str(value)) for value in row))
    if len(frame) > max_rows:
        table.caption = f"{max_rows} of {len(frame)} rows"
    else:
        table.caption = f"{len(frame)} rows"
    return table


def print_lesson(console: Console, position: int, run: LessonRun, max_rows: int, plain: bool = False) -> None:
    console.rule(f"[bold]{position}. {run.lesson.title}")
    console.print(run.lesson.prose)
    console.print(Syntax(run.lesson.sql, "sql", theme="ansi_dark", background_color="default"))
    if plain:
        console.print(format_frame(run.frame, max_rows), markup=False, highlight=False)
    else:
        console.print(frame_table(run.frame, max_rows))


def write_plots(workflow: TutorialWorkflow, output_dir: Path) -> List[Path]:
    title = "Life expectancy vs. smoking prevalence"
    paths = []
    for exclude_outliers, filename in ((False, PLOT_FILENAME), (True, FILTERED_PLOT_FILENAME)):
        frame = workflow.scatter_frame(exclude_outliers=exclude_outliers)
        plot_title = f"{title} (life expectancy < {LIFE_EXPECTANCY_CEILING})" if exclude_outliers else title
        fig = scatter_figure(frame, x=SCATTER_X, y=SCATTER_Y, title=plot_title, hover_name="country_name")
        paths.append(write_figure(fig, output_dir / filename))
    return paths


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    console = console or Console()

    overrides = {}
    if args.max_rows is not None:
        overrides["MAX_DISPLAY_ROWS"] = args.max_rows
    if args.output_dir:
        overrides["OUTPUT_DIR"] = args.output_dir
    if args.database:
        overrides["DUCKDB_DATABASE"] = args.database
    settings = get_settings(**overrides)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")

    if args.list:
        for position, lesson in enumerate(LESSONS, start=1):
            console.print(f"{position:>2}. [bold]{lesson.slug}[/bold]  {lesson.title}")
        return 0

    try:
        lessons = [get_lesson(slug) for slug in args.lessons] if args.lessons else LESSONS
    except KeyError as e:
        logger.error(f"Unknown lesson: {e.args[0]}")
        return 2

    positions = {lesson.slug: position for position, lesson in enumerate(LESSONS, start=1)}

    try:
        with TutorialWorkflow(settings) as workflow:
            console.print(Panel(Markdown(sql_primer), border_style="green"))
            for run in workflow.run_all(lessons):
                print_lesson(console, positions[run.lesson.slug], run, settings.MAX_DISPLAY_ROWS, plain=args.plain)

            if not args.no_plots:
                for path in write_plots(workflow, Path(settings.OUTPUT_DIR)):
                    console.print(f"Scatterplot written to [bold]{path}[/bold]")
    except duckdb.Error as e:
        logger.error(f"Tutorial aborted: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
