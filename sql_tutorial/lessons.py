# lessons.py
from dataclasses import dataclass
from typing import Dict, List


LIFE_EXPECTANCY_CEILING = 100


@dataclass(frozen=True)
class Lesson:
    slug: str
    title: str
    prose: str
    sql: str


LESSONS: List[Lesson] = [
    Lesson(
        slug="show-tables",
        title="Which tables do we have?",
        prose=(
            "A database is a collection of named tables. Before writing any query it helps to "
            "know what is there. SHOW TABLES lists every table in the current session; we just "
            "created two of them from CSV files."
        ),
        sql="SHOW TABLES",
    ),
    Lesson(
        slug="describe-health",
        title="What does the health table look like?",
        prose=(
            "Every table has a fixed set of columns, each with a name and a type. DuckDB guessed "
            "the types while reading the CSV file. DESCRIBE shows what it decided."
        ),
        sql="DESCRIBE health",
    ),
    Lesson(
        slug="describe-locations",
        title="And the locations table?",
        prose=(
            "The locations table describes places. Note the key column: it holds the same codes "
            "as location_key in the health table, which is what will let us combine them later."
        ),
        sql="DESCRIBE locations",
    ),
    Lesson(
        slug="select-star",
        title="Looking at some rows",
        prose=(
            "SELECT reads rows from a table. The star means 'all columns'. Tables can be large, "
            "so LIMIT asks for only the first few rows."
        ),
        sql="SELECT * FROM health LIMIT 10",
    ),
    Lesson(
        slug="select-columns",
        title="Choosing columns",
        prose=(
            "Instead of every column you can name the ones you care about, in the order you want "
            "them back."
        ),
        sql="SELECT location_key, life_expectancy, smoking_prevalence FROM health LIMIT 10",
    ),
    Lesson(
        slug="where",
        title="Filtering rows with WHERE",
        prose=(
            "WHERE keeps only the rows for which a condition is true. Here we look for places "
            "where people are expected to live longer than 80 years."
        ),
        sql=(
            "SELECT location_key, life_expectancy\n"
            "FROM health\n"
            "WHERE life_expectancy > 80\n"
            "LIMIT 10"
        ),
    ),
    Lesson(
        slug="order-by",
        title="Sorting with ORDER BY",
        prose=(
            "Rows in a table have no particular order. ORDER BY sorts the result, ASC for "
            "smallest first and DESC for largest first. Combined with LIMIT it answers "
            "'top 10' questions."
        ),
        sql=(
            "SELECT location_key, smoking_prevalence\n"
            "FROM health\n"
            "WHERE smoking_prevalence IS NOT NULL\n"
            "ORDER BY smoking_prevalence DESC\n"
            "LIMIT 10"
        ),
    ),
    Lesson(
        slug="count",
        title="Counting rows",
        prose=(
            "Aggregate functions summarise many rows into one value. COUNT(*) counts the rows "
            "of the table."
        ),
        sql="SELECT COUNT(*) AS row_count FROM health",
    ),
    Lesson(
        slug="life-expectancy-summary",
        title="Minimum, maximum and average",
        prose=(
            "MIN, MAX and AVG work on a single column and ignore missing values. Look closely at "
            "the maximum life expectancy. Does it seem plausible?"
        ),
        sql=(
            "SELECT\n"
            "    MIN(life_expectancy) AS min_life_expectancy,\n"
            "    MAX(life_expectancy) AS max_life_expectancy,\n"
            "    AVG(life_expectancy) AS avg_life_expectancy\n"
            "FROM health"
        ),
    ),
    Lesson(
        slug="find-outlier",
        title="Finding the odd value",
        prose=(
            "Sorting in descending order puts the suspicious value at the top, together with the "
            "location it belongs to. Why might it be there? We leave that question to you."
        ),
        sql=(
            "SELECT location_key, life_expectancy\n"
            "FROM health\n"
            "WHERE life_expectancy IS NOT NULL\n"
            "ORDER BY life_expectancy DESC\n"
            "LIMIT 5"
        ),
    ),
    Lesson(
        slug="life-expectancy-filtered",
        title="Leaving the outlier out",
        prose=(
            "Nobody lives to be several hundred years old, so we can simply exclude values of "
            f"{LIFE_EXPECTANCY_CEILING} or more with WHERE and compute the summary again."
        ),
        sql=(
            "SELECT\n"
            "    COUNT(life_expectancy) AS row_count,\n"
            "    MIN(life_expectancy) AS min_life_expectancy,\n"
            "    MAX(life_expectancy) AS max_life_expectancy,\n"
            "    AVG(life_expectancy) AS avg_life_expectancy\n"
            "FROM health\n"
            f"WHERE life_expectancy < {LIFE_EXPECTANCY_CEILING}"
        ),
    ),
    Lesson(
        slug="join",
        title="Combining tables with JOIN",
        prose=(
            "Location codes are hard to read. A JOIN pairs every row of health with the rows of "
            "locations whose key is equal to its location_key. Rows without a partner on either "
            "side are left out."
        ),
        sql=(
            "SELECT locations.country_name, health.location_key, health.life_expectancy\n"
            "FROM health\n"
            "JOIN locations ON locations.key = health.location_key\n"
            "LIMIT 10"
        ),
    ),
    Lesson(
        slug="group-by",
        title="Grouping rows with GROUP BY",
        prose=(
            "GROUP BY splits the rows into groups that share a value and applies the aggregate to "
            "each group. Here: how many locations does each country have?"
        ),
        sql=(
            "SELECT country_name, COUNT(*) AS location_count\n"
            "FROM locations\n"
            "GROUP BY country_name\n"
            "ORDER BY location_count DESC\n"
            "LIMIT 10"
        ),
    ),
    Lesson(
        slug="join-group-by",
        title="Putting it together",
        prose=(
            "Joins, filters, grouping and ordering combine freely. This query averages life "
            "expectancy per country, ignoring the implausible values."
        ),
        sql=(
            "SELECT locations.country_name, AVG(health.life_expectancy) AS avg_life_expectancy\n"
            "FROM health\n"
            "JOIN locations ON locations.key = health.location_key\n"
            f"WHERE health.life_expectancy < {LIFE_EXPECTANCY_CEILING}\n"
            "GROUP BY locations.country_name\n"
            "ORDER BY avg_life_expectancy DESC\n"
            "LIMIT 10"
        ),
    ),
]

_LESSONS_BY_SLUG: Dict[str, Lesson] = {lesson.slug: lesson for lesson in LESSONS}


def get_lesson(slug: str) -> Lesson:
    return _LESSONS_BY_SLUG[slug]


# Plot queries
SCATTER_X = "smoking_prevalence"
SCATTER_Y = "life_expectancy"

SCATTER_QUERY = """
SELECT locations.country_name, health.location_key, health.smoking_prevalence, health.life_expectancy
FROM health
LEFT JOIN locations ON locations.key = health.location_key
WHERE health.smoking_prevalence IS NOT NULL AND health.life_expectancy IS NOT NULL
"""

SCATTER_QUERY_FILTERED = SCATTER_QUERY + f"AND health.life_expectancy < {LIFE_EXPECTANCY_CEILING}\n"


def life_expectancy_stats_query(exclude_outliers: bool) -> str:
    where_clause = f"WHERE life_expectancy < {LIFE_EXPECTANCY_CEILING}" if exclude_outliers else ""
    return f"""
    SELECT
        COUNT(life_expectancy) AS row_count,
        MIN(life_expectancy) AS min_life_expectancy,
        MAX(life_expectancy) AS max_life_expectancy,
        AVG(life_expectancy) AS avg_life_expectancy
    FROM health
    {where_clause}
    """
