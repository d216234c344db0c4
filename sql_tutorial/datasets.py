from typing import List, Tuple

from .config import TutorialSettings

DATASETS = {
    "tables": [
        {
            "table_name": "health",
            "source_setting": "HEALTH_CSV_URL",
            "key_column": "location_key",
            "table_description": (
                "One row per geographic location with health indicators from the COVID-19 Open Data "
                "project. Example columns: location_key, life_expectancy, smoking_prevalence, "
                "diabetes_prevalence, infant_mortality_rate, hospital_beds, physicians, health_expenditure."
            ),
            "use_case": (
                "Filtering, ordering and aggregating numeric indicators; spotting implausible values; "
                "plotting life expectancy against smoking prevalence."
            ),
        },
        {
            "table_name": "locations",
            "source_setting": "LOCATIONS_CSV_URL",
            "key_column": "key",
            "table_description": (
                "One row per geographic location with descriptive metadata. Example columns: key, "
                "country_code, country_name, subregion1_name, subregion2_name, aggregation_level."
            ),
            "use_case": (
                "Joining health indicators to country names; counting locations per country with GROUP BY."
            ),
        },
    ]
}


def dataset_sources(settings: TutorialSettings) -> List[Tuple[str, str]]:
    """Ordered (table_name, source) pairs for the configured datasets"""
    return [
        (table["table_name"], getattr(settings, table["source_setting"]))
        for table in DATASETS["tables"]
    ]


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))
