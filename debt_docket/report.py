import logging
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .config import DEFAULT_SETTINGS, Settings
from .extractor import Record

logger = logging.getLogger(__name__)

COLUMNS = [
    "Case Number",
    "Title",
    "Day",
    "Time",
    "First Party",
    "First Party Attorney",
    "Second Party",
    "Date Ran",
    "Court Number",
]
# Filled in by hand when the list is worked.
BLANK_COLUMNS = [
    "Address",
    "City",
    "State",
    "Zip",
    "Phone Number",
    "Randomize1",
    "Randomize2",
    "Attended Hearing",
]
MISSING = "None"


def short_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def short_time(value: datetime) -> str:
    return value.strftime("%I:%M %p").lstrip("0")


def passes_filters(record: Record, settings: Settings = DEFAULT_SETTINGS) -> bool:
    return (
        record.timestamp.weekday() == settings.hearing_weekday
        and record.timestamp.time() == settings.hearing_time
        and record.pro_se
        and record.court == settings.court
    )


def build_rows(
    records: Iterable[Record],
    run_date: Optional[date] = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> List[Dict[str, object]]:
    run_date = run_date or date.today()
    rows = []
    for record in records:
        if not passes_filters(record, settings):
            continue
        for name in record.party2:
            rows.append(
                {
                    "Case Number": record.case_number,
                    "Title": record.title,
                    "Day": short_date(record.timestamp.date()),
                    "Time": short_time(record.timestamp),
                    "First Party": record.party1,
                    "First Party Attorney": record.attorney1 or MISSING,
                    "Second Party": name,
                    "Date Ran": short_date(run_date),
                    "Court Number": record.court,
                }
            )
    return rows


def rows_to_frame(rows: List[Dict[str, object]]) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=COLUMNS)
    for column in BLANK_COLUMNS:
        df[column] = ""
    return df


def write_report(rows: List[Dict[str, object]], output_csv: Path) -> pd.DataFrame:
    df = rows_to_frame(rows)
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_csv, index=False)
    logger.info(f"Wrote {len(df)} rows to {output_csv}")
    return df
