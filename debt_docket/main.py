import logging
import re
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from .classifier import is_debt_collection
from .config import DEFAULT_SETTINGS, Settings
from .extractor import MalformedEntryError, Record, extract_record
from .report import build_rows, write_report
from .segmenter import segment_pages
from .source import DocketUnavailableError, download_calendar, read_pages

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def extract_records(pages: Sequence[Sequence[str]], settings: Settings = DEFAULT_SETTINGS) -> List[Record]:
    groups = segment_pages(pages, re.compile(re.escape(settings.court)))
    entries = [g for g in groups if is_debt_collection(g)]
    logger.info(f"{len(entries)} debt collection entries out of {len(groups)} total")
    # a malformed entry raises and aborts the run
    return [extract_record(g) for g in entries]


def build_report(
    pdf_path: Path, settings: Settings = DEFAULT_SETTINGS, run_date: Optional[date] = None
) -> pd.DataFrame:
    pages = read_pages(pdf_path, settings.skip_cover_page)
    records = extract_records(pages, settings)
    rows = build_rows(records, run_date, settings)
    return write_report(rows, settings.output_csv)


def run(settings: Settings = DEFAULT_SETTINGS) -> None:
    download_calendar(settings.calendar_url, settings.pdf_path, settings.request_timeout)
    df = build_report(settings.pdf_path, settings)

    print(f"Calendar saved to {settings.pdf_path}")
    print(f"Report written to {settings.output_csv} ({len(df)} rows)")


def main() -> None:
    configure_logging()
    try:
        run()
    except (DocketUnavailableError, MalformedEntryError) as e:
        raise SystemExit(f"Report not written: {e}") from e


if __name__ == "__main__":
    main()
