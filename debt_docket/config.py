from dataclasses import dataclass
from datetime import time
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    calendar_url: str
    pdf_path: Path
    output_csv: Path
    skip_cover_page: bool
    court: str
    hearing_weekday: int
    hearing_time: time
    request_timeout: int


DEFAULT_SETTINGS = Settings(
    calendar_url="http://www.utcourts.gov/cal/data/SLC_Calendar.pdf",
    pdf_path=Path("SLC_Calendar.pdf"),
    output_csv=Path("ProSeDebtCollection.csv"),
    skip_cover_page=True,
    court="S34",
    hearing_weekday=2,  # Monday == 0
    hearing_time=time(13, 0),
    request_timeout=30,
)
