import re
from typing import Optional

MONTHS = (
    r"Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?"
)

DATE_PATTERN = re.compile(rf"(?:{MONTHS})\s+\d{{1,2}},\s+\d{{4}}")
TIME_PATTERN = re.compile(r"[0-2][0-9]:[0-5][0-9] (?:AM|PM)")
COURT_PATTERN = re.compile(r"S34")
SEPARATOR = "-----"

# docket line number in front of the title, e.g. " 12   MOTION TO ..."
LINE_NUMBER_PATTERN = re.compile(r"(?:^|\s)[0-9]+\s+")
DIGITS_PATTERN = re.compile(r"[0-9]+")

PARTY_START_PATTERN = re.compile(r"\S\B.+ATTY")
PARTY_END_PATTERN = re.compile(r"\s+ATTY")
ATTORNEY_PATTERN = re.compile(r"ATTY:(.*)")
VERSUS_MARKER = "VS."


def _first(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    return match.group(0) if match else None


def match_date(text: str) -> Optional[str]:
    return _first(DATE_PATTERN, text)


def match_time(text: str) -> Optional[str]:
    return _first(TIME_PATTERN, text)


def match_court(text: str, pattern: re.Pattern = COURT_PATTERN) -> Optional[str]:
    return _first(pattern, text)


def is_separator(text: str) -> bool:
    return SEPARATOR in text


def is_versus(text: str) -> bool:
    return VERSUS_MARKER in text


def match_digits(text: str) -> Optional[str]:
    return _first(DIGITS_PATTERN, text)
