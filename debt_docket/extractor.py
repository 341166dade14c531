"""
Turn one debt-collection entry into a Record.

An entry reads, after empty layout lines are dropped:

    <line no>  <title>
    <case type> <case number>
    <plaintiff>   ATTY: <attorney>
    ... more plaintiffs / attorneys ...
    VS.
    <defendant>   ATTY: <attorney or blank>
    ... more defendants ...
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import List, Optional, Tuple

from .normalizer import clean_fragments
from .patterns import (
    ATTORNEY_PATTERN,
    LINE_NUMBER_PATTERN,
    PARTY_END_PATTERN,
    PARTY_START_PATTERN,
    is_versus,
    match_digits,
)
from .segmenter import EntryGroup

logger = logging.getLogger(__name__)

DATE_FORMATS = ["%b %d, %Y", "%B %d, %Y"]
TIME_FORMATS = ["%I:%M %p"]


class MalformedEntryError(ValueError):
    pass


@dataclass(frozen=True)
class Record:
    title: str
    case_number: int
    party1: str
    attorney1: Optional[str]
    party2: Tuple[str, ...]
    attorney2: Optional[str]
    timestamp: datetime
    court: Optional[str]

    @property
    def pro_se(self) -> bool:
        return self.attorney2 is None


def _strptime(value: Optional[str], formats: List[str], kind: str) -> datetime:
    if value is None:
        raise MalformedEntryError(f"Entry has no {kind}")
    value = " ".join(value.split())
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise MalformedEntryError(f"Unrecognized {kind}: {value!r}")


def parse_date(value: Optional[str]) -> date:
    return _strptime(value, DATE_FORMATS, "date").date()


def parse_time(value: Optional[str]) -> time:
    return _strptime(value, TIME_FORMATS, "time").time()


def combine_timestamp(date_text: Optional[str], time_text: Optional[str]) -> datetime:
    return datetime.combine(parse_date(date_text), parse_time(time_text))


def isolate_party_attorney(raw: str) -> Tuple[str, Optional[str]]:
    """Split ``"<party>   ATTY: <attorney>"`` into (party, attorney).

    The attorney is None when the label is blank, i.e. the party is pro se.
    """
    attorney = ATTORNEY_PATTERN.search(raw)
    if not attorney:
        raise MalformedEntryError(f"No ATTY label in {raw!r}")

    # one-letter names ("J B") defeat the start pattern; fall back to the line start
    start = PARTY_START_PATTERN.search(raw)
    end = PARTY_END_PATTERN.search(raw)
    party = raw[start.start() if start else 0 : end.start() if end else 0].strip()
    attorney_name = attorney.group(1).strip()
    return party, attorney_name or None


def extract_title(line: str) -> str:
    match = LINE_NUMBER_PATTERN.search(line)
    if match:
        return line[match.end() :].strip()
    return line.strip()


def extract_case_number(line: str) -> int:
    digits = match_digits(line)
    if digits is None:
        raise MalformedEntryError(f"No case number in {line!r}")
    return int(digits)


def find_second_party(fragments: List[str], start: int = 3) -> int:
    for i in range(start, len(fragments)):
        if is_versus(fragments[i]):
            if i + 1 >= len(fragments):
                break
            return i + 1
    raise MalformedEntryError(f"No party after VS. in entry {fragments[0]!r}")


def extract_record(group: EntryGroup) -> Record:
    timestamp = combine_timestamp(group.date, group.time)

    fragments = clean_fragments(group.fragments)
    if len(fragments) < 3:
        raise MalformedEntryError(f"Entry too short ({len(fragments)} lines): {fragments!r}")

    title = extract_title(fragments[0])
    case_number = extract_case_number(fragments[1])
    party1, attorney1 = isolate_party_attorney(fragments[2])

    index = find_second_party(fragments)
    party2_first, attorney2 = isolate_party_attorney(fragments[index])

    # names are only kept for pro se defendants
    party2: Tuple[str, ...] = ()
    if attorney2 is None:
        party2 = (party2_first,) + tuple(s.strip() for s in fragments[index + 1 :])

    record = Record(
        title=title,
        case_number=case_number,
        party1=party1,
        attorney1=attorney1,
        party2=party2,
        attorney2=attorney2,
        timestamp=timestamp,
        court=group.court,
    )
    logger.debug(f"Case {case_number}: {title} ({len(party2)} pro se parties)")
    return record
