import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .patterns import COURT_PATTERN, is_separator, match_court, match_date, match_time

logger = logging.getLogger(__name__)


@dataclass
class EntryGroup:
    fragments: List[str] = field(default_factory=list)
    date: Optional[str] = None
    time: Optional[str] = None
    court: Optional[str] = None


@dataclass
class PageState:
    """Carry-forward context for one page.

    ``date`` and ``court`` are page headers and only update until the first hearing time
    is seen; after that, dates quoted inside entries (prior orders etc.) are ignored.
    ``time`` changes per entry.
    """

    date: Optional[str] = None
    time: Optional[str] = None
    court: Optional[str] = None
    past_first_time: bool = False

    def observe(self, text: str, court_pattern: re.Pattern = COURT_PATTERN) -> None:
        if not self.past_first_time:
            self.date = match_date(text) or self.date
            self.court = match_court(text, court_pattern) or self.court

        hearing_time = match_time(text)
        if hearing_time:
            self.time = hearing_time
            self.past_first_time = True

    def close(self, group: EntryGroup) -> None:
        group.date = self.date
        group.time = self.time
        group.court = self.court


def segment_page(fragments: Sequence[str], court_pattern: re.Pattern = COURT_PATTERN) -> List[EntryGroup]:
    state = PageState()
    groups = [EntryGroup()]
    last_index = len(fragments) - 1

    for i, text in enumerate(fragments):
        state.observe(text, court_pattern)
        if not state.past_first_time:
            continue

        if is_separator(text):
            state.close(groups[-1])
            groups.append(EntryGroup())
        elif i == last_index:
            # last line is the "Page N of" footer
            state.close(groups[-1])
            break
        else:
            groups[-1].fragments.append(text)

    return groups


def segment_pages(pages: Iterable[Sequence[str]], court_pattern: re.Pattern = COURT_PATTERN) -> List[EntryGroup]:
    groups = []
    for page_num, fragments in enumerate(pages, start=1):
        page_groups = segment_page(fragments, court_pattern)
        logger.debug(f"Page {page_num}: {len(fragments)} fragments, {len(page_groups)} groups")
        groups.extend(page_groups)
    return groups
