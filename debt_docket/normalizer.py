from typing import Iterable, List

MIN_FRAGMENT_LEN = 2


def clean_fragments(fragments: Iterable[str]) -> List[str]:
    # Layout whitespace comes through as one-character fragments; commas would split CSV cells.
    return [f.replace(",", "|") for f in fragments if len(f) >= MIN_FRAGMENT_LEN]
