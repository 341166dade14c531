from .segmenter import EntryGroup


def is_debt_collection(group: EntryGroup) -> bool:
    return any("Debt" in s and "Collection" in s for s in group.fragments)
