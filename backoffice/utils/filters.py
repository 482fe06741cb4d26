from typing import Iterable, List, Sequence


def matches_search(record, fields: Sequence[str], term: str) -> bool:
    """Case-insensitive substring match over the given attributes."""
    needle = term.strip().lower()
    if not needle:
        return True
    for field in fields:
        value = getattr(record, field, None)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_records(records: Iterable, fields: Sequence[str], term) -> List:
    if not term:
        return list(records)
    return [record for record in records if matches_search(record, fields, term)]
