# backoffice/utils/summaries.py

"""Derived statistics over fetched collections, as shown on the module screens."""

from collections import defaultdict
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Sequence, Tuple

from backoffice.models.enums import AccountType, MovementType
from backoffice.utils.dates import same_month, utcnow

CENTS = Decimal("0.01")


def to_decimal(value) -> Decimal:
    # Unparseable amounts count as zero
    if value is None:
        return Decimal(0)
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return Decimal(0)
    return number if number.is_finite() else Decimal(0)


def format_money(value: Decimal) -> str:
    return str(value.quantize(CENTS))


def movement_totals(movements: Sequence) -> Tuple[int, int]:
    """Total IN and OUT quantities."""
    total_in = sum(m.quantity for m in movements if m.transaction_type == MovementType.IN.value)
    total_out = sum(m.quantity for m in movements if m.transaction_type == MovementType.OUT.value)
    return total_in, total_out


def this_month_count(records: Sequence, attribute: str, now: Optional[datetime] = None) -> int:
    now = now or utcnow()
    return sum(1 for record in records if same_month(getattr(record, attribute, None), now))


def stock_levels(movements: Sequence) -> Dict[str, int]:
    """Current stock per item id: IN adds, OUT subtracts, anything else is ignored."""
    levels: Dict[str, int] = defaultdict(int)
    for movement in movements:
        if movement.transaction_type == MovementType.IN.value:
            levels[movement.item_id] += movement.quantity
        elif movement.transaction_type == MovementType.OUT.value:
            levels[movement.item_id] -= movement.quantity
    return levels


def low_stock_items(items: Sequence, movements: Sequence) -> List[Tuple[object, int]]:
    """
    Items whose current stock is at or below their reorder level. Items
    without a positive reorder level are never reported.
    """
    levels = stock_levels(movements)
    flagged = []
    for item in items:
        if item.reorder_level and item.reorder_level > 0:
            current = levels.get(item.id, 0)
            if current <= item.reorder_level:
                flagged.append((item, current))
    return flagged


def accounts_by_type(accounts: Sequence) -> List[Tuple[str, int]]:
    counts: Dict[str, int] = defaultdict(int)
    for account in accounts:
        counts[account.account_type] += 1

    known = [member.value for member in AccountType]
    result = [(type_, counts.get(type_, 0)) for type_ in known]
    # Types outside the chart of accounts follow, in order of appearance
    for type_ in counts:
        if type_ not in known:
            result.append((type_, counts[type_]))
    return result


def occupancy_rate(capacity: int, occupancy: int) -> float:
    if capacity <= 0:
        return 0.0
    return round(occupancy / capacity * 100, 1)


def active_cold_storage_entries(movements: Sequence) -> int:
    """IN movements that have not been checked out yet."""
    return sum(
        1 for m in movements
        if m.transaction_type == MovementType.IN.value and m.exit_date is None
    )
