"""
Order report: filtering, sorting, pagination and headline numbers.

These run over rows already loaded from the store (ORM objects or dicts),
the same way the dashboard report table works on the fetched order list.
"""

import math
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from backoffice.models.order import OrderStatus

SORTABLE_FIELDS = {
    "created_at",
    "updated_at",
    "total_amount_cents",
    "status",
    "payment_status",
    "payment_method",
    "delivery_method",
    "phone_number",
}

PENDING_STATUSES = {
    OrderStatus.ORDER_PLACED.value,
    OrderStatus.PREPARING.value,
    OrderStatus.READY_FOR_DELIVERY.value,
}


def _get(order: Any, name: str) -> Any:
    if isinstance(order, Mapping):
        return order.get(name)
    return getattr(order, name, None)


def _item_names(order: Any) -> List[str]:
    return [str(item.get("name") or "") for item in (_get(order, "order_items") or [])]


def _contains(value: Any, needle: str) -> bool:
    return value is not None and needle in str(value).lower()


def in_date_range(created_at: Optional[datetime], start: Optional[date], end: Optional[date]) -> bool:
    """Both bounds are inclusive calendar days; a missing bound is open"""
    if created_at is None:
        return False
    day = created_at.date()
    if start and day < start:
        return False
    if end and day > end:
        return False
    return True


def matches_search(order: Any, search: str) -> bool:
    """Global search over id, phone, status, payment fields and item names"""
    needle = search.lower()
    fields = ("id", "phone_number", "status", "payment_method", "payment_status")
    if any(_contains(_get(order, name), needle) for name in fields):
        return True
    return any(needle in name.lower() for name in _item_names(order))


def matches_column(order: Any, column: str, value: str) -> bool:
    needle = value.lower()
    if column == "order_items":
        return any(needle in name.lower() for name in _item_names(order))
    if column == "created_at":
        created_at = _get(order, "created_at")
        return created_at is not None and needle in created_at.strftime("%d/%m/%Y")
    return _contains(_get(order, column), needle)


def filter_orders(
    orders: Sequence[Any],
    search: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    column_filters: Optional[Dict[str, str]] = None,
) -> List[Any]:
    result = list(orders)

    if start_date or end_date:
        result = [o for o in result if in_date_range(_get(o, "created_at"), start_date, end_date)]

    if search:
        result = [o for o in result if matches_search(o, search)]

    for column, value in (column_filters or {}).items():
        if value:
            result = [o for o in result if matches_column(o, column, value)]

    return result


def sort_orders(orders: Sequence[Any], field: str = "created_at", descending: bool = True) -> List[Any]:
    """Sort on one field; rows with a null value always go last"""
    present = [o for o in orders if _get(o, field) is not None]
    missing = [o for o in orders if _get(o, field) is None]

    def key(order):
        value = _get(order, field)
        return value.lower() if isinstance(value, str) else value

    present.sort(key=key, reverse=descending)
    return present + missing


def paginate(items: Sequence[Any], page: int, page_size: int) -> Tuple[List[Any], int, int]:
    """Return (page slice, total count, total pages)"""
    total = len(items)
    total_pages = math.ceil(total / page_size) if page_size else 0
    start = (page - 1) * page_size
    return list(items[start:start + page_size]), total, total_pages


def summarize_orders(orders: Sequence[Any], today: Optional[date] = None) -> Dict[str, Any]:
    """Headline numbers shown above the order table"""
    today = today or datetime.utcnow().date()

    todays = [o for o in orders if _get(o, "created_at") and _get(o, "created_at").date() >= today]
    by_status: Dict[str, int] = {}
    for order in orders:
        status = _get(order, "status") or "UNKNOWN"
        by_status[status] = by_status.get(status, 0) + 1

    return {
        "total_orders": len(orders),
        "todays_orders": len(todays),
        "total_revenue_cents": sum(_get(o, "total_amount_cents") or 0 for o in orders),
        "todays_revenue_cents": sum(_get(o, "total_amount_cents") or 0 for o in todays),
        "pending_orders": sum(1 for o in orders if _get(o, "status") in PENDING_STATUSES),
        "out_for_delivery": by_status.get(OrderStatus.OUT_FOR_DELIVERY.value, 0),
        "by_status": by_status,
    }
