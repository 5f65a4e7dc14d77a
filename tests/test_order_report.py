"""Tests for order report filtering, sorting and summaries"""

from datetime import date, datetime

from backoffice.services.order_report import (
    filter_orders,
    in_date_range,
    paginate,
    sort_orders,
    summarize_orders,
)


def make_order(id, created_at, status="ORDER_PLACED", total=1000, items=("Margherita Pizza",), **extra):
    order = {
        "id": id,
        "phone_number": "+15550000000",
        "status": status,
        "payment_status": "PENDING",
        "payment_method": "CASH",
        "delivery_method": "PICKUP",
        "total_amount_cents": total,
        "created_at": created_at,
        "order_items": [{"name": name, "quantity": 1} for name in items],
    }
    order.update(extra)
    return order


ORDERS = [
    make_order("a1", datetime(2024, 3, 1, 12, 0), total=2500),
    make_order("b2", datetime(2024, 3, 2, 9, 30), status="DELIVERED", total=1200, items=("Lemonade",)),
    make_order("c3", datetime(2024, 3, 3, 23, 59), status="OUT_FOR_DELIVERY", total=4000, payment_method=None),
    make_order("d4", datetime(2024, 3, 4, 0, 0), status="CANCELLED", total=800, phone_number="+15559990000"),
]


def test_date_range_is_inclusive():
    assert in_date_range(datetime(2024, 3, 3, 23, 59), date(2024, 3, 1), date(2024, 3, 3))
    assert in_date_range(datetime(2024, 3, 1, 0, 0), date(2024, 3, 1), None)
    assert not in_date_range(datetime(2024, 3, 4, 0, 0), None, date(2024, 3, 3))
    assert not in_date_range(None, date(2024, 3, 1), None)


def test_filter_by_date_range():
    result = filter_orders(ORDERS, start_date=date(2024, 3, 2), end_date=date(2024, 3, 3))

    assert [order["id"] for order in result] == ["b2", "c3"]


def test_search_matches_item_names_and_phone():
    assert [o["id"] for o in filter_orders(ORDERS, search="lemon")] == ["b2"]
    assert [o["id"] for o in filter_orders(ORDERS, search="999")] == ["d4"]


def test_column_filters():
    result = filter_orders(ORDERS, column_filters={"status": "deliver", "order_items": None})

    assert [order["id"] for order in result] == ["b2", "c3"]


def test_created_at_column_uses_day_month_year():
    result = filter_orders(ORDERS, column_filters={"created_at": "02/03/2024"})

    assert [order["id"] for order in result] == ["b2"]


def test_sort_descending_by_total():
    result = sort_orders(ORDERS, "total_amount_cents", descending=True)

    assert [order["id"] for order in result] == ["c3", "a1", "b2", "d4"]


def test_sort_puts_nulls_last():
    ascending = sort_orders(ORDERS, "payment_method", descending=False)
    descending = sort_orders(ORDERS, "payment_method", descending=True)

    assert ascending[-1]["id"] == "c3"
    assert descending[-1]["id"] == "c3"


def test_sort_strings_case_insensitive():
    orders = [make_order("x", None, status="b"), make_order("y", None, status="A")]

    assert [o["id"] for o in sort_orders(orders, "status", descending=False)] == ["y", "x"]


def test_paginate():
    page, total, total_pages = paginate(list(range(25)), page=3, page_size=10)

    assert page == [20, 21, 22, 23, 24]
    assert total == 25
    assert total_pages == 3


def test_paginate_past_end():
    page, total, total_pages = paginate([1, 2], page=5, page_size=10)

    assert page == []
    assert total == 2
    assert total_pages == 1


def test_summarize_orders():
    summary = summarize_orders(ORDERS, today=date(2024, 3, 3))

    assert summary["total_orders"] == 4
    assert summary["todays_orders"] == 2
    assert summary["total_revenue_cents"] == 8500
    assert summary["todays_revenue_cents"] == 4800
    assert summary["pending_orders"] == 1
    assert summary["out_for_delivery"] == 1
    assert summary["by_status"]["CANCELLED"] == 1
