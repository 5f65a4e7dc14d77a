"""Order pricing and status transitions"""

from typing import Dict, Iterable, Optional

from backoffice.config import settings
from backoffice.errors import ValidationFailed
from backoffice.models.order import ORDER_TRANSITIONS, DeliveryMethod, OrderStatus


def compute_order_totals(
    items: Iterable[dict],
    delivery_method: Optional[str],
    vat_rate: Optional[float] = None,
    delivery_fee_cents: Optional[int] = None,
) -> Dict[str, int]:
    """Subtotal from line items, plus delivery fee and VAT on the subtotal"""
    vat_rate = settings.vat_rate if vat_rate is None else vat_rate
    delivery_fee_cents = settings.delivery_fee_cents if delivery_fee_cents is None else delivery_fee_cents

    subtotal = sum((item.get("price_cents") or 0) * item.get("quantity", 1) for item in items)
    delivery = delivery_fee_cents if delivery_method == DeliveryMethod.DELIVERY.value else 0
    vat = int(round(subtotal * vat_rate))

    return {
        "subtotal_cents": subtotal,
        "delivery_amount_cents": delivery,
        "vat_cents": vat,
        "total_amount_cents": subtotal + delivery + vat,
    }


def check_transition(current: Optional[str], target: str) -> None:
    """Raise ValidationFailed unless ``current -> target`` is an allowed move"""
    try:
        current_status = OrderStatus(current or OrderStatus.ORDER_PLACED.value)
        target_status = OrderStatus(target)
    except ValueError as exc:
        raise ValidationFailed(f"Unknown order status: {exc}") from exc

    if target_status not in ORDER_TRANSITIONS[current_status]:
        raise ValidationFailed(
            f"Cannot move order from {current_status.value} to {target_status.value}"
        )
