"""Database models"""

from backoffice.models.menu import (
    Category,
    MenuItem,
    Addon,
    MenuItemAddon,
    OptionGroup,
    MenuOption,
    OptionGroupOption,
    MenuItemOptionGroup,
)
from backoffice.models.order import Order
from backoffice.models.delivery import Driver, Delivery
from backoffice.models.billing import Invoice, InvoiceItem, Payment
from backoffice.models.customer import OrderFeedback, Reward
from backoffice.models.user import User

__all__ = [
    "Category",
    "MenuItem",
    "Addon",
    "MenuItemAddon",
    "OptionGroup",
    "MenuOption",
    "OptionGroupOption",
    "MenuItemOptionGroup",
    "Order",
    "Driver",
    "Delivery",
    "Invoice",
    "InvoiceItem",
    "Payment",
    "OrderFeedback",
    "Reward",
    "User",
]
