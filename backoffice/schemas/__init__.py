"""Pydantic schemas for request/response validation"""

from backoffice.schemas.auth import (
    Token,
    TokenPayload,
    RefreshRequest,
    UserCreate,
    UserResponse,
)
from backoffice.schemas.menu import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryTreeNode,
    CatalogEdit,
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
    MenuSearchResult,
    AddonCreate,
    AddonUpdate,
    AddonResponse,
    AddonLinkCreate,
    AddonLinkUpdate,
    AddonLinkResponse,
    OptionGroupCreate,
    OptionGroupUpdate,
    OptionGroupResponse,
    MenuOptionCreate,
    MenuOptionUpdate,
    MenuOptionResponse,
)
from backoffice.schemas.order import (
    OrderItem,
    OrderCreate,
    OrderUpdate,
    OrderStatusUpdate,
    OrderResponse,
    OrderListResponse,
    OrderSummary,
)
from backoffice.schemas.delivery import (
    DriverCreate,
    DriverUpdate,
    DriverResponse,
    DeliveryCreate,
    DeliveryUpdate,
    DeliveryResponse,
    DeliveryStats,
)
from backoffice.schemas.billing import (
    InvoiceCreate,
    InvoiceUpdate,
    InvoiceResponse,
    PaymentCreate,
    PaymentUpdate,
    PaymentResponse,
    PaymentStats,
)
from backoffice.schemas.customer import (
    FeedbackCreate,
    FeedbackUpdate,
    FeedbackResponse,
    RewardCreate,
    RewardAdjust,
    RewardResponse,
)

__all__ = [
    "Token",
    "TokenPayload",
    "RefreshRequest",
    "UserCreate",
    "UserResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryTreeNode",
    "CatalogEdit",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemResponse",
    "MenuSearchResult",
    "AddonCreate",
    "AddonUpdate",
    "AddonResponse",
    "AddonLinkCreate",
    "AddonLinkUpdate",
    "AddonLinkResponse",
    "OptionGroupCreate",
    "OptionGroupUpdate",
    "OptionGroupResponse",
    "MenuOptionCreate",
    "MenuOptionUpdate",
    "MenuOptionResponse",
    "OrderItem",
    "OrderCreate",
    "OrderUpdate",
    "OrderStatusUpdate",
    "OrderResponse",
    "OrderListResponse",
    "OrderSummary",
    "DriverCreate",
    "DriverUpdate",
    "DriverResponse",
    "DeliveryCreate",
    "DeliveryUpdate",
    "DeliveryResponse",
    "DeliveryStats",
    "InvoiceCreate",
    "InvoiceUpdate",
    "InvoiceResponse",
    "PaymentCreate",
    "PaymentUpdate",
    "PaymentResponse",
    "PaymentStats",
    "FeedbackCreate",
    "FeedbackUpdate",
    "FeedbackResponse",
    "RewardCreate",
    "RewardAdjust",
    "RewardResponse",
]
