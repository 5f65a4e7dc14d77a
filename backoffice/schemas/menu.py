"""Menu schemas"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


# Categories

class CategoryCreate(BaseModel):
    """Create category request"""
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    code: Optional[str] = None
    parent_id: Optional[int] = None
    view_order: int = 0


class CategoryUpdate(BaseModel):
    """Update category request"""
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    code: Optional[str] = None
    parent_id: Optional[int] = None
    view_order: Optional[int] = None


class CategoryResponse(BaseModel):
    """Category response"""
    id: int
    name: Optional[str]
    description: Optional[str]
    image_url: Optional[str]
    code: Optional[str]
    parent_id: Optional[int]
    view_order: Optional[int]
    created_at: datetime
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class CategoryTreeNode(CategoryResponse):
    """Category with its sub-categories, recursively"""
    children: List["CategoryTreeNode"] = []


CategoryTreeNode.model_rebuild()


# Menu items

class MenuItemCreate(BaseModel):
    """Create menu item request"""
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    price_cents: int = Field(0, ge=0)
    category_id: Optional[int] = None
    is_popular: Optional[int] = Field(None, ge=0, le=1)
    view_order: int = 0


class MenuItemUpdate(BaseModel):
    """Update menu item request"""
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price_cents: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None
    is_popular: Optional[int] = Field(None, ge=0, le=1)
    view_order: Optional[int] = None

    @field_validator("name", "price_cents")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class MenuItemResponse(BaseModel):
    """Menu item response"""
    id: int
    name: str
    description: Optional[str]
    image_url: Optional[str]
    price_cents: int
    category_id: Optional[int]
    is_popular: Optional[int]
    view_order: Optional[int]
    created_at: datetime

    class Config:
        from_attributes = True


class MenuSearchResult(BaseModel):
    """Menu search result"""
    items: List[MenuItemResponse]
    total: int


# One edit form for both record kinds, tagged by ``type``

class CategoryEdit(BaseModel):
    type: Literal["category"]
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    parent_id: Optional[int] = None


class MenuItemEdit(BaseModel):
    type: Literal["menu_item"]
    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price_cents: Optional[int] = Field(None, ge=0)
    category_id: Optional[int] = None

    @field_validator("name", "price_cents")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


CatalogEdit = Annotated[Union[CategoryEdit, MenuItemEdit], Field(discriminator="type")]


# Addons

class AddonCreate(BaseModel):
    """Create addon request"""
    name: str
    description: Optional[str] = None
    price_cents: int = Field(0, ge=0)
    is_available: bool = True


class AddonUpdate(BaseModel):
    """Update addon request"""
    name: Optional[str] = None
    description: Optional[str] = None
    price_cents: Optional[int] = Field(None, ge=0)
    is_available: Optional[bool] = None

    @field_validator("name", "price_cents")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class AddonResponse(BaseModel):
    """Addon response"""
    id: UUID
    name: str
    description: Optional[str]
    price_cents: int
    is_available: bool
    created_at: datetime

    class Config:
        from_attributes = True


class AddonLinkCreate(BaseModel):
    """Link an addon to a menu item"""
    addon_id: UUID
    is_default: bool = False
    is_required: bool = False
    max_quantity: Optional[int] = 1


class AddonLinkUpdate(BaseModel):
    """Replace the attributes of an addon link"""
    is_default: bool = False
    is_required: bool = False
    max_quantity: Optional[int] = 1


class AddonLinkResponse(BaseModel):
    """Addon linked to a menu item"""
    id: UUID
    menu_item_id: int
    addon_id: UUID
    is_default: bool
    is_required: bool
    max_quantity: int
    addon: Optional[AddonResponse] = None

    class Config:
        from_attributes = True


# Option groups and options

class OptionGroupCreate(BaseModel):
    """Create option group request"""
    name: str
    description: Optional[str] = None
    is_active: bool = True


class OptionGroupUpdate(BaseModel):
    """Update option group request"""
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class OptionGroupResponse(BaseModel):
    """Option group response"""
    id: UUID
    name: str
    description: Optional[str]
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class OptionGroupLinkCreate(BaseModel):
    option_group_id: UUID


class MenuOptionCreate(BaseModel):
    """Create menu option request"""
    name: str
    description: Optional[str] = None
    price_adjustment_cents: int = 0  # may be negative
    is_active: bool = True


class MenuOptionUpdate(BaseModel):
    """Update menu option request"""
    name: Optional[str] = None
    description: Optional[str] = None
    price_adjustment_cents: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class MenuOptionResponse(BaseModel):
    """Menu option response"""
    id: UUID
    name: str
    description: Optional[str]
    price_adjustment_cents: Optional[int]
    is_active: Optional[bool]
    created_at: datetime

    class Config:
        from_attributes = True


class OptionLinkCreate(BaseModel):
    option_id: UUID
