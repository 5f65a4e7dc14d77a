"""Menu catalog models: categories, items and their modifiers"""

import uuid
from datetime import datetime
from sqlalchemy import (
    Column,
    String,
    Integer,
    Boolean,
    DateTime,
    ForeignKey,
    Text,
    Uuid,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from backoffice.database import Base


class Category(Base):
    """Menu categories, nested through parent_id"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255))
    description = Column(Text)
    image_url = Column(String(500))
    code = Column(String(50))
    parent_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    view_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class MenuItem(Base):
    """Menu items ("menus" in the dashboard)"""
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    image_url = Column(String(500))
    price_cents = Column(Integer, nullable=False, default=0)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    is_popular = Column(Integer)  # null, 0 or 1; kept as stored
    view_order = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)


class Addon(Base):
    """Purchasable extras, reusable across menu items"""
    __tablename__ = "addons"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price_cents = Column(Integer, nullable=False, default=0)
    is_available = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class MenuItemAddon(Base):
    """Link between a menu item and an addon"""
    __tablename__ = "menu_item_addons"
    __table_args__ = (
        UniqueConstraint("menu_item_id", "addon_id", name="uq_menu_item_addon"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    menu_item_id = Column(Integer, ForeignKey("menu_items.id"), nullable=False)
    addon_id = Column(Uuid, ForeignKey("addons.id"), nullable=False)
    is_default = Column(Boolean, default=False)
    is_required = Column(Boolean, default=False)
    max_quantity = Column(Integer, nullable=False, default=1)

    # Relationships
    addon = relationship("Addon", lazy="joined")


class OptionGroup(Base):
    """Named cluster of options, e.g. Size or Spice level"""
    __tablename__ = "menu_option_groups"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class MenuOption(Base):
    """Single selectable option with a signed price adjustment"""
    __tablename__ = "menu_options"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price_adjustment_cents = Column(Integer, default=0)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class OptionGroupOption(Base):
    """Options belonging to an option group"""
    __tablename__ = "menu_option_group_options"

    option_group_id = Column(Uuid, ForeignKey("menu_option_groups.id"), primary_key=True)
    option_id = Column(Uuid, ForeignKey("menu_options.id"), primary_key=True)


class MenuItemOptionGroup(Base):
    """Option groups offered on a menu item"""
    __tablename__ = "menu_item_option_groups"

    menu_item_id = Column(Integer, ForeignKey("menu_items.id"), primary_key=True)
    option_group_id = Column(Uuid, ForeignKey("menu_option_groups.id"), primary_key=True)
