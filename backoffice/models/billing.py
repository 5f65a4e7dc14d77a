"""Invoice and payment models"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship

from backoffice.database import Base


class Invoice(Base):
    """Table-service invoices"""
    __tablename__ = "invoices"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    invoice_number = Column(String(50), unique=True, nullable=False)
    customer_name = Column(String(255))
    table_number = Column(Integer)
    server_name = Column(String(255))
    status = Column(String(20), default="draft")  # draft, issued, paid, void

    # Amounts
    subtotal_cents = Column(Integer, nullable=False, default=0)
    tax_amount_cents = Column(Integer, nullable=False, default=0)
    tip_amount_cents = Column(Integer, nullable=False, default=0)
    discount_amount_cents = Column(Integer, nullable=False, default=0)
    total_amount_cents = Column(Integer, nullable=False, default=0)

    payment_method = Column(String(30))
    payment_date = Column(DateTime)
    notes = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    items = relationship("InvoiceItem", lazy="selectin", order_by="InvoiceItem.created_at")


class InvoiceItem(Base):
    """Invoice line items"""
    __tablename__ = "invoice_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    invoice_id = Column(Uuid, ForeignKey("invoices.id"), nullable=False)
    menu_item_id = Column(Integer, ForeignKey("menu_items.id"))
    description = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price_cents = Column(Integer, nullable=False, default=0)
    total_price_cents = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)


class Payment(Base):
    """Customer payments"""
    __tablename__ = "payments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    payment_number = Column(String(50), unique=True, nullable=False)
    customer_id = Column(String(255))
    customer_name = Column(String(255))
    invoice_id = Column(Uuid, ForeignKey("invoices.id"))
    amount_paid_cents = Column(Integer, nullable=False, default=0)
    payment_method = Column(String(30), nullable=False)
    payment_status = Column(String(20), default="PENDING")
    transaction_id = Column(String(255))
    payment_date = Column(DateTime, default=datetime.utcnow)
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
