"""Invoice model for the dashboard."""

import uuid

from sqlalchemy import BigInteger, Column, ForeignKey, String
from sqlalchemy.orm import relationship

from invoicedash.app.db.base_class import Base


def new_invoice_id() -> str:
    return str(uuid.uuid4())


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True, default=new_invoice_id)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False, index=True)
    # Stored in cents
    amount = Column(BigInteger, nullable=False)
    status = Column(String(16), nullable=False)
    date = Column(String(10), nullable=False)

    customer = relationship("Customer", back_populates="invoices")
