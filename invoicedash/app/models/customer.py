import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from invoicedash.app.db.base_class import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    image_url = Column(String(512), nullable=True)

    invoices = relationship("Invoice", back_populates="customer")
