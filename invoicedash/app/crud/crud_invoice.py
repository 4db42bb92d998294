"""Persistence gateway for invoice mutations and reads.

Each mutation issues exactly one parameter-bound statement and commits it.
Database failures are rolled back and re-raised as PersistenceError.
"""

from typing import List, Optional, Protocol

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from invoicedash.app.models.customer import Customer
from invoicedash.app.models.invoice import Invoice, new_invoice_id


class PersistenceError(Exception):
    """Raised when a statement against the invoice store fails."""


class InvoiceGateway(Protocol):
    def insert_invoice(self, *, customer_id: str, amount: int, status: str, date: str) -> str: ...

    def update_invoice(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> None: ...

    def delete_invoice(self, invoice_id: str) -> None: ...


class SQLInvoiceGateway:
    def __init__(self, db: Session):
        self.db = db

    def _execute(self, statement) -> None:
        try:
            self.db.execute(statement)
            self.db.commit()
        except (SQLAlchemyError, OverflowError) as exc:
            self.db.rollback()
            raise PersistenceError(str(exc)) from exc

    def insert_invoice(self, *, customer_id: str, amount: int, status: str, date: str) -> str:
        invoice_id = new_invoice_id()
        self._execute(
            insert(Invoice).values(
                id=invoice_id,
                customer_id=customer_id,
                amount=amount,
                status=status,
                date=date,
            )
        )
        return invoice_id

    def update_invoice(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> None:
        self._execute(
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(customer_id=customer_id, amount=amount, status=status)
        )

    def delete_invoice(self, invoice_id: str) -> None:
        self._execute(delete(Invoice).where(Invoice.id == invoice_id))


def list_invoices(db: Session) -> List[Invoice]:
    return list(db.scalars(select(Invoice).order_by(Invoice.date.desc(), Invoice.id.asc())))


def get_invoice(db: Session, invoice_id: str) -> Optional[Invoice]:
    return db.get(Invoice, invoice_id)


def list_customers(db: Session) -> List[Customer]:
    return list(db.scalars(select(Customer).order_by(Customer.name.asc())))
