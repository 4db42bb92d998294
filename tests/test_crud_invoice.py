import pytest

from invoicedash.app.crud.crud_invoice import PersistenceError, SQLInvoiceGateway
from invoicedash.app.db.base import Base
from invoicedash.app.db.session import SessionLocal, engine
from invoicedash.app.models.invoice import Invoice
from invoicedash.app.schemas.invoice import ActionFailure, ActionSuccess
from invoicedash.app.services.invoices import create_invoice
from invoicedash.app.services.page_cache import PageCache


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


def test_insert_stores_row_with_generated_id(db):
    gateway = SQLInvoiceGateway(db)
    invoice_id = gateway.insert_invoice(customer_id="c1", amount=3450, status="paid", date="2024-03-01")

    invoice = db.get(Invoice, invoice_id)
    assert (invoice.customer_id, invoice.amount, invoice.status, invoice.date) == ("c1", 3450, "paid", "2024-03-01")


def test_cents_too_large_for_the_column_raise_persistence_error(db):
    gateway = SQLInvoiceGateway(db)
    with pytest.raises(PersistenceError):
        gateway.insert_invoice(customer_id="c1", amount=10**22, status="paid", date="2024-03-01")
    assert db.query(Invoice).count() == 0


def test_largest_allowed_amount_is_stored(db):
    result = create_invoice(
        None,
        {"customerId": "c1", "amount": "92233720368547758.07", "status": "paid"},
        gateway=SQLInvoiceGateway(db),
        revalidator=PageCache(),
    )
    assert isinstance(result, ActionSuccess)
    (invoice,) = db.query(Invoice).all()
    assert invoice.amount == 2**63 - 1


def test_huge_amount_returns_field_error_without_write(db):
    result = create_invoice(
        None,
        {"customerId": "c1", "amount": "1e20", "status": "paid"},
        gateway=SQLInvoiceGateway(db),
        revalidator=PageCache(),
    )
    assert isinstance(result, ActionFailure)
    assert result.errors["amount"]
    assert db.query(Invoice).count() == 0
