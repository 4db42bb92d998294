"""
Pytest configuration for the invoice dashboard tests.

Points the app at a throwaway SQLite file and provides in-memory
collaborators for the form handlers.
"""
import os

import pytest

os.environ["DATABASE_URL"] = "sqlite:///./test_invoicedash.db"
os.environ.setdefault("ENVIRONMENT", "testing")

from invoicedash.app.crud.crud_invoice import PersistenceError  # noqa: E402


class InMemoryInvoiceGateway:
    def __init__(self):
        self.rows = {}
        self.fail = False
        self._next_id = 1

    def _check(self):
        if self.fail:
            raise PersistenceError("connection refused")

    def insert_invoice(self, *, customer_id, amount, status, date):
        self._check()
        invoice_id = f"inv-{self._next_id}"
        self._next_id += 1
        self.rows[invoice_id] = {
            "id": invoice_id,
            "customer_id": customer_id,
            "amount": amount,
            "status": status,
            "date": date,
        }
        return invoice_id

    def update_invoice(self, invoice_id, *, customer_id, amount, status):
        self._check()
        row = self.rows.get(invoice_id)
        if row is not None:
            row.update(customer_id=customer_id, amount=amount, status=status)

    def delete_invoice(self, invoice_id):
        self._check()
        self.rows.pop(invoice_id, None)


class RecordingRevalidator:
    def __init__(self):
        self.paths = []

    def revalidate_path(self, path):
        self.paths.append(path)


@pytest.fixture
def gateway():
    return InMemoryInvoiceGateway()


@pytest.fixture
def revalidator():
    return RecordingRevalidator()
