"""Dependencies that hand collaborators to the form handlers."""

from fastapi import Depends
from sqlalchemy.orm import Session

from invoicedash.app.crud.crud_invoice import SQLInvoiceGateway
from invoicedash.app.db.session import get_db
from invoicedash.app.services.auth import DatabaseCredentialsProvider
from invoicedash.app.services.page_cache import PageCache, page_cache


def get_invoice_gateway(db: Session = Depends(get_db)) -> SQLInvoiceGateway:
    return SQLInvoiceGateway(db)


def get_page_cache() -> PageCache:
    return page_cache


def get_credentials_provider(db: Session = Depends(get_db)) -> DatabaseCredentialsProvider:
    return DatabaseCredentialsProvider(db)
