"""Dashboard invoice routes: form submissions and list/detail reads."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from invoicedash.app.crud.crud_invoice import SQLInvoiceGateway, get_invoice, list_customers, list_invoices
from invoicedash.app.db.session import get_db
from invoicedash.app.dependencies.actions import get_invoice_gateway, get_page_cache
from invoicedash.app.schemas.invoice import ActionResult, ActionSuccess, CustomerRead, InvoiceRead
from invoicedash.app.services import invoices as invoice_actions
from invoicedash.app.services.page_cache import INVOICES_PATH, PageCache

router = APIRouter(prefix="/dashboard", tags=["invoices"])


def _action_response(result: ActionResult) -> Response:
    if isinstance(result, ActionSuccess):
        return RedirectResponse(result.redirect, status_code=status.HTTP_303_SEE_OTHER)
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY if result.errors else status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content=result.model_dump(exclude_none=True))


@router.get("/invoices", response_model=List[InvoiceRead])
async def read_invoices(db: Session = Depends(get_db), cache: PageCache = Depends(get_page_cache)):
    page = cache.get(INVOICES_PATH)
    if page is None:
        page = [InvoiceRead.model_validate(invoice).model_dump(mode="json") for invoice in list_invoices(db)]
        cache.set(INVOICES_PATH, page)
    return page


@router.get("/invoices/{invoice_id}", response_model=InvoiceRead)
async def read_invoice(invoice_id: str, db: Session = Depends(get_db), cache: PageCache = Depends(get_page_cache)):
    path = f"{INVOICES_PATH}/{invoice_id}"
    page = cache.get(path)
    if page is None:
        invoice = get_invoice(db, invoice_id)
        if not invoice:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Invoice not found")
        page = InvoiceRead.model_validate(invoice).model_dump(mode="json")
        cache.set(path, page)
    return page


@router.get("/customers", response_model=List[CustomerRead])
async def read_customers(db: Session = Depends(get_db)):
    return list_customers(db)


@router.post("/invoices/create")
async def submit_create_invoice(
    request: Request,
    gateway: SQLInvoiceGateway = Depends(get_invoice_gateway),
    cache: PageCache = Depends(get_page_cache),
):
    form = await request.form()
    result = invoice_actions.create_invoice(None, form, gateway=gateway, revalidator=cache)
    return _action_response(result)


@router.post("/invoices/{invoice_id}/edit")
async def submit_update_invoice(
    invoice_id: str,
    request: Request,
    gateway: SQLInvoiceGateway = Depends(get_invoice_gateway),
    cache: PageCache = Depends(get_page_cache),
):
    form = await request.form()
    result = invoice_actions.update_invoice(invoice_id, form, gateway=gateway, revalidator=cache)
    return _action_response(result)


@router.post("/invoices/{invoice_id}/delete", status_code=status.HTTP_204_NO_CONTENT)
async def submit_delete_invoice(
    invoice_id: str,
    gateway: SQLInvoiceGateway = Depends(get_invoice_gateway),
    cache: PageCache = Depends(get_page_cache),
):
    result = invoice_actions.delete_invoice(invoice_id, gateway=gateway, revalidator=cache)
    if result is not None:
        return _action_response(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
