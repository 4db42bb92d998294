"""Create, update and delete handlers for dashboard invoice forms.

Handlers return an ActionSuccess carrying the redirect target, an
ActionFailure carrying a user-facing message, or None where nothing
needs to happen next.
"""

from typing import Any, Mapping, Optional, Union

from invoicedash.app.core.logging import get_logger
from invoicedash.app.core.time import utc_today_iso
from invoicedash.app.crud.crud_invoice import InvoiceGateway, PersistenceError
from invoicedash.app.schemas.invoice import (
    ActionFailure,
    ActionSuccess,
    parse_invoice_form,
    safe_parse_invoice_form,
)
from invoicedash.app.services.page_cache import INVOICES_PATH, Revalidator

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create Invoice."
CREATE_FAILED_MESSAGE = "Database Error: Failed to Create Invoice."
UPDATE_FAILED_MESSAGE = "Database Error: Failed to Update Invoice."
DELETE_FAILED_MESSAGE = "Database Error: Failed to Delete Invoice."


def create_invoice(
    prev_state: Optional[ActionFailure],
    form_data: Mapping[str, Any],
    *,
    gateway: InvoiceGateway,
    revalidator: Revalidator,
) -> Union[ActionSuccess, ActionFailure]:
    # prev_state is accepted so the form can round-trip its last result; it is not read.
    form, errors = safe_parse_invoice_form(form_data)
    if form is None:
        return ActionFailure(errors=errors, message=MISSING_FIELDS_MESSAGE)

    try:
        invoice_id = gateway.insert_invoice(
            customer_id=form.customer_id,
            amount=form.amount_in_cents,
            status=form.status.value,
            date=utc_today_iso(),
        )
    except PersistenceError:
        logger.exception("Invoice insert failed")
        return ActionFailure(message=CREATE_FAILED_MESSAGE)

    logger.info("Invoice created id=%s", invoice_id)
    revalidator.revalidate_path(INVOICES_PATH)
    return ActionSuccess(redirect=INVOICES_PATH)


def update_invoice(
    invoice_id: str,
    form_data: Mapping[str, Any],
    *,
    gateway: InvoiceGateway,
    revalidator: Revalidator,
) -> Union[ActionSuccess, ActionFailure]:
    """Rewrite customer, amount and status of one invoice.

    Malformed input raises InvalidInvoiceForm rather than returning
    field errors. The id and date columns are never touched.
    """
    form = parse_invoice_form(form_data)

    try:
        gateway.update_invoice(
            invoice_id,
            customer_id=form.customer_id,
            amount=form.amount_in_cents,
            status=form.status.value,
        )
    except PersistenceError:
        logger.exception("Invoice update failed id=%s", invoice_id)
        return ActionFailure(message=UPDATE_FAILED_MESSAGE)

    logger.info("Invoice updated id=%s", invoice_id)
    revalidator.revalidate_path(INVOICES_PATH)
    return ActionSuccess(redirect=INVOICES_PATH)


def delete_invoice(
    invoice_id: str,
    *,
    gateway: InvoiceGateway,
    revalidator: Revalidator,
) -> Optional[ActionFailure]:
    try:
        gateway.delete_invoice(invoice_id)
    except PersistenceError:
        logger.exception("Invoice delete failed id=%s", invoice_id)
        return ActionFailure(message=DELETE_FAILED_MESSAGE)

    logger.info("Invoice deleted id=%s", invoice_id)
    revalidator.revalidate_path(INVOICES_PATH)
    return None
