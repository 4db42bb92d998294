"""Invoice form, read and action-result schemas."""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError, field_validator

from invoicedash.app.core.money import MAX_AMOUNT, to_cents

FORM_FIELDS = ("customerId", "amount", "status")

FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class InvoiceForm(BaseModel):
    """Fields accepted from the create and edit forms."""

    model_config = ConfigDict(populate_by_name=True)

    customer_id: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(alias="customerId")
    # Upper bound keeps the cents value inside a signed 64-bit column
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("amount")
    @classmethod
    def amount_has_a_cent(cls, value: Decimal) -> Decimal:
        if to_cents(value) < 1:
            raise ValueError("amount rounds to zero cents")
        return value

    @property
    def amount_in_cents(self) -> int:
        return to_cents(self.amount)


class InvalidInvoiceForm(ValueError):
    """Raised by the strict form parse; carries the per-field messages."""

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__("Invalid invoice form")
        self.errors = errors


def _form_payload(form_data: Mapping[str, Any]) -> dict:
    return {field: form_data.get(field) for field in FORM_FIELDS}


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Flatten a pydantic error into form-field -> messages."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        message = FIELD_MESSAGES.get(field, error["msg"])
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return errors


def parse_invoice_form(form_data: Mapping[str, Any]) -> InvoiceForm:
    """Strict variant: raises InvalidInvoiceForm on bad input."""
    try:
        return InvoiceForm.model_validate(_form_payload(form_data))
    except ValidationError as exc:
        raise InvalidInvoiceForm(field_errors(exc)) from exc


def safe_parse_invoice_form(
    form_data: Mapping[str, Any],
) -> Tuple[Optional[InvoiceForm], Optional[Dict[str, List[str]]]]:
    """Safe variant: returns (form, None) or (None, field errors), never raises."""
    try:
        return parse_invoice_form(form_data), None
    except InvalidInvoiceForm as exc:
        return None, exc.errors


class ActionSuccess(BaseModel):
    kind: Literal["success"] = "success"
    redirect: Optional[str] = None


class ActionFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


ActionResult = Annotated[Union[ActionSuccess, ActionFailure], Field(discriminator="kind")]


class InvoiceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: str


class CustomerRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    image_url: Optional[str] = None
