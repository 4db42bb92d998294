# Invoice dashboard backend entrypoint.

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invoicedash.app.api import invoices
from invoicedash.app.api import login
from invoicedash.app.core.dev_seed import ensure_dev_data
from invoicedash.app.core.settings import get_settings
from invoicedash.app.db.session import SessionLocal, init_db
from invoicedash.app.schemas.invoice import InvalidInvoiceForm

settings = get_settings()
app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(invoices.router)
app.include_router(login.router)


@app.exception_handler(InvalidInvoiceForm)
async def invalid_invoice_form(request: Request, exc: InvalidInvoiceForm):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"errors": exc.errors, "message": "Invalid Fields. Failed to Update Invoice."},
    )


@app.get("/")
def read_root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def prepare_database():
    init_db()
    if not settings.is_development():
        return
    db = SessionLocal()
    try:
        ensure_dev_data(db)
    finally:
        db.close()
