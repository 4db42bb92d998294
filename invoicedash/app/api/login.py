"""Login form endpoint."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from invoicedash.app.dependencies.actions import get_credentials_provider
from invoicedash.app.services.auth import DatabaseCredentialsProvider, authenticate

router = APIRouter(tags=["auth"])

DASHBOARD_PATH = "/dashboard"


@router.post("/login")
async def login(request: Request, provider: DatabaseCredentialsProvider = Depends(get_credentials_provider)):
    form = await request.form()
    error = authenticate(None, form, provider=provider)
    if error:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": error, "message": "Invalid credentials."},
        )
    return RedirectResponse(DASHBOARD_PATH, status_code=status.HTTP_303_SEE_OTHER)
