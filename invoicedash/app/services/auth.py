"""Credential sign-in for the dashboard login form."""

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol

from pydantic import ValidationError
from sqlalchemy.orm import Session

from invoicedash.app.core.logging import get_logger
from invoicedash.app.core.security import verify_password
from invoicedash.app.models.user import User
from invoicedash.app.schemas.login import LoginRequest

logger = get_logger(__name__)

CREDENTIALS_PROVIDER = "credentials"
CREDENTIAL_SIGNIN = "CredentialSignin"


class AuthErrorKind(str, Enum):
    CREDENTIAL_SIGNIN = "CredentialSignin"
    CONFIGURATION = "Configuration"
    ACCESS_DENIED = "AccessDenied"


class AuthError(Exception):
    def __init__(self, kind: AuthErrorKind, detail: str = ""):
        super().__init__(detail or kind.value)
        self.kind = kind


class CredentialsProvider(Protocol):
    def sign_in(self, provider: str, credentials: Dict[str, Any]) -> User: ...


class DatabaseCredentialsProvider:
    """Checks an email/password pair against the users table."""

    def __init__(self, db: Session):
        self.db = db

    def sign_in(self, provider: str, credentials: Dict[str, Any]) -> User:
        if provider != CREDENTIALS_PROVIDER:
            raise AuthError(AuthErrorKind.CONFIGURATION, f"Unsupported provider: {provider}")

        try:
            login = LoginRequest.model_validate(credentials)
        except ValidationError as exc:
            raise AuthError(AuthErrorKind.CREDENTIAL_SIGNIN, "Malformed credentials") from exc

        user = self.db.query(User).filter(User.email == login.email).first()
        if not user or not user.hashed_password:
            raise AuthError(AuthErrorKind.CREDENTIAL_SIGNIN, "Invalid credentials")
        if not verify_password(login.password, user.hashed_password):
            raise AuthError(AuthErrorKind.CREDENTIAL_SIGNIN, "Invalid credentials")
        if not user.is_active:
            raise AuthError(AuthErrorKind.ACCESS_DENIED, "User is inactive")
        return user


def authenticate(
    prev_state: Optional[str],
    form_data: Mapping[str, Any],
    *,
    provider: CredentialsProvider,
) -> Optional[str]:
    """Sign in with the submitted form fields.

    Returns "CredentialSignin" when the credentials are rejected and None on
    success. Any other AuthError propagates to the caller.
    """
    try:
        provider.sign_in(CREDENTIALS_PROVIDER, dict(form_data))
    except AuthError as exc:
        if exc.kind is AuthErrorKind.CREDENTIAL_SIGNIN:
            logger.info("Sign-in rejected: %s", exc)
            return CREDENTIAL_SIGNIN
        raise
    return None
