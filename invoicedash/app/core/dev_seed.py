import os

from sqlalchemy.orm import Session

from invoicedash.app.core.logging import get_logger
from invoicedash.app.core.security import get_password_hash
from invoicedash.app.models.customer import Customer
from invoicedash.app.models.user import User

logger = get_logger(__name__)

DEFAULT_DEV_PASSWORD = "Secret123!"
DEFAULT_DEV_USER = "user@nextmail.com"
DEFAULT_DEV_CUSTOMERS = [
    ("Delba de Oliveira", "delba@oliveira.com"),
    ("Lee Robinson", "lee@robinson.com"),
]


def ensure_dev_data(db: Session) -> None:
    """
    Create a default sign-in user and a few customers for local development.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    created = False
    if not db.query(User).filter(User.email == DEFAULT_DEV_USER).first():
        db.add(User(name="User", email=DEFAULT_DEV_USER, hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD)))
        created = True

    for name, email in DEFAULT_DEV_CUSTOMERS:
        if db.query(Customer).filter(Customer.email == email).first():
            continue
        db.add(Customer(name=name, email=email))
        created = True

    if created:
        db.commit()
        logger.info("Seeded development data")
