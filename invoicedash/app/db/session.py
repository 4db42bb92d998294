"""Engine and per-request session factory."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from invoicedash.app.core.settings import get_settings

settings = get_settings()

connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    from invoicedash.app.db.base import Base

    Base.metadata.create_all(bind=engine)
