from invoicedash.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from invoicedash.app.models.customer import Customer  # noqa: F401
from invoicedash.app.models.invoice import Invoice  # noqa: F401
from invoicedash.app.models.user import User  # noqa: F401
