"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all and alembic
"""

from invoicing.models.customer import Customer  # noqa: F401
from invoicing.models.invoice import Invoice  # noqa: F401
from invoicing.models.user import User  # noqa: F401
