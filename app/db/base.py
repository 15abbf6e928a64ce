from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

# Register every model on Base.metadata (alembic autogenerate, create_all)
from app.models import *  # noqa
