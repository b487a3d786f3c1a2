from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from urlgen.database.connection import Base


class URL(Base):
    """
    A stored short code -> long URL mapping.

    Nullable short_code allows two-step creation: insert to get the
    auto-increment ID, then generate the code from it.
    """
    __tablename__ = "urls"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    long_url = Column(String, nullable=False, index=True)
    # unique=True also creates an index
    short_code = Column(String(16), unique=True, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
