"""Login session storage.

Rows are written and expired by the session middleware of the identity
provider integration; application code never queries this table.
"""

from sqlalchemy import JSON, Column, DateTime, Index, String

from study_planner.database import Base


class LoginSession(Base):
    """Opaque server-side session record."""

    __tablename__ = "sessions"
    __table_args__ = (Index("IDX_session_expire", "expire"),)

    sid = Column(String(255), primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime(timezone=True), nullable=False)
