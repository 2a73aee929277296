"""SQLAlchemy ORM model for the delete_user_log table.

Each row records one user removed from a tenant. Rows are inserted once and
never updated.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, utc_now


class DeleteUserLogModel(Base):
    """ORM model for delete_user_log table.

    Notes:
    - id is a database-assigned surrogate key
    - tenant_id, user_id and email are identity service values, VARCHAR(100)
    - tenant_id is indexed for the per-tenant audit query
    - email is captured before deletion, since the identity service no
      longer knows it afterwards
    """

    __tablename__ = "delete_user_log"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tenant_id: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    delete_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<DeleteUserLogModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"user_id={self.user_id})>"
        )
