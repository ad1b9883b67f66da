"""
Backend Learning API — User SQLAlchemy Model
=============================================

What:  ORM model for the `users` table.
Who:   Counted by GET /db-test through SQLAlchemyDatabaseClient.

The schema is owned by the database (created and migrated outside this
service). Column types are dialect-neutral so the same model maps onto
PostgreSQL in production and SQLite in tests.
"""

from datetime import datetime, timezone
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from learning_api.database import Base

if TYPE_CHECKING:
    from learning_api.models.post import Post


class User(Base):
    """A registered user. Owns zero or more posts."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    posts: Mapped[List["Post"]] = relationship(back_populates="author")

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
