"""User model — hosts and guests of the marketplace."""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydb.database import Base, TimestampMixin, UUIDPrimaryKeyMixin
from staydb.models.lookup import in_list_check

USER_ROLES = ("guest", "host", "admin")


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A person acting as host (owns properties) or guest (makes bookings)."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="guest", server_default="guest")

    # Relationships
    properties: Mapped[list["Property"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="host", lazy="selectin", passive_deletes="all"
    )

    __table_args__ = (
        CheckConstraint(in_list_check("role", USER_ROLES), name="role_valid"),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} role={self.role!r}>"
