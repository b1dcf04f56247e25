"""SQLAlchemy model for the autogroup_manual table."""

from sqlalchemy import Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from autogroup.infrastructure.persistence.database import Base


class AutogroupManualModel(Base):
    """Marks a user as added to a group by hand rather than by autogroup.

    Attributes:
        id: Primary key.
        user_id: The manually assigned member.
        group_id: The group they were added to.
    """

    __tablename__ = "autogroup_manual"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    group_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint("user_id", "group_id", name="uq_autogroup_manual_user_group"),
    )

    def __repr__(self) -> str:
        return f"<AutogroupManual(user_id={self.user_id}, group_id={self.group_id})>"
