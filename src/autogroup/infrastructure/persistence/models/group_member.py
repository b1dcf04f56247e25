"""SQLAlchemy model for the groups_members table."""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from autogroup.infrastructure.persistence.database import Base


class GroupMemberModel(Base):
    """Membership of a user in a group.

    Attributes:
        id: Primary key (membership id).
        group_id: Foreign key to groups table.
        user_id: The member.
        component: Component that added the member; empty for manual adds.
        item_id: Component-specific item id.
        time_added: Unix timestamp when the member was added.
    """

    __tablename__ = "groups_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    component: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    item_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    time_added: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("group_id", "user_id", name="uq_groups_members_group_user"),
    )

    def __repr__(self) -> str:
        return f"<GroupMember(id={self.id}, group_id={self.group_id}, user_id={self.user_id})>"
