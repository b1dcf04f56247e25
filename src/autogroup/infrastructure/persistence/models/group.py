"""SQLAlchemy model for the groups table."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from autogroup.infrastructure.persistence.database import Base


class GroupModel(Base):
    """SQLAlchemy model for the groups table.

    Column names match the fields of ``GroupRecord`` so rows can be handed
    to the domain as plain dicts.

    Attributes:
        id: Primary key.
        course_id: Course the group belongs to.
        id_number: External identifier; autogroups use ``autogroup|<set id>``.
        name: Group name.
        time_created: Unix timestamp when the group was created.
        time_modified: Unix timestamp when the group was last updated.
    """

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        comment="Course the group belongs to",
    )
    id_number: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
        index=True,
        comment="External identifier",
    )
    name: Mapped[str] = mapped_column(String(254), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    description_format: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    enrolment_key: Mapped[str | None] = mapped_column(String(50), nullable=True, default="")
    picture: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    time_created: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    time_modified: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    visibility: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    participation: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name}, id_number={self.id_number})>"
