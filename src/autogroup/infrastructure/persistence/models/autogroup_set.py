"""SQLAlchemy model for the autogroup_set table."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from autogroup.infrastructure.persistence.database import Base


class AutogroupSetModel(Base):
    """A group set: the rule configuration behind a family of autogroups.

    Attributes:
        id: Primary key; appears in the id_number of every autogroup it owns.
        course_id: Course the group set is scoped to.
        sort_module: Name of the rule that sorts users into groups.
        sort_config: JSON configuration for the sort module.
    """

    __tablename__ = "autogroup_set"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    sort_module: Mapped[str] = mapped_column(String(100), nullable=False, default="profile_field")
    sort_config: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    time_created: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    time_modified: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<AutogroupSet(id={self.id}, course_id={self.course_id})>"
