"""Repository for group database operations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from autogroup.infrastructure.persistence.database import Base
from autogroup.infrastructure.persistence.models import (
    AutogroupManualModel,
    AutogroupSetModel,
    GroupMemberModel,
    GroupModel,
)

_TABLES: dict[str, type[Base]] = {
    model.__tablename__: model
    for model in (GroupModel, GroupMemberModel, AutogroupSetModel, AutogroupManualModel)
}


def row_to_dict(row: Base) -> dict[str, Any]:
    """Convert a model instance to a dict keyed by column name."""
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


class GroupRepository:
    """Repository for group, membership and marker records.

    Implements the ``RecordStore`` port used by ``AutoGroup``.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get_by_id(self, group_id: int) -> GroupModel | None:
        """Get a group by ID.

        Args:
            group_id: Group ID.

        Returns:
            Group model if found, None otherwise.
        """
        result = await self.session.execute(select(GroupModel).where(GroupModel.id == group_id))
        return result.scalar_one_or_none()

    async def fetch_group_record(self, group_id: int) -> dict[str, Any] | None:
        """Get the raw group row with this ID.

        Args:
            group_id: Group ID.

        Returns:
            The row as a dict, or None if no such group exists.
        """
        group = await self.get_by_id(group_id)
        return row_to_dict(group) if group is not None else None

    async def fetch_membership_map(self, group_id: int) -> dict[int, int]:
        """Get the members of a group.

        Args:
            group_id: Group ID.

        Returns:
            Membership ID -> user ID, ordered by membership ID.
        """
        result = await self.session.execute(
            select(GroupMemberModel.id, GroupMemberModel.user_id)
            .where(GroupMemberModel.group_id == group_id)
            .order_by(GroupMemberModel.id)
        )
        return {membership_id: user_id for membership_id, user_id in result.all()}

    async def record_exists(self, table: str, filters: Mapping[str, Any]) -> bool:
        """Check whether a row matching all filters exists.

        Args:
            table: Table name, e.g. "autogroup_set".
            filters: Column name -> required value.

        Returns:
            True if at least one row matches, False otherwise.

        Raises:
            ValueError: If the table or one of the columns is unknown.
        """
        model = _TABLES.get(table)
        if model is None:
            raise ValueError(f"Unknown table '{table}'")

        columns = model.__table__.columns
        conditions = []
        for column_name, value in filters.items():
            if column_name not in columns:
                raise ValueError(f"Unknown column '{column_name}' on table '{table}'")
            conditions.append(columns[column_name] == value)

        result = await self.session.execute(
            select(columns["id"]).where(*conditions).limit(1)
        )
        return result.first() is not None

    async def is_member(self, group_id: int, user_id: int) -> bool:
        """Check if a user is in a group.

        Args:
            group_id: Group ID.
            user_id: User ID.

        Returns:
            True if user is in group, False otherwise.
        """
        return await self.record_exists(
            GroupMemberModel.__tablename__,
            {"group_id": group_id, "user_id": user_id},
        )

    async def add_manual_assignment(self, group_id: int, user_id: int) -> bool:
        """Record that a user was added to a group by hand.

        Returns:
            True if a marker was written, False if one already existed.
        """
        if await self.record_exists(
            AutogroupManualModel.__tablename__,
            {"group_id": group_id, "user_id": user_id},
        ):
            return False

        self.session.add(AutogroupManualModel(user_id=user_id, group_id=group_id))
        await self.session.flush()
        return True

    async def remove_manual_assignment(self, group_id: int, user_id: int) -> None:
        """Clear the manual assignment marker for a user in a group."""
        await self.session.execute(
            delete(AutogroupManualModel).where(
                (AutogroupManualModel.group_id == group_id)
                & (AutogroupManualModel.user_id == user_id)
            )
        )
        await self.session.flush()
