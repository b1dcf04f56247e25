"""Group mutation primitives backed by SQLAlchemy.

Implements the ``GroupOperations`` port. These are the only functions that
physically write groups and memberships, and every effective change
triggers the matching hook event.
"""

import time
from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from autogroup.core.hooks import GroupEvent, HookRegistry
from autogroup.core.logging import get_logger
from autogroup.domain.entities.hook_context import HookContext
from autogroup.infrastructure.persistence.models import (
    AutogroupManualModel,
    GroupMemberModel,
    GroupModel,
)
from autogroup.infrastructure.persistence.repositories import GroupRepository

logger = get_logger(__name__)

# Attributes never copied from callers onto an existing row
_READ_ONLY_ATTRIBUTES = frozenset({"id", "time_created"})


class SqlGroupOperations:
    """Create, update and delete groups and their members."""

    def __init__(self, session: AsyncSession, hook_registry: HookRegistry | None = None) -> None:
        """Initialize the group operations.

        Args:
            session: SQLAlchemy async session.
            hook_registry: Optional registry notified after each change.
        """
        self.session = session
        self.hook_registry = hook_registry
        self.group_repo = GroupRepository(session)

    async def create_group(self, attributes: Mapping[str, Any]) -> int:
        """Create a group.

        Any incoming id is ignored; both timestamps are set to now.

        Args:
            attributes: Group attributes keyed by column name.

        Returns:
            The new group ID.
        """
        now = int(time.time())
        values = self._column_values(attributes, exclude=_READ_ONLY_ATTRIBUTES)
        values["time_created"] = now
        values["time_modified"] = now

        group = GroupModel(**values)
        self.session.add(group)
        await self.session.flush()

        logger.debug("Group created", group_id=group.id, course_id=group.course_id)
        await self._trigger(
            GroupEvent.ON_GROUP_AFTER_CREATE,
            {"group_id": group.id, "course_id": group.course_id},
        )
        return group.id

    async def update_group(self, attributes: Mapping[str, Any]) -> bool:
        """Update the group identified by ``attributes["id"]``.

        Returns:
            True if the group was updated, False if it does not exist.
        """
        group = await self.group_repo.get_by_id(attributes.get("id", 0))
        if group is None:
            return False

        for key, value in self._column_values(attributes, exclude=_READ_ONLY_ATTRIBUTES).items():
            setattr(group, key, value)
        group.time_modified = int(time.time())
        await self.session.flush()

        logger.debug("Group updated", group_id=group.id)
        await self._trigger(
            GroupEvent.ON_GROUP_AFTER_UPDATE,
            {"group_id": group.id, "course_id": group.course_id},
        )
        return True

    async def delete_group(self, group_id: int) -> bool:
        """Delete a group together with its members and manual markers.

        Deleting a group that does not exist is not an error.

        Returns:
            True once the group is gone.
        """
        group = await self.group_repo.get_by_id(group_id)
        if group is None:
            return True

        course_id = group.course_id
        await self.session.execute(
            delete(GroupMemberModel).where(GroupMemberModel.group_id == group_id)
        )
        await self.session.execute(
            delete(AutogroupManualModel).where(AutogroupManualModel.group_id == group_id)
        )
        await self.session.delete(group)
        await self.session.flush()

        logger.debug("Group deleted", group_id=group_id)
        await self._trigger(
            GroupEvent.ON_GROUP_AFTER_DELETE,
            {"group_id": group_id, "course_id": course_id},
        )
        return True

    async def add_member(self, group_id: int, user_id: int, component: str | None = None) -> bool:
        """Add a user to a group.

        Args:
            group_id: Group ID.
            user_id: User ID.
            component: Component responsible for the membership; None or
                empty for a manual add.

        Returns:
            True if the user is a member afterwards, False if the group
            does not exist.
        """
        if await self.group_repo.is_member(group_id, user_id):
            return True

        if await self.group_repo.get_by_id(group_id) is None:
            logger.warning("Cannot add member to missing group", group_id=group_id, user_id=user_id)
            return False

        self.session.add(
            GroupMemberModel(
                group_id=group_id,
                user_id=user_id,
                component=component or "",
                time_added=int(time.time()),
            )
        )
        await self.session.flush()

        logger.debug("Group member added", group_id=group_id, user_id=user_id, component=component)
        await self._trigger(
            GroupEvent.ON_GROUP_MEMBER_ADDED,
            {"group_id": group_id, "user_id": user_id, "component": component or ""},
        )
        return True

    async def remove_member(self, group_id: int, user_id: int) -> bool:
        """Remove a user from a group.

        Returns:
            True once the user is no longer a member.
        """
        if not await self.group_repo.is_member(group_id, user_id):
            return True

        await self.session.execute(
            delete(GroupMemberModel).where(
                (GroupMemberModel.group_id == group_id) & (GroupMemberModel.user_id == user_id)
            )
        )
        await self.session.flush()

        logger.debug("Group member removed", group_id=group_id, user_id=user_id)
        await self._trigger(
            GroupEvent.ON_GROUP_MEMBER_REMOVED,
            {"group_id": group_id, "user_id": user_id},
        )
        return True

    async def _trigger(self, event: str, data: dict[str, Any]) -> None:
        if self.hook_registry is None:
            return
        await self.hook_registry.trigger(
            event,
            data=data,
            context=HookContext(session=self.session),
        )

    @staticmethod
    def _column_values(attributes: Mapping[str, Any], exclude: frozenset[str]) -> dict[str, Any]:
        columns = GroupModel.__table__.columns
        return {
            key: value
            for key, value in attributes.items()
            if key in columns and key not in exclude
        }
