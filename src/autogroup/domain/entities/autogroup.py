"""Autogroup entity.

An autogroup wraps a course group whose membership is managed by a group
set. It looks like any other group to the rest of the system: all writes
go through the injected group operations, so the usual group events are
still emitted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from autogroup.core.logging import get_logger
from autogroup.domain.entities.group import (
    AUTOGROUP_MARKER,
    GroupRecord,
    parse_group_record,
    parse_group_set_id,
)
from autogroup.domain.exceptions import InvalidGroupArgument
from autogroup.domain.ports import (
    AUTOGROUP_COMPONENT,
    GROUP_SET_TABLE,
    MANUAL_ASSIGNMENT_TABLE,
    GroupOperations,
    RecordStore,
)

logger = get_logger(__name__)


class AutoGroup:
    """A course group managed by autogroup.

    Instances are built with :meth:`load`, which hydrates the group record
    and takes a snapshot of the current membership. The snapshot is read
    once and never refreshed: ``ensure_member`` and ``ensure_not_member``
    do not update it after issuing a mutation. Callers that need a fresh
    view must load the group again.

    Attributes:
        record: The group's attributes.
    """

    def __init__(
        self,
        record: GroupRecord,
        *,
        store: RecordStore,
        operations: GroupOperations,
        preserve_manual: bool,
    ) -> None:
        self.record = record
        self._store = store
        self._operations = operations
        self._preserve_manual = preserve_manual
        self._members: dict[int, int] = {}

    @classmethod
    async def load(
        cls,
        group: int | Mapping[str, Any],
        *,
        store: RecordStore,
        operations: GroupOperations,
        preserve_manual: bool = True,
    ) -> AutoGroup:
        """Build an autogroup from a group id or a raw group record.

        A positive integer is looked up through the store. If no valid
        autogroup record comes back the entity keeps its defaults (id 0)
        rather than failing. Anything else is validated as a raw record.

        Args:
            group: Group id or raw group record.
            store: Record store used for reads.
            operations: Group mutation primitives.
            preserve_manual: Whether manually added members are protected
                from automatic removal.

        Returns:
            The hydrated autogroup with its membership snapshot loaded.

        Raises:
            InvalidGroupArgument: If the input is neither a positive id nor
                a valid autogroup record.
        """
        if isinstance(group, int) and not isinstance(group, bool) and group > 0:
            record = parse_group_record(await store.fetch_group_record(group))
            if record is None:
                logger.debug("No autogroup record found", group_id=group)
                record = GroupRecord()
        else:
            record = parse_group_record(group)
            if record is None:
                raise InvalidGroupArgument(group)

        autogroup = cls(
            record,
            store=store,
            operations=operations,
            preserve_manual=preserve_manual,
        )
        autogroup._members = await store.fetch_membership_map(record.id)
        return autogroup

    @property
    def id(self) -> int:
        return self.record.id

    @property
    def course_id(self) -> int:
        return self.record.course_id

    @property
    def id_number(self) -> str:
        return self.record.id_number

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def members(self) -> dict[int, int]:
        """Membership id -> user id, as loaded."""
        return dict(self._members)

    @property
    def is_autogroup(self) -> bool:
        """Whether the id_number carries the autogroup marker."""
        return AUTOGROUP_MARKER in self.record.id_number

    def exists(self) -> bool:
        """Whether this group has been persisted."""
        return self.record.id != 0

    def as_record(self) -> dict[str, Any]:
        """Get the full attribute set handed to the group operations."""
        return self.record.model_dump()

    def membership_count(self) -> int:
        return len(self._members)

    async def ensure_member(self, user_id: int) -> bool:
        """Make sure a user is a member of this group.

        Args:
            user_id: The user to add.

        Returns:
            True if the user was just added, False if already a member.
        """
        if user_id in self._members.values():
            return False

        await self._operations.add_member(self.record.id, user_id, AUTOGROUP_COMPONENT)
        logger.info("Added member to autogroup", group_id=self.record.id, user_id=user_id)
        return True

    async def ensure_not_member(self, user_id: int) -> bool:
        """Make sure a user is not a member of this group.

        Users that were added by hand are left alone when manual members
        are preserved.

        Args:
            user_id: The user to remove.

        Returns:
            True if the user was just removed, False otherwise.
        """
        if self._preserve_manual and await self._store.record_exists(
            MANUAL_ASSIGNMENT_TABLE,
            {"user_id": user_id, "group_id": self.record.id},
        ):
            logger.debug(
                "Keeping manually assigned member",
                group_id=self.record.id,
                user_id=user_id,
            )
            return False

        for member in self._members.values():
            if member == user_id:
                await self._operations.remove_member(self.record.id, user_id)
                logger.info(
                    "Removed member from autogroup",
                    group_id=self.record.id,
                    user_id=user_id,
                )
                return True
        return False

    async def create(self) -> None:
        """Create this group if it has not been persisted yet."""
        if self.record.id == 0:
            self.record.id = int(await self._operations.create_group(self.as_record()))
            logger.info(
                "Created autogroup",
                group_id=self.record.id,
                course_id=self.record.course_id,
                id_number=self.record.id_number,
            )

    async def is_valid_autogroup(self) -> bool:
        """Check that this group belongs to a group set of its course."""
        if not self.is_autogroup:
            return False

        group_set_id = parse_group_set_id(self.record.id_number)
        if group_set_id is None:
            return False

        return await self._store.record_exists(
            GROUP_SET_TABLE,
            {"id": group_set_id, "course_id": self.record.course_id},
        )

    async def remove(self) -> bool:
        """Delete this group. Only autogroups can be removed."""
        if not self.is_autogroup:
            return False

        removed = await self._operations.delete_group(self.record.id)
        logger.info("Removed autogroup", group_id=self.record.id, removed=removed)
        return removed

    async def update(self) -> bool:
        """Save this group's attributes. Only persisted groups can be updated."""
        if not self.exists():
            return False
        return await self._operations.update_group(self.as_record())

    def __repr__(self) -> str:
        return f"<AutoGroup(id={self.record.id}, id_number={self.record.id_number!r})>"
