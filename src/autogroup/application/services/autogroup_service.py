"""Autogroup service.

Builds ``AutoGroup`` entities wired to the SQLAlchemy record store, the
group mutation primitives and the configured manual-member policy.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from autogroup.core.config import Settings, get_settings
from autogroup.core.hooks import HookRegistry
from autogroup.core.logging import LoggingContext, get_logger
from autogroup.domain.entities.autogroup import AutoGroup
from autogroup.domain.entities.group import format_id_number
from autogroup.infrastructure.persistence.repositories import GroupRepository
from autogroup.infrastructure.services import SqlGroupOperations

logger = get_logger(__name__)


class AutogroupService:
    """Entry point for loading and creating autogroups."""

    def __init__(
        self,
        session: AsyncSession,
        settings: Settings | None = None,
        hook_registry: HookRegistry | None = None,
    ) -> None:
        """Initialize the autogroup service.

        Args:
            session: SQLAlchemy async session shared by reads and writes.
            settings: Settings; loaded from the environment if omitted.
            hook_registry: Registry notified of group changes.
        """
        self.session = session
        self.settings = settings or get_settings()
        self.group_repo = GroupRepository(session)
        self.group_operations = SqlGroupOperations(session, hook_registry)

    async def load(self, group: int | Mapping[str, Any]) -> AutoGroup:
        """Load an autogroup by id or from a raw group record.

        Raises:
            InvalidGroupArgument: If the input is not a valid autogroup.
        """
        return await AutoGroup.load(
            group,
            store=self.group_repo,
            operations=self.group_operations,
            preserve_manual=self.settings.preserve_manual,
        )

    async def create_group(
        self,
        course_id: int,
        group_set_id: int,
        name: str,
        **attributes: Any,
    ) -> AutoGroup:
        """Create a new autogroup for a group set.

        Args:
            course_id: Course the group belongs to.
            group_set_id: Group set that owns the group.
            name: Group name.
            **attributes: Any other group attributes.

        Returns:
            The persisted autogroup.
        """
        record = {
            **attributes,
            "id": 0,
            "course_id": course_id,
            "id_number": format_id_number(group_set_id),
            "name": name,
        }
        with LoggingContext(course_id=course_id, group_set_id=group_set_id):
            autogroup = await self.load(record)
            await autogroup.create()
        return autogroup
