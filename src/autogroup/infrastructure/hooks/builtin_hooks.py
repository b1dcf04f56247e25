"""Built-in hooks for autogroup.

These hooks keep the manual assignment markers in step with membership.
They run as part of the membership change, so a failure propagates:
- manual_assignment_hook: Records members added to a group by hand
- manual_unassignment_hook: Clears the record when such a member leaves
"""

from typing import Any, Optional

from autogroup.core.hooks.hook_events import GroupEvent
from autogroup.core.hooks.hook_registry import HookRegistry
from autogroup.core.logging import get_logger
from autogroup.domain.entities.hook_context import HookContext
from autogroup.domain.ports import AUTOGROUP_COMPONENT
from autogroup.infrastructure.persistence.repositories import GroupRepository

logger = get_logger(__name__)


async def manual_assignment_hook(
    event: str,
    data: Optional[dict[str, Any]],
    context: Optional[HookContext],
) -> None:
    """Mark a member as manually assigned.

    Every member added by a component other than autogroup is treated as a
    manual assignment, which protects it from automatic removal when
    manual members are preserved.
    """
    if data is None or context is None or context.session is None:
        return
    if data.get("component") == AUTOGROUP_COMPONENT:
        return

    recorded = await GroupRepository(context.session).add_manual_assignment(
        data["group_id"], data["user_id"]
    )
    if recorded:
        logger.debug(
            "Manual assignment recorded",
            group_id=data["group_id"],
            user_id=data["user_id"],
        )


async def manual_unassignment_hook(
    event: str,
    data: Optional[dict[str, Any]],
    context: Optional[HookContext],
) -> None:
    """Forget the manual assignment of a member that left the group."""
    if data is None or context is None or context.session is None:
        return

    await GroupRepository(context.session).remove_manual_assignment(
        data["group_id"], data["user_id"]
    )


def register_builtin_hooks(registry: HookRegistry) -> list[str]:
    """Register all built-in hooks with the registry.

    Built-in hooks use negative priority so user hooks run first, and
    stop_on_error so a failed marker write fails the membership change.

    Args:
        registry: The hook registry to register with.

    Returns:
        List of registered hook IDs.
    """
    hook_ids = [
        registry.register(
            event=GroupEvent.ON_GROUP_MEMBER_ADDED,
            callback=manual_assignment_hook,
            priority=-100,
            stop_on_error=True,
        ),
        registry.register(
            event=GroupEvent.ON_GROUP_MEMBER_REMOVED,
            callback=manual_unassignment_hook,
            priority=-100,
            stop_on_error=True,
        ),
    ]

    logger.info("Built-in hooks registered", count=len(hook_ids))
    return hook_ids
