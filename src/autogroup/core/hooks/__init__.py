"""Hook system core module.

Group mutations trigger hook events so that other parts of the system
can react to them (for example, by tracking manual assignments).

Example usage:
    from autogroup.core.hooks import GroupEvent, HookRegistry

    registry = HookRegistry()

    async def on_member_added(event, data, context):
        logger.info("Member added", user_id=data["user_id"])

    registry.register(GroupEvent.ON_GROUP_MEMBER_ADDED, on_member_added)
"""

from autogroup.core.hooks.hook_events import GroupEvent
from autogroup.core.hooks.hook_registry import HookRegistry, RegisteredHook

__all__ = [
    "GroupEvent",
    "HookRegistry",
    "RegisteredHook",
]
