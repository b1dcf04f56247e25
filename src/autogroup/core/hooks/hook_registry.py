"""Hook registry for group events.

Hooks run in priority order after each group change. Hooks registered
with ``stop_on_error`` are part of the change itself: their exceptions
propagate to the caller unchanged. Failures in any other hook are logged
and collected on the result.
"""

import inspect
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Optional

from autogroup.core.logging import get_logger
from autogroup.domain.entities.hook_context import HookContext, HookResult

logger = get_logger(__name__)


@dataclass
class RegisteredHook:
    """A callback registered for one event.

    Attributes:
        id: Unique identifier for this registration.
        event: The event the hook listens to.
        callback: Called with (event, data, context).
        priority: Higher runs earlier; ties run in registration order.
        stop_on_error: Whether a failure aborts the chain and propagates.
        registration_order: Position among all registrations.
    """

    id: str
    event: str
    callback: Callable
    priority: int = 0
    stop_on_error: bool = False
    registration_order: int = 0


class HookRegistry:
    """Registers group event hooks and runs them.

    Example:
        registry = HookRegistry()
        registry.register(GroupEvent.ON_GROUP_MEMBER_ADDED, track_member, priority=10)

        await registry.trigger(
            GroupEvent.ON_GROUP_MEMBER_ADDED,
            data={"group_id": 4, "user_id": 7, "component": ""},
            context=HookContext(session=session),
        )
    """

    def __init__(self) -> None:
        self._hooks: dict[str, list[RegisteredHook]] = {}
        self._registration_counter = 0

    def register(
        self,
        event: str,
        callback: Callable,
        priority: int = 0,
        stop_on_error: bool = False,
    ) -> str:
        """Register a hook for an event.

        Returns:
            The id of the new registration.
        """
        self._registration_counter += 1
        hooks = self._hooks.setdefault(event, [])
        hook = RegisteredHook(
            id=f"hook_{uuid.uuid4().hex[:12]}",
            event=event,
            callback=callback,
            priority=priority,
            stop_on_error=stop_on_error,
            registration_order=self._registration_counter,
        )
        hooks.append(hook)
        hooks.sort(key=lambda h: (-h.priority, h.registration_order))

        logger.debug("Hook registered", hook_id=hook.id, hook_event=event, priority=priority)
        return hook.id

    async def trigger(
        self,
        event: str,
        data: Optional[dict[str, Any]] = None,
        context: Optional[HookContext] = None,
    ) -> HookResult:
        """Run every hook registered for an event.

        Raises:
            Exception: Whatever a ``stop_on_error`` hook raised.
        """
        result = HookResult()

        for hook in self._hooks.get(event, []):
            try:
                outcome = hook.callback(event, data, context)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as e:
                logger.error(
                    "Hook execution failed",
                    hook_id=hook.id,
                    hook_event=event,
                    error=str(e),
                    stop_on_error=hook.stop_on_error,
                )
                if hook.stop_on_error:
                    raise
                result.success = False
                result.errors.append(f"Hook {hook.id} failed: {e}")

        return result
