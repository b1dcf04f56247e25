"""Hook context and result types for the hook system."""

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


@dataclass
class HookContext:
    """Context passed to all hook callbacks.

    Attributes:
        session: The database session the triggering mutation ran in.
            Hooks that write must use it so their changes share the
            caller's transaction.
        request_id: Correlation ID for logging and tracing.
    """

    session: Optional["AsyncSession"] = None
    request_id: str = ""

    def __post_init__(self) -> None:
        if not self.request_id:
            self.request_id = f"hk_{uuid.uuid4().hex[:12]}"


@dataclass
class HookResult:
    """Result of a hook trigger operation.

    Attributes:
        success: Whether every hook ran without raising.
        errors: Messages from hooks that failed.
    """

    success: bool = True
    errors: list[str] = field(default_factory=list)
