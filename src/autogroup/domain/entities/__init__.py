"""Domain entities for autogroup.

Entities have no dependencies on infrastructure; anything they need from
the outside world is reached through the ports in ``autogroup.domain.ports``.
"""

from autogroup.domain.entities.autogroup import AutoGroup
from autogroup.domain.entities.group import (
    AUTOGROUP_MARKER,
    GroupRecord,
    format_id_number,
    parse_group_record,
    parse_group_set_id,
    validate_group_record,
)
from autogroup.domain.entities.hook_context import HookContext, HookResult

__all__ = [
    "AUTOGROUP_MARKER",
    "AutoGroup",
    "GroupRecord",
    "HookContext",
    "HookResult",
    "format_id_number",
    "parse_group_record",
    "parse_group_set_id",
    "validate_group_record",
]
