"""Ports the autogroup domain needs from the outside world.

The record store reads raw rows; the group operations physically change
groups and their membership (and emit the related events). Both are
injected into ``AutoGroup`` so the entity never reaches for a global
database handle or configuration object.
"""

from collections.abc import Mapping
from typing import Any, Protocol

# Table names understood by RecordStore.record_exists
GROUP_SET_TABLE = "autogroup_set"
MANUAL_ASSIGNMENT_TABLE = "autogroup_manual"

# Origin tag stored on memberships created by autogroup
AUTOGROUP_COMPONENT = "autogroup"


class RecordStore(Protocol):
    """Read access to raw group, membership and marker records."""

    async def fetch_group_record(self, group_id: int) -> dict[str, Any] | None:
        """Get the raw group row with this id, or None."""
        ...

    async def fetch_membership_map(self, group_id: int) -> dict[int, int]:
        """Get membership id -> user id for a group, ordered by membership id."""
        ...

    async def record_exists(self, table: str, filters: Mapping[str, Any]) -> bool:
        """Check whether a row matching every filter exists in a table."""
        ...


class GroupOperations(Protocol):
    """Primitive group mutations."""

    async def create_group(self, attributes: Mapping[str, Any]) -> int:
        """Create a group and return its new id."""
        ...

    async def update_group(self, attributes: Mapping[str, Any]) -> bool:
        """Update the group identified by attributes["id"]."""
        ...

    async def delete_group(self, group_id: int) -> bool:
        """Delete a group and its memberships."""
        ...

    async def add_member(self, group_id: int, user_id: int, component: str | None = None) -> bool:
        """Add a user to a group, tagged with the originating component."""
        ...

    async def remove_member(self, group_id: int, user_id: int) -> bool:
        """Remove a user from a group."""
        ...
