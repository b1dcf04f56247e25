"""Infrastructure services."""

from autogroup.infrastructure.services.group_operations import SqlGroupOperations

__all__ = ["SqlGroupOperations"]
