"""Repositories for database operations."""

from autogroup.infrastructure.persistence.repositories.group_repository import GroupRepository

__all__ = ["GroupRepository"]
