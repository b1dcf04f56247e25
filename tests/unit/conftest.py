"""Pytest configuration for unit tests."""

from unittest.mock import AsyncMock

import pytest

from autogroup.domain.ports import GroupOperations, RecordStore


@pytest.fixture
def mock_store() -> AsyncMock:
    """Record store returning no group and no members by default."""
    store = AsyncMock(spec=RecordStore)
    store.fetch_group_record.return_value = None
    store.fetch_membership_map.return_value = {}
    store.record_exists.return_value = False
    return store


@pytest.fixture
def mock_operations() -> AsyncMock:
    """Group operations that report success."""
    operations = AsyncMock(spec=GroupOperations)
    operations.create_group.return_value = 42
    operations.update_group.return_value = True
    operations.delete_group.return_value = True
    operations.add_member.return_value = True
    operations.remove_member.return_value = True
    return operations
