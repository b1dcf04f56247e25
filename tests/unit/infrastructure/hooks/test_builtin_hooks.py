"""Unit tests for the built-in manual assignment hooks."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from autogroup.core.hooks import GroupEvent, HookRegistry
from autogroup.domain.entities.hook_context import HookContext
from autogroup.infrastructure.hooks import register_builtin_hooks
from autogroup.infrastructure.hooks.builtin_hooks import (
    manual_assignment_hook,
    manual_unassignment_hook,
)
from autogroup.infrastructure.persistence.repositories import GroupRepository


def _is_manual(repo, group_id, user_id):
    return repo.record_exists("autogroup_manual", {"group_id": group_id, "user_id": user_id})


@pytest.mark.asyncio
async def test_manual_add_is_recorded(db_session):
    repo = GroupRepository(db_session)
    context = HookContext(session=db_session)

    await manual_assignment_hook(
        GroupEvent.ON_GROUP_MEMBER_ADDED,
        {"group_id": 5, "user_id": 101, "component": ""},
        context,
    )

    assert await _is_manual(repo, 5, 101)


@pytest.mark.asyncio
async def test_autogroup_add_is_not_recorded(db_session):
    repo = GroupRepository(db_session)

    await manual_assignment_hook(
        GroupEvent.ON_GROUP_MEMBER_ADDED,
        {"group_id": 5, "user_id": 101, "component": "autogroup"},
        HookContext(session=db_session),
    )

    assert not await _is_manual(repo, 5, 101)


@pytest.mark.asyncio
async def test_removal_clears_record(db_session):
    repo = GroupRepository(db_session)
    await repo.add_manual_assignment(5, 101)

    await manual_unassignment_hook(
        GroupEvent.ON_GROUP_MEMBER_REMOVED,
        {"group_id": 5, "user_id": 101},
        HookContext(session=db_session),
    )

    assert not await _is_manual(repo, 5, 101)


@pytest.mark.asyncio
async def test_hooks_without_session_are_skipped():
    await manual_assignment_hook(
        GroupEvent.ON_GROUP_MEMBER_ADDED,
        {"group_id": 5, "user_id": 101, "component": ""},
        HookContext(),
    )
    await manual_unassignment_hook(GroupEvent.ON_GROUP_MEMBER_REMOVED, None, None)


@pytest.mark.asyncio
async def test_register_builtin_hooks(db_session):
    registry = HookRegistry()
    repo = GroupRepository(db_session)
    context = HookContext(session=db_session)

    hook_ids = register_builtin_hooks(registry)

    assert len(hook_ids) == 2
    await registry.trigger(
        GroupEvent.ON_GROUP_MEMBER_ADDED,
        {"group_id": 5, "user_id": 101, "component": ""},
        context,
    )
    assert await _is_manual(repo, 5, 101)

    await registry.trigger(
        GroupEvent.ON_GROUP_MEMBER_REMOVED,
        {"group_id": 5, "user_id": 101},
        context,
    )
    assert not await _is_manual(repo, 5, 101)


@pytest.mark.asyncio
async def test_builtin_hook_failure_propagates(db_session):
    registry = HookRegistry()
    register_builtin_hooks(registry)
    failure = OperationalError("INSERT INTO autogroup_manual", {}, Exception("disk I/O error"))

    with patch.object(GroupRepository, "add_manual_assignment", AsyncMock(side_effect=failure)):
        with pytest.raises(OperationalError):
            await registry.trigger(
                GroupEvent.ON_GROUP_MEMBER_ADDED,
                {"group_id": 5, "user_id": 101, "component": ""},
                HookContext(session=db_session),
            )
