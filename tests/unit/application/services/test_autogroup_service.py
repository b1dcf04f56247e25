"""Unit tests for AutogroupService."""

import pytest

from autogroup.application.services import AutogroupService
from autogroup.domain.exceptions import InvalidGroupArgument


@pytest.mark.asyncio
async def test_create_group(db_session, settings):
    """Test that a new autogroup is persisted with the group set marker."""
    service = AutogroupService(db_session, settings)

    group = await service.create_group(course_id=2, group_set_id=3, name="Blue", description="B")

    assert group.exists()
    assert group.id_number == "autogroup|3"
    reloaded = await service.load(group.id)
    assert reloaded.name == "Blue"
    assert reloaded.record.description == "B"
    assert reloaded.course_id == 2


@pytest.mark.asyncio
async def test_load_passes_preserve_manual_setting(db_session, settings):
    settings.preserve_manual = False
    service = AutogroupService(db_session, settings)
    group = await service.create_group(course_id=2, group_set_id=3, name="Blue")
    await service.group_operations.add_member(group.id, 101)
    await service.group_repo.add_manual_assignment(group.id, 101)

    reloaded = await service.load(group.id)

    assert await reloaded.ensure_not_member(101) is True


@pytest.mark.asyncio
async def test_load_invalid_record(db_session, settings):
    service = AutogroupService(db_session, settings)

    with pytest.raises(InvalidGroupArgument):
        await service.load({"id": 1, "course_id": 2, "name": "Plain", "id_number": "plain-1"})
