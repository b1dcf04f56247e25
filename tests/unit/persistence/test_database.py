"""Unit tests for DatabaseManager and init_database."""

import pytest

from autogroup.application.services import AutogroupService
from autogroup.core.config import Settings
from autogroup.infrastructure.persistence.database import DatabaseManager, init_database


@pytest.fixture
def file_settings(tmp_path):
    return Settings(
        _env_file=None,
        environment="testing",
        database_url=f"sqlite+aiosqlite:///{tmp_path}/data/autogroup.db",
    )


@pytest.mark.asyncio
async def test_init_database_creates_directory_and_tables(file_settings, tmp_path):
    db = DatabaseManager(file_settings)
    try:
        await init_database(db)

        assert (tmp_path / "data").is_dir()
        assert await db.check_connection() is True

        async with db.session() as session:
            group = await AutogroupService(session, file_settings).create_group(
                course_id=2, group_set_id=3, name="G1"
            )
            await group.ensure_member(101)

        async with db.session() as session:
            reloaded = await AutogroupService(session, file_settings).load(group.id)
            assert reloaded.name == "G1"
            assert list(reloaded.members.values()) == [101]
    finally:
        await db.disconnect()


@pytest.mark.asyncio
async def test_session_rolls_back_on_error(file_settings):
    db = DatabaseManager(file_settings)
    try:
        await init_database(db)

        with pytest.raises(RuntimeError):
            async with db.session() as session:
                await AutogroupService(session, file_settings).create_group(
                    course_id=2, group_set_id=3, name="G1"
                )
                raise RuntimeError("abort")

        async with db.session() as session:
            assert await AutogroupService(session, file_settings).group_repo.fetch_group_record(1) is None
    finally:
        await db.disconnect()
