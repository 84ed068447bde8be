import asyncio
from importlib.metadata import version

from taskapi.infra.tortoise_client.database import open_database
from taskapi.infra.tortoise_client.models import User


def test_tortoise_release_line():
    """init_database relies on the process-wide connections of the 0.x line"""
    major = int(version("tortoise-orm").split(".")[0])

    assert major == 0


async def test_open_database_serves_other_tasks(test_settings):
    async with open_database(test_settings) as db:
        async def count_users():
            return await User.all().using_db(db).count()

        assert await asyncio.create_task(count_users()) == 0
