import collections.abc

import fakeredis
import pytest
import pytest_asyncio
from fakeredis import aioredis as fake_aioredis

from kura import commands
from kura import redis as kura_redis


@pytest.fixture()
def server() -> fakeredis.FakeServer:
    return fakeredis.FakeServer()


@pytest.fixture()
def client(server: fakeredis.FakeServer) -> fake_aioredis.FakeRedis:
    return fake_aioredis.FakeRedis(server=server)


@pytest_asyncio.fixture()
async def channel(
    client: fake_aioredis.FakeRedis,
) -> collections.abc.AsyncIterator[commands.CommandChannel]:
    command_channel = commands.CommandChannel(client)
    await command_channel.open()
    yield command_channel
    await command_channel.close()


@pytest_asyncio.fixture()
async def cache(channel: commands.CommandChannel) -> collections.abc.AsyncIterator[kura_redis.RedisCache]:
    redis_cache = kura_redis.RedisCache(channel)
    await redis_cache.open()
    yield redis_cache
    await redis_cache.close()
