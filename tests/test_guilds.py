import datetime

import hikari
import pytest

from kura import commands
from kura import errors
from kura import redis as kura_redis
from tests import payloads


@pytest.mark.asyncio()
async def test_upsert_guild_snapshot(cache: kura_redis.RedisCache, channel: commands.CommandChannel) -> None:
    await cache.upsert_guild(payloads.guild())

    guild = await cache.get_guild(1)

    assert guild.id == 1
    assert guild.name == "Kura"
    assert guild.owner_id == 9
    assert guild.region == "europe"
    assert guild.afk_channel_id == 4
    assert guild.channels == {3, 4}
    assert guild.features == {"COMMUNITY", "NEWS"}
    assert guild.members == {5}
    assert guild.roles == {2}
    assert guild.voice_states == {5}
    assert await cache.get_channel_voice_state_ids(4) == {5}


@pytest.mark.asyncio()
async def test_upsert_guild_writes_children(cache: kura_redis.RedisCache) -> None:
    await cache.upsert_guild(payloads.guild())

    member = await cache.get_member(1, 5)
    role = await cache.get_role(1, 2)
    state = await cache.get_voice_state(1, 5)

    assert member.user.id == 5
    assert member.user.username == "ren"
    assert member.user.discriminator == "0001"
    assert member.user.avatar_hash is None
    assert member.nickname == "Ren"
    assert member.joined_at == datetime.datetime(2021, 6, 1, 12, 30, tzinfo=datetime.timezone.utc)
    assert member.role_ids == {2}
    assert role.name == "mod"
    assert role.colour == hikari.Color(0xFF00FF)
    assert role.permissions == hikari.Permissions.ADMINISTRATOR
    assert state is not None
    assert state.channel_id == 4


@pytest.mark.asyncio()
async def test_upsert_guild_replaces_membership_sets(
    cache: kura_redis.RedisCache, channel: commands.CommandChannel
) -> None:
    await cache.upsert_guild(payloads.guild())
    await cache.upsert_guild(
        payloads.guild(
            afk_channel_id=None,
            features=[],
            channels=[payloads.channel(4)],
            members=[payloads.member(6)],
            roles=[],
            voice_states=[payloads.voice_state(6, None)],
        )
    )

    guild = await cache.get_guild(1)

    assert guild.afk_channel_id is None
    assert guild.channels == {4}
    assert guild.features == frozenset()
    assert guild.members == {6}
    assert guild.roles == frozenset()
    assert guild.voice_states == frozenset()
    assert await cache.get_channel_voice_state_ids(4) == frozenset()
    assert await cache.get_voice_state(1, 5) is None
    assert await cache.get_voice_state(1, 6) is None


@pytest.mark.asyncio()
async def test_upsert_guild_groups_voice_states_by_channel(cache: kura_redis.RedisCache) -> None:
    await cache.upsert_voice_state(1, payloads.voice_state(8, 3))
    await cache.upsert_guild(
        payloads.guild(
            members=[payloads.member(5), payloads.member(6), payloads.member(7)],
            voice_states=[payloads.voice_state(5, 4), payloads.voice_state(6, 4), payloads.voice_state(7, 10)],
        )
    )

    assert await cache.get_channel_voice_state_ids(4) == {5, 6}
    assert await cache.get_channel_voice_state_ids(10) == {7}
    assert await cache.get_channel_voice_state_ids(3) == frozenset()
    assert await cache.get_voice_state_ids(1) == {5, 6, 7}
    assert set(await cache.get_voice_states(1)) == {5, 6, 7}


@pytest.mark.asyncio()
async def test_upsert_member_removes_absent_nickname(cache: kura_redis.RedisCache) -> None:
    await cache.add_member(1, payloads.member(5, roles=[2, 3]))
    await cache.upsert_member(1, payloads.member(5, roles=[3], nick=None))

    member = await cache.get_member(1, 5)

    assert member.nickname is None
    assert member.role_ids == {3}
    assert await cache.get_member_ids(1) == {5}


@pytest.mark.asyncio()
async def test_partial_member_update_keeps_flags(cache: kura_redis.RedisCache) -> None:
    await cache.add_member(1, payloads.member(5, deaf=True))
    update = payloads.member(5)
    del update["deaf"]
    del update["mute"]

    await cache.upsert_member(1, update)

    assert (await cache.get_member(1, 5)).is_deaf is True


@pytest.mark.asyncio()
async def test_delete_member(cache: kura_redis.RedisCache) -> None:
    await cache.add_member(1, payloads.member(5, roles=[2]))

    await cache.delete_member(1, 5)

    assert await cache.get_member_ids(1) == frozenset()
    with pytest.raises(errors.EntryNotFound):
        await cache.get_member(1, 5)


@pytest.mark.asyncio()
async def test_roles(cache: kura_redis.RedisCache) -> None:
    await cache.add_role(1, payloads.role(2))
    await cache.upsert_role(1, payloads.role(2, name="admin"))

    assert (await cache.get_role(1, 2)).name == "admin"
    assert await cache.get_role_ids(1) == {2}

    await cache.delete_role(1, 2)

    assert await cache.get_role_ids(1) == frozenset()
    with pytest.raises(errors.EntryNotFound):
        await cache.get_role(1, 2)


@pytest.mark.asyncio()
async def test_update_guild(cache: kura_redis.RedisCache) -> None:
    await cache.upsert_guild(payloads.guild())
    await cache.update_guild({"id": "1", "name": "Renamed", "owner_id": "10", "features": ["NEWS"]})

    guild = await cache.get_guild(1)

    assert guild.name == "Renamed"
    assert guild.owner_id == 10
    assert guild.region == ""
    assert guild.afk_channel_id is None
    assert guild.features == {"NEWS"}
    assert guild.members == {5}


@pytest.mark.asyncio()
async def test_get_guild_not_found(cache: kura_redis.RedisCache, channel: commands.CommandChannel) -> None:
    await channel.sadd("g:1:m", 5)

    with pytest.raises(errors.EntryNotFound):
        await cache.get_guild(1)


@pytest.mark.asyncio()
async def test_delete_guild(cache: kura_redis.RedisCache, channel: commands.CommandChannel) -> None:
    await cache.upsert_guild(payloads.guild())
    await cache.upsert_channel({**payloads.channel(4), "guild_id": "1"})
    await cache.upsert_guild(
        payloads.guild(guild_id=2, afk_channel_id=None, channels=[payloads.channel(20)], voice_states=[])
    )

    await cache.delete_guild(1)

    with pytest.raises(errors.EntryNotFound):
        await cache.get_guild(1)

    with pytest.raises(errors.EntryNotFound):
        await cache.get_member(1, 5)

    with pytest.raises(errors.EntryNotFound):
        await cache.get_role(1, 2)

    with pytest.raises(errors.EntryNotFound):
        await cache.get_channel(4)

    assert await cache.get_voice_state(1, 5) is None
    assert await cache.get_channel_voice_state_ids(4) == frozenset()
    assert await channel.smembers("g:1:m:5:r") == set()
    assert (await cache.get_guild(2)).members == {5}


@pytest.mark.asyncio()
async def test_delete_guilds(cache: kura_redis.RedisCache) -> None:
    await cache.upsert_guild(payloads.guild(guild_id=1))
    await cache.upsert_guild(payloads.guild(guild_id=2))

    await cache.delete_guilds([1, 2])

    for guild_id in (1, 2):
        with pytest.raises(errors.EntryNotFound):
            await cache.get_guild(guild_id)
