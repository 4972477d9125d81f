# -*- coding: utf-8 -*-
# cython: language_level=3
# BSD 3-Clause License
#
# Copyright (c) 2020-2022, Faster Speeding
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice, this
#   list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of the copyright holder nor the names of its
#   contributors may be used to endorse or promote products derived from
#   this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""The typed models Kura reconstructs from the store."""

from __future__ import annotations

__all__: typing.Sequence[str] = [
    "Channel",
    "ChannelKind",
    "Guild",
    "Member",
    "OverwriteKind",
    "PermissionOverwrite",
    "Role",
    "User",
    "VoiceState",
]

import datetime
import enum
import typing

import attrs
import hikari

from . import marshalling


class ChannelKind(enum.IntEnum):
    """The kinds of guild channel which are cached."""

    GUILD_TEXT = 0
    GUILD_VOICE = 2
    GUILD_CATEGORY = 4
    GUILD_NEWS = 5
    GUILD_STAGE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16


class OverwriteKind(enum.IntEnum):
    """What a permission overwrite targets."""

    ROLE = 0
    MEMBER = 1


@attrs.define(kw_only=True)
class User:
    """The user reference embedded in a cached member."""

    id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    username: str = attrs.field(metadata=marshalling.rule(marshalling.string))
    discriminator: str = attrs.field(default="0", metadata=marshalling.rule(marshalling.string, optional=True))
    avatar_hash: typing.Optional[str] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.string, name="avatar", optional=True)
    )
    is_bot: bool = attrs.field(default=False, metadata=marshalling.rule(marshalling.boolean, name="bot", optional=True))


@attrs.define(kw_only=True)
class Guild:
    """A cached guild.

    The ID sets are read from the guild's separate membership set keys.
    """

    id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    name: str = attrs.field(metadata=marshalling.rule(marshalling.string))
    owner_id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    region: str = attrs.field(metadata=marshalling.rule(marshalling.string))
    afk_channel_id: typing.Optional[hikari.Snowflake] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.snowflake, optional=True)
    )
    channels: frozenset[hikari.Snowflake] = attrs.field(metadata=marshalling.rule(marshalling.snowflakes))
    features: frozenset[str] = attrs.field(metadata=marshalling.rule(marshalling.strings))
    members: frozenset[hikari.Snowflake] = attrs.field(metadata=marshalling.rule(marshalling.snowflakes))
    roles: frozenset[hikari.Snowflake] = attrs.field(metadata=marshalling.rule(marshalling.snowflakes))
    voice_states: frozenset[hikari.Snowflake] = attrs.field(metadata=marshalling.rule(marshalling.snowflakes))


@attrs.define(kw_only=True)
class PermissionOverwrite:
    id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    kind: OverwriteKind = attrs.field(metadata=marshalling.rule(marshalling.enum(OverwriteKind), name="type"))
    allow: hikari.Permissions = attrs.field(metadata=marshalling.rule(marshalling.permissions))
    deny: hikari.Permissions = attrs.field(metadata=marshalling.rule(marshalling.permissions))


@attrs.define(kw_only=True)
class Channel:
    """A cached guild channel.

    Unlike the other models channels are stored as a single serialized blob.
    """

    id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    kind: ChannelKind = attrs.field(metadata=marshalling.rule(marshalling.enum(ChannelKind), name="type"))
    name: str = attrs.field(metadata=marshalling.rule(marshalling.string))
    guild_id: typing.Optional[hikari.Snowflake] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.snowflake, optional=True)
    )
    bitrate: typing.Optional[int] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.integer, optional=True)
    )
    category_id: typing.Optional[hikari.Snowflake] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.snowflake, name="parent_id", optional=True)
    )
    user_limit: typing.Optional[int] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.integer, optional=True)
    )
    permission_overwrites: list[PermissionOverwrite] = attrs.field(
        factory=list, metadata=marshalling.rule(marshalling.sequence_of(PermissionOverwrite), optional=True)
    )


@attrs.define(kw_only=True)
class Member:
    guild_id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    user_id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    user: User = attrs.field(metadata=marshalling.rule(User, embedded=True))
    is_deaf: bool = attrs.field(
        default=False, metadata=marshalling.rule(marshalling.boolean, name="deaf", optional=True)
    )
    is_mute: bool = attrs.field(
        default=False, metadata=marshalling.rule(marshalling.boolean, name="mute", optional=True)
    )
    nickname: typing.Optional[str] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.string, name="nick", optional=True)
    )
    joined_at: typing.Optional[datetime.datetime] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.timestamp, optional=True)
    )
    role_ids: frozenset[hikari.Snowflake] = attrs.field(
        metadata=marshalling.rule(marshalling.snowflakes, name="roles")
    )


@attrs.define(kw_only=True)
class Role:
    guild_id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    name: str = attrs.field(metadata=marshalling.rule(marshalling.string))
    colour: hikari.Color = attrs.field(metadata=marshalling.rule(marshalling.colour, name="color"))
    permissions: hikari.Permissions = attrs.field(metadata=marshalling.rule(marshalling.permissions))


@attrs.define(kw_only=True)
class VoiceState:
    """A user's cached voice state within a guild.

    A stored voice state always has a channel ID; `channel_id` is only `None`
    for states which were never written.
    """

    guild_id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    user_id: hikari.Snowflake = attrs.field(metadata=marshalling.rule(marshalling.snowflake))
    channel_id: typing.Optional[hikari.Snowflake] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.snowflake, optional=True)
    )
    session_id: str = attrs.field(metadata=marshalling.rule(marshalling.string))
    is_guild_muted: bool = attrs.field(
        default=False, metadata=marshalling.rule(marshalling.boolean, name="mute", optional=True)
    )
    is_self_muted: bool = attrs.field(
        default=False, metadata=marshalling.rule(marshalling.boolean, name="self_mute", optional=True)
    )
    is_self_deafened: bool = attrs.field(
        default=False, metadata=marshalling.rule(marshalling.boolean, name="self_deaf", optional=True)
    )
    is_suppressed: bool = attrs.field(
        default=False, metadata=marshalling.rule(marshalling.boolean, name="suppress", optional=True)
    )
    token: typing.Optional[str] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.string, optional=True)
    )
    endpoint: typing.Optional[str] = attrs.field(
        default=None, metadata=marshalling.rule(marshalling.string, optional=True)
    )
