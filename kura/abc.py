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
"""Abstract interfaces for the cache resources implemented by Kura.

Resources accept raw gateway payloads (as found on `hikari.ShardPayloadEvent`)
when writing and return the models defined in `kura.models` when reading.
"""

from __future__ import annotations

__all__: typing.Sequence[str] = [
    "Cache",
    "ChoiceCache",
    "GuildCache",
    "GuildChannelCache",
    "JoinCache",
    "MemberCache",
    "Resource",
    "RoleCache",
    "SharderInbox",
    "VoiceStateCache",
]

import abc
import typing

if typing.TYPE_CHECKING:
    from collections import abc as collections

    import hikari

    from . import models

_ObjectT = typing.Mapping[str, typing.Any]


class Resource(abc.ABC):
    """The basic interface which all cache resources should implement."""

    __slots__: typing.Sequence[str] = ()

    @property
    @abc.abstractmethod
    def is_alive(self) -> bool:
        """Whether this client is alive."""

    @abc.abstractmethod
    async def open(self) -> None:
        """Startup the resource(s) and allow them to connect to their relevant backend(s).

        .. note::
            This should pass without raising if called on an already opened
            resource.
        """

    @abc.abstractmethod
    async def close(self) -> None:
        """Close the resource(s) and allow them to disconnect from their relevant backend(s).

        .. note::
            This should pass without raising if called on an already closed
            resource.
        """


class VoiceStateCache(Resource, abc.ABC):
    """The traits of an implementation which supports a voice state cache.

    Voice states are kept consistent with two denormalized membership sets:
    the guild's set of users in voice and each voice channel's set of users.
    """

    __slots__: typing.Sequence[str] = ()

    @abc.abstractmethod
    async def upsert_voice_state(self, guild_id: hikari.Snowflakeish, payload: _ObjectT, /) -> None:
        """Apply a user's voice state transition.

        If the payload has a channel ID then the voice state is written and
        the user is moved into that channel's membership set; otherwise the
        user is removed from their previous channel's set and the guild's set
        and their voice state is deleted.

        .. note::
            This is a sequence of separate store commands; a reader may see
            the membership sets and voice state disagree while it runs.

        Parameters
        ----------
        guild_id : hikari.snowflakes.Snowflakeish
            The ID of the guild the voice state is in.
        payload : typing.Mapping[str, typing.Any]
            The raw voice state payload.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
            This may be a sign of underlying network or database issues.
        kura.errors.InvalidDataFound
            Raised when the currently stored voice state is invalid.
        """

    @abc.abstractmethod
    async def upsert_voice_state_info(
        self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish, /, *, endpoint: str, token: str
    ) -> None:
        """Set the voice server connection info on a user's voice state.

        Parameters
        ----------
        guild_id : hikari.snowflakes.Snowflakeish
            The ID of the guild the voice state is in.
        user_id : hikari.snowflakes.Snowflakeish
            The ID of the user the voice state is for.
        endpoint : str
            The voice server's endpoint.
        token : str
            The voice session's token.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        kura.errors.EntryNotFound
            Raised when the user has no stored voice state.
        """

    @abc.abstractmethod
    async def delete_voice_state(self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish, /) -> bool:
        """Remove a voice state from the cache.

        .. warning::
            This only removes the user from the guild's voice state set; the
            channel's membership set is left as is since the user's channel
            isn't known without reading the stored state first. Use
            `upsert_voice_state` with a payload without a channel ID to fully
            clear a user's voice state.

        Returns
        -------
        bool
            Whether a voice state was stored for the user.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        """

    @abc.abstractmethod
    async def delete_voice_states(self, guild_id: hikari.Snowflakeish, /) -> int:
        """Remove all the voice states cached for a guild.

        .. note::
            Channel membership sets aren't cleared by this.

        Returns
        -------
        int
            The amount of voice states which were stored for the guild.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        """

    @abc.abstractmethod
    async def get_voice_state(
        self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish, /
    ) -> typing.Optional[models.VoiceState]:
        """Get a voice state from the cache.

        Returns
        -------
        typing.Optional[kura.models.VoiceState]
            The voice state or `None` if the user has no voice state.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        kura.errors.InvalidDataFound
            Raised when the data retrieved from the backend datastore was
            either invalid for this implementation or corrupt.
        """

    @abc.abstractmethod
    async def get_voice_states(
        self, guild_id: hikari.Snowflakeish, /
    ) -> collections.Mapping[hikari.Snowflake, models.VoiceState]:
        """Get all the voice states cached for a guild.

        Returns
        -------
        collections.abc.Mapping[hikari.snowflakes.Snowflake, kura.models.VoiceState]
            Mapping of user IDs to voice states.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        kura.errors.EntryNotFound
            Raised when a user in the guild's voice state set has no stored
            voice state.
        kura.errors.InvalidDataFound
            Raised when the data retrieved from the backend datastore was
            either invalid for this implementation or corrupt.
        """

    @abc.abstractmethod
    async def get_voice_state_ids(self, guild_id: hikari.Snowflakeish, /) -> frozenset[hikari.Snowflake]:
        """Get the IDs of the users with a voice state in a guild."""

    @abc.abstractmethod
    async def get_channel_voice_state_ids(self, channel_id: hikari.Snowflakeish, /) -> frozenset[hikari.Snowflake]:
        """Get the IDs of the users connected to a voice channel."""


class MemberCache(Resource, abc.ABC):
    """The traits of an implementation which supports a member cache."""

    __slots__: typing.Sequence[str] = ()

    @abc.abstractmethod
    async def upsert_member(self, guild_id: hikari.Snowflakeish, payload: _ObjectT, /) -> None:
        """Write a member's fields and role set.

        This doesn't add the member to the guild's member set, see `add_member`.
        """

    @abc.abstractmethod
    async def add_member(self, guild_id: hikari.Snowflakeish, payload: _ObjectT, /) -> None:
        """Write a member and add them to the guild's member set."""

    @abc.abstractmethod
    async def delete_member(self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish, /) -> None:
        """Remove a member from the cache."""

    @abc.abstractmethod
    async def get_member(self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish, /) -> models.Member:
        """Get a member from the cache.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        kura.errors.EntryNotFound
            Raised when the targeted entity wasn't found.
        kura.errors.InvalidDataFound
            Raised when the data retrieved from the backend datastore was
            either invalid for this implementation or corrupt.
        """

    @abc.abstractmethod
    async def get_member_ids(self, guild_id: hikari.Snowflakeish, /) -> frozenset[hikari.Snowflake]:
        """Get the IDs of the members cached for a guild."""


class RoleCache(Resource, abc.ABC):
    """The traits of an implementation which supports a role cache."""

    __slots__: typing.Sequence[str] = ()

    @abc.abstractmethod
    async def upsert_role(self, guild_id: hikari.Snowflakeish, payload: _ObjectT, /) -> None:
        """Write a role's fields.

        This doesn't add the role to the guild's role set, see `add_role`.
        """

    @abc.abstractmethod
    async def add_role(self, guild_id: hikari.Snowflakeish, payload: _ObjectT, /) -> None:
        """Write a role and add it to the guild's role set."""

    @abc.abstractmethod
    async def delete_role(self, guild_id: hikari.Snowflakeish, role_id: hikari.Snowflakeish, /) -> None:
        """Remove a role from the cache."""

    @abc.abstractmethod
    async def get_role(self, guild_id: hikari.Snowflakeish, role_id: hikari.Snowflakeish, /) -> models.Role:
        """Get a role from the cache.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        kura.errors.EntryNotFound
            Raised when the targeted entity wasn't found.
        kura.errors.InvalidDataFound
            Raised when the data retrieved from the backend datastore was
            either invalid for this implementation or corrupt.
        """

    @abc.abstractmethod
    async def get_role_ids(self, guild_id: hikari.Snowflakeish, /) -> frozenset[hikari.Snowflake]:
        """Get the IDs of the roles cached for a guild."""


class GuildCache(Resource, abc.ABC):
    """The traits of an implementation which supports a guild cache."""

    __slots__: typing.Sequence[str] = ()

    @abc.abstractmethod
    async def upsert_guild(self, payload: _ObjectT, /) -> None:
        """Write a full guild snapshot.

        The guild's membership sets (channels, features, members, roles and
        voice states) are replaced rather than merged and its members, roles
        and voice states are written.

        .. note::
            Writes are ordered but not atomic; re-applying a snapshot after a
            partial failure converges on the snapshot's state.

        Parameters
        ----------
        payload : typing.Mapping[str, typing.Any]
            The raw guild create payload.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        """

    @abc.abstractmethod
    async def update_guild(self, payload: _ObjectT, /) -> None:
        """Write a guild's own fields and features from a partial guild payload."""

    @abc.abstractmethod
    async def delete_guild(self, guild_id: hikari.Snowflakeish, /) -> None:
        """Remove a guild along with its membership sets, members, roles and voice states."""

    @abc.abstractmethod
    async def delete_guilds(self, guild_ids: collections.Iterable[hikari.Snowflakeish], /) -> None:
        """Remove multiple guilds from the cache."""

    @abc.abstractmethod
    async def get_guild(self, guild_id: hikari.Snowflakeish, /) -> models.Guild:
        """Get a guild from the cache.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        kura.errors.EntryNotFound
            Raised when the targeted entity wasn't found.
        kura.errors.InvalidDataFound
            Raised when the data retrieved from the backend datastore was
            either invalid for this implementation or corrupt.
        """


class GuildChannelCache(Resource, abc.ABC):
    """The traits of an implementation which supports a guild channel cache."""

    __slots__: typing.Sequence[str] = ()

    @abc.abstractmethod
    async def upsert_channel(self, payload: _ObjectT, /) -> None:
        """Write a channel and add it to its guild's channel set."""

    @abc.abstractmethod
    async def delete_channel(
        self, channel_id: hikari.Snowflakeish, /, *, guild_id: typing.Optional[hikari.Snowflakeish] = None
    ) -> None:
        """Remove a channel from the cache.

        If `guild_id` is passed then the channel is also removed from the
        guild's channel set.
        """

    @abc.abstractmethod
    async def delete_channels(self, channel_ids: collections.Iterable[hikari.Snowflakeish], /) -> None:
        """Remove multiple channels from the cache."""

    @abc.abstractmethod
    async def get_channel(self, channel_id: hikari.Snowflakeish, /) -> models.Channel:
        """Get a channel from the cache.

        Raises
        ------
        kura.errors.BackendError
            Raised when this failed to communicate with the cache's backend.
        kura.errors.EntryNotFound
            Raised when the targeted entity wasn't found.
        kura.errors.InvalidDataFound
            Raised when the data retrieved from the backend datastore was
            either invalid for this implementation or corrupt.
        """

    @abc.abstractmethod
    async def get_channels(
        self, channel_ids: collections.Iterable[hikari.Snowflakeish], /
    ) -> collections.Mapping[hikari.Snowflake, models.Channel]:
        """Get multiple channels from the cache.

        Channels which aren't cached are left out of the returned mapping.
        """


class ChoiceCache(Resource, abc.ABC):
    """The traits of an implementation which stores per-guild choice lists."""

    __slots__: typing.Sequence[str] = ()

    @abc.abstractmethod
    async def get_choices(self, guild_id: hikari.Snowflakeish, /) -> collections.Sequence[str]:
        """Get all the choices stored for a guild, newest first."""

    @abc.abstractmethod
    async def get_choices_ranged(
        self, guild_id: hikari.Snowflakeish, start: int, stop: int, /
    ) -> collections.Sequence[str]:
        """Get the choices within `start <= index <= stop` for a guild.

        Negative indexes count from the end of the list.
        """

    @abc.abstractmethod
    async def push_choices(self, guild_id: hikari.Snowflakeish, choices: collections.Iterable[str], /) -> None:
        """Push choices onto the front of a guild's choice list."""

    @abc.abstractmethod
    async def delete_choices(self, guild_id: hikari.Snowflakeish, /) -> None:
        """Remove a guild's choice list."""


class JoinCache(Resource, abc.ABC):
    """The traits of an implementation which stores the voice channel to join in each guild."""

    __slots__: typing.Sequence[str] = ()

    @abc.abstractmethod
    async def get_join(self, guild_id: hikari.Snowflakeish, /) -> typing.Optional[hikari.Snowflake]:
        """Get the ID of the channel to join in a guild, if set."""

    @abc.abstractmethod
    async def set_join(self, guild_id: hikari.Snowflakeish, channel_id: hikari.Snowflakeish, /) -> None:
        """Set the channel to join in a guild."""

    @abc.abstractmethod
    async def delete_join(self, guild_id: hikari.Snowflakeish, /) -> None:
        """Unset the channel to join in a guild."""


class SharderInbox(Resource, abc.ABC):
    """The traits of an implementation which can pass messages to the sharder."""

    __slots__: typing.Sequence[str] = ()

    @abc.abstractmethod
    async def send_to_sharder(self, shard_id: int, data: bytes, /) -> None:
        """Append a message to a shard's sharder inbox."""


class Cache(
    GuildCache,
    GuildChannelCache,
    MemberCache,
    RoleCache,
    VoiceStateCache,
    ChoiceCache,
    JoinCache,
    SharderInbox,
    abc.ABC,
):
    """Protocol of a cache which implements all the defined resources."""

    __slots__: typing.Sequence[str] = ()
