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
"""Functions used to generate the keys entries are stored under.

These key formats are stable; other processes inspecting the same store rely
on them.
"""

from __future__ import annotations

__all__: typing.Sequence[str] = [
    "channel",
    "channel_voice_states",
    "choices",
    "guild",
    "guild_channels",
    "guild_features",
    "guild_members",
    "guild_roles",
    "guild_voice_states",
    "join",
    "member",
    "member_roles",
    "role",
    "sharder_to",
    "user_voice_state",
]

import typing

if typing.TYPE_CHECKING:
    import hikari


def channel(channel_id: hikari.Snowflakeish, /) -> str:
    return f"ch:{int(channel_id)}"


def channel_voice_states(channel_id: hikari.Snowflakeish, /) -> str:
    """Key of the set of user IDs currently connected to a voice channel."""
    return f"ch:{int(channel_id)}:v"


def choices(guild_id: hikari.Snowflakeish, /) -> str:
    return f"c:{int(guild_id)}"


def join(guild_id: hikari.Snowflakeish, /) -> str:
    return f"j:{int(guild_id)}"


def guild(guild_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}"


def guild_channels(guild_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}:c"


def guild_features(guild_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}:f"


def guild_members(guild_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}:m"


def guild_roles(guild_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}:r"


def guild_voice_states(guild_id: hikari.Snowflakeish, /) -> str:
    """Key of the set of user IDs which have a voice state in a guild."""
    return f"g:{int(guild_id)}:v"


def member(guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}:m:{int(user_id)}"


def member_roles(guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}:m:{int(user_id)}:r"


def role(guild_id: hikari.Snowflakeish, role_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}:r:{int(role_id)}"


def user_voice_state(guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish, /) -> str:
    return f"g:{int(guild_id)}:v:{int(user_id)}"


def sharder_to(shard_id: int, /) -> str:
    """Key of the list used as an inbox for messages sent to the sharder by a shard."""
    return f"sharder:to:{int(shard_id)}"
