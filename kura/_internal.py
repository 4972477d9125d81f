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
from __future__ import annotations

__all__: list[str] = ["ListenerProto", "RawListenerProto", "as_listener", "as_raw_listener", "find_listeners"]

import inspect
import typing
from collections import abc as collections

import hikari

_T = typing.TypeVar("_T")
_EventT_inv = typing.TypeVar("_EventT_inv", bound=hikari.Event)
_EventT = typing.TypeVar("_EventT", bound=hikari.Event)
_CallbackT = collections.Callable[["_T", _EventT], collections.Coroutine[typing.Any, typing.Any, None]]


@typing.runtime_checkable
class ListenerProto(typing.Protocol[_EventT_inv]):
    """Protocol of an event listener method."""

    async def __call__(self, event: _EventT_inv, /) -> None:
        raise NotImplementedError

    @property
    def __kura_event_type__(self) -> type[_EventT_inv]:
        """The event type this listener is listening for."""
        raise NotImplementedError


@typing.runtime_checkable
class RawListenerProto(typing.Protocol):
    """Protocol of a raw event listener method."""

    async def __call__(self, event: hikari.ShardPayloadEvent, /) -> None:
        raise NotImplementedError

    @property
    def __kura_event_names__(self) -> collections.Sequence[str]:
        """Sequence of the raw event names this is listening for."""
        raise NotImplementedError


def as_listener(
    event_type: type[_EventT], /
) -> collections.Callable[[_CallbackT[_T, _EventT]], _CallbackT[_T, _EventT]]:
    """Mark a method as an event listener on a client implementation.

    Parameters
    ----------
    event_type
        Type of the event this is listening for.
    """

    def decorator(listener: _CallbackT[_T, _EventT], /) -> _CallbackT[_T, _EventT]:
        listener.__kura_event_type__ = event_type  # type: ignore
        assert isinstance(listener, ListenerProto), "Incorrect attributes set for listener"
        return listener

    return decorator


def as_raw_listener(
    event_name: str, /, *event_names: str
) -> collections.Callable[[_CallbackT[_T, hikari.ShardPayloadEvent]], _CallbackT[_T, hikari.ShardPayloadEvent]]:
    """Mark a method as a raw event listener on a client implementation.

    Parameters
    ----------
    event_name
        Name of the raw event this is listening for.
    event_names
        Name of other raw events this is listening for.
    """
    event_names = (event_name.upper(), *(name.upper() for name in event_names))

    def decorator(listener: _CallbackT[_T, hikari.ShardPayloadEvent], /) -> _CallbackT[_T, hikari.ShardPayloadEvent]:
        listener.__kura_event_names__ = event_names  # type: ignore
        assert isinstance(listener, RawListenerProto), "Incorrect attributes set for raw listener"
        return listener

    return decorator


def find_listeners(
    obj: typing.Any, /
) -> tuple[dict[type[hikari.Event], list[ListenerProto[hikari.Event]]], dict[str, list[RawListenerProto]]]:
    """Find all the event and raw-event listener methods on an object.

    Returns
    -------
    tuple[dict[type[hikari.Event], list[ListenerProto]], dict[str, list[RawListenerProto]]]
        A tuple of the event type to listeners mapping and the raw event name
        to raw listeners mapping.
    """
    listeners: dict[type[hikari.Event], list[ListenerProto[hikari.Event]]] = {}
    raw_listeners: dict[str, list[RawListenerProto]] = {}
    for _, member in inspect.getmembers(obj):
        if isinstance(member, ListenerProto):
            listeners.setdefault(member.__kura_event_type__, []).append(member)

        if isinstance(member, RawListenerProto):
            for name in member.__kura_event_names__:
                raw_listeners.setdefault(name, []).append(member)

    return listeners, raw_listeners
