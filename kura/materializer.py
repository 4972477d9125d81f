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
"""Reconstruction of cached models from store reads."""

from __future__ import annotations

__all__: typing.Sequence[str] = [
    "ENTITY_TYPES",
    "materialize",
    "materialize_blob",
    "materialize_ids",
]

import typing
from collections import abc as collections

import hikari

from . import errors
from . import marshalling
from . import models

_EntityT = typing.TypeVar("_EntityT")

ENTITY_TYPES: typing.Final[collections.Set[type[typing.Any]]] = frozenset(
    (
        models.Channel,
        models.Guild,
        models.Member,
        models.PermissionOverwrite,
        models.Role,
        models.User,
        models.VoiceState,
    )
)
"""The model types which can be materialized."""

_RawHashT = typing.Union[collections.Mapping[typing.Any, typing.Any], collections.Sequence[typing.Any]]


def _check_entity(cls: type[typing.Any], /) -> None:
    if cls not in ENTITY_TYPES:
        raise TypeError(f"{cls!r} isn't a cached entity type")


def materialize(
    cls: type[_EntityT], raw: typing.Optional[_RawHashT], /, **extra: typing.Any
) -> typing.Optional[_EntityT]:
    """Materialize a hash-backed entity.

    Parameters
    ----------
    cls : type[_EntityT]
        The model type to build.
    raw : typing.Optional[collections.abc.Mapping | collections.abc.Sequence]
        The hash read; either a mapping of fields to values or a flat sequence
        of alternating field names and values.
    **extra : typing.Any
        Additional fields to merge into the record before decoding. This is
        used for identifiers which are only part of the entry's key and for
        membership sets read from separate keys (which may be passed as the
        raw set-members result).

    Returns
    -------
    typing.Optional[_EntityT]
        The entity or `None` if the hash was empty.

    Raises
    ------
    kura.errors.InvalidDataFound
        If the stored data doesn't match the shape expected for the type.
    """
    _check_entity(cls)
    if not raw:
        return None

    record = marshalling.build_record(raw)
    for name, value in extra.items():
        if value is not None:
            record[name] = marshalling.coerce_value(value)

    return marshalling.decode_record(cls, record)


def materialize_blob(
    cls: type[_EntityT],
    raw: typing.Optional[bytes],
    /,
    *,
    loads: collections.Callable[[bytes], typing.Any],
) -> typing.Optional[_EntityT]:
    """Materialize an entity which is stored as a single serialized value.

    Returns
    -------
    typing.Optional[_EntityT]
        The entity or `None` if the key was absent.

    Raises
    ------
    kura.errors.InvalidDataFound
        If the value couldn't be deserialized or has an unexpected shape.
    """
    _check_entity(cls)
    if raw is None:
        return None

    try:
        record = loads(raw)

    except ValueError as exc:
        raise errors.InvalidDataFound(f"Couldn't deserialize stored {cls.__name__}", exception=exc) from exc

    if not isinstance(record, collections.Mapping):
        raise errors.InvalidDataFound(f"Expected a {cls.__name__} record but got {type(record).__name__}")

    return marshalling.decode_record(cls, record)


def materialize_ids(raw: typing.Optional[collections.Iterable[typing.Any]], /) -> frozenset[hikari.Snowflake]:
    """Materialize a set-members read of identifiers.

    Raises
    ------
    kura.errors.MalformedIdentifier
        If the set contains a non-snowflake member.
    """
    if not raw:
        return frozenset()

    return marshalling.snowflakes(marshalling.coerce_value(list(raw)))
