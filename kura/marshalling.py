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
"""Coercion of loosely-typed store results into typed models.

Store replies are flat: hashes come back as field/value pairs where every value
is a byte string. Reads are turned into a generic record with `build_record`
and then decoded with `decode_record`, which applies the `FieldRule` attached
to each field of the target `attrs` class.
"""

from __future__ import annotations

__all__: typing.Sequence[str] = [
    "FieldRule",
    "RecordT",
    "boolean",
    "build_record",
    "coerce_value",
    "colour",
    "decode_record",
    "enum",
    "integer",
    "pair_fields",
    "permissions",
    "rule",
    "sequence_of",
    "snowflake",
    "snowflakes",
    "string",
    "strings",
    "timestamp",
]

import datetime
import enum as enum_
import logging
import re
import typing
from collections import abc as collections

import attrs
import hikari

from . import errors

_T = typing.TypeVar("_T")
_EnumT = typing.TypeVar("_EnumT", bound=enum_.Enum)
RecordT = dict[str, typing.Any]
"""Type hint of a generic, string-keyed record built from a store read."""

_LOGGER: typing.Final[logging.Logger] = logging.getLogger("hikari.kura.marshalling")
_RULE_KEY: typing.Final[str] = "kura.rule"
_MAX_SNOWFLAKE: typing.Final[int] = (1 << 64) - 1
# Only canonical integers are converted so that str(int(value)) == value always holds.
_INTEGER_PATTERN: typing.Final[re.Pattern[str]] = re.compile(r"0|-?[1-9][0-9]*")


@attrs.frozen
class FieldRule:
    """How a single model field is read from a generic record."""

    cast: collections.Callable[[typing.Any], typing.Any]
    """Callback used to convert the coerced value to the field's type.

    For embedded fields this is the `attrs` class being embedded.
    """

    name: typing.Optional[str] = None
    """Name of the field in the record if this differs from the attribute's name."""

    optional: bool = False
    """Whether this field may be absent from the record."""

    embedded: bool = False
    """Whether this field is an object stored as `"{name}.{sub_field}"` entries."""


def rule(
    cast: collections.Callable[[typing.Any], typing.Any],
    /,
    *,
    name: typing.Optional[str] = None,
    optional: bool = False,
    embedded: bool = False,
) -> dict[str, FieldRule]:
    """Build `attrs` field metadata which declares how a field is decoded."""
    return {_RULE_KEY: FieldRule(cast, name=name, optional=optional, embedded=embedded)}


def coerce_value(value: typing.Any, /) -> typing.Any:
    """Coerce a raw store value into a generic structured value.

    Byte strings are decoded, canonical integer strings become `int`, sets,
    lists and tuples are walked recursively into lists and everything else is
    left as is.
    """
    if isinstance(value, (bytes, bytearray)):
        value = _decode(value)

    if isinstance(value, str):
        return int(value) if _INTEGER_PATTERN.fullmatch(value) else value

    if isinstance(value, (list, tuple, set, frozenset)):
        return [coerce_value(entry) for entry in value if entry is not None]

    return value


def pair_fields(flat: collections.Sequence[typing.Any], /) -> list[tuple[str, typing.Any]]:
    """Pair an alternating field/value sequence into `(field, raw value)` tuples.

    Raises
    ------
    kura.errors.InvalidDataFound
        If the sequence has an odd length.
    """
    if len(flat) % 2:
        raise errors.InvalidDataFound(f"Expected an even number of field/value entries but got {len(flat)}")

    iterator = iter(flat)
    return [(_field_name(name), value) for name, value in zip(iterator, iterator)]


def _decode(value: typing.Union[bytes, bytearray], /) -> str:
    try:
        return value.decode("utf-8")

    except UnicodeDecodeError as exc:
        raise errors.InvalidDataFound(f"Invalid UTF-8 value {bytes(value)!r}", exception=exc) from exc


def _field_name(name: typing.Any, /) -> str:
    if isinstance(name, (bytes, bytearray)):
        return _decode(name)

    return str(name)


def build_record(
    raw: typing.Union[collections.Mapping[typing.Any, typing.Any], collections.Sequence[typing.Any]], /
) -> RecordT:
    """Build a generic record from a flat field/value sequence or a mapping.

    Absent (`None`) values are left out of the record.
    """
    pairs = ((_field_name(k), v) for k, v in raw.items()) if isinstance(raw, collections.Mapping) else pair_fields(raw)
    return {name: coerce_value(value) for name, value in pairs if value is not None}


def decode_record(cls: type[_T], record: collections.Mapping[str, typing.Any], /) -> _T:
    """Decode a generic record into an `attrs` model using its field rules.

    Parameters
    ----------
    cls : type[_T]
        The `attrs` model class to decode to.
    record : collections.abc.Mapping[str, typing.Any]
        The generic record.

    Returns
    -------
    _T
        The decoded model.

    Raises
    ------
    kura.errors.InvalidDataFound
        If a required field is missing or a field couldn't be converted.
    """
    kwargs: dict[str, typing.Any] = {}
    for field_name, key, field_rule in _get_rules(cls):
        if field_rule.embedded:
            prefix = f"{key}."
            sub_record = {k[len(prefix) :]: v for k, v in record.items() if k.startswith(prefix)}
            if sub_record:
                kwargs[field_name] = decode_record(field_rule.cast, sub_record)

            elif not field_rule.optional:
                raise errors.InvalidDataFound(f"Missing embedded {key!r} field for {cls.__name__}")

            continue

        # Serialized blobs may carry explicit nulls; these are treated as absent.
        if (value := record.get(key)) is None:
            if field_rule.optional:
                continue

            raise errors.InvalidDataFound(f"Missing required {key!r} field for {cls.__name__}")

        try:
            kwargs[field_name] = field_rule.cast(value)

        except errors.KuraException:
            raise

        except (TypeError, ValueError) as exc:
            raise errors.InvalidDataFound(
                f"Invalid value {value!r} for {cls.__name__}.{field_name}", exception=exc
            ) from exc

    return cls(**kwargs)


_RULE_CACHE: dict[type[typing.Any], tuple[tuple[str, str, FieldRule], ...]] = {}


def _get_rules(cls: type[typing.Any], /) -> tuple[tuple[str, str, FieldRule], ...]:
    try:
        return _RULE_CACHE[cls]

    except KeyError:
        pass

    rules = tuple(
        (field.alias or field.name, field.metadata[_RULE_KEY].name or field.name, field.metadata[_RULE_KEY])
        for field in attrs.fields(cls)
        if _RULE_KEY in field.metadata
    )
    _LOGGER.debug("collected %s field rules for %r", len(rules), cls)
    _RULE_CACHE[cls] = rules
    return rules


def integer(value: typing.Any, /) -> int:
    # bool is an int subclass but a flag is never a valid integer field.
    if isinstance(value, bool):
        raise TypeError("Expected an integer but got a bool")

    if isinstance(value, str) and not _INTEGER_PATTERN.fullmatch(value.strip()):
        raise ValueError(f"{value!r} isn't an integer")

    if isinstance(value, float):
        raise TypeError("Expected an integer but got a float")

    return int(value)


def snowflake(value: typing.Any, /) -> hikari.Snowflake:
    try:
        result = integer(value)

    except (TypeError, ValueError) as exc:
        raise errors.MalformedIdentifier(f"Invalid identifier {value!r}", exception=exc) from exc

    if not 0 <= result <= _MAX_SNOWFLAKE:
        raise errors.MalformedIdentifier(f"Identifier {value!r} is out of range")

    return hikari.Snowflake(result)


def snowflakes(value: typing.Any, /) -> frozenset[hikari.Snowflake]:
    if isinstance(value, (str, bytes)) or not isinstance(value, collections.Iterable):
        raise TypeError(f"Expected an array of identifiers but got {type(value).__name__}")

    return frozenset(map(snowflake, value))


def boolean(value: typing.Any, /) -> bool:
    if isinstance(value, bool):
        return value

    if value in (0, 1):
        return bool(value)

    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"

    raise ValueError(f"{value!r} isn't a boolean")


def string(value: typing.Any, /) -> str:
    # Numeric looking strings come back from the store as ints.
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return str(value)

    raise TypeError(f"Expected a string but got {type(value).__name__}")


def strings(value: typing.Any, /) -> frozenset[str]:
    if isinstance(value, (str, bytes)) or not isinstance(value, collections.Iterable):
        raise TypeError(f"Expected an array of strings but got {type(value).__name__}")

    return frozenset(map(string, value))


def permissions(value: typing.Any, /) -> hikari.Permissions:
    return hikari.Permissions(integer(value))


def colour(value: typing.Any, /) -> hikari.Color:
    return hikari.Color(integer(value))


def timestamp(value: typing.Any, /) -> datetime.datetime:
    value = string(value)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"

    return datetime.datetime.fromisoformat(value)


def enum(cls: type[_EnumT], /) -> collections.Callable[[typing.Any], _EnumT]:
    """Build a cast for a coded field backed by an integer enum."""

    def cast(value: typing.Any, /) -> _EnumT:
        try:
            return cls(integer(value))

        except (TypeError, ValueError) as exc:
            raise errors.InvalidEnumValue(f"{value!r} isn't a valid {cls.__name__}", exception=exc) from exc

    return cast


def sequence_of(cls: type[_T], /) -> collections.Callable[[typing.Any], list[_T]]:
    """Build a cast for an array of nested records."""

    def cast(value: typing.Any, /) -> list[_T]:
        if not isinstance(value, collections.Sequence) or isinstance(value, str):
            raise TypeError(f"Expected an array of {cls.__name__} records but got {type(value).__name__}")

        results: list[_T] = []
        for entry in value:
            if not isinstance(entry, collections.Mapping):
                raise TypeError(f"Expected a {cls.__name__} record but got {type(entry).__name__}")

            results.append(decode_record(cls, entry))

        return results

    return cast
