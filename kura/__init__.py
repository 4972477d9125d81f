from __future__ import annotations

__all__: typing.Final[typing.Sequence[str]] = [
    "BackendError",
    "ClosedClient",
    "CommandChannel",
    "EntryNotFound",
    "errors",
    "InvalidDataFound",
    "InvalidEnumValue",
    "KuraException",
    "MalformedIdentifier",
    "models",
    "redis",
    "RedisCache",
]

import typing

from kura import models
from kura import redis
from kura.commands import CommandChannel
from kura.errors import *
from kura.redis import RedisCache
