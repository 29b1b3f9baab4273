"""ASGI type aliases.

Raw ASGI types, matching the ASGI 3.0 spec. Only the ASGI edge
(``rue.app``, ``rue.server``) and ``Request.from_asgi`` touch them.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
