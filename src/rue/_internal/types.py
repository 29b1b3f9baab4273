"""Shared type aliases used across rue modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: called with a Request, sync or async, returns a response value
Handler: TypeAlias = Callable[..., Any]
