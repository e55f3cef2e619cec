"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from handler_chain.context import RequestContext

# Continuation handed to each handler
Next = Callable[[], None]
Handler = Callable[["RequestContext", Next], None]
ComposedChain = Callable[["RequestContext"], "RequestContext"]
