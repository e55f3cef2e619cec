"""Exception hierarchy for chain execution and load runs."""

from __future__ import annotations


class ChainException(Exception):
    """Base for all chain exceptions."""


class ChainAbort(ChainException):
    """Controlled abort raised by a handler, with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class EmptyChainError(ChainException, ValueError):
    """A chain with no handlers was composed."""

    def __init__(self, detail: str = "Cannot compose a chain without handlers") -> None:
        super().__init__(detail)
        self.detail = detail


class ContinuationReused(ChainException):
    """A handler invoked its continuation more than once."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Continuation to handler #{index} was already invoked")
        self.index = index


class ChainInternalError(ChainException):
    """Wraps an unexpected handler exception at the FastAPI boundary."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause


class LoadError(Exception):
    """Base for load generator errors."""


class LoadTaskFailed(LoadError):
    """One request of a load run failed."""

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"Request #{index} failed: {cause!r}")
        self.index = index
        self.cause = cause
