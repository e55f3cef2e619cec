"""Concurrent HTTP load generator."""

from handler_chain.load.config import JoinPolicy, LoadConfig
from handler_chain.load.report import LoadReport, TaskOutcome
from handler_chain.load.runner import run_load

__all__ = [
    "JoinPolicy",
    "LoadConfig",
    "LoadReport",
    "TaskOutcome",
    "run_load",
]
