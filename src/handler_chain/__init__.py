"""handler-chain - composable handler chains and a concurrent HTTP load generator."""

from handler_chain.chain import Chain, ResolvedChain, compose
from handler_chain.context import RequestContext
from handler_chain.dependency import chain_dependency
from handler_chain.exceptions import (
    ChainAbort,
    ChainException,
    ChainInternalError,
    ContinuationReused,
    EmptyChainError,
    LoadError,
    LoadTaskFailed,
)
from handler_chain.handler import ChainHandler
from handler_chain.handlers import Abort, FunctionHandler, Halt, Increment
from handler_chain.hooks import AfterChain, AfterHandler, BeforeChain, ChainHook
from handler_chain.load import JoinPolicy, LoadConfig, LoadReport, TaskOutcome, run_load
from handler_chain.trace import ChainTrace, TraceEntry

__all__ = [
    "Abort",
    "AfterChain",
    "AfterHandler",
    "BeforeChain",
    "Chain",
    "ChainAbort",
    "ChainException",
    "ChainHandler",
    "ChainHook",
    "ChainInternalError",
    "ChainTrace",
    "ContinuationReused",
    "EmptyChainError",
    "FunctionHandler",
    "Halt",
    "Increment",
    "JoinPolicy",
    "LoadConfig",
    "LoadError",
    "LoadReport",
    "LoadTaskFailed",
    "RequestContext",
    "ResolvedChain",
    "TaskOutcome",
    "TraceEntry",
    "chain_dependency",
    "compose",
    "run_load",
]
