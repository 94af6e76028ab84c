"""Run configuration for effects."""

from __future__ import annotations

from dataclasses import dataclass

from plumb.kernel.trace import Trace


@dataclass(frozen=True)
class RunConfig:
    """Configuration for running an effect.

    Attributes:
        trace: Trace to record effect events into, or None to skip tracing.
        recursion_limit: Interpreter recursion limit to use while the effect
            runs. Deep pipelines and long repeated fields grow the call stack
            one frame group per stage. Only raises the limit, never lowers it;
            the previous limit is restored afterwards.
    """

    trace: Trace | None = None
    recursion_limit: int | None = None

    def __post_init__(self) -> None:
        if self.recursion_limit is not None and self.recursion_limit <= 0:
            raise ValueError("recursion_limit must be positive")
