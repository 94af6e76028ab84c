"""Runtime trace for effect execution.

Traces capture when effects run, how many values reached the consumer and
how long the traversal took. They are runtime infrastructure: producers,
consumers and filters never see them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded execution event.

    Attributes:
        action: What happened (e.g. "effect_begin", "effect_end").
        id: Sequential event id within its trace.
        parent_id: Id of the enclosing event, if any.
        timestamp: When the event was recorded.
        info: Event details, such as the delivered value count.
        duration_ms: Elapsed time for events that close a span.
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Collects evidence for effects run against it.

    Nesting follows the call stack: an effect invoked from inside another
    effect's consumer is recorded as a child of the outer run.

    Performance guarantees:
    - Trace disabled -> single flag check per record
    - Evidence append is O(1)
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._stack: list[int] = []

    def push(self, event_id: int) -> None:
        """Make event_id the parent of subsequently recorded events."""
        self._stack.append(event_id)

    def pop(self) -> int | None:
        """Pop the current parent, returning it (None if the stack is empty)."""
        if self._stack:
            return self._stack.pop()
        return None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an event.

        Args:
            action: Event name
            info: Additional context
            parent_id: Explicit parent; defaults to the top of the stack
            duration_ms: Span duration, for closing events

        Returns:
            The new event id, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        if parent_id is None and self._stack:
            parent_id = self._stack[-1]

        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        """Get all recorded events in recording order."""
        return list(self._events)

    def find(self, action: str) -> list[Evidence]:
        """Get all events with the given action."""
        return [ev for ev in self._events if ev.action == action]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
        self._stack.clear()
