"""Thread scheduling policies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterator

from .thread import ThreadId


class Scheduler(ABC):
    """Chooses which ready thread runs next."""

    @abstractmethod
    def add_thread(self, tid: ThreadId) -> None:
        """Add a thread to the ready queue."""

    @abstractmethod
    def remove_thread(self, tid: ThreadId) -> None:
        """Remove a thread from the ready queue."""

    @abstractmethod
    def schedule_next(self) -> ThreadId | None:
        """Select the next thread to run, or ``None`` if none is ready."""

    def mark_thread_ready(self, tid: ThreadId) -> None:
        """Mark a thread as ready to be scheduled."""
        self.add_thread(tid)

    def mark_thread_blocked(self, tid: ThreadId) -> None:
        """Mark a thread as blocked and no longer schedulable."""
        self.remove_thread(tid)


class RoundRobinScheduler(Scheduler):
    """Cycles through ready threads in arrival order."""

    def __init__(self) -> None:
        self._ready: deque[ThreadId] = deque()

    @property
    def ready_queue(self) -> tuple[ThreadId, ...]:
        """Snapshot of the ready queue, front first."""
        return tuple(self._ready)

    def __len__(self) -> int:
        return len(self._ready)

    def __contains__(self, tid: object) -> bool:
        return tid in self._ready

    def __iter__(self) -> Iterator[ThreadId]:
        return iter(tuple(self._ready))

    def add_thread(self, tid: ThreadId) -> None:
        """Append ``tid`` to the queue; adding a queued thread again does nothing."""
        if tid not in self._ready:
            self._ready.append(tid)

    def remove_thread(self, tid: ThreadId) -> None:
        """Remove ``tid`` from the queue; removing an absent thread does nothing."""
        try:
            self._ready.remove(tid)
        except ValueError:
            pass

    def schedule_next(self) -> ThreadId | None:
        """Return the front thread and move it to the back of the queue."""
        if not self._ready:
            return None
        tid = self._ready.popleft()
        self._ready.append(tid)
        return tid