"""Threads, thread identifiers and the thread management interface."""

from __future__ import annotations

import enum
import itertools
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass

ThreadId = int
ProcessId = int

_tid_counter = itertools.count(1)
_tid_lock = threading.Lock()


def generate_tid() -> ThreadId:
    """Return a new thread identifier, unique within this interpreter."""
    with _tid_lock:
        return next(_tid_counter)


class ThreadState(enum.Enum):
    """Life-cycle state of a thread."""

    READY = enum.auto()
    RUNNING = enum.auto()
    BLOCKED = enum.auto()
    TERMINATED = enum.auto()


@dataclass
class Thread:
    """A thread of execution belonging to a process."""

    id: ThreadId
    process_id: ProcessId
    state: ThreadState = ThreadState.READY


class ThreadManagement(ABC):
    """Operations for creating and controlling threads of processes."""

    @abstractmethod
    def create_thread(self, pid: ProcessId) -> ThreadId:
        """Create a thread in process ``pid`` and return its identifier."""

    @abstractmethod
    def terminate_thread(self, pid: ProcessId, tid: ThreadId) -> None:
        """Terminate thread ``tid`` of process ``pid``."""

    @abstractmethod
    def sleep_thread(self, pid: ProcessId, tid: ThreadId, duration_ms: int) -> None:
        """Put thread ``tid`` of process ``pid`` to sleep."""

    @abstractmethod
    def get_thread_state(self, pid: ProcessId, tid: ThreadId) -> ThreadState:
        """Return the state of thread ``tid`` of process ``pid``."""