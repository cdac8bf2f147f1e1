"""Processes, process identifiers and a simple process manager."""

from __future__ import annotations

import enum
import itertools
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .errors import KernelError, NotFoundError
from .ipc import Message, MessagePassing, SystemMessageBus
from .scheduler import RoundRobinScheduler
from .thread import Thread, ThreadId, ThreadManagement, ThreadState, generate_tid

ProcessId = int

_pid_counter = itertools.count(1)
_pid_lock = threading.Lock()


def generate_pid() -> ProcessId:
    """Return a new process identifier, unique within this interpreter."""
    with _pid_lock:
        return next(_pid_counter)


class ProcessState(enum.Enum):
    """Life-cycle state of a process."""

    NEW = enum.auto()
    READY = enum.auto()
    RUNNING = enum.auto()
    WAITING = enum.auto()
    TERMINATED = enum.auto()


@dataclass
class Process:
    """A process and the threads it owns."""

    id: ProcessId
    state: ProcessState = ProcessState.NEW
    threads: dict[ThreadId, Thread] = field(default_factory=dict)

    def create_new_thread(self) -> ThreadId:
        """Create a ready thread in this process and return its identifier."""
        tid = generate_tid()
        if tid in self.threads:
            raise KernelError("Thread ID collision within process")
        self.threads[tid] = Thread(tid, self.id)
        return tid

    def terminate_existing_thread(self, tid: ThreadId) -> None:
        """Remove thread ``tid``; raise NotFoundError if it does not exist."""
        try:
            del self.threads[tid]
        except KeyError:
            raise NotFoundError(f"no thread {tid} in process {self.id}") from None

    def _thread(self, tid: ThreadId) -> Thread:
        try:
            return self.threads[tid]
        except KeyError:
            raise NotFoundError(f"no thread {tid} in process {self.id}") from None

    def get_thread_state(self, tid: ThreadId) -> ThreadState:
        """Return the state of thread ``tid``."""
        return self._thread(tid).state

    def set_thread_state(self, tid: ThreadId, new_state: ThreadState) -> None:
        """Change the state of thread ``tid``."""
        self._thread(tid).state = new_state


class ProcessManagement(ABC):
    """Operations for creating and controlling processes."""

    @abstractmethod
    def create_process(self) -> ProcessId:
        """Create a process and return its identifier."""

    @abstractmethod
    def terminate_process(self, pid: ProcessId) -> None:
        """Terminate process ``pid``."""

    @abstractmethod
    def get_process_state(self, pid: ProcessId) -> ProcessState:
        """Return the state of process ``pid``."""


class SimpleProcessManager(ProcessManagement, ThreadManagement, MessagePassing):
    """Keeps processes in memory, schedules their threads round-robin and routes messages."""

    def __init__(self) -> None:
        self._processes: dict[ProcessId, Process] = {}
        self.scheduler = RoundRobinScheduler()
        self._ipc_bus = SystemMessageBus()

    def __contains__(self, pid: object) -> bool:
        return pid in self._processes

    def _process(self, pid: ProcessId) -> Process:
        try:
            return self._processes[pid]
        except KeyError:
            raise NotFoundError(f"no process {pid}") from None

    def create_process(self) -> ProcessId:
        pid = generate_pid()
        if pid in self._processes:
            raise KernelError("PID collision")
        self._processes[pid] = Process(pid)
        return pid

    def terminate_process(self, pid: ProcessId) -> None:
        self._process(pid)
        del self._processes[pid]

    def get_process_state(self, pid: ProcessId) -> ProcessState:
        return self._process(pid).state

    def create_thread(self, pid: ProcessId) -> ThreadId:
        process = self._process(pid)
        tid = process.create_new_thread()
        if process.get_thread_state(tid) is ThreadState.READY:
            self.scheduler.add_thread(tid)
        return tid

    def terminate_thread(self, pid: ProcessId, tid: ThreadId) -> None:
        self._process(pid).terminate_existing_thread(tid)
        self.scheduler.remove_thread(tid)

    def sleep_thread(self, pid: ProcessId, tid: ThreadId, duration_ms: int) -> None:
        self._process(pid).set_thread_state(tid, ThreadState.BLOCKED)
        self.scheduler.remove_thread(tid)

    def get_thread_state(self, pid: ProcessId, tid: ThreadId) -> ThreadState:
        return self._process(pid).get_thread_state(tid)

    def send_message(self, message: Message) -> None:
        self._ipc_bus.send_message(message)

    def receive_message(self, receiver_pid: ProcessId) -> Message:
        return self._ipc_bus.receive_message(receiver_pid)

    def try_receive_message(self, receiver_pid: ProcessId) -> Message | None:
        return self._ipc_bus.try_receive_message(receiver_pid)