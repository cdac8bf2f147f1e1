"""Inter-process message passing."""

from __future__ import annotations

import itertools
import threading
from abc import ABC, abstractmethod
from collections import defaultdict, deque
from dataclasses import dataclass, field

from .errors import NotFoundError

MessageId = int
ProcessId = int

_mid_counter = itertools.count(1)
_mid_lock = threading.Lock()


def generate_mid() -> MessageId:
    """Return a new message identifier, unique within this interpreter."""
    with _mid_lock:
        return next(_mid_counter)


@dataclass
class Message:
    """A message from one process to another; its id is assigned on creation."""

    sender_pid: ProcessId
    receiver_pid: ProcessId
    payload: bytes
    id: MessageId = field(default_factory=generate_mid, init=False)


class MessagePassing(ABC):
    """Operations for sending and receiving messages between processes."""

    @abstractmethod
    def send_message(self, message: Message) -> None:
        """Deliver ``message`` to its receiver's queue."""

    @abstractmethod
    def receive_message(self, receiver_pid: ProcessId) -> Message:
        """Return the oldest message for ``receiver_pid``; raise NotFoundError if none."""

    @abstractmethod
    def try_receive_message(self, receiver_pid: ProcessId) -> Message | None:
        """Return the oldest message for ``receiver_pid``, or ``None`` if none."""


class SystemMessageBus(MessagePassing):
    """Holds one FIFO queue of incoming messages per process."""

    def __init__(self) -> None:
        self._queues: defaultdict[ProcessId, deque[Message]] = defaultdict(deque)

    def __contains__(self, receiver_pid: object) -> bool:
        """Whether a queue exists for ``receiver_pid``."""
        return receiver_pid in self._queues

    def pending(self, receiver_pid: ProcessId) -> int:
        """Number of messages waiting for ``receiver_pid``."""
        queue = self._queues.get(receiver_pid)
        return len(queue) if queue is not None else 0

    def send_message(self, message: Message) -> None:
        self._queues[message.receiver_pid].append(message)

    def receive_message(self, receiver_pid: ProcessId) -> Message:
        message = self.try_receive_message(receiver_pid)
        if message is None:
            raise NotFoundError(f"no message for process {receiver_pid}")
        return message

    def try_receive_message(self, receiver_pid: ProcessId) -> Message | None:
        queue = self._queues.get(receiver_pid)
        if not queue:
            return None
        return queue.popleft()