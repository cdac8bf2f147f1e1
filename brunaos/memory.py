"""Memory regions and the memory management interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

Address = int
Size = int
ProcessId = int


@dataclass
class MemoryRegion:
    """A block of memory allocated to a process."""

    start_address: Address
    size: Size
    process_id: ProcessId


class MemoryManagement(ABC):
    """Operations for allocating and releasing process memory."""

    @abstractmethod
    def allocate(self, pid: ProcessId, size: Size) -> Address:
        """Allocate ``size`` bytes for process ``pid`` and return the start address."""

    @abstractmethod
    def deallocate(self, pid: ProcessId, address: Address) -> None:
        """Release the block of process ``pid`` that starts at ``address``."""