"""A modular operating-system kernel model for UAV swarms: processes, threads, scheduling, messages and memory interfaces."""

__version__ = "0.1.0"
__all__ = ["errors", "ipc", "memory", "process", "scheduler", "thread"]