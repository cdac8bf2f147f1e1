"""Errors raised by kernel operations."""

from __future__ import annotations


class KernelError(Exception):
    """Base error raised by kernel operations; also used for miscellaneous failures."""


class NotFoundError(KernelError):
    """The requested process, thread or message does not exist."""


class PermissionsError(KernelError):
    """The caller is not allowed to perform the operation."""


class MemoryNotAvailableError(KernelError):
    """Not enough memory is available to satisfy the request."""


class IPCError(KernelError):
    """An inter-process communication operation failed."""


class FeatureNotImplementedError(KernelError):
    """The requested kernel feature is not available."""


class AlreadyExistsError(KernelError):
    """The object being created already exists."""


class InvalidStateError(KernelError):
    """The object is in a state that does not allow the operation."""