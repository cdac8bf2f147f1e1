# brunaos

A small operating-system kernel model aimed at UAV swarms. Everything runs
in memory, inside one Python interpreter.

## Modules

- `brunaos.process`: `Process`, `ProcessState`, `generate_pid()` and
  `SimpleProcessManager`. The manager creates and terminates processes and
  their threads, and it keeps the ready threads in a `RoundRobinScheduler`,
  which is available as `manager.scheduler`. It also passes messages between
  processes. `pid in manager` tells whether a process exists.
- `brunaos.thread`: `Thread`, `ThreadState`, `generate_tid()` and the
  abstract `ThreadManagement` interface.
- `brunaos.scheduler`: the abstract `Scheduler` and `RoundRobinScheduler`.
  - `add_thread` and `remove_thread` are idempotent.
  - `schedule_next()` returns the front thread and moves it to the back of
    the queue. It returns `None` when the queue is empty.
  - The scheduler supports `len()`, `in` and iteration. `ready_queue` gives
    a snapshot of the queue as a tuple.
- `brunaos.ipc`: `Message`, `generate_mid()`, the abstract `MessagePassing`
  interface and `SystemMessageBus`. The bus keeps one FIFO queue per
  receiving process.
  - A `Message` gets a fresh `id` when it is created.
  - `bus.pending(pid)` counts the messages waiting for a process.
  - `pid in bus` tells whether a queue exists for that process.
- `brunaos.memory`: `MemoryRegion` and the abstract `MemoryManagement`
  interface, which declares `allocate(pid, size)` and
  `deallocate(pid, address)`.
- `brunaos.errors`: `KernelError` and its subclasses:
  - `NotFoundError`
  - `PermissionsError`
  - `MemoryNotAvailableError`
  - `IPCError`
  - `FeatureNotImplementedError`
  - `AlreadyExistsError`
  - `InvalidStateError`

  The modules raise `NotFoundError` for an unknown process or thread, or
  when no message is waiting. Identifier collisions raise a plain
  `KernelError`.

## Installation

```
pip install .
```

## Example

```python
from brunaos.ipc import Message
from brunaos.process import SimpleProcessManager
from brunaos.thread import ThreadState

manager = SimpleProcessManager()
sender = manager.create_process()
receiver = manager.create_process()

tid = manager.create_thread(receiver)
assert manager.get_thread_state(receiver, tid) is ThreadState.READY
assert manager.scheduler.schedule_next() == tid

manager.sleep_thread(receiver, tid, 100)
assert manager.get_thread_state(receiver, tid) is ThreadState.BLOCKED
assert tid not in manager.scheduler

manager.send_message(Message(sender, receiver, b"\x01\x02\x03"))
message = manager.receive_message(receiver)
print(message.payload)                          # b'\x01\x02\x03'
print(manager.try_receive_message(receiver))    # None
```

Once a queue is empty, `receive_message` raises `NotFoundError`, while
`try_receive_message` returns `None`.

## What it does not do

- **No hardware access.** The package has no hardware abstraction layer and
  no platform support: nothing for serial ports, GPIO pins, timers, network
  interfaces or radios.
- **Threads are records, not real execution.** Threads run no code, and the
  scheduler only picks identifiers. It never switches context.
- **Sleeping threads do not wake.** `sleep_thread` blocks a thread and takes
  it out of the scheduler, but it ignores the duration. Nothing wakes the
  thread later.
- **Receiving never waits.** `receive_message` does not block until a message
  arrives.
- **No allocator.** `MemoryManagement` is an interface only. The package has
  no allocator that implements it.

## Running the tests

```
pip install .[test]
pytest
```