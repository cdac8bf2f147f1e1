import pytest

from brunaos.errors import NotFoundError
from brunaos.ipc import Message
from brunaos.process import (
    Process,
    ProcessState,
    SimpleProcessManager,
    generate_pid,
)
from brunaos.thread import ThreadState


@pytest.fixture
def manager():
    return SimpleProcessManager()


def test_generate_pid_increases():
    first = generate_pid()
    second = generate_pid()
    assert second > first


def test_create_process(manager):
    pid = manager.create_process()
    assert manager.get_process_state(pid) is ProcessState.NEW


def test_create_multiple_processes_unique_pids(manager):
    pid1 = manager.create_process()
    pid2 = manager.create_process()
    assert pid1 != pid2
    assert pid1 in manager and pid2 in manager


def test_terminate_existing_process(manager):
    pid = manager.create_process()
    manager.terminate_process(pid)
    with pytest.raises(NotFoundError):
        manager.get_process_state(pid)


def test_terminate_non_existent_process(manager):
    with pytest.raises(NotFoundError):
        manager.terminate_process(999)


def test_create_thread_in_process(manager):
    pid = manager.create_process()
    tid = manager.create_thread(pid)
    assert manager.get_thread_state(pid, tid) is ThreadState.READY


def test_create_thread_in_missing_process(manager):
    with pytest.raises(NotFoundError):
        manager.create_thread(999)


def test_terminate_thread_in_process(manager):
    pid = manager.create_process()
    tid = manager.create_thread(pid)
    manager.terminate_thread(pid, tid)
    with pytest.raises(NotFoundError):
        manager.get_thread_state(pid, tid)


def test_terminate_missing_thread(manager):
    pid = manager.create_process()
    with pytest.raises(NotFoundError):
        manager.terminate_thread(pid, 10**9)


def test_sleep_thread_in_process(manager):
    pid = manager.create_process()
    tid = manager.create_thread(pid)
    manager.sleep_thread(pid, tid, 100)
    assert manager.get_thread_state(pid, tid) is ThreadState.BLOCKED


def test_integration_create_thread_adds_to_scheduler(manager):
    pid = manager.create_process()
    tid = manager.create_thread(pid)
    scheduled = [manager.scheduler.schedule_next() for _ in range(len(manager.scheduler.ready_queue))]
    assert tid in scheduled


def test_integration_terminate_thread_removes_from_scheduler(manager):
    pid = manager.create_process()
    tid = manager.create_thread(pid)
    assert tid in manager.scheduler.ready_queue
    manager.terminate_thread(pid, tid)
    assert tid not in manager.scheduler.ready_queue


def test_integration_sleep_thread_removes_from_scheduler(manager):
    pid = manager.create_process()
    tid = manager.create_thread(pid)
    assert tid in manager.scheduler.ready_queue
    manager.sleep_thread(pid, tid, 100)
    assert tid not in manager.scheduler.ready_queue
    assert manager.get_thread_state(pid, tid) is ThreadState.BLOCKED


def test_integration_scheduler_handles_multiple_threads(manager):
    pid = manager.create_process()
    tid1 = manager.create_thread(pid)
    tid2 = manager.create_thread(pid)

    assert len(manager.scheduler.ready_queue) == 2
    assert tid1 in manager.scheduler.ready_queue
    assert tid2 in manager.scheduler.ready_queue

    first_scheduled = manager.scheduler.schedule_next()
    assert len(manager.scheduler.ready_queue) == 2

    manager.terminate_thread(pid, first_scheduled)
    assert len(manager.scheduler.ready_queue) == 1
    assert first_scheduled not in manager.scheduler.ready_queue

    remaining = tid2 if first_scheduled == tid1 else tid1
    assert remaining in manager.scheduler.ready_queue


def test_spm_ipc_send_receive_between_processes(manager):
    pid1 = manager.create_process()
    pid2 = manager.create_process()
    payload = bytes([1, 2, 3, 4, 5])
    message = Message(pid1, pid2, payload)
    msg_id = message.id

    manager.send_message(message)
    received = manager.receive_message(pid2)

    assert received.id == msg_id
    assert received.sender_pid == pid1
    assert received.receiver_pid == pid2
    assert received.payload == payload


def test_spm_ipc_try_receive_no_message(manager):
    pid1 = manager.create_process()
    assert manager.try_receive_message(pid1) is None


def test_spm_ipc_receive_no_message_error(manager):
    pid1 = manager.create_process()
    with pytest.raises(NotFoundError):
        manager.receive_message(pid1)


def test_spm_ipc_multiple_messages_fifo(manager):
    sender = manager.create_process()
    receiver = manager.create_process()
    msg1 = Message(sender, receiver, bytes([10]))
    msg2 = Message(sender, receiver, bytes([20]))

    manager.send_message(msg1)
    manager.send_message(msg2)

    first = manager.receive_message(receiver)
    assert first.id == msg1.id
    assert first.payload == bytes([10])
    second = manager.receive_message(receiver)
    assert second.id == msg2.id
    assert second.payload == bytes([20])


def test_process_thread_lifecycle():
    process = Process(42)
    assert process.state is ProcessState.NEW
    tid = process.create_new_thread()
    assert process.threads[tid].process_id == 42
    assert process.get_thread_state(tid) is ThreadState.READY
    process.set_thread_state(tid, ThreadState.RUNNING)
    assert process.get_thread_state(tid) is ThreadState.RUNNING
    process.terminate_existing_thread(tid)
    assert tid not in process.threads


def test_process_missing_thread_errors():
    process = Process(7)
    with pytest.raises(NotFoundError):
        process.get_thread_state(1)
    with pytest.raises(NotFoundError):
        process.set_thread_state(1, ThreadState.BLOCKED)
    with pytest.raises(NotFoundError):
        process.terminate_existing_thread(1)