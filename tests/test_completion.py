from __future__ import annotations

import threading

from docdb import Error, Future, FutureStatus
from docprobe.completion import AwaitableCompletion


def test_wait_on_already_completed_future():
    future: Future[str] = Future()
    future.set_result("x")

    assert AwaitableCompletion(future).wait(timeout=1) is True


def test_completion_from_another_thread():
    future: Future[str] = Future()
    completion = AwaitableCompletion(future)
    timer = threading.Timer(0.05, future.set_result, args=("done",))
    timer.start()
    try:
        assert completion.wait(timeout=5) is True
    finally:
        timer.join()

    assert future.status is FutureStatus.COMPLETE
    assert future.result == "done"


def test_callback_fires_before_wait_begins():
    future: Future[None] = Future()
    completion = AwaitableCompletion(future)
    future.set_error(Error.NOT_FOUND, "gone")

    assert completion.wait(timeout=1) is True
    assert future.error == Error.NOT_FOUND


def test_wait_times_out_while_pending():
    future: Future[None] = Future()
    completion = AwaitableCompletion(future)

    assert completion.wait(timeout=0.05) is False
    assert future.status is FutureStatus.PENDING


def test_bridges_do_not_wake_each_other():
    first: Future[None] = Future()
    second: Future[None] = Future()
    first_completion = AwaitableCompletion(first)
    second_completion = AwaitableCompletion(second)

    first.set_result()

    assert first_completion.wait(timeout=1) is True
    assert second_completion.wait(timeout=0.05) is False


def test_many_sequential_waits():
    for i in range(50):
        future: Future[int] = Future()
        completion = AwaitableCompletion(future)
        worker = threading.Thread(target=future.set_result, args=(i,))
        worker.start()
        assert completion.wait(timeout=5) is True
        worker.join()
        assert future.result == i
