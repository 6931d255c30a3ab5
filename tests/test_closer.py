import threading

import pytest

from designpatterns.behavioral.closer import Closer, ShutdownError, get_instance


def test_get_instance_returns_same_object():
    first = get_instance()
    second = get_instance()
    assert first is second
    calls = []
    first.add(lambda: calls.append("shared"))
    assert second.close_all() is None
    assert "shared" in calls


def test_close_all_runs_callbacks_in_order():
    calls = []
    closer = Closer()
    closer.add(lambda: calls.append("first"), lambda: calls.append("second"))
    closer.add(lambda: calls.append("third"))
    assert closer.close_all() is None
    assert calls == ["first", "second", "third"]


def test_close_all_runs_every_callback_and_reports_errors():
    calls = []

    def failing():
        calls.append("failing")
        raise RuntimeError("db down")

    closer = Closer()
    closer.add(failing, lambda: calls.append("ok"))
    with pytest.raises(ShutdownError) as info:
        closer.close_all()
    assert calls == ["failing", "ok"]
    assert [str(e) for e in info.value.errors] == ["db down"]
    assert str(info.value) == "shutdown finished with error(s): \n[!] db down"


def test_shutdown_error_joins_messages_with_newlines():
    error = ShutdownError([ValueError("a"), ValueError("b")])
    assert str(error).endswith("[!] a\n[!] b")
    assert str(error).startswith("shutdown finished with error(s): \n")


def test_close_concurrently_runs_all_callbacks():
    lock = threading.Lock()
    calls = []

    def make(name):
        def func():
            with lock:
                calls.append(name)

        return func

    closer = Closer()
    closer.add(*(make(n) for n in range(5)))
    result = closer.close_concurrently()
    assert result is None
    assert sorted(calls) == [0, 1, 2, 3, 4]


def test_close_concurrently_collects_errors():
    def fail_one():
        raise OSError("one")

    def fail_two():
        raise OSError("two")

    closer = Closer()
    closer.add(fail_one, lambda: None, fail_two)
    with pytest.raises(ShutdownError) as info:
        closer.close_concurrently()
    assert sorted(str(e) for e in info.value.errors) == ["one", "two"]


def test_close_with_no_callbacks_succeeds():
    closer = Closer()
    assert closer.close_all() is None
    assert closer.close_concurrently() is None