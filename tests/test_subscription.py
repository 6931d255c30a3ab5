import threading
import time

from designpatterns.parallel.subscription import Event, PubSub


def test_all_subscribers_receive_event():
    pubsub = PubSub()
    lock = threading.Lock()
    received = []

    def make(label):
        def subscriber(event):
            with lock:
                received.append((label, event.name, event.data))

        return subscriber

    pubsub.subscribe("event1", make("Подписчик 1"))
    pubsub.subscribe("event1", make("Подписчик 2"))

    threads = pubsub.publish(Event(name="event1", data="Некоторые данные"))
    for thread in threads:
        thread.join(5)

    assert len(threads) == 2
    assert sorted(received) == [
        ("Подписчик 1", "event1", "Некоторые данные"),
        ("Подписчик 2", "event1", "Некоторые данные"),
    ]


def test_delayed_publish_is_awaited():
    pubsub = PubSub()
    barrier = threading.Barrier(3, timeout=5)
    lock = threading.Lock()
    seen = []

    def subscriber(event):
        with lock:
            seen.append(event.data)
        barrier.wait()

    pubsub.subscribe("event1", subscriber)
    pubsub.subscribe("event1", subscriber)
    time.sleep(0.05)
    threads = pubsub.publish(Event("event1", "Дополнительные данные"))
    barrier.wait()
    for thread in threads:
        thread.join(5)
    assert len(threads) == 2
    assert [thread.is_alive() for thread in threads] == [False, False]
    assert seen == ["Дополнительные данные", "Дополнительные данные"]


def test_publish_does_not_wait_for_subscribers():
    pubsub = PubSub()
    release = threading.Event()
    calls = []

    def slow(event):
        release.wait(5)
        calls.append(event.name)

    pubsub.subscribe("e", slow)
    threads = pubsub.publish(Event("e"))
    assert [thread.is_alive() for thread in threads] == [True]
    assert calls == []
    release.set()
    for thread in threads:
        thread.join(5)
    assert calls == ["e"]


def test_other_events_are_not_delivered():
    pubsub = PubSub()
    calls = []
    pubsub.subscribe("a", calls.append)
    assert pubsub.publish(Event("b", 1)) == []
    assert calls == []