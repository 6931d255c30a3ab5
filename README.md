# designpatterns

Small, self-contained implementations of the classic design patterns, grouped
the way they are usually taught. The package needs no third-party libraries
and supports Python 3.10 and later.

- `designpatterns.creational`: `abstract_factory`, `factory_method`,
  `functional_options`, `prototype`, `singleton`, `house_builder` and
  `pizza_builder`.
- `designpatterns.structural`: `adapter`, `bridge`, `composite`, `facade`,
  `flyweight`, `proxy`, `decorator` and `decorator_light`.
- `designpatterns.behavioral`: `chain_of_responsibility`, `closer`, `command`,
  `iterator`, `memento`, `observer`, `repository`, `state`, `strategy`,
  `template_method`, `mediator_colleague`, `mediator_train`,
  `visitor_calculator` and `visitor_city`.
- `designpatterns.parallel`: `generator`, `pipeline`, `map_filter`,
  `fan_in_fan_out`, `future_promise`, `semaphore`, `subscription` and
  `workerpool`. The stream stages in `generator`, `pipeline` and `map_filter`
  are plain Python generators sharing a `threading.Event` as a stop signal;
  `fan_in_fan_out`, `future_promise`, `subscription` and `workerpool` use
  threads and queues.

Several classes report what they do by printing to standard output (for
example `TV.on`, the order states in `state`, the observers, the trains and
the worker pool); those messages are in Russian or English as written in each
module.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

A chain of handlers:

```python
from designpatterns.behavioral.chain_of_responsibility import (
    HighPriorityHandler, LowPriorityHandler, MediumPriorityHandler,
)

low = LowPriorityHandler()
low.set_next(MediumPriorityHandler()).set_next(HighPriorityHandler())
print(low.handle("high"))
# HighPriorityHandler: Handling high priority request.
print(repr(low.handle("unknown")))
# ''
```

An in-memory repository:

```python
from designpatterns.behavioral.repository import (
    InMemoryUserRepository, User, UserNotFoundError,
)

repo = InMemoryUserRepository()
user = User(name="John Doe", email="john@example.com")
repo.save(user)            # assigns user.id == 1
repo.delete(user.id)
try:
    repo.find_by_id(user.id)
except UserNotFoundError as exc:
    print(exc)             # user not found
```

Shutdown callbacks collected in one place; every failure is reported together:

```python
from designpatterns.behavioral.closer import ShutdownError, get_instance

closer = get_instance()
closer.add(lambda: None, lambda: 1 / 0)
try:
    closer.close_all()     # or closer.close_concurrently()
except ShutdownError as exc:
    print(len(exc.errors)) # 1
```

A builder with a fluent interface:

```python
from designpatterns.creational.pizza_builder import PizzaBuilder

pizza = (PizzaBuilder().set_size("Large").set_dough("Thin")
         .add_topping("Cheese").add_topping("Olives").build())
print(pizza)
# Pizza [Size: Large, Dough: Thin, Toppings: [Cheese Olives]]
```

Pooled flyweights:

```python
from designpatterns.structural.flyweight import FlyweightFactory

factory = FlyweightFactory()
image = factory.get_flyweight("cat.jpg")
assert factory.get_flyweight("cat.jpg") is image
print(image.draw(100, 100, 0.95))
# draw image: cat.jpg, width: 100, height: 100, opacity: 0.95
```

A stream pipeline:

```python
import threading
from designpatterns.parallel.pipeline import add_two, filter_even, generate

done = threading.Event()
print(list(filter_even(done, add_two(done, generate(done, [1, 2, 3, 4])))))
# [4, 6]
```

Fan-out over worker threads and fan-in of their results (the order of the
merged values depends on the threads):

```python
import threading
from designpatterns.parallel.fan_in_fan_out import fan_in, fan_out, generate

done = threading.Event()
streams = fan_out(done, generate(done, range(1, 11)), workers=10, delay=0.1)
print(sorted(fan_in(done, *streams)))
# [2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
```

A background task, a semaphore and a worker pool:

```python
from designpatterns.parallel.future_promise import promise
from designpatterns.parallel.semaphore import Semaphore
from designpatterns.parallel.workerpool import worker_pool

print(promise(lambda: 42).result())            # 42

limit = Semaphore(2)
with limit:
    ...                                          # at most two holders at once

results = worker_pool(4, 2, job_duration=0.1)    # jobs 1..4 on two threads
print(sorted(results))                           # [1, 2, 3, 4]
```

Publish/subscribe, with each subscriber called in its own thread:

```python
from designpatterns.parallel.subscription import Event, PubSub

bus = PubSub()
bus.subscribe("event1", lambda event: print(event.name, event.data))
for thread in bus.publish(Event("event1", "some data")):
    thread.join()
```

## What it does not do

- It is a library only: there is no command-line program.
- `InMemoryUserRepository` keeps users in a dictionary; nothing is written to
  disk or to a database, and the `closer` module manages only the callbacks
  it is given.
- `fan_out` and `worker_pool` sleep for a fixed time per item (`delay`,
  `job_duration`) to imitate costly work; they do no other processing than
  adding 1 to each value or returning the job number.