import dataclasses

import pytest

from designpatterns.behavioral.memento import Caretaker, Memento, Originator


def test_restore_previous_states():
    caretaker = Caretaker()
    originator = Originator("A")
    caretaker.add_memento(originator.create_memento())

    originator.state = "B"
    caretaker.add_memento(originator.create_memento())

    originator.state = "C"
    caretaker.add_memento(originator.create_memento())
    assert originator.state == "C"

    originator.restore_memento(caretaker.get_memento(1))
    assert originator.state == "B"

    originator.restore_memento(caretaker.get_memento(0))
    assert originator.state == "A"


def test_memento_holds_state_at_creation():
    originator = Originator("A")
    memento = originator.create_memento()
    originator.state = "Z"
    assert memento.state == "A"


def test_memento_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Memento("A").state = "B"


def test_missing_memento_raises():
    with pytest.raises(IndexError):
        Caretaker().get_memento(0)