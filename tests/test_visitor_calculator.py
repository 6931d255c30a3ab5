import pytest

from designpatterns.behavioral.visitor_calculator import (
    AreaCalculator,
    Circle,
    MiddleCoordinates,
    Rectangle,
    Square,
    Visitor,
)


class Recorder(Visitor):
    def __init__(self):
        self.calls = []

    def visit_square(self, square):
        self.calls.append(("square", square))

    def visit_circle(self, circle):
        self.calls.append(("circle", circle))

    def visit_rectangle(self, rectangle):
        self.calls.append(("rectangle", rectangle))


@pytest.fixture
def shapes():
    return [Square(side=2), Circle(radius=3), Rectangle(length=2, breadth=3)]


def test_both_visitors_over_all_shapes(shapes, capsys):
    for visitor in (AreaCalculator(), MiddleCoordinates()):
        for shape in shapes:
            shape.accept(visitor)
    assert capsys.readouterr().out.splitlines() == [
        "Calculating area for square",
        "Calculating area for circle",
        "Calculating area for rectangle",
        "Calculating middle point coordinates for square",
        "Calculating middle point coordinates for circle",
        "Calculating middle point coordinates for rectangle",
    ]


def test_accept_dispatches_to_matching_method(shapes):
    recorder = Recorder()
    for shape in shapes:
        shape.accept(recorder)
    assert [name for name, _ in recorder.calls] == ["square", "circle", "rectangle"]
    assert [shape for _, shape in recorder.calls] == shapes


def test_type_names():
    assert [s.type_name for s in (Square(), Circle(), Rectangle())] == [
        "Square",
        "Circle",
        "rectangle",
    ]