from designpatterns.structural.decorator_light import ConcreteComponent, ConcreteDecorator


def test_decorator_wraps_component():
    decorator = ConcreteDecorator(ConcreteComponent())
    assert decorator.operation() == "<strong>I am component!</strong>"


def test_decorators_nest():
    nested = ConcreteDecorator(ConcreteDecorator(ConcreteComponent()))
    assert nested.operation() == "<strong><strong>I am component!</strong></strong>"