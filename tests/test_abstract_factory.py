from designpatterns.creational.abstract_factory import (
    create_adidas_factory,
    create_nike_factory,
)


def test_nike_products():
    factory = create_nike_factory()
    shoe = factory.make_shoe()
    shirt = factory.make_shirt()
    assert shoe.logo == "nike"
    assert shoe.size == 14
    assert shirt.size == 14


def test_adidas_products():
    factory = create_adidas_factory()
    shoe = factory.make_shoe()
    shirt = factory.make_shirt()
    assert shoe.logo == "adidas"
    assert shoe.size == 16
    assert shirt.size == 16


def test_each_call_makes_a_new_product():
    factory = create_nike_factory()
    first = factory.make_shoe()
    second = factory.make_shoe()
    assert first is not second
    assert (first.logo, first.size) == (second.logo, second.size)