from designpatterns.behavioral.state import (
    CompletedOrderState,
    NewOrderState,
    Order,
    PaidOrderState,
    ShippedOrderState,
)


def test_payment_of_100_or_less_is_rejected(capsys):
    order = Order(NewOrderState())
    order.pay(50)
    order.pay(100)
    order.ship()
    order.complete()
    assert isinstance(order.state, NewOrderState)
    assert order.payment == 0.0
    assert capsys.readouterr().out.splitlines() == [
        "Сумма оплаты должна быть больше 100 рублей.",
        "Сумма оплаты должна быть больше 100 рублей.",
        "Нельзя отправить неоплаченный заказ.",
        "Нельзя завершить неоплаченный заказ.",
    ]


def test_full_lifecycle(capsys):
    order = Order()
    order.pay(150)
    assert isinstance(order.state, PaidOrderState)
    assert order.payment == 150
    order.ship()
    assert isinstance(order.state, ShippedOrderState)
    order.complete()
    assert isinstance(order.state, CompletedOrderState)
    assert capsys.readouterr().out.splitlines() == [
        "Заказ оплачен.",
        "Заказ отправлен.",
        "Заказ завершен.",
    ]


def test_paid_order_cannot_be_completed_or_repaid(capsys):
    order = Order(PaidOrderState())
    order.complete()
    order.pay(500)
    assert isinstance(order.state, PaidOrderState)
    assert capsys.readouterr().out.splitlines() == [
        "Нельзя завершить неоплаченный заказ.",
        "Заказ уже оплачен.",
    ]


def test_shipped_order_rejects_pay_and_ship(capsys):
    order = Order(ShippedOrderState())
    order.pay(500)
    order.ship()
    assert isinstance(order.state, ShippedOrderState)
    assert capsys.readouterr().out.splitlines() == [
        "Заказ уже оплачен.",
        "Заказ уже отправлен.",
    ]


def test_completed_order_stays_completed(capsys):
    order = Order(CompletedOrderState())
    order.pay(500)
    order.ship()
    order.complete()
    assert isinstance(order.state, CompletedOrderState)
    assert capsys.readouterr().out.splitlines() == ["Заказ уже завершен."] * 3