"""State pattern: an order whose behaviour depends on its lifecycle stage."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderState(ABC):
    """Behaviour of an order in one stage of its life."""

    @abstractmethod
    def pay(self, order: Order, amount: float) -> None:
        """Handle a payment."""

    @abstractmethod
    def ship(self, order: Order) -> None:
        """Handle a shipping request."""

    @abstractmethod
    def complete(self, order: Order) -> None:
        """Handle a completion request."""


class NewOrderState(OrderState):
    """An order not yet paid for."""

    def pay(self, order: Order, amount: float) -> None:
        if amount <= 100:
            print("Сумма оплаты должна быть больше 100 рублей.")
            return
        print("Заказ оплачен.")
        order.payment = amount
        order.state = PaidOrderState()

    def ship(self, order: Order) -> None:
        print("Нельзя отправить неоплаченный заказ.")

    def complete(self, order: Order) -> None:
        print("Нельзя завершить неоплаченный заказ.")


class PaidOrderState(OrderState):
    """A paid order waiting to be shipped."""

    def pay(self, order: Order, amount: float) -> None:
        print("Заказ уже оплачен.")

    def ship(self, order: Order) -> None:
        print("Заказ отправлен.")
        order.state = ShippedOrderState()

    def complete(self, order: Order) -> None:
        print("Нельзя завершить неоплаченный заказ.")


class ShippedOrderState(OrderState):
    """A shipped order waiting to be completed."""

    def pay(self, order: Order, amount: float) -> None:
        print("Заказ уже оплачен.")

    def ship(self, order: Order) -> None:
        print("Заказ уже отправлен.")

    def complete(self, order: Order) -> None:
        print("Заказ завершен.")
        order.state = CompletedOrderState()


class CompletedOrderState(OrderState):
    """A finished order; nothing more can happen to it."""

    def pay(self, order: Order, amount: float) -> None:
        print("Заказ уже завершен.")

    def ship(self, order: Order) -> None:
        print("Заказ уже завершен.")

    def complete(self, order: Order) -> None:
        print("Заказ уже завершен.")


class Order:
    """An order that delegates every action to its current state."""

    def __init__(self, state: OrderState | None = None) -> None:
        self.state: OrderState = state if state is not None else NewOrderState()
        self.payment = 0.0

    def pay(self, amount: float) -> None:
        self.state.pay(self, amount)

    def ship(self) -> None:
        self.state.ship(self)

    def complete(self) -> None:
        self.state.complete(self)