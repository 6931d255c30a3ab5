"""Chain of responsibility: handlers that pass a request along until one accepts it."""

from __future__ import annotations


class Handler:
    """Base handler that forwards every request to the next handler, if any."""

    def __init__(self) -> None:
        self._next: Handler | None = None

    def set_next(self, handler: Handler) -> Handler:
        """Link ``handler`` after this one and return it so calls can be chained."""
        self._next = handler
        return handler

    def handle(self, request: str) -> str:
        """Pass the request on; return an empty string when nobody handles it."""
        if self._next is not None:
            return self._next.handle(request)
        return ""


class LowPriorityHandler(Handler):
    """Handles requests of level ``"low"``."""

    def handle(self, request: str) -> str:
        if request == "low":
            return "LowPriorityHandler: Handling low priority request."
        return super().handle(request)


class MediumPriorityHandler(Handler):
    """Handles requests of level ``"medium"``."""

    def handle(self, request: str) -> str:
        if request == "medium":
            return "MediumPriorityHandler: Handling medium priority request."
        return super().handle(request)


class HighPriorityHandler(Handler):
    """Handles requests of level ``"high"``."""

    def handle(self, request: str) -> str:
        if request == "high":
            return "HighPriorityHandler: Handling high priority request."
        return super().handle(request)