"""Exceptions raised by the lipsum package."""


class LipsumError(Exception):
    """Base class for all lipsum failures."""


class InsufficientData(LipsumError):
    """The chain has no start keys, so there is nothing to sample from."""

    def __init__(self, message=None, order=None):
        if message is None:
            message = "Not enough training text to generate from"
            if order is not None:
                message += f" (a chain of order {order} needs at least {order + 1} words)"
        super().__init__(message)
        self.order = order


class InvalidOrder(LipsumError, ValueError):
    """The requested chain order is not a supported positive integer."""

    def __init__(self, order, max_order):
        super().__init__(f"Chain order must be an integer between 1 and {max_order}, got {order!r}")
        self.order = order
        self.max_order = max_order
