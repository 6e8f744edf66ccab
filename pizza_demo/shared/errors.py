"""
Domain errors. Each carries the HTTP status the apps answer with, so the
transport layers only decide the response *shape*.
"""


class PizzaOrderError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OrderValidationError(PizzaOrderError):
    """pizzaId / quantity missing or malformed"""
    status_code = 400


class NotFoundError(PizzaOrderError):
    """Unknown order or pizza"""
    status_code = 404


class IllegalTransitionError(PizzaOrderError):
    """Cancel attempted on an order that already left the kitchen"""
    status_code = 400
