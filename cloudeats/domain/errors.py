# cloudeats/domain/errors.py


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""


class InvalidInput(ServiceError):
    """Missing or malformed input, mapped to 400."""


class EmptyCart(InvalidInput):
    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message)


class InvalidCredentials(ServiceError):
    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class NotFound(ServiceError):
    """Missing cart, cart item, order or user, mapped to 404."""


class Conflict(ServiceError):
    """Resource already exists, mapped to 409."""


class StoreFailure(ServiceError):
    """
    Any underlying cache/database error.
    The original exception is logged by the repo and chained as __cause__,
    routers answer with a generic 500 message.
    """
