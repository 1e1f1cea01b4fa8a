"""
Errors raised while resolving pagination parameters
"""


class PaginationError(ValueError):
    """Base class, the message is sent back to the client as-is"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self):
        return self.message


class ParseError(PaginationError):
    """A supplied parameter is not a base-10 integer"""
    pass


class ValidationError(PaginationError):
    """A parameter parsed fine but is out of bounds"""
    pass


class NotFoundError(PaginationError, KeyError):
    """No integer stored in the request context under the requested name"""
    pass
