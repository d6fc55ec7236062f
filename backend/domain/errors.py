"""
Error taxonomy shared by the stores, services and routes.

Routes translate these into HTTP responses:
ValidationError -> 400, NotFoundError -> 404, UnauthorizedError -> 401.
Anything else reaching the app boundary is answered with a generic 500.
"""


class ValidationError(ValueError):
    """Malformed or missing required input."""


class NotFoundError(LookupError):
    """The referenced entity does not exist."""


class UnauthorizedError(Exception):
    """Submitted security answers do not match the stored ones."""
