"""Failures raised by appointment, catalog and tenant stores."""


class StoreError(Exception):
    """The backend could not complete the request."""


class ValidationError(StoreError):
    """The payload is malformed, e.g. a missing client or service reference."""


class NotFoundError(StoreError):
    """The target record no longer exists."""
