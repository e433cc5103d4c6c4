"""Exceptions raised around the owner parser (the parser itself never raises)."""


class OwnerRecordError(Exception):
    """Base error for property owner record handling."""


class InvalidOwnerRecordError(OwnerRecordError):
    """Raised when a property record payload has the wrong shape."""
