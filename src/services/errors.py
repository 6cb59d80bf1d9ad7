# src/services/errors.py


class SubscriptionError(Exception):
    """Base error for the subscription pipeline.

    ``status_code`` and ``public_message`` are what the client sees; the
    exception text itself is only ever logged.
    """

    status_code = 500
    public_message = "Internal server error"


class DecodeError(SubscriptionError):
    status_code = 400
    public_message = "Bad request"


class MethodError(SubscriptionError):
    status_code = 405
    public_message = "Method not allowed"


class StoreError(SubscriptionError):
    """Any failure coming from the relational store."""


class TransactionOpenError(StoreError):
    pass


class WriteError(StoreError):
    pass


class CommitError(StoreError):
    pass
