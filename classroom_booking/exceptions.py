class StorageError(Exception):
    """Raised when a statement against the booking store fails.

    Covers connection errors, timeouts and constraint violations alike;
    the underlying driver error is chained as ``__cause__``.
    """
