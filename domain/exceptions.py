"""Domain exceptions."""


class PersistenceError(Exception):
    """Raised when the store is unreachable or rejects an operation."""
    pass
