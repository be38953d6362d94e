"""Repository-level exceptions.

These are raised by repository implementations, not by the service.
The service maps them to the identity error taxonomy in
``gatehouse_identity.exceptions``.
"""


class RepositoryError(Exception):
    """Base exception for persistence failures."""

    def __init__(self, message: str = "Repository error"):
        self.message = message
        super().__init__(self.message)


class RecordNotFoundError(RepositoryError):
    """Raised by lookups when no record matches the key."""

    def __init__(self, entity: str, key: str):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class ContextCancelledError(RepositoryError):
    """Raised when an operation runs under a cancelled execution context."""

    def __init__(self, message: str = "Execution context cancelled"):
        super().__init__(message)


class DeadlineExceededError(RepositoryError):
    """Raised when the execution context deadline has passed."""

    def __init__(self, message: str = "Execution context deadline exceeded"):
        super().__init__(message)
