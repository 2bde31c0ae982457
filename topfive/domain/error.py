"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when no current user can be resolved for a request."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ResourceNotFoundError(NotFoundError):
    """Raised when the resource being voted on does not exist."""

    def __init__(self, resource_id: str):
        super().__init__("Resource", resource_id)


class VoteNotFoundError(NotFoundError):
    """Raised when a user has no vote on a resource."""

    def __init__(self, user_id: str, resource_id: str):
        self.user_id = user_id
        self.resource_id = resource_id
        super().__init__("Vote", f"user={user_id} resource={resource_id}")


class VoteConflictError(DomainError):
    """Raised when a user already has a vote on a resource.

    Clients must change the existing vote instead of creating another.
    """

    def __init__(self, user_id: str, resource_id: str):
        self.user_id = user_id
        self.resource_id = resource_id
        super().__init__(f"User {user_id} has already voted on resource {resource_id}")


class PersistenceFailureError(DomainError):
    """Raised when a unit of work could not be committed.

    The unit of work has been rolled back, so retrying is safe.
    """

    pass


class OperationTimeoutError(PersistenceFailureError):
    """Raised when a unit of work exceeds its time budget and is rolled back."""

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"{operation} timed out after {timeout:g}s")
