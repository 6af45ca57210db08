"""Domain layer errors.

Every domain error carries a ``public_message`` that is safe to show to
end users. The internal message (``str(error)``) is for logs only.
"""


class DomainError(Exception):
    """Base domain error."""

    public_message: str = "Something went wrong. Please try again."


class AuthRequiredError(DomainError):
    """Raised when an operation needs a signed-in user and there is none."""

    public_message = "Please sign in to continue."

    def __init__(self, reason: str = "No authenticated user"):
        super().__init__(reason)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    public_message = "The requested item could not be found."

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TargetNotFoundError(NotFoundError):
    """Raised when the post or comment being liked does not exist."""

    public_message = "This post or comment no longer exists."


class SelfActionForbiddenError(DomainError):
    """Raised when a user tries to like their own post."""

    public_message = "You can't like your own post."

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(f"User {user_id} cannot like their own {resource} {resource_id}")


class TransientStoreError(DomainError):
    """Raised when the store fails in a way that may succeed on retry."""

    public_message = "Something went wrong. Please try again in a moment."

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Store failure during {operation}")
