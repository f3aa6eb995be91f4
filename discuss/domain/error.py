"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action reserved for the content's author."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PostLockedError(DomainError):
    """Raised when attempting to change the best answer of a locked post."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Cannot modify best answer on locked post {post_id}")
