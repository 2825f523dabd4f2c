"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InviteReissueError(DomainError):
    """A replacement invite was created but could not be accepted."""

    def __init__(self, original_id: str, reissued_id: str):
        self.original_id = original_id
        self.reissued_id = reissued_id
        super().__init__(
            f"Could not accept invite {reissued_id} reissued for {original_id}"
        )
