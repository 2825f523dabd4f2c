"""PostgreSQL repository implementations."""

from inviteflow.persistence.repository.invite import PostgresInviteRepository

__all__ = [
    "PostgresInviteRepository",
]
