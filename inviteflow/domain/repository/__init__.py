"""Repository interfaces for the invite domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from inviteflow.domain.repository.invite import InviteRepository

__all__ = [
    "InviteRepository",
]
