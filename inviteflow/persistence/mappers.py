"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from inviteflow.domain.model import Invite
from inviteflow.domain.value import InviteId, UserId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    clicks = tuple(row.get("clicks") or ())
    accepted_by = row.get("accepted_by_user_id")
    return Invite(
        id=InviteId(_as_uuid(row["id"])),
        inviter_id=UserId(_as_uuid(row["inviter_id"])),
        email=row.get("email"),
        phone=row.get("phone"),
        main=row["main"],
        accepted=row["accepted"],
        accepted_at=row.get("accepted_at"),
        accepted_by_user_id=UserId(_as_uuid(accepted_by)) if accepted_by else None,
        clicks=clicks,
        click_count=row["click_count"],
        created_at=row["created_at"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    data = invite.model_dump()
    data["clicks"] = list(invite.clicks)
    return data
