"""Invite use cases."""

from inviteflow.application.usecase.invite.accept_invite import (
    AcceptedInvite,
    AcceptInviteRequest,
    AcceptInviteUseCase,
    CheckInviteRequest,
    CheckInviteResponse,
    CheckInviteUseCase,
)
from inviteflow.application.usecase.invite.get_invite_stats import (
    GetInviteStatsRequest,
    GetInviteStatsResponse,
    GetInviteStatsUseCase,
)
from inviteflow.application.usecase.invite.issue_link import (
    IssueLinkRequest,
    IssueLinkResponse,
    IssueLinkUseCase,
)
from inviteflow.application.usecase.invite.record_click import (
    RecordClickRequest,
    RecordClickUseCase,
)
from inviteflow.application.usecase.invite.send_invites import (
    InviteeInfo,
    SendInvitesRequest,
    SendInvitesResponse,
    SendInvitesUseCase,
    SentInviteItem,
)

__all__ = [
    "AcceptedInvite",
    "AcceptInviteRequest",
    "AcceptInviteUseCase",
    "CheckInviteRequest",
    "CheckInviteResponse",
    "CheckInviteUseCase",
    "GetInviteStatsRequest",
    "GetInviteStatsResponse",
    "GetInviteStatsUseCase",
    "InviteeInfo",
    "IssueLinkRequest",
    "IssueLinkResponse",
    "IssueLinkUseCase",
    "RecordClickRequest",
    "RecordClickUseCase",
    "SendInvitesRequest",
    "SendInvitesResponse",
    "SendInvitesUseCase",
    "SentInviteItem",
]
