"""
Invitation Issuer Use Cases
"""

from .dtos import InviteListResponse, InviteResponse, RedeemInviteResponse
from .issue_invite_use_case import IssueInviteUseCase
from .list_invites_use_case import ListInvitesUseCase
from .redeem_invite_use_case import RedeemInviteUseCase
from .resend_invite_use_case import ResendInviteUseCase
from .revoke_invite_use_case import RevokeInviteUseCase

__all__ = [
    "IssueInviteUseCase",
    "RedeemInviteUseCase",
    "ResendInviteUseCase",
    "RevokeInviteUseCase",
    "ListInvitesUseCase",
    "InviteResponse",
    "InviteListResponse",
    "RedeemInviteResponse",
]
