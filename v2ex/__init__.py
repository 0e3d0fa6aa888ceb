"""Typed Python client for the V2EX API v2."""

from __future__ import annotations

from v2ex.client import AsyncV2exClient, V2exClient
from v2ex.exceptions import V2exError
from v2ex.models import (
    CreatedToken,
    CreateTokenRequest,
    CreateTokenResponse,
    Member,
    MemberResponse,
    Node,
    Reply,
    ResultResponse,
    Status,
    StatusResponse,
    Supplement,
    TokenDetail,
    TokenExpiration,
    TokenScope,
    Topic,
    TopicDetail,
)
from v2ex.rate_limit import RateLimitInfo, RateLimitTracker

__all__ = [
    "AsyncV2exClient",
    "V2exClient",
    "V2exError",
    "RateLimitInfo",
    "RateLimitTracker",
    "Status",
    "StatusResponse",
    "ResultResponse",
    "Member",
    "MemberResponse",
    "TokenScope",
    "TokenExpiration",
    "TokenDetail",
    "CreateTokenRequest",
    "CreatedToken",
    "CreateTokenResponse",
    "Node",
    "Topic",
    "TopicDetail",
    "Supplement",
    "Reply",
]
