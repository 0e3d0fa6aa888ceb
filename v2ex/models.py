"""Pydantic request and response schemas for the V2EX API v2."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_serializer

ResultT = TypeVar("ResultT")


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class Status(BaseModel):
    """Outcome flag and message carried by most responses."""

    success: bool = Field(..., description="False when the API rejected the call")
    message: str = Field(..., description="Human-readable status message")


class StatusResponse(Status):
    """Response carrying only the status envelope."""


class ResultResponse(Status, Generic[ResultT]):
    """Status envelope plus an endpoint-specific ``result`` payload.

    Failed calls usually omit ``result``, so it decodes to ``None`` then.
    """

    result: ResultT | None = None


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------


class Member(BaseModel):
    """A member profile.

    The full shape comes from ``/member``; topics and replies embed a
    shorter one with a single ``avatar`` field.
    """

    id: int = Field(..., ge=0)
    username: str
    url: str
    website: str | None = None
    twitter: str | None = None
    psn: str | None = None
    github: str | None = None
    btc: str | None = None
    location: str | None = None
    tagline: str | None = None
    bio: str | None = None
    avatar: str | None = None
    avatar_mini: str | None = None
    avatar_normal: str | None = None
    avatar_large: str | None = None
    created: int
    last_modified: int | None = None


class MemberResponse(BaseModel):
    """``/member`` response. Unlike the other envelopes it has no message."""

    success: bool
    result: Member | None = None


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class TokenScope(str, Enum):
    EVERYTHING = "everything"
    # Regular tokens cannot create further tokens.
    REGULAR = "regular"


class TokenExpiration(IntEnum):
    """Token lifetimes accepted by ``POST /tokens``, in seconds."""

    DAYS_30 = 2592000
    DAYS_60 = 5184000
    DAYS_90 = 7776000
    DAYS_180 = 15552000


class CreateTokenRequest(BaseModel):
    scope: TokenScope
    expiration: TokenExpiration

    @field_serializer("scope")
    def serialize_scope(self, scope: TokenScope) -> str:
        return scope.value

    @field_serializer("expiration")
    def serialize_expiration(self, expiration: TokenExpiration) -> str:
        return str(int(expiration))


class TokenDetail(BaseModel):
    """Details of the token used to authenticate the current call."""

    token: str
    scope: TokenScope
    expiration: int = Field(..., description="Lifetime in seconds")
    good_for_days: int = Field(..., description="Days left before expiry")
    total_used: int = Field(..., ge=0)
    last_used: int
    created: int


class CreatedToken(BaseModel):
    token: str


class CreateTokenResponse(BaseModel):
    """``POST /tokens`` response: ``success`` and the new token."""

    success: bool
    message: str | None = None
    result: CreatedToken | None = None


# ---------------------------------------------------------------------------
# Nodes, topics, replies
# ---------------------------------------------------------------------------


class Node(BaseModel):
    id: int = Field(..., ge=0)
    url: str
    name: str
    title: str
    header: str | None = Field(None, description="Header HTML")
    footer: str | None = Field(None, description="Footer HTML")
    avatar: str | None = None
    topics: int = Field(..., ge=0, description="Number of topics in the node")
    created: int
    last_modified: int


class Topic(BaseModel):
    """Topic summary as listed under a node."""

    id: int = Field(..., ge=0)
    title: str
    content: str
    content_rendered: str
    syntax: int
    url: str
    replies: int = Field(..., ge=0)
    last_reply_by: str
    created: int
    last_modified: int
    last_touched: int


class Supplement(BaseModel):
    """Text appended to a topic after it was posted."""

    id: int = Field(..., ge=0)
    content: str
    content_rendered: str
    syntax: int
    created: int


class TopicDetail(Topic):
    """A topic with its author and owning node."""

    member: Member
    node: Node
    supplements: list[Supplement] = Field(default_factory=list)


class Reply(BaseModel):
    id: int = Field(..., ge=0)
    content: str
    content_rendered: str
    created: int
    member: Member
