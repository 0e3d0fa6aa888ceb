"""Async and sync HTTP clients for the V2EX API v2."""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from v2ex.call_context import call_id_var, generate_call_id, get_call_id
from v2ex.config import V2EX_API_DOMAIN, settings
from v2ex.exceptions import V2exError
from v2ex.models import (
    CreateTokenRequest,
    CreateTokenResponse,
    MemberResponse,
    Node,
    Reply,
    ResultResponse,
    StatusResponse,
    TokenDetail,
    TokenExpiration,
    TokenScope,
    Topic,
    TopicDetail,
)
from v2ex.rate_limit import RateLimitTracker

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Raised by httpx when a request cannot be sent or no response arrives.
_TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def _coerce_page(page: int | None) -> int:
    """Pages are 1-based; anything below 1 means the first page."""
    if page is None or page <= 0:
        return 1
    return page


def _segment(value: str) -> str:
    """Escape *value* for use as a single path segment."""
    return quote(value, safe="")


def _log_extra() -> dict[str, str]:
    return {"call_id": get_call_id()}


def _client_kwargs(token: str, transport: Any) -> dict[str, Any]:
    kwargs: dict[str, Any] = {
        "base_url": V2EX_API_DOMAIN,
        "headers": {"Authorization": f"Bearer {token}"},
        "timeout": settings.timeout,
    }
    if transport is not None:
        kwargs["transport"] = transport
    return kwargs


def _token_body(
    scope: TokenScope | str, expiration: TokenExpiration | int
) -> dict[str, Any]:
    try:
        return CreateTokenRequest(scope=scope, expiration=expiration).model_dump()
    except ValidationError as exc:
        raise V2exError(f"Invalid token request: {exc}", cause=exc) from exc


def _decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Decode *response* into *model*, whatever its status code."""
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        logger.warning(
            "Undecodable %s body from %s %s (HTTP %d)",
            model.__name__,
            response.request.method,
            response.request.url.path,
            response.status_code,
            extra=_log_extra(),
        )
        raise V2exError(
            f"Response body is not a valid {model.__name__}",
            status_code=response.status_code,
            cause=exc,
        ) from exc


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class AsyncV2exClient:
    """Async client for the V2EX API (backed by ``httpx.AsyncClient``).

    Safe to share between concurrent tasks; ``rate_limit`` reflects the
    headers of the most recently completed call.
    """

    def __init__(
        self,
        token: str,
        *,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(**_client_kwargs(token, _transport))
        self.rate_limit = RateLimitTracker()

    # -- context manager -----------------------------------------------------

    async def __aenter__(self) -> AsyncV2exClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # -- internal ------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> ModelT:
        token = call_id_var.set(generate_call_id())
        try:
            try:
                resp = await self._client.request(
                    method, path, params=params, json=json
                )
            except _TRANSPORT_ERRORS as exc:
                logger.warning(
                    "%s %s failed: %s", method, path, exc, extra=_log_extra()
                )
                raise V2exError(f"{method} {path} failed: {exc}", cause=exc) from exc
            logger.debug(
                "%s %s -> %d", method, path, resp.status_code, extra=_log_extra()
            )
            self.rate_limit.update(resp.headers)
            return _decode(resp, model)
        finally:
            call_id_var.reset(token)

    # -- notifications -------------------------------------------------------

    async def get_notifications(self, page: int = 1) -> StatusResponse:
        return await self._request(
            "GET", "/notifications", StatusResponse,
            params={"p": _coerce_page(page)},
        )

    async def delete_notification(self, notification_id: int) -> StatusResponse:
        return await self._request(
            "DELETE", f"/notifications/{notification_id}", StatusResponse,
        )

    # -- member --------------------------------------------------------------

    async def get_member(self) -> MemberResponse:
        return await self._request("GET", "/member", MemberResponse)

    # -- tokens --------------------------------------------------------------

    async def get_token(self) -> ResultResponse[TokenDetail]:
        return await self._request("GET", "/token", ResultResponse[TokenDetail])

    async def create_token(
        self,
        scope: TokenScope | str,
        expiration: TokenExpiration | int,
    ) -> CreateTokenResponse:
        return await self._request(
            "POST", "/tokens", CreateTokenResponse,
            json=_token_body(scope, expiration),
        )

    # -- nodes ---------------------------------------------------------------

    async def get_node(self, name: str) -> ResultResponse[Node]:
        return await self._request(
            "GET", f"/nodes/{_segment(name)}", ResultResponse[Node],
        )

    async def get_node_topics(
        self, name: str, page: int = 1
    ) -> ResultResponse[list[Topic]]:
        return await self._request(
            "GET", f"/nodes/{_segment(name)}/topics", ResultResponse[list[Topic]],
            params={"p": _coerce_page(page)},
        )

    # -- topics --------------------------------------------------------------

    async def get_topic(self, topic_id: int) -> ResultResponse[TopicDetail]:
        return await self._request(
            "GET", f"/topics/{topic_id}", ResultResponse[TopicDetail],
        )

    async def get_topic_replies(
        self, topic_id: int, page: int = 1
    ) -> ResultResponse[list[Reply]]:
        return await self._request(
            "GET", f"/topics/{topic_id}/replies", ResultResponse[list[Reply]],
            params={"p": _coerce_page(page)},
        )


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class V2exClient:
    """Synchronous client for the V2EX API (backed by ``httpx.Client``).

    May be shared between threads.
    """

    def __init__(
        self,
        token: str,
        *,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(**_client_kwargs(token, _transport))
        self.rate_limit = RateLimitTracker()

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> V2exClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # -- internal ------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> ModelT:
        token = call_id_var.set(generate_call_id())
        try:
            try:
                resp = self._client.request(method, path, params=params, json=json)
            except _TRANSPORT_ERRORS as exc:
                logger.warning(
                    "%s %s failed: %s", method, path, exc, extra=_log_extra()
                )
                raise V2exError(f"{method} {path} failed: {exc}", cause=exc) from exc
            logger.debug(
                "%s %s -> %d", method, path, resp.status_code, extra=_log_extra()
            )
            self.rate_limit.update(resp.headers)
            return _decode(resp, model)
        finally:
            call_id_var.reset(token)

    # -- notifications -------------------------------------------------------

    def get_notifications(self, page: int = 1) -> StatusResponse:
        return self._request(
            "GET", "/notifications", StatusResponse,
            params={"p": _coerce_page(page)},
        )

    def delete_notification(self, notification_id: int) -> StatusResponse:
        return self._request(
            "DELETE", f"/notifications/{notification_id}", StatusResponse,
        )

    # -- member --------------------------------------------------------------

    def get_member(self) -> MemberResponse:
        return self._request("GET", "/member", MemberResponse)

    # -- tokens --------------------------------------------------------------

    def get_token(self) -> ResultResponse[TokenDetail]:
        return self._request("GET", "/token", ResultResponse[TokenDetail])

    def create_token(
        self,
        scope: TokenScope | str,
        expiration: TokenExpiration | int,
    ) -> CreateTokenResponse:
        return self._request(
            "POST", "/tokens", CreateTokenResponse,
            json=_token_body(scope, expiration),
        )

    # -- nodes ---------------------------------------------------------------

    def get_node(self, name: str) -> ResultResponse[Node]:
        return self._request(
            "GET", f"/nodes/{_segment(name)}", ResultResponse[Node],
        )

    def get_node_topics(
        self, name: str, page: int = 1
    ) -> ResultResponse[list[Topic]]:
        return self._request(
            "GET", f"/nodes/{_segment(name)}/topics", ResultResponse[list[Topic]],
            params={"p": _coerce_page(page)},
        )

    # -- topics --------------------------------------------------------------

    def get_topic(self, topic_id: int) -> ResultResponse[TopicDetail]:
        return self._request(
            "GET", f"/topics/{topic_id}", ResultResponse[TopicDetail],
        )

    def get_topic_replies(
        self, topic_id: int, page: int = 1
    ) -> ResultResponse[list[Reply]]:
        return self._request(
            "GET", f"/topics/{topic_id}/replies", ResultResponse[list[Reply]],
            params={"p": _coerce_page(page)},
        )
