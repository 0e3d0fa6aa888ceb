import httpx
import pytest

RATE_HEADERS = {
    "X-Rate-Limit-Limit": "600",
    "X-Rate-Limit-Remaining": "599",
    "X-Rate-Limit-Reset": "3600",
}

MEMBER_BODY = {
    "id": 1,
    "username": "Livid",
    "url": "https://www.v2ex.com/u/Livid",
    "website": None,
    "twitter": "Livid",
    "psn": None,
    "github": None,
    "btc": None,
    "location": "",
    "tagline": "Beautifully Advance",
    "bio": "",
    "avatar_mini": "https://cdn.v2ex.com/avatar/c4ca/4238/1_mini.png",
    "avatar_normal": "https://cdn.v2ex.com/avatar/c4ca/4238/1_normal.png",
    "avatar_large": "https://cdn.v2ex.com/avatar/c4ca/4238/1_large.png",
    "created": 1272203146,
    "last_modified": 1653290521,
}

SHORT_MEMBER_BODY = {
    "id": 1,
    "username": "Livid",
    "url": "https://www.v2ex.com/u/Livid",
    "bio": "Remember the bigger green",
    "website": "",
    "github": "",
    "avatar": "https://cdn.v2ex.com/avatar/c4ca/4238/1_normal.png",
    "created": 1272203146,
}

NODE_BODY = {
    "id": 12,
    "url": "https://www.v2ex.com/go/python",
    "name": "python",
    "title": "Python",
    "header": "这里讨论各种 Python 语言编程话题",
    "footer": "",
    "avatar": "https://cdn.v2ex.com/navatar/c20a/d4d7/90_large.png",
    "topics": 15208,
    "created": 1278683336,
    "last_modified": 1655104025,
}

TOPIC_BODY = {
    "id": 1000,
    "title": "A topic",
    "content": "Body",
    "content_rendered": "<p>Body</p>",
    "syntax": 0,
    "url": "https://www.v2ex.com/t/1000",
    "replies": 3,
    "last_reply_by": "someone",
    "created": 1655192035,
    "last_modified": 1655192035,
    "last_touched": 1655193035,
}

REPLY_BODY = {
    "id": 501,
    "content": "Nice",
    "content_rendered": "<p>Nice</p>",
    "created": 1655192100,
    "member": SHORT_MEMBER_BODY,
}


def json_response(
    body: dict,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    hdrs = dict(RATE_HEADERS)
    if headers:
        hdrs.update(headers)
    return httpx.Response(status_code, json=body, headers=hdrs)


@pytest.fixture
def recorded():
    """Requests seen by a mock transport built with ``recording_transport``."""
    return []


@pytest.fixture
def recording_transport(recorded):
    """Build a MockTransport that records requests and replies with *body*."""

    def build(body: dict, **kwargs) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return json_response(body, **kwargs)

        return httpx.MockTransport(handler)

    return build
