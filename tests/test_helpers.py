"""
Common testing utilities for apread tests.

Provides fake aiohttp sessions that serve canned JSON documents by URL, so the
resolution pipeline can be exercised without a network.
"""

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

from aiohttp import ClientResponse, ClientSession

ACTOR_URL = "https://example.social/users/alice"
OUTBOX_URL = "https://example.social/users/alice/outbox"
FIRST_PAGE_URL = "https://example.social/users/alice/outbox?page=true"
LAST_PAGE_URL = "https://example.social/users/alice/outbox?min_id=0&page=true"
WEBFINGER_URL = (
    "https://example.social/.well-known/webfinger"
    "?resource=acct:alice@example.social"
)


def create_response(
    body: Any = None,
    json_error: Optional[BaseException] = None,
    status_error: Optional[BaseException] = None,
) -> MagicMock:
    """Create a mock ClientResponse returning ``body`` from json()."""
    response = MagicMock(spec=ClientResponse)
    response.status = 200
    response.json = AsyncMock(return_value=body)
    if json_error is not None:
        response.json.side_effect = json_error
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


def create_context(response: MagicMock) -> MagicMock:
    """Wrap a response in an async context manager like session.get() returns."""
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


def create_session(responses: Dict[str, Any]) -> AsyncMock:
    """Create a mock ClientSession serving one response per URL.

    Values may be mock responses, plain bodies or exceptions raised by get().
    """
    session = AsyncMock(spec=ClientSession)

    def get(url, **kwargs):
        value = responses[url]
        if isinstance(value, BaseException):
            raise value
        if isinstance(value, (dict, list, str, int, type(None))):
            value = create_response(value)
        return create_context(value)

    session.get = MagicMock(side_effect=get)
    return session


def requested_urls(session: AsyncMock) -> List[str]:
    """URLs passed to session.get(), in call order."""
    return [call.args[0] for call in session.get.call_args_list]


def requested_accept_headers(session: AsyncMock) -> List[str]:
    """Accept headers passed to session.get(), in call order."""
    return [call.kwargs["headers"]["Accept"] for call in session.get.call_args_list]
