"""Handle to outbox resolution pipeline.

Walks WebFinger, the actor document, the outbox index and the first outbox
page in order. Each stage's document yields the URL for the next one.
"""

import asyncio
from enum import Enum
import logging
from typing import Callable, List, Optional, Type, TypeVar

from aiohttp import ClientError, ClientSession
from pydantic import BaseModel

from apread.errors import ApreadException
from apread.model.activitystreams import Actor, OutboxIndex, Page
from apread.model.webfinger import WebfingerDocument
from apread.render.content import RenderedPost, extract, html_to_markdown
from apread.resolve.handle import Handle

logger = logging.getLogger(__name__)

ACTIVITY_JSON = "application/activity+json"
ACTIVITYSTREAMS_JSON = (
    'application/ld+json; profile="https://www.w3.org/ns/activitystreams"'
)

DocumentType = TypeVar("DocumentType", bound=BaseModel)


class Stage(str, Enum):
    """Pipeline stages, in request order."""

    webfinger = "webfinger"
    actor = "actor"
    outbox = "outbox"
    page = "page"


async def fetch_document(
    session: ClientSession,
    stage: Stage,
    url: str,
    accept: str,
    model: Type[DocumentType],
) -> DocumentType:
    """Fetch a JSON document and validate it against ``model``.

    The body is decoded as JSON whatever content type the server declares.

    Args:
        session: HTTP client session
        stage: Pipeline stage, used to label failures
        url: Document URL
        accept: Value of the Accept header
        model: Document model to validate the body against

    Returns:
        The validated document

    Raises:
        RequestFailure: On transport errors, non-2xx responses, malformed JSON
            or a body that does not match ``model``
    """
    logger.debug("%s: GET %s", stage.value, url)
    try:
        async with session.get(url, headers={"Accept": accept}) as resp:
            resp.raise_for_status()
            body = await resp.json(content_type=None)
        return model.model_validate(body)
    except (ClientError, asyncio.TimeoutError, ValueError) as e:
        raise ApreadException.request_failure(stage.value, url, e) from e


async def fetch_webfinger(session: ClientSession, handle: Handle) -> WebfingerDocument:
    return await fetch_document(
        session,
        Stage.webfinger,
        handle.webfinger_url(),
        ACTIVITY_JSON,
        WebfingerDocument,
    )


async def fetch_actor(session: ClientSession, url: str) -> Actor:
    return await fetch_document(session, Stage.actor, url, ACTIVITYSTREAMS_JSON, Actor)


async def fetch_outbox_index(session: ClientSession, url: str) -> OutboxIndex:
    return await fetch_document(
        session, Stage.outbox, url, ACTIVITYSTREAMS_JSON, OutboxIndex
    )


async def fetch_page(session: ClientSession, url: str) -> Page:
    return await fetch_document(session, Stage.page, url, ACTIVITYSTREAMS_JSON, Page)


async def resolve_page(session: ClientSession, handle: Handle) -> Page:
    """Resolve a handle to the first page of its outbox.

    Args:
        session: HTTP client session
        handle: Parsed handle

    Returns:
        The first outbox page

    Raises:
        NoFeedLink: If WebFinger returns no actor link
        RequestFailure: If any of the four requests fails
    """
    webfinger = await fetch_webfinger(session, handle)
    actor_url = webfinger.actor_url()
    logger.debug("actor url for %s: %s", handle.label, actor_url)

    actor = await fetch_actor(session, actor_url)
    logger.debug("outbox url for %s: %s", handle.label, actor.outbox)

    index = await fetch_outbox_index(session, actor.outbox)
    logger.debug(
        "outbox for %s has %d items, first page %s",
        handle.label,
        index.total_items,
        index.first,
    )

    return await fetch_page(session, index.first)


async def read_feed(
    session: ClientSession,
    handle: Handle,
    html_to_text: Optional[Callable[[str], str]] = None,
) -> List[RenderedPost]:
    """Resolve a handle and render the posts on its first outbox page."""
    page = await resolve_page(session, handle)
    posts = extract(page, html_to_text or html_to_markdown)
    logger.info("read %d posts for %s", len(posts), handle.label)
    return posts
