"""
Shared test configuration and fixtures for apread tests.

Provides sample WebFinger and ActivityStreams documents shaped like the ones a
Mastodon server returns.
"""

import pytest

from tests.test_helpers import (
    ACTOR_URL,
    FIRST_PAGE_URL,
    LAST_PAGE_URL,
    OUTBOX_URL,
    WEBFINGER_URL,
)


@pytest.fixture
def webfinger_body():
    """WebFinger JRD for alice@example.social."""
    return {
        "subject": "acct:alice@example.social",
        "aliases": [
            "https://example.social/@alice",
            ACTOR_URL,
        ],
        "links": [
            {
                "rel": "http://webfinger.net/rel/profile-page",
                "type": "text/html",
                "href": "https://example.social/@alice",
            },
            {
                "rel": "self",
                "type": "application/activity+json",
                "href": ACTOR_URL,
            },
            {
                "rel": "http://ostatus.org/schema/1.0/subscribe",
                "template": "https://example.social/authorize_interaction?uri={uri}",
            },
        ],
    }


@pytest.fixture
def actor_body():
    """Actor document for alice."""
    return {
        "@context": ["https://www.w3.org/ns/activitystreams"],
        "id": ACTOR_URL,
        "type": "Person",
        "preferredUsername": "alice",
        "inbox": f"{ACTOR_URL}/inbox",
        "outbox": OUTBOX_URL,
    }


@pytest.fixture
def outbox_body():
    """Outbox collection index for alice."""
    return {
        "@context": "https://www.w3.org/ns/activitystreams",
        "id": OUTBOX_URL,
        "type": "OrderedCollection",
        "totalItems": 3,
        "first": FIRST_PAGE_URL,
        "last": LAST_PAGE_URL,
    }


@pytest.fixture
def page_body():
    """First outbox page holding two posts around a boost."""
    return {
        "@context": "https://www.w3.org/ns/activitystreams",
        "id": FIRST_PAGE_URL,
        "type": "OrderedCollectionPage",
        "partOf": OUTBOX_URL,
        "orderedItems": [
            {
                "id": f"{ACTOR_URL}/statuses/3/activity",
                "type": "Create",
                "actor": ACTOR_URL,
                "published": "2024-05-02T10:00:00Z",
                "object": {
                    "id": f"{ACTOR_URL}/statuses/3",
                    "type": "Note",
                    "content": "<p>hi</p>",
                },
            },
            {
                "id": f"{ACTOR_URL}/statuses/2/activity",
                "type": "Announce",
                "actor": ACTOR_URL,
                "published": "2024-05-01T10:00:00Z",
                "object": "https://other.example/notes/1",
            },
            {
                "id": f"{ACTOR_URL}/statuses/1/activity",
                "type": "Create",
                "actor": ACTOR_URL,
                "published": "2024-04-30T10:00:00Z",
                "object": {
                    "id": f"{ACTOR_URL}/statuses/1",
                    "type": "Note",
                    "content": "<b>x</b>",
                },
            },
        ],
    }


@pytest.fixture
def documents(webfinger_body, actor_body, outbox_body, page_body):
    """All four documents keyed by the URL that serves them."""
    return {
        WEBFINGER_URL: webfinger_body,
        ACTOR_URL: actor_body,
        OUTBOX_URL: outbox_body,
        FIRST_PAGE_URL: page_body,
    }
