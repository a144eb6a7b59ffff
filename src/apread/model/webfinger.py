"""WebFinger discovery document.

https://tools.ietf.org/html/rfc7033#section-4.4
"""

from typing import Any, Annotated, List, Optional, Union

from pydantic import BaseModel, Discriminator, Tag

from apread.errors import ApreadException

PROFILE_PAGE_REL = "http://webfinger.net/rel/profile-page"
FEED_REL = "self"
SUBSCRIBE_REL = "http://ostatus.org/schema/1.0/subscribe"
UNKNOWN_REL = "unknown"

KNOWN_RELS = frozenset([PROFILE_PAGE_REL, FEED_REL, SUBSCRIBE_REL])


class ProfileLink(BaseModel):
    """Link to the HTML profile page of the account. Payload unused."""

    rel: str = PROFILE_PAGE_REL


class FeedLink(BaseModel):
    """Link to the ActivityPub actor document."""

    rel: str = FEED_REL
    href: str


class SubscribeLink(BaseModel):
    """Remote follow template of the hosting server. Payload unused."""

    rel: str = SUBSCRIBE_REL


class UnknownLink(BaseModel):
    """Any link relation not listed above."""

    rel: Optional[str] = None


def link_discriminator(value: Any) -> str:
    """Map a raw or constructed link to its variant tag.

    Args:
        value: Link dictionary from the document, or a link model

    Returns:
        The link's rel if it is a known relation, UNKNOWN_REL otherwise
    """
    if isinstance(value, dict):
        rel = value.get("rel")
    else:
        rel = getattr(value, "rel", None)
    if isinstance(rel, str) and rel in KNOWN_RELS:
        return rel
    return UNKNOWN_REL


Link = Annotated[
    Union[
        Annotated[ProfileLink, Tag(PROFILE_PAGE_REL)],
        Annotated[FeedLink, Tag(FEED_REL)],
        Annotated[SubscribeLink, Tag(SUBSCRIBE_REL)],
        Annotated[UnknownLink, Tag(UNKNOWN_REL)],
    ],
    Discriminator(link_discriminator),
]


class WebfingerDocument(BaseModel):
    """WebFinger JRD response. Only the links are consumed."""

    subject: Optional[str] = None
    links: List[Link]

    def actor_url(self) -> str:
        """Find the actor URL among the links.

        Every feed link overwrites the previous candidate, so when several are
        present the last one in document order wins.

        Returns:
            href of the last rel="self" link

        Raises:
            NoFeedLink: If the document has no rel="self" link
        """
        feed: Optional[str] = None
        for link in self.links:
            if isinstance(link, FeedLink):
                feed = link.href
        if feed is None:
            raise ApreadException.no_feed_link(self.subject)
        return feed
