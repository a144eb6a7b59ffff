"""ActivityStreams documents fetched from an actor's server.

Covers the actor, its outbox index (an OrderedCollection) and the first page
of that collection (an OrderedCollectionPage).

https://www.w3.org/TR/activitystreams-core/
"""

from typing import Any, Annotated, Callable, List, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

POST_TYPE = "Create"
BOOST_TAG = "Boost"


class Actor(BaseModel):
    """Actor document. Every field except the outbox is ignored."""

    outbox: str


class OutboxIndex(BaseModel):
    """Outbox collection index.

    Only ``first`` is followed; ``last`` and ``total_items`` are kept for paging.
    """

    model_config = ConfigDict(populate_by_name=True)

    first: str
    last: str
    total_items: int = Field(alias="totalItems")


class PostObject(BaseModel):
    """The Note wrapped by a Create activity."""

    content: str


class PostItem(BaseModel):
    """A Create activity, the only kind that is rendered."""

    type: str = POST_TYPE
    object: PostObject
    published: str

    def markdown_content(self, html_to_text: Callable[[str], str]) -> str:
        return html_to_text(self.object.content)


class BoostItem(BaseModel):
    """Every activity that is not a Create: announces, updates, deletes..."""

    type: Any = None

    def markdown_content(self, html_to_text: Callable[[str], str]) -> str:
        return ""


def item_discriminator(value: Any) -> str:
    """Map a raw or constructed activity to its variant tag.

    Args:
        value: Activity dictionary from the page, or an item model

    Returns:
        POST_TYPE for Create activities, BOOST_TAG for anything else
    """
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if kind == POST_TYPE:
        return POST_TYPE
    return BOOST_TAG


Item = Annotated[
    Union[
        Annotated[PostItem, Tag(POST_TYPE)],
        Annotated[BoostItem, Tag(BOOST_TAG)],
    ],
    Discriminator(item_discriminator),
]


class Page(BaseModel):
    """First page of an outbox."""

    model_config = ConfigDict(populate_by_name=True)

    ordered_items: List[Item] = Field(alias="orderedItems")

    def posts(self) -> List[PostItem]:
        """Create activities on this page, in their original order."""
        return [item for item in self.ordered_items if isinstance(item, PostItem)]
