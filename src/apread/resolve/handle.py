"""Fediverse handle parsing.

Parses ``id@domain`` handles and builds the WebFinger discovery URL for them.
"""

from pydantic import BaseModel, ConfigDict

from apread.errors import ApreadException


class Handle(BaseModel):
    """Parsed fediverse handle.

    Immutable once built; both fields are non-empty.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    domain: str

    @property
    def label(self) -> str:
        return f"{self.id}@{self.domain}"

    def webfinger_url(self) -> str:
        """Build the WebFinger discovery URL for this handle.

        Components are inserted verbatim, without escaping.

        Returns:
            https://{domain}/.well-known/webfinger?resource=acct:{id}@{domain}
        """
        return (
            f"https://{self.domain}/.well-known/webfinger"
            f"?resource=acct:{self.id}@{self.domain}"
        )


def parse_handle(raw: str) -> Handle:
    """Parse a raw ``id@domain`` string into a Handle.

    The input is split on ``@`` as given, without trimming or prefix removal.
    Components after the second ``@`` are ignored, so ``a@b@c`` parses as id
    ``a`` and domain ``b``.

    Args:
        raw: Handle string as typed by the user

    Returns:
        Handle with id and domain

    Raises:
        BadHandle: If the id or the domain is missing or empty
    """
    parts = raw.split("@")
    if len(parts) < 2:
        raise ApreadException.bad_handle(raw)

    id, domain = parts[0], parts[1]
    if not id or not domain:
        raise ApreadException.bad_handle(raw)

    return Handle(id=id, domain=domain)
