"""
apread - a command-line reader for ActivityPub outboxes

Given a fediverse handle such as ``alice@example.social`` this package walks the
discovery chain defined by WebFinger (RFC 7033) and ActivityPub to print the
most recent posts published by that identity.

Key Components:
- resolve: Handle parsing and the sequential resolution pipeline
- model: Typed representations of the WebFinger and ActivityStreams documents
- render: Post content extraction and console presentation
- app: Configuration, logging and the command-line entry point

Resolution Flow:
1. Parse the handle into an id and a domain
2. Query https://{domain}/.well-known/webfinger for the actor URL
3. Fetch the actor document and follow its outbox
4. Fetch the outbox index and its first page
5. Render every Create activity on that page
"""

__version__ = "0.1.0"
