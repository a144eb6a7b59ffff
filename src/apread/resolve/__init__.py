"""
Identity Resolution

This package turns a fediverse handle into the first page of its outbox.

Key Components:
- handle.py: Handle parsing and WebFinger URL construction
- outbox.py: The four-stage resolution pipeline

The resolution flow follows these steps:
1. Parse ``id@domain`` into a Handle
2. WebFinger: fetch the discovery document and pick the rel="self" link
3. Actor: fetch the actor document and read its outbox URL
4. Outbox: fetch the outbox index and read its first page URL
5. Page: fetch the first page of activities

Every stage depends on the document fetched by the one before it, so requests
are strictly sequential and the first failure aborts the whole run.
"""
