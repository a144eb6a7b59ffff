"""
Protocol Document Models

Typed representations of the JSON documents exchanged while resolving a handle.

Key Components:
- webfinger.py: WebFinger (RFC 7033) discovery document and its links
- activitystreams.py: ActivityPub actor, outbox index and outbox page

Parsing is forward compatible: unknown fields are ignored, and unknown link
relations or activity types fall back to catch-all variants instead of failing.
"""
