"""
Errors raised while resolving a handle into posts.

Every failure is terminal. Nothing is retried and no partial output is
produced, so callers only need to catch ``ApreadException``.
"""

from typing import Optional


class ApreadException(Exception):
    """
    Base class for resolution failures.

    This exception class provides static methods for creating the specific
    failures below with stable message codes.
    """

    @staticmethod
    def bad_handle(raw: str) -> "BadHandle":
        """The handle did not split into a non-empty id and domain."""
        return BadHandle(f"error-apread-1000 Unable to read handle: {raw!r}")

    @staticmethod
    def no_feed_link(subject: Optional[str] = None) -> "NoFeedLink":
        """No link with rel="self" was present in the WebFinger document."""
        if subject:
            return NoFeedLink(f"error-apread-1001 No feed link for {subject}")
        return NoFeedLink("error-apread-1001 No feed link")

    @staticmethod
    def request_failure(
        stage: str, url: str, cause: BaseException
    ) -> "RequestFailure":
        """Fetching or decoding the document for ``stage`` failed."""
        detail = str(cause) or type(cause).__name__
        return RequestFailure(
            f"error-apread-1002 {stage} request to {url} failed: {detail}",
            stage=stage,
            url=url,
        )


class BadHandle(ApreadException):
    """The input handle lacks the required id/domain structure."""


class NoFeedLink(ApreadException):
    """The WebFinger document contains no usable feed link."""


class RequestFailure(ApreadException):
    """
    A transport or decoding failure at one stage of the pipeline.

    The original exception is kept as ``__cause__`` and its message is
    surfaced as part of this one.
    """

    def __init__(self, message: str, stage: str, url: str) -> None:
        super().__init__(message)
        self.stage = stage
        self.url = url
