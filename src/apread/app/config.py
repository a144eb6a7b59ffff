"""
Configuration Module for apread

Settings are loaded from environment variables through pydantic-settings, with
defaults that reproduce the classic layout: the handle id right-aligned in 15
columns and post bodies wrapped at 80 columns, indented by 5 spaces.

Key configuration areas include:
- Debugging and error reporting
- HTTP transport
- Console layout
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from apread import __version__


class Settings(BaseSettings):
    """
    Application settings for apread.

    Environment variables are mapped to fields by name, for example
    WRAP_WIDTH=100 sets ``wrap_width``.
    """

    debug: bool = False
    """
    Enable debug logging of every request and derived URL.
    Set with DEBUG=true environment variable.
    """

    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """

    http_timeout: float = Field(default=30.0, gt=0)
    """
    Total timeout in seconds for each HTTP request.
    Set with HTTP_TIMEOUT environment variable.
    """

    user_agent: str = f"apread/{__version__}"
    """
    User-Agent header sent with every request.
    Set with USER_AGENT environment variable.
    """

    label_width: int = Field(default=15, ge=0)
    """Width of the field the handle id is right-aligned in"""

    wrap_width: int = Field(default=80, gt=0)
    """Column width post bodies are wrapped to"""

    indent: int = Field(default=5, ge=0)
    """Number of spaces before each line of a post body"""
