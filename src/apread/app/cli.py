import argparse
import asyncio
import json
import logging
import os
import sys
from logging.config import dictConfig
from typing import List, Optional

import aiohttp
import sentry_sdk
from aiohttp import hdrs

from apread.app.config import Settings
from apread.errors import ApreadException
from apread.render.presentation import render
from apread.resolve.handle import parse_handle
from apread.resolve.outbox import read_feed

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False):
    logging_config_file = os.getenv("LOGGING_CONFIG_FILE", "")

    if len(logging_config_file) > 0:
        with open(logging_config_file) as fl:
            dictConfig(json.load(fl))
        return

    logging.basicConfig()
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apread", description="Read the latest posts of a fediverse account"
    )
    parser.add_argument("handle", help="The handle to read, as id@domain.")
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Column width to wrap posts to. Defaults to WRAP_WIDTH or 80.",
    )
    return parser


async def realMain(
    argv: Optional[List[str]] = None, settings: Optional[Settings] = None
) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        settings = Settings()  # type: ignore

    configure_logging(settings.debug)

    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)

    wrap_width = settings.wrap_width
    if args.width is not None and args.width > 0:
        wrap_width = args.width

    try:
        handle = parse_handle(args.handle)

        timeout = aiohttp.ClientTimeout(total=settings.http_timeout)
        headers = {hdrs.USER_AGENT: settings.user_agent}
        async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
            posts = await read_feed(session, handle)
    except ApreadException as e:
        sentry_sdk.capture_exception(e)
        logger.error("%s", e)
        return 1

    lines = render(
        handle,
        posts,
        label_width=settings.label_width,
        wrap_width=wrap_width,
        indent=settings.indent,
    )
    for line in lines:
        print(line)

    return 0


def main() -> None:
    sys.exit(asyncio.run(realMain()))


if __name__ == "__main__":
    main()
