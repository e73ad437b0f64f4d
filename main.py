#!/usr/bin/env python3
"""
PodRacer entry point.

Plays one race against the referee over stdin/stdout. Diagnostics go to
stderr so they never mix with the commands.
"""

import logging
import sys

from podracer.config import get_settings
from podracer.core.game import run

settings = get_settings()


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(f"Starting {settings.APP_NAME} v{settings.VERSION}")
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
