from __future__ import annotations

import logging
import sys


def setup_logging(trace: bool = True) -> None:
    """Send trace lines to stderr, bare, the way `set -x` prints them."""
    logging.basicConfig(
        stream=sys.stderr,
        format="%(message)s",
        level=logging.INFO if trace else logging.WARNING,
        force=True,
    )
