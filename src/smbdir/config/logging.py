"""CLI logging setup."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Initialise the root logger for a sealing run.

    ``verbose`` switches from INFO to DEBUG, which also reports every candidate
    source the loader looked for. ``force=True`` replaces handlers installed by an
    earlier call.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
