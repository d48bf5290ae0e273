from __future__ import annotations

import logging


def resolve_level(level: str) -> int:
    # getLevelName maps known names to ints and anything else to a "Level x" string.
    value = logging.getLevelName((level or "").upper().strip())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Simple, dev-friendly logging setup.

    Uvicorn config can override this, but this gives us sane defaults when running locally.
    Unknown level names fall back to INFO.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
