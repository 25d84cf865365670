import logging
import sys
import os


def setup_logging(level: str = None) -> logging.Logger:
    """Configure logging for the colorz app."""
    log_level = level or os.environ.get("LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    root = logging.getLogger("colorz")
    root.setLevel(numeric_level)
    # setup_logging may run more than once (tests, re-entry from main)
    if not any(getattr(h, "_colorz", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        handler._colorz = True
        root.addHandler(handler)
    root.propagate = False

    logging.basicConfig(level=logging.WARNING)

    # Pillow logs plugin loading at debug level
    logging.getLogger("PIL").setLevel(logging.WARNING)

    return root
