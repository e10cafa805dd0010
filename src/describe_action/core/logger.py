import logging
import sys

PACKAGE_LOGGER = "describe_action"


class _PackageHandler(logging.StreamHandler):
    """Marker type so configure_root_logger can recognise its own handler."""


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_root_logger(level: str = "WARNING") -> None:
    """
    Configure root logger and the describe_action logger.

    Diagnostics go to stderr; stdout is reserved for the rendered tables.

    Args:
        level: Log level for describe_action logs (DEBUG, INFO, WARNING, ERROR).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    root = logging.getLogger()
    for h in root.handlers:
        if isinstance(h, _PackageHandler):
            return

    handler = _PackageHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    root.addHandler(handler)


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Get a module-specific logger under the describe_action namespace."""
    return logging.getLogger(name)
