import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "product_service"


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout; safe to call once per app instance."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # Statement echo is noise at INFO; driver errors still surface as WARNING+
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
