import logging
import sys
from typing import Optional, TextIO


def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    """Configure the ``httpaction`` logger for command line use."""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )

    logger = logging.getLogger("httpaction")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    logging.getLogger("httpx").setLevel(logging.WARNING)
