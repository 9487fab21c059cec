import logging
import sys
from typing import Optional

from .config import settings


def setup_logging(level: Optional[str] = None):
    logging.basicConfig(
        stream=sys.stdout,
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
