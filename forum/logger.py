import logging

from forum.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG_LOGS else logging.INFO,
    format=LOG_FORMAT,
)

logger = logging.getLogger("forum")
