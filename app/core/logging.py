import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str = None):
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
    # Keep SQL echo out of the application log
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
