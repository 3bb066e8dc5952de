"""
Creates (or with --reset, recreates) the AlaObra schema and the upload folder.

    python create_tables.py [--reset]
"""
import argparse
import logging
from pathlib import Path

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine
from app.db.base import Base # Imports all models so they are registered

logger = logging.getLogger("create_tables")

def create_tables(reset: bool = False):
    if reset:
        logger.warning("Dropping all tables in %s", engine.url.render_as_string(hide_password=True))
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))

    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    logger.info("Uploads are stored in %s", settings.UPLOAD_DIR)

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--reset", action="store_true", help="drop every table first")
    args = parser.parse_args()
    setup_logging()
    create_tables(reset=args.reset)
