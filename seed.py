import logging
import os

from database.db_manager import DBManager
from library_app.application import configure_logging
from library_app.config import settings

logger = logging.getLogger(__name__)

SCHEMA_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "database", "schema.sql")


def seed_database(db=None, file_path=SCHEMA_FILE):
    """Creates the study-room tables if they do not exist yet."""
    db = db or DBManager(settings)
    count = db.execute_sql_script(file_path)
    logger.info("Database schema ready (%d statements)", count)
    return count


if __name__ == "__main__":
    configure_logging(settings.log_level)
    seed_database()
