import logging

from library_app.application import create_app
from library_app.config import settings
from library_app.exceptions import StoreFailure

logger = logging.getLogger(__name__)

app = create_app(settings)

if __name__ == '__main__':
    try:
        app.db.ping()
        logger.info("MySQL connection initialized successfully")
    except StoreFailure:
        logger.error("Database connection failed; requests will fail until it is reachable")
    app.run(debug=settings.debug, port=settings.port)
