# scripts/init_db.py

import logging

from invoicing.core.config import settings
from invoicing.db.engine import create_db_engine
from invoicing.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def reset_schema(engine) -> None:
    metadata.drop_all(engine)
    metadata.create_all(engine)


def main():
    engine = create_db_engine(settings.database_url)
    try:
        reset_schema(engine)
    finally:
        engine.dispose()
    logger.info("DB schema created.")


if __name__ == "__main__":
    main()
