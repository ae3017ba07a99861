import logging
from typing import List

from dotenv import load_dotenv
from sqlalchemy import inspect, text

from socialhub.db.session import Base, Database

# Import all models before create_all
import socialhub.models  # noqa: F401

logger = logging.getLogger(__name__)


def create_missing_tables(database: Database) -> None:
    logger.info("Creating missing tables...")
    Base.metadata.create_all(bind=database.engine)
    logger.info("Tables created (if missing)")


def add_missing_columns(database: Database) -> List[str]:
    """Add columns declared on the models but absent from existing tables.

    Returns the ``table.column`` names that were added.
    """
    engine = database.engine
    added = []

    with engine.begin() as conn:
        inspector = inspect(conn)
        existing_tables = inspector.get_table_names()
        for table_name, model_table in Base.metadata.tables.items():
            if table_name not in existing_tables:
                logger.warning(f"Table {table_name} not found in DB, creating it...")
                model_table.create(bind=conn, checkfirst=True)
                continue

            existing_cols = {col["name"] for col in inspector.get_columns(table_name)}
            for col_name, col in model_table.columns.items():
                if col_name in existing_cols:
                    continue
                sql = f'ALTER TABLE "{table_name}" ADD COLUMN "{col_name}" {col.type.compile(engine.dialect)}'
                logger.info(f"Adding column {table_name}.{col_name}")
                conn.execute(text(sql))
                added.append(f"{table_name}.{col_name}")
    return added


def sync_database(database: Database) -> None:
    create_missing_tables(database)
    add_missing_columns(database)


if __name__ == "__main__":
    load_dotenv()

    from socialhub.core.config import settings
    from socialhub.utils.logger import setup_logging

    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    database = Database(settings.DATABASE_URL)
    try:
        logger.info("Syncing database...")
        sync_database(database)
        logger.info("Database sync complete")
    finally:
        database.dispose()
