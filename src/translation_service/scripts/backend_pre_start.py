"""Block until the database accepts connections."""

import logging

from sqlalchemy import Engine
from sqlmodel import Session, select
from tenacity import after_log, before_log, retry, stop_after_attempt, wait_fixed

from translation_service.core.db import engine
from translation_service.core.logging import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

# tenacity's log hooks expect a stdlib logger
retry_logger = logging.getLogger(__name__)

max_tries = 60 * 5  # 5 minutes
wait_seconds = 1


@retry(
    stop=stop_after_attempt(max_tries),
    wait=wait_fixed(wait_seconds),
    before=before_log(retry_logger, logging.INFO),
    after=after_log(retry_logger, logging.WARN),
)
def init(db_engine: Engine) -> None:
    try:
        with Session(db_engine) as session:
            session.exec(select(1))
    except Exception as e:
        logger.error("database_not_ready", error=str(e))
        raise


def main() -> None:
    logger.info("database_wait_started", url=engine.url.render_as_string())
    init(engine)
    logger.info("database_ready")


if __name__ == "__main__":
    main()
