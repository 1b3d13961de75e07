from contextlib import contextmanager
import logging
import time
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from pydantic import ValidationError
from models import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(message="DB transaction failed"):
    """Context manager to wrap a database transaction."""
    from app.errors import DomainError

    try:
        yield
        db.session.commit()
    except (DomainError, ValidationError) as e:
        logger.info(f"{message}: %s", e)
        db.session.rollback()
        raise
    except Exception as e:
        logger.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise


def _ping():
    db.session.execute(text("SELECT 1"))


def wait_for_database(app, delay=None, max_attempts=None, sleep=time.sleep):
    """Block until the database answers, retrying on a fixed delay.

    ``max_attempts`` of 0 or None retries forever. Returns the number of
    attempts it took.
    """
    if delay is None:
        delay = app.config.get("DB_CONNECT_RETRY_DELAY", 5)
    if max_attempts is None:
        max_attempts = app.config.get("DB_CONNECT_MAX_ATTEMPTS", 0)

    attempt = 0
    with app.app_context():
        while True:
            attempt += 1
            try:
                _ping()
            except OperationalError as e:
                db.session.rollback()
                if max_attempts and attempt >= max_attempts:
                    logger.error("Database unreachable after %s attempts", attempt)
                    raise
                logger.warning(
                    "Database connection failed (attempt %s): %s; retrying in %ss",
                    attempt, e, delay,
                )
                sleep(delay)
                continue
            logger.info("Database connected")
            return attempt
