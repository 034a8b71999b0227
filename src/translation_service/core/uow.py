"""Unit of Work helpers for atomic database operations.

Translation writes touch the translation row and its tag association rows;
both must land in the same transaction so a failure cannot leave links
pointing at a half-written translation.
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlmodel import Session

from translation_service.core.db import engine
from translation_service.core.logging import get_logger

logger = get_logger(__name__)


class UnitOfWork:
    """Manages a database transaction.

    Wraps a SQLModel session and provides explicit commit/rollback control.
    Use with the `atomic()` context manager for automatic handling.
    """

    def __init__(self, session: Session):
        self._session = session
        self._committed = False

    @property
    def session(self) -> Session:
        return self._session

    @property
    def committed(self) -> bool:
        return self._committed

    def commit(self) -> None:
        """Commit the transaction. Subsequent calls are no-ops."""
        if not self._committed:
            self._session.commit()
            self._committed = True
            logger.debug("uow_committed")

    def rollback(self) -> None:
        """Rollback the transaction. Safe to call after commit."""
        if not self._committed:
            self._session.rollback()
            logger.debug("uow_rolled_back")

    def flush(self) -> None:
        """Flush pending changes without committing (assigns generated ids)."""
        self._session.flush()


@contextmanager
def atomic(
    session: Session | None = None,
) -> Generator[UnitOfWork, None, None]:
    """Run the block in one transaction, committing on success.

    Any exception rolls the whole block back and is re-raised.

    Usage:
        with atomic(session) as uow:
            uow.session.add(translation)
            uow.flush()
            uow.session.add(TranslationTagLink(translation_id=translation.id, ...))
    """
    owns_session = session is None
    active_session = Session(engine) if owns_session else session
    assert active_session is not None  # for type narrowing

    uow = UnitOfWork(active_session)

    try:
        yield uow
        uow.commit()
    except Exception:
        uow.rollback()
        raise
    finally:
        if owns_session:
            active_session.close()
