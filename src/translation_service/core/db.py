from collections.abc import Generator, Sequence
from typing import Any, TypeVar

from sqlalchemy import event
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql.base import ExecutableOption
from sqlmodel import Session, SQLModel, create_engine, func, select
from sqlmodel.sql.expression import SelectOfScalar

from translation_service.core.config import settings


def _engine_kwargs() -> dict[str, Any]:
    echo = settings.DEBUG and settings.ENVIRONMENT == "local"
    if settings.is_sqlite:
        kwargs: dict[str, Any] = {
            "connect_args": {"check_same_thread": False},
            "echo": echo,
        }
        # In-memory databases only exist for the life of one connection
        if settings.SQLALCHEMY_DATABASE_URI in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "pool_size": 5,
        "max_overflow": 10,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "echo": echo,
    }


engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, **_engine_kwargs())


if settings.is_sqlite:

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


T = TypeVar("T", bound=SQLModel)


def paginate(
    session: Session,
    statement: SelectOfScalar[T],
    skip: int = 0,
    limit: int = 100,
    order_by: (
        InstrumentedAttribute[Any] | Sequence[InstrumentedAttribute[Any]] | None
    ) = None,
    options: Sequence[ExecutableOption] = (),
) -> tuple[list[T], int]:
    """Execute a paginated query and return results with total count.

    Args:
        session: Database session
        statement: Base SQLModel select statement (without pagination)
        skip: Number of records to skip (offset)
        limit: Maximum number of records to return
        order_by: Optional column, or columns in order, to order by
        options: Loader options (e.g. selectinload) applied to the page query

    Returns:
        Tuple of (list of results, total count)
    """
    count_statement = select(func.count()).select_from(statement.subquery())
    count = session.exec(count_statement).one()

    if isinstance(order_by, Sequence):
        statement = statement.order_by(*order_by)
    elif order_by is not None:
        statement = statement.order_by(order_by)
    if options:
        statement = statement.options(*options)

    paginated_statement = statement.offset(skip).limit(limit)
    results = session.exec(paginated_statement).all()

    return list(results), count
