"""
Thin helpers around the async session.

Every write in the service layer goes through :func:`transaction`, which
commits once at the end and rolls back everything on the first failure.
Store exceptions are translated into :mod:`backoffice.errors` so the API can
answer with the right status code.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Type, TypeVar

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.errors import BackofficeError, ConflictError, NotFoundError, StoreError

logger = structlog.get_logger()

ModelT = TypeVar("ModelT")


async def get_or_404(db: AsyncSession, model: Type[ModelT], record_id: Any, label: str) -> ModelT:
    """Load a row by primary key or raise NotFoundError"""
    try:
        record = await db.get(model, record_id)
    except SQLAlchemyError as exc:
        logger.error("Store read failed", model=model.__name__, record_id=str(record_id), error=str(exc))
        raise StoreError(f"Failed to load {label.lower()}: {exc}") from exc

    if record is None:
        raise NotFoundError(f"{label} not found")
    return record


@asynccontextmanager
async def transaction(
    db: AsyncSession,
    action: str,
    conflict_message: Optional[str] = None,
) -> AsyncIterator[AsyncSession]:
    """Run a unit of work and commit it, or roll all of it back"""
    try:
        yield db
        await db.commit()
    except BackofficeError:
        await db.rollback()
        raise
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Store rejected write", action=action, error=str(exc.orig))
        raise ConflictError(conflict_message or f"{action} conflicts with an existing record") from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error("Store write failed", action=action, error=str(exc))
        raise StoreError(f"{action} failed: {exc}") from exc
