"""Atomic single-statement store primitives shared by the services."""

import math
from typing import Any, Type

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from vidtube.config import settings
from vidtube.database import Base
from vidtube.exceptions import InvalidArgumentError, NotFoundError
from vidtube.logger import db_logger

# SQLSTATE codes for integrity violations
PG_VIOLATIONS = {"23505": "unique", "23503": "foreign_key"}


def insert_if_absent(db: Session, model: Type[Base], **values: Any) -> bool:
    """
    Insert a row and commit, relying on the table's unique constraint.

    Returns:
        True if the row was inserted, False if an equal row already existed

    Raises:
        NotFoundError: a referenced row vanished before the insert
        InvalidArgumentError: any other constraint rejected the row
    """
    db.add(model(**values))
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        violation = constraint_violation(exc)
        if violation == "unique":
            db_logger.debug(f"{model.__tablename__}: row already present for {values}")
            return False
        db_logger.info(f"{model.__tablename__}: {violation} violation for {values}")
        if violation == "foreign_key":
            raise NotFoundError("Referenced resource no longer exists")
        raise InvalidArgumentError("Request violates a data constraint")
    return True


def constraint_violation(exc: IntegrityError) -> str:
    """
    Classify an IntegrityError as "unique", "foreign_key" or "other".

    PostgreSQL reports a SQLSTATE code; SQLite only a message.
    """
    code = getattr(exc.orig, "pgcode", None)
    if code is not None:
        return PG_VIOLATIONS.get(code, "other")

    message = str(exc.orig).upper()
    if "UNIQUE CONSTRAINT FAILED" in message:
        return "unique"
    if "FOREIGN KEY CONSTRAINT FAILED" in message:
        return "foreign_key"
    return "other"


def delete_if_present(db: Session, model: Type[Base], **criteria: Any) -> bool:
    """
    Delete matching rows in one DELETE statement and commit.

    Returns:
        True if at least one row was removed
    """
    stmt = delete(model).filter_by(**criteria)
    result = db.execute(stmt)
    db.commit()
    return result.rowcount > 0


def exists(db: Session, model: Type[Base], **criteria: Any) -> bool:
    """Check whether any row matches the criteria."""
    stmt = select(model.id).filter_by(**criteria).limit(1)
    return db.execute(stmt).first() is not None


def count(db: Session, model: Type[Base], **criteria: Any) -> int:
    """Store-side COUNT of matching rows."""
    stmt = select(func.count()).select_from(model).filter_by(**criteria)
    return db.execute(stmt).scalar_one()


def normalize_page(page: int | None, page_size: int | None) -> tuple[int, int]:
    """Clamp pagination input to sane bounds."""
    page = max(page or 1, 1)
    page_size = page_size or settings.default_page_size
    page_size = min(max(page_size, 1), settings.max_page_size)
    return page, page_size


def paginate(query: Query, page: int, page_size: int) -> tuple[list, int]:
    """
    Run a paginated query.

    Returns:
        Tuple of (items on the requested page, total matching rows)
    """
    total = query.order_by(None).count()
    offset = (page - 1) * page_size
    items = query.offset(offset).limit(page_size).all()
    return items, total


def page_meta(page: int, page_size: int, total: int) -> dict:
    """Pagination metadata for a page of results."""
    total_pages = math.ceil(total / page_size) if total > 0 else 1
    return {
        "page": page,
        "limit": page_size,
        "total_pages": total_pages,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }
