"""Query Runner: executes one read statement and fetches rows in a declared mode.

Invariants:
    - Exactly one statement per call; no multi-statement transactions
    - Any SQLAlchemyError / OSError while executing OR fetching becomes StorageError,
      logged once with the operation name; driver detail stays in the log
    - No retry: failures surface to the caller immediately
    - FetchMode.ONE fails unless exactly one row; OPTIONAL returns None on zero rows

Design Decisions:
    - Fetch happens inside the same try as execute: NoResultFound / MultipleResultsFound
      are storage-contract violations, not programming errors
"""

import logging
from enum import Enum
from typing import Any

from sqlalchemy.sql.expression import Executable
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.errors import StorageError

logger = logging.getLogger(__name__)


class FetchMode(str, Enum):
    """How many rows a read expects."""
    ONE = "one"
    OPTIONAL = "optional"
    ALL = "all"
    SCALAR = "scalar"


async def fetch(
    db: AsyncSession, statement: Executable, mode: FetchMode, operation: str,
) -> Any:
    """Execute statement and return entities (or a scalar) per mode."""
    try:
        result = await db.execute(statement)
        if mode == FetchMode.ALL:
            return list(result.scalars().all())
        if mode == FetchMode.OPTIONAL:
            return result.scalar_one_or_none()
        # ONE and SCALAR both require exactly one row
        return result.scalar_one()
    except (SQLAlchemyError, OSError) as e:
        logger.error(
            f"Query failed in {operation}: {e}",
            extra={"operation": operation},
        )
        raise StorageError(operation) from e
