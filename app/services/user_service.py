import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy.exc import StatementError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core import settings
from app.db.functions import InsertUserArgs, InsertUserFunction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertUserResult:
    """Outcome of one insert_user call: a value on success, the cause on failure."""
    is_success: bool
    value: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, value: Any) -> "InsertUserResult":
        return cls(is_success=True, value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "InsertUserResult":
        return cls(is_success=False, error=error)


def _describe_failure(error: Exception) -> str:
    # StatementError renders its bound parameters, the password among them
    if isinstance(error, StatementError):
        cause = f": {error.orig}" if error.orig is not None else ""
        return f"{type(error).__name__}{cause}"
    return f"{type(error).__name__}: {error}"


async def create_user(
        session: AsyncSession,
        args: InsertUserArgs,
        timeout: float = settings.DB_CALL_TIMEOUT_SECONDS,
        function_name: str = settings.INSERT_USER_FUNCTION,
) -> InsertUserResult:
    """
    Insert a user through the stored function, exactly once.

    Every failure, including a timeout, comes back as a failed result instead of
    an exception. The cause is logged here and goes no further.
    """
    try:
        value = await asyncio.wait_for(InsertUserFunction.call(session, args, function_name), timeout=timeout)
        return InsertUserResult.success(value)
    except asyncio.TimeoutError as e:
        logger.error(f"{function_name} timed out after {timeout}s")
        return InsertUserResult.failure(e)
    except Exception as e:
        logger.error(f"Error calling {function_name}: {_describe_failure(e)}")
        return InsertUserResult.failure(e)
