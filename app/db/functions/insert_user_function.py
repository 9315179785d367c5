from datetime import date
from typing import Any, NamedTuple, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import TextClause

from app.core import settings


class InsertUserArgs(NamedTuple):
    """
    Arguments of the insert_user database function.

    Field order is the positional order of the function signature.
    """
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    password: Optional[str]
    birth_date: Optional[date]
    country_id: Optional[int]
    gender: Optional[str]
    native_lang_id: Optional[int]
    target_lang_id: Optional[int]
    description: Optional[str]


class InsertUserFunction:
    """
    Wrapper around the externally owned insert_user stored function.
    """

    @staticmethod
    def statement(function_name: str = settings.INSERT_USER_FUNCTION) -> TextClause:
        """Build `SELECT <function>(:first_name, ..., :description)` in signature order."""
        placeholders = ", ".join(f":{name}" for name in InsertUserArgs._fields)
        return text(f"SELECT {function_name}({placeholders})")

    @classmethod
    async def call(
            cls,
            session: AsyncSession,
            args: InsertUserArgs,
            function_name: str = settings.INSERT_USER_FUNCTION,
    ) -> Any:
        """
        Invoke the stored function once and commit.

        Args:
            session (AsyncSession): SQLAlchemy async session.
            args (InsertUserArgs): The ten positional arguments.
            function_name (str): Name of the stored function.

        Returns:
            Any: Whatever the function returns (None for a void function).
        """
        try:
            result = await session.execute(cls.statement(function_name), args._asdict())
            value = result.scalar()
            await session.commit()
            return value
        except Exception:
            await session.rollback()
            raise
