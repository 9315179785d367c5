import asyncio
from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from app.db.functions import InsertUserArgs
from app.services.user_service import InsertUserResult, create_user
from tests.conftest import FakeSession

ARGS = InsertUserArgs(
    first_name="Ana",
    last_name="Diaz",
    email="ana@example.com",
    password="x",
    birth_date=date(1990, 1, 1),
    country_id=1,
    gender="F",
    native_lang_id=2,
    target_lang_id=3,
    description=None,
)


@pytest.mark.asyncio
async def test_success_carries_function_value():
    session = FakeSession(value="ok")

    result = await create_user(session, ARGS)

    assert result == InsertUserResult(is_success=True, value="ok")
    assert len(session.calls) == 1


@pytest.mark.asyncio
async def test_failure_is_returned_not_raised():
    error = RuntimeError("boom")
    session = FakeSession(error=error)

    result = await create_user(session, ARGS)

    assert not result.is_success
    assert result.error is error
    assert len(session.calls) == 1
    assert session.rollbacks == 1


@pytest.mark.asyncio
async def test_slow_call_times_out_as_failure():
    session = FakeSession(delay=1.0)

    result = await create_user(session, ARGS, timeout=0.01)

    assert not result.is_success
    assert isinstance(result.error, asyncio.TimeoutError)
    assert len(session.calls) == 1
    assert session.commits == 0


@pytest.mark.asyncio
async def test_integrity_error_is_logged_without_parameters(caplog):
    args = ARGS._replace(password="s3cret")
    error = IntegrityError("SELECT insert_user(...)", args._asdict(), Exception("duplicate key value"))
    session = FakeSession(error=error)

    with caplog.at_level("ERROR"):
        result = await create_user(session, args)

    assert not result.is_success
    assert "IntegrityError" in caplog.text
    assert "duplicate key value" in caplog.text
    assert "s3cret" not in caplog.text
    assert "ana@example.com" not in caplog.text


@pytest.mark.asyncio
async def test_other_failure_cause_is_logged(caplog):
    session = FakeSession(error=RuntimeError("unique_violation"))

    with caplog.at_level("ERROR"):
        await create_user(session, ARGS._replace(password="s3cret"))

    assert "unique_violation" in caplog.text
    assert "s3cret" not in caplog.text


@pytest.mark.asyncio
async def test_configured_function_name_is_used():
    session = FakeSession()

    await create_user(session, ARGS, function_name="public.fun_insert_usuarios")

    assert session.calls[0][0].startswith("SELECT public.fun_insert_usuarios(:first_name, ")
