import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.security import verify_password
from app.models.user import User
from app.services.user_service import RegistrationConflict, UserService

@pytest.mark.asyncio
async def test_register_user(async_session: AsyncSession):
    user_service = UserService(async_session)

    result = await user_service.register("alice", "alice@example.com", "secret")

    assert result.is_ok
    user = result.value
    assert user.id is not None
    assert user.username == "alice"
    assert user.email == "alice@example.com"
    assert user.is_active is True

@pytest.mark.asyncio
async def test_register_user_hashes_password(async_session: AsyncSession):
    user_service = UserService(async_session)

    user = (await user_service.register("alice", "alice@example.com", "secret")).value

    stored = (await async_session.execute(select(User).filter(User.id == user.id))).scalar_one()
    assert stored.hashed_password != "secret"
    assert verify_password("secret", stored.hashed_password)

@pytest.mark.asyncio
async def test_register_user_duplicate_username(async_session: AsyncSession, test_user: User):
    user_service = UserService(async_session)

    result = await user_service.register(test_user.username, "other@example.com", "password123")

    assert result.is_err
    assert result.error == RegistrationConflict("username already taken")

@pytest.mark.asyncio
async def test_register_user_duplicate_email(async_session: AsyncSession, test_user: User):
    user_service = UserService(async_session)

    result = await user_service.register("otheruser", test_user.email, "password123")

    assert result.is_err
    assert result.error.message == "email already registered"

@pytest.mark.asyncio
async def test_register_user_lost_race_is_conflict(async_session: AsyncSession, monkeypatch):
    user_service = UserService(async_session)

    async def failing_commit():
        raise IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed"))

    monkeypatch.setattr(async_session, "commit", failing_commit)

    result = await user_service.register("alice", "alice@example.com", "secret")

    assert result.is_err
    assert result.error.message == "username or email already exists"

@pytest.mark.asyncio
async def test_register_user_other_database_errors_propagate(async_session: AsyncSession, monkeypatch):
    user_service = UserService(async_session)

    async def failing_commit():
        raise OperationalError("INSERT INTO users", {}, Exception("disk I/O error"))

    monkeypatch.setattr(async_session, "commit", failing_commit)

    with pytest.raises(OperationalError):
        await user_service.register("alice", "alice@example.com", "secret")
