import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.result import Result
from app.core.security import hash_password
from app.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationConflict:
    """Why a registration was refused."""
    message: str


class UserService:
    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def register(
        self, username: str, email: str, password: str
    ) -> Result[User, RegistrationConflict]:
        """
        Creates a user account unless the username or email is already taken.

        Args:
            username: Requested username
            email: Email address
            password: Plain-text password, stored as a bcrypt hash

        Returns:
            Result.ok(user) on success, Result.err(RegistrationConflict) when
            the identity is already registered. Other database errors are raised.
        """
        existing = await self.db_session.execute(
            select(User).filter(
                (User.username == username) | (User.email == email)
            )
        )
        existing_user = existing.scalars().first()
        if existing_user is not None:
            if existing_user.username == username:
                conflict = RegistrationConflict("username already taken")
            else:
                conflict = RegistrationConflict("email already registered")
            logger.warning(f"Registration refused for '{username}': {conflict.message}")
            return Result.err(conflict)

        user = User(
            username=username,
            email=email,
            hashed_password=hash_password(password),
        )
        self.db_session.add(user)
        try:
            await self.db_session.commit()
        except IntegrityError:
            # A concurrent request registered the same username or email first.
            await self.db_session.rollback()
            logger.warning(f"Registration for '{username}' lost a uniqueness race")
            return Result.err(RegistrationConflict("username or email already exists"))
        await self.db_session.refresh(user)

        logger.info(f"Registered user {user.id} ('{user.username}')")
        return Result.ok(user)
