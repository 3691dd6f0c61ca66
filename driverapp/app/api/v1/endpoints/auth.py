"""
Authentication API endpoints.

Provides register and login endpoints. Neither requires a bearer token.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload
from driverapp.app.db.session import get_db
from driverapp.app.models.user import User
from driverapp.app.models.user_role import UserRole
from driverapp.app.schemas.auth import RoleRef, UserRegister, UserLogin, RegisterResponse, TokenResponse, UserResponse
from driverapp.app.core.exceptions import (
    AppException,
    AuthenticationError,
    InvalidInputError,
    ResourceNotFoundError,
)
from driverapp.app.core.security import get_password_hash, verify_password
from driverapp.app.core.jwt import create_access_token

router = APIRouter(tags=["User"])
logger = logging.getLogger("driverapp.auth")


async def resolve_role(db: AsyncSession, role_ref: RoleRef) -> UserRole:
    """
    Load the role row a registration refers to.

    Raises:
        InvalidInputError: if no matching role row exists
    """
    if role_ref.by_name is not None:
        condition = UserRole.role_name == role_ref.by_name.value
    else:
        condition = UserRole.id == role_ref.by_id

    result = await db.execute(select(UserRole).where(condition))
    user_role = result.scalar_one_or_none()

    if user_role is None:
        raise InvalidInputError("Invalid role")

    return user_role


@router.post("/register", response_model=RegisterResponse)
async def register(
    user_data: UserRegister,
    db: AsyncSession = Depends(get_db)
):
    """
    Register a new user.

    - ``role`` must be "user"/"driver" or 1/2, and must exist in ``userroles``
    - Email must not be registered yet
    - Password is stored as a bcrypt hash
    """
    role_ref = user_data.role_ref

    try:
        user_role = await resolve_role(db, role_ref)

        existing = await db.execute(select(User.id).where(User.email == user_data.email))
        if existing.scalar_one_or_none() is not None:
            raise InvalidInputError("Email already registered")

        # bcrypt is CPU-bound; keep it off the event loop
        hashed_password = await run_in_threadpool(get_password_hash, user_data.password)

        new_user = User(
            username=user_data.username,
            email=user_data.email,
            password=hashed_password,
            role_id=user_role.id
        )

        db.add(new_user)
        await db.commit()
        await db.refresh(new_user)
    except IntegrityError:
        await db.rollback()
        # Lost a race with a concurrent registration of the same email
        raise InvalidInputError("Email already registered")
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Failed to register user %s", user_data.email)
        raise AppException("Failed to register user")

    logger.info("Registered user %s (id=%s, role=%s)", new_user.email, new_user.id, user_role.role_name)

    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(new_user)
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """
    Login user and return JWT token.

    The token carries ``userId`` and the role name under ``role``.
    """
    try:
        result = await db.execute(
            select(User)
            .options(selectinload(User.role))
            .where(User.email == credentials.email)
        )
        user = result.scalar_one_or_none()
    except SQLAlchemyError:
        logger.exception("Failed to login %s", credentials.email)
        raise AppException("Failed to login")

    if not user:
        logger.warning("Login failed for %s: user not found", credentials.email)
        raise ResourceNotFoundError("User")

    if not await run_in_threadpool(verify_password, credentials.password, user.password):
        logger.warning("Login failed for user %s: invalid password", user.id)
        raise AuthenticationError("Invalid credentials")

    token = create_access_token(data={"userId": user.id, "role": user.role.role_name})

    logger.info("Login succeeded for user %s", user.id)

    return TokenResponse(token=token)
