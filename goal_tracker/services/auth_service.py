"""Authentication service."""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional
import jwt
import bcrypt
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select, delete
from goal_tracker.config import get_settings
from goal_tracker.exceptions import AuthenticationError, ValidationError
from goal_tracker.models.user import User
from goal_tracker.models.token import AuthToken
from goal_tracker.schemas.auth import RegisterRequest, TokenPayload

logger = logging.getLogger(__name__)
settings = get_settings()

BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )
    except ValueError:
        # Malformed stored hash
        return False


def encode_access_token(user_id: int, jti: str) -> str:
    """Encode a signed JWT for the given user and token id."""
    now = datetime.utcnow()
    payload = {
        "sub": str(user_id),
        "jti": jti,
        "iat": now,
        "exp": now + timedelta(hours=settings.jwt_expire_hours),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[TokenPayload]:
    """Decode a JWT, checking signature and expiry only."""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except (jwt.PyJWTError, ValueError):
        return None


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
    """Get a user by ID."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Get a user by email address."""
    result = await db.execute(
        select(User).where(User.email == normalize_email(email))
    )
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, data: RegisterRequest) -> User:
    """
    Create a new user account.

    Raises:
        ValidationError: if the password is too short or the email is taken.
    """
    if len(data.password) < settings.password_min_length:
        raise ValidationError(
            f"The password must be at least {settings.password_min_length} characters."
        )
    if len(data.password.encode('utf-8')) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"The password may not be longer than {BCRYPT_MAX_PASSWORD_BYTES} bytes."
        )

    email = normalize_email(data.email)
    if await get_user_by_email(db, email) is not None:
        raise ValidationError("The email has already been taken.")

    user = User(
        name=data.name,
        email=email,
        password_hash=hash_password(data.password),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration
        await db.rollback()
        raise ValidationError("The email has already been taken.")
    await db.refresh(user)

    logger.info("Registered user id=%s", user.id)
    return user


async def authenticate_user(
    db: AsyncSession,
    email: str,
    password: str
) -> Optional[User]:
    """Authenticate a user by email and password."""
    user = await get_user_by_email(db, email)

    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


async def issue_token(db: AsyncSession, user: User) -> str:
    """Record a new token for the user and return its bearer string."""
    jti = secrets.token_hex(16)
    db.add(AuthToken(user_id=user.id, jti=jti))
    await db.commit()
    return encode_access_token(user.id, jti)


async def login(db: AsyncSession, email: str, password: str) -> str:
    """
    Verify credentials and mint a fresh bearer token.

    Raises:
        AuthenticationError: on unknown email or wrong password.
    """
    user = await authenticate_user(db, email, password)
    if user is None:
        logger.info("Failed login attempt")
        raise AuthenticationError("Invalid email or password")

    token = await issue_token(db, user)
    logger.info("User id=%s logged in", user.id)
    return token


async def logout(db: AsyncSession, user: User) -> int:
    """Revoke every outstanding token of the user. Returns the number revoked."""
    result = await db.execute(delete(AuthToken).where(AuthToken.user_id == user.id))
    await db.commit()
    logger.info("User id=%s logged out, %d token(s) revoked", user.id, result.rowcount)
    return result.rowcount


async def resolve_caller(db: AsyncSession, token: str) -> Optional[User]:
    """
    Resolve the owner of an active bearer token.

    Returns None when the token is malformed, expired, badly signed or revoked.
    """
    payload = decode_access_token(token)
    if payload is None:
        return None

    result = await db.execute(
        select(AuthToken).where(
            AuthToken.jti == payload.jti,
            AuthToken.user_id == payload.sub,
        )
    )
    if result.scalar_one_or_none() is None:
        return None

    return await get_user_by_id(db, payload.sub)
