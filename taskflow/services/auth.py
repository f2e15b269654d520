from typing import Optional, Tuple

import bcrypt
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..logger import get_logger
from ..models import User
from ..schemas.user import RegisterRequest

logger = get_logger(__name__)

DUPLICATE_USER_MESSAGE = "Username or email is already in use."

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt with a fresh salt."""
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    hashed_bytes = hashed_password.encode("utf-8") if isinstance(hashed_password, str) else hashed_password
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_bytes)
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def register_user(db: Session, data: RegisterRequest) -> Tuple[bool, Optional[str]]:
    """Create a user account.

    Returns ``(True, None)`` on success and ``(False, reason)`` when the
    username or email is taken. Other database errors propagate.
    """
    exists = (
        db.query(User)
        .filter(or_(User.username == data.username, User.email == data.email))
        .first()
    )
    if exists:
        return False, DUPLICATE_USER_MESSAGE

    user = User(
        username=data.username,
        email=data.email,
        password_hash=get_password_hash(data.password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name/email
        db.rollback()
        logger.warning("registration_conflict", username=data.username)
        return False, DUPLICATE_USER_MESSAGE
    except SQLAlchemyError:
        db.rollback()
        logger.exception("registration_failed", username=data.username)
        raise

    logger.info("user_registered", username=data.username)
    return True, None


def verify_credentials(db: Session, username: str, password: str) -> Optional[User]:
    """Return the user when the password matches, else None.

    An unknown username and a wrong password look the same to the caller.
    """
    user = db.query(User).filter(User.username == username).first()
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user
