from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from jose import JWTError, jwt

from ..config import (
    ACCESS_TOKEN_EXPIRE_HOURS,
    JWT_AUDIENCE,
    JWT_ISSUER,
    SECRET_KEY,
    TOKEN_CLOCK_SKEW_SECONDS,
)
from ..models import User

ALGORITHM = "HS256"


def issue_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT access token for the user.

    The username is the subject; ``name`` and ``email`` are carried for
    clients that want to display them, and ``jti`` makes every token unique.
    """
    now = datetime.utcnow()
    expire = now + (expires_delta or timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    claims = {
        "sub": user.username,
        "name": user.username,
        "email": user.email,
        "jti": str(uuid4()),
        "iss": JWT_ISSUER,
        "aud": JWT_AUDIENCE,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """Validate signature, issuer, audience and expiry; return the claims or None."""
    try:
        return jwt.decode(
            token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
            audience=JWT_AUDIENCE,
            issuer=JWT_ISSUER,
            options={"leeway": TOKEN_CLOCK_SKEW_SECONDS},
        )
    except JWTError:
        return None


def get_subject(token: str) -> Optional[str]:
    """Return the username a valid token was issued to."""
    claims = decode_token(token)
    if not claims:
        return None
    return claims.get("sub") or None
