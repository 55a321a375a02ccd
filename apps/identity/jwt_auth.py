"""
JWT bearer-token utilities.

Tokens are stateless: the only server-side secret is JWT_SECRET, so any
process sharing the setting can validate them.
"""
import logging
import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from django.conf import settings
from django.http import HttpRequest

logger = logging.getLogger(__name__)

JWT_ALGORITHM = 'HS256'
ACCESS_COOKIE_NAME = 'access_token'


def get_jwt_secret() -> str:
    return getattr(settings, 'JWT_SECRET', None) or settings.SECRET_KEY


def get_access_token_lifetime() -> timedelta:
    return timedelta(minutes=getattr(settings, 'JWT_ACCESS_TOKEN_MINUTES', 60))


def create_access_token(user_id: int, role: str = "") -> str:
    """
    Create an access token for the given user.

    Carries the user id as `sub` and the role for quick inspection; the role
    claim is informational, permissions are always re-read from the user row.
    """
    now = datetime.now(timezone.utc)
    payload = {
        'sub': str(user_id),
        'role': role,
        'exp': now + get_access_token_lifetime(),
        'iat': now,
        'type': 'access',
    }
    return jwt.encode(payload, get_jwt_secret(), algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload if valid, None if invalid/expired.
    """
    try:
        return jwt.decode(token, get_jwt_secret(), algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired access token")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected invalid access token: {e}")
        return None


def get_user_id_from_token(token: str) -> Optional[int]:
    """Extract the user id from a valid access token."""
    payload = decode_token(token)
    if not payload or payload.get('type') != 'access' or 'sub' not in payload:
        return None
    try:
        return int(payload['sub'])
    except (TypeError, ValueError):
        return None


def get_token_from_request(request: HttpRequest) -> Optional[str]:
    """
    Read the bearer token from the Authorization header, falling back to
    the access_token cookie.
    """
    header = request.headers.get('Authorization', '')
    scheme, _, credentials = header.partition(' ')
    if scheme.lower() == 'bearer' and credentials.strip():
        return credentials.strip()
    return request.COOKIES.get(ACCESS_COOKIE_NAME) or None
