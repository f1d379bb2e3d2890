"""
Session context carried by every request.

The route guard decodes the signed access token (bearer header first,
then the session cookie) into a ``SessionContext`` and attaches it to the
request as ``request.session_context``. Nothing here touches the database;
the claims were written when the token was issued.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from core.permissions.core_config import ADMIN_HOME, MEMBER_HOME, Roles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    user_id: int
    role: str
    is_active: bool

    @property
    def is_admin(self) -> bool:
        return self.role == Roles.ADMIN

    @property
    def home_path(self) -> str:
        return ADMIN_HOME if self.is_admin else MEMBER_HOME


def get_raw_token(request) -> Optional[str]:
    """Return the raw access token from the Authorization header or the cookie."""
    header = request.META.get(api_settings.AUTH_HEADER_NAME, '')
    parts = header.split()
    if len(parts) == 2 and parts[0] in api_settings.AUTH_HEADER_TYPES:
        return parts[1]
    return request.COOKIES.get(settings.SESSION_TOKEN_COOKIE) or None


def session_from_request(request) -> Optional[SessionContext]:
    """Decode the request's token into a SessionContext, or None if absent/invalid."""
    raw_token = get_raw_token(request)
    if not raw_token:
        return None

    try:
        token = AccessToken(raw_token)
    except TokenError as exc:
        logger.debug("Ignoring invalid session token: %s", exc)
        return None

    user_id = token.get(api_settings.USER_ID_CLAIM)
    if user_id is None:
        return None

    return SessionContext(
        user_id=user_id,
        role=token.get('role', Roles.MEMBER),
        is_active=bool(token.get('is_active', False)),
    )
