"""
Session token issuing.

Access tokens carry the claims the route guard needs (role, active flag)
so routing decisions never hit the database.
"""
from django.conf import settings
from rest_framework_simplejwt.tokens import RefreshToken


def stamp_claims(token, user):
    """Write the user's current role, active flag and identity onto a token."""
    token['role'] = user.role
    token['is_active'] = user.is_active
    token['email'] = user.email
    token['name'] = user.name
    return token


def issue_tokens(user):
    """Return a refresh/access token pair carrying the user's session claims."""
    refresh = stamp_claims(RefreshToken.for_user(user), user)

    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def set_session_cookie(response, access_token):
    """Store the access token in the HttpOnly session cookie."""
    lifetime = settings.SIMPLE_JWT['ACCESS_TOKEN_LIFETIME']
    response.set_cookie(
        settings.SESSION_TOKEN_COOKIE,
        access_token,
        max_age=int(lifetime.total_seconds()),
        httponly=True,
        secure=settings.SESSION_TOKEN_COOKIE_SECURE,
        samesite='Lax',
    )
    return response


def clear_session_cookie(response):
    response.delete_cookie(settings.SESSION_TOKEN_COOKIE, samesite='Lax')
    return response
