"""
Route guard middleware.

Evaluated once per request, before URL resolution:

1. Decode the session context (bearer header or cookie).
2. Auth routes and assets pass; a signed-in GET of the login or register
   page is sent to the user's home instead.
3. Outside public routes, anonymous requests are redirected to login with a
   callback URL, disabled accounts to login with an error flag, and
   non-admins away from admin routes.
4. Maintenance mode answers 503 to everyone but administrators.
5. Public routes pass.
6. /dashboard/ is redirected to the role's home.
"""
import logging
from urllib.parse import urlencode

from django.http import HttpResponseRedirect, JsonResponse

from core.permissions import core_config as routes
from core.permissions.session import session_from_request
from core.site_settings.services import SettingsService

logger = logging.getLogger(__name__)


def is_public_route(path):
    return path in routes.PUBLIC_ROUTES or path.startswith(routes.PUBLIC_ROUTE_PREFIXES)


def login_redirect(path):
    return HttpResponseRedirect(f"{routes.LOGIN_PATH}?{urlencode({'callbackUrl': path})}")


def maintenance_response():
    return JsonResponse({
        'status': 'error',
        'message': 'Site under maintenance',
        'data': {
            'site_name': SettingsService.get('site_name'),
            'contact_email': SettingsService.get('contact_email'),
        }
    }, status=503)


class RouteGuardMiddleware:
    """Enforce public / member / admin routing from the session context."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path_info
        session = session_from_request(request)
        request.session_context = session

        if path.startswith(routes.PUBLIC_PREFIXES):
            if (
                session is not None
                and session.is_active
                and request.method == 'GET'
                and path in (routes.LOGIN_PATH, routes.REGISTER_PATH)
            ):
                return HttpResponseRedirect(session.home_path)
            return self.get_response(request)

        public = is_public_route(path)

        if not public:
            if session is None:
                return login_redirect(path)

            if not session.is_active:
                return HttpResponseRedirect(f"{routes.LOGIN_PATH}?error=AccountDisabled")

            if path.startswith(routes.ADMIN_PREFIX) and not session.is_admin:
                logger.info("Redirecting user %s away from %s", session.user_id, path)
                return HttpResponseRedirect(routes.UNAUTHORIZED_PATH)

        if self._in_maintenance(session, path):
            return maintenance_response()

        if public:
            return self.get_response(request)

        if path == routes.DASHBOARD_PATH:
            return HttpResponseRedirect(session.home_path)

        return self.get_response(request)

    def _in_maintenance(self, session, path):
        if session is not None and session.is_active and session.is_admin:
            return False
        if path.startswith(routes.MAINTENANCE_EXEMPT_PREFIXES):
            return False
        return SettingsService.is_maintenance_mode()
