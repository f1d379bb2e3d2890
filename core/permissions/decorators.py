"""
Permission decorators for function-based views.

Place them below ``@api_view`` so ``request.user`` is the authenticated
DRF user:

    @api_view(['GET', 'POST'])
    @require_permission(Permissions.MANAGE_EVENTS)
    def admin_event_list(request):
        ...
"""
from functools import wraps

from rest_framework import status

from asso_project.response_formatter import error_response
from core.permissions.services import user_can, is_admin_role


def _authentication_required():
    return error_response('Authentication required', status_code=status.HTTP_401_UNAUTHORIZED)


def require_permission(permission):
    """Allow the view only when the user's role grants ``permission``."""
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return _authentication_required()

            allowed, reason = user_can(request.user, permission)
            if not allowed:
                return error_response(
                    'Permission denied',
                    data={'detail': reason, 'required_permission': permission},
                    status_code=status.HTTP_403_FORBIDDEN
                )

            return view_func(request, *args, **kwargs)

        # Metadata for introspection
        wrapper.required_permission = permission
        return wrapper
    return decorator


def require_any_permission(*permissions):
    """
    Allow the view when the user holds ANY of the permissions (OR logic).

    Usage:
        @require_any_permission(Permissions.MANAGE_EVENTS, Permissions.MANAGE_PAGES)
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return _authentication_required()

            reasons = []
            for permission in permissions:
                allowed, reason = user_can(request.user, permission)
                if allowed:
                    return view_func(request, *args, **kwargs)
                reasons.append(f"{permission}: {reason}")

            return error_response(
                'Permission denied',
                data={
                    'detail': 'You need at least one of the following permissions',
                    'required_permissions': list(permissions),
                    'reasons': reasons
                },
                status_code=status.HTTP_403_FORBIDDEN
            )
        return wrapper
    return decorator


def require_all_permissions(*permissions):
    """
    Allow the view only when the user holds ALL of the permissions (AND logic).
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return _authentication_required()

            missing_permissions = []
            for permission in permissions:
                allowed, reason = user_can(request.user, permission)
                if not allowed:
                    missing_permissions.append({'permission': permission, 'reason': reason})

            if missing_permissions:
                return error_response(
                    'Permission denied',
                    data={
                        'detail': 'You need all of the following permissions',
                        'missing_permissions': missing_permissions
                    },
                    status_code=status.HTTP_403_FORBIDDEN
                )

            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator


def require_admin(view_func):
    """Allow the view only for active administrators."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return _authentication_required()

        if not request.user.is_active or not is_admin_role(request.user.role):
            return error_response(
                'Admin privileges required',
                status_code=status.HTTP_403_FORBIDDEN
            )

        return view_func(request, *args, **kwargs)
    return wrapper
