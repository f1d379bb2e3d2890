"""
Project level views: dashboards and routing targets.

    GET /member/        member dashboard (view_dashboard)
    GET /admin/         admin dashboard (administrators)
    GET /unauthorized/  target of refused admin routes
    GET /dashboard/     sends the caller to their dashboard
"""
from django.contrib.auth import get_user_model
from django.http import HttpResponseRedirect
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from asso_project.response_formatter import error_response, success_response
from cafeteria.models import OrderStatus
from cafeteria.serializers import OrderSerializer
from cafeteria.services import OrderService, StockService
from core.permissions.core_config import LOGIN_PATH, Permissions
from core.permissions.decorators import require_admin, require_permission
from core.site_settings.services import SettingsService
from events.models import Event, EventRegistration
from events.serializers import MemberRegistrationSerializer

RECENT_ORDERS = 5


@api_view(['GET'])
@require_permission(Permissions.VIEW_DASHBOARD)
def member_dashboard(request):
    registrations = (
        EventRegistration.objects
        .filter(user=request.user, event__date__gte=timezone.now())
        .select_related('event')
        .order_by('event__date')
    )
    orders = OrderService.list_for_user(request.user)[:RECENT_ORDERS]
    cafeteria = SettingsService.get_many(['cafeteria_hours', 'cafeteria_message'])

    return success_response(data={
        'user': {'id': request.user.pk, 'name': request.user.name, 'email': request.user.email},
        'upcoming_registrations': MemberRegistrationSerializer(registrations, many=True).data,
        'recent_orders': OrderSerializer(orders, many=True).data,
        'cafeteria': {
            'hours': cafeteria['cafeteria_hours'],
            'message': cafeteria['cafeteria_message'],
        },
    })


@api_view(['GET'])
@require_admin
def admin_dashboard(request):
    users = get_user_model().objects
    now = timezone.now()

    return success_response(data={
        'users': {
            'total': users.count(),
            'active': users.filter(is_active=True).count(),
        },
        'events': {
            'total': Event.objects.count(),
            'published': Event.objects.published().count(),
            'upcoming': Event.objects.filter(date__gte=now).count(),
            'registrations': EventRegistration.objects.count(),
        },
        'orders': {
            'pending': OrderService.get_queryset().filter(status=OrderStatus.PENDING).count(),
        },
        'cafeteria': StockService.stats(),
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def unauthorized(request):
    return error_response(
        'You do not have access to this page',
        status_code=status.HTTP_403_FORBIDDEN
    )


def dashboard_redirect(request):
    """Reached only without a session; signed-in users are redirected earlier."""
    session = getattr(request, 'session_context', None)
    if session is None:
        return HttpResponseRedirect(LOGIN_PATH)
    return HttpResponseRedirect(session.home_path)
