"""
API Views for authentication, own profile and back-office user management.
"""
import logging

from django.contrib.auth import authenticate
from django.core.exceptions import ValidationError
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import RefreshToken

from asso_project.pagination import auto_paginate
from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.permissions.core_config import Permissions
from core.permissions.decorators import require_permission

from .models import User
from .serializers import (
    ActiveUpdateSerializer,
    ChangePasswordSerializer,
    LoginSerializer,
    ProfileUpdateSerializer,
    RoleUpdateSerializer,
    UserListSerializer,
    UserProfileSerializer,
    UserRegistrationSerializer,
)
from .services import UserAccountService
from .tokens import clear_session_cookie, issue_tokens, set_session_cookie, stamp_claims

logger = logging.getLogger(__name__)


def _session_payload(user):
    tokens = issue_tokens(user)
    return {
        'user': UserProfileSerializer(user).data,
        'tokens': tokens,
    }


# ============================================================================
# Public Authentication Views
# ============================================================================

@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """
    Public endpoint for member sign-up.

    POST /auth/register/
    - Request body: { "email", "name", "password", "confirm_password" }
    - Returns: User data and tokens (session cookie set)
    """
    serializer = UserRegistrationSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid registration data', data=serializer.errors)

    try:
        user = UserAccountService.register(serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    payload = _session_payload(user)
    response = success_response(
        data=payload,
        message='User registered successfully',
        status_code=status.HTTP_201_CREATED
    )
    return set_session_cookie(response, payload['tokens']['access'])


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """
    Public endpoint for credential login.

    POST /auth/login/
    - Request body: { "email": "...", "password": "..." }
    - Returns: User data and tokens (session cookie set)
    - 401 on wrong credentials, 403 when the account is disabled
    """
    serializer = LoginSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Please provide both email and password', data=serializer.errors)

    email = serializer.validated_data['email'].lower()
    password = serializer.validated_data['password']

    user = authenticate(request, username=email, password=password)

    if user is None:
        # ModelBackend refuses inactive accounts; tell them apart from bad credentials
        candidate = User.objects.filter(email__iexact=email).first()
        if candidate is not None and not candidate.is_active and candidate.check_password(password):
            logger.info("Login refused for disabled account %s", email)
            return error_response('Account disabled', status_code=status.HTTP_403_FORBIDDEN)
        return error_response('Invalid credentials', status_code=status.HTTP_401_UNAUTHORIZED)

    payload = _session_payload(user)
    response = success_response(data=payload, message='Login successful')
    return set_session_cookie(response, payload['tokens']['access'])


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def token_refresh(request):
    """
    Mint a new access token from a refresh token.

    POST /auth/token/refresh/
    - Request body: { "refresh": "..." }
    - Returns: { "access", "refresh" } (session cookie set)
    - 401 when the token is invalid, blacklisted or its account is gone or disabled

    Claims are re-read from the user row so role changes apply on refresh.
    """
    raw_token = request.data.get('refresh')
    if not raw_token:
        return error_response('Refresh token is required')

    try:
        refresh = RefreshToken(raw_token)
    except TokenError as e:
        return error_response(f'Invalid refresh token: {e}', status_code=status.HTTP_401_UNAUTHORIZED)

    user = User.objects.filter(pk=refresh.get(api_settings.USER_ID_CLAIM)).first()
    if user is None or not user.is_active:
        logger.info("Refresh refused for user %s", refresh.get(api_settings.USER_ID_CLAIM))
        return error_response('Account disabled or removed', status_code=status.HTTP_401_UNAUTHORIZED)

    access = str(stamp_claims(refresh.access_token, user))
    response = success_response(
        data={'access': access, 'refresh': raw_token},
        message='Token refreshed'
    )
    return set_session_cookie(response, access)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """
    Blacklist the refresh token (when given) and clear the session cookie.

    POST /auth/logout/
    - Request body: { "refresh": "..." } (optional for cookie sessions)
    """
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token).blacklist()
        except TokenError as e:
            return error_response(f'Invalid refresh token: {e}')

    response = success_response(message='Logout successful')
    return clear_session_cookie(response)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def change_password(request):
    """
    POST /auth/change-password/
    - Request body: { "current_password", "new_password", "confirm_password" }
    """
    serializer = ChangePasswordSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid password data', data=serializer.errors)

    try:
        UserAccountService.change_password(request.user, serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(message='Password changed successfully')


# ============================================================================
# Member Profile (Self-Management)
# ============================================================================

@api_view(['GET', 'PATCH'])
def user_profile(request):
    """
    GET /member/profile/
    PATCH /member/profile/
    - Request body: { "name", "email" }
    """
    if request.method == 'GET':
        return success_response(data=UserProfileSerializer(request.user).data)

    serializer = ProfileUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid profile data', data=serializer.errors)

    try:
        user = UserAccountService.update_profile(request.user, serializer.to_dto())
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=UserProfileSerializer(user).data, message='Profile updated successfully')


# ============================================================================
# Admin User Management Views
# ============================================================================

@api_view(['GET'])
@require_permission(Permissions.MANAGE_USERS)
@auto_paginate
def admin_user_list(request):
    """
    GET /admin/users/?search=&role=&is_active=
    - Returns: users with registration and order counts
    """
    users = User.objects.filter_by_search_params(request.query_params)

    role = request.query_params.get('role')
    if role:
        users = users.filter(role=role.upper())

    is_active = request.query_params.get('is_active')
    if is_active is not None and is_active != '':
        users = users.filter(is_active=is_active.lower() == 'true')

    users = UserAccountService.with_activity_counts(users).order_by('-created_at')
    return success_response(data=UserListSerializer(users, many=True).data)


def _user_detail_data(user_id):
    user = UserAccountService.with_activity_counts(User.objects.filter(pk=user_id)).get()
    return UserListSerializer(user).data


@api_view(['PATCH'])
@require_permission(Permissions.MANAGE_USERS)
def admin_user_role(request, user_id):
    """
    PATCH /admin/users/<id>/role/
    - Request body: { "role": "ADMIN" | "MEMBER" }
    """
    serializer = RoleUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid role', data=serializer.errors)

    try:
        UserAccountService.set_role(request.user, user_id, serializer.validated_data['role'])
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=_user_detail_data(user_id), message='Role updated successfully')


@api_view(['PATCH'])
@require_permission(Permissions.MANAGE_USERS)
def admin_user_active(request, user_id):
    """
    PATCH /admin/users/<id>/active/
    - Request body: { "is_active": true | false }
    """
    serializer = ActiveUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid status', data=serializer.errors)

    try:
        UserAccountService.set_active(request.user, user_id, serializer.validated_data['is_active'])
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(data=_user_detail_data(user_id), message='Account status updated successfully')


@api_view(['DELETE'])
@require_permission(Permissions.MANAGE_USERS)
def admin_user_delete(request, user_id):
    """
    DELETE /admin/users/<id>/
    """
    try:
        UserAccountService.delete_user(request.user, user_id)
    except ValidationError as e:
        return error_response(validation_error_message(e))

    return success_response(message='User deleted successfully')
