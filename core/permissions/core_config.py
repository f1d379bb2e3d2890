"""
Core Permission Configuration - Hardcoded Setup
===============================================

Defines the foundational structure for the role gate:
- 2 Roles: ADMIN (back office) and MEMBER (self-service)
- 9 Permissions covering every back-office and member action
- A static role -> permission mapping

This module is the source of truth; nothing about roles is stored in the
database besides the role code on each user.
"""
from django.db import models


# ============================================================================
# ROLES
# ============================================================================

class Roles(models.TextChoices):
    """Role codes stored on each user."""
    ADMIN = 'ADMIN', 'Administrator'
    MEMBER = 'MEMBER', 'Member'


# ============================================================================
# PERMISSIONS
# ============================================================================

class Permissions:
    """Permission identifiers."""
    MANAGE_EVENTS = 'manage_events'
    MANAGE_ORDERS = 'manage_orders'
    MANAGE_USERS = 'manage_users'
    MANAGE_PAGES = 'manage_pages'
    MANAGE_SETTINGS = 'manage_settings'
    MANAGE_MEDIA = 'manage_media'
    VIEW_DASHBOARD = 'view_dashboard'
    REGISTER_EVENTS = 'register_events'
    CREATE_ORDERS = 'create_orders'


ALL_PERMISSIONS = frozenset({
    Permissions.MANAGE_EVENTS,
    Permissions.MANAGE_ORDERS,
    Permissions.MANAGE_USERS,
    Permissions.MANAGE_PAGES,
    Permissions.MANAGE_SETTINGS,
    Permissions.MANAGE_MEDIA,
    Permissions.VIEW_DASHBOARD,
    Permissions.REGISTER_EVENTS,
    Permissions.CREATE_ORDERS,
})


# ============================================================================
# ROLE -> PERMISSIONS
# ============================================================================

ROLE_PERMISSIONS = {
    Roles.ADMIN: ALL_PERMISSIONS,
    Roles.MEMBER: frozenset({
        Permissions.VIEW_DASHBOARD,
        Permissions.REGISTER_EVENTS,
        Permissions.CREATE_ORDERS,
    }),
}


# ============================================================================
# ROUTES
# ============================================================================

# Path prefixes that bypass the route guard entirely
PUBLIC_PREFIXES = (
    '/auth/',
    '/static/',
    '/uploads/',
    '/favicon',
    '/django-admin/',
)

# Public routes; a trailing slash entry also matches everything below it
PUBLIC_ROUTES = ('/', '/unauthorized/')
PUBLIC_ROUTE_PREFIXES = ('/events/', '/pages/', '/site/')

LOGIN_PATH = '/auth/login/'
REGISTER_PATH = '/auth/register/'
UNAUTHORIZED_PATH = '/unauthorized/'
DASHBOARD_PATH = '/dashboard/'
ADMIN_PREFIX = '/admin/'
ADMIN_HOME = '/admin/'
MEMBER_HOME = '/member/'

# Paths still served while maintenance mode is on
MAINTENANCE_EXEMPT_PREFIXES = ('/auth/', '/static/', '/uploads/', '/unauthorized/', '/django-admin/')
