from django.test import SimpleTestCase

from core.permissions.core_config import ALL_PERMISSIONS, Permissions, Roles
from core.permissions.services import (
    has_all_permissions,
    has_any_permission,
    has_permission,
    is_admin_role,
    user_can,
)


class FakeUser:
    def __init__(self, role=Roles.MEMBER, is_active=True, is_authenticated=True):
        self.role = role
        self.is_active = is_active
        self.is_authenticated = is_authenticated


class RolePermissionTest(SimpleTestCase):
    def test_admin_holds_every_permission(self):
        for permission in ALL_PERMISSIONS:
            self.assertTrue(has_permission(Roles.ADMIN, permission))

    def test_member_permissions(self):
        self.assertTrue(has_permission(Roles.MEMBER, Permissions.VIEW_DASHBOARD))
        self.assertTrue(has_permission(Roles.MEMBER, Permissions.REGISTER_EVENTS))
        self.assertTrue(has_permission(Roles.MEMBER, Permissions.CREATE_ORDERS))
        self.assertFalse(has_permission(Roles.MEMBER, Permissions.MANAGE_EVENTS))
        self.assertFalse(has_permission(Roles.MEMBER, Permissions.MANAGE_SETTINGS))

    def test_unknown_role_has_nothing(self):
        self.assertFalse(has_permission('GUEST', Permissions.VIEW_DASHBOARD))

    def test_any_and_all(self):
        self.assertTrue(has_any_permission(Roles.MEMBER, [Permissions.MANAGE_USERS, Permissions.CREATE_ORDERS]))
        self.assertFalse(has_all_permissions(Roles.MEMBER, [Permissions.MANAGE_USERS, Permissions.CREATE_ORDERS]))
        self.assertTrue(has_all_permissions(Roles.ADMIN, [Permissions.MANAGE_USERS, Permissions.CREATE_ORDERS]))

    def test_is_admin_role(self):
        self.assertTrue(is_admin_role(Roles.ADMIN))
        self.assertFalse(is_admin_role(Roles.MEMBER))


class UserCanTest(SimpleTestCase):
    def test_anonymous(self):
        allowed, reason = user_can(FakeUser(is_authenticated=False), Permissions.VIEW_DASHBOARD)
        self.assertFalse(allowed)
        self.assertEqual(reason, 'Authentication required')

    def test_disabled_account(self):
        allowed, reason = user_can(FakeUser(role=Roles.ADMIN, is_active=False), Permissions.MANAGE_EVENTS)
        self.assertFalse(allowed)
        self.assertEqual(reason, 'Account disabled')

    def test_granted(self):
        allowed, reason = user_can(FakeUser(), Permissions.CREATE_ORDERS)
        self.assertTrue(allowed)
        self.assertEqual(reason, 'Permission granted')

    def test_denied_by_role(self):
        allowed, _ = user_can(FakeUser(), Permissions.MANAGE_ORDERS)
        self.assertFalse(allowed)
