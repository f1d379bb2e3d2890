"""
Tests for back-office user management.
"""
from datetime import timedelta

from django.utils import timezone
from rest_framework import status

from core.base.test_utils import APITestBase, create_member
from core.permissions.core_config import Roles
from core.user_accounts.models import User
from events.models import Event, EventRegistration


class AdminUserListAPITest(APITestBase):
    def setUp(self):
        super().setUp()
        self.url = '/admin/users/'
        self.login_as(self.admin)

    def test_list_users_with_activity_counts(self):
        event = Event.objects.create(
            title='Welcome party', description='Party', location='Hall',
            date=timezone.now() + timedelta(days=5), is_published=True
        )
        EventRegistration.objects.create(user=self.member, event=event)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        users = {u['email']: u for u in self.results(response)}
        self.assertEqual(users['member@example.com']['registration_count'], 1)
        self.assertEqual(users['member@example.com']['order_count'], 0)
        self.assertEqual(users['admin@example.com']['registration_count'], 0)

    def test_filter_by_role_and_search(self):
        create_member(email='alice@example.com', name='Alice')

        response = self.client.get(self.url, {'role': 'member', 'search': 'alice'})

        emails = [u['email'] for u in self.results(response)]
        self.assertEqual(emails, ['alice@example.com'])

    def test_filter_by_active_flag(self):
        create_member(email='gone@example.com', name='Gone', is_active=False)

        response = self.client.get(self.url, {'is_active': 'false'})

        emails = [u['email'] for u in self.results(response)]
        self.assertEqual(emails, ['gone@example.com'])

    def test_member_is_redirected_away(self):
        self.login_as(self.member)
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.assertEqual(response['Location'], '/unauthorized/')


class AdminUserUpdateAPITest(APITestBase):
    def setUp(self):
        super().setUp()
        self.login_as(self.admin)

    def test_promote_member(self):
        response = self.client.patch(f'/admin/users/{self.member.pk}/role/', {'role': 'ADMIN'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.member.refresh_from_db()
        self.assertEqual(self.member.role, Roles.ADMIN)

    def test_admin_cannot_demote_self(self):
        response = self.client.patch(f'/admin/users/{self.admin.pk}/role/', {'role': 'MEMBER'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'You cannot remove your own administrator role')
        self.admin.refresh_from_db()
        self.assertEqual(self.admin.role, Roles.ADMIN)

    def test_invalid_role(self):
        response = self.client.patch(f'/admin/users/{self.member.pk}/role/', {'role': 'OWNER'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_deactivate_member(self):
        response = self.client.patch(f'/admin/users/{self.member.pk}/active/', {'is_active': False}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['data']['is_active'])
        self.member.refresh_from_db()
        self.assertFalse(self.member.is_active)

    def test_admin_cannot_deactivate_self(self):
        response = self.client.patch(f'/admin/users/{self.admin.pk}/active/', {'is_active': False}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.admin.refresh_from_db()
        self.assertTrue(self.admin.is_active)


class AdminUserDeleteAPITest(APITestBase):
    def setUp(self):
        super().setUp()
        self.login_as(self.admin)

    def test_delete_user_without_history(self):
        response = self.client.delete(f'/admin/users/{self.member.pk}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(User.objects.filter(pk=self.member.pk).exists())

    def test_delete_refused_with_registrations(self):
        event = Event.objects.create(
            title='Assembly', description='Yearly', location='Room A',
            date=timezone.now() + timedelta(days=3), is_published=True
        )
        EventRegistration.objects.create(user=self.member, event=event)

        response = self.client.delete(f'/admin/users/{self.member.pk}/')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(User.objects.filter(pk=self.member.pk).exists())

    def test_admin_cannot_delete_self(self):
        response = self.client.delete(f'/admin/users/{self.admin.pk}/')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'You cannot delete your own account')

    def test_delete_unknown_user(self):
        response = self.client.delete('/admin/users/9999/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
