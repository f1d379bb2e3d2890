"""
Tests for authentication endpoints: registration, login, logout,
token refresh and password change.
"""
from django.conf import settings
from rest_framework import status

from core.base.test_utils import APITestBase, DEFAULT_PASSWORD, create_member
from core.permissions.core_config import Roles
from core.site_settings.services import SettingsService
from core.user_accounts.models import User


class RegistrationAPITest(APITestBase):
    """Test self-service sign-up"""

    def setUp(self):
        super().setUp()
        self.url = '/auth/register/'
        self.valid_data = {
            'email': 'NewUser@Example.com',
            'name': 'New User',
            'password': 'secret1',
            'confirm_password': 'secret1',
        }

    def test_register_creates_active_member(self):
        response = self.client.post(self.url, self.valid_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data['data']
        self.assertEqual(data['user']['email'], 'newuser@example.com')
        self.assertEqual(data['user']['role'], Roles.MEMBER)
        self.assertTrue(data['user']['is_active'])
        self.assertIn('access', data['tokens'])
        self.assertIn('refresh', data['tokens'])
        self.assertIn(settings.SESSION_TOKEN_COOKIE, response.cookies)

    def test_register_duplicate_email(self):
        self.client.post(self.url, self.valid_data, format='json')
        response = self.client.post(self.url, self.valid_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Email already registered', response.data['message'])
        self.assertEqual(User.objects.filter(email='newuser@example.com').count(), 1)

    def test_register_password_mismatch(self):
        data = dict(self.valid_data, confirm_password='other12')
        response = self.client.post(self.url, data, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('confirm_password', response.data['data'])

    def test_register_short_password_and_name(self):
        data = dict(self.valid_data, name='A', password='abc', confirm_password='abc')
        response = self.client.post(self.url, data, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data['data'])
        self.assertIn('password', response.data['data'])

    def test_register_refused_when_closed(self):
        SettingsService.update('registration_open', 'false')

        response = self.client.post(self.url, self.valid_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Registrations are closed')
        self.assertFalse(User.objects.filter(email='newuser@example.com').exists())


class LoginAPITest(APITestBase):
    """Test credential login"""

    def setUp(self):
        super().setUp()
        self.url = '/auth/login/'

    def test_login_success(self):
        response = self.client.post(
            self.url, {'email': 'MEMBER@example.com', 'password': DEFAULT_PASSWORD}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'Login successful')
        self.assertEqual(response.data['data']['user']['email'], 'member@example.com')
        self.assertIn(settings.SESSION_TOKEN_COOKIE, response.cookies)

    def test_login_wrong_password(self):
        response = self.client.post(
            self.url, {'email': 'member@example.com', 'password': 'wrong-password'}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['message'], 'Invalid credentials')

    def test_login_unknown_email(self):
        response = self.client.post(
            self.url, {'email': 'nobody@example.com', 'password': DEFAULT_PASSWORD}, format='json'
        )
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_disabled_account_with_correct_password(self):
        self.member.is_active = False
        self.member.save()

        response = self.client.post(
            self.url, {'email': 'member@example.com', 'password': DEFAULT_PASSWORD}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['message'], 'Account disabled')

    def test_signed_in_user_visiting_login_is_sent_home(self):
        self.login_as(self.member)
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.assertEqual(response['Location'], '/member/')

    def test_signed_in_admin_visiting_register_is_sent_to_back_office(self):
        self.login_as(self.admin)
        response = self.client.get('/auth/register/')

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.assertEqual(response['Location'], '/admin/')


class SessionTokenAPITest(APITestBase):
    """Test token contents, refresh and logout"""

    def test_access_token_carries_session_claims(self):
        from rest_framework_simplejwt.tokens import AccessToken

        tokens = self.login_as(self.admin)
        token = AccessToken(tokens['access'])

        self.assertEqual(token['user_id'], self.admin.pk)
        self.assertEqual(token['role'], Roles.ADMIN)
        self.assertTrue(token['is_active'])
        self.assertEqual(token['email'], 'admin@example.com')

    def test_refresh_returns_new_access_token(self):
        tokens = self.login_as(self.member)
        self.logout()

        response = self.client.post('/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data['data'])

    def test_refresh_sets_session_cookie(self):
        tokens = self.login_as(self.member)
        self.logout()

        response = self.client.post('/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        cookie = response.cookies[settings.SESSION_TOKEN_COOKIE]
        self.assertEqual(cookie.value, response.data['data']['access'])
        self.assertTrue(cookie['httponly'])

    def test_refresh_picks_up_role_change(self):
        tokens = self.login_as(self.admin)
        self.admin.role = Roles.MEMBER
        self.admin.save()
        self.logout()

        response = self.client.post('/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['data']['access']}")
        response = self.client.get('/admin/')

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.assertEqual(response['Location'], '/unauthorized/')

    def test_refresh_refused_for_disabled_account(self):
        tokens = self.login_as(self.member)
        self.member.is_active = False
        self.member.save()
        self.logout()

        response = self.client.post('/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_refresh_requires_token(self):
        response = self.client.post('/auth/token/refresh/', {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_logout_blacklists_refresh_token(self):
        tokens = self.login_as(self.member)

        response = self.client.post('/auth/logout/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        self.logout()
        response = self.client.post('/auth/token/refresh/', {'refresh': tokens['refresh']}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_session_cookie_is_accepted(self):
        login = self.client.post(
            '/auth/login/', {'email': 'member@example.com', 'password': DEFAULT_PASSWORD}, format='json'
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK)

        response = self.client.get('/member/profile/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['email'], 'member@example.com')

    def test_deactivated_user_with_old_token_is_rejected(self):
        self.login_as(self.member)
        self.member.is_active = False
        self.member.save()

        response = self.client.get('/member/profile/')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class ChangePasswordAPITest(APITestBase):
    def setUp(self):
        super().setUp()
        self.url = '/auth/change-password/'
        self.login_as(self.member)

    def test_change_password_success(self):
        response = self.client.post(self.url, {
            'current_password': DEFAULT_PASSWORD,
            'new_password': 'newpass456',
            'confirm_password': 'newpass456',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.member.refresh_from_db()
        self.assertTrue(self.member.check_password('newpass456'))

    def test_change_password_requires_current_password(self):
        response = self.client.post(self.url, {
            'current_password': 'not-my-password',
            'new_password': 'newpass456',
            'confirm_password': 'newpass456',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Current password is incorrect', response.data['message'])
        self.member.refresh_from_db()
        self.assertTrue(self.member.check_password(DEFAULT_PASSWORD))


class ProfileAPITest(APITestBase):
    def setUp(self):
        super().setUp()
        self.url = '/member/profile/'
        self.login_as(self.member)

    def test_get_own_profile(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['name'], 'Test Member')

    def test_update_name_and_email(self):
        response = self.client.patch(self.url, {'name': 'Renamed', 'email': 'Renamed@Example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.member.refresh_from_db()
        self.assertEqual(self.member.name, 'Renamed')
        self.assertEqual(self.member.email, 'renamed@example.com')

    def test_update_email_taken_by_someone_else(self):
        create_member(email='taken@example.com', name='Other')

        response = self.client.patch(self.url, {'email': 'taken@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.member.refresh_from_db()
        self.assertEqual(self.member.email, 'member@example.com')

    def test_anonymous_profile_redirects_to_login(self):
        self.logout()
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.assertEqual(response['Location'], '/auth/login/?callbackUrl=%2Fmember%2Fprofile%2F')
