"""
Tests for the settings accessor and the settings endpoints.
"""
from django.core.cache import cache
from django.test import TestCase, override_settings
from rest_framework import status

from core.base.test_utils import APITestBase
from core.site_settings.models import Setting
from core.site_settings.services import SettingsService


class SettingsServiceTest(TestCase):
    def setUp(self):
        cache.clear()

    def test_missing_row_falls_back_to_default(self):
        self.assertEqual(SettingsService.get('orders_enabled'), 'true')
        self.assertEqual(SettingsService.get('unknown_key'), '')

    def test_update_is_visible_immediately(self):
        self.assertEqual(SettingsService.get('site_name'), 'My Association')

        SettingsService.update('site_name', 'Student Union')

        self.assertEqual(SettingsService.get('site_name'), 'Student Union')

    @override_settings(SITE_SETTINGS_CACHE_TTL=3600)
    def test_reads_are_served_from_cache(self):
        SettingsService.update('cafeteria_hours', '8h - 12h')
        self.assertEqual(SettingsService.get('cafeteria_hours'), '8h - 12h')

        # A write that bypasses the service is not seen until invalidation
        Setting.objects.filter(key='cafeteria_hours').update(value='9h - 11h')
        self.assertEqual(SettingsService.get('cafeteria_hours'), '8h - 12h')

        SettingsService.invalidate('cafeteria_hours')
        self.assertEqual(SettingsService.get('cafeteria_hours'), '9h - 11h')

    def test_boolean_settings_are_validated(self):
        with self.assertRaises(Exception) as ctx:
            SettingsService.update('maintenance_mode', 'maybe')
        self.assertIn('must be', str(ctx.exception))

        SettingsService.update('maintenance_mode', ' TRUE ')
        self.assertTrue(SettingsService.is_maintenance_mode())

    def test_update_many(self):
        SettingsService.update_many({'site_name': 'Union', 'orders_enabled': 'false'})

        self.assertEqual(SettingsService.get_many(['site_name', 'orders_enabled']), {
            'site_name': 'Union',
            'orders_enabled': 'false',
        })
        self.assertFalse(SettingsService.is_feature_enabled('orders_enabled'))

    def test_public_config_hides_payment_settings(self):
        config = SettingsService.get_public_config()

        self.assertIn('site_name', config)
        self.assertIn('cafeteria_hours', config)
        self.assertIn('maintenance_mode', config)
        self.assertNotIn('default_sumup_link', config)

    def test_seed_defaults_is_idempotent(self):
        created = SettingsService.seed_defaults()
        self.assertGreater(created, 0)

        SettingsService.update('site_name', 'Kept')
        self.assertEqual(SettingsService.seed_defaults(), 0)
        self.assertEqual(SettingsService.get('site_name'), 'Kept')


class SettingsAPITest(APITestBase):
    def test_public_config(self):
        response = self.client.get('/site/config/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['site_name'], 'My Association')

    def test_public_config_refreshes_after_update(self):
        self.client.get('/site/config/')

        self.login_as(self.admin)
        response = self.client.put('/admin/settings/site_name/', {'value': 'Student Union'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

        self.logout()
        response = self.client.get('/site/config/')
        self.assertEqual(response.data['data']['site_name'], 'Student Union')

    def test_admin_lists_settings_grouped(self):
        SettingsService.seed_defaults()
        self.login_as(self.admin)

        response = self.client.get('/admin/settings/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        groups = response.data['data']
        self.assertIn('features', groups)
        self.assertIn('payments', groups)
        keys = [s['key'] for s in groups['features']]
        self.assertIn('maintenance_mode', keys)

    def test_admin_bulk_update(self):
        self.login_as(self.admin)

        response = self.client.put('/admin/settings/', {
            'settings': {'site_name': 'Union', 'registration_open': 'false'}
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(SettingsService.get('registration_open'), 'false')

    def test_admin_bulk_update_rejects_invalid_boolean(self):
        self.login_as(self.admin)

        response = self.client.put('/admin/settings/', {
            'settings': {'site_name': 'Union', 'orders_enabled': 'sometimes'}
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(SettingsService.get('site_name'), 'My Association')

    def test_member_cannot_change_settings(self):
        self.login_as(self.member)
        response = self.client.put('/admin/settings/site_name/', {'value': 'Hacked'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.assertEqual(SettingsService.get('site_name'), 'My Association')
