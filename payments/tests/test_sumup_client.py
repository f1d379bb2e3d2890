from datetime import date
from unittest import mock

import requests
from django.test import SimpleTestCase, override_settings

from payments.exceptions import PaymentProviderError
from payments.sumup_client import SumUpClient
from payments.tests.fixtures import SAMPLE_TRANSACTIONS, json_response


@mock.patch('payments.sumup_client.requests.get')
class SumUpClientTest(SimpleTestCase):
    def setUp(self):
        self.client = SumUpClient('sk_test', 'MC123', base_url='https://sumup.test/', timeout=5)

    def test_transactions_request(self, mock_get):
        mock_get.return_value = json_response({'items': SAMPLE_TRANSACTIONS})

        items = self.client.get_transactions(
            start_date=date(2024, 3, 1),
            end_date=date(2024, 3, 31),
            statuses=['SUCCESSFUL', 'FAILED'],
            payment_types=['CARD'],
        )

        self.assertEqual(items, SAMPLE_TRANSACTIONS)
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], 'https://sumup.test/v2.1/merchants/MC123/transactions/history')
        self.assertEqual(kwargs['params'], [
            ('oldest_time', '2024-03-01T00:00:00Z'),
            ('newest_time', '2024-03-31T23:59:59Z'),
            ('statuses', 'SUCCESSFUL'),
            ('statuses', 'FAILED'),
            ('payment_types', 'CARD'),
            ('limit', '1000'),
        ])
        self.assertEqual(kwargs['headers']['Authorization'], 'Bearer sk_test')
        self.assertEqual(kwargs['timeout'], 5)

    def test_missing_items_gives_empty_list(self, mock_get):
        mock_get.return_value = json_response({})

        self.assertEqual(self.client.get_transactions(limit=10), [])
        self.assertEqual(mock_get.call_args[1]['params'], [('limit', '10')])

    def test_merchant_profile(self, mock_get):
        mock_get.return_value = json_response({'merchant_profile': {'merchant_code': 'MC123'}})

        profile = self.client.get_merchant_profile()

        self.assertEqual(profile['merchant_profile']['merchant_code'], 'MC123')
        self.assertEqual(mock_get.call_args[0][0], 'https://sumup.test/v0.1/me')

    def test_payouts_need_both_dates(self, mock_get):
        self.assertEqual(self.client.get_payouts(date(2024, 3, 1), None), [])
        mock_get.assert_not_called()

    def test_payouts_request(self, mock_get):
        mock_get.return_value = json_response([{'id': 1, 'amount': 42.0}])

        payouts = self.client.get_payouts(date(2024, 3, 1), date(2024, 3, 31))

        self.assertEqual(payouts, [{'id': 1, 'amount': 42.0}])
        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], 'https://sumup.test/v1.0/merchants/MC123/payouts')
        self.assertIn(('format', 'json'), kwargs['params'])

    def test_http_error_raises(self, mock_get):
        mock_get.return_value = json_response({}, status_code=401, text='invalid token')

        with self.assertRaises(PaymentProviderError) as ctx:
            self.client.get_transactions()

        self.assertIn('401', str(ctx.exception.detail))

    def test_network_error_raises(self, mock_get):
        mock_get.side_effect = requests.ConnectionError('connection refused')

        with self.assertRaises(PaymentProviderError):
            self.client.get_merchant_profile()

    def test_missing_key_never_calls_the_api(self, mock_get):
        client = SumUpClient('', 'MC123')

        self.assertFalse(client.is_configured)
        with self.assertRaises(PaymentProviderError):
            client.get_merchant_profile()
        mock_get.assert_not_called()

    @override_settings(SUMUP_API_KEY='sk_live', SUMUP_MERCHANT_CODE='MC999')
    def test_from_settings(self, mock_get):
        client = SumUpClient.from_settings()

        self.assertTrue(client.is_configured)
        self.assertEqual(client.merchant_code, 'MC999')
