from decimal import Decimal

from rest_framework import status

from cafeteria.models import CafeteriaOrder, OrderChannel, OrderStatus
from cafeteria.tests.fixtures import create_product
from core.base.test_utils import APITestBase
from core.site_settings.services import SettingsService


class PointOfSaleTest(APITestBase):
    url = '/admin/cafeteria/pos/orders/'

    def setUp(self):
        super().setUp()
        self.coffee = create_product('Coffee', price='1.50', stock=3)
        self.login_as(self.admin)

    def test_counter_sale(self):
        response = self.client.post(self.url, {
            'items': [{'product_id': self.coffee.pk, 'quantity': 2}],
            'payment_method': 'CASH',
            'customer_name': 'Alex',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data['data']
        self.assertEqual(data['status'], OrderStatus.DELIVERED)
        self.assertEqual(data['channel'], OrderChannel.POS)
        self.assertEqual(data['payment_method'], 'CASH')
        self.assertEqual(data['customer_name'], 'Alex')
        self.assertEqual(data['user'], self.admin.pk)
        self.assertEqual(Decimal(data['total']), Decimal('3.00'))

        self.coffee.refresh_from_db()
        self.assertEqual(self.coffee.stock, 1)

    def test_sale_ignores_orders_enabled_flag(self):
        SettingsService.update('orders_enabled', 'false')

        response = self.client.post(self.url, {
            'items': [{'product_id': self.coffee.pk, 'quantity': 1}],
            'payment_method': 'CARD',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_sale_beyond_stock(self):
        response = self.client.post(self.url, {
            'items': [{'product_id': self.coffee.pk, 'quantity': 4}],
            'payment_method': 'CASH',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Insufficient stock for Coffee')
        self.assertFalse(CafeteriaOrder.objects.exists())

    def test_payment_method_is_required(self):
        response = self.client.post(self.url, {
            'items': [{'product_id': self.coffee.pk, 'quantity': 1}],
            'payment_method': 'BITCOIN',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('payment_method', response.data['data'])
