from decimal import Decimal

from rest_framework import status

from cafeteria.models import CafeteriaOrder, OrderChannel, OrderStatus
from cafeteria.tests.fixtures import create_order, create_product
from core.base.test_utils import APITestBase, create_member
from core.site_settings.services import SettingsService


class PlaceOrderTest(APITestBase):
    url = '/member/orders/'

    def setUp(self):
        super().setUp()
        self.coffee = create_product('Coffee', price='1.50', stock=3)
        self.croissant = create_product('Croissant', price='1.20', stock=5)
        self.login_as(self.member)

    def order(self, *lines, **extra):
        payload = {'items': [{'product_id': p.pk, 'quantity': q} for p, q in lines]}
        payload.update(extra)
        return self.client.post(self.url, payload, format='json')

    def test_order_takes_units_out_of_stock(self):
        response = self.order((self.coffee, 2))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data = response.data['data']
        self.assertEqual(data['status'], OrderStatus.PENDING)
        self.assertEqual(data['channel'], OrderChannel.ONLINE)
        self.assertEqual(Decimal(data['total']), Decimal('3.00'))
        self.assertEqual(data['items'][0]['quantity'], 2)
        self.assertEqual(Decimal(data['items'][0]['price']), Decimal('1.50'))

        self.coffee.refresh_from_db()
        self.assertEqual(self.coffee.stock, 1)

    def test_second_order_beyond_stock_is_refused(self):
        self.order((self.coffee, 2))

        response = self.order((self.coffee, 2))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Insufficient stock for Coffee')
        self.coffee.refresh_from_db()
        self.assertEqual(self.coffee.stock, 1)
        self.assertEqual(CafeteriaOrder.objects.count(), 1)

    def test_failed_line_rolls_back_the_whole_order(self):
        response = self.order((self.croissant, 2), (self.coffee, 4))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.croissant.refresh_from_db()
        self.assertEqual(self.croissant.stock, 5)
        self.assertFalse(CafeteriaOrder.objects.exists())

    def test_total_covers_every_line(self):
        response = self.order((self.coffee, 1), (self.croissant, 2))

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Decimal(response.data['data']['total']), Decimal('3.90'))

    def test_price_is_snapshotted(self):
        self.order((self.coffee, 1))
        self.coffee.price = Decimal('2.00')
        self.coffee.save()

        order = CafeteriaOrder.objects.get()
        self.assertEqual(order.items.get().price, Decimal('1.50'))
        self.assertEqual(order.total, Decimal('1.50'))

    def test_stale_client_price_is_refused(self):
        response = self.client.post(self.url, {
            'items': [{'product_id': self.coffee.pk, 'quantity': 1, 'unit_price': '1.00'}]
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'The price of Coffee has changed')

    def test_empty_cart_is_refused(self):
        response = self.client.post(self.url, {'items': []}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_zero_quantity_is_refused(self):
        response = self.order((self.coffee, 0))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_product(self):
        response = self.client.post(self.url, {'items': [{'product_id': 999, 'quantity': 1}]}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Product not found')

    def test_unavailable_product(self):
        self.coffee.is_available = False
        self.coffee.save()

        response = self.order((self.coffee, 1))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Coffee is no longer available')

    def test_orders_disabled(self):
        SettingsService.update('orders_enabled', 'false')

        response = self.order((self.coffee, 1))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Orders are currently disabled')
        self.coffee.refresh_from_db()
        self.assertEqual(self.coffee.stock, 3)

    def test_member_sees_only_own_orders(self):
        other = create_member(email='other@example.com')
        create_order(other, self.coffee)
        self.order((self.croissant, 1))

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        orders = self.results(response)
        self.assertEqual(len(orders), 1)
        self.assertEqual(orders[0]['items'][0]['product_name'], 'Croissant')

    def test_anonymous_is_redirected_to_login(self):
        self.logout()

        response = self.client.post(self.url, {'items': []}, format='json')

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.assertTrue(response['Location'].startswith('/auth/login/'))


class CancelOrderTest(APITestBase):
    def setUp(self):
        super().setUp()
        self.coffee = create_product('Coffee', stock=3)
        self.login_as(self.member)
        self.client.post('/member/orders/', {
            'items': [{'product_id': self.coffee.pk, 'quantity': 2}]
        }, format='json')
        self.order = CafeteriaOrder.objects.get()

    def cancel(self, order):
        return self.client.post(f'/member/orders/{order.pk}/cancel/')

    def test_cancel_restores_stock(self):
        response = self.cancel(self.order)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['status'], OrderStatus.CANCELLED)
        self.coffee.refresh_from_db()
        self.assertEqual(self.coffee.stock, 3)

    def test_cancel_twice_restores_stock_once(self):
        self.cancel(self.order)

        response = self.cancel(self.order)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'This order can no longer be cancelled')
        self.coffee.refresh_from_db()
        self.assertEqual(self.coffee.stock, 3)

    def test_cannot_cancel_confirmed_order(self):
        self.order.status = OrderStatus.CONFIRMED
        self.order.save()

        response = self.cancel(self.order)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.coffee.refresh_from_db()
        self.assertEqual(self.coffee.stock, 1)

    def test_cannot_cancel_someone_elses_order(self):
        other = create_member(email='other@example.com')
        self.login_as(other)

        response = self.cancel(self.order)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, OrderStatus.PENDING)

    def test_unknown_order(self):
        response = self.client.post('/member/orders/999/cancel/')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Order not found')


class AdminOrderTest(APITestBase):
    def setUp(self):
        super().setUp()
        self.coffee = create_product('Coffee', stock=8)
        self.order = create_order(self.member, self.coffee, quantity=2)
        self.login_as(self.admin)

    def set_status(self, value):
        return self.client.post(
            f'/admin/cafeteria/orders/{self.order.pk}/status/', {'status': value}, format='json'
        )

    def test_full_lifecycle(self):
        for value in ('CONFIRMED', 'PREPARING', 'READY', 'DELIVERED'):
            response = self.set_status(value)
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(response.data['data']['status'], value)

    def test_unknown_order(self):
        response = self.client.post('/admin/cafeteria/orders/999/status/', {'status': 'CONFIRMED'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['message'], 'Order not found')

    def test_skipping_a_step_is_refused(self):
        response = self.set_status('READY')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Cannot change order status from PENDING to READY')

    def test_delivered_order_is_final(self):
        self.order.status = OrderStatus.DELIVERED
        self.order.save()

        response = self.set_status('CANCELLED')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_admin_cancel_restores_stock(self):
        response = self.set_status('CANCELLED')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.coffee.refresh_from_db()
        self.assertEqual(self.coffee.stock, 10)

    def test_invalid_status_value(self):
        response = self.set_status('LOST')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_filters(self):
        create_order(self.member, self.coffee, status=OrderStatus.DELIVERED, channel=OrderChannel.POS)

        response = self.client.get('/admin/cafeteria/orders/', {'status': 'pending'})
        self.assertEqual([o['id'] for o in self.results(response)], [self.order.pk])

        response = self.client.get('/admin/cafeteria/orders/', {'channel': 'pos'})
        self.assertEqual(len(self.results(response)), 1)
        self.assertEqual(self.results(response)[0]['channel'], OrderChannel.POS)

    def test_detail(self):
        response = self.client.get(f'/admin/cafeteria/orders/{self.order.pk}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['user_email'], self.member.email)
        self.assertEqual(Decimal(response.data['data']['items'][0]['line_total']), Decimal('3.00'))

    def test_member_cannot_manage_orders(self):
        self.login_as(self.member)

        response = self.set_status('CONFIRMED')

        self.assertEqual(response.status_code, status.HTTP_302_FOUND)
        self.order.refresh_from_db()
        self.assertEqual(self.order.status, OrderStatus.PENDING)
