"""
Thin client for the SumUp REST API.

Documentation: https://developer.sumup.com/api

Every call is a single authenticated GET; a transport failure or a non-2xx
answer raises PaymentProviderError. Nothing is retried.
"""
import logging

import requests
from django.conf import settings

from .exceptions import PaymentProviderError

logger = logging.getLogger(__name__)

DEFAULT_TRANSACTION_LIMIT = 1000


class SumUpClient:
    def __init__(self, api_key, merchant_code, base_url='https://api.sumup.com', timeout=15):
        self.api_key = api_key or ''
        self.merchant_code = merchant_code or ''
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    @classmethod
    def from_settings(cls):
        return cls(
            api_key=settings.SUMUP_API_KEY,
            merchant_code=settings.SUMUP_MERCHANT_CODE,
            base_url=settings.SUMUP_API_URL,
            timeout=settings.SUMUP_TIMEOUT_SECONDS,
        )

    @property
    def is_configured(self):
        return bool(self.api_key and self.merchant_code)

    def _get(self, endpoint, params=None):
        if not self.api_key:
            raise PaymentProviderError('SUMUP_API_KEY is not configured')

        url = f'{self.base_url}{endpoint}'
        try:
            response = requests.get(
                url,
                params=params,
                headers={
                    'Authorization': f'Bearer {self.api_key}',
                    'Content-Type': 'application/json',
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("SumUp request to %s failed: %s", endpoint, e)
            raise PaymentProviderError(f'SumUp API unreachable: {e}')

        if not response.ok:
            logger.error("SumUp API error %s on %s: %s", response.status_code, endpoint, response.text)
            raise PaymentProviderError(f'SumUp API error: {response.status_code} - {response.text}')

        return response.json()

    def get_merchant_profile(self):
        return self._get('/v0.1/me')

    def get_transactions(self, start_date=None, end_date=None, statuses=None,
                         payment_types=None, limit=None):
        """
        Transaction history of the merchant.

        ``start_date``/``end_date`` are ``date`` objects or ISO strings
        (YYYY-MM-DD); they cover whole days in UTC.
        """
        params = []
        if start_date:
            params.append(('oldest_time', f'{start_date}T00:00:00Z'))
        if end_date:
            params.append(('newest_time', f'{end_date}T23:59:59Z'))
        for status in statuses or ():
            params.append(('statuses', status))
        for payment_type in payment_types or ():
            params.append(('payment_types', payment_type))
        params.append(('limit', str(limit or DEFAULT_TRANSACTION_LIMIT)))

        payload = self._get(f'/v2.1/merchants/{self.merchant_code}/transactions/history', params)
        return payload.get('items') or []

    def get_payouts(self, start_date, end_date, limit=None):
        """Payouts between two dates; both bounds are required by the API."""
        if not start_date or not end_date:
            return []

        params = [
            ('start_date', str(start_date)),
            ('end_date', str(end_date)),
            ('format', 'json'),
        ]
        if limit:
            params.append(('limit', str(limit)))

        return self._get(f'/v1.0/merchants/{self.merchant_code}/payouts', params) or []
