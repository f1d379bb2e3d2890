"""
Sample SumUp payloads, shaped like the transaction history API answers.
"""
from unittest import mock


def transaction(code, amount, status='SUCCESSFUL', timestamp='2024-03-01T10:00:00Z', **extra):
    data = {
        'transaction_code': code,
        'amount': amount,
        'currency': 'EUR',
        'status': status,
        'timestamp': timestamp,
        'payment_type': 'ECOM',
        'type': 'PAYMENT',
    }
    data.update(extra)
    return data


SAMPLE_TRANSACTIONS = [
    transaction('TX1', 10.0, timestamp='2024-03-01T09:15:00Z'),
    transaction('TX2', 3.0, status='FAILED', timestamp='2024-03-01T11:00:00Z'),
    transaction('TX3', 5.5, timestamp='2024-03-02T16:45:00Z'),
    transaction('TX4', 8.0, status='PENDING', timestamp='2024-03-02T17:00:00Z'),
]


def json_response(payload, status_code=200, text=''):
    response = mock.Mock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.text = text
    response.json.return_value = payload
    return response
